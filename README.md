# yoru

A small general-purpose toolkit of plain-Python building blocks:

- `yoru.linkedlist.LinkedList`: a circular doubly linked list. It has indexed `get`, `set`, `insert` and `remove`, along with `append`, `prepend`, `clear`, `len()` and iteration. A bad index raises `IndexError`.
- `yoru.hashmap.HashMap`: an open-addressing hash map keyed by strings. It hashes with djb2 and doubles its bucket count once the load factor reaches 0.75. `CollisionStrategy` chooses how it handles a collision: `PANIC`, `OVERWRITE`, `WARN_AND_OVERWRITE`, `WARN_AND_SKIP`, `SKIP`, `LINEAR_PROBING` or `QUADRATIC_PROBING`. The default is `QUADRATIC_PROBING`. `get` returns `None` for a missing key. `map[key]` raises `KeyError` for a missing key.
- `yoru.stringbuilder.StringBuilder`: builds text by inserting, prepending and appending characters (`*c`), strings (`*s`), signed and unsigned 64-bit integers (`*i`, `*u`), fixed-point floats (`*f`, with precision capped at 20) and printf-style formatted text (`*fmt`).
- `yoru.stringview.String`: an immutable string value with `length` and `concat`. The `+` operator also concatenates two of them.
- `yoru.futures.Future`: runs `callback(args)` on a background thread. `result()` waits for the thread and returns the value, and raises again any exception the callback raised. `cancel()` makes the future finish with no result. It cannot stop a callback that is already running.
- `yoru.memory`: `heap_alloc(size)` returns a zero-filled `SizedPtr`. `heap_realloc(ptr, new_size)` returns a resized copy. `SizedPtr.claim(size)` carves blocks off a buffer the way an arena does, and raises `MemoryError` when the buffer has no space left.
- `yoru.fileio`: `read_file` and `read_file_exact` return a `FileContext`. `write_file` and `write_file_exact` take a `FileContext` and return the number of bytes written. Failures raise `FileReadError` or `FileWriteError`.
- `yoru.errors`: `panic(message)` raises `PanicError`. `warn(message)` prints a warning to standard error.
- `yoru.mathutil.modulo` and `yoru.hashing.hash_djb2`.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Examples

```python
from yoru.hashmap import CollisionStrategy, HashMap

values = HashMap(CollisionStrategy.QUADRATIC_PROBING, 2)
values.set("name", "ruby")
values.set("age", 21)
print(values.get("name"), values["age"])   # ruby 21
print("email" in values)                    # False
```

```python
from yoru.stringbuilder import StringBuilder

sb = StringBuilder()
sb.appends("Tonight's the night...")
sb.appendc(" ")
sb.appendi(69420)
sb.appendc("!")
sb.prepends("Dex says: ")
sb.prependc(">")
print(sb.to_string())   # >Dex says: Tonight's the night... 69420!
```

```python
from yoru.linkedlist import LinkedList

items = LinkedList()
for i in range(5):
    items.append(i)
items.insert(3, 80085)
items.remove(0)
print(list(items))      # [1, 2, 80085, 3, 4]
```

```python
from yoru.futures import Future

future = Future(lambda n: n * 2, 21)
print(future.result())  # 42
```

```python
from yoru.memory import heap_alloc

arena = heap_alloc(80)
first = arena.claim(32)
second = arena.claim(20)
print(arena.remaining)  # 28
```

Claiming more than the arena has left raises `MemoryError`.

## What it does not include

The package does not fill text templates from a map, and it has no prefix tree. It has no growable array type beyond Python's own `list`. It has no command-line program.

## Running the tests

```
pytest
```