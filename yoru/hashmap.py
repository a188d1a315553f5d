"""An open-addressing hash map keyed by strings, with selectable collision handling."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from yoru.errors import panic, warn
from yoru.hashing import hash_djb2

INITIAL_BUCKET_COUNT = 16
LOAD_FACTOR = 0.75


class CollisionStrategy(IntEnum):
    """What a HashMap does when a new key lands on an occupied bucket."""

    PANIC = 0
    OVERWRITE = 1
    WARN_AND_OVERWRITE = 2
    WARN_AND_SKIP = 3
    SKIP = 4
    LINEAR_PROBING = 5
    QUADRATIC_PROBING = 6


DEFAULT_COLLISION_STRATEGY = CollisionStrategy.QUADRATIC_PROBING

_PROBING = (CollisionStrategy.LINEAR_PROBING, CollisionStrategy.QUADRATIC_PROBING)


@dataclass
class _Entry:
    __slots__ = ("key", "value")
    key: str
    value: Any


class HashMap:
    """A fixed-bucket hash map that doubles its bucket count as it fills.

    With a probing strategy keys are compared on lookup. With any other
    strategy a bucket holds at most one entry and a lookup returns whatever
    entry occupies the key's bucket.
    """

    def __init__(self, strategy=DEFAULT_COLLISION_STRATEGY, initial_bucket_count=0):
        if strategy is None:
            strategy = DEFAULT_COLLISION_STRATEGY
        self._strategy = CollisionStrategy(strategy)
        if initial_bucket_count < 0:
            raise ValueError("initial bucket count must not be negative")
        if initial_bucket_count == 0:
            initial_bucket_count = INITIAL_BUCKET_COUNT
        self._slots = [None] * initial_bucket_count
        self._count = 0

    @property
    def collision_strategy(self):
        return self._strategy

    @property
    def bucket_count(self):
        return len(self._slots)

    @property
    def count(self):
        return self._count

    def _probe(self, start):
        n = len(self._slots)
        index = start
        step = 1
        for _ in range(n):
            yield index
            if self._strategy is CollisionStrategy.LINEAR_PROBING:
                index = (index + 1) % n
            else:
                index = (index + step * step) % n
                step += 1

    def _rehash(self):
        old = self._slots
        self._slots = [None] * (2 * len(old))
        self._count = 0
        for entry in old:
            if entry is not None:
                self._store(entry.key, entry.value)

    def _store(self, key, value):
        slots = self._slots
        index = hash_djb2(key) % len(slots)
        current = slots[index]
        if current is None:
            slots[index] = _Entry(key, value)
            self._count += 1
            return
        if current.key == key:
            current.value = value
            return

        strategy = self._strategy
        if strategy in _PROBING:
            for probe in self._probe(index):
                entry = slots[probe]
                if entry is None:
                    slots[probe] = _Entry(key, value)
                    self._count += 1
                    return
                if entry.key == key:
                    entry.value = value
                    return
            # The probe sequence visited no free bucket: grow and try again.
            self._rehash()
            self._store(key, value)
        elif strategy is CollisionStrategy.PANIC:
            panic(f"HashMap collision detected for key {key} at index {index}")
        elif strategy is CollisionStrategy.OVERWRITE:
            slots[index] = _Entry(key, value)
        elif strategy is CollisionStrategy.WARN_AND_OVERWRITE:
            warn(f"HashMap collision detected for key {key} at index {index}, overwriting")
            slots[index] = _Entry(key, value)
        elif strategy is CollisionStrategy.WARN_AND_SKIP:
            warn(f"HashMap collision detected for key {key} at index {index}, skipping")
        # SKIP: leave the bucket as it is.

    def _find(self, key):
        slots = self._slots
        index = hash_djb2(key) % len(slots)
        if self._strategy in _PROBING:
            for probe in self._probe(index):
                entry = slots[probe]
                if entry is None:
                    return None
                if entry.key == key:
                    return entry
            return None
        return slots[index]

    def set(self, key, value):
        """Store ``value`` under ``key``, growing the table past the load factor."""
        if (self._count + 1) / len(self._slots) >= LOAD_FACTOR:
            self._rehash()
        self._store(key, value)

    def get(self, key):
        """Return the value found for ``key``, or None."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def __getitem__(self, key):
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __contains__(self, key):
        return self._find(key) is not None

    def __len__(self):
        return self._count

    def __iter__(self):
        for entry in self._slots:
            if entry is not None:
                yield entry.key

    def items(self):
        """Yield ``(key, value)`` pairs in bucket order."""
        for entry in self._slots:
            if entry is not None:
                yield entry.key, entry.value