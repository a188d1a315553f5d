"""Zeroed heap buffers that can be carved up like arenas."""

from dataclasses import dataclass


@dataclass
class SizedPtr:
    """A view on a block of memory plus an offset marking how much has been claimed."""

    memory: memoryview
    offset: int = 0

    @property
    def size(self):
        return len(self.memory)

    @property
    def remaining(self):
        return self.size - self.offset

    def claim(self, size):
        """Carve ``size`` bytes off the unclaimed part and return them as a new SizedPtr.

        The returned block shares memory with this one. Raises MemoryError when
        not enough space is left.
        """
        if size < 0:
            raise ValueError("claim size must not be negative")
        new_offset = self.offset + size
        if new_offset > self.size:
            raise MemoryError(
                f"cannot claim {size} bytes: only {self.remaining} of {self.size} left"
            )
        block = SizedPtr(self.memory[self.offset:new_offset])
        self.offset = new_offset
        return block

    def zero(self):
        """Fill the whole block with zero bytes."""
        self.memory[:] = bytes(self.size)

    def __bytes__(self):
        return self.memory.tobytes()


def heap_alloc(size):
    """Return a new zero-filled block of ``size`` bytes."""
    if size < 0:
        raise ValueError("allocation size must not be negative")
    return SizedPtr(memoryview(bytearray(size)))


def heap_realloc(ptr, new_size):
    """Return a block of ``new_size`` bytes holding the start of ``ptr``'s contents."""
    if ptr is None:
        raise ValueError("cannot reallocate a missing block")
    if new_size < 0:
        raise ValueError("allocation size must not be negative")
    buffer = bytearray(new_size)
    kept = min(new_size, ptr.size)
    buffer[:kept] = ptr.memory[:kept]
    return SizedPtr(memoryview(buffer))