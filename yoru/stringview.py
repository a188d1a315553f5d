"""An immutable string value with a known length."""

from dataclasses import dataclass


@dataclass(frozen=True)
class String:
    """Immutable text with its length."""

    text: str

    @property
    def length(self):
        return len(self.text)

    def concat(self, other):
        """Return a new String holding this text followed by ``other``'s."""
        if not isinstance(other, String):
            raise TypeError(f"cannot concatenate String with {type(other).__name__}")
        return String(self.text + other.text)

    def __add__(self, other):
        if not isinstance(other, String):
            return NotImplemented
        return self.concat(other)

    def __len__(self):
        return len(self.text)

    def __str__(self):
        return self.text