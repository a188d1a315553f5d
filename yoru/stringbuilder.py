"""A mutable character buffer that grows at either end or in the middle."""

import operator

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1
_MAX_PRECISION = 20


class StringBuilder:
    """Builds a string piece by piece; positions count characters."""

    def __init__(self, text=""):
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        self._chars = list(text)

    def _position(self, index):
        index = operator.index(index)
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"string builder index {index} out of range")
        return index

    def insertc(self, index, ch):
        """Insert the single character ``ch`` before position ``index``."""
        if not isinstance(ch, str):
            raise TypeError(f"expected a character, got {type(ch).__name__}")
        if len(ch) != 1:
            raise ValueError(f"expected exactly one character, got {len(ch)}")
        self._chars.insert(self._position(index), ch)

    def inserts(self, index, text):
        """Insert ``text`` before position ``index``."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        index = self._position(index)
        self._chars[index:index] = text

    def inserti(self, index, value):
        """Insert the decimal form of the signed 64-bit integer ``value``."""
        value = operator.index(value)
        if not _I64_MIN <= value <= _I64_MAX:
            raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
        self.inserts(index, str(value))

    def insertu(self, index, value):
        """Insert the decimal form of the unsigned 64-bit integer ``value``."""
        value = operator.index(value)
        if not 0 <= value <= _U64_MAX:
            raise OverflowError(f"{value} does not fit in an unsigned 64-bit integer")
        self.inserts(index, str(value))

    def insertf(self, index, value, precision):
        """Insert ``value`` in fixed-point form; precision is capped at 20 digits."""
        precision = operator.index(precision)
        if precision < 0:
            raise ValueError("precision must not be negative")
        precision = min(precision, _MAX_PRECISION)
        self.inserts(index, f"{float(value):.{precision}f}")

    def insertfmt(self, index, fmt, *args):
        """Insert ``fmt`` formatted printf-style with ``args``."""
        self.inserts(index, fmt % args)

    def prependc(self, ch):
        """Add the character ``ch`` at the front."""
        self.insertc(0, ch)

    def prepends(self, text):
        """Add ``text`` at the front."""
        self.inserts(0, text)

    def prependi(self, value):
        """Add a signed integer at the front."""
        self.inserti(0, value)

    def prependu(self, value):
        """Add an unsigned integer at the front."""
        self.insertu(0, value)

    def prependf(self, value, precision):
        """Add a fixed-point number at the front."""
        self.insertf(0, value, precision)

    def prependfmt(self, fmt, *args):
        """Add formatted text at the front."""
        self.insertfmt(0, fmt, *args)

    def appendc(self, ch):
        """Add the character ``ch`` at the end."""
        self.insertc(len(self._chars), ch)

    def appends(self, text):
        """Add ``text`` at the end."""
        self.inserts(len(self._chars), text)

    def appendi(self, value):
        """Add a signed integer at the end."""
        self.inserti(len(self._chars), value)

    def appendu(self, value):
        """Add an unsigned integer at the end."""
        self.insertu(len(self._chars), value)

    def appendf(self, value, precision):
        """Add a fixed-point number at the end."""
        self.insertf(len(self._chars), value, precision)

    def appendfmt(self, fmt, *args):
        """Add formatted text at the end."""
        self.insertfmt(len(self._chars), fmt, *args)

    def __len__(self):
        return len(self._chars)

    def clear(self):
        """Remove every character."""
        self._chars.clear()

    def to_string(self):
        """Return the characters built so far as a str."""
        return "".join(self._chars)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"StringBuilder({self.to_string()!r})"