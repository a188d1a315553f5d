"""String hashing."""

_MASK64 = (1 << 64) - 1


def hash_djb2(text):
    """Return the 64-bit djb2 hash of ``text`` (str is hashed as UTF-8).

    Bytes are taken as signed chars, so bytes above 127 count as negative.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = 5381
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + value + signed) & _MASK64
    return value