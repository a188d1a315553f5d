"""Unrecoverable errors and warnings."""

import sys


class PanicError(RuntimeError):
    """Raised when the library hits a state it cannot recover from."""


def panic(message):
    """Raise a PanicError carrying ``message``."""
    raise PanicError(message)


def warn(message):
    """Write a warning line for ``message`` to standard error."""
    print(f"[YORU_WARN] {message}", file=sys.stderr)