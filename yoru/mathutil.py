"""Basic arithmetic helpers."""


def modulo(a, b):
    """Return ``a`` reduced into ``[0, b)``; 0 when ``a`` is 0 or ``b`` is not positive."""
    if a == 0 or b <= 0:
        return 0
    return a % b