"""Small integer helpers shared by the puzzle solutions."""


def abs_int(n: int) -> int:
    """Return the absolute value of an integer."""
    return -n if n < 0 else n


def pow_int(n: int, m: int) -> int:
    """Raise ``n`` to the power ``m``.

    An exponent of zero gives 1; any other exponent below 2 gives ``n`` itself.
    """
    if m == 0:
        return 1
    if m < 2:
        return n
    return n**m