"""Widening multiplication of 32-bit integers."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def multiply(a: int, b: int) -> int:
    """Multiply two 32-bit signed integers without overflow."""
    for operand in (a, b):
        if not _INT32_MIN <= operand <= _INT32_MAX:
            raise OverflowError(f"{operand} is not a 32-bit signed integer")
    return a * b