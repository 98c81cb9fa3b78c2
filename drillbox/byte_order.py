"""Reverse the byte order of fixed-width integers."""


def change_byte_order(value: int, size: int, signed: bool = False) -> int:
    """Return ``value`` with its ``size`` bytes reversed.

    Raises OverflowError if ``value`` does not fit in ``size`` bytes.
    """
    if size < 1:
        raise ValueError("size must be positive")
    return int.from_bytes(value.to_bytes(size, "little", signed=signed), "big", signed=signed)