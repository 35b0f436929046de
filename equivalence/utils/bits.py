"""Fixed-width integer helpers for hash code arithmetic."""

import numpy as np

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_MASK32 = (1 << 32) - 1
_SIGN32 = 1 << 31


def wrap_int32(value: int) -> int:
    """
    Reduce an integer to a signed 32-bit value with two's complement wrapping.

    Args:
        value: Any Python integer

    Returns:
        Integer in ``[INT32_MIN, INT32_MAX]``
    """
    value &= _MASK32
    if value & _SIGN32:
        return value - (1 << 32)
    return value


def float32_bits(value: float) -> int:
    """
    Bit pattern of a value stored as an IEEE-754 single, read as a signed int32.

    Values outside the single-precision range saturate to infinity. Negative
    zero is folded into positive zero since the two compare equal.

    Args:
        value: A float (or numpy floating scalar)

    Returns:
        Signed 32-bit integer
    """
    if value == 0.0:
        value = 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        single = np.array([value], dtype=np.float32)
    return int(single.view(np.int32)[0])
