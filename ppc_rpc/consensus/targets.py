# Standard Bitcoin-style diff1 target for difficulty calculations
DIFF1_TARGET = int(
    "00000000ffff0000000000000000000000000000000000000000000000000000", 16
)


def bits_to_target(bits: int) -> int:
    """Convert compact bits representation to full target value."""
    exp = bits >> 24
    mant = bits & 0x7FFFFF
    if exp <= 3:
        target_int = mant >> (8 * (3 - exp))
    else:
        target_int = mant << (8 * (exp - 3))
    return target_int


def target_to_diff1(target_int: int) -> float:
    """Convert a target value to difficulty (diff1-based)."""
    if target_int == 0:
        return float("inf")
    return DIFF1_TARGET / target_int
