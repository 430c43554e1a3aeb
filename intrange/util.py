"""Domain constants and helpers for intrange.

Ranges are bounded by the 32-bit signed integer domain. These constants
are used throughout the API for the canonical EMPTY/ALL encodings and for
bounds validation.
"""

# 32-bit signed domain (inclusive)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Polynomial hash parameters
HASH_SEED = 5
HASH_MULTIPLIER = 17


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to 32-bit two's complement."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value
