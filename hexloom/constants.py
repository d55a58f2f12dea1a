import sys


# The four-term accumulator is rebuilt every DIGITS_PER_SUM digits; a double
# holds roughly that many trustworthy hex digits of the fractional part.
DIGITS_PER_SUM = 8

# Tail terms below this are dropped. Tied to IEEE double precision.
EPSILON = 1e-17

# (m, weight) pairs of pi = sum 16^-k (4/(8k+1) - 2/(8k+4) - 1/(8k+5) - 1/(8k+6))
SERIES_TERMS = ((1, 4), (4, -2), (5, -1), (6, -1))

HEX_ALPHABET = "0123456789abcdef"

REFERENCE_GUARD_BITS = 64


def epsilon_for(mant_dig: int = sys.float_info.mant_dig) -> float:
    """Negligibility threshold scaled to a float type with ``mant_dig`` bits."""
    mant_dig = int(mant_dig)
    if mant_dig < 1:
        raise ValueError("mant_dig must be >= 1")
    return EPSILON * 2.0 ** (sys.float_info.mant_dig - mant_dig)
