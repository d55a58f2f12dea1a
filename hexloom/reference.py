"""Arbitrary-precision reference digits, used to cross-check the float BBP core."""

import math
from typing import List

from mpmath import mp

from .bbp import InvalidArgumentError
from .constants import REFERENCE_GUARD_BITS, SERIES_TERMS


def _prec_bits(n: int) -> int:
    n = int(n)
    if n < 1:
        return 128
    return max(128, int(math.log2(n + 1)) + 128)


def _series(j: int, n: int):
    s = mp.mpf(0)
    for k in range(n + 1):
        r = 8 * k + j
        s += mp.mpf(pow(16, n - k, r)) / r
        s = s - mp.floor(s)
    t = mp.mpf(0)
    k = n + 1
    pow16 = mp.mpf(1) / 16
    eps = mp.power(2, -mp.prec + 16)
    while True:
        r = 8 * k + j
        term = pow16 / r
        if term < eps:
            break
        t += term
        k += 1
        pow16 /= 16
    return (s + t) % 1


def reference_hex_digit(n: int) -> int:
    """Digit at position n, BBP evaluated in mpmath at n-dependent precision."""
    n = int(n)
    if n < 0:
        raise InvalidArgumentError("n", n)
    with mp.workprec(_prec_bits(n)):
        x = sum(weight * _series(m, n) for m, weight in SERIES_TERMS) % 1
        return int(mp.floor(16 * x))


def reference_hex_digits(start: int, count: int) -> List[int]:
    """Digits start .. start+count-1 taken from the expansion of mp.pi."""
    start = int(start)
    count = int(count)
    if start < 0:
        raise InvalidArgumentError("start", start)
    if count < 0:
        raise InvalidArgumentError("count", count)
    if count == 0:
        return []
    bits = 4 * (start + count)
    with mp.workprec(bits + REFERENCE_GUARD_BITS):
        scaled = int(mp.floor(mp.ldexp(mp.pi, bits)))
    h = format(scaled, "x")
    return [int(ch, 16) for ch in h[1 + start :]]
