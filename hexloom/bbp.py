import logging
import math
from typing import List

from .constants import DIGITS_PER_SUM, EPSILON, SERIES_TERMS
from .formats import render_hex


logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """A negative position or count was passed in."""

    def __init__(self, param: str, value=None):
        self.param = param
        self.value = value
        super().__init__(f"{param} must be >= 0")


def modular_power(p: int, m: int) -> int:
    """Return 16**p mod m by left-to-right binary exponentiation.

    Intermediate products never exceed (m - 1)**2, and Python integers are
    unbounded, so there is no overflow ceiling on p or m.
    """
    power = 1
    while power * 2 <= p:
        power *= 2
    result = 1 % m
    while power > 0:
        if p >= power:
            result = (result * 16) % m
            p -= power
        power //= 2
        if power > 0:
            result = (result * result) % m
    return result


def series_sum(m: int, n: int, eps: float = EPSILON) -> float:
    """Fractional-relevant value of sum_k 16**(n-k) / (8k+m).

    Terms with a non-negative exponent go through modular_power and the
    running sum keeps only its fractional part. Terms with a negative
    exponent are plain floats, summed until one drops below eps.
    """
    total = 0.0
    d = m
    power = n
    while power >= 0:
        total += modular_power(power, d) / d
        total -= math.floor(total)
        power -= 1
        d += 8
    while True:
        term = 16.0 ** power / d
        if term < eps:
            break
        total += term
        power -= 1
        d += 8
    return total


def _weighted_sum(n: int) -> float:
    return sum(weight * series_sum(m, n) for m, weight in SERIES_TERMS)


def get_digits(start: int, count: int) -> List[int]:
    """Hex digits of pi at fractional positions start .. start+count-1.

    Position 0 is the first digit after the point (pi = 3.243F6A88...).
    """
    start = int(start)
    count = int(count)
    if start < 0:
        raise InvalidArgumentError("start", start)
    if count < 0:
        raise InvalidArgumentError("count", count)
    digits = []
    cursor = start
    acc = 0.0
    for i in range(count):
        if i % DIGITS_PER_SUM == 0:
            acc = _weighted_sum(cursor)
            logger.debug("block at %d: sum %.17g", cursor, acc)
            cursor += DIGITS_PER_SUM
        acc = 16 * (acc - math.floor(acc))
        digits.append(int(acc))
    return digits


def pi_hex_digits(start: int, count: int, upper: bool = True) -> str:
    return render_hex(get_digits(start, count), upper=upper)
