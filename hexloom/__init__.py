__all__ = [
    "InvalidArgumentError",
    "get_digits",
    "modular_power",
    "series_sum",
    "pi_hex_digits",
    "reference_hex_digit",
    "reference_hex_digits",
    "iter_hex_digits",
    "iter_hex_chunks",
    "render_hex",
    "serialize_payload",
    "verify_hex_digits",
]

from .bbp import InvalidArgumentError, get_digits, modular_power, pi_hex_digits, series_sum
from .formats import render_hex, serialize_payload
from .reference import reference_hex_digit, reference_hex_digits
from .streaming import iter_hex_chunks, iter_hex_digits
from .verify import verify_hex_digits
