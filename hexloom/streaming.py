from typing import Iterable, Iterator

from .bbp import InvalidArgumentError, get_digits
from .constants import DIGITS_PER_SUM, HEX_ALPHABET


def iter_hex_digits(start: int, count: int) -> Iterator[int]:
    # One block per call keeps the same boundaries as get_digits(start, count).
    start = int(start)
    count = int(count)
    if start < 0:
        raise InvalidArgumentError("start", start)
    if count < 0:
        raise InvalidArgumentError("count", count)
    for offset in range(0, count, DIGITS_PER_SUM):
        yield from get_digits(start + offset, min(DIGITS_PER_SUM, count - offset))


def iter_hex_chunks(start: int, count: int, chunk_size: int, upper: bool = False) -> Iterator[str]:
    chunk_size = int(chunk_size)
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    alphabet = HEX_ALPHABET.upper() if upper else HEX_ALPHABET
    buf = []
    for d in iter_hex_digits(start, count):
        buf.append(alphabet[d])
        if len(buf) >= chunk_size:
            yield "".join(buf)
            buf = []
    if buf:
        yield "".join(buf)


def collect_prefix(chunks: Iterable[str], count: int) -> str:
    out = []
    have = 0
    for chunk in chunks:
        need = int(count) - have
        if need <= 0:
            break
        piece = chunk[:need]
        out.append(piece)
        have += len(piece)
    return "".join(out)
