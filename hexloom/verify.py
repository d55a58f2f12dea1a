import logging
import re
from typing import Optional, Sequence, Tuple

from .reference import reference_hex_digits


logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]")


def verify_hex_digits(start: int, digits: Sequence[int], samples: Optional[int] = None) -> Tuple[bool, str]:
    count = len(digits) if samples is None else min(int(samples), len(digits))
    if count <= 0:
        return True, "verification skipped"
    expected = reference_hex_digits(start, count)
    actual = [int(d) for d in digits[:count]]
    if expected != actual:
        for i, (e, a) in enumerate(zip(expected, actual)):
            if e != a:
                logger.warning("mismatch at position %d: expected %x, got %x", int(start) + i, e, a)
                break
        return False, "mpmath reference"
    return True, "mpmath reference"


def read_hex_digits_from_text(path: str, samples: int) -> str:
    samples = int(samples)
    if samples <= 0:
        return ""
    seen_dot = False
    out = []
    with open(path, "rb") as f:
        while len(out) < samples:
            chunk = f.read(8192)
            if not chunk:
                break
            text = chunk.decode("utf-8", errors="ignore")
            for ch in text:
                if not seen_dot:
                    if ch == ".":
                        seen_dot = True
                    continue
                if _HEX_RE.match(ch):
                    out.append(ch)
                    if len(out) >= samples:
                        break
    return "".join(out)
