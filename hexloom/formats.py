import json
from typing import Dict, Iterable, Tuple

from .constants import HEX_ALPHABET


FORMATS = ("txt", "json", "csv", "tsv", "ndjson", "bin")
BINARY_MODES = ("ascii", "packed")


def render_hex(digits: Iterable[int], upper: bool = False) -> str:
    out = []
    for d in digits:
        d = int(d)
        if not 0 <= d < 16:
            raise ValueError(f"digit out of range: {d}")
        out.append(HEX_ALPHABET[d])
    s = "".join(out)
    return s.upper() if upper else s


def display_value(hex_digits: str, start: int, label: bool = True) -> str:
    """Human-readable line, e.g. ``pi = 0x3.243f`` or ``pi[1000:] = 0x3.…49f1c``."""
    start = int(start)
    if start == 0:
        body = "0x3." + hex_digits
        name = "pi"
    else:
        body = "0x3.…" + hex_digits
        name = f"pi[{start}:]"
    return f"{name} = {body}" if label else body


def _packed_nibbles(s: str) -> bytes:
    raw = [int(ch, 16) for ch in s.lower() if ch in HEX_ALPHABET]
    out = bytearray()
    i = 0
    while i < len(raw):
        hi = raw[i]
        lo = raw[i + 1] if i + 1 < len(raw) else 0
        out.append((hi << 4) | lo)
        i += 2
    return bytes(out)


def serialize_payload(value: str, fmt: str, meta: Dict, binary_mode: str = "ascii") -> Tuple[bytes, str]:
    fmt = fmt.lower().strip()
    if fmt == "txt":
        return value.encode("utf-8"), "text/plain"
    if fmt == "json":
        payload = dict(meta)
        payload["value"] = value
        return (
            json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8"),
            "application/json",
        )
    if fmt in {"csv", "tsv"}:
        sep = "," if fmt == "csv" else "\t"
        header = ["start", "count", "value"]
        row = [str(meta.get("start")), str(meta.get("count")), value]
        out = sep.join(header) + "\n" + sep.join(row) + "\n"
        mime = "text/csv" if fmt == "csv" else "text/tab-separated-values"
        return out.encode("utf-8"), mime
    if fmt == "ndjson":
        payload = dict(meta)
        payload["value"] = value
        out = json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"
        return out.encode("utf-8"), "application/x-ndjson"
    if fmt == "bin":
        mode = binary_mode.lower().strip()
        if mode == "packed":
            return _packed_nibbles(value), "application/octet-stream"
        if mode == "ascii":
            return value.encode("ascii", errors="ignore"), "application/octet-stream"
        raise ValueError("unsupported binary mode")
    raise ValueError("unsupported format")
