# statbar/format.py
from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_EVEN

ELLIPSIS = "…"

# wide enough for any finite float
_DECIMAL_CTX = Context(prec=400)

# (threshold, suffix); thresholds are checked largest first
_BYTE_TIERS = [
    (1 << 40, "T"),
    (1 << 30, "G"),
    (1 << 20, "M"),
    (1 << 10, "K"),
]


def _fixed(value: float, places: int) -> str:
    # Exact binary value, banker's rounding at the shown precision.
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN, context=_DECIMAL_CTX))


def format_rate(mb_per_sec: float) -> str:
    """Format a throughput in MB/s with precision that shrinks as the value grows.

    < 0.01 shows "0", [0.01, 1) two decimals, [1, 10) one decimal, >= 10 none.
    The tier is picked from the raw value before rounding.
    """
    if mb_per_sec < 0.01:
        return "0 MB/s"
    if mb_per_sec < 1:
        return f"{_fixed(mb_per_sec, 2)} MB/s"
    if mb_per_sec < 10:
        return f"{_fixed(mb_per_sec, 1)} MB/s"
    return f"{_fixed(mb_per_sec, 0)} MB/s"


def shorten(text: str, max_len: int) -> str:
    """Truncate to max_len characters, the last one being an ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 1] + ELLIPSIS


def human_bytes_short(count: int) -> str:
    """Binary-scaled byte count like "512", "2K", "1024K", "3G".

    The unit is chosen from the raw count, so a value just under a boundary keeps
    the smaller unit even when it rounds up to 1024 of it.
    """
    for threshold, suffix in _BYTE_TIERS:
        if count >= threshold:
            whole, rest = divmod(count, threshold)
            # half away from zero
            if rest * 2 >= threshold:
                whole += 1
            return f"{whole}{suffix}"
    return str(count)
