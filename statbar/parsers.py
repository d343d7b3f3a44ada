# statbar/parsers.py
from __future__ import annotations

import re
from typing import List, Sequence

from .models import Battery

REFRESH_RATE_CEILING_HZ = 240

NOISE_PREFIXES = ("lo", "awdl", "utun", "llw", "bridge", "gif", "stf", "xhc", "anpi", "ap")

_DIGITS_RE = re.compile(r"[0-9]+")

# "59.94Hz", "60 Hz", "120HZ"
_HZ_RE = re.compile(r"(?P<whole>[0-9]+)(?:\.[0-9]+)?\s*hz", re.IGNORECASE)

# " -InternalBattery-0 (id=1234)\t85%; charging; 0:45 remaining present: true"
_PMSET_RE = re.compile(
    r"^\s*-(?P<name>\S+)"
    r".*?(?P<percent>[0-9]+(?:\.[0-9]+)?)%;"
    r"\s*(?P<status>[^;]+?)\s*;"
    r"\s*(?:(?P<time>[0-9]+:[0-9]{2})\s+remaining)?"
    r".*?present:\s*(?P<present>\w+)"
)


def parse_int(text: str) -> int:
    """Whole part of the first number embedded in text; 0 when there is none.

    Anything before the first digit is skipped, a minus sign included, and a
    fractional part is dropped rather than rounded: "@59.94Hz" -> 59, "-5" -> 5.
    """
    m = _DIGITS_RE.search(text)
    if not m:
        return 0
    return int(m.group())


def parse_refresh_rate(text: str, max_hz: int = REFRESH_RATE_CEILING_HZ) -> str:
    """Highest plausible "<n>Hz" value mentioned anywhere in text, as "<n>Hz".

    Candidates outside (0, max_hz] are treated as noise. Returns "" when nothing
    usable is found.
    """
    candidates = []
    for m in _HZ_RE.finditer(text):
        hz = int(m.group("whole"))
        if 0 < hz <= max_hz:
            candidates.append(hz)
    if not candidates:
        return ""
    return f"{max(candidates)}Hz"


def is_noise_interface(name: str, prefixes: Sequence[str] = NOISE_PREFIXES) -> bool:
    """True for loopback, tunnel and other virtual interfaces (lo0, utun3, awdl0, ...)."""
    if not name:
        return False
    return name.lower().startswith(tuple(p.lower() for p in prefixes))


def parse_pmset(raw: str, health: str, cycle_count: int, capacity: int) -> List[Battery]:
    """Parse `pmset -g batt` output into one Battery per battery line.

    health, cycle_count and capacity don't appear in pmset output; callers read them
    elsewhere (system_profiler, ioreg) and they are copied into every record.
    """
    batteries: List[Battery] = []
    for line in raw.splitlines():
        m = _PMSET_RE.match(line)
        if not m:
            continue
        batteries.append(Battery(
            percent=float(m.group("percent")),
            status=m.group("status"),
            time_left=m.group("time") or "",
            health=health,
            cycle_count=cycle_count,
            capacity=capacity,
        ))
    return batteries
