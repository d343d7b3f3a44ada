# statbar/models.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Battery:
    """One power cell as reported by a single `pmset -g batt` sample."""
    percent: float
    status: str
    time_left: str = ""  # H:MM, empty when not reported
    health: str = ""
    cycle_count: int = 0
    capacity: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
