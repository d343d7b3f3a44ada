# statbar/metrics/display_macos.py
from __future__ import annotations

from typing import Any, Dict

from ..config import CollectorConfig, DisplayConfig
from ..parsers import parse_refresh_rate
from .commands import is_macos, run_command


def read_display(cfg: CollectorConfig, display: DisplayConfig) -> Dict[str, Any]:
    """Refresh rate of the fastest attached display, from system_profiler."""
    if not is_macos():
        return {"available": False}
    out = run_command(["system_profiler", "SPDisplaysDataType"], timeout=cfg.command_timeout)
    rate = parse_refresh_rate(out, max_hz=display.refresh_ceiling_hz)
    if not rate:
        return {"available": False}
    return {"available": True, "refresh_rate": rate}
