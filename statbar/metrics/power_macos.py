# statbar/metrics/power_macos.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from ..config import CollectorConfig
from ..parsers import parse_int, parse_pmset
from .commands import is_macos, run_command

log = logging.getLogger(__name__)


def battery_details(profiler_json: str) -> Tuple[str, int, int]:
    """(health, cycle count, max capacity %) from `system_profiler SPPowerDataType -json`.

    pmset doesn't report these. Missing or undecodable data gives ("", 0, 0).
    """
    try:
        data = json.loads(profiler_json) if profiler_json.strip() else {}
    except json.JSONDecodeError as e:
        log.debug("SPPowerDataType output is not JSON: %s", e)
        data = {}

    entries = data.get("SPPowerDataType", []) if isinstance(data, dict) else []
    if isinstance(entries, dict):
        entries = [entries]

    # Several entries (battery, charger, ...); only the battery one has health info
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        info = entry.get("sppower_battery_health_info")
        if not isinstance(info, dict):
            continue
        health = str(info.get("sppower_battery_health") or "")
        cycles = parse_int(str(info.get("sppower_battery_cycle_count") or ""))
        capacity = parse_int(str(info.get("sppower_battery_health_maximum_capacity") or ""))
        return health, cycles, capacity
    return "", 0, 0


def read_battery(cfg: CollectorConfig) -> Dict[str, Any]:
    """Battery records on macOS via pmset; unavailable elsewhere or without a battery."""
    if not is_macos():
        return {"available": False}
    out = run_command(["pmset", "-g", "batt"], timeout=cfg.command_timeout)
    if not out:
        return {"available": False}
    if not parse_pmset(out, "", 0, 0):
        # no battery line, so system_profiler (slow) has nothing to add
        return {"available": False, "batteries": []}
    profiler = run_command(["system_profiler", "SPPowerDataType", "-json"], timeout=cfg.command_timeout)
    health, cycles, capacity = battery_details(profiler)
    batteries = parse_pmset(out, health, cycles, capacity)
    return {"available": bool(batteries), "batteries": batteries}
