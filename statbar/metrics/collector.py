# statbar/metrics/collector.py
from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import psutil

from ..config import Config, DisplayConfig, get_config
from ..format import format_rate, human_bytes_short, shorten
from .display_macos import read_display
from .network import compute_rates, read_counters
from .power_macos import read_battery

log = logging.getLogger(__name__)


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class StatusService:
    """Takes status snapshots; keeps the previous network sample so rates can be computed."""

    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or get_config()
        self._last_counters: Optional[Dict[str, Dict[str, int]]] = None
        self._last_sample: float = 0.0
        # guards the network baseline; snapshots may come from several API threads
        self._lock = threading.Lock()

    # ---------- Core collection ----------

    def _network_rates(self) -> Dict[str, Dict[str, float]]:
        prefixes = self.cfg.display.noise_prefixes
        with self._lock:
            first = self._last_counters is None
            if first:
                # nothing to diff against yet, take a baseline
                self._last_counters = read_counters(prefixes)
                self._last_sample = time.monotonic()
        if first:
            time.sleep(self.cfg.collector.sample_interval)
        with self._lock:
            current = read_counters(prefixes)
            now = time.monotonic()
            rates = compute_rates(self._last_counters, current, now - self._last_sample)
            self._last_counters, self._last_sample = current, now
        return rates

    def snapshot(self) -> Dict[str, Any]:
        collector = self.cfg.collector
        vm = psutil.virtual_memory()
        disk = psutil.disk_usage("/")

        snap: Dict[str, Any] = {
            "ts": utcnow_iso(),
            "mem_used_bytes": int(vm.used),
            "mem_total_bytes": int(vm.total),
            "disk_used_bytes": int(disk.used),
            "disk_total_bytes": int(disk.total),
            "net": {},
            "power": {"available": False},
            "display": {"available": False},
        }

        if collector.enable_network:
            snap["net"] = self._network_rates()

        if collector.enable_battery:
            p = read_battery(collector)
            if p.get("available"):
                snap["power"] = {"available": True, "batteries": [b.to_dict() for b in p["batteries"]]}

        if collector.enable_display:
            d = read_display(collector, self.cfg.display)
            if d.get("available"):
                snap["display"] = d

        log.debug("snapshot: %d interfaces, power=%s, display=%s",
                  len(snap["net"]), snap["power"]["available"], snap["display"]["available"])
        return snap

    def render(self, snap: Dict[str, Any]) -> Dict[str, Any]:
        return render_status(snap, self.cfg.display)


def render_battery(b: Dict[str, Any]) -> str:
    parts = [f"{b['percent']:.0f}%", b["status"]]
    if b.get("time_left"):
        parts.append(b["time_left"])
    return " ".join(parts)


def render_status(snap: Dict[str, Any], display: DisplayConfig) -> Dict[str, Any]:
    """Turn a raw snapshot into the short strings a status bar shows."""
    network: List[Dict[str, str]] = []
    for name, r in sorted(snap.get("net", {}).items()):
        network.append({
            "interface": shorten(name, display.name_max_len),
            "rx": format_rate(r["rx_mb_s"]),
            "tx": format_rate(r["tx_mb_s"]),
        })

    power = snap.get("power", {})
    return {
        "memory": f"{human_bytes_short(snap['mem_used_bytes'])}/{human_bytes_short(snap['mem_total_bytes'])}",
        "disk": f"{human_bytes_short(snap['disk_used_bytes'])}/{human_bytes_short(snap['disk_total_bytes'])}",
        "network": network,
        "battery": [render_battery(b) for b in power.get("batteries", [])],
        "refresh_rate": snap.get("display", {}).get("refresh_rate", ""),
    }


# Global service singleton
_status_service: Optional[StatusService] = None


def get_status_service() -> StatusService:
    global _status_service
    if _status_service is None:
        _status_service = StatusService()
    return _status_service
