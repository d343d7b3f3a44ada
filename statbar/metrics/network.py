# statbar/metrics/network.py
from __future__ import annotations

from typing import Dict, Optional, Sequence

import psutil

from ..parsers import NOISE_PREFIXES, is_noise_interface

MB = 1024 * 1024


def read_counters(prefixes: Sequence[str] = NOISE_PREFIXES) -> Dict[str, Dict[str, int]]:
    """Byte counters per user-facing interface; loopback and tunnels are skipped."""
    counters: Dict[str, Dict[str, int]] = {}
    for name, c in psutil.net_io_counters(pernic=True).items():
        if is_noise_interface(name, prefixes):
            continue
        counters[name] = {"rx_bytes": int(c.bytes_recv), "tx_bytes": int(c.bytes_sent)}
    return counters


def compute_rates(
    previous: Dict[str, Dict[str, int]],
    current: Dict[str, Dict[str, int]],
    interval: float,
) -> Dict[str, Dict[str, float]]:
    """MB/s per interface between two counter samples taken interval seconds apart."""
    rates: Dict[str, Dict[str, float]] = {}
    if interval <= 0:
        return rates
    for name, now in current.items():
        before: Optional[Dict[str, int]] = previous.get(name)
        if before is None:
            continue
        # counters reset when an interface goes down and comes back
        rx = max(now["rx_bytes"] - before["rx_bytes"], 0)
        tx = max(now["tx_bytes"] - before["tx_bytes"], 0)
        rates[name] = {"rx_mb_s": rx / MB / interval, "tx_mb_s": tx / MB / interval}
    return rates
