from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ...config import get_config
from ...metrics import get_status_service
from ...parsers import parse_pmset, parse_refresh_rate

router = APIRouter()


class BatteryReport(BaseModel):
    raw: str = ""
    health: str = ""
    cycle_count: int = 0
    capacity: int = 0


class DisplayReport(BaseModel):
    text: str = ""


@router.get("/snapshot")
def snapshot(raw: bool = Query(False)) -> Dict[str, Any]:
    svc = get_status_service()
    snap = svc.snapshot()
    return snap if raw else svc.render(snap)


@router.post("/parse/battery")
def parse_battery(report: BatteryReport) -> List[Dict[str, Any]]:
    batteries = parse_pmset(report.raw, report.health, report.cycle_count, report.capacity)
    return [b.to_dict() for b in batteries]


@router.post("/parse/refresh-rate")
def parse_display(report: DisplayReport) -> Dict[str, str]:
    ceiling = get_config().display.refresh_ceiling_hz
    return {"refresh_rate": parse_refresh_rate(report.text, max_hz=ceiling)}
