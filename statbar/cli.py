# statbar/cli.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.table import Table

from statbar.config import get_config, save_config, DEFAULT_CONFIG_PATH
from statbar.metrics import get_status_service
from statbar.parsers import parse_pmset, parse_refresh_rate, is_noise_interface

# Root app
app = typer.Typer(add_completion=False, help="statbar CLI")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    p = Path(path)
    if not p.exists():
        rprint(f"[red]No such file[/red]: {path}")
        raise typer.Exit(1)
    return p.read_text()

# --------------------------- Top-level commands ---------------------------

@app.command()
def status(
    raw: bool = typer.Option(False, help="Print raw measurements instead of display strings"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Take one status snapshot and print it."""
    _setup_logging(verbose)
    svc = get_status_service()
    snap = svc.snapshot()
    if raw:
        rprint(snap)
        return

    view = svc.render(snap)
    table = Table(title="Status")
    table.add_column("Item")
    table.add_column("Value")
    table.add_row("Memory", view["memory"])
    table.add_row("Disk", view["disk"])
    for n in view["network"]:
        table.add_row(n["interface"], f"↓ {n['rx']}  ↑ {n['tx']}")
    for b in view["battery"]:
        table.add_row("Battery", b)
    if view["refresh_rate"]:
        table.add_row("Display", view["refresh_rate"])
    rprint(table)


@app.command()
def api(host: Optional[str] = None, port: Optional[int] = None):
    """Launch FastAPI."""
    cfg = get_config()
    h = host or cfg.host
    p = port or cfg.api_port
    import uvicorn
    uvicorn.run("statbar.api.main:app", host=h, port=p, reload=False)

# --------------------------- Sub-apps (Typer way) ---------------------------

parse_app = typer.Typer(help="Run a parser over captured utility output.")
config_app = typer.Typer(help="Configuration commands.")

# ---- parse ----
@parse_app.command("battery")
def parse_battery(
    path: str = typer.Argument(..., help="File with `pmset -g batt` output, or - for stdin"),
    health: str = typer.Option("", help="Health descriptor to attach"),
    cycles: int = typer.Option(0, help="Cycle count to attach"),
    capacity: int = typer.Option(0, help="Maximum capacity % to attach"),
):
    rprint([b.to_dict() for b in parse_pmset(_read_input(path), health, cycles, capacity)])


@parse_app.command("display")
def parse_display(path: str = typer.Argument(..., help="File with display description, or - for stdin")):
    ceiling = get_config().display.refresh_ceiling_hz
    rprint({"refresh_rate": parse_refresh_rate(_read_input(path), max_hz=ceiling)})


@parse_app.command("interfaces")
def parse_interfaces(path: str = typer.Argument(..., help="File with one interface name per line, or - for stdin")):
    prefixes = get_config().display.noise_prefixes
    names = [line.strip() for line in _read_input(path).splitlines() if line.strip()]
    rprint({name: ("noise" if is_noise_interface(name, prefixes) else "shown") for name in names})

# ---- config ----
@config_app.command("show")
def config_show():
    rprint(get_config().model_dump())


@config_app.command("init")
def config_init(force: bool = typer.Option(False, help="Overwrite an existing file")):
    if DEFAULT_CONFIG_PATH.exists() and not force:
        rprint(f"[yellow]Config already exists[/yellow]: {DEFAULT_CONFIG_PATH}")
        raise typer.Exit(1)
    rprint({"written": str(save_config(get_config(), DEFAULT_CONFIG_PATH))})

# Attach sub-apps
app.add_typer(parse_app, name="parse")
app.add_typer(config_app, name="config")
