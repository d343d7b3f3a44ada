# statbar/metrics/commands.py
from __future__ import annotations

import logging
import platform
import subprocess
from typing import List

log = logging.getLogger(__name__)


def is_macos() -> bool:
    return platform.system().lower() == "darwin"


def run_command(cmd: List[str], timeout: float = 2.0) -> str:
    """Run a utility and return its stdout, or "" if it is missing, slow or fails."""
    try:
        return subprocess.check_output(cmd, text=True, stderr=subprocess.DEVNULL, timeout=timeout)
    except FileNotFoundError:
        log.debug("%s not found", cmd[0])
    except subprocess.TimeoutExpired:
        log.debug("%s timed out after %ss", cmd[0], timeout)
    except subprocess.CalledProcessError as e:
        log.debug("%s exited with status %s", cmd[0], e.returncode)
    except OSError as e:
        log.debug("%s could not be started: %s", cmd[0], e)
    return ""
