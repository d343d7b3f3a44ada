"""statbar: parsing and formatting of system status readings."""

from .format import format_rate, shorten, human_bytes_short
from .models import Battery
from .parsers import parse_int, parse_refresh_rate, is_noise_interface, parse_pmset

__version__ = "0.1.0"

__all__ = [
    "Battery",
    "format_rate",
    "shorten",
    "human_bytes_short",
    "parse_int",
    "parse_refresh_rate",
    "is_noise_interface",
    "parse_pmset",
]
