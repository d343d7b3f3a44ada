"""Configuration management for statbar"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .parsers import NOISE_PREFIXES, REFRESH_RATE_CEILING_HZ

DEFAULT_CONFIG_PATH = Path.home() / ".statbar" / "config.yaml"


class DisplayConfig(BaseModel):
    """How readings are turned into status bar text"""
    name_max_len: int = Field(12, ge=1)  # interface / display names
    refresh_ceiling_hz: int = Field(REFRESH_RATE_CEILING_HZ, gt=0)
    noise_prefixes: List[str] = Field(default_factory=lambda: list(NOISE_PREFIXES))


class CollectorConfig(BaseModel):
    """Which OS utilities to call and how long to wait for them"""
    command_timeout: float = 2.0  # seconds
    sample_interval: float = 1.0  # seconds between network samples
    enable_battery: bool = True
    enable_display: bool = True
    enable_network: bool = True


class Config(BaseSettings):
    """Main statbar configuration"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STATBAR_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    collector: CollectorConfig = Field(default_factory=CollectorConfig)

    # Runtime settings
    debug: bool = False
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    api_port: int = 8600


_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file"""
    if path is None:
        path = DEFAULT_CONFIG_PATH

    if not path.exists():
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    config_data = {}
    if "display" in data:
        config_data["display"] = DisplayConfig(**data["display"])
    if "collector" in data:
        config_data["collector"] = CollectorConfig(**data["collector"])

    for key in ["debug", "log_level", "host", "api_port"]:
        if key in data:
            config_data[key] = data[key]

    return Config(**config_data)


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """Save configuration to YAML file"""
    if path is None:
        path = DEFAULT_CONFIG_PATH

    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "display": config.display.model_dump(),
        "collector": config.collector.model_dump(),
        "debug": config.debug,
        "log_level": config.log_level,
        "host": config.host,
        "api_port": config.api_port,
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    return path
