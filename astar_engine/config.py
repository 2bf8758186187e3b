"""Simple configuration loader for astar_engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    log_expansions: bool = False


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`astar_engine.logging_setup.configure_logging`."""

    global_level: str = "WARNING"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    search = SearchConfig(
        log_expansions=bool(search_data.get("log_expansions", False)),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "WARNING")).upper(),
        module_levels={
            str(name): str(level)
            for name, level in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(search=search, logging=logging_cfg)


def load_config(path: str | Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
