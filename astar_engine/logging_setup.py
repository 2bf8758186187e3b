"""Apply :class:`~astar_engine.config.LoggingConfig` to the logging tree."""

from __future__ import annotations

import logging
from typing import Optional

from .config import CONFIG, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(cfg: Optional[LoggingConfig] = None) -> None:
    """Configure the root logger and any per-module levels from ``cfg``."""

    cfg = cfg or CONFIG.logging
    numeric_level = getattr(logging, cfg.global_level.upper(), None)
    valid = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )
    if not valid:
        logger.warning("Invalid global log level '%s' in config.", cfg.global_level)

    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


__all__ = ["configure_logging", "LOG_FORMAT"]
