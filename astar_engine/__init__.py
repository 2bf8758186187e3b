"""Structure-agnostic A* pathfinding."""

from __future__ import annotations

from .config import Config, LoggingConfig, SearchConfig, load_config
from .core.errors import InvalidGoalSpecification, PathfindingError
from .core.generator import PathGenerator, SupportsPathGeneration
from .core.goal import AxisX, AxisY, ExactPoint, Goal, resolve_goal
from .core.position import Position, as_position
from .logging_setup import configure_logging
from .search.engine import AStar, SearchOutcome, SearchResult, find_path
from .search.reconstruct import reconstruct_path
from .structures.grid import GridMap, find_grid_path

__version__ = "0.1.0"

__all__ = [
    "AStar",
    "AxisX",
    "AxisY",
    "Config",
    "ExactPoint",
    "Goal",
    "GridMap",
    "InvalidGoalSpecification",
    "LoggingConfig",
    "PathGenerator",
    "PathfindingError",
    "Position",
    "SearchConfig",
    "SearchOutcome",
    "SearchResult",
    "SupportsPathGeneration",
    "as_position",
    "configure_logging",
    "find_grid_path",
    "find_path",
    "load_config",
    "reconstruct_path",
    "resolve_goal",
]
