"""Simple configuration loader for point_quadtree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class TreeConfig:
    """Configuration values for the tree section."""

    bounds: tuple[float, float, float, float] = (0.0, 0.0, 800.0, 600.0)


@dataclass
class ProfilingConfig:
    """Defaults for the ``/profile`` command."""

    default_queries: int = 100
    out_path: str = "profile.prof"


@dataclass
class LoggingConfig:
    """Global and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    tree: TreeConfig
    profiling: ProfilingConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    tree_data = data.get("tree", {})
    bounds = tree_data.get("bounds", [0, 0, 800, 600])
    if isinstance(bounds, (list, tuple)) and len(bounds) == 4:
        tree = TreeConfig(bounds=tuple(float(v) for v in bounds))
    else:
        logger.warning("tree.bounds must be [x1, y1, x2, y2], got %s. Using defaults.", bounds)
        tree = TreeConfig()

    profiling_data = data.get("profiling", {})
    profiling = ProfilingConfig(
        default_queries=int(profiling_data.get("default_queries", 100)),
        out_path=str(profiling_data.get("out_path", "profile.prof")),
    )

    logging_data = data.get("logging", {})
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(tree=tree, profiling=profiling, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
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
    "Config",
    "TreeConfig",
    "ProfilingConfig",
    "LoggingConfig",
    "load_config",
]
