"""Interactive entry point for exploring a point quadtree."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from dotenv import load_dotenv

from .config import Config, load_config, CONFIG_PATH
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute, new_state

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(cfg: Config) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load ``.env`` and configuration, set up logging and return a CLI state."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("POINT_QUADTREE_CONFIG", str(CONFIG_PATH))
    cfg = load_config(Path(config_path))
    configure_logging(cfg)
    logger.info("[Bootstrap] Root bounds %s", cfg.tree.bounds)
    return new_state(cfg.tree.bounds, cfg.profiling)


def run(lines: Iterable[str], state: Dict[str, Any]) -> Dict[str, Any]:
    """Execute each ``/command`` line until ``/quit`` or the input ends."""

    for line in lines:
        cmd = parse_command(line)
        if cmd is None:
            continue
        execute(cmd.name, cmd.args, state)
        if not state.get("running", True):
            break
    return state


def main(argv: Optional[list[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    state = bootstrap(argv[0] if argv else None)
    logger.info("Type /help for commands, /quit to exit.")
    try:
        run(sys.stdin, state)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Application shutting down...")


if __name__ == "__main__":
    main()
