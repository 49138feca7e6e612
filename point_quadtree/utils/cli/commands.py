"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...config import CONFIG, ProfilingConfig
from ...core.components.position import Point
from ...core.spatial.quadtree import PointQuadtree
from ..profiling import profile_calls

logger = logging.getLogger(__name__)


HELP_TEXT = {
    "insert": "/insert <x> <y> [data] - insert a point",
    "find": "/find <cx> <cy> <r> - list points within the circle",
    "size": "/size - number of stored points",
    "points": "/points - all points in pre-order",
    "depth": "/depth - number of tree levels",
    "random": "/random <n> [seed] - insert n random points inside the bounds",
    "profile": "/profile [n] - profile n random circle queries",
    "help": "/help - show this list",
    "quit": "/quit - exit",
}


def new_state(
    bounds: Optional[tuple[float, float, float, float]] = None,
    profiling: Optional[ProfilingConfig] = None,
) -> Dict[str, Any]:
    """Return a fresh CLI state with no tree yet."""
    return {
        "tree": None,
        "bounds": tuple(bounds) if bounds is not None else CONFIG.tree.bounds,
        "profiling": profiling if profiling is not None else CONFIG.profiling,
        "running": True,
    }


def _parse_floats(values: List[str]) -> Optional[List[float]]:
    try:
        return [float(v) for v in values]
    except ValueError:
        logger.error("Expected numbers, got: %s", " ".join(values))
        return None


def _require_tree(state: Dict[str, Any]) -> Optional[PointQuadtree[Point]]:
    tree = state.get("tree")
    if tree is None:
        logger.info("Tree is empty. Use /insert or /random first.")
    return tree


def insert(state: Dict[str, Any], x_str: str, y_str: str, data: Optional[str] = None) -> Optional[Point]:
    coords = _parse_floats([x_str, y_str])
    if coords is None:
        return None
    point = Point(coords[0], coords[1], data)
    tree = state.get("tree")
    if tree is None:
        x1, y1, x2, y2 = state["bounds"]
        state["tree"] = PointQuadtree(point, x1, y1, x2, y2)
        logger.info("Created root at (%s, %s)", point.x, point.y)
    else:
        tree.insert(point)
        logger.info("Inserted (%s, %s)", point.x, point.y)
    return point


def find(state: Dict[str, Any], cx_str: str, cy_str: str, r_str: str) -> List[Point]:
    values = _parse_floats([cx_str, cy_str, r_str])
    if values is None:
        return []
    cx, cy, cr = values
    if cr < 0:
        logger.error("Radius must not be negative: %s", cr)
        return []
    tree = _require_tree(state)
    if tree is None:
        return []
    found = tree.find_in_circle(cx, cy, cr)
    logger.info("%s point(s) within %s of (%s, %s)", len(found), cr, cx, cy)
    for p in found:
        logger.info("  (%s, %s) %s", p.x, p.y, p.data if p.data is not None else "")
    return found


def size(state: Dict[str, Any]) -> int:
    tree = state.get("tree")
    count = tree.size() if tree is not None else 0
    logger.info("Tree size: %s", count)
    return count


def points(state: Dict[str, Any]) -> List[Point]:
    tree = _require_tree(state)
    if tree is None:
        return []
    result = tree.all_points()
    for p in result:
        logger.info("  (%s, %s) %s", p.x, p.y, p.data if p.data is not None else "")
    return result


def depth(state: Dict[str, Any]) -> int:
    tree = state.get("tree")
    levels = tree.depth() if tree is not None else 0
    logger.info("Tree depth: %s", levels)
    return levels


def random_points(state: Dict[str, Any], n_str: str, seed_str: Optional[str] = None) -> int:
    try:
        n = int(n_str)
        seed = int(seed_str) if seed_str is not None else None
    except ValueError:
        logger.error("Invalid count or seed: %s %s", n_str, seed_str)
        return 0
    if n <= 0:
        logger.info("Number of points must be positive.")
        return 0
    rng = random.Random(seed)
    x1, y1, x2, y2 = state["bounds"]
    for _ in range(n):
        point = Point(rng.uniform(x1, x2), rng.uniform(y1, y2))
        tree = state.get("tree")
        if tree is None:
            state["tree"] = PointQuadtree(point, x1, y1, x2, y2)
        else:
            tree.insert(point)
    logger.info("Inserted %s random point(s); size is now %s", n, state["tree"].size())
    return n


def profile(state: Dict[str, Any], queries_str: str | None = None) -> None:
    settings: ProfilingConfig = state.get("profiling") or CONFIG.profiling
    try:
        num_queries = int(queries_str) if queries_str else settings.default_queries
        if num_queries <= 0:
            logger.info("Number of queries must be positive.")
            return
    except ValueError:
        logger.error("Invalid number of queries: %s", queries_str)
        return
    tree = _require_tree(state)
    if tree is None:
        return
    x1, y1, x2, y2 = state["bounds"]
    radius = max(x2 - x1, y2 - y1) / 10
    rng = random.Random(0)

    def query() -> None:
        tree.find_in_circle(rng.uniform(x1, x2), rng.uniform(y1, y2), radius)

    out_path = Path(settings.out_path)
    logger.info("Starting profiling for %s queries. Output to %s", num_queries, out_path)
    profile_calls(num_queries, query, out_path)
    logger.info("Profiling complete. Stats saved to %s", out_path)


def help_command(state: Dict[str, Any]) -> None:
    logger.info("Available commands:")
    for line in HELP_TEXT.values():
        logger.info("  %s", line)


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "insert" and len(args) >= 2:
        return_value = insert(state, args[0], args[1], args[2] if len(args) > 2 else None)
    elif cmd_lower == "find" and len(args) >= 3:
        return_value = find(state, args[0], args[1], args[2])
    elif cmd_lower == "size":
        return_value = size(state)
    elif cmd_lower == "points":
        return_value = points(state)
    elif cmd_lower == "depth":
        return_value = depth(state)
    elif cmd_lower == "random" and args:
        return_value = random_points(state, args[0], args[1] if len(args) > 1 else None)
    elif cmd_lower == "profile":
        profile(state, args[0] if args else None)
    elif cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    elif cmd_lower in HELP_TEXT:
        logger.error("Missing arguments. Usage: %s", HELP_TEXT[cmd_lower])
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "HELP_TEXT",
    "new_state",
    "insert",
    "find",
    "size",
    "points",
    "depth",
    "random_points",
    "profile",
    "help_command",
    "execute",
]
