"""cProfile helpers for measuring query performance."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def profile_calls(
    n: int,
    callback: Callable[[], object],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of iterations to profile.
    callback:
        Function called once per iteration, e.g. a single circle query.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    for _ in range(n):
        callback()
    profiler.disable()
    elapsed = time.perf_counter() - start
    profiler.dump_stats(str(path))
    if n > 0:
        logger.info(
            "Profiled %s calls in %.1f ms (avg %.3f ms)",
            n, elapsed * 1000, elapsed * 1000 / n,
        )
    return pstats.Stats(profiler)


__all__ = ["profile_calls"]
