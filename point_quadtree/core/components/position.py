"""Point component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class Point2D(Protocol):
    """Anything with real-valued ``x`` and ``y`` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@dataclass(frozen=True)
class Point:
    """Simple 2D coordinate carrying an optional payload."""

    x: float
    y: float
    data: Any = None


__all__ = ["Point", "Point2D"]
