"""components package."""

from .position import Point, Point2D

__all__ = ["Point", "Point2D"]
