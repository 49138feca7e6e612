"""Point quadtree with circular range search."""

from .core.components.position import Point, Point2D
from .core.spatial.geometry import circle_intersects_rectangle, point_in_circle
from .core.spatial.quadtree import PointQuadtree

__all__ = [
    "Point",
    "Point2D",
    "PointQuadtree",
    "circle_intersects_rectangle",
    "point_in_circle",
]
