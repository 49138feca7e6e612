"""Circle and rectangle predicates used by the quadtree range search."""

from __future__ import annotations


def point_in_circle(px: float, py: float, cx: float, cy: float, cr: float) -> bool:
    """Return ``True`` if ``(px, py)`` lies within or on the circle."""

    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= cr * cr


def circle_intersects_rectangle(
    cx: float,
    cy: float,
    cr: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> bool:
    """Return ``True`` if the circle overlaps or touches the rectangle.

    The rectangle is given by its upper-left ``(x1, y1)`` and lower-right
    ``(x2, y2)`` corners. The test clamps the centre onto the rectangle and
    checks the clamped point against the circle.
    """

    closest_x = max(x1, min(cx, x2))
    closest_y = max(y1, min(cy, y2))
    return point_in_circle(closest_x, closest_y, cx, cy, cr)


__all__ = ["point_in_circle", "circle_intersects_rectangle"]
