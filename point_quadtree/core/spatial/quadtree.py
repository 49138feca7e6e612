from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..components.position import Point2D
from .geometry import circle_intersects_rectangle, point_in_circle

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Point2D)

QUADRANTS = (1, 2, 3, 4)


class PointQuadtree(Generic[E]):
    """Point quadtree node anchoring one point inside a rectangular region.

    Children are created lazily, one per quadrant around the anchor:

    * 1: right of and above the anchor
    * 2: left of and above
    * 3: left of and below
    * 4: right of and below

    "Above" means a smaller ``y``; the region runs from the upper-left corner
    ``(x1, y1)`` to the lower-right corner ``(x2, y2)``. Quadrant tests are
    inclusive on both sides, so a point sharing an anchor coordinate is
    inserted into every quadrant it qualifies for.
    """

    def __init__(self, point: E, x1: float, y1: float, x2: float, y2: float) -> None:
        self._point = point
        self._x1 = x1
        self._y1 = y1
        self._x2 = x2
        self._y2 = y2
        self._children: List[Optional[PointQuadtree[E]]] = [None, None, None, None]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def point(self) -> E:
        return self._point

    @property
    def x1(self) -> float:
        return self._x1

    @property
    def y1(self) -> float:
        return self._y1

    @property
    def x2(self) -> float:
        return self._x2

    @property
    def y2(self) -> float:
        return self._y2

    def get_child(self, quadrant: int) -> Optional[PointQuadtree[E]]:
        """Return the child at ``quadrant`` (1-4), or ``None``."""
        if quadrant in QUADRANTS:
            return self._children[quadrant - 1]
        return None

    def has_child(self, quadrant: int) -> bool:
        """Return ``True`` if there is a child at ``quadrant`` (1-4)."""
        return self.get_child(quadrant) is not None

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------
    def _child_region(self, quadrant: int) -> tuple[float, float, float, float]:
        ax = self._point.x
        ay = self._point.y
        if quadrant == 1:
            return (ax, self._y1, self._x2, ay)
        if quadrant == 2:
            return (self._x1, self._y1, ax, ay)
        if quadrant == 3:
            return (self._x1, ay, ax, self._y2)
        return (ax, ay, self._x2, self._y2)

    def _insert_into(self, quadrant: int, p: E) -> None:
        child = self._children[quadrant - 1]
        if child is not None:
            child.insert(p)
            return
        x1, y1, x2, y2 = self._child_region(quadrant)
        self._children[quadrant - 1] = PointQuadtree(p, x1, y1, x2, y2)
        logger.debug(
            "New quadrant %s child at (%s, %s) spanning (%s, %s)-(%s, %s)",
            quadrant, p.x, p.y, x1, y1, x2, y2,
        )

    def insert(self, p: E) -> None:
        """Insert ``p`` into the subtree rooted at this node."""

        px = p.x
        py = p.y
        ax = self._point.x
        ay = self._point.y

        # Each test is independent; ties on an axis match several quadrants.
        if px >= ax and py <= ay:
            self._insert_into(1, p)
        if px <= ax and py <= ay:
            self._insert_into(2, p)
        if px <= ax and py >= ay:
            self._insert_into(3, p)
        if px >= ax and py >= ay:
            self._insert_into(4, p)

    def insert_many(self, points: Iterable[E]) -> None:
        """Insert every point of ``points`` in iteration order."""
        for p in points:
            self.insert(p)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def size(self) -> int:
        """Return the number of points stored in this node and its descendants."""
        total = 1
        for child in self._children:
            if child is not None:
                total += child.size()
        return total

    def depth(self) -> int:
        """Return the number of levels in this subtree (a leaf has depth 1)."""
        deepest = 0
        for child in self._children:
            if child is not None:
                deepest = max(deepest, child.depth())
        return deepest + 1

    def all_points(self) -> List[E]:
        """Return every point in pre-order: self, then quadrants 1 to 4."""
        points: List[E] = [self._point]
        for child in self._children:
            if child is not None:
                points.extend(child.all_points())
        return points

    # ------------------------------------------------------------------
    # Range search
    # ------------------------------------------------------------------
    def find_in_circle(self, cx: float, cy: float, cr: float) -> List[E]:
        """Return all points within or on the circle centred at ``(cx, cy)``."""
        found: List[E] = []
        self.circle_point_accumulator(found, cx, cy, cr)
        return found

    def circle_point_accumulator(self, points: List[E], cx: float, cy: float, cr: float) -> None:
        """Append to ``points`` every point of this subtree inside the circle.

        Subtrees whose region does not touch the circle are skipped without
        visiting their points.
        """

        if not circle_intersects_rectangle(cx, cy, cr, self._x1, self._y1, self._x2, self._y2):
            return

        if point_in_circle(self._point.x, self._point.y, cx, cy, cr):
            points.append(self._point)

        for child in self._children:
            if child is not None:
                child.circle_point_accumulator(points, cx, cy, cr)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[E]:
        return iter(self.all_points())

    def __repr__(self) -> str:
        return (
            f"PointQuadtree(point=({self._point.x}, {self._point.y}), "
            f"region=({self._x1}, {self._y1})-({self._x2}, {self._y2}))"
        )


__all__ = ["PointQuadtree", "QUADRANTS"]
