import pytest

from point_quadtree.core.components.position import Point
from point_quadtree.core.spatial.quadtree import PointQuadtree


@pytest.fixture
def square_tree():
    """Root at (50, 50) spanning (0, 0)-(100, 100) with one point per quadrant."""
    tree = PointQuadtree(Point(50, 50, "root"), 0, 0, 100, 100)
    tree.insert(Point(70, 30, "q1"))
    tree.insert(Point(30, 30, "q2"))
    tree.insert(Point(30, 70, "q3"))
    tree.insert(Point(70, 70, "q4"))
    return tree
