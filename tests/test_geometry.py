from point_quadtree.core.spatial.geometry import circle_intersects_rectangle, point_in_circle


def test_point_in_circle_inside_and_outside():
    assert point_in_circle(1, 1, 0, 0, 2)
    assert not point_in_circle(3, 0, 0, 0, 2)


def test_point_in_circle_on_boundary():
    assert point_in_circle(3, 4, 0, 0, 5)
    assert point_in_circle(0, 0, 0, 0, 0)


def test_circle_centre_inside_rectangle():
    assert circle_intersects_rectangle(50, 50, 1, 0, 0, 100, 100)


def test_circle_overlapping_edge():
    assert circle_intersects_rectangle(-5, 50, 10, 0, 0, 100, 100)
    assert not circle_intersects_rectangle(-15, 50, 10, 0, 0, 100, 100)


def test_circle_touching_counts_as_intersecting():
    assert circle_intersects_rectangle(110, 50, 10, 0, 0, 100, 100)


def test_circle_near_corner():
    # Closest point is the corner (100, 100), at distance 5 * sqrt(2).
    assert not circle_intersects_rectangle(105, 105, 7, 0, 0, 100, 100)
    assert circle_intersects_rectangle(105, 105, 7.1, 0, 0, 100, 100)


def test_circle_containing_rectangle():
    assert circle_intersects_rectangle(50, 50, 1000, 0, 0, 100, 100)
