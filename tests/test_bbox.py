import math

import pytest

from dgpkit.bbox import BoundingBox


def test_default_is_unit_box():
    box = BoundingBox()
    assert box.dimension == 3
    assert box.min == [0.0, 0.0, 0.0]
    assert box.max == [1.0, 1.0, 1.0]
    assert box.step == 1.0


def test_unit_box_diameter():
    assert BoundingBox(3).diameter() == pytest.approx(math.sqrt(3))


def test_points_bounds():
    pts = [1.0, -2.0, 3.0, 4.0, 5.0, -6.0, 2.0, 0.0, 0.5]
    box = BoundingBox(3, pts)
    assert box.min == [1.0, -2.0, -6.0]
    assert box.max == [4.0, 5.0, 3.0]
    assert box.step == box.max_side()
    assert box.side() == box.max_side()


def test_points_enclosed():
    pts = [0.3, 1.2, -4.0, 7.5, 2.2, 0.1, -1.0, 3.3, 2.0, 0.0, 0.0, 0.0]
    box = BoundingBox(3, pts)
    for j in range(4):
        for i in range(3):
            assert box.min[i] <= pts[3 * j + i] <= box.max[i]


def test_cube_has_equal_sides_and_same_center():
    pts = [0.0, 0.0, 0.0, 4.0, 2.0, 1.0]
    plain = BoundingBox(3, pts)
    box = BoundingBox(3, pts, cube=True)
    sides = [box.side(i) for i in range(3)]
    assert sides[0] == pytest.approx(sides[1])
    assert sides[1] == pytest.approx(sides[2])
    assert sides[0] == pytest.approx(plain.max_side())
    for i in range(3):
        assert box.center(i) == pytest.approx(plain.center(i))


def test_flat_axes_are_widened():
    box = BoundingBox(3, [0.0, 0.0, 0.0, 2.0, 0.0, 0.0])
    assert box.side(0) == 2.0
    assert box.side(1) > 0.0
    assert box.side(2) > 0.0
    assert box.side(1) == pytest.approx(box.side(2))
    assert box.center(1) == pytest.approx(0.0)
    assert box.min[1] == pytest.approx(-0.05)


def test_single_point_box_is_centered():
    box = BoundingBox(3, [1.0, 2.0, 3.0])
    for i, value in enumerate([1.0, 2.0, 3.0]):
        assert box.center(i) == pytest.approx(value)
        assert box.side(i) > 0.0


def test_index_is_clamped():
    box = BoundingBox(3, [0.0, 0.0, 0.0, 1.0, 2.0, 3.0])
    assert box.side(-5) == box.side(0)
    assert box.side(10) == box.side(2)
    assert box.center(-1) == box.center(0)
    assert box.center(99) == box.center(2)


def test_diameter_at_least_max_side():
    box = BoundingBox(3, [0.0, 0.0, 0.0, 3.0, 1.0, 2.0])
    assert box.diameter() >= box.max_side()


def test_two_dimensional_box():
    box = BoundingBox(2, [0.0, 1.0, 2.0, 5.0])
    assert box.dimension == 2
    assert box.min == [0.0, 1.0]
    assert box.max == [2.0, 5.0]
    assert box.max_side() == 4.0


def test_set_min_and_max():
    box = BoundingBox()
    box.set_min([-1.0, -2.0, -3.0])
    box.set_max([1.0, 2.0, 3.0])
    assert box.min == [-1.0, -2.0, -3.0]
    assert box.max == [1.0, 2.0, 3.0]
    assert box.side(2) == 6.0


def test_set_min_wrong_length():
    box = BoundingBox()
    with pytest.raises(ValueError):
        box.set_min([1.0, 2.0])


def test_empty_dimension():
    box = BoundingBox(0)
    assert box.dimension == 0
    assert box.max_side() == 0.0
    assert box.diameter() == 0.0
    with pytest.raises(IndexError):
        box.center(0)