"""Tests for bounding extent calculation."""

import pytest

from path_tamer.bounds import bounding_size, bounds
from path_tamer.sampler import sample
from path_tamer.types import BoundingExtent, ClosePath, Line, Move, Point, QuadCurve


class TestBounds:
    def test_empty_table_is_zero_extent(self) -> None:
        extent = bounds([])
        assert extent == BoundingExtent(min_x=0, max_x=0, min_y=0, max_y=0)
        assert extent.width == 0
        assert extent.height == 0

    def test_single_point(self) -> None:
        extent = bounds([Point(x=3, y=-2)])
        assert extent == BoundingExtent(min_x=3, max_x=3, min_y=-2, max_y=-2)

    def test_componentwise_min_max(self) -> None:
        table = [Point(x=1, y=5), Point(x=-4, y=2), Point(x=7, y=-3)]
        extent = bounds(table)
        assert extent == BoundingExtent(min_x=-4, max_x=7, min_y=-3, max_y=5)
        assert extent.width == 11
        assert extent.height == 8

    def test_horizontal_line_has_zero_height(self) -> None:
        path = [Move(to=Point(x=5, y=5)), Line(to=Point(x=15, y=5))]
        extent = bounds(sample(path))
        assert extent.min_x == 5
        assert extent.max_x == pytest.approx(15)
        assert extent.min_y == 5
        assert extent.max_y == 5
        assert extent.width == pytest.approx(10)
        assert extent.height == 0


class TestBoundingSize:
    def test_rectangle(self) -> None:
        path = [
            Move(to=Point(x=10, y=20)),
            Line(to=Point(x=50, y=20)),
            Line(to=Point(x=50, y=40)),
            Line(to=Point(x=10, y=40)),
            ClosePath(),
        ]
        size = bounding_size(path)
        assert size.width == pytest.approx(40)
        assert size.height == pytest.approx(20)

    def test_curve_bounds_follow_samples_not_control_points(self) -> None:
        path = [
            Move(to=Point(x=0, y=0)),
            QuadCurve(to=Point(x=10, y=0), control=Point(x=5, y=10)),
        ]
        size = bounding_size(path)
        # The control point sits at y=10, the curve peaks at y=5
        assert size.height == pytest.approx(5)
        assert size.width == pytest.approx(10)

    def test_empty_path_is_zero_size(self) -> None:
        size = bounding_size([])
        assert (size.width, size.height) == (0, 0)
