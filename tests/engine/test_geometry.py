"""Tests for geometry primitives and unit helpers."""

import pytest

from quill_layout.engine.geometry import (
    Margins,
    PageSize,
    Point,
    Size,
    inch_to_points,
    mm_to_points,
)


class TestPoint:
    """Test cases for Point."""

    def test_coerce_tuple(self):
        point = Point.coerce((10, 20.5))
        assert point == Point(10.0, 20.5)

    def test_coerce_point_returns_same_object(self):
        point = Point(1.0, 2.0)
        assert Point.coerce(point) is point

    def test_unpacking(self):
        x, y = Point(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)

    def test_coerce_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Point.coerce((1, 2, 3))


class TestMargins:
    """Test cases for Margins."""

    def test_uniform(self):
        assert Margins.uniform(12.0) == Margins(12.0, 12.0, 12.0, 12.0)

    def test_from_tuple_uses_top_right_bottom_left_order(self):
        margins = Margins.from_tuple((1, 2, 3, 4))
        assert margins.top == 1.0
        assert margins.right == 2.0
        assert margins.bottom == 3.0
        assert margins.left == 4.0


class TestUnits:
    """Test cases for unit conversion."""

    def test_inch_to_points(self):
        assert inch_to_points(1) == 72.0
        assert inch_to_points(None) == 0.0

    def test_mm_to_points(self):
        assert mm_to_points(25.4) == pytest.approx(72.0)
        assert mm_to_points(None) == 0.0

    def test_page_size_to_points(self):
        size = PageSize.LETTER.to_points()
        assert isinstance(size, Size)
        assert size.width == pytest.approx(612.0)
        assert size.height == pytest.approx(792.0)

    def test_a4_to_points(self):
        size = PageSize.A4.to_points()
        assert size.width == pytest.approx(595.2756, abs=1e-3)
        assert size.height == pytest.approx(841.8898, abs=1e-3)
