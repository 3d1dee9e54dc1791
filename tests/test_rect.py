"""Tests for axis-aligned rectangles."""

import math

import pytest

from planekit import Intersect, InvalidPlacementError, Matrix, Point, Rect
from planekit.config import settings


class TestConstruction:
    def test_defaults(self) -> None:
        assert Rect().to_tuple() == (0, 0, 0, 0)
        assert Rect(5).to_tuple() == (5, 5, 5, 5)
        assert Rect(1, 2).to_tuple() == (1, 2, 1, 2)

    def test_from_points(self) -> None:
        assert Rect.from_points(Point(1, 2), Point(4, 6)) == Rect(1, 2, 3, 4)

    def test_from_unsorted_points(self) -> None:
        assert Rect.from_unsorted_points(Point(10, 0), Point(0, 5)) == Rect(0, 0, 10, 5)

    def test_combine(self) -> None:
        combined = Rect.combine([Rect(0, 0, 10, 10), Rect(5, 5, 10, 20)])
        assert combined == Rect(0, 0, 15, 25)
        assert Rect.bounding_rect([Rect(0, 0, 10, 10), Rect(5, 5, 10, 20)]) == combined

    def test_copy_is_independent(self) -> None:
        r = Rect(1, 2, 3, 4)
        clone = r.copy()
        clone.x = 10
        assert r.x == 1

    def test_compare(self) -> None:
        assert Rect.compare(Rect(1, 2, 3, 4), Rect(1, 2, 3, 4))
        assert not Rect.compare(None, Rect(1, 2, 3, 4))

    def test_str_and_svg(self) -> None:
        r = Rect(1, 2, 3, 4.5)
        assert str(r) == "1 2 3 4.5"
        assert Rect(1, 2, 3, 4).to_svg_path() == "M 1 2 h 3 v 4 h -3 v -4"

    def test_unpacks_to_position_and_size(self) -> None:
        x, y, width, height = Rect(1, 2, 3, 4)
        assert (x, y, width, height) == (1, 2, 3, 4)
        assert list(Rect(5, 6, 7, 8)) == [5, 6, 7, 8]


class TestDerivedGeometry:
    def test_edges(self) -> None:
        r = Rect(1, 2, 3, 4)
        assert (r.left, r.top, r.right, r.bottom) == (1, 2, 4, 6)

    def test_edge_setters_move_the_rect(self) -> None:
        r = Rect(0, 0, 10, 10)
        r.right = 30
        r.bottom = 15
        assert r == Rect(20, 5, 10, 10)

    def test_corners(self) -> None:
        r = Rect(0, 0, 10, 5)
        assert r.points == [Point(0, 0), Point(10, 0), Point(10, 5), Point(0, 5)]
        assert r.top_left == Point(0, 0)
        assert r.top_right == Point(10, 0)
        assert r.bottom_left == Point(0, 5)
        assert r.bottom_right == Point(10, 5)
        assert r.center == Point(5, 2.5)

    def test_position_and_size_are_copies(self) -> None:
        r = Rect(1, 2, 3, 4)
        r.pos.x = 99
        r.size.x = 99
        assert r == Rect(1, 2, 3, 4)


class TestEdgeLines:
    def test_edge_lines(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.left_line.points == [Point(0, 0), Point(0, 10)]
        assert r.top_line.points == [Point(0, 0), Point(10, 0)]
        assert r.right_line.points == [Point(10, 0), Point(10, 10)]
        assert r.bottom_line.points == [Point(0, 10), Point(10, 10)]

    def test_cached_until_changed(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.left_line is r.left_line

    def test_position_change_rebuilds(self) -> None:
        r = Rect(0, 0, 10, 10)
        before = r.left_line
        r.x = 5
        assert r.left_line is not before
        assert r.left_line.p1 == Point(5, 0)

    def test_in_place_scale_rebuilds(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.right_line.p1.x == 10
        r.scale_self(2)
        assert r.right_line.p1.x == 20

    def test_set_rebuilds(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.bottom_line.p1.y == 10
        r.set(Rect(0, 0, 10, 30))
        assert r.bottom_line.p1.y == 30


class TestSetters:
    def test_set_position_and_size(self) -> None:
        r = Rect(0, 0, 1, 1)
        assert r.set_position(Point(3, 4)) is r
        r.set_size(Point(5, 6))
        assert r == Rect(3, 4, 5, 6)

    def test_set_width_height(self) -> None:
        r = Rect(0, 0, 1, 1).set_width(7).set_height(8)
        assert r == Rect(0, 0, 7, 8)


class TestTransforms:
    def test_interpolate(self) -> None:
        assert Rect(0, 0, 10, 10).interpolate(Rect(10, 20, 20, 30), 0.5) == Rect(5, 10, 15, 20)

    def test_round_half_up(self) -> None:
        assert Rect(0.5, 1.5, 2.4, 2.6).round() == Rect(1, 2, 2, 3)

    def test_multiply_defaults(self) -> None:
        assert Rect(1, 1, 2, 2).multiply(2) == Rect(2, 2, 4, 4)
        assert Rect(1, 1, 2, 2).multiply(2, 3) == Rect(2, 3, 4, 6)
        assert Rect(1, 1, 2, 2).multiply(2, 3, 1, 1) == Rect(2, 3, 2, 2)

    def test_multiply_by(self) -> None:
        assert Rect(1, 1, 2, 2).multiply_by(Rect(2, 3, 4, 5)) == Rect(2, 3, 8, 10)

    def test_transform_and_normalize_matrix(self) -> None:
        m = Matrix().translate(10, 0)
        r = Rect(1, 1, 2, 2)
        moved = r.transform(m)
        assert moved == Rect(11, 1, 2, 2)
        assert moved.normalize_matrix(m) == r

    def test_normalize_rect(self) -> None:
        assert Rect(5, 5, 5, 5).normalize_rect(Rect(0, 0, 10, 10)) == Rect(0.5, 0.5, 0.5, 0.5)

    def test_normalize_rect_by_empty_rect(self) -> None:
        r = Rect(5, 5, 5, 5).normalize_rect(Rect(0, 0, 0, 0))
        assert math.isinf(r.x)
        assert math.isinf(r.width)

    def test_contain(self) -> None:
        bounds = Rect(0, 0, 10, 10)
        assert Rect(8, 8, 4, 4).contain(bounds) == Rect(6, 6, 4, 4)
        assert Rect(-5, 2, 4, 4).contain(bounds) == Rect(0, 2, 4, 4)


class TestOverlap:
    def test_intersects_with_tolerance(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.intersects_rect(Rect(9, 0, 10, 10))
        assert not r.intersects_rect(Rect(10, 0, 10, 10))
        assert not r.intersects_rect(Rect(10.5, 0, 10, 10))

    def test_zero_tolerance_counts_touching(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "rect_edge_tolerance", 0.0)
        assert Rect(0, 0, 10, 10).intersects_rect(Rect(10, 0, 10, 10))

    def test_intersection_flags(self) -> None:
        flags = Rect(0, 0, 10, 10).intersection_rect(Rect(20, 0, 10, 10))
        assert flags == Intersect.TOP | Intersect.BOTTOM | Intersect.RIGHT

    def test_within(self) -> None:
        outer = Rect(0, 0, 10, 10)
        assert Rect(2, 2, 5, 5).within_rect(outer)
        assert outer.within_rect(outer)
        assert not Rect(8, 8, 5, 5).within_rect(outer)

    def test_distance(self) -> None:
        d = Rect(0, 0, 10, 10).distance_rect(Rect(20, 5, 10, 10))
        assert d == Point(10, 5)


class TestCollisionResponse:
    def test_horizontal(self) -> None:
        assert Rect(0, 0, 10, 10).collision_response(Rect(5, 0, 10, 10)) == Point(-5, 0)

    def test_vertical(self) -> None:
        assert Rect(0, 0, 10, 10).collision_response(Rect(0, 4, 10, 10)) == Point(0, -6)

    def test_coincident_is_undefined(self) -> None:
        response = Rect(0, 0, 10, 10).collision_response(Rect(0, 0, 10, 10))
        assert response.x == 0
        assert math.isnan(response.y)

    def test_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="planekit.rect"):
            Rect(0, 0, 10, 10).collision_response(Rect(5, 0, 10, 10))
        assert "Rect collision response" in caplog.text


class TestPlace:
    @pytest.fixture
    def anchor(self) -> Rect:
        return Rect(100, 100, 50, 20)

    @pytest.mark.parametrize(
        ("placement", "expected"),
        [
            ("n", (120, 90)),
            ("se", (150, 120)),
            ("nw", (90, 90)),
            ("nwr", (100, 90)),
            ("nel", (140, 90)),
            ("w", (90, 105)),
        ],
    )
    def test_placements(self, anchor: Rect, placement: str, expected: tuple[float, float]) -> None:
        placed = Rect(0, 0, 10, 10).place(anchor, placement)  # type: ignore[arg-type]
        assert (placed.x, placed.y) == expected
        assert (placed.width, placed.height) == (10, 10)

    def test_place_self_mutates(self, anchor: Rect) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.place_self(anchor, "s") is r
        assert r.top == anchor.bottom

    def test_unknown_placement(self, anchor: Rect) -> None:
        with pytest.raises(InvalidPlacementError):
            Rect(0, 0, 10, 10).place(anchor, "x")  # type: ignore[arg-type]
