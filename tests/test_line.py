"""Tests for line segments."""

import pytest

from planekit import Intersect, Line, Point, Rect


def _line(x1: float, y1: float, x2: float, y2: float) -> Line:
    return Line(Point(x1, y1), Point(x2, y2))


class TestMeasures:
    def test_mag(self) -> None:
        assert _line(0, 0, 3, 4).mag() == 5

    def test_angle(self) -> None:
        assert _line(0, 0, 1, 1).angle_degrees() == pytest.approx(45)

    def test_dot(self) -> None:
        assert _line(1, 2, 3, 4).dot() == 11

    def test_points(self) -> None:
        line = _line(1, 2, 3, 4)
        assert line.points == [Point(1, 2), Point(3, 4)]

    def test_unpacks_to_endpoints(self) -> None:
        line = _line(1, 2, 3, 4)
        start, end = line
        assert start is line.p1
        assert end is line.p2
        assert list(line) == [Point(1, 2), Point(3, 4)]


class TestTranslate:
    def test_translate_self_moves_held_points(self) -> None:
        p = Point(0, 0)
        line = Line(p, Point(1, 1))
        assert line.translate_self(1) is line
        assert p == Point(1, 1)

    def test_translate_copies(self) -> None:
        p = Point(0, 0)
        line = Line(p, Point(1, 1))
        moved = line.translate_by(Point(2, 3))
        assert p == Point(0, 0)
        assert moved.p1 == Point(2, 3)
        assert moved.p2 == Point(3, 4)

    def test_copy_is_deep(self) -> None:
        line = _line(0, 0, 1, 1)
        clone = line.copy()
        clone.p1.x = 5
        assert line.p1.x == 0


class TestIntersectsLine:
    def test_crossing(self) -> None:
        a = _line(0, 0, 10, 10)
        b = _line(0, 10, 10, 0)
        assert a.intersects_line(b)
        assert b.intersects_line(a)

    def test_parallel(self) -> None:
        assert not _line(0, 0, 10, 0).intersects_line(_line(0, 1, 10, 1))

    def test_collinear_overlap_is_not_reported(self) -> None:
        a = _line(0, 0, 10, 0)
        b = _line(5, 0, 15, 0)
        assert not a.intersects_line(b)
        assert not b.intersects_line(a)

    def test_shared_endpoint(self) -> None:
        a = _line(0, 0, 5, 5)
        b = _line(5, 5, 10, 0)
        assert a.intersects_line(b)
        assert b.intersects_line(a)

    def test_disjoint(self) -> None:
        assert not _line(0, 0, 1, 1).intersects_line(_line(5, 0, 6, -1))


class TestIntersectsRect:
    @pytest.fixture
    def rect(self) -> Rect:
        return Rect(0, 0, 10, 10)

    def test_single_edge(self, rect: Rect) -> None:
        line = _line(-5, 5, 5, 5)
        assert line.intersects_rect(rect) == Intersect.LEFT
        assert line.intersection_rect(rect) == Intersect.LEFT

    def test_first_match_vs_all_matches(self, rect: Rect) -> None:
        line = _line(-5, 5, 15, 5)
        assert line.intersects_rect(rect) == Intersect.LEFT
        assert line.intersection_rect(rect) == Intersect.LEFT | Intersect.RIGHT

    def test_through_corner(self, rect: Rect) -> None:
        line = _line(-5, -5, 5, 5)
        assert line.intersects_rect(rect) == Intersect.LEFT
        assert line.intersection_rect(rect) == Intersect.LEFT | Intersect.TOP

    def test_inside(self, rect: Rect) -> None:
        line = _line(2, 2, 8, 8)
        assert line.intersects_rect(rect) == Intersect.INSIDE
        assert line.intersection_rect(rect) == Intersect.INSIDE

    def test_outside(self, rect: Rect) -> None:
        line = _line(20, 20, 30, 30)
        assert line.intersects_rect(rect) == Intersect.NONE
        assert line.intersection_rect(rect) == Intersect.NONE

    def test_flags_are_testable_with_and(self, rect: Rect) -> None:
        flags = _line(-5, 5, 15, 5).intersection_rect(rect)
        assert flags & Intersect.RIGHT
        assert not flags & Intersect.TOP


class TestCollisionResponse:
    @pytest.fixture
    def rect(self) -> Rect:
        return Rect(0, 0, 10, 10)

    def test_none_returns_same_line(self, rect: Rect) -> None:
        line = _line(20, 20, 30, 30)
        assert line.line_to_rect_collision_response(Intersect.NONE, rect) is line

    def test_left_pushes_start_out(self, rect: Rect) -> None:
        line = _line(-5, 5, 5, 5)
        response = line.line_to_rect_collision_response(Intersect.LEFT, rect)
        assert response.p1 == Point(-1, 5)
        assert response.p2 == Point(5, 5)
        assert line.p1 == Point(-5, 5)

    def test_left_and_right(self, rect: Rect) -> None:
        line = _line(-5, 5, 15, 5)
        response = line.line_to_rect_collision_response(line.intersection_rect(rect), rect)
        assert response.p1 == Point(-1, 5)
        assert response.p2 == Point(11, 5)

    def test_top_and_bottom(self, rect: Rect) -> None:
        line = _line(5, -5, 5, 15)
        response = line.line_to_rect_collision_response(Intersect.TOP | Intersect.BOTTOM, rect)
        assert response.p1 == Point(5, -1)
        assert response.p2 == Point(5, 11)

    def test_inside_collapses_to_touch_point(self, rect: Rect) -> None:
        line = _line(1, 4, 3, 6)
        response = line.line_to_rect_collision_response(Intersect.INSIDE, rect)
        assert response.p1 == Point(-1, 4.5)
        assert response.p2 == Point(-1, 4.5)
