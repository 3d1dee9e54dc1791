"""Tests for SVG path strings."""

from planekit import Point, Rect, cardinal, points_to_path, rect_to_path


class TestPointsToPath:
    def test_path(self) -> None:
        points = [Point(0, 0), Point(10, 5.5), Point(-1, 2)]
        assert points_to_path(points) == "M 0 0 L 10 5.5 L -1 2"

    def test_single_point(self) -> None:
        assert points_to_path([Point(3, 4)]) == "M 3 4"

    def test_small_coordinates_stay_decimal(self) -> None:
        assert points_to_path([Point(0.00001, 2)]) == "M 0.00001 2"

    def test_empty(self) -> None:
        assert points_to_path([]) == "M 0 0"


class TestRectToPath:
    def test_path(self) -> None:
        assert rect_to_path(Rect(1, 2, 3, 4)) == "M 1 2 h 3 v 4 h -3 v -4"


class TestCardinal:
    def test_open_segment(self) -> None:
        assert cardinal([Point(0, 0), Point(6, 0)]) == "M 0 0 C 1 0 5 0 6 0"

    def test_closed_ends_with_z(self) -> None:
        path = cardinal([Point(0, 0), Point(6, 0), Point(6, 6)], closed=True)
        assert path.startswith("M 0 0 C ")
        assert path.endswith(" z")
        # "M x y C", 6 numbers per segment (one per point), "z"
        assert len(path.split()) == 4 + 6 * 3 + 1

    def test_zero_tension_is_straight(self) -> None:
        path = cardinal([Point(0, 0), Point(6, 0)], tension=0)
        assert path == "M 0 0 C 0 0 6 0 6 0"

    def test_empty(self) -> None:
        assert cardinal([]) == "M 0 0"
