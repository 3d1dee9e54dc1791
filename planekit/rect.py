"""Axis-aligned rectangles."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any, Literal, Self

from pydantic import PrivateAttr

from planekit.config import settings
from planekit.errors import InvalidPlacementError
from planekit.intersect import Intersect
from planekit.line import Line
from planekit.point import Point
from planekit.scalar import divide, format_number, round_half_up
from planekit.shape import Shape

if TYPE_CHECKING:
    from planekit.matrix import Matrix

logger = logging.getLogger(__name__)

Placement = Literal["n", "s", "w", "e", "ne", "se", "sw", "nw", "nwr", "nel"]

PLACEMENTS: frozenset[str] = frozenset(
    {"n", "s", "w", "e", "ne", "se", "sw", "nw", "nwr", "nel"}
)

_GEOMETRY_FIELDS = frozenset({"x", "y", "width", "height"})


class Rect(Shape):
    """An axis-aligned rectangle at ``(x, y)`` with ``(width, height)`` extent.

    The four edge lines are cached and rebuilt on the first read after any
    change to ``x``, ``y``, ``width`` or ``height``.
    """

    width: float = 0.0
    height: float = 0.0

    _stale: bool = PrivateAttr(default=True)
    _lines: tuple[Line, Line, Line, Line] | None = PrivateAttr(default=None)

    def __init__(
        self,
        x: float = 0.0,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
        **data: Any,
    ) -> None:
        y = x if y is None else y
        super().__init__(
            x=x,
            y=y,
            width=x if width is None else width,
            height=y if height is None else height,
            **data,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in _GEOMETRY_FIELDS:
            self._stale = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return " ".join(format_number(v) for v in self.to_tuple())

    # Construction

    @classmethod
    def from_shape(cls, shape: Shape) -> Self:
        return cls(shape.x, shape.y, shape.width, shape.height)

    @classmethod
    def from_points(cls, top_left: Point, bottom_right: Point) -> Self:
        return cls(
            top_left.x,
            top_left.y,
            bottom_right.x - top_left.x,
            bottom_right.y - top_left.y,
        )

    @classmethod
    def from_unsorted_points(cls, p1: Point, p2: Point) -> Self:
        return cls.from_points(
            Point(min(p1.x, p2.x), min(p1.y, p2.y)),
            Point(max(p1.x, p2.x), max(p1.y, p2.y)),
        )

    @classmethod
    def combine(cls, rects: Sequence[Rect]) -> Self:
        """Smallest rectangle covering all of ``rects``."""
        x = min(r.x for r in rects)
        y = min(r.y for r in rects)
        return cls(
            x,
            y,
            max(r.right for r in rects) - x,
            max(r.bottom for r in rects) - y,
        )

    @classmethod
    def bounding_rect(cls, rects: Sequence[Rect]) -> Self:
        return cls.combine(rects)

    @staticmethod
    def compare(a: Rect | None, b: Rect) -> bool:
        return a.equals(b) if a is not None else False

    def copy(self) -> Self:  # type: ignore[override]
        return type(self)(self.x, self.y, self.width, self.height)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.to_tuple())

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def to_svg_path(self) -> str:
        from planekit.svg import rect_to_path

        return rect_to_path(self)

    # Setters

    def set(self, other: Rect) -> Self:
        self.x = other.x
        self.y = other.y
        self.width = other.width
        self.height = other.height
        return self

    def set_width(self, width: float) -> Self:
        self.width = width
        return self

    def set_height(self, height: float) -> Self:
        self.height = height
        return self

    def set_position(self, other: Shape) -> Self:
        self.x = other.x
        self.y = other.y
        return self

    def set_size(self, other: Shape) -> Self:
        self.width = other.width
        self.height = other.height
        return self

    # Derived geometry

    @property
    def right(self) -> float:
        return self.x + self.width

    @right.setter
    def right(self, value: float) -> None:
        self.x = value - self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @bottom.setter
    def bottom(self, value: float) -> None:
        self.y = value - self.height

    @property
    def points(self) -> list[Point]:
        """Corners clockwise from the top-left."""
        return [
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.right, self.bottom),
            Point(self.x, self.bottom),
        ]

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    @property
    def position(self) -> Point:
        return self.pos

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def top_left(self) -> Point:
        return self.pos

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.x, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return self.pos.translate_by(self.size)

    def _edge_lines(self) -> tuple[Line, Line, Line, Line]:
        if self._stale or self._lines is None:
            top_left = self.top_left
            top_right = self.top_right
            bottom_left = self.bottom_left
            bottom_right = self.bottom_right
            self._lines = (
                Line(top_left, bottom_left),
                Line(top_left, top_right),
                Line(top_right, bottom_right),
                Line(bottom_left, bottom_right),
            )
            self._stale = False
        return self._lines

    @property
    def left_line(self) -> Line:
        return self._edge_lines()[0]

    @property
    def top_line(self) -> Line:
        return self._edge_lines()[1]

    @property
    def right_line(self) -> Line:
        return self._edge_lines()[2]

    @property
    def bottom_line(self) -> Line:
        return self._edge_lines()[3]

    # Transforms

    def interpolate(self, other: Rect, t: float) -> Self:
        return self.copy().interpolate_self(other, t)

    def interpolate_self(self, other: Rect, t: float) -> Self:
        self.x = self.x + (other.x - self.x) * t
        self.y = self.y + (other.y - self.y) * t
        self.width = self.width + (other.width - self.width) * t
        self.height = self.height + (other.height - self.height) * t
        return self

    def round(self) -> Self:
        return self.copy().round_self()

    def round_self(self) -> Self:
        self.x = round_half_up(self.x)
        self.y = round_half_up(self.y)
        self.width = round_half_up(self.width)
        self.height = round_half_up(self.height)
        return self

    def multiply(
        self,
        sx: float,
        sy: float | None = None,
        sw: float | None = None,
        sh: float | None = None,
    ) -> Self:
        return self.copy().multiply_self(sx, sy, sw, sh)

    def multiply_self(
        self,
        sx: float,
        sy: float | None = None,
        sw: float | None = None,
        sh: float | None = None,
    ) -> Self:
        """Multiply each field; ``sy`` and ``sw`` default to ``sx``, ``sh`` to ``sy``."""
        sy = sx if sy is None else sy
        self.x *= sx
        self.y *= sy
        self.width *= sx if sw is None else sw
        self.height *= sy if sh is None else sh
        return self

    def multiply_by(self, other: Shape) -> Self:
        return self.copy().multiply_by_self(other)

    def multiply_by_self(self, other: Shape) -> Self:
        self.x *= other.x
        self.y *= other.y
        self.width *= other.width
        self.height *= other.height
        return self

    def transform(self, matrix: Matrix) -> Self:
        return self.copy().transform_self(matrix)

    def transform_self(self, matrix: Matrix) -> Self:
        x, y, width, height = self.to_tuple()
        self.x = matrix.a * x + matrix.c * y + matrix.e
        self.y = matrix.b * x + matrix.d * y + matrix.f
        self.width = matrix.a * width + matrix.c * height
        self.height = matrix.b * width + matrix.d * height
        return self

    def normalize_rect(self, other: Rect) -> Self:
        return self.copy().normalize_rect_self(other)

    def normalize_rect_self(self, other: Rect) -> Self:
        """Express this rectangle in ``other``'s unit coordinates."""
        self.x = divide(self.x - other.left, other.width)
        self.y = divide(self.y - other.top, other.height)
        self.width = divide(self.width, other.width)
        self.height = divide(self.height, other.height)
        return self

    def normalize_matrix(self, matrix: Matrix) -> Self:
        return self.copy().normalize_matrix_self(matrix)

    def normalize_matrix_self(self, matrix: Matrix) -> Self:
        return self.transform_self(matrix.inverse())

    # Predicates

    def equals(self, other: Rect) -> bool:
        return (
            self.x == other.x
            and self.y == other.y
            and self.width == other.width
            and self.height == other.height
        )

    def intersection_rect(self, other: Rect) -> Intersect:
        """Overlap flags per side, with each edge inset by the edge tolerance."""
        tolerance = settings.rect_edge_tolerance
        result = Intersect.NONE
        if self.bottom - tolerance >= other.top:
            result |= Intersect.TOP
        if self.top + tolerance <= other.bottom:
            result |= Intersect.BOTTOM
        if self.right - tolerance >= other.left:
            result |= Intersect.LEFT
        if self.left + tolerance <= other.right:
            result |= Intersect.RIGHT
        return result

    def intersects_rect(self, other: Rect) -> bool:
        """True if the rectangles still overlap with each edge inset by the tolerance."""
        tolerance = settings.rect_edge_tolerance
        return not (
            self.bottom - tolerance < other.top
            or self.top + tolerance > other.bottom
            or self.right - tolerance < other.left
            or self.left + tolerance > other.right
        )

    def within_rect(self, other: Rect) -> bool:
        return (
            self.left >= other.left
            and self.right <= other.right
            and self.top >= other.top
            and self.bottom <= other.bottom
        )

    def distance_rect(self, other: Rect) -> Point:
        """Gap between the rectangles on each axis.

        On an axis where the rectangles overlap, the distance between their
        centers on that axis is reported instead.
        """
        if self.right < other.left:
            dx = other.left - self.right
        elif self.left > other.right:
            dx = self.left - other.right
        else:
            dx = abs(self.center.x - other.center.x)

        if self.bottom < other.top:
            dy = other.top - self.bottom
        elif self.top > other.bottom:
            dy = self.top - other.bottom
        else:
            dy = abs(self.center.y - other.center.y)

        return Point(dx, dy)

    def collision_response(self, other: Rect) -> Point:
        """Translation that separates this rectangle from ``other``."""
        response = self.intersect_point(other).add_by_self(other.center).sub_by_self(self.center)
        logger.debug(
            "Rect collision response",
            extra={"dx": response.x, "dy": response.y},
        )
        return response

    def place(self, other: Rect, placement: Placement) -> Self:
        return self.copy().place_self(other, placement)

    def place_self(self, other: Rect, placement: Placement) -> Self:
        """Position this rectangle next to ``other``.

        ``n``/``s`` put it above/below, ``w``/``e`` left/right, and a missing
        letter centers it on that axis. ``r`` and ``l`` shift it one more
        width to the right or left.
        """
        if placement not in PLACEMENTS:
            raise InvalidPlacementError(placement)

        if "n" in placement:
            self.y = other.top - self.height
        elif "s" in placement:
            self.y = other.bottom
        else:
            self.y = other.center.y - self.height * 0.5

        if "w" in placement:
            self.x = other.left - self.width
        elif "e" in placement:
            self.x = other.right
        else:
            self.x = other.center.x - self.width * 0.5

        if "r" in placement:
            self.x += self.width

        if "l" in placement:
            self.x -= self.width

        return self
