"""2D point / vector."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Self

from planekit.scalar import degrees_to_radians, divide, format_number, round_half_up
from planekit.shape import Shape

if TYPE_CHECKING:
    from planekit.matrix import Matrix
    from planekit.rect import Rect

_OCTILE_F = math.sqrt(2) - 1


class Point(Shape):
    """A 2D point.

    Doubles as a size: ``width`` and ``height`` are aliases of ``x`` and
    ``y``. In overlap tests a point probes as a 1×1 box centered on itself.
    """

    def __init__(self, x: float = 0.0, y: float | None = None, **data: Any) -> None:
        super().__init__(x=x, y=x if y is None else y, **data)

    @classmethod
    def from_shape(cls, shape: Shape) -> Self:
        return cls(shape.x, shape.y)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Self:
        """Translation part of an affine matrix."""
        return cls(matrix.e, matrix.f)

    @classmethod
    def from_angle(cls, radians: float) -> Self:
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_angle_degrees(cls, degrees: float) -> Self:
        return cls.from_angle(degrees_to_radians(degrees))

    @staticmethod
    def compare(a: Point | None, b: Point) -> bool:
        return a.equals(b) if a is not None else False

    def __str__(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)}"

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.to_tuple())

    def set(self, other: Shape) -> Self:
        self.x = other.x
        self.y = other.y
        return self

    @property
    def width(self) -> float:
        return self.x

    @width.setter
    def width(self, value: float) -> None:
        self.x = value

    @property
    def height(self) -> float:
        return self.y

    @height.setter
    def height(self, value: float) -> None:
        self.y = value

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
        return Point(self.x, self.y)

    def _probe(self) -> Shape:
        return Point(1, 1)

    def interpolate(self, other: Point, t: float) -> Self:
        return self.copy().interpolate_self(other, t)

    def interpolate_self(self, other: Point, t: float) -> Self:
        self.x = self.x + (other.x - self.x) * t
        self.y = self.y + (other.y - self.y) * t
        return self

    def diff(self, other: Point) -> Self:
        return self.copy().diff_self(other)

    def diff_self(self, other: Point) -> Self:
        self.x -= other.x
        self.y -= other.y
        return self

    def abs(self) -> Self:
        return self.copy().abs_self()

    def abs_self(self) -> Self:
        self.x = abs(self.x)
        self.y = abs(self.y)
        return self

    def square(self) -> Self:
        return self.copy().square_self()

    def square_self(self) -> Self:
        self.x *= self.x
        self.y *= self.y
        return self

    def sum(self) -> float:
        return self.x + self.y

    def max(self) -> float:
        """Returns the larger component."""
        return max(self.x, self.y)

    def min(self) -> float:
        """Returns the smaller component."""
        return min(self.x, self.y)

    def absolute_sum(self) -> float:
        return abs(self.x) + abs(self.y)

    def clamp_self(self, low: float, high: float) -> Self:
        if self.x < low:
            self.x = low
        elif self.x > high:
            self.x = high

        if self.y < low:
            self.y = low
        elif self.y > high:
            self.y = high

        return self

    def clamp_min_self(self, low: float) -> Self:
        if self.x < low:
            self.x = low
        if self.y < low:
            self.y = low
        return self

    # Metrics

    def manhattan(self, other: Point) -> float:
        return self.diff(other).abs_self().sum()

    def octile(self, other: Point) -> float:
        d = self.diff(other).abs_self()
        return _OCTILE_F * d.x + d.y if d.x < d.y else _OCTILE_F * d.y + d.x

    def chebyshev(self, other: Point) -> float:
        return self.diff(other).abs_self().max()

    def euclidean(self, other: Point) -> float:
        return self.distance(other)

    def distance(self, other: Point) -> float:
        return self.diff(other).mag()

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def length(self) -> float:
        return self.mag()

    def unit(self) -> Self:
        """Unit vector; a zero vector yields NaN components."""
        return self.scale(divide(1, self.mag()))

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def normal(self) -> Point:
        """Perpendicular vector ``(y, -x)``."""
        return Point(self.y, -self.x)

    def angle_to(self, other: Point) -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    # Rounding

    def round(self) -> Self:
        return self.copy().round_self()

    def round_self(self) -> Self:
        self.x = round_half_up(self.x)
        self.y = round_half_up(self.y)
        return self

    def precision_round(self, p: float = 1) -> Self:
        return self.copy().precision_round_self(p)

    def precision_round_self(self, p: float = 1) -> Self:
        self.x = round_half_up(self.x * p) / p
        self.y = round_half_up(self.y * p) / p
        return self

    def grid_round(self, p: float = 1) -> Self:
        return self.copy().grid_round_self(p)

    def grid_round_self(self, p: float = 1) -> Self:
        self.x = round_half_up(self.x / p) * p
        self.y = round_half_up(self.y / p) * p
        return self

    def within_rect(self, other: Rect) -> bool:
        return (
            self.x >= other.left
            and self.x <= other.right
            and self.y >= other.top
            and self.y <= other.bottom
        )

    # Transforms

    def transform(self, matrix: Matrix) -> Self:
        return self.copy().transform_self(matrix)

    def transform_self(self, matrix: Matrix) -> Self:
        x, y = self.x, self.y
        self.x = matrix.a * x + matrix.c * y + matrix.e
        self.y = matrix.b * x + matrix.d * y + matrix.f
        return self

    def multiply(self, sx: float, sy: float | None = None) -> Self:
        return self.copy().multiply_self(sx, sy)

    def multiply_self(self, sx: float, sy: float | None = None) -> Self:
        self.x *= sx
        self.y *= sx if sy is None else sy
        return self

    def multiply_by(self, other: Shape) -> Self:
        return self.copy().multiply_by_self(other)

    def multiply_by_self(self, other: Shape) -> Self:
        self.x *= other.x
        self.y *= other.y
        return self

    def normalize(self, sx: float | None = None, sy: float | None = None) -> Self:
        return self.copy().normalize_self(sx, sy)

    def normalize_self(self, sx: float | None = None, sy: float | None = None) -> Self:
        """Divide by ``(sx, sy)``; ``sx`` defaults to the magnitude, ``sy`` to ``sx``."""
        if sx is None:
            sx = self.mag()
        if sy is None:
            sy = sx
        self.x = divide(self.x, sx)
        self.y = divide(self.y, sy)
        return self

    def normalize_by(self, other: Point) -> Self:
        return self.copy().normalize_by_self(other)

    def normalize_by_self(self, other: Point) -> Self:
        self.x = divide(self.x, other.x)
        self.y = divide(self.y, other.y)
        return self

    def normalize_rect(self, rect: Rect) -> Self:
        return self.copy().normalize_rect_self(rect)

    def normalize_rect_self(self, rect: Rect) -> Self:
        """Express this point in ``rect``'s unit coordinates."""
        self.x = divide(self.x - rect.x, rect.width)
        self.y = divide(self.y - rect.y, rect.height)
        return self

    def normalize_matrix(self, matrix: Matrix) -> Self:
        return self.copy().normalize_matrix_self(matrix)

    def normalize_matrix_self(self, matrix: Matrix) -> Self:
        self.x = divide(self.x - matrix.e, matrix.a)
        self.y = divide(self.y - matrix.f, matrix.d)
        return self

    def equals(self, other: Point) -> bool:
        return self.x == other.x and self.y == other.y

    def equals_any(self, other: Point) -> bool:
        return self.x == other.x or self.y == other.y
