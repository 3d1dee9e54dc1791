"""Line segments and their intersection tests."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel

from planekit.intersect import Intersect
from planekit.point import Point
from planekit.scalar import radians_to_degrees

if TYPE_CHECKING:
    from planekit.rect import Rect

logger = logging.getLogger(__name__)


class Line(BaseModel):
    """A segment from ``p1`` to ``p2``.

    The endpoints are held, not copied: mutating a point passed in moves the
    line. Direction matters for collision response, where ``p1`` is pushed
    out through the left/top edges and ``p2`` through the right/bottom ones.
    """

    p1: Point
    p2: Point

    def __init__(self, p1: Point, p2: Point, **data: Any) -> None:
        super().__init__(p1=p1, p2=p2, **data)

    @classmethod
    def from_line(cls, line: Line) -> Self:
        """Deep copy of another line."""
        return cls(line.p1.copy(), line.p2.copy())

    def copy(self) -> Self:  # type: ignore[override]
        return self.from_line(self)

    @property
    def points(self) -> list[Point]:
        return [self.p1, self.p2]

    def __iter__(self) -> Iterator[Point]:  # type: ignore[override]
        return iter(self.points)

    def angle(self) -> float:
        return math.atan2(self.p2.y - self.p1.y, self.p2.x - self.p1.x)

    def angle_degrees(self) -> float:
        return radians_to_degrees(self.angle())

    def mag(self) -> float:
        return self.p1.distance(self.p2)

    def dot(self) -> float:
        """Dot product of the endpoints taken as vectors from the origin."""
        return self.p1.x * self.p2.x + self.p1.y * self.p2.y

    def translate(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.copy().translate_self(dx, dy)

    def translate_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        self.p1.translate_self(dx, dy)
        self.p2.translate_self(dx, dy)
        return self

    def translate_by(self, other: Point) -> Self:
        return self.copy().translate_by_self(other)

    def translate_by_self(self, other: Point) -> Self:
        self.p1.translate_by_self(other)
        self.p2.translate_by_self(other)
        return self

    def intersects_line(self, other: Line) -> bool:
        """Segment/segment test.

        Parallel and collinear segments (zero determinant) never intersect,
        even when they overlap. Touching endpoints do.
        """
        a1, a2 = self.p1, self.p2
        b1, b2 = other.p1, other.p2

        d = (a2.x - a1.x) * (b2.y - b1.y) - (a2.y - a1.y) * (b2.x - b1.x)
        if d == 0:
            return False

        q = (a1.y - b1.y) * (b2.x - b1.x) - (a1.x - b1.x) * (b2.y - b1.y)
        r = q / d

        q = (a1.y - b1.y) * (a2.x - a1.x) - (a1.x - b1.x) * (a2.y - a1.y)
        s = q / d

        return 0 <= r <= 1 and 0 <= s <= 1

    def _inside(self, rect: Rect) -> bool:
        return self.p1.within_rect(rect) and self.p2.within_rect(rect)

    def intersects_rect(self, rect: Rect) -> Intersect:
        """First edge crossed, checked in left, top, right, bottom order.

        Falls back to INSIDE when both endpoints lie within the rectangle.
        """
        if self.intersects_line(rect.left_line):
            return Intersect.LEFT
        if self.intersects_line(rect.top_line):
            return Intersect.TOP
        if self.intersects_line(rect.right_line):
            return Intersect.RIGHT
        if self.intersects_line(rect.bottom_line):
            return Intersect.BOTTOM
        if self._inside(rect):
            return Intersect.INSIDE
        return Intersect.NONE

    def intersection_rect(self, rect: Rect) -> Intersect:
        """Every edge crossed, plus INSIDE, combined into one flag set."""
        result = Intersect.NONE
        if self.intersects_line(rect.left_line):
            result |= Intersect.LEFT
        if self.intersects_line(rect.top_line):
            result |= Intersect.TOP
        if self.intersects_line(rect.right_line):
            result |= Intersect.RIGHT
        if self.intersects_line(rect.bottom_line):
            result |= Intersect.BOTTOM
        if self._inside(rect):
            result |= Intersect.INSIDE
        return result

    def line_to_rect_collision_response(self, intersection: Intersect, rect: Rect) -> Line:
        """Return a line moved just outside ``rect``.

        Each edge flag pushes the matching endpoint coordinate one unit past
        that edge. INSIDE collapses both endpoints onto the point where the
        segment's midpoint would touch the rectangle. NONE returns this line.
        """
        if intersection == Intersect.NONE:
            return self

        a1 = self.p1.copy()
        a2 = self.p2.copy()

        top_left = rect.top_left
        bottom_right = rect.bottom_right

        if intersection & Intersect.LEFT:
            a1.x = top_left.x - 1
        if intersection & Intersect.TOP:
            a1.y = top_left.y - 1
        if intersection & Intersect.RIGHT:
            a2.x = bottom_right.x + 1
        if intersection & Intersect.BOTTOM:
            a2.y = bottom_right.y + 1
        if intersection & Intersect.INSIDE:
            tp = self.p1.interpolate(self.p2, 0.5).touch_point(rect)
            a1.set(tp)
            a2.set(tp)
            logger.debug(
                "Collapsed segment inside rect onto touch point",
                extra={"touch_x": tp.x, "touch_y": tp.y},
            )

        return Line(a1, a2)
