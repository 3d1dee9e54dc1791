"""Polylines: chains of segments sharing endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel

from planekit.errors import EmptyPointSequenceError
from planekit.line import Line
from planekit.point import Point
from planekit.scalar import divide

if TYPE_CHECKING:
    from planekit.polygon import Polygon


class Polyline(BaseModel):
    """Ordered segments where each ``p2`` is the next segment's ``p1``.

    The shared-endpoint invariant is kept by ``from_points`` and
    ``chop_at``; lines passed in directly are taken as they are.
    """

    lines: list[Line] = []

    def __init__(self, lines: Sequence[Line] = (), **data: Any) -> None:
        super().__init__(lines=list(lines), **data)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> Self:
        return cls([Line(p, n) for p, n in zip(points[:-1], points[1:], strict=True)])

    @property
    def normals(self) -> list[float]:
        """Each segment's share of the total length."""
        mags = [line.mag() for line in self.lines]
        total = sum(mags)
        return [divide(mag, total) for mag in mags]

    @property
    def path(self) -> Polygon:
        """The point path the segments trace."""
        from planekit.polygon import Polygon

        if not self.lines:
            raise EmptyPointSequenceError("Polyline.path")
        return Polygon([line.p1 for line in self.lines] + [self.lines[-1].p2])

    @property
    def length(self) -> float:
        return sum(line.mag() for line in self.lines)

    def chop_at(self, index: int) -> Self:
        """Split segment ``index`` at its midpoint."""
        if not self.lines:
            raise EmptyPointSequenceError("Polyline.chop_at")
        points: list[Point] = []
        for i, line in enumerate(self.lines):
            points.append(line.p1)
            if i == index:
                points.append(line.p1.interpolate(line.p2, 0.5))
        points.append(self.lines[-1].p2)
        self.lines = type(self).from_points(points).lines
        return self
