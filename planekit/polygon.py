"""Polygons: ordered point sequences.

Collision (separating axis test), bounds, morphing and point-sequence
simplification. The sequence algorithms are static so they work on plain
lists of points; a ``Polygon`` instance is only needed for ``sat``.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from planekit import resampling
from planekit.config import settings
from planekit.errors import require_points
from planekit.morph import MorphMode, get_morph_fn, morph_points
from planekit.point import Point
from planekit.polyline import Polyline
from planekit.rect import Rect
from planekit.svg import points_to_path

logger = logging.getLogger(__name__)

_MAX_VALUE = sys.float_info.max


class Polygon(BaseModel):
    """An ordered sequence of points.

    Not required to be closed; for edges the last point joins the first.
    """

    points: list[Point] = []

    def __init__(self, points: Sequence[Point] = (), **data: Any) -> None:
        super().__init__(points=list(points), **data)

    @property
    def polyline(self) -> Polyline:
        return Polyline.from_points(self.points)

    @staticmethod
    def to_svg_path(points: Sequence[Point]) -> str:
        return points_to_path(points)

    @staticmethod
    def sum(points: Sequence[Point]) -> Point:
        total = Point()
        for p in points:
            total.x += p.x
            total.y += p.y
        return total

    @staticmethod
    def bounding_rect(points: Sequence[Point]) -> Rect:
        require_points(points, "bounding_rect")
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    @staticmethod
    def rope(points: Sequence[Point], coeff: float | None = None) -> list[Point]:
        """Relax interior points toward their successors, like a hanging rope.

        Walks from the last interior point back to the first. Each step moves
        the point toward the current anchor by the anchor's segment share of
        the total length, weighted by ``t ** coeff`` where ``t`` is the
        parametric position; the anchor is pushed back by the same amount.
        The end points are restored afterwards.
        """
        require_points(points, "rope")
        if coeff is None:
            coeff = settings.rope_coeff

        first = points[0].copy()
        last = points[-1].copy()

        normals = Polyline.from_points(points).normals
        result = [p.copy() for p in points]
        count = len(points)
        last_index = count - 1
        c = last_index / count

        anchor = last.copy()
        for i in range(last_index - 1, -1, -1):
            t = (i + 1) / last_index
            current = result[i]
            normal = normals[math.ceil(i * c)]
            d = anchor.screen(current).scale(normal).scale(t**coeff)
            anchor.translate_by_self(d.negate())
            current.translate_by_self(d)
            anchor = current

        result[0] = first.copy()
        result[-1] = last.copy()
        logger.debug("Roped points", extra={"point_count": count, "coeff": coeff})
        return result

    @staticmethod
    def chop(
        points: Sequence[Point],
        min_length: float | None = None,
        max_length: float | None = None,
    ) -> list[Point]:
        """Simplify a point sequence by segment length.

        A segment no longer than ``min_length`` is dropped, pulling the last
        kept point halfway toward its start. A segment longer than
        ``max_length`` contributes an extra point offset from its start by
        the segment vector. The first and last points are kept exactly; the
        input points are not modified.
        """
        require_points(points, "chop")
        if min_length is None:
            min_length = settings.chop_min
        if max_length is None:
            max_length = settings.chop_max

        first = points[0].copy()
        last = points[-1].copy()

        chopped: list[Point] = []
        for line in Polyline.from_points(points).lines:
            mag = line.mag()
            if mag > min_length:
                chopped.append(line.p1.copy())
            elif chopped:
                kept = chopped[-1]
                kept.translate_by_self(line.p1.screen(kept).scale(0.5))
            if mag > max_length:
                d = line.p2.screen(line.p1)
                chopped.append(line.p1.translate_by(d))

        if chopped:
            chopped[0] = first
        else:
            chopped.append(first)
        chopped.append(last)

        logger.debug(
            "Chopped points",
            extra={"point_count": len(points), "result_count": len(chopped)},
        )
        return chopped

    @staticmethod
    def morph(
        mode: MorphMode | str, from_: Sequence[Point], to: Sequence[Point], t: float
    ) -> Sequence[Point]:
        """Blend two point sequences; returns ``to`` itself once ``t >= 1``."""
        return morph_points(get_morph_fn(mode), from_, to, t)

    @staticmethod
    def resample(points: Sequence[Point], index: int, t: float) -> Point:
        return resampling.resample(points, index, t)

    @staticmethod
    def resample_cubic(points: Sequence[Point], index: int, t: float) -> Point:
        return resampling.resample_cubic(points, index, t)

    @staticmethod
    def resample_spline(points: Sequence[Point], index: int, t: float) -> Point:
        return resampling.resample_spline(points, index, t)

    @staticmethod
    def fit(points: Sequence[Point], length: int) -> list[Point]:
        return resampling.fit(points, length)

    @staticmethod
    def sat(p1: Polygon, p2: Polygon) -> Point | None:
        """Separating axis test between two convex polygons.

        Returns None if some edge normal separates them (zero overlap counts
        as separated). Otherwise returns the normal with the smallest overlap
        scaled by the signed overlap; the first such axis wins ties.
        """
        overlap = _MAX_VALUE
        displacement = Point()
        for poly in (p1, p2):
            count = len(poly.points)
            for i in range(count):
                a = poly.points[i]
                b = poly.points[(i + 1) % count]
                axis = b.sub_by(a).normal().unit()
                # zero-length edge
                if math.isnan(axis.x) or math.isnan(axis.y):
                    continue

                min1, max1 = _project(p1.points, axis)
                min2, max2 = _project(p2.points, axis)

                o = min(max1, max2) - max(min1, min2)
                if o <= 0:
                    logger.debug("Separating axis found", extra={"edge": i})
                    return None
                if o < abs(overlap):
                    o1 = max2 - min1
                    o2 = min2 - max1
                    overlap = o1 if abs(o1) < abs(o2) else o2
                    displacement = axis.scale(overlap)
        return displacement

    def collides(self, other: Polygon) -> Point | None:
        return Polygon.sat(self, other)

    def bounds(self) -> Rect:
        return Polygon.bounding_rect(self.points)


def _project(points: Sequence[Point], axis: Point) -> tuple[float, float]:
    low = _MAX_VALUE
    high = -_MAX_VALUE
    for p in points:
        q = p.dot(axis)
        low = min(low, q)
        high = max(high, q)
    return low, high


