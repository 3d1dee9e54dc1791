"""Pure functions for resampling point sequences.

Each function reads a point at a fractional position ``index + t`` along an
ordered sequence. Source indices are clamped to the sequence at both ends;
nothing wraps around. No side effects: input points are never mutated.
"""

import logging
from collections.abc import Sequence

from planekit.errors import require_points
from planekit.point import Point
from planekit.scalar import divide, round_half_up

logger = logging.getLogger(__name__)

# 1/24, truncated as in the reference 6-point spline
SPLINE_K = 0.04166666666


def _at(points: Sequence[Point], index: int) -> Point:
    return points[max(0, min(index, len(points) - 1))]


def resample(points: Sequence[Point], index: int, t: float) -> Point:
    """Blend a tangent-extrapolated point with the direct interpolation.

    The neighbours on either side are pulled toward ``points[index]`` by
    ``t`` and ``1 - t``, averaged, and the result is interpolated from
    ``points[index]`` by ``t`` once more.
    """
    require_points(points, "resample")
    p_0 = _at(points, index)
    p_prev = _at(points, index - 1)
    p_next = _at(points, index + 1)

    blend = p_prev.interpolate(p_0, t).translate_by_self(p_0.interpolate(p_next, 1 - t)).scale(0.5)
    return p_0.interpolate(blend, t)


def resample_cubic(points: Sequence[Point], index: int, t: float) -> Point:
    """Catmull-Rom style cubic through the 4 points around ``int(index + t)``."""
    require_points(points, "resample_cubic")
    i = int(index + t)
    p_prev = _at(points, i - 1)
    p0 = _at(points, i)
    p1 = _at(points, i + 1)
    p2 = _at(points, i + 2)

    ax = (3 * (p0.x - p1.x) - p_prev.x + p2.x) * 0.5
    bx = 2 * p1.x + p_prev.x - (5 * p0.x + p2.x) * 0.5
    cx = (p1.x - p_prev.x) * 0.5
    x = (((ax * t) + bx) * t + cx) * t + p0.x

    ay = (3 * (p0.y - p1.y) - p_prev.y + p2.y) * 0.5
    by = 2 * p1.y + p_prev.y - (5 * p0.y + p2.y) * 0.5
    cy = (p1.y - p_prev.y) * 0.5
    y = (((ay * t) + by) * t + cy) * t + p0.y

    return Point(x, y)


def _spline_axis(v0: float, v1: float, v2: float, v3: float, v4: float, v5: float, t: float) -> float:
    return v2 + SPLINE_K * t * (
        (v3 - v1) * 16.0
        + (v0 - v4) * 2.0
        + t
        * (
            (v3 + v1) * 16.0
            - v0
            - v2 * 30.0
            - v4
            + t
            * (
                v3 * 66.0
                - v2 * 70.0
                - v4 * 33.0
                + v1 * 39.0
                + v5 * 7.0
                - v0 * 9.0
                + t
                * (
                    v2 * 126.0
                    - v3 * 124.0
                    + v4 * 61.0
                    - v1 * 64.0
                    - v5 * 12.0
                    + v0 * 13.0
                    + t * ((v3 - v2) * 50.0 + (v1 - v4) * 25.0 + (v5 - v0) * 5.0)
                )
            )
        )
    )


def resample_spline(points: Sequence[Point], index: int, t: float) -> Point:
    """6-point spline through ``points[index - 2 .. index + 3]``."""
    require_points(points, "resample_spline")
    p = [_at(points, index + offset) for offset in range(-2, 4)]
    return Point(
        _spline_axis(*(q.x for q in p), t),
        _spline_axis(*(q.y for q in p), t),
    )


def fit(points: Sequence[Point], length: int) -> list[Point]:
    """Resample ``points`` to exactly ``length`` points by nearest index.

    A ``length`` of zero or less gives an empty list.
    """
    require_points(points, "fit")
    coeff = divide(len(points), length)

    def sample(i: int) -> Point:
        index = int(round_half_up(i * coeff))
        p_0 = _at(points, index)
        p_prev = _at(points, index - 1)
        p_next = _at(points, index + 1)
        blend = p_prev.interpolate(p_0, 1).translate_by_self(p_0.interpolate(p_next, 0)).scale(0.5)
        return p_0.interpolate(blend, 0.5)

    logger.debug("Fitting points", extra={"source_count": len(points), "target_count": length})
    return [sample(i) for i in range(length)]
