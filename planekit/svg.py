"""SVG path strings for point sequences and rectangles."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from planekit.scalar import format_number

if TYPE_CHECKING:
    from planekit.point import Point
    from planekit.rect import Rect

EMPTY_PATH = "M 0 0"


def points_to_path(points: Sequence[Point]) -> str:
    """``M x y L x y ...`` through every point; ``M 0 0`` when empty."""
    if not points:
        return EMPTY_PATH
    parts = [f"M {points[0]}"]
    parts.extend(f"L {p}" for p in points[1:])
    return " ".join(parts)


def rect_to_path(rect: Rect) -> str:
    """Closed relative path around a rectangle."""
    x, y, w, h = (format_number(v) for v in rect.to_tuple())
    return f"M {x} {y} h {w} v {h} h {format_number(-rect.width)} v {format_number(-rect.height)}"


def cardinal(points: Sequence[Point], closed: bool = False, tension: float = 1.0) -> str:
    """Cardinal spline through ``points`` as cubic bezier segments.

    A uniform Catmull-Rom spline with a tension factor. Open splines repeat
    the end points as their outer control points; closed ones wrap around.
    """
    if not points:
        return EMPTY_PATH

    size = len(points) - (0 if closed else 1)
    parts: list[str] = [f"M {points[0]} C"]

    for i in range(size):
        if closed:
            p0 = points[(i - 1 + size) % size]
            p1 = points[i]
            p2 = points[(i + 1) % size]
            p3 = points[(i + 2) % size]
        else:
            p0 = points[0] if i == 0 else points[i - 1]
            p1 = points[i]
            p2 = points[i + 1]
            p3 = p2 if i == size - 1 else points[i + 2]

        x1 = p1.x + ((p2.x - p0.x) / 6) * tension
        y1 = p1.y + ((p2.y - p0.y) / 6) * tension

        x2 = p2.x - ((p3.x - p1.x) / 6) * tension
        y2 = p2.y - ((p3.y - p1.y) / 6) * tension

        parts.extend(format_number(v) for v in (x1, y1, x2, y2, p2.x, p2.y))

    if closed:
        parts.append("z")

    return " ".join(parts)
