"""Planar geometry kernel.

Shape primitives and the algorithms around them:
- scalar: interpolation, angle conversion, IEEE-754 helpers
- point: 2D point / vector with metrics and transforms
- line: segments, segment/segment and segment/rect intersection
- shape: the position + extent capability and box overlap resolution
- rect: axis-aligned rectangles, overlap predicates, collision response
- polyline / polygon: point sequences, SAT collision, rope/chop
- resampling / morph: curve resampling and sequence morphing
- svg: SVG path strings
"""

from planekit.errors import EmptyPointSequenceError, GeometryError, InvalidPlacementError
from planekit.intersect import Intersect
from planekit.line import Line
from planekit.matrix import Matrix
from planekit.morph import MorphMode, get_morph_fn, morph_coeffs, morph_points
from planekit.point import Point
from planekit.polygon import Polygon
from planekit.polyline import Polyline
from planekit.rect import PLACEMENTS, Placement, Rect
from planekit.resampling import fit, resample, resample_cubic, resample_spline
from planekit.scalar import clamp, degrees_to_radians, interpolate, radians_to_degrees
from planekit.shape import Shape
from planekit.svg import cardinal, points_to_path, rect_to_path

__all__ = [
    # Shapes
    "Line",
    "Point",
    "Polygon",
    "Polyline",
    "Rect",
    "Shape",
    # Intersection
    "Intersect",
    # Placement
    "PLACEMENTS",
    "Placement",
    # Transforms
    "Matrix",
    # Scalar
    "clamp",
    "degrees_to_radians",
    "interpolate",
    "radians_to_degrees",
    # Resampling
    "MorphMode",
    "fit",
    "get_morph_fn",
    "morph_coeffs",
    "morph_points",
    "resample",
    "resample_cubic",
    "resample_spline",
    # SVG
    "cardinal",
    "points_to_path",
    "rect_to_path",
    # Errors
    "EmptyPointSequenceError",
    "GeometryError",
    "InvalidPlacementError",
]
