"""2D affine transformation matrix."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from planekit.scalar import degrees_to_radians

if TYPE_CHECKING:
    from planekit.point import Point

_MATRIX_RE = re.compile(r"matrix\(([^)]*)\)")


class Matrix(BaseModel):
    """An affine matrix ``[a c e; b d f; 0 0 1]``.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``. Every operation
    returns a new matrix; ``m.translate(...)`` post-multiplies like a canvas
    transform does.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        e: float = 0.0,
        f: float = 0.0,
        **data: Any,
    ) -> None:
        super().__init__(a=a, b=b, c=c, d=d, e=e, f=f, **data)

    @classmethod
    def identity(cls) -> Matrix:
        return cls()

    @classmethod
    def from_string(cls, value: str) -> Matrix:
        """Parse a CSS ``matrix(a, b, c, d, e, f)`` string."""
        match = _MATRIX_RE.search(value)
        if not match:
            raise ValueError(f"Not a matrix() string: {value!r}")
        parts = [float(part) for part in match.group(1).split(",")]
        if len(parts) != 6:
            raise ValueError(f"matrix() needs 6 values, got {len(parts)}")
        return cls(*parts)

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def is_invertible(self) -> bool:
        det = self.determinant
        return det != 0 and math.isfinite(det)

    def multiply(self, other: Matrix) -> Matrix:
        """Return ``self · other``."""
        return Matrix(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def inverse(self) -> Matrix:
        """Inverse matrix; a singular matrix inverts to all-NaN entries."""
        if not self.is_invertible:
            return Matrix(*([math.nan] * 6))
        det = self.determinant
        return Matrix(
            self.d / det,
            -self.b / det,
            -self.c / det,
            self.a / det,
            (self.c * self.f - self.d * self.e) / det,
            (self.b * self.e - self.a * self.f) / det,
        )

    def translate(self, tx: float, ty: float = 0.0) -> Matrix:
        return self.multiply(Matrix(e=tx, f=ty))

    def scale(self, sx: float, sy: float | None = None) -> Matrix:
        return self.multiply(Matrix(a=sx, d=sx if sy is None else sy))

    def rotate(self, degrees: float) -> Matrix:
        radians = degrees_to_radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return self.multiply(Matrix(cos, sin, -sin, cos, 0.0, 0.0))

    def flip_x(self) -> Matrix:
        return self.multiply(Matrix(a=-1.0))

    def flip_y(self) -> Matrix:
        return self.multiply(Matrix(d=-1.0))

    def transform_point(self, point: Point) -> Point:
        return point.transform(self)
