"""Shape capability shared by points and rectangles.

A shape exposes a position (``x``, ``y``) and an extent (``width``,
``height``). Points alias their extent onto their position; rectangles carry
both. The vector algebra here and the box-overlap resolution used for
collision response work on either.

Every mutating method ends in ``_self`` and returns the same instance; its
counterpart without the suffix works on a copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel

from planekit.scalar import divide, sign

if TYPE_CHECKING:
    from planekit.point import Point
    from planekit.rect import Rect


class Shape(BaseModel):
    """Base for anything with a position and an extent.

    Subclasses provide ``width`` and ``height`` (as fields or as properties)
    and ``center``.
    """

    x: float = 0.0
    y: float = 0.0

    # Edges. A bare shape has no extent on its edges, so right/bottom
    # coincide with left/top; Rect overrides them.

    @property
    def left(self) -> float:
        return self.x

    @left.setter
    def left(self, value: float) -> None:
        self.x = value

    @property
    def top(self) -> float:
        return self.y

    @top.setter
    def top(self, value: float) -> None:
        self.y = value

    @property
    def right(self) -> float:
        return self.x

    @right.setter
    def right(self, value: float) -> None:
        self.x = value

    @property
    def bottom(self) -> float:
        return self.y

    @bottom.setter
    def bottom(self, value: float) -> None:
        self.y = value

    def copy(self) -> Self:  # type: ignore[override]
        """Return an independent copy of the same concrete class."""
        return self.model_copy()

    def _probe(self) -> Shape:
        """The box this shape occupies in overlap tests."""
        return self

    # Translation

    def translate(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.copy().translate_self(dx, dy)

    def translate_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        self.x += dx
        self.y += dx if dy is None else dy
        return self

    def translate_by(self, other: Shape) -> Self:
        return self.copy().translate_by_self(other)

    def translate_by_self(self, other: Shape) -> Self:
        self.x += other.x
        self.y += other.y
        return self

    def add(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.translate(dx, dy)

    def add_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.translate_self(dx, dy)

    def add_by(self, other: Shape) -> Self:
        return self.translate_by(other)

    def add_by_self(self, other: Shape) -> Self:
        return self.translate_by_self(other)

    def sub(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.copy().sub_self(dx, dy)

    def sub_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.translate_self(-dx, -(dx if dy is None else dy))

    def sub_by(self, other: Shape) -> Self:
        return self.copy().sub_by_self(other)

    def sub_by_self(self, other: Shape) -> Self:
        return self.translate_by_self(other.negate())

    def negate(self) -> Self:
        return self.copy().negate_self()

    def negate_self(self) -> Self:
        self.x = -self.x
        self.y = -self.y
        return self

    def screen(self, other: Shape | None = None) -> Self:
        """Vector from ``other`` to this shape's position."""
        return self.copy().screen_self(other)

    def screen_self(self, other: Shape | None = None) -> Self:
        return self.translate_by_self((self if other is None else other).negate())

    def contain(self, other: Rect) -> Self:
        return self.copy().contain_self(other)

    def contain_self(self, other: Rect) -> Self:
        """Move this shape back inside ``other``, one edge per axis."""
        if self.top < other.top:
            self.top = other.top
        elif self.bottom > other.bottom:
            self.bottom = other.bottom

        if self.right > other.right:
            self.right = other.right
        elif self.left < other.left:
            self.left = other.left

        return self

    # Extent

    def scale(self, sx: float = 0.0, sy: float | None = None) -> Self:
        return self.copy().scale_self(sx, sy)

    def scale_self(self, sx: float = 0.0, sy: float | None = None) -> Self:
        self.width *= sx
        self.height *= sx if sy is None else sy
        return self

    def scale_by(self, other: Shape) -> Self:
        return self.copy().scale_by_self(other)

    def scale_by_self(self, other: Shape) -> Self:
        self.width *= other.width
        self.height *= other.height
        return self

    def scale_linear(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.copy().scale_linear_self(dx, dy)

    def scale_linear_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        self.width += dx
        self.height += dx if dy is None else dy
        return self

    def scale_linear_by(self, other: Shape) -> Self:
        return self.copy().scale_linear_by_self(other)

    def scale_linear_by_self(self, other: Shape) -> Self:
        self.width += other.width
        self.height += other.height
        return self

    def zoom_linear(self, dx: float = 0.0, dy: float | None = None) -> Self:
        return self.copy().zoom_linear_self(dx, dy)

    def zoom_linear_self(self, dx: float = 0.0, dy: float | None = None) -> Self:
        """Grow the extent and shift back by half the growth."""
        dy = dx if dy is None else dy
        return self.scale_linear_self(dx, dy).translate_self(dx * -0.5, dy * -0.5)

    def zoom_linear_by(self, other: Shape) -> Self:
        return self.copy().zoom_linear_by_self(other)

    def zoom_linear_by_self(self, other: Shape) -> Self:
        return self.scale_linear_by_self(other).translate_by_self(other.scale(-0.5))

    # Overlap resolution

    def intersect_point(self, other: Rect, center: Point | None = None) -> Point:
        """Minimum translation of this box out of ``other``, from ``other.center``.

        The separating axis is chosen by comparing the slope of the
        center-to-center vector with the slope of the combined half extents.
        A vertical center vector (``dx == 0``) has an infinite slope and
        resolves vertically; coincident centers produce NaN.
        """
        from planekit.point import Point

        probe = self._probe()
        if center is None:
            center = self.center  # type: ignore[attr-defined]
        w = (probe.width + other.width) * 0.5
        h = (probe.height + other.height) * 0.5
        d = center.screen(other.center)

        tan_phi = divide(h, w)
        tan_theta = abs(divide(d.y, d.x))

        qx = sign(d.x)
        qy = sign(d.y)

        if tan_theta > tan_phi:
            x_i = divide(h, tan_theta) * qx
            y_i = h * qy
        else:
            x_i = w * qx
            y_i = w * tan_theta * qy

        return Point(x_i, y_i)

    def touch_point(self, other: Rect, center: Point | None = None) -> Point:
        """Absolute position that places this box against ``other``."""
        from planekit.point import Point

        probe = self._probe()
        i = self.intersect_point(other, center).translate_by_self(other.center)
        return Point(i.x - probe.width * 0.5, i.y - probe.height * 0.5)

    def to_position_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_size_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}
