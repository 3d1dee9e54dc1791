"""Edge flags reported by line/rect intersection tests."""

from enum import IntFlag


class Intersect(IntFlag):
    """Which boundaries of a rectangle a segment touches.

    Values are powers of two so results combine with ``|`` and test with ``&``.
    """

    NONE = 0
    LEFT = 1
    TOP = 2
    RIGHT = 4
    BOTTOM = 8
    INSIDE = 16
