"""Exceptions raised on violated geometry preconditions."""

from collections.abc import Sequence
from typing import Any


class GeometryError(ValueError):
    """Base class for geometry precondition errors."""


class EmptyPointSequenceError(GeometryError):
    """An operation that needs at least one point was given none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty point sequence")


class InvalidPlacementError(GeometryError):
    """A placement code contains no known direction letter."""

    def __init__(self, placement: str) -> None:
        self.placement = placement
        super().__init__(f"Unknown placement: {placement!r}")


def require_points(points: Sequence[Any], operation: str) -> None:
    """Raise EmptyPointSequenceError if ``points`` is empty."""
    if not points:
        raise EmptyPointSequenceError(operation)
