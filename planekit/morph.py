"""Morphing between two point sequences of possibly different lengths."""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from planekit.errors import require_points
from planekit.point import Point
from planekit.resampling import resample, resample_cubic, resample_spline
from planekit.scalar import divide, round_half_up

logger = logging.getLogger(__name__)

# Maps (from_index, to_index, t) to one output point
Sampler = Callable[[int, int, float], Point]

# Builds a sampler for a pair of sequences
MorphFn = Callable[[Sequence[Point], Sequence[Point]], Sampler]


class MorphMode(str, Enum):
    """How source points are picked before blending."""

    NEAREST = "nearest"
    LINEAR = "linear"
    CUBIC = "cubic"
    SPLINE = "spline"


def morph_coeffs(from_: Sequence[Point], to: Sequence[Point]) -> tuple[int, float, float]:
    """Output length and the index scale factors for each source."""
    length = max(len(from_), len(to))
    return length, divide(len(from_), length), divide(len(to), length)


def nearest(from_: Sequence[Point], to: Sequence[Point]) -> Sampler:
    from_last = len(from_) - 1
    to_last = len(to) - 1

    def sample(fi: int, ti: int, t: float) -> Point:
        return from_[min(fi, from_last)].interpolate(to[min(ti, to_last)], t)

    return sample


def _resampled(resampler: Callable[[Sequence[Point], int, float], Point]) -> MorphFn:
    def factory(from_: Sequence[Point], to: Sequence[Point]) -> Sampler:
        def sample(fi: int, ti: int, t: float) -> Point:
            return resampler(from_, fi, 0.5).interpolate(resampler(to, ti, 0.5), t)

        return sample

    return factory


linear: MorphFn = _resampled(resample)
cubic: MorphFn = _resampled(resample_cubic)
spline: MorphFn = _resampled(resample_spline)

MORPH_FUNCTIONS: dict[MorphMode, MorphFn] = {
    MorphMode.NEAREST: nearest,
    MorphMode.LINEAR: linear,
    MorphMode.CUBIC: cubic,
    MorphMode.SPLINE: spline,
}


def get_morph_fn(mode: MorphMode | str) -> MorphFn:
    """Get the morph function for a mode name."""
    return MORPH_FUNCTIONS[MorphMode(mode)]


def morph_points(
    morph_fn: MorphFn, from_: Sequence[Point], to: Sequence[Point], t: float
) -> Sequence[Point]:
    """Blend ``from_`` into ``to`` at ``t``.

    The output has as many points as the longer input. At ``t >= 1`` the
    ``to`` sequence itself is returned.
    """
    if t >= 1:
        return to

    require_points(from_, "morph")
    require_points(to, "morph")

    length, fc, tc = morph_coeffs(from_, to)
    sample = morph_fn(from_, to)
    logger.debug(
        "Morphing points",
        extra={"from_count": len(from_), "to_count": len(to), "t": t},
    )
    return [
        sample(int(round_half_up(i * fc)), int(round_half_up(i * tc)), t) for i in range(length)
    ]
