"""Scalar helpers shared by every shape.

Pure functions with IEEE-754 semantics: a zero divisor yields an infinity or
NaN rather than raising, and rounding goes half toward +infinity.
"""

import math
import re

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values (no clamping on t)."""
    return a + (b - a) * t


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value to a range [low, high]."""
    return max(low, min(high, value))


def sign(value: float) -> float:
    """Sign of a value as a float; zeros and NaN are returned as-is."""
    if math.isnan(value) or value == 0:
        return value
    return 1.0 if value > 0 else -1.0


def divide(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward +infinity."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Shortest text form of a number: ``1`` rather than ``1.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(float(value))
    mantissa, _, exponent = text.partition("e")
    # plain decimals down to 1e-6; repr switches to exponents below 1e-4
    if exponent and -6 <= int(exponent) < 0:
        sign_text = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign_text}0.{'0' * (-int(exponent) - 1)}{digits}"
    return _EXPONENT_RE.sub(r"e\1\2", text)
