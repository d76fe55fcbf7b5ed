"""Pure functions for path interpolation.

Stateless evaluation of lines and bezier curves. No side effects or I/O.
"""

import math

from path_tamer.types import Point


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + t * (b - a)


def linear(t: float, start: Point, end: Point) -> Point:
    """Linearly interpolate between two points."""
    return Point(x=lerp(start.x, end.x, t), y=lerp(start.y, end.y, t))


def quadratic_bezier(t: float, start: Point, control: Point, end: Point) -> Point:
    """Evaluate quadratic bezier at t."""
    one_minus_t = 1 - t
    return Point(
        x=one_minus_t**2 * start.x + 2 * one_minus_t * t * control.x + t**2 * end.x,
        y=one_minus_t**2 * start.y + 2 * one_minus_t * t * control.y + t**2 * end.y,
    )


def cubic_bezier(t: float, start: Point, control1: Point, control2: Point, end: Point) -> Point:
    """Evaluate cubic bezier at t."""
    one_minus_t = 1 - t
    return Point(
        x=(
            one_minus_t**3 * start.x
            + 3 * one_minus_t**2 * t * control1.x
            + 3 * one_minus_t * t**2 * control2.x
            + t**3 * end.x
        ),
        y=(
            one_minus_t**3 * start.y
            + 3 * one_minus_t**2 * t * control1.y
            + 3 * one_minus_t * t**2 * control2.y
            + t**3 * end.y
        ),
    )


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    return math.sqrt((p2 - p1).magnitude_squared)


def sample_parameters(subdivisions: int) -> list[float]:
    """Parameter values i/N for i in 1..N.

    t=0 is excluded since the segment start is already recorded.
    """
    if subdivisions < 1:
        raise ValueError(f"subdivisions must be at least 1, got {subdivisions}")
    return [i / subdivisions for i in range(1, subdivisions + 1)]
