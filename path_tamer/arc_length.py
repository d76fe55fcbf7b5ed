"""Arc length estimates for paths.

Chord sums over the same sample parameters the sampler uses, without the
distance filter.
"""

from path_tamer.config import DEFAULT_SUBDIVISIONS
from path_tamer.interpolation import (
    cubic_bezier,
    distance,
    linear,
    quadratic_bezier,
    sample_parameters,
)
from path_tamer.types import (
    ORIGIN,
    ClosePath,
    CubicCurve,
    Line,
    Move,
    Path,
    Point,
    QuadCurve,
)


def _chord_length(start: Point, points: list[Point]) -> float:
    total = 0.0
    prev = start
    for curr in points:
        total += distance(prev, curr)
        prev = curr
    return total


def segment_lengths(path: Path, subdivisions: int = DEFAULT_SUBDIVISIONS) -> list[float]:
    """Approximate length of every command, in drawing order.

    Moves contribute 0; a close contributes the chord back to the subpath start.
    """
    params = sample_parameters(subdivisions)
    lengths: list[float] = []
    current = ORIGIN
    start = ORIGIN

    for command in path:
        match command:
            case Move(to=to):
                lengths.append(0.0)
                current = start = to
            case Line(to=to):
                lengths.append(distance(current, to))
                current = to
            case QuadCurve(to=to, control=control):
                points = [quadratic_bezier(t, current, control, to) for t in params]
                lengths.append(_chord_length(current, points))
                current = to
            case CubicCurve(to=to, control1=control1, control2=control2):
                points = [cubic_bezier(t, current, control1, control2, to) for t in params]
                lengths.append(_chord_length(current, points))
                current = to
            case ClosePath():
                points = [linear(t, current, start) for t in params]
                lengths.append(_chord_length(current, points))
                current = start

    return lengths


def arc_length(path: Path, subdivisions: int = DEFAULT_SUBDIVISIONS) -> float:
    """Estimate the total length of a path."""
    return sum(segment_lengths(path, subdivisions))
