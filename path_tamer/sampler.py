"""Adaptive polyline sampling of path commands.

Walks a command sequence and subdivides every segment into sub-points,
producing a lookup table that approximates the path's geometry. A greedy
distance filter drops samples that sit too close to the previously
retained point.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from functools import reduce

from path_tamer.config import DEFAULT_DISTANCE_THRESHOLD, DEFAULT_SUBDIVISIONS
from path_tamer.errors import InvalidPath
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
    LookupTable,
    Move,
    Path,
    PathCommand,
    Point,
    QuadCurve,
)

logger = logging.getLogger(__name__)

# Maps a sample parameter to a point on the current segment
SegmentCurve = Callable[[float], Point]


@dataclass(frozen=True)
class SamplerState:
    """Traversal state threaded through one sampling pass.

    ``table`` is owned by the pass and only ever appended to.
    """

    last_point: Point = ORIGIN
    starting_point: Point = ORIGIN
    table: LookupTable = field(default_factory=list)


def _append_filtered(
    table: LookupTable,
    curve: SegmentCurve,
    params: list[float],
    distance_threshold: float,
) -> None:
    for t in params:
        candidate = curve(t)
        if not table:
            raise InvalidPath("Segment has no previous point; paths must start with a move")
        if distance(candidate, table[-1]) > distance_threshold:
            table.append(candidate)


def _step(
    state: SamplerState,
    command: PathCommand,
    params: list[float],
    distance_threshold: float,
) -> SamplerState:
    start = state.last_point

    match command:
        case Move(to=to):
            state.table.append(to)
            return replace(state, last_point=to, starting_point=to)

        case Line(to=to):
            _append_filtered(
                state.table, lambda t: linear(t, start, to), params, distance_threshold
            )
            return replace(state, last_point=to)

        case QuadCurve(to=to, control=control):
            _append_filtered(
                state.table,
                lambda t: quadratic_bezier(t, start, control, to),
                params,
                distance_threshold,
            )
            return replace(state, last_point=to)

        case CubicCurve(to=to, control1=control1, control2=control2):
            _append_filtered(
                state.table,
                lambda t: cubic_bezier(t, start, control1, control2, to),
                params,
                distance_threshold,
            )
            return replace(state, last_point=to)

        case ClosePath():
            end = state.starting_point
            _append_filtered(
                state.table, lambda t: linear(t, start, end), params, distance_threshold
            )
            # last_point stays at the pre-close point; a later segment without
            # a move interpolates from there
            return state

        case _:
            raise TypeError(f"Unknown path command: {command!r}")


def sample(
    path: Path,
    subdivisions: int = DEFAULT_SUBDIVISIONS,
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
) -> LookupTable:
    """Approximate a path by a polyline lookup table.

    Args:
        path: Commands in drawing order
        subdivisions: Sample parameters per segment (t = i/subdivisions, i >= 1)
        distance_threshold: Minimum distance from the last retained point

    Returns:
        Retained sample points in drawing order

    Raises:
        InvalidPath: A segment needs a previous point but no move preceded it
        ValueError: subdivisions < 1 or a negative threshold
    """
    if distance_threshold < 0:
        raise ValueError(f"distance_threshold must be non-negative, got {distance_threshold}")
    params = sample_parameters(subdivisions)

    final = reduce(
        lambda state, command: _step(state, command, params, distance_threshold),
        path,
        SamplerState(),
    )
    logger.debug(f"Sampled {len(path)} commands into {len(final.table)} points")
    return final.table
