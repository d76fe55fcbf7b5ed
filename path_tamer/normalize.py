"""Rescale path commands into a target size.

Every coordinate is mapped into ``[0, aspect_ratio * size] x [0, size]``
using a bounding extent measured beforehand by the sampler.
"""

import logging

from path_tamer.errors import DegeneratePath
from path_tamer.types import (
    BoundingExtent,
    ClosePath,
    CubicCurve,
    Line,
    Move,
    NormalizedPath,
    Path,
    PathCommand,
    Point,
    QuadCurve,
)

logger = logging.getLogger(__name__)


def aspect_ratio(extent: BoundingExtent) -> float:
    """Width-to-height factor applied to normalized x coordinates.

    Taken from the raw maxima, not from the extent's width and height.
    Falls back to 1 only when max_x is exactly zero.

    Raises:
        DegeneratePath: max_y is zero while max_x is not
    """
    if extent.max_x == 0:
        return 1.0
    if extent.max_y == 0:
        raise DegeneratePath(f"Aspect ratio undefined for max_y == 0 (max_x={extent.max_x})")
    return extent.max_x / extent.max_y


def _has_coordinates(path: Path) -> bool:
    return any(not isinstance(command, ClosePath) for command in path)


def normalize(
    path: Path, extent: BoundingExtent, target_size: float
) -> tuple[NormalizedPath, float]:
    """Remap every control point and endpoint of a path.

    Args:
        path: Original commands (not the lookup table)
        extent: Bounding extent of the sampled path
        target_size: Height of the normalized path

    Returns:
        (normalized commands, aspect ratio)

    Raises:
        DegeneratePath: Zero-width or zero-height extent, or undefined aspect ratio
    """
    if not _has_coordinates(path):
        return list(path), 1.0

    width = extent.max_x - extent.min_x
    height = extent.max_y - extent.min_y
    if width == 0 or height == 0:
        raise DegeneratePath(f"Cannot normalize zero-size extent ({width} x {height})")

    ratio = aspect_ratio(extent)

    def remap(p: Point) -> Point:
        new_x = (p.x - extent.min_x) / width
        new_y = (p.y - extent.min_y) / height
        return Point(x=ratio * target_size * new_x, y=target_size * new_y)

    def remap_command(command: PathCommand) -> PathCommand:
        match command:
            case Move(to=to):
                return Move(to=remap(to))
            case Line(to=to):
                return Line(to=remap(to))
            case QuadCurve(to=to, control=control):
                return QuadCurve(to=remap(to), control=remap(control))
            case CubicCurve(to=to, control1=control1, control2=control2):
                return CubicCurve(to=remap(to), control1=remap(control1), control2=remap(control2))
            case ClosePath():
                return ClosePath()
        raise TypeError(f"Unknown path command: {command!r}")

    normalized = [remap_command(command) for command in path]
    logger.debug(f"Normalized {len(path)} commands to size {target_size} (aspect {ratio:.4f})")
    return normalized, ratio
