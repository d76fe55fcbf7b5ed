"""Type definitions for path-tamer.

- geometry: points, lookup tables and bounding extents
- commands: path command variants and the Path sequence
"""

from path_tamer.types.commands import (
    ClosePath,
    CubicCurve,
    Line,
    Move,
    NormalizedPath,
    Path,
    PathCommand,
    QuadCurve,
    path_from_json,
    path_to_json,
)
from path_tamer.types.geometry import (
    ORIGIN,
    BoundingExtent,
    BoundingSize,
    LookupTable,
    Point,
)

__all__ = [
    # Geometry
    "BoundingExtent",
    "BoundingSize",
    "LookupTable",
    "ORIGIN",
    "Point",
    # Commands
    "ClosePath",
    "CubicCurve",
    "Line",
    "Move",
    "NormalizedPath",
    "Path",
    "PathCommand",
    "QuadCurve",
    "path_from_json",
    "path_to_json",
]
