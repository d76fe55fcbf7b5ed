"""Bounding extent of a sampled path."""

import logging

from path_tamer.config import DEFAULT_DISTANCE_THRESHOLD, DEFAULT_SUBDIVISIONS
from path_tamer.sampler import sample
from path_tamer.types import BoundingExtent, BoundingSize, LookupTable, Path

logger = logging.getLogger(__name__)


def bounds(table: LookupTable) -> BoundingExtent:
    """Reduce a lookup table to its componentwise min/max.

    An empty table yields the all-zero extent.
    """
    if not table:
        return BoundingExtent()

    xs = [p.x for p in table]
    ys = [p.y for p in table]
    extent = BoundingExtent(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))
    logger.debug(f"Extent of {len(table)} points: {extent}")
    return extent


def bounding_size(
    path: Path,
    subdivisions: int = DEFAULT_SUBDIVISIONS,
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
) -> BoundingSize:
    """Sample a path and return the width and height of its extent."""
    return bounds(sample(path, subdivisions, distance_threshold)).size
