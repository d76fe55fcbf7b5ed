"""End-to-end normalization of a path.

sample -> bounds -> normalize, then the normalized path is measured again
so callers get the size and length of what they will actually draw.
"""

import logging

from pydantic import BaseModel, ConfigDict

from path_tamer.arc_length import arc_length
from path_tamer.bounds import bounds
from path_tamer.config import Settings
from path_tamer.config import settings as default_settings
from path_tamer.normalize import normalize
from path_tamer.sampler import sample
from path_tamer.types import BoundingExtent, BoundingSize, NormalizedPath, Path

logger = logging.getLogger(__name__)


class TamedPath(BaseModel):
    """Result of normalizing a path."""

    model_config = ConfigDict(frozen=True)

    path: NormalizedPath
    source_extent: BoundingExtent  # extent the path was normalized against
    extent: BoundingExtent  # extent of the normalized path
    aspect_ratio: float
    arc_length: float

    @property
    def size(self) -> BoundingSize:
        return self.extent.size


def measure(path: Path, settings: Settings | None = None) -> BoundingExtent:
    """Sample a path with the configured density and return its extent."""
    cfg = settings or default_settings
    return bounds(sample(path, cfg.subdivisions, cfg.distance_threshold))


def tame(
    path: Path,
    target_size: float | None = None,
    settings: Settings | None = None,
) -> TamedPath:
    """Normalize a path to a target size and measure the result.

    Args:
        path: Commands to normalize, must open with a move
        target_size: Height of the normalized path (default: settings.target_size)
        settings: Sampling configuration (default: module settings)

    Raises:
        InvalidPath: The path has a segment before any move
        DegeneratePath: The path has zero width or zero height
    """
    cfg = settings or default_settings
    size = cfg.target_size if target_size is None else target_size

    source_extent = measure(path, cfg)
    normalized, ratio = normalize(path, source_extent, size)
    extent = measure(normalized, cfg)
    length = arc_length(normalized, cfg.subdivisions)

    logger.info(
        f"Tamed {len(path)} commands: {extent.width:.3f} x {extent.height:.3f}, "
        f"length {length:.3f}"
    )
    return TamedPath(
        path=normalized,
        source_extent=source_extent,
        extent=extent,
        aspect_ratio=ratio,
        arc_length=length,
    )
