"""Vector path measurement and normalization."""

from path_tamer.bounds import bounding_size, bounds
from path_tamer.errors import DegeneratePath, InvalidPath, PathTamerError
from path_tamer.normalize import aspect_ratio, normalize
from path_tamer.pipeline import TamedPath, tame
from path_tamer.sampler import sample

__all__ = [
    "DegeneratePath",
    "InvalidPath",
    "PathTamerError",
    "TamedPath",
    "aspect_ratio",
    "bounding_size",
    "bounds",
    "normalize",
    "sample",
    "tame",
]
