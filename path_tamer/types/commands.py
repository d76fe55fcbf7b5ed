"""Path command variants.

Each command is a frozen model with a literal ``type`` tag, so a path
round-trips through JSON and can be matched exhaustively by class.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from path_tamer.types.geometry import Point


class Move(BaseModel):
    """Start a new subpath at ``to``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["move"] = "move"
    to: Point


class Line(BaseModel):
    """Straight segment to ``to``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["line"] = "line"
    to: Point


class QuadCurve(BaseModel):
    """Quadratic bezier segment to ``to``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["quad_curve"] = "quad_curve"
    to: Point
    control: Point


class CubicCurve(BaseModel):
    """Cubic bezier segment to ``to``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["cubic_curve"] = "cubic_curve"
    to: Point
    control1: Point
    control2: Point


class ClosePath(BaseModel):
    """Close the subpath back to the most recent move target."""

    model_config = ConfigDict(frozen=True)

    type: Literal["close"] = "close"


PathCommand = Annotated[
    Move | Line | QuadCurve | CubicCurve | ClosePath,
    Field(discriminator="type"),
]

# Drawing order is significant
Path = list[PathCommand]

# Same shape as Path, coordinates remapped into the target size
NormalizedPath = list[PathCommand]

path_adapter: TypeAdapter[Path] = TypeAdapter(Path)


def path_from_json(data: str | bytes) -> Path:
    """Validate a JSON array of commands into a Path."""
    return path_adapter.validate_json(data)


def path_to_json(path: Path) -> str:
    """Serialize a Path to a JSON array of commands."""
    return path_adapter.dump_json(path).decode()
