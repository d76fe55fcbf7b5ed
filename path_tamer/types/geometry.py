"""Core geometry types."""

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A 2D point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(x=self.x - other.x, y=self.y - other.y)

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y


ORIGIN = Point(x=0.0, y=0.0)

# Polyline approximation of a path, only used for extent measurement
LookupTable = list[Point]


class BoundingSize(BaseModel):
    """Width and height of a bounding box."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class BoundingExtent(BaseModel):
    """Axis-aligned min/max rectangle enclosing a path's sampled points."""

    model_config = ConfigDict(frozen=True)

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def size(self) -> BoundingSize:
        return BoundingSize(width=self.width, height=self.height)
