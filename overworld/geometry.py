"""Small geometric value types: vectors, rectangles and views."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = sorted((self.left, self.left + self.width))
        min_y, max_y = sorted((self.top, self.top + self.height))
        return min_x <= x < max_x and min_y <= y < max_y

    def copy(self) -> Rect:
        return replace(self)


@dataclass
class View:
    """A 2D camera region described by its centre and size."""

    center: Vector2 = field(default_factory=lambda: Vector2(500.0, 500.0))
    size: Vector2 = field(default_factory=lambda: Vector2(1000.0, 1000.0))

    def set_size(self, size) -> None:
        """Change the size of the view, keeping its centre."""
        self.size = Vector2(*size)

    @property
    def rect(self) -> Rect:
        return Rect(
            self.center.x - self.size.x / 2,
            self.center.y - self.size.y / 2,
            self.size.x,
            self.size.y,
        )