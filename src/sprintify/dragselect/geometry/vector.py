import math
from dataclasses import dataclass

from .rect import Point, Rect


@dataclass(frozen=True)
class Vector:
    """A directed rectangle: an origin plus a signed extent.

    A drag gesture is an origin (where the pointer went down) and the
    movement since then. The extent goes negative when the pointer moves
    left or up of the origin. Zero extent is a point, not yet a drag.

    Every operation returns a new Vector.

    Args:
        x, y: Origin
        magnitude_x, magnitude_y: Signed extent from the origin
    """
    x: float
    y: float
    magnitude_x: float = 0.0
    magnitude_y: float = 0.0

    def diagonal_length(self) -> float:
        """Euclidean length of the extent."""
        return math.hypot(self.magnitude_x, self.magnitude_y)

    def to_rect(self) -> Rect:
        """Normalize into a rectangle with non-negative width and height."""
        return Rect(
            min(self.x, self.x + self.magnitude_x),
            min(self.y, self.y + self.magnitude_y),
            abs(self.magnitude_x),
            abs(self.magnitude_y),
        )

    def add(self, other: "Vector") -> "Vector":
        """Component-wise sum of origin and extent."""
        return Vector(
            self.x + other.x,
            self.y + other.y,
            self.magnitude_x + other.magnitude_x,
            self.magnitude_y + other.magnitude_y,
        )

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def clamp(self, bounds: Rect) -> "Vector":
        """Cap the extent so the terminal point stays within bounds' width/height.

        Only growth past the far edge is capped; the extent may still go
        negative (left of / above the origin).
        """
        return Vector(
            self.x,
            self.y,
            min(bounds.width - self.x, self.magnitude_x),
            min(bounds.height - self.y, self.magnitude_y),
        )

    def terminal_point(self) -> Point:
        """Origin plus extent, i.e. the current pointer location."""
        return Point(self.x + self.magnitude_x, self.y + self.magnitude_y)

    def with_extent(self, magnitude_x: float, magnitude_y: float) -> "Vector":
        """Same origin, new extent."""
        return Vector(self.x, self.y, magnitude_x, magnitude_y)
