from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A position in viewport or content coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with non-negative width and height.

    Coordinates grow right and down, so `top` is the smaller y value.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def translated(self, dx: float, dy: float) -> "Rect":
        """Return a copy moved by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height), the same ordering DrawingWidget.draw_rects uses."""
        return (self.x, self.y, self.width, self.height)


def intersects(rect1: Rect, rect2: Rect) -> bool:
    """Check if two rectangles overlap. Touching edges count as overlapping."""
    if rect1.right < rect2.left or rect2.right < rect1.left:
        return False

    if rect1.bottom < rect2.top or rect2.bottom < rect1.top:
        return False

    return True
