from .rect import Point, Rect, Size, intersects
from .vector import Vector

__all__ = ["Point", "Rect", "Size", "Vector", "intersects"]
