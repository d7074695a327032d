from .auto_scroll import AutoScroller, edge_delta
from .hit_test import HitTester
from .protocols import FrameScheduler, ItemSource, Viewport
from .selection import DragSelection, GesturePhase, PointerButton

__all__ = [
    "AutoScroller",
    "DragSelection",
    "FrameScheduler",
    "GesturePhase",
    "HitTester",
    "ItemSource",
    "PointerButton",
    "Viewport",
    "edge_delta",
]
