"""Sprintify drag-selection public API."""

from .config import SelectionConfig
from .colors.modes import ColorMap
from .geometry import Point, Rect, Size, Vector, intersects
from .interaction.hit_test import HitTester
from .interaction.auto_scroll import AutoScroller
from .interaction.selection import DragSelection, GesturePhase, PointerButton
from .widgets.selectable_area import SelectableArea
from .widgets.frame_scheduler import QtFrameScheduler

__all__ = [
    "SelectionConfig",
    "ColorMap",
    "Point",
    "Rect",
    "Size",
    "Vector",
    "intersects",
    "HitTester",
    "AutoScroller",
    "DragSelection",
    "GesturePhase",
    "PointerButton",
    "SelectableArea",
    "QtFrameScheduler",
]
