"""Capabilities the selection engine consumes from its host.

The engine never owns the item list or the scroll container. Hosts (the
Qt SelectableArea, or fakes in tests) provide these.
"""
from typing import Any, Callable, Iterable, Optional, Protocol, Tuple

from ..geometry import Point, Rect, Size

# (item id, bounding box relative to the viewport's top-left)
ItemBox = Tuple[str, Rect]


class ItemSource(Protocol):
    def __call__(self) -> Iterable[ItemBox]:
        """Enumerate current items. Called fresh on every hit-test."""
        ...


class Viewport(Protocol):
    def scroll_offset(self) -> Point:
        """Current horizontal/vertical scroll position."""
        ...

    def content_size(self) -> Size:
        """Full scrollable size of the content."""
        ...

    def visible_rect(self) -> Rect:
        """Visible area in viewport coordinates (origin at 0, 0)."""
        ...

    def scroll_by(self, dx: Optional[float] = None, dy: Optional[float] = None) -> None:
        """Scroll by a delta. None leaves that axis alone."""
        ...

    def focus(self) -> None:
        """Take keyboard focus so a cancel key reaches the engine."""
        ...


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> Any:
        """Run callback once on the next frame. Returns a cancel handle."""
        ...

    def cancel_frame(self, handle: Any) -> None:
        """Cancel a pending frame. Unknown or already-run handles are ignored."""
        ...
