import logging
from typing import Any, Callable, Optional, Tuple

from ..config import SelectionConfig
from ..geometry import Point, Rect, Vector
from .protocols import FrameScheduler, Viewport

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def edge_delta(position: float, extent: float, margin: float, max_step: float) -> Optional[float]:
    """Scroll delta along one axis, or None when the pointer is clear of both edges.

    The deeper the pointer sits inside the margin, the larger the step, up to
    max_step. The far edge (right/bottom) wins when both margins overlap.
    """
    if extent - position < margin:
        return _clamp(margin - extent + position, 0, max_step)
    if position < margin:
        return -_clamp(margin - position, 0, max_step)
    return None


class AutoScroller:
    """Nudges the viewport while the pointer is held near one of its edges.

    Polls once per frame instead of reacting to pointer events, because the
    pointer may sit still while the content keeps scrolling underneath it.
    The loop is bound to a drag: start() when dragging begins, stop() when it
    ends. stop() cancels the queued frame, and a frame left over from an
    earlier start() does nothing.

    Args:
        scheduler: Frame source (QtFrameScheduler in the widget)
        pointer: Returns the current drag vector, or None
        viewport: Scroll container; None makes every frame a no-op
        config: Margin and step sizes
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        pointer: Callable[[], Optional[Vector]],
        viewport: Optional[Viewport] = None,
        config: Optional[SelectionConfig] = None,
    ):
        self.scheduler = scheduler
        self.pointer = pointer
        self.viewport = viewport
        self.config = config or SelectionConfig()

        self._active: bool = False
        self._generation: int = 0
        self._handle: Any = None

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self._active:
            return
        self._active = True
        self._generation += 1
        logger.debug("Auto-scroll started (generation %d)", self._generation)
        self._schedule()

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        self._generation += 1
        if self._handle is not None:
            self.scheduler.cancel_frame(self._handle)
            self._handle = None
        logger.debug("Auto-scroll stopped")

    def compute_scroll(self, pointer: Point, visible: Rect) -> Tuple[Optional[float], Optional[float]]:
        """(dx, dy) for a pointer in viewport coordinates. None means leave that axis alone."""
        margin = self.config.edge_margin
        step = self.config.max_scroll_step
        dx = edge_delta(pointer.x - visible.left, visible.width, margin, step)
        dy = edge_delta(pointer.y - visible.top, visible.height, margin, step)
        return dx, dy

    def _schedule(self) -> None:
        generation = self._generation
        self._handle = self.scheduler.request_frame(lambda: self._on_frame(generation))

    def _on_frame(self, generation: int) -> None:
        # Stale frame from a drag that already ended
        if not self._active or generation != self._generation:
            return
        self._handle = None

        drag_vector = self.pointer()
        if self.viewport is not None and drag_vector is not None:
            dx, dy = self.compute_scroll(drag_vector.terminal_point(), self.viewport.visible_rect())
            if dx is not None or dy is not None:
                self.viewport.scroll_by(dx, dy)

        # scroll_by may have ended the drag synchronously
        if self._active and generation == self._generation:
            self._schedule()
