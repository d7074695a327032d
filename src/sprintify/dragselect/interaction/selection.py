import logging
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Optional

from ..config import SelectionConfig
from ..geometry import Point, Rect, Vector
from .auto_scroll import AutoScroller
from .hit_test import HitTester
from .protocols import FrameScheduler, ItemSource, Viewport

logger = logging.getLogger(__name__)


class GesturePhase(Enum):
    """Where the current pointer interaction is."""
    IDLE = "idle"
    PENDING = "pending"  # pressed, not yet past the drag threshold
    DRAGGING = "dragging"


class PointerButton(Enum):
    PRIMARY = "primary"
    MIDDLE = "middle"
    SECONDARY = "secondary"


class DragSelection:
    """Rubber-band selection over a scrollable set of items.

    Feed it pointer, scroll and key events in viewport coordinates. It keeps
    two vectors while a gesture is live: the drag vector (press point plus
    pointer movement) and the scroll vector (scroll offset at press plus
    scroll change since). Their sum is the selection in content coordinates,
    so scrolling during a drag grows or shrinks the selection even when the
    pointer stands still.

    A press that never travels past `config.drag_threshold` is a click and
    clears the selection on release. A release after dragging keeps it.
    The cancel key (Escape) clears it at any time.

    Every handler returns True when it consumed the event. With no viewport
    attached, handlers do nothing and return False.

    Example:
        selection = DragSelection(area.enumerate_items, QtFrameScheduler(), viewport=area)
        selection.on_selection_changed = lambda ids: print(f"{len(ids)} selected")

        selection.pointer_down(Point(5, 5))
        selection.pointer_move(Point(25, 25))
        selection.pointer_up()
    """

    def __init__(
        self,
        items: ItemSource,
        scheduler: FrameScheduler,
        viewport: Optional[Viewport] = None,
        config: Optional[SelectionConfig] = None,
    ):
        self.config = config or SelectionConfig()
        self.items = items

        self._viewport: Optional[Viewport] = None
        self._hit_tester: Optional[HitTester] = None
        self._auto_scroll = AutoScroller(scheduler, lambda: self._drag_vector, config=self.config)

        self._phase: GesturePhase = GesturePhase.IDLE
        self._drag_vector: Optional[Vector] = None
        self._scroll_vector: Optional[Vector] = None
        self._selected: FrozenSet[str] = frozenset()

        self.on_selection_changed: Optional[Callable[[FrozenSet[str]], None]] = None
        self.on_phase_changed: Optional[Callable[[GesturePhase], None]] = None

        if viewport is not None:
            self.attach(viewport)

    # --- Public State ---

    @property
    def phase(self) -> GesturePhase:
        return self._phase

    @property
    def selected_items(self) -> FrozenSet[str]:
        """Ids of the currently selected items."""
        return self._selected

    @property
    def drag_vector(self) -> Optional[Vector]:
        return self._drag_vector

    @property
    def scroll_vector(self) -> Optional[Vector]:
        return self._scroll_vector

    @property
    def viewport(self) -> Optional[Viewport]:
        return self._viewport

    @property
    def auto_scroller(self) -> AutoScroller:
        return self._auto_scroll

    @property
    def selection_rect(self) -> Optional[Rect]:
        """Band to draw, in content coordinates, clamped to the content size.

        None unless a drag is in progress.
        """
        if self._phase is not GesturePhase.DRAGGING or self._viewport is None:
            return None
        if self._drag_vector is None or self._scroll_vector is None:
            return None

        content = self._viewport.content_size()
        bounds = Rect(0, 0, content.width, content.height)
        return self._drag_vector.add(self._scroll_vector).clamp(bounds).to_rect()

    # --- Viewport Lifecycle ---

    def attach(self, viewport: Viewport) -> None:
        """Bind to a scroll container. Replaces any previous one."""
        if self._viewport is not None:
            self.detach()
        self._viewport = viewport
        self._hit_tester = HitTester(self.items, viewport)
        self._auto_scroll.viewport = viewport

    def detach(self) -> None:
        """Drop the viewport. An in-flight gesture ends; the selection stays."""
        self._end_gesture()
        self._viewport = None
        self._hit_tester = None
        self._auto_scroll.viewport = None

    def dispose(self) -> None:
        """Tear down: stop auto-scroll and release the viewport."""
        self.detach()
        self.on_selection_changed = None
        self.on_phase_changed = None

    def clear_selection(self) -> None:
        self._set_selected(())

    # --- Event Handlers ---

    def pointer_down(self, pos: Point, button: PointerButton = PointerButton.PRIMARY) -> bool:
        """Start a gesture at pos (viewport coordinates)."""
        if button is not PointerButton.PRIMARY or self._viewport is None:
            return False

        # A press without a matching release (grab lost) restarts the gesture
        if self._phase is GesturePhase.DRAGGING:
            self._auto_scroll.stop()

        offset = self._viewport.scroll_offset()
        self._drag_vector = Vector(pos.x, pos.y, 0, 0)
        self._scroll_vector = Vector(offset.x, offset.y, 0, 0)
        self._set_phase(GesturePhase.PENDING)
        return True

    def pointer_move(self, pos: Point) -> bool:
        """Update the drag with the pointer's current position (viewport coordinates)."""
        if self._viewport is None or self._drag_vector is None or self._scroll_vector is None:
            return False

        drag_vector = self._drag_vector.with_extent(
            pos.x - self._drag_vector.x,
            pos.y - self._drag_vector.y,
        )
        self._drag_vector = drag_vector

        if self._phase is not GesturePhase.DRAGGING:
            if drag_vector.diagonal_length() < self.config.drag_threshold:
                return True
            self._set_phase(GesturePhase.DRAGGING)
            self._viewport.focus()
            self._auto_scroll.start()

        self._update_selected(drag_vector, self._scroll_vector)
        return True

    def scrolled(self) -> bool:
        """Re-derive the scroll vector after the viewport scrolled (by us or the user)."""
        if self._viewport is None or self._drag_vector is None or self._scroll_vector is None:
            return False

        offset = self._viewport.scroll_offset()
        origin = self._scroll_vector
        self._scroll_vector = origin.with_extent(offset.x - origin.x, offset.y - origin.y)

        if self._phase is GesturePhase.DRAGGING:
            self._update_selected(self._drag_vector, self._scroll_vector)
        return True

    def pointer_up(self, button: PointerButton = PointerButton.PRIMARY) -> bool:
        """Finish the gesture. A drag commits its selection; a click clears it."""
        if button is not PointerButton.PRIMARY or self._viewport is None:
            return False

        if self._phase is GesturePhase.DRAGGING:
            logger.debug("Drag committed with %d item(s) selected", len(self._selected))
        else:
            self._set_selected(())
        self._end_gesture()
        return True

    def key_pressed(self, key: str) -> bool:
        """Handle a key press. Returns True only for the cancel key.

        Any key press also forgets the scroll origin, so the rest of the
        current gesture ignores pointer moves and scroll events until the
        next press.
        """
        if self._viewport is None:
            return False

        handled = False
        if key == self.config.cancel_key:
            logger.debug("Selection cancelled")
            self._set_selected(())
            self._end_gesture()
            handled = True

        # TODO: narrow this to keys that actually scroll the viewport once the intended behavior is confirmed
        self._scroll_vector = None
        return handled

    # --- Internal ---

    def _end_gesture(self) -> None:
        self._auto_scroll.stop()
        self._drag_vector = None
        self._scroll_vector = None
        self._set_phase(GesturePhase.IDLE)

    def _update_selected(self, drag_vector: Vector, scroll_vector: Vector) -> None:
        if self._hit_tester is None:
            return
        self._set_selected(self._hit_tester.compute_selected(drag_vector, scroll_vector))

    def _set_selected(self, ids: Iterable[str]) -> None:
        selected = frozenset(ids)
        if selected == self._selected:
            return
        self._selected = selected
        if self.on_selection_changed:
            self.on_selection_changed(selected)

    def _set_phase(self, phase: GesturePhase) -> None:
        if phase is self._phase:
            return
        logger.debug("Gesture phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase
        if self.on_phase_changed:
            self.on_phase_changed(phase)
