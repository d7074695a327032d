import logging
from typing import FrozenSet, Iterator, Optional, Sequence

from PySide6.QtCore import QEvent, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QKeySequence, QPainter, QPen
from PySide6.QtWidgets import QFrame, QScrollArea, QWidget

from sprintify.dragselect.colors.modes import ColorMap
from sprintify.dragselect.config import SelectionConfig
from sprintify.dragselect.geometry import Point, Rect, Size
from sprintify.dragselect.interaction.protocols import ItemBox
from sprintify.dragselect.interaction.selection import DragSelection, GesturePhase, PointerButton
from sprintify.dragselect.widgets.frame_scheduler import QtFrameScheduler
from sprintify.dragselect.widgets.item_grid_widget import ItemGridWidget

logger = logging.getLogger(__name__)

_BUTTONS = {
    Qt.MouseButton.LeftButton: PointerButton.PRIMARY,
    Qt.MouseButton.MiddleButton: PointerButton.MIDDLE,
    Qt.MouseButton.RightButton: PointerButton.SECONDARY,
}


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def key_name(evt) -> str:
    """Name for a key event, 'Escape' for the escape key."""
    if evt.key() == Qt.Key.Key_Escape:
        return "Escape"
    return evt.text() or QKeySequence(evt.keyCombination()).toString()


class SelectableArea(QScrollArea):
    """Scrollable grid of items with rubber-band selection and edge auto-scroll.

    The area is both the viewport and the item source for its DragSelection:
    scroll offsets come from the scroll bars and item boxes from the tile
    grid. Mouse events on the viewport, key presses on the area and scroll
    bar changes are forwarded to the selection.

    Example:
        area = SelectableArea([str(i) for i in range(300)], columns=20)
        area.selectionChanged.connect(lambda ids: print(f"count: {len(ids)}"))
    """

    selectionChanged = Signal(object)
    phaseChanged = Signal(object)

    def __init__(
        self,
        item_ids: Sequence[str] = (),
        color_map: Optional[ColorMap] = None,
        config: Optional[SelectionConfig] = None,
        tile_size: float = 40,
        columns: int = 20,
        gap: float = 16,
        padding: float = 16,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.color_map: ColorMap = color_map or ColorMap()
        self.config: SelectionConfig = config or SelectionConfig()

        self.grid = ItemGridWidget(self.color_map, item_ids, tile_size, columns, gap, padding)
        self.setWidget(self.grid)
        self.setWidgetResizable(False)
        self.setFrameShape(QFrame.Shape.NoFrame)
        # Focus only when a drag begins, never through tabbing
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)

        self.scheduler = QtFrameScheduler(self.config.frame_interval_ms, self)
        self.selection = DragSelection(self.enumerate_items, self.scheduler, viewport=self, config=self.config)
        self.selection.on_selection_changed = self._on_selection_changed
        self.selection.on_phase_changed = self._on_phase_changed

        self.horizontalScrollBar().valueChanged.connect(self._on_scrolled)
        self.verticalScrollBar().valueChanged.connect(self._on_scrolled)
        self.viewport().installEventFilter(self)

        self.grid.add_draw_command("items", self._draw_items)
        self.grid.add_draw_command("__overlay__selection", self._draw_selection_rect)

    # --- Public API ---

    @property
    def selected_items(self) -> FrozenSet[str]:
        return self.selection.selected_items

    def selected_count(self) -> int:
        return len(self.selection.selected_items)

    def set_items(self, item_ids: Sequence[str]) -> None:
        """Replace the items. Current selection is cleared."""
        self.selection.clear_selection()
        self.grid.set_items(item_ids)

    def clear_selection(self) -> None:
        self.selection.clear_selection()
        self.grid.update()

    def dispose(self) -> None:
        """Stop auto-scroll and drop the selection's hold on this widget."""
        self.selection.dispose()
        self.scheduler.cancel_all()
        logger.debug("SelectableArea disposed")

    # --- Viewport ---

    def scroll_offset(self) -> Point:
        return Point(self.horizontalScrollBar().value(), self.verticalScrollBar().value())

    def content_size(self) -> Size:
        return Size(self.grid.width(), self.grid.height())

    def visible_rect(self) -> Rect:
        viewport = self.viewport()
        return Rect(0, 0, viewport.width(), viewport.height())

    def scroll_by(self, dx: Optional[float] = None, dy: Optional[float] = None) -> None:
        # Scroll bars clamp to their range and only take whole pixels
        if dx is not None:
            bar = self.horizontalScrollBar()
            bar.setValue(bar.value() + int(round(dx)))
        if dy is not None:
            bar = self.verticalScrollBar()
            bar.setValue(bar.value() + int(round(dy)))

    def focus(self) -> None:
        self.setFocus(Qt.FocusReason.MouseFocusReason)

    # --- Item Source ---

    def enumerate_items(self) -> Iterator[ItemBox]:
        """Item boxes relative to the viewport's top-left corner."""
        origin = self.grid.pos()
        for item_id, rect in self.grid.tiles():
            yield item_id, rect.translated(origin.x(), origin.y())

    # --- Events ---

    def eventFilter(self, src, evt) -> bool:
        # Guard against already deleted widgets during shutdown
        try:
            if src != self.viewport():
                return super().eventFilter(src, evt)
        except RuntimeError:
            logger.debug("Viewport already deleted, ignoring event")
            return False

        et = evt.type()

        if et == QEvent.Type.MouseButtonPress:
            button = _BUTTONS.get(evt.button())
            if button is None:
                return False
            pos = evt.position()
            handled = self.selection.pointer_down(Point(pos.x(), pos.y()), button)
        elif et == QEvent.Type.MouseMove:
            pos = evt.position()
            handled = self.selection.pointer_move(Point(pos.x(), pos.y()))
        elif et == QEvent.Type.MouseButtonRelease:
            button = _BUTTONS.get(evt.button())
            if button is None:
                return False
            handled = self.selection.pointer_up(button)
        else:
            return super().eventFilter(src, evt)

        if handled:
            self.grid.update()
        return handled

    def keyPressEvent(self, event):
        if self.selection.key_pressed(key_name(event)):
            self.grid.update()
            event.accept()
            return
        super().keyPressEvent(event)

    def _on_scrolled(self, _value: int) -> None:
        if self.selection.scrolled():
            self.grid.update()

    def _on_selection_changed(self, ids: FrozenSet[str]) -> None:
        self.grid.update()
        self.selectionChanged.emit(ids)

    def _on_phase_changed(self, phase: GesturePhase) -> None:
        self.grid.update()
        self.phaseChanged.emit(phase)

    # --- Internal Drawing Methods ---

    def _draw_items(self, p: QPainter) -> None:
        offset = self.scroll_offset()
        visible = self.visible_rect().translated(offset.x, offset.y)
        selected = self.selection.selected_items

        for item_id, rect in self.grid.tiles():
            # Quick culling check - skip tiles completely outside the viewport
            if (rect.left > visible.right or rect.right < visible.left or
                    rect.top > visible.bottom or rect.bottom < visible.top):
                continue

            is_selected = item_id in selected
            fill = self.color_map.get_selection_color("selected-fill" if is_selected else "item-fill")
            text = self.color_map.get_selection_color("selected-text" if is_selected else "item-text")

            qrect = to_qrectf(rect)
            p.setBrush(QBrush(fill))
            p.setPen(QPen(self.color_map.get_selection_color("item-border"), 2))
            p.drawRect(qrect)
            p.setPen(QPen(text))
            p.drawText(qrect, Qt.AlignmentFlag.AlignCenter, item_id)

    def _draw_selection_rect(self, p: QPainter) -> None:
        rect = self.selection.selection_rect
        if rect is None:
            return
        p.setPen(QPen(self.color_map.get_selection_color("band-border"), 2))
        p.setBrush(QBrush(self.color_map.get_selection_color("band-fill")))
        p.drawRect(to_qrectf(rect))
