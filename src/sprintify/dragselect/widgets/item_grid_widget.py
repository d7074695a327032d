from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QPainter
from PySide6.QtWidgets import QWidget

from sprintify.dragselect.colors.modes import ColorMap
from sprintify.dragselect.geometry import Rect


class ItemGridWidget(QWidget):
    """
    Content widget laying out fixed-size item tiles in rows of `columns`.

    Key behaviors:
    - Widget coordinates are content coordinates (the scroll area moves the widget)
    - Fixed size derived from item count, tile size, gap and padding
    - Painting is delegated to named draw commands, drawn in registration order
    """

    def __init__(
        self,
        color_map: ColorMap,
        item_ids: Sequence[str] = (),
        tile_size: float = 40,
        columns: int = 20,
        gap: float = 16,
        padding: float = 16,
        parent: Optional[QWidget] = None,
    ) -> None:
        """Create tile grid. tile_size/gap/padding are pixels, columns must be at least 1."""
        super().__init__(parent)
        if columns < 1:
            raise ValueError(f"columns must be at least 1, got {columns}")
        self.color_map: ColorMap = color_map
        self.tile_size: float = tile_size
        self.columns: int = columns
        self.gap: float = gap
        self.padding: float = padding
        self.draw_commands: Dict[str, Callable[[QPainter], None]] = {}
        self.item_ids: List[str] = []
        self.set_items(item_ids)

    def set_items(self, item_ids: Sequence[str]) -> None:
        """Replace the items and resize to fit them."""
        self.item_ids = list(item_ids)
        width, height = self.content_size()
        self.setFixedSize(int(round(width)), int(round(height)))
        self.update()

    def content_size(self) -> Tuple[float, float]:
        """(width, height) needed to show every tile plus padding."""
        count = len(self.item_ids)
        columns = min(self.columns, count) if count else 0
        rows = (count + self.columns - 1) // self.columns
        width = 2 * self.padding + columns * self.tile_size + max(0, columns - 1) * self.gap
        height = 2 * self.padding + rows * self.tile_size + max(0, rows - 1) * self.gap
        return width, height

    def tile_rect(self, index: int) -> Rect:
        """Content-space rectangle of the tile at index."""
        row, col = divmod(index, self.columns)
        step = self.tile_size + self.gap
        return Rect(self.padding + col * step, self.padding + row * step, self.tile_size, self.tile_size)

    def tiles(self) -> Iterator[Tuple[str, Rect]]:
        """(item id, content rect) for every tile."""
        for index, item_id in enumerate(self.item_ids):
            yield item_id, self.tile_rect(index)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(self.color_map.get_object_color("surface-base")))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRect(self.rect())

        for command in self.draw_commands.values():
            command(painter)

    def add_draw_command(self, name: str, command: Callable[[QPainter], None]) -> None:
        """Register a named drawing function. Replaces existing command with same name."""
        self.draw_commands[name] = command

    def remove_draw_command(self, name: str) -> None:
        """Remove a drawing command by name. Does nothing if name doesn't exist."""
        self.draw_commands.pop(name, None)
