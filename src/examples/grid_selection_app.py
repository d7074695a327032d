import logging

from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from sprintify.dragselect.colors.modes import ColorMap
from sprintify.dragselect.widgets import SelectableArea


class GridSelectionWindow(QMainWindow):
    def __init__(self, item_count: int = 300, columns: int = 20):
        super().__init__()
        self.setWindowTitle("Drag selection")
        self.resize(900, 500)
        self.color_map = ColorMap(darkmode=False)

        self.area = SelectableArea(
            [str(i) for i in range(item_count)],
            color_map=self.color_map,
            columns=columns,
        )
        # Keep the area shorter than the grid so it scrolls
        self.area.setMaximumHeight(384)

        header = QHBoxLayout()
        header.addWidget(QLabel("selectable area"))
        header.addStretch(1)
        self.count_label = QLabel()
        self.count_label.hide()
        header.addWidget(self.count_label)

        layout = QVBoxLayout()
        layout.addLayout(header)
        layout.addWidget(self.area)
        layout.addStretch(1)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self.area.selectionChanged.connect(self._update_count)

    def _update_count(self, ids):
        self.count_label.setText(f"count: {len(ids)}")
        self.count_label.setVisible(len(ids) > 0)

    def closeEvent(self, event):
        self.area.dispose()
        super().closeEvent(event)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = QApplication([])
    window = GridSelectionWindow()
    window.show()
    app.exec()
