from typing import Literal, Optional
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "surface-lower", "border", "border-intense", "text-base", "text-secondary"]
SelectionColorName = Literal["item-fill", "item-text", "item-border", "selected-fill", "selected-text", "band-fill", "band-border"]


class ColorMap:

    # Neutral color level map for light & dark mode
    _neutral_levels: dict[str, list[QColor]] = {
        "neutral-0": [QColor(255, 255, 255), QColor(0, 0, 0)],
        "neutral-50": [QColor(246, 247, 249), QColor(20, 24, 31)],
        "neutral-100": [QColor(237, 240, 242), QColor(31, 38, 51)],
        "neutral-200": [QColor(225, 229, 234), QColor(39, 49, 63)],
        "neutral-400": [QColor(195, 206, 215), QColor(66, 82, 102)],
        "neutral-700": [QColor(96, 110, 128), QColor(182, 191, 201)],
        "neutral-900": [QColor(24, 29, 37), QColor(237, 239, 243)],
        "neutral-1000": [QColor(0, 0, 0), QColor(255, 255, 255)],
    }

    def __init__(self, darkmode: bool = False) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get UI color (surface, border, text). Uses instance darkmode if not specified."""
        layout_and_text_colors = {
            "surface-base": "neutral-0",
            "surface-lower": "neutral-50",
            "border": "neutral-200",
            "border-intense": "neutral-1000",
            "text-base": "neutral-900",
            "text-secondary": "neutral-700",
        }
        return self._get_neutral_color(layout_and_text_colors[name], darkmode)

    def get_selection_color(self, name: SelectionColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get item and band colors. Selected items invert the unselected ones."""
        if name == "band-fill":
            # 30% of the foreground over whatever is underneath
            color = QColor(self._get_neutral_color("neutral-1000", darkmode))
            color.setAlphaF(0.3)
            return color

        item_colors = {
            "item-fill": "neutral-0",
            "item-text": "neutral-1000",
            "item-border": "neutral-1000",
            "selected-fill": "neutral-1000",
            "selected-text": "neutral-0",
            "band-border": "neutral-1000",
        }
        return self._get_neutral_color(item_colors[name], darkmode)

    def _get_neutral_color(self, level: str, darkmode: Optional[bool] = None) -> QColor:
        return ColorMap._neutral_levels[level][self._mode_loc(darkmode)]

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
