from .frame_scheduler import QtFrameScheduler
from .item_grid_widget import ItemGridWidget
from .selectable_area import SelectableArea

__all__ = ['QtFrameScheduler', 'ItemGridWidget', 'SelectableArea']
