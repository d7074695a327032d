from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, Qt, QTimer


class QtFrameScheduler(QObject):
    """One-shot frame callbacks on the Qt event loop.

    Widgets have no display-refresh callback, so each frame is a single-shot
    precise QTimer of roughly one frame. Timers are children of this object
    and die with it, so nothing fires after the owning widget is gone.
    """

    def __init__(self, interval_ms: int = 16, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.interval_ms: int = interval_ms
        self._timers: Dict[int, QTimer] = {}
        self._next_handle: int = 0

    def request_frame(self, callback: Callable[[], None]) -> int:
        """Run callback once after interval_ms. Returns a handle for cancel_frame()."""
        self._next_handle += 1
        handle = self._next_handle

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(self.interval_ms)
        timer.timeout.connect(lambda: self._fire(handle, callback))

        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel_frame(self, handle: int) -> None:
        """Cancel a pending frame. Unknown or already-fired handles are ignored."""
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        try:
            timer.stop()
            timer.deleteLater()
        except RuntimeError:
            # Timer already deleted along with its parent during shutdown
            pass

    def cancel_all(self) -> None:
        for handle in list(self._timers):
            self.cancel_frame(handle)

    def pending_count(self) -> int:
        return len(self._timers)

    def _fire(self, handle: int, callback: Callable[[], None]) -> None:
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        timer.deleteLater()
        callback()
