"""
Render Loop
Drives one `update_frames()` per timer tick until stopped.
"""
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from revolutionviewer.config import FRAME_INTERVAL_MS
from revolutionviewer.controller.scene_manager import ViewRegistry

logger = logging.getLogger(__name__)


class RenderLoop(QObject):
    # Emitted once per completed tick
    frame_rendered = Signal()

    def __init__(self, registry: ViewRegistry, interval_ms: int = FRAME_INTERVAL_MS, parent=None) -> None:
        super().__init__(parent)
        self.registry = registry

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.tick)

    @property
    def is_running(self) -> bool:
        return self.timer.isActive()

    def start(self) -> None:
        if not self.timer.isActive():
            logger.debug(f"Render loop started ({self.timer.interval()} ms per frame).")
            self.timer.start()

    def stop(self) -> None:
        if self.timer.isActive():
            self.timer.stop()
            logger.debug("Render loop stopped.")

    def tick(self) -> None:
        try:
            self.registry.update_frames()
        except Exception:
            logger.exception("Frame update failed, stopping the render loop.")
            self.stop()
            return
        self.frame_rendered.emit()
