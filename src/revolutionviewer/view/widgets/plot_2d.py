"""
2D Function Plot Widget (pyqtgraph)
Orthographic XY view: pan/zoom only, fixed axes with end labels.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QVBoxLayout, QWidget

from revolutionviewer.config import AXIS_LABEL_OFFSET, AXIS_LENGTH, BACKGROUND_COLOR, FRUSTUM_SIZE
from revolutionviewer.model.curves import CurveGroup

logger = logging.getLogger(__name__)


class Plot2DWidget(QWidget):
    """Hosts the primary curve group of the 2D view (a SceneBackend)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground(BACKGROUND_COLOR)
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setMenuEnabled(False)
        layout.addWidget(self.plot_widget)

        self._draw_axes()
        self.reset_view()

    # ------------------------------------------------------------------------------
    # SceneBackend
    # ------------------------------------------------------------------------------

    def attach(self, geometry: CurveGroup) -> List[pg.PlotDataItem]:
        items: List[pg.PlotDataItem] = []
        for curve in geometry.curves:
            item = pg.PlotDataItem(
                curve.points[:, 0],
                curve.points[:, 1],
                pen=pg.mkPen(color=curve.color, width=curve.width),
                connect="finite",
            )
            self.plot_widget.addItem(item)
            items.append(item)
        logger.debug(f"2D view: attached {len(items)} curve(s).")
        return items

    def detach(self, handle: List[pg.PlotDataItem]) -> None:
        for item in handle:
            self.plot_widget.removeItem(item)
            item.deleteLater()

    def update_frame(self) -> None:
        # pyqtgraph repaints itself on pan/zoom; text items follow the view box
        pass

    # ------------------------------------------------------------------------------
    # View setup
    # ------------------------------------------------------------------------------

    def reset_view(self) -> None:
        """Square aspect with FRUSTUM_SIZE world units visible around the origin."""
        half = FRUSTUM_SIZE / 2
        self.plot_widget.setAspectLocked(True)
        self.plot_widget.setRange(xRange=(-half, half), yRange=(-half, half), padding=0)

    def _draw_axes(self) -> None:
        span = np.array([-AXIS_LENGTH, AXIS_LENGTH])
        zero = np.zeros(2)
        black = pg.mkPen(color='k', width=1.5)

        self.plot_widget.addItem(pg.PlotDataItem(span, zero, pen=black))
        self.plot_widget.addItem(pg.PlotDataItem(zero, span, pen=black))
        self.plot_widget.addItem(
            pg.PlotDataItem(span, zero, pen=pg.mkPen(color='r', width=1, style=Qt.PenStyle.DashLine))
        )

        for text, color, pos in (
            ("X", "r", (AXIS_LENGTH + AXIS_LABEL_OFFSET, 0.0)),
            ("Y", "g", (0.0, AXIS_LENGTH + AXIS_LABEL_OFFSET)),
        ):
            label = pg.TextItem(text, color=color, anchor=(0.5, 0.5))
            label.setPos(*pos)
            self.plot_widget.addItem(label)
