"""
Main Application Window
=======================
Controls on the left, the three views on the right.

The window wires the panels to the `RegenerationController`, registers its
view widgets with the `ViewRegistry`, and owns the `RenderLoop` that drives
them.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLabel
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent

from revolutionviewer.controller.regeneration import RegenerationController
from revolutionviewer.controller.scene_manager import ViewId, ViewRegistry
from revolutionviewer.model.examples import ExamplePreset
from revolutionviewer.model.state import PlotInputs
from revolutionviewer.view.application import VISIBLE_APP_NAME
from revolutionviewer.view.panels.examples_panel import ExamplesPanel
from revolutionviewer.view.panels.input_panel import InputPanel
from revolutionviewer.view.render_loop import RenderLoop
from revolutionviewer.view.widgets.plot_2d import Plot2DWidget
from revolutionviewer.view.widgets.plot_3d import Solid3DWidget

logger = logging.getLogger(__name__)


def _titled(title: str, widget: QWidget) -> QWidget:
    box = QWidget()
    layout = QVBoxLayout(box)
    layout.setContentsMargins(2, 2, 2, 2)
    layout.setSpacing(2)
    label = QLabel(title)
    label.setAlignment(Qt.AlignCenter)
    label.setStyleSheet("font-weight: bold;")
    layout.addWidget(label)
    layout.addWidget(widget, stretch=1)
    return box


class MainWindow(QMainWindow):
    def __init__(self, inputs: PlotInputs) -> None:
        super().__init__()
        self.inputs: PlotInputs = inputs
        self.registry: ViewRegistry = ViewRegistry()

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1500, 900)

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        controls = QWidget()
        controls_layout = QVBoxLayout(controls)
        controls_layout.setContentsMargins(0, 0, 0, 0)

        self.input_panel = InputPanel(self.inputs)
        self.examples_panel = ExamplesPanel()
        controls_layout.addWidget(self.input_panel)
        controls_layout.addWidget(self.examples_panel, stretch=1)
        splitter.addWidget(controls)

        # --- RIGHT SIDE: 2D on top, both solids below ---
        views = QSplitter(Qt.Vertical)

        self.plot_2d = Plot2DWidget()
        views.addWidget(_titled("f(x)", self.plot_2d))

        solids = QWidget()
        solids_layout = QHBoxLayout(solids)
        solids_layout.setContentsMargins(0, 0, 0, 0)
        self.plot_3d_x = Solid3DWidget()
        self.plot_3d_y = Solid3DWidget()
        solids_layout.addWidget(_titled("Revolution about X", self.plot_3d_x))
        solids_layout.addWidget(_titled("Revolution about Y", self.plot_3d_y))
        views.addWidget(solids)
        views.setSizes([400, 500])

        splitter.addWidget(views)
        splitter.setSizes([350, 1150])

        # --- SCENE REGISTRATION ---
        self.registry.register(ViewId.GRAPH_2D, self.plot_2d)
        self.registry.register(ViewId.GRAPH_3D_X, self.plot_3d_x)
        self.registry.register(ViewId.GRAPH_3D_Y, self.plot_3d_y)

        self.controller = RegenerationController(self.inputs, self.registry)
        self.render_loop = RenderLoop(self.registry, parent=self)

        # --- SIGNAL CONNECTIONS ---
        self.input_panel.regenerate_requested.connect(self.on_regenerate)
        self.input_panel.clear_requested.connect(self.on_clear)
        self.examples_panel.example_selected.connect(self.on_example_selected)

        self._create_actions()
        self._create_menus()

        # Initial Render
        self.on_regenerate()
        self.render_loop.start()

    def _create_actions(self) -> None:
        self.act_plot = QAction("Plot", self)
        self.act_plot.setShortcut("Ctrl+Return")
        self.act_plot.triggered.connect(self.on_regenerate)

        self.act_clear = QAction("Clear", self)
        self.act_clear.setShortcut("Ctrl+L")
        self.act_clear.triggered.connect(self.on_clear)

        self.act_reset_views = QAction("Reset Views", self)
        self.act_reset_views.setShortcut("Ctrl+R")
        self.act_reset_views.triggered.connect(self.on_reset_views)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_file = self.menuBar().addMenu("File")
        menu_file.addAction(self.act_exit)

        menu_view = self.menuBar().addMenu("View")
        menu_view.addAction(self.act_plot)
        menu_view.addAction(self.act_clear)
        menu_view.addSeparator()
        menu_view.addAction(self.act_reset_views)

    # --- SLOTS ---

    def on_regenerate(self) -> None:
        try:
            self.controller.regenerate_all()
        except Exception:
            logger.exception("Regeneration failed.")

    def on_clear(self) -> None:
        try:
            self.controller.clear_all()
        except Exception:
            logger.exception("Clearing the views failed.")
        self.input_panel.load_from_state()

    def on_example_selected(self, preset: ExamplePreset) -> None:
        try:
            self.controller.select_example(preset)
        except Exception:
            logger.exception(f"Example '{preset.label}' failed to plot.")
        self.input_panel.load_from_state()

    def on_reset_views(self) -> None:
        self.plot_2d.reset_view()
        self.plot_3d_x.reset_camera()
        self.plot_3d_y.reset_camera()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.render_loop.stop()
        self.registry.clear_all()
        self.plot_3d_x.close_plotter()
        self.plot_3d_y.close_plotter()
        logger.info("Main window closed.")
        super().closeEvent(event)
