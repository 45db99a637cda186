"""
3D Solid View (PyVista Wrapper)
Perspective view with orbit interaction, XYZ axes with cones and labels,
and the solids of revolution for one axis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pyvista as pv
from PySide6.QtWidgets import QVBoxLayout, QWidget
from pyvistaqt import QtInteractor
from vtkmodules.vtkRenderingCore import vtkTextActor

from revolutionviewer.config import (
    AXIS_LABEL_OFFSET,
    AXIS_LENGTH,
    BACKGROUND_COLOR,
    CAMERA_POSITION_3D,
    CAMERA_VIEW_ANGLE_3D,
    LIGHT_POSITION,
)
from revolutionviewer.model.projection import is_in_front, ndc_to_pixels, project_to_ndc
from revolutionviewer.model.revolution import SolidGeometry

logger = logging.getLogger(__name__)


@dataclass
class AxisLabel:
    """A text overlay pinned to a world point."""
    text: str
    position: Tuple[float, float, float]
    color: Tuple[float, float, float]
    actor: Optional[vtkTextActor] = None


AXIS_CONES = [
    # (tip centre, direction, colour)
    ((AXIS_LENGTH, 0.0, 0.0), (1.0, 0.0, 0.0), "#FF0000"),
    ((0.0, AXIS_LENGTH, 0.0), (0.0, 1.0, 0.0), "#00FF00"),
    ((0.0, 0.0, AXIS_LENGTH), (0.0, 0.0, 1.0), "#0000FF"),
]


class Solid3DWidget(QWidget):
    """Hosts the tracked solids of one 3D view (a SceneBackend)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._labels: List[AxisLabel] = []
        self._closed: bool = False

        self._init_plotter()
        self._draw_axes()
        self.reset_camera()

    # ------------------------------------------------------------------------------
    # SceneBackend
    # ------------------------------------------------------------------------------

    def attach(self, geometry: SolidGeometry) -> pv.Actor:
        actor = self.plotter.add_mesh(
            geometry.mesh,
            color=geometry.color,
            opacity=geometry.opacity,
            culling=False if geometry.double_sided else "back",
            smooth_shading=True,
            ambient=0.35,
            specular=0.4,
            pickable=False,
            show_scalar_bar=False,
            render=False,
        )
        logger.debug(f"3D view: attached solid about {geometry.axis.upper()} ({geometry.mesh.n_cells} faces).")
        return actor

    def detach(self, handle: pv.Actor) -> None:
        self.plotter.remove_actor(handle, render=False)

    def update_frame(self) -> None:
        """Reposition the axis labels for the current camera and redraw."""
        if self._closed or self.plotter.renderer is None:
            return
        self._update_axis_labels()
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def reset_camera(self) -> None:
        cam = self.plotter.camera
        cam.position = CAMERA_POSITION_3D
        cam.focal_point = (0.0, 0.0, 0.0)
        cam.up = (0.0, 1.0, 0.0)
        cam.view_angle = CAMERA_VIEW_ANGLE_3D
        self.plotter.reset_camera_clipping_range()

    def close_plotter(self) -> None:
        if not self._closed:
            self._closed = True
            self.plotter.close()

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND_COLOR)

        self.plotter.remove_all_lights()
        self.plotter.add_light(pv.Light(position=LIGHT_POSITION, focal_point=(0.0, 0.0, 0.0), intensity=1.0))

    def _draw_axes(self) -> None:
        for a, b in (
            ((-AXIS_LENGTH, 0.0, 0.0), (AXIS_LENGTH, 0.0, 0.0)),
            ((0.0, -AXIS_LENGTH, 0.0), (0.0, AXIS_LENGTH, 0.0)),
            ((0.0, 0.0, -AXIS_LENGTH), (0.0, 0.0, AXIS_LENGTH)),
        ):
            self.plotter.add_mesh(pv.Line(a, b), color="black", line_width=2, pickable=False)

        for center, direction, color in AXIS_CONES:
            cone = pv.Cone(center=center, direction=direction, height=0.5, radius=0.3, resolution=32)
            self.plotter.add_mesh(cone, color=color, pickable=False)

        tip = AXIS_LENGTH + AXIS_LABEL_OFFSET
        for text, position, color in (
            ("X", (tip, 0.0, 0.0), (0.8, 0.0, 0.0)),
            ("Y", (0.0, tip, 0.0), (0.0, 0.6, 0.0)),
            ("Z", (0.0, 0.0, tip), (0.0, 0.0, 0.8)),
        ):
            actor = vtkTextActor()
            actor.SetInput(text)
            tp = actor.GetTextProperty()
            tp.SetFontSize(16)
            tp.SetColor(*color)
            tp.BoldOn()
            tp.ShadowOff()
            tp.SetJustificationToCentered()
            tp.SetVerticalJustificationToCentered()
            self.plotter.renderer.AddActor2D(actor)
            self._labels.append(AxisLabel(text=text, position=position, color=color, actor=actor))

    def _update_axis_labels(self) -> None:
        width, height = self.plotter.ren_win.GetSize()
        if width <= 1 or height <= 1:
            return

        aspect = self.plotter.renderer.GetTiledAspectRatio()
        matrix = pv.array_from_vtkmatrix(
            self.plotter.camera.GetCompositeProjectionTransformMatrix(aspect, -1, 1)
        )

        for label in self._labels:
            ndc = project_to_ndc(label.position, matrix)
            label.actor.SetVisibility(is_in_front(ndc))
            px, py = ndc_to_pixels(ndc, width, height)
            # VTK display coordinates start at the bottom-left corner
            label.actor.SetDisplayPosition(int(px), int(height - py))
