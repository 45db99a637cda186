"""
Regeneration Pipeline
=====================
The user-facing operations: regenerate everything from the current inputs,
clear everything, or load an example and regenerate.

Every regeneration recomputes samples and geometry from scratch (no caching)
and runs synchronously; segment counts are small enough for that.
"""
from __future__ import annotations

import logging
from typing import Optional

from revolutionviewer.config import CURVE_SEGMENTS, RADIAL_SEGMENTS, SOLID_COLORS
from revolutionviewer.controller.scene_manager import ViewId, ViewRegistry
from revolutionviewer.model.curves import CurveGroup, build_curve, build_curves
from revolutionviewer.model.examples import ExamplePreset
from revolutionviewer.model.interval import Interval
from revolutionviewer.model.revolution import build_solid
from revolutionviewer.model.sampler import RevolutionAxis, sample
from revolutionviewer.model.state import PlotInputs

logger = logging.getLogger(__name__)

SOLID_VIEWS: dict[RevolutionAxis, ViewId] = {
    RevolutionAxis.X: ViewId.GRAPH_3D_X,
    RevolutionAxis.Y: ViewId.GRAPH_3D_Y,
}


class RegenerationController:
    def __init__(
        self,
        inputs: PlotInputs,
        registry: ViewRegistry,
        curve_segments: int = CURVE_SEGMENTS,
        radial_segments: int = RADIAL_SEGMENTS
    ) -> None:
        self.inputs = inputs
        self.registry = registry
        self.curve_segments = curve_segments
        self.radial_segments = radial_segments

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def regenerate_all(self) -> None:
        """Rebuild the 2D curve(s) and both solids from the current inputs."""
        formulas = self.inputs.formulas()
        interval = self.inputs.interval()
        logger.info(f"Regenerating {len(formulas)} formula(s) on [{interval.a:g}, {interval.b:g}].")

        self._regenerate_curves(formulas, interval)
        self._regenerate_solids(interval)

    def clear_all(self) -> None:
        """Blank the inputs and detach every piece of geometry."""
        self.inputs.clear()

        view_2d = self.registry.get(ViewId.GRAPH_2D)
        if view_2d is not None:
            view_2d.clear_primary()

        for view_id in SOLID_VIEWS.values():
            view = self.registry.get(view_id)
            if view is not None:
                view.clear_tracked()

    def select_example(self, preset: ExamplePreset) -> None:
        """Populate the inputs from a preset and regenerate."""
        self.inputs.apply_example(preset)
        self.regenerate_all()

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _regenerate_curves(self, formulas: list[str], interval: Interval) -> None:
        view = self.registry.get(ViewId.GRAPH_2D)
        if view is None:
            logger.debug("2D view not initialized, skipping curves.")
            return

        group: Optional[CurveGroup]
        if len(formulas) == 1:
            group = build_curve(sample(formulas[0], interval.a, interval.b, self.curve_segments))
        elif len(formulas) > 1:
            sample_sets = [sample(f, interval.a, interval.b, self.curve_segments) for f in formulas]
            group = build_curves(sample_sets)
        else:
            # Nothing typed: the 2D view keeps whatever it shows
            return

        view.replace_primary(group)

    def _regenerate_solids(self, interval: Interval) -> None:
        for view_id in SOLID_VIEWS.values():
            view = self.registry.get(view_id)
            if view is not None:
                view.clear_tracked()

        for slot, formula in self.inputs.formula_slots():
            colors = dict(zip(SOLID_VIEWS, SOLID_COLORS[slot % len(SOLID_COLORS)]))
            for axis, view_id in SOLID_VIEWS.items():
                view = self.registry.get(view_id)
                if view is None:
                    continue
                solid = build_solid(
                    formula, interval.a, interval.b, self.radial_segments, axis, colors[axis]
                )
                if solid is not None:
                    view.append_and_track(solid)
