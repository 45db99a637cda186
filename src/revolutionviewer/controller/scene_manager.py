"""
Scene Manager
=============
Per-view ownership of live geometry.

Each view (the 2D plot and the two 3D solids) gets one explicit `ViewState`;
a `ViewRegistry` owns all of them. The state holds the only references to the
handles its backend returned, and always detaches old geometry before new
geometry is attached so no render buffers are leaked.

Classes:
    ViewId: Stable keys of the three views.
    SceneBackend: What a view widget must implement to host geometry.
    ViewState: Primary/tracked handles of one view.
    ViewRegistry: Owner of every ViewState.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, Iterator, List, Optional, Protocol, Union

from revolutionviewer.model.curves import CurveGroup
from revolutionviewer.model.revolution import SolidGeometry

logger = logging.getLogger(__name__)

Geometry = Union[CurveGroup, SolidGeometry]


class ViewId(StrEnum):
    GRAPH_2D = "graph2D"
    GRAPH_3D_X = "graph3DX"
    GRAPH_3D_Y = "graph3DY"


class SceneBackend(Protocol):
    def attach(self, geometry: Geometry) -> Any:
        """Add geometry to the scene and return an opaque handle to it."""
        ...

    def detach(self, handle: Any) -> None:
        """Remove the geometry behind `handle` and release its resources."""
        ...

    def update_frame(self) -> None:
        """Advance one frame: controls, overlays, render."""
        ...


@dataclass
class ViewState:
    view_id: ViewId
    backend: SceneBackend
    primary: Optional[Any] = None
    tracked: List[Any] = field(default_factory=list)

    def replace_primary(self, geometry: Optional[CurveGroup]) -> None:
        """Detach the current primary geometry, then attach `geometry` (if any)."""
        self.clear_primary()
        if geometry is not None:
            self.primary = self.backend.attach(geometry)

    def clear_primary(self) -> None:
        if self.primary is not None:
            self.backend.detach(self.primary)
            self.primary = None

    def append_and_track(self, solid: SolidGeometry) -> None:
        """Attach a solid next to the ones already tracked."""
        self.tracked.append(self.backend.attach(solid))

    def clear_tracked(self) -> None:
        """Detach and forget every tracked solid."""
        for handle in self.tracked:
            self.backend.detach(handle)
        if self.tracked:
            logger.debug(f"{self.view_id}: cleared {len(self.tracked)} solid(s).")
        self.tracked = []

    def clear(self) -> None:
        self.clear_primary()
        self.clear_tracked()

    def update_frame(self) -> None:
        self.backend.update_frame()


class ViewRegistry:
    """Owns the per-view states; views that were never registered are simply absent."""

    def __init__(self) -> None:
        self._views: Dict[ViewId, ViewState] = {}

    def register(self, view_id: ViewId, backend: SceneBackend) -> ViewState:
        if view_id in self._views:
            self._views[view_id].clear()
        state = ViewState(view_id=view_id, backend=backend)
        self._views[view_id] = state
        logger.info(f"View '{view_id}' registered.")
        return state

    def get(self, view_id: ViewId) -> Optional[ViewState]:
        return self._views.get(view_id)

    def __iter__(self) -> Iterator[ViewState]:
        return iter(list(self._views.values()))

    def __len__(self) -> int:
        return len(self._views)

    def update_frames(self) -> None:
        """One tick of the render loop: every view updates once."""
        for state in self:
            state.update_frame()

    def clear_all(self) -> None:
        for state in self:
            state.clear()
