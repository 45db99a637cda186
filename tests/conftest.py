import pytest

from revolutionviewer.controller.scene_manager import ViewId, ViewRegistry
from revolutionviewer.model.state import PlotInputs


class FakeBackend:
    """Records attach/detach calls instead of drawing anything."""

    def __init__(self):
        self.attached = {}
        self.detached = []
        self.frames = 0
        self._next = 0

    def attach(self, geometry):
        self._next += 1
        handle = f"h{self._next}"
        self.attached[handle] = geometry
        return handle

    def detach(self, handle):
        assert handle in self.attached, f"detach of unknown handle {handle}"
        self.detached.append(handle)
        del self.attached[handle]

    def update_frame(self):
        self.frames += 1

    @property
    def live(self):
        return list(self.attached.values())


@pytest.fixture
def backends():
    return {view_id: FakeBackend() for view_id in ViewId}


@pytest.fixture
def registry(backends):
    reg = ViewRegistry()
    for view_id, backend in backends.items():
        reg.register(view_id, backend)
    return reg


@pytest.fixture
def inputs():
    return PlotInputs()
