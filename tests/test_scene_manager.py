from revolutionviewer.controller.scene_manager import ViewId, ViewRegistry
from revolutionviewer.model.curves import build_curve
from revolutionviewer.model.revolution import build_solid
from revolutionviewer.model.sampler import RevolutionAxis, sample

from conftest import FakeBackend


def _curve():
    return build_curve(sample("x", 0.0, 1.0, 4))


def _solid():
    return build_solid("x", 0.0, 1.0, 4, RevolutionAxis.Y, "#28A745")


class TestViewState:
    def test_replace_primary_detaches_first(self, registry, backends):
        view = registry.get(ViewId.GRAPH_2D)
        backend = backends[ViewId.GRAPH_2D]

        view.replace_primary(_curve())
        first = view.primary
        view.replace_primary(_curve())

        assert backend.detached == [first]
        assert len(backend.live) == 1

    def test_replace_primary_with_none_clears(self, registry, backends):
        view = registry.get(ViewId.GRAPH_2D)
        view.replace_primary(_curve())
        view.replace_primary(None)
        assert view.primary is None
        assert backends[ViewId.GRAPH_2D].live == []

    def test_tracked_solids(self, registry, backends):
        view = registry.get(ViewId.GRAPH_3D_Y)
        view.append_and_track(_solid())
        view.append_and_track(_solid())
        assert len(view.tracked) == 2

        view.clear_tracked()
        assert view.tracked == []
        assert backends[ViewId.GRAPH_3D_Y].live == []

    def test_clear_without_geometry_is_a_no_op(self, registry, backends):
        view = registry.get(ViewId.GRAPH_3D_X)
        view.clear()
        assert backends[ViewId.GRAPH_3D_X].detached == []


class TestViewRegistry:
    def test_unregistered_view_is_absent(self):
        reg = ViewRegistry()
        assert reg.get(ViewId.GRAPH_2D) is None
        assert len(reg) == 0

    def test_update_frames_ticks_every_view_once(self, registry, backends):
        registry.update_frames()
        registry.update_frames()
        assert all(b.frames == 2 for b in backends.values())

    def test_re_register_releases_old_geometry(self, registry, backends):
        old = backends[ViewId.GRAPH_2D]
        registry.get(ViewId.GRAPH_2D).replace_primary(_curve())

        new = FakeBackend()
        state = registry.register(ViewId.GRAPH_2D, new)

        assert old.live == []
        assert state.primary is None
        assert registry.get(ViewId.GRAPH_2D).backend is new

    def test_clear_all(self, registry, backends):
        registry.get(ViewId.GRAPH_2D).replace_primary(_curve())
        registry.get(ViewId.GRAPH_3D_X).append_and_track(_solid())
        registry.clear_all()
        assert all(b.live == [] for b in backends.values())
