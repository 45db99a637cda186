import numpy as np
import pytest

from revolutionviewer.model.projection import is_in_front, ndc_to_pixels, project_to_ndc


def look_at(eye, target, up):
    eye, target, up = (np.asarray(v, dtype=float) for v in (eye, target, up))
    f = target - eye
    f /= np.linalg.norm(f)
    s = np.cross(f, up)
    s /= np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3], m[1, :3], m[2, :3] = s, u, -f
    m[:3, 3] = -m[:3, :3] @ eye
    return m


def perspective(fovy_deg, aspect, near, far):
    t = 1.0 / np.tan(np.radians(fovy_deg) / 2)
    m = np.zeros((4, 4))
    m[0, 0] = t / aspect
    m[1, 1] = t
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = 2 * far * near / (near - far)
    m[3, 2] = -1.0
    return m


@pytest.fixture
def view_projection():
    return perspective(75.0, 1.5, 0.1, 1000.0) @ look_at((1.0, 5.0, 12.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))


class TestProjectToNdc:
    def test_target_projects_to_centre(self, view_projection):
        ndc = project_to_ndc((0.0, 0.0, 0.0), view_projection)
        assert ndc[0] == pytest.approx(0.0, abs=1e-12)
        assert ndc[1] == pytest.approx(0.0, abs=1e-12)
        assert is_in_front(ndc)

    def test_point_above_target_projects_up(self, view_projection):
        ndc = project_to_ndc((0.0, 1.0, 0.0), view_projection)
        assert ndc[1] > 0.0

    def test_identity(self):
        assert project_to_ndc((0.25, -0.5, 0.1), np.eye(4)) == pytest.approx((0.25, -0.5, 0.1))

    def test_point_behind_camera(self, view_projection):
        ndc = project_to_ndc((2.0, 10.0, 24.0), view_projection)
        assert not is_in_front(ndc)

    def test_matrix_shape(self):
        with pytest.raises(ValueError):
            project_to_ndc((0.0, 0.0, 0.0), np.eye(3))


class TestNdcToPixels:
    def test_centre(self):
        assert ndc_to_pixels((0.0, 0.0, 0.0), 800, 600) == pytest.approx((400.0, 300.0))

    def test_corners_have_top_left_origin(self):
        assert ndc_to_pixels((-1.0, 1.0), 800, 600) == pytest.approx((0.0, 0.0))
        assert ndc_to_pixels((1.0, -1.0), 800, 600) == pytest.approx((800.0, 600.0))

    def test_offset(self):
        assert ndc_to_pixels((0.0, 0.0), 100, 50, offset=(10.0, 20.0)) == pytest.approx((60.0, 45.0))
