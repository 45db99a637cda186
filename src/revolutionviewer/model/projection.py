"""
World -> screen projection for label overlays.

Given a 3D point and the camera's combined view-projection matrix, compute
normalized device coordinates, then pixel coordinates inside the panel that
hosts the view.
"""
from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def project_to_ndc(
    point: Sequence[float],
    view_projection: npt.NDArray[np.float64]
) -> tuple[float, float, float]:
    """
    Project a world point to normalized device coordinates.

    Args:
        point: (x, y, z) in world units.
        view_projection: 4x4 matrix (projection @ view), column-vector convention.

    Returns:
        (x, y, z) in NDC; x and y lie in [-1, 1] for points inside the frustum.

    Raises:
        ValueError: If the matrix is not 4x4.
    """
    m = np.asarray(view_projection, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 matrix, got {m.shape}.")

    clip = m @ np.array([point[0], point[1], point[2], 1.0], dtype=np.float64)
    w = clip[3] if clip[3] != 0.0 else 1e-12
    return float(clip[0] / w), float(clip[1] / w), float(clip[2] / w)


def ndc_to_pixels(
    ndc: Sequence[float],
    width: float,
    height: float,
    offset: tuple[float, float] = (0.0, 0.0)
) -> tuple[float, float]:
    """
    Map NDC to pixel coordinates with the origin at the panel's top-left corner.

    Args:
        ndc: (x, y[, z]) normalized device coordinates.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        offset: Canvas position inside the containing panel.
    """
    px = (ndc[0] * 0.5 + 0.5) * width
    py = (-ndc[1] * 0.5 + 0.5) * height
    return offset[0] + px, offset[1] + py


def is_in_front(ndc: Sequence[float]) -> bool:
    """True if the projected point lies between the near and far planes."""
    return -1.0 <= ndc[2] <= 1.0
