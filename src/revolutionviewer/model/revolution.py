"""
Revolution Builder
==================
Lathes a sampled profile 360 degrees to build the solid of revolution of a
formula about the X or the Y axis.

The lathe revolves around +Y (like a three.js LatheGeometry): profile row
(r, h) at angle phi becomes the vertex (r sin(phi), h, r cos(phi)). Solids
about X are rotated -90 degrees about Z afterwards so the lathe axis lies on
the plotting X axis.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import numpy as np
import pyvista as pv

from revolutionviewer.config import SOLID_OPACITY
from revolutionviewer.model.expression import is_blank
from revolutionviewer.model.sampler import RevolutionAxis, distinct_point_count, sample_profile

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class SolidGeometry:
    """A lathed surface plus the material it is drawn with."""
    mesh: pv.PolyData
    axis: RevolutionAxis
    color: str
    profile: npt.NDArray[np.float64]  # (N, 2) rows of (radius, axial)
    opacity: float = SOLID_OPACITY
    double_sided: bool = True


def lathe(profile: npt.NDArray[np.float64], segments: int) -> pv.PolyData:
    """
    Revolve a (radius, axial) profile around the +Y axis.

    Args:
        profile: (N, 2) array with N >= 2, ordered along the axial direction.
        segments: Number of angular steps over 360 degrees.

    Returns:
        Quad surface with (segments + 1) * N points and segments * (N - 1) faces.
        The first and last rings coincide (seam).

    Raises:
        ValueError: On a malformed profile or segments < 1.
    """
    prof = np.asarray(profile, dtype=np.float64)
    if prof.ndim != 2 or prof.shape[1] != 2 or prof.shape[0] < 2:
        raise ValueError(f"Expected profile of shape (N >= 2, 2), got {prof.shape}.")
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}.")

    n = prof.shape[0]
    radius, axial = prof[:, 0], prof[:, 1]
    phi = np.linspace(0.0, 2.0 * np.pi, segments + 1)

    # one ring of n vertices per angular step
    xs = np.outer(np.sin(phi), radius)
    ys = np.broadcast_to(axial, (segments + 1, n))
    zs = np.outer(np.cos(phi), radius)
    points = np.column_stack((xs.ravel(), ys.ravel(), zs.ravel()))

    # quad cells: [4, a, b, c, d] between ring i and ring i + 1
    ring = np.arange(segments)[:, None] * n
    row = np.arange(n - 1)[None, :]
    a = (ring + row).ravel()
    b = a + n
    c = a + n + 1
    d = a + 1
    faces = np.column_stack((np.full_like(a, 4), a, b, c, d)).ravel()

    return pv.PolyData(points, faces=faces)


def build_solid(
    formula: str,
    a: float,
    b: float,
    segment_count: int,
    axis: RevolutionAxis,
    color: str
) -> Optional[SolidGeometry]:
    """
    Sample `formula` over [a, b] and lathe it about `axis`.

    The same segment count drives both the sampling and the angular resolution.

    Returns:
        The solid, or None (no error) when the formula is blank or the profile
        has fewer than two distinct points.
    """
    if is_blank(formula):
        return None

    profile = sample_profile(formula, a, b, segment_count, axis)
    if distinct_point_count(profile) < 2:
        logger.debug(f"No solid about {axis.upper()} for '{formula}': profile has {len(profile)} point(s).")
        return None

    mesh = lathe(profile, segment_count)
    if axis == RevolutionAxis.X:
        mesh = mesh.rotate_z(-90.0, point=(0.0, 0.0, 0.0), inplace=False)

    logger.debug(f"Solid about {axis.upper()} for '{formula}': {mesh.n_points} points, {mesh.n_cells} faces.")
    return SolidGeometry(mesh=mesh, axis=axis, color=color, profile=profile)
