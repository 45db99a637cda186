"""Curve Builder: sampled sequences to 2D polyline geometry."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

from revolutionviewer.config import (
    CURVE_PALETTE,
    MULTI_CURVE_WIDTH,
    SINGLE_CURVE_COLOR,
    SINGLE_CURVE_WIDTH,
)
from revolutionviewer.model.sampler import Sample, distinct_point_count

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class CurveGeometry:
    """One polyline in the XY plane."""
    points: npt.NDArray[np.float64]  # (N, 2) array
    color: str = SINGLE_CURVE_COLOR
    width: float = SINGLE_CURVE_WIDTH

    @property
    def n_points(self) -> int:
        return len(self.points)


@dataclass
class CurveGroup:
    """Everything drawn in the 2D view for one regeneration."""
    curves: list[CurveGeometry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.curves)


def palette_color(index: int) -> str:
    """Deterministic colour for the formula at `index`, cycling over the palette."""
    return CURVE_PALETTE[index % len(CURVE_PALETTE)]


def build_curve(samples: Sequence[Sample]) -> Optional[CurveGroup]:
    """
    Single-formula path. Samples are used unfiltered: evaluation failures are
    drawn at the sentinel value 0.

    Returns:
        A group with one curve, or None if the samples collapse to fewer than
        two distinct points (e.g. a zero-length interval).
    """
    points = np.array([(s.x, s.value_or_sentinel()) for s in samples], dtype=np.float64).reshape(-1, 2)
    if distinct_point_count(points) < 2:
        logger.debug("Single curve skipped: fewer than 2 distinct points.")
        return None

    return CurveGroup([CurveGeometry(points=points, color=SINGLE_CURVE_COLOR, width=SINGLE_CURVE_WIDTH)])


def build_curves(sample_sets: Sequence[Sequence[Sample]]) -> Optional[CurveGroup]:
    """
    Multi-formula path. Non-finite samples are dropped; a sequence with fewer
    than two usable points is skipped without failing the others.

    Returns:
        The group of drawable curves, or None if nothing could be drawn.
    """
    group = CurveGroup()

    for index, samples in enumerate(sample_sets):
        points = np.array([(s.x, s.y) for s in samples if s.is_finite], dtype=np.float64).reshape(-1, 2)
        if distinct_point_count(points) < 2:
            logger.debug(f"Curve #{index + 1} skipped: fewer than 2 usable points.")
            continue

        group.curves.append(
            CurveGeometry(points=points, color=palette_color(index), width=MULTI_CURVE_WIDTH)
        )

    if not group.curves:
        logger.warning("No valid function could be plotted.")
        return None

    return group
