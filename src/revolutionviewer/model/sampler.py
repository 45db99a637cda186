"""
Sampler
=======
Evaluates a formula on an evenly spaced grid over [A, B] and, for the
solids, maps the samples to a (radius, axial) revolution profile.
"""
from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import NamedTuple, Optional, Sequence, TYPE_CHECKING

import numpy as np

from revolutionviewer.model.expression import SENTINEL_VALUE, CompiledFormula, FormulaError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class RevolutionAxis(StrEnum):
    """Axis the profile is revolved about."""
    X = "x"
    Y = "y"


class Sample(NamedTuple):
    x: float
    y: Optional[float]  # None = the formula could not be evaluated at x

    @property
    def failed(self) -> bool:
        return self.y is None

    @property
    def is_finite(self) -> bool:
        return self.y is not None and math.isfinite(self.x) and math.isfinite(self.y)

    def value_or_sentinel(self) -> float:
        return SENTINEL_VALUE if self.y is None else self.y


def grid(a: float, b: float, segment_count: int) -> npt.NDArray[np.float64]:
    """
    The segment_count + 1 abscissae x_i = a + i * (b - a) / segment_count.

    Raises:
        ValueError: If segment_count < 1.
    """
    if segment_count < 1:
        raise ValueError(f"segment_count must be >= 1, got {segment_count}.")
    step = (b - a) / segment_count
    return a + step * np.arange(segment_count + 1, dtype=np.float64)


def sample(formula: str, a: float, b: float, segment_count: int) -> list[Sample]:
    """
    Sample `formula` at segment_count + 1 evenly spaced points of [a, b].

    A formula that does not parse yields failed samples (y = None) at every x,
    with a single warning instead of one per point.
    """
    xs = grid(a, b, segment_count)

    try:
        compiled = CompiledFormula.compile(formula)
    except FormulaError as e:
        logger.warning(str(e))
        return [Sample(float(x), None) for x in xs]

    return [Sample(float(x), compiled.evaluate(float(x))) for x in xs]


def build_profile(samples: Sequence[Sample], axis: RevolutionAxis) -> npt.NDArray[np.float64]:
    """
    Map samples to an (N, 2) array of (radius, axial) rows, keeping sample order.

    - About X: radius = |y|, axial = x; only finite y >= 0 are kept (negative y
      is dropped, not mirrored).
    - About Y: radius = |x|, axial = y; every finite y is kept.
    """
    if axis == RevolutionAxis.X:
        rows = [(abs(s.y), s.x) for s in samples if s.is_finite and s.y >= 0]
    else:
        rows = [(abs(s.x), s.y) for s in samples if s.is_finite]

    return np.asarray(rows, dtype=np.float64).reshape(-1, 2)


def sample_profile(
    formula: str,
    a: float,
    b: float,
    segment_count: int,
    axis: RevolutionAxis
) -> npt.NDArray[np.float64]:
    """Sample a formula and turn it into a revolution profile for the given axis."""
    return build_profile(sample(formula, a, b, segment_count), axis)


def distinct_point_count(points: npt.NDArray[np.float64]) -> int:
    """
    Number of points left after collapsing consecutive duplicates.

    A sequence sampled over a zero-length interval collapses to a single point,
    whatever the formula evaluates to there (NaN and inf included).
    """
    pts = np.asarray(points, dtype=np.float64)
    if len(pts) < 2:
        return len(pts)
    prev, cur = pts[:-1], pts[1:]
    # NaN matches NaN here
    same = (prev == cur) | (np.isnan(prev) & np.isnan(cur))
    changed = ~same.all(axis=1)
    return 1 + int(np.count_nonzero(changed))
