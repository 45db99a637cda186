"""Integration interval [A, B] and localized parsing of its bounds."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from revolutionviewer.config import DEFAULT_LIMIT_A, DEFAULT_LIMIT_B

logger = logging.getLogger(__name__)

# Leading decimal number, the way a lenient browser parser reads "2.5abc" as 2.5
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Interval:
    a: float
    b: float

    @classmethod
    def normalized(cls, a: float, b: float) -> Interval:
        """Build an interval with a <= b, swapping the bounds if given in reverse."""
        if a > b:
            a, b = b, a
        return cls(a=a, b=b)

    @property
    def length(self) -> float:
        return self.b - self.a

    @property
    def is_degenerate(self) -> bool:
        return self.a == self.b

    def as_tuple(self) -> tuple[float, float]:
        return self.a, self.b


def parse_localized_number(text: Optional[str]) -> Optional[float]:
    """
    Parse a number typed with either a decimal comma or a decimal period.

    Args:
        text: User input, e.g. "1,5", " -2.25 ", "3e2", "4abc".

    Returns:
        The leading finite number, or None if there is none.
    """
    if not isinstance(text, str):
        return None

    normalized = text.strip().replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if match is None:
        return None

    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_interval(text_a: Optional[str], text_b: Optional[str]) -> Interval:
    """
    Read both bounds from text; each falls back to its default independently.

    Bounds whose span overflows a float (e.g. -1e308 and 1e308) cannot be
    sampled, so both fall back to the defaults.
    """
    a = parse_localized_number(text_a)
    b = parse_localized_number(text_b)

    if a is None:
        logger.debug(f"Lower limit '{text_a}' not understood, using {DEFAULT_LIMIT_A}.")
        a = DEFAULT_LIMIT_A
    if b is None:
        logger.debug(f"Upper limit '{text_b}' not understood, using {DEFAULT_LIMIT_B}.")
        b = DEFAULT_LIMIT_B

    if not math.isfinite(b - a):
        logger.debug(f"Interval [{a:g}, {b:g}] is too wide, using [{DEFAULT_LIMIT_A}, {DEFAULT_LIMIT_B}].")
        a, b = DEFAULT_LIMIT_A, DEFAULT_LIMIT_B

    return Interval.normalized(a, b)
