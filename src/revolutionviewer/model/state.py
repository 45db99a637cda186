"""
Input State (Data Model)
========================
Holds the raw text of the four input fields.

Views write the text as the user types; the regeneration controller reads
the formulas and the interval from here. Nothing is parsed until a
regeneration is requested.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from revolutionviewer.model.expression import is_blank
from revolutionviewer.model.interval import Interval, parse_interval

if TYPE_CHECKING:
    from revolutionviewer.model.examples import ExamplePreset

logger = logging.getLogger(__name__)


@dataclass
class PlotInputs:
    formula_1: str = "x^2"
    formula_2: str = ""
    limit_a: str = "-1"
    limit_b: str = "3"

    def formulas(self) -> list[str]:
        """The non-blank formulas, stripped, in field order."""
        return [f.strip() for f in (self.formula_1, self.formula_2) if not is_blank(f)]

    def formula_slots(self) -> list[tuple[int, str]]:
        """(slot index, formula) for every non-blank field; slot 0 is the first field."""
        return [
            (slot, f.strip())
            for slot, f in enumerate((self.formula_1, self.formula_2))
            if not is_blank(f)
        ]

    def interval(self) -> Interval:
        return parse_interval(self.limit_a, self.limit_b)

    def clear(self) -> None:
        """Blank every field."""
        self.formula_1 = ""
        self.formula_2 = ""
        self.limit_a = ""
        self.limit_b = ""
        logger.info("Inputs have been cleared.")

    def apply_example(self, preset: ExamplePreset) -> None:
        """Load a preset into the first formula and the bounds; blank the second formula."""
        self.formula_1 = preset.formula
        self.formula_2 = ""
        self.limit_a = preset.a
        self.limit_b = preset.b
        logger.info(f"Example selected: {preset.formula} on [{preset.a}, {preset.b}]")
