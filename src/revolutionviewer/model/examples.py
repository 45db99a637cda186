"""Example presets shown in the examples table."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from revolutionviewer.config import EXAMPLES_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExamplePreset:
    label: str
    formula: str
    # Bounds are kept as text: they go straight into the input fields
    a: str
    b: str

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "formula": self.formula, "a": self.a, "b": self.b}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ExamplePreset:
        """
        Raises:
            KeyError: If 'formula', 'a' or 'b' is missing.
        """
        formula = str(data["formula"])
        return ExamplePreset(
            label=str(data.get("label", formula)),
            formula=formula,
            a=str(data["a"]),
            b=str(data["b"]),
        )


def load_examples(path: Optional[str] = None) -> List[ExamplePreset]:
    """
    Load presets from a JSON list of {label, formula, a, b} records.

    A missing or malformed file is logged and yields an empty list; malformed
    records are skipped.
    """
    path = path or EXAMPLES_PATH
    try:
        with open(path, mode="r", encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not load examples from '{path}': {e}")
        return []

    if not isinstance(records, list):
        logger.error(f"Examples file '{path}' must contain a JSON list.")
        return []

    presets: List[ExamplePreset] = []
    for i, record in enumerate(records):
        try:
            presets.append(ExamplePreset.from_dict(record))
        except (KeyError, TypeError) as e:
            logger.warning(f"Skipping example #{i} in '{path}': {e}")

    logger.info(f"Loaded {len(presets)} examples.")
    return presets
