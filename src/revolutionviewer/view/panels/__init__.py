from .input_panel import InputPanel
from .examples_panel import ExamplesPanel

__all__ = ["InputPanel", "ExamplesPanel"]
