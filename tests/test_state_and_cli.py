import logging

import pytest

from revolutionviewer.logging_config import level_from_name, setup_logging
from revolutionviewer.main import build_parser, inputs_from_args
from revolutionviewer.model.examples import ExamplePreset
from revolutionviewer.model.interval import Interval
from revolutionviewer.model.state import PlotInputs


class TestPlotInputs:
    def test_defaults(self):
        inputs = PlotInputs()
        assert inputs.formulas() == ["x^2"]
        assert inputs.interval() == Interval(-1.0, 3.0)

    def test_blank_formulas_are_absent(self):
        inputs = PlotInputs(formula_1="  ", formula_2=" sin(x) ")
        assert inputs.formulas() == ["sin(x)"]
        assert inputs.formula_slots() == [(1, "sin(x)")]

    def test_clear_then_interval_falls_back(self):
        inputs = PlotInputs(limit_a="0", limit_b="5")
        inputs.clear()
        assert inputs.formulas() == []
        assert inputs.interval() == Interval(-1.0, 3.0)

    def test_apply_example(self):
        inputs = PlotInputs(formula_2="x")
        inputs.apply_example(ExamplePreset(label="Vase", formula="2 + sin(x)", a="0", b="6,28"))
        assert inputs.formula_slots() == [(0, "2 + sin(x)")]
        assert inputs.interval().b == pytest.approx(6.28)


class TestCommandLine:
    def test_no_options_keep_defaults(self):
        inputs = inputs_from_args(build_parser().parse_args([]))
        assert inputs == PlotInputs()

    def test_options_prefill_inputs(self):
        args = build_parser().parse_args(["--formula", "sqrt(x)", "--formula2", "x", "-a", "0", "-b", "4,5"])
        inputs = inputs_from_args(args)
        assert inputs.formula_slots() == [(0, "sqrt(x)"), (1, "x")]
        assert inputs.interval() == Interval(0.0, 4.5)

    def test_negative_bound(self):
        args = build_parser().parse_args(["-a", "-2"])
        assert inputs_from_args(args).limit_a == "-2"


class TestLogging:
    def test_level_names(self):
        assert level_from_name("debug") == logging.DEBUG
        assert level_from_name(" WARNING ") == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            level_from_name("loud")

    def test_setup_is_repeatable(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        setup_logging(level=logging.INFO)

        logger = logging.getLogger("revolutionviewer")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")
