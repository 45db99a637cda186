import math

import pytest

from revolutionviewer.model.expression import (
    SENTINEL_VALUE,
    CompiledFormula,
    FormulaError,
    evaluate_or_sentinel,
    is_blank,
    normalize_formula,
    parse_formula,
    try_evaluate,
)


class TestParse:
    def test_power_notations_agree(self):
        for x in (-2.0, 0.5, 3.0):
            assert try_evaluate("x^2", x) == pytest.approx(try_evaluate("x**2", x))

    def test_implicit_multiplication(self):
        assert try_evaluate("2x", 3.0) == pytest.approx(6.0)
        assert try_evaluate("3exp(-x^2)", 0.0) == pytest.approx(3.0)
        assert try_evaluate("2sin(x)", math.pi / 2) == pytest.approx(2.0)

    def test_decimal_comma(self):
        assert normalize_formula(" 1,5x ") == "1.5x"
        assert try_evaluate("1,5x", 2.0) == pytest.approx(3.0)

    def test_named_functions_and_constants(self):
        assert try_evaluate("sqrt(4 - x^2)", 0.0) == pytest.approx(2.0)
        assert try_evaluate("ln(x + 1)", math.e - 1) == pytest.approx(1.0)
        assert try_evaluate("log10(x)", 100.0) == pytest.approx(2.0)
        assert try_evaluate("abs(x)", -4.0) == pytest.approx(4.0)
        assert try_evaluate("cbrt(x)", 8.0) == pytest.approx(2.0)
        assert try_evaluate("pi", 0.0) == pytest.approx(math.pi)

    def test_constant_formula(self):
        assert try_evaluate("2", 17.0) == pytest.approx(2.0)

    def test_unknown_variable_is_an_error(self):
        with pytest.raises(FormulaError):
            parse_formula("y+1")

    def test_blank_is_an_error(self):
        with pytest.raises(FormulaError):
            parse_formula("   ")

    def test_garbage_is_an_error(self):
        with pytest.raises(FormulaError):
            parse_formula("x +* (")

    def test_formula_error_is_value_error(self):
        assert issubclass(FormulaError, ValueError)


class TestEvaluate:
    def test_compiled_formula_keeps_text(self):
        f = CompiledFormula.compile("x^3")
        assert f.text == "x^3"
        assert f.evaluate(2.0) == pytest.approx(8.0)

    def test_non_finite_results_are_values_not_failures(self):
        value = try_evaluate("1/x", 0.0)
        assert value is not None
        assert math.isinf(value)

        value = try_evaluate("sqrt(x)", -1.0)
        assert value is not None
        assert math.isnan(value)

    def test_failure_returns_none(self):
        assert try_evaluate("y", 1.0) is None

    def test_sentinel_on_failure(self):
        assert evaluate_or_sentinel("not a formula (", 1.0) == SENTINEL_VALUE
        assert evaluate_or_sentinel("x + 1", 1.0) == pytest.approx(2.0)

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("  \t")
        assert not is_blank("x")
