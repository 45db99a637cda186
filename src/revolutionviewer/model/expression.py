"""
Expression Evaluator
====================
Turns user-typed formula text into numbers.

Formulas are parsed with SymPy (implicit multiplication, `^` as power,
decimal commas accepted) and lambdified with NumPy. Evaluation never raises:
a failure is reported as `None` so callers decide whether to drop the point
or fall back to the sentinel value `0.0`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np
import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

logger = logging.getLogger(__name__)

SENTINEL_VALUE: float = 0.0

X = sp.Symbol("x", real=True)

TRANSFORMS = standard_transformations + (implicit_multiplication_application, convert_xor)

LOCAL_NAMES: dict[str, object] = {
    "x": X,
    "pi": sp.pi,
    "e": sp.E,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "exp": sp.exp,
    "log": sp.log,
    "ln": sp.log,
    "log10": lambda arg: sp.log(arg, 10),
    "sqrt": sp.sqrt,
    "cbrt": sp.cbrt,
    "abs": sp.Abs,
    "Abs": sp.Abs,
}


class FormulaError(ValueError):
    """Raised when a formula cannot be parsed into an expression of x."""


def is_blank(text: Optional[str]) -> bool:
    """Blank formulas are treated as absent and never evaluated."""
    return text is None or not text.strip()


def normalize_formula(text: str) -> str:
    """Strip whitespace and turn every decimal comma into a period."""
    return text.strip().replace(",", ".")


def parse_formula(text: str) -> sp.Expr:
    """
    Parse formula text into a SymPy expression of `x`.

    Args:
        text: Formula as typed by the user, e.g. "x^2", "2sin(x)", "sqrt(4 - x^2)".

    Returns:
        The parsed expression.

    Raises:
        FormulaError: If the text is blank, malformed, or uses a variable other than x.
    """
    if is_blank(text):
        raise FormulaError("Formula is empty.")

    source = normalize_formula(text)
    try:
        expr = sp.sympify(parse_expr(source, local_dict=dict(LOCAL_NAMES), transformations=TRANSFORMS))
    except Exception as e:  # tokenize/SyntaxError/SympifyError, all mean "not a formula"
        raise FormulaError(f"Cannot parse formula '{text}': {e}") from e

    if not isinstance(expr, sp.Expr):
        raise FormulaError(f"Formula '{text}' is not a numeric expression.")

    unknown = {str(s) for s in expr.free_symbols} - {"x"}
    if unknown:
        raise FormulaError(f"Formula '{text}' uses unknown variable(s): {', '.join(sorted(unknown))}")

    return expr


@dataclass(frozen=True)
class CompiledFormula:
    """A formula parsed once and ready to be evaluated at many x values."""
    text: str
    expression: sp.Expr
    _function: Callable[[np.float64], object] = field(repr=False, compare=False)

    @classmethod
    def compile(cls, text: str) -> CompiledFormula:
        """
        Raises:
            FormulaError: If the text cannot be parsed.
        """
        expr = parse_formula(text)
        try:
            func = sp.lambdify(X, expr, modules="numpy")
        except Exception as e:
            raise FormulaError(f"Cannot compile formula '{text}': {e}") from e
        return cls(text=text, expression=expr, _function=func)

    def evaluate(self, x: float) -> Optional[float]:
        """
        Evaluate at a single x.

        Returns:
            The value as a float (NaN/inf are valid results; complex values with a
            non-zero imaginary part become NaN), or None if evaluation failed.
        """
        try:
            with np.errstate(all="ignore"):
                raw = np.asarray(self._function(np.float64(x)))
            if np.iscomplexobj(raw):
                if raw.imag != 0:
                    return float("nan")
                raw = raw.real
            return float(raw)
        except Exception as e:
            logger.warning(f"Evaluation failed for '{self.text}' at x = {x}: {e}")
            return None


def try_evaluate(formula: str, x: float) -> Optional[float]:
    """One-shot evaluation; parses the formula on every call."""
    try:
        compiled = CompiledFormula.compile(formula)
    except FormulaError as e:
        logger.warning(f"{e} (x = {x})")
        return None
    return compiled.evaluate(x)


def evaluate_or_sentinel(formula: str, x: float) -> float:
    """One-shot evaluation that substitutes SENTINEL_VALUE on failure."""
    value = try_evaluate(formula, x)
    return SENTINEL_VALUE if value is None else value
