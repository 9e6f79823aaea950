"""Public API for Padcalc - returns structured objects without side effects."""

from __future__ import annotations

from .evaluator import apply_operator, format_result, parse_expression
from .logging_config import get_logger
from .types import EvalResult, ParseError

logger = get_logger("api")


def evaluate(expression: str) -> EvalResult:
    """Evaluate a keypad expression.

    Args:
        expression: Expression string of the form ``number op number`` (e.g., "12+3")

    Returns:
        EvalResult with the formatted result, or the error and its code

    Example:
        >>> from padcalc_pkg.api import evaluate
        >>> evaluate("12+3").result
        '15.000000'
        >>> evaluate("5 +").error_code
        'INVALID_NUMBER'
    """
    try:
        lhs, op, rhs = parse_expression(expression)
        value = apply_operator(lhs, op, rhs)
    except ParseError as e:
        logger.debug("Evaluation of %r failed [%s]: %s", expression, e.code, e)
        return EvalResult(ok=False, error=e.message, error_code=e.code)
    return EvalResult(ok=True, result=format_result(value))
