"""Expression evaluation for the keypad input line.

The evaluator accepts exactly one binary expression, ``<number> <op> <number>``,
read the way a formatted stream extraction reads it:

- leading whitespace before each token is skipped
- a number is an optional sign, digits with an optional fraction, and an
  optional exponent
- the operator is the single next non-whitespace character
- the second number must end exactly at the end of the input

Anything else evaluates to the error token.
"""

from __future__ import annotations

import math
import operator
import re

from .config import ERROR_TOKEN, OUTPUT_DECIMALS
from .logging_config import get_logger
from .types import ParseError

logger = get_logger("evaluator")

NUMBER_REGEX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# C locale whitespace
WHITESPACE = " \t\n\v\f\r"


def _safe_divide(lhs: float, rhs: float) -> float:
    # Division by zero yields 0 rather than an error
    if rhs == 0:
        return 0.0
    return lhs / rhs


OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _safe_divide,
}


def _skip_whitespace(expr: str, pos: int) -> int:
    while pos < len(expr) and expr[pos] in WHITESPACE:
        pos += 1
    return pos


def _read_number(expr: str, pos: int) -> tuple[float, int]:
    """Read a floating-point number starting at ``pos``.

    Returns:
        Tuple of (value, position just past the number)

    Raises:
        ParseError: If no number starts at ``pos`` or it is out of range
    """
    pos = _skip_whitespace(expr, pos)
    match = NUMBER_REGEX.match(expr, pos)
    if match is None:
        raise ParseError(f"Expected a number at position {pos}", code="INVALID_NUMBER")
    value = float(match.group())
    if math.isinf(value):
        raise ParseError(
            f"Number out of range: {match.group()}", code="INVALID_NUMBER"
        )
    return value, match.end()


def parse_expression(expr: str) -> tuple[float, str, float]:
    """Split an expression into its two operands and operator character.

    Args:
        expr: Raw input text (e.g., "12+3", " 4 * 2")

    Returns:
        Tuple of (left operand, operator character, right operand)

    Raises:
        ParseError: If the text is not exactly ``number op number``
    """
    if not expr.strip(WHITESPACE):
        raise ParseError("Empty expression", code="EMPTY_INPUT")

    lhs, pos = _read_number(expr, 0)

    pos = _skip_whitespace(expr, pos)
    if pos >= len(expr):
        raise ParseError("Missing operator", code="MISSING_OPERATOR")
    op = expr[pos]

    rhs, pos = _read_number(expr, pos + 1)
    if pos != len(expr):
        raise ParseError(
            f"Unexpected input after expression: {expr[pos:]!r}",
            code="TRAILING_INPUT",
        )
    return lhs, op, rhs


def apply_operator(lhs: float, op: str, rhs: float) -> float:
    """Apply one of ``+ - * /`` to two operands.

    Raises:
        ParseError: If ``op`` is not a supported operator
    """
    func = OPERATORS.get(op)
    if func is None:
        raise ParseError(f"Unsupported operator: {op!r}", code="UNSUPPORTED_OPERATOR")
    return func(lhs, rhs)


def format_result(value: float) -> str:
    """Format a result in fixed notation with six fractional digits."""
    return f"{value:.{OUTPUT_DECIMALS}f}"


def evaluate_expression(expr: str) -> str:
    """Evaluate ``expr`` and return the display string.

    Returns:
        The formatted result, or the error token if the expression is malformed
    """
    try:
        lhs, op, rhs = parse_expression(expr)
        value = apply_operator(lhs, op, rhs)
    except ParseError as e:
        logger.debug("Evaluation of %r failed [%s]: %s", expr, e.code, e)
        return ERROR_TOKEN
    return format_result(value)
