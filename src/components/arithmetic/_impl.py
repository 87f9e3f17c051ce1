"""
Arithmetic evaluator - exact decimal add/subtract/multiply/divide.

Functional Core - pure business logic.

Key behaviors:
- Add, subtract and multiply are exact (no digit is ever rounded away)
- Divide rounds to a fixed number of fractional digits
- Division by zero yields decimal zero
- Engine faults come back as Fault, never as exceptions
"""

from __future__ import annotations

import logging
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from fractions import Fraction

from src.domain.entities import Operator

from .models import DEFAULT_CONFIG, ERROR_MARKER, ArithmeticConfig, Fault, Ok, Outcome

logger = logging.getLogger(__name__)

# Unbounded context: +, - and * are exact under it
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


# Operands beyond this magnitude (either way) are refused before any arithmetic
MAX_ADJUSTED_EXPONENT = 9999

# --- Rounding ---

_ROUNDING_MODES = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
    "down": ROUND_DOWN,
}


def divide(a: Decimal, b: Decimal, config: ArithmeticConfig = DEFAULT_CONFIG) -> Decimal:
    """
    Divide a by b, rounded to config.division_scale fractional digits.

    Returns decimal zero when b is zero.
    """
    if b.is_zero():
        return Decimal(0)

    scale = config.division_scale
    quotient = Fraction(a) / Fraction(b)

    # One guard digit past the scale; a nonzero remainder marks it as
    # "above" so the rounding mode never mistakes it for an exact tie
    guard, remainder = divmod(abs(quotient.numerator) * 10 ** (scale + 1), quotient.denominator)
    if remainder and guard % 10 in (0, 5):
        guard += 1

    sign = 1 if quotient < 0 else 0
    truncated = Decimal((sign, tuple(int(d) for d in str(guard)), -(scale + 1)))
    return truncated.quantize(
        Decimal((0, (1,), -scale)),
        rounding=_ROUNDING_MODES[config.rounding],
        context=EXACT_CONTEXT,
    )


def _out_of_range(value: Decimal) -> bool:
    return abs(value.adjusted()) > MAX_ADJUSTED_EXPONENT


# --- Evaluation ---


def _apply(a: Decimal, b: Decimal, op: Operator, config: ArithmeticConfig) -> Decimal:
    if op is Operator.ADD:
        return EXACT_CONTEXT.add(a, b)
    if op is Operator.SUBTRACT:
        return EXACT_CONTEXT.subtract(a, b)
    if op is Operator.MULTIPLY:
        return EXACT_CONTEXT.multiply(a, b)
    if op is Operator.DIVIDE:
        return divide(a, b, config)
    return b


def evaluate(
    a: Decimal,
    b: Decimal,
    op: Operator,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> Outcome:
    """
    Apply op to a and b.

    Operator.NONE passes b through unchanged.
    """
    if not (a.is_finite() and b.is_finite()):
        logger.warning("Non-finite operand: %s %s %s", a, op.value, b)
        return Fault(reason="non_finite_operand")

    if _out_of_range(a) or _out_of_range(b):
        logger.warning("Operand out of range: %s %s %s", a, op.value, b)
        return Fault(reason="out_of_range")

    try:
        value = _apply(a, b, op, config)
    except ArithmeticError as e:
        logger.warning("Decimal engine fault on %s %s %s: %r", a, op.value, b, e)
        return Fault(reason=type(e).__name__)

    # no negative zero on the display
    if value.is_zero():
        value = value.copy_abs()
    return Ok(value=value)


def parse_operand(text: str) -> Outcome:
    """Convert display text into a finite decimal."""
    try:
        value = Decimal(text)
    except ArithmeticError:
        logger.warning("Malformed operand: %r", text)
        return Fault(reason="malformed_operand")

    if not value.is_finite():
        logger.warning("Non-finite operand: %r", text)
        return Fault(reason="non_finite_operand")

    if _out_of_range(value):
        logger.warning("Operand out of range: %r", text)
        return Fault(reason="out_of_range")
    return Ok(value=value)


def format_outcome(outcome: Outcome) -> str:
    """Render an outcome as display text; faults become the error marker."""
    if isinstance(outcome, Ok):
        return str(outcome.value)
    return ERROR_MARKER
