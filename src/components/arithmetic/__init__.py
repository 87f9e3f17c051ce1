"""
Arithmetic component - Exact decimal evaluation.

Invariants:
- I1: No binary floating point anywhere in the evaluation path
- I2: Division by zero yields zero
- I3: Faults are returned, never raised
"""

from ._impl import EXACT_CONTEXT, divide, evaluate, format_outcome, parse_operand
from .models import (
    DEFAULT_CONFIG,
    ERROR_MARKER,
    ArithmeticConfig,
    Fault,
    Ok,
    Outcome,
    RoundingName,
)

__all__ = [
    # Entry points
    "evaluate",
    "divide",
    "parse_operand",
    "format_outcome",
    # Models
    "ArithmeticConfig",
    "Ok",
    "Fault",
    "Outcome",
    "RoundingName",
    # Constants
    "DEFAULT_CONFIG",
    "ERROR_MARKER",
    "EXACT_CONTEXT",
]
