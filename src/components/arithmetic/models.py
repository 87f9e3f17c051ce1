"""
Arithmetic component - Data models.

Outcome types for exact decimal evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

RoundingName = Literal["half_up", "half_even", "down"]

# Literal shown in place of a result when the decimal engine faults
ERROR_MARKER = "Error"


# --- Configuration ---


@dataclass(frozen=True)
class ArithmeticConfig:
    """Division policy."""

    division_scale: int = 10
    rounding: RoundingName = "half_up"


DEFAULT_CONFIG = ArithmeticConfig()


# --- Outcomes ---


@dataclass(frozen=True)
class Ok:
    """Successful evaluation."""

    value: Decimal


@dataclass(frozen=True)
class Fault:
    """Evaluation failed inside the decimal engine or while parsing."""

    reason: str


Outcome = Ok | Fault
