"""
Keypad component - Data models.

Button labels, input/output models for the calculator façade.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import CalculatorState

# --- Keypad ---

# Grid as laid out on the device, four columns per row
KEYPAD_ROWS: tuple[tuple[str, ...], ...] = (
    ("AC", "C", "⌫", "÷"),
    ("7", "8", "9", "×"),
    ("4", "5", "6", "-"),
    ("1", "2", "3", "+"),
    (".", "0", "="),
)

BUTTON_LABELS: frozenset[str] = frozenset(label for row in KEYPAD_ROWS for label in row)


# --- Validation Errors ---


@dataclass(frozen=True)
class KeypadValidationError:
    """Keypad validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class PressInput:
    """Input for a single button press."""

    label: str


@dataclass(frozen=True)
class SequenceInput:
    """Input for a run of button presses."""

    labels: tuple[str, ...]


# --- Output Models ---


@dataclass(frozen=True)
class DisplayOutput:
    """The two lines shown to the user, rendered verbatim."""

    old_input: str
    current_input: str


@dataclass(frozen=True)
class PressOutput:
    """Output from a press or a sequence of presses."""

    state: CalculatorState
    display: DisplayOutput
    errors: tuple[KeypadValidationError, ...] = field(default_factory=tuple)
    success: bool = True
