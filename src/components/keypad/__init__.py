"""
Keypad component - Calculator input façade.

The only piece that touches button labels coming from a UI.
"""

from .component import (
    decode_label,
    display_of,
    run_press,
    run_sequence,
    run_session_press,
)
from .models import (
    BUTTON_LABELS,
    KEYPAD_ROWS,
    DisplayOutput,
    KeypadValidationError,
    PressInput,
    PressOutput,
    SequenceInput,
)
from .ports import CalculatorSessionPort

__all__ = [
    # Entry points
    "run_press",
    "run_sequence",
    "run_session_press",
    # Functions
    "decode_label",
    "display_of",
    # Input models
    "PressInput",
    "SequenceInput",
    # Output models
    "PressOutput",
    "DisplayOutput",
    "KeypadValidationError",
    # Ports
    "CalculatorSessionPort",
    # Constants
    "BUTTON_LABELS",
    "KEYPAD_ROWS",
]
