"""
Keypad component - Button label façade over the calculator state machine.

Translates raw button labels into events, applies the transition and
publishes the two display strings. Performs no arithmetic of its own.

Invariants:
- I1: No exception crosses this boundary for any label
- I2: Unknown labels leave the state unchanged
- I3: The display is derived from the returned state only
"""

from __future__ import annotations

import logging

from src.components.arithmetic import DEFAULT_CONFIG, ArithmeticConfig
from src.domain.entities import (
    AllClear,
    Backspace,
    CalculatorState,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Operator,
    OperatorPressed,
)
from src.domain.state import transition

from .models import (
    DisplayOutput,
    KeypadValidationError,
    PressInput,
    PressOutput,
    SequenceInput,
)
from .ports import CalculatorSessionPort

logger = logging.getLogger(__name__)

_COMMANDS: dict[str, Event] = {
    "AC": AllClear(),
    "C": Clear(),
    "⌫": Backspace(),
    ".": DecimalPoint(),
    "=": Equals(),
    "+": OperatorPressed(Operator.ADD),
    "-": OperatorPressed(Operator.SUBTRACT),
    "×": OperatorPressed(Operator.MULTIPLY),
    "÷": OperatorPressed(Operator.DIVIDE),
}


def decode_label(label: str) -> Event | None:
    """Map a button label to its event, or None if the keypad has no such button."""
    if label in _COMMANDS:
        return _COMMANDS[label]
    if len(label) == 1 and label in "0123456789":
        return Digit(label)
    return None


def display_of(state: CalculatorState) -> DisplayOutput:
    return DisplayOutput(old_input=state.old_input, current_input=state.current_input)


# --- Component Entry Points ---


def run_press(
    inp: PressInput,
    *,
    state: CalculatorState,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> PressOutput:
    """
    Apply one button press.

    Args:
        inp: Input containing the button label.
        state: State before the press.
        config: Division policy.

    Returns:
        PressOutput with the new state and its display.
    """
    event = decode_label(inp.label)
    if event is None:
        logger.warning("Unknown button label: %r", inp.label)
        return PressOutput(
            state=state,
            display=display_of(state),
            errors=(
                KeypadValidationError(
                    code="unknown_label",
                    message=f"No button labelled {inp.label!r}",
                    field="label",
                ),
            ),
            success=False,
        )

    new_state = transition(state, event, config)
    return PressOutput(state=new_state, display=display_of(new_state))


def run_sequence(
    inp: SequenceInput,
    *,
    state: CalculatorState,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> PressOutput:
    """
    Apply presses in order. Unknown labels are skipped and reported.
    """
    errors: list[KeypadValidationError] = []
    for label in inp.labels:
        result = run_press(PressInput(label=label), state=state, config=config)
        state = result.state
        errors.extend(result.errors)

    return PressOutput(
        state=state,
        display=display_of(state),
        errors=tuple(errors),
        success=not errors,
    )


def run_session_press(
    inp: PressInput,
    *,
    session: CalculatorSessionPort,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> PressOutput:
    """Apply a press to the state held by session and store the result."""
    result = run_press(inp, state=session.load(), config=config)
    if result.success:
        session.store(result.state)
    return result
