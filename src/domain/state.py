import logging

from src.components.arithmetic import (
    DEFAULT_CONFIG,
    ERROR_MARKER,
    ArithmeticConfig,
    Ok,
    evaluate,
    format_outcome,
    parse_operand,
)
from src.domain.entities import (
    INITIAL_STATE,
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

logger = logging.getLogger(__name__)


def _is_fresh(text: str) -> bool:
    """Text that the next digit replaces instead of extending."""
    return text in ("0", ERROR_MARKER)


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.current_input == ERROR_MARKER:
        return state.model_copy(update={"current_input": "0"})
    # Never leave the display blank
    remaining = state.current_input[:-1] or "0"
    return state.model_copy(update={"current_input": remaining})


def _digit(state: CalculatorState, digit: str) -> CalculatorState:
    if _is_fresh(state.current_input):
        return state.model_copy(update={"current_input": digit})
    return state.model_copy(update={"current_input": state.current_input + digit})


def _decimal_point(state: CalculatorState) -> CalculatorState:
    if state.current_input == ERROR_MARKER:
        return state.model_copy(update={"current_input": "0."})
    if "." in state.current_input:
        logger.debug("Ignoring second decimal point in %r", state.current_input)
        return state
    return state.model_copy(update={"current_input": state.current_input + "."})


def _operator(state: CalculatorState, op: Operator) -> CalculatorState:
    if state.has_pending_operation:
        logger.debug("Ignoring %s: %s already pending", op.value, state.operator.value)
        return state

    parsed = parse_operand(state.current_input)
    if not isinstance(parsed, Ok):
        return state.model_copy(update={"current_input": ERROR_MARKER})

    return CalculatorState(
        current_input="",
        old_input=state.current_input,
        operator=op,
        operand1=parsed.value,
    )


def _equals(state: CalculatorState, config: ArithmeticConfig) -> CalculatorState:
    if state.operand1 is None or not state.current_input:
        logger.debug("Ignoring '=' with nothing to resolve")
        return state

    operand2 = parse_operand(state.current_input)
    if isinstance(operand2, Ok):
        outcome = evaluate(state.operand1, operand2.value, state.operator, config)
    else:
        outcome = operand2

    return CalculatorState(current_input=format_outcome(outcome))


def transition(
    state: CalculatorState,
    event: Event,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> CalculatorState:
    """
    Return the state that follows event. The input state is never modified.

    Out-of-order events (a second operator, '=' with nothing pending)
    return the state unchanged.
    """
    if isinstance(event, AllClear):
        return INITIAL_STATE

    if isinstance(event, Clear):
        # Keeps the pending operation so the second operand can be retyped
        return state.model_copy(update={"current_input": ""})

    if isinstance(event, Backspace):
        return _backspace(state)

    if isinstance(event, Digit):
        return _digit(state, event.digit)

    if isinstance(event, DecimalPoint):
        return _decimal_point(state)

    if isinstance(event, OperatorPressed):
        return _operator(state, event.operator)

    if isinstance(event, Equals):
        return _equals(state, config)

    raise TypeError(f"Unknown event: {event!r}")
