from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

# --- Enums / Literals ---

class Operator(str, Enum):
    """Binary operators; the value is the keypad symbol."""

    NONE = ""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

# --- Session State ---

class CalculatorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_input: str = "0"
    old_input: str = ""
    operator: Operator = Operator.NONE
    operand1: Decimal | None = None

    @model_validator(mode="after")
    def _operand_matches_operator(self) -> "CalculatorState":
        # operand1 is present iff an operator is pending
        if (self.operand1 is None) != (self.operator is Operator.NONE):
            raise ValueError("operand1 must be set exactly when an operator is pending")
        return self

    @property
    def has_pending_operation(self) -> bool:
        return self.operand1 is not None


INITIAL_STATE = CalculatorState()

# --- Events ---

@dataclass(frozen=True)
class AllClear:
    pass

@dataclass(frozen=True)
class Clear:
    pass

@dataclass(frozen=True)
class Backspace:
    pass

@dataclass(frozen=True)
class Digit:
    digit: str

    def __post_init__(self) -> None:
        if len(self.digit) != 1 or self.digit not in "0123456789":
            raise ValueError(f"Not a digit: {self.digit!r}")

@dataclass(frozen=True)
class DecimalPoint:
    pass

@dataclass(frozen=True)
class OperatorPressed:
    operator: Operator

    def __post_init__(self) -> None:
        if self.operator is Operator.NONE:
            raise ValueError("OperatorPressed requires a binary operator")

@dataclass(frozen=True)
class Equals:
    pass


Event = AllClear | Clear | Backspace | Digit | DecimalPoint | OperatorPressed | Equals
