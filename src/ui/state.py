from dataclasses import dataclass

from src.domain.entities import INITIAL_STATE, CalculatorState


@dataclass
class AppState:
    calculator: CalculatorState = INITIAL_STATE

    def load(self) -> CalculatorState:
        return self.calculator

    def store(self, state: CalculatorState) -> None:
        self.calculator = state

    def reset(self) -> None:
        self.calculator = INITIAL_STATE
