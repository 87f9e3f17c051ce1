from src.domain.entities import INITIAL_STATE, CalculatorState


class InMemorySessionStore:
    """Single calculator session held in memory. Not shared between sessions."""

    def __init__(self, initial: CalculatorState = INITIAL_STATE) -> None:
        self._state = initial

    def load(self) -> CalculatorState:
        return self._state

    def store(self, state: CalculatorState) -> None:
        self._state = state

    def reset(self) -> None:
        self._state = INITIAL_STATE
