from collections.abc import Callable
from pathlib import Path

import pytest

from src.components.keypad import SequenceInput, run_sequence
from src.domain.entities import INITIAL_STATE, CalculatorState


@pytest.fixture
def press() -> Callable[..., CalculatorState]:
    """
    Replay button labels from the initial state and return the final state.
    """

    def _press(*labels: str, state: CalculatorState = INITIAL_STATE) -> CalculatorState:
        result = run_sequence(SequenceInput(labels=labels), state=state)
        assert result.success, result.errors
        return result.state

    return _press


@pytest.fixture
def write_rules(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        path = tmp_path / "calculator_rules.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
