"""
Keypad component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import CalculatorState


class CalculatorSessionPort(Protocol):
    """Host-owned slot holding the state of one calculator session."""

    def load(self) -> CalculatorState:
        """Return the current state."""
        ...

    def store(self, state: CalculatorState) -> None:
        """Replace the current state."""
        ...
