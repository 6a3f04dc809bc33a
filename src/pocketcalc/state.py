"""Calculator state record."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from pocketcalc.exceptions import ErrorKey
from pocketcalc.formatting import format_number
from pocketcalc.operations import Operator


class Phase(str, Enum):
    """The three logical states of the input machine."""

    ENTRY = "entry"
    PENDING_OPERATOR = "pending_operator"
    ERROR = "error"


class CalculatorMode(str, Enum):
    """Keypad layout. Has no effect on arithmetic."""

    BASIC = "basic"
    SCIENTIFIC = "scientific"


@dataclass(frozen=True)
class CalculatorState:
    """
    Immutable snapshot of the calculator.

    Every transition returns a new instance; use ``evolve`` to derive one.
    """

    display: str = "0"
    previous_value: float | None = None
    operator: Operator | None = None
    waiting_for_operand: bool = False
    memory: float = 0.0
    history: tuple[str, ...] = ()
    error: ErrorKey | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def phase(self) -> Phase:
        """Logical state derived from the fields."""
        if self.error is not None:
            return Phase.ERROR
        if self.operator is not None and self.waiting_for_operand:
            return Phase.PENDING_OPERATOR
        return Phase.ENTRY

    def evolve(self, **changes: object) -> CalculatorState:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.display} [{self.error.value}]"
        if self.operator is not None:
            return f"{format_number(self.previous_value)} {self.operator.value} {self.display}"
        return self.display


INITIAL_STATE = CalculatorState()
