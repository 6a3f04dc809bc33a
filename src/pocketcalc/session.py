"""Calculator session tying the processor to storage and translation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pocketcalc.actions import (
    ClearAll,
    ClearEntry,
    Decimal,
    Digit,
    Equals,
    Function,
    Memory,
    OperatorPress,
    Percent,
    ToggleSign,
)
from pocketcalc.config import CalculatorSettings
from pocketcalc.formatting import format_number
from pocketcalc.history import display_view
from pocketcalc.persistence import MemoryStorage, hydrate, persist_changes, persist_mode
from pocketcalc.processor import InputProcessor
from pocketcalc.state import CalculatorMode, CalculatorState
from pocketcalc.translation import CatalogTranslator

if TYPE_CHECKING:
    from pocketcalc.actions import Action
    from pocketcalc.functions import FunctionName
    from pocketcalc.memory import MemoryOp
    from pocketcalc.operations import Operator
    from pocketcalc.persistence import PersistenceAdapter
    from pocketcalc.translation import Translator


class Calculator:
    """
    A calculator session: one state, one mode, one store.

    Key presses chain, and every transition persists what changed:

    Example:
        >>> calc = Calculator()
        >>> calc.digit("5").operator("+").digit("3").equals().display
        '8'
        >>> calc.history_view()
        ['5 + 3 = 8']

    Calls must be serialized by the caller; the session has no locking.
    """

    def __init__(
        self,
        storage: PersistenceAdapter | None = None,
        translator: Translator | None = None,
        settings: CalculatorSettings | None = None,
        processor: InputProcessor | None = None,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.translator = translator if translator is not None else CatalogTranslator()
        self.settings = settings or CalculatorSettings()
        self._processor = processor or InputProcessor()
        self._state, self._mode = hydrate(self.storage, self.settings)

    @property
    def state(self) -> CalculatorState:
        """Current state snapshot."""
        return self._state

    @property
    def mode(self) -> CalculatorMode:
        return self._mode

    def set_mode(self, mode: CalculatorMode | str) -> Calculator:
        """Switch the keypad layout and persist it."""
        self._mode = CalculatorMode(mode)
        persist_mode(self.storage, self._mode, self.settings)
        return self

    def press(self, action: Action) -> CalculatorState:
        """
        Apply one action, then persist the fields it changed.

        Returns:
            The new state
        """
        before = self._state
        self._state = self._processor.apply(before, action)
        persist_changes(self.storage, before, self._state, action, self.settings)
        return self._state

    # Key presses

    def digit(self, digit: str) -> Calculator:
        self.press(Digit(digit))
        return self

    def decimal(self) -> Calculator:
        self.press(Decimal())
        return self

    def operator(self, op: Operator | str) -> Calculator:
        self.press(OperatorPress(op))
        return self

    def equals(self) -> Calculator:
        self.press(Equals())
        return self

    def clear(self) -> Calculator:
        """Soft clear: keeps memory and history."""
        self.press(ClearEntry())
        return self

    def clear_all(self) -> Calculator:
        """Full reset, including memory and the stored history."""
        self.press(ClearAll())
        return self

    def toggle_sign(self) -> Calculator:
        self.press(ToggleSign())
        return self

    def percent(self) -> Calculator:
        self.press(Percent())
        return self

    def function(self, name: FunctionName | str) -> Calculator:
        self.press(Function(name))
        return self

    def memory(self, op: MemoryOp | str) -> Calculator:
        self.press(Memory(op))
        return self

    # Views

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def error_message(self) -> str | None:
        """Translated error text, or None outside the Error state."""
        if self._state.error is None:
            return None
        return self.translator.t(self._state.error.value)

    @property
    def expression(self) -> str:
        """Pending-operation indicator such as ``"5 +"``; empty when idle."""
        state = self._state
        if state.previous_value is None:
            return ""
        operator = state.operator.value if state.operator is not None else ""
        return f"{format_number(state.previous_value)} {operator}"

    @property
    def memory_indicator(self) -> str:
        if self._state.memory == 0:
            return ""
        return f"M: {format_number(self._state.memory)}"

    def history_view(self) -> list[str]:
        """Recent history entries, newest first."""
        return display_view(self._state.history, self.settings.display_history_limit)

    def mode_labels(self) -> dict[CalculatorMode, str]:
        return {mode: self.translator.t(f"calc.mode.{mode.value}") for mode in CalculatorMode}

    def __repr__(self) -> str:
        return (
            f"Calculator(display={self._state.display!r}, mode={self._mode.value}, "
            f"history_len={len(self._state.history)})"
        )
