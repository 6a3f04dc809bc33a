"""
The input processor: a total state machine over calculator actions.

``apply(state, action)`` never raises and never mutates ``state``. Errors
from the arithmetic engines are converted into the Error state here, and
only a digit or decimal point leaves it again.

Example:
    >>> from pocketcalc.actions import Digit, Equals, OperatorPress
    >>> state = INITIAL_STATE
    >>> for action in (Digit("5"), OperatorPress("+"), Digit("3"), Equals()):
    ...     state = apply(state, action)
    >>> state.display, state.history
    ('8', ('5 + 3 = 8',))
"""

from __future__ import annotations

import logging
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
from pocketcalc.exceptions import DivisionByZeroError, ErrorKey, InvalidInputError
from pocketcalc.formatting import format_number, parse_display
from pocketcalc.functions import apply_function
from pocketcalc.history import append_entry, format_expression
from pocketcalc.memory import MemoryOp, update_memory
from pocketcalc.operations import apply_operator
from pocketcalc.state import INITIAL_STATE, CalculatorState

if TYPE_CHECKING:
    from collections.abc import Callable

    from pocketcalc.actions import Action

logger = logging.getLogger(__name__)


class InputProcessor:
    """Maps (state, action) to the next state."""

    def __init__(self) -> None:
        self._handlers: dict[type, Callable[[CalculatorState, Action], CalculatorState]] = {
            Digit: self._digit,
            Decimal: self._decimal,
            OperatorPress: self._operator,
            Equals: self._equals,
            ClearEntry: self._clear_entry,
            ClearAll: self._clear_all,
            ToggleSign: self._toggle_sign,
            Percent: self._percent,
            Function: self._function,
            Memory: self._memory,
        }

    def apply(self, state: CalculatorState, action: Action) -> CalculatorState:
        """
        Compute the state that follows ``action``.

        Args:
            state: The current state
            action: One user action

        Returns:
            The next state (``state`` itself for a no-op)
        """
        handler = self._handlers.get(type(action))
        if handler is None:
            logger.debug("Ignoring unsupported action %r", action)
            return state
        return handler(state, action)

    @staticmethod
    def _enter_error(state: CalculatorState, key: ErrorKey) -> CalculatorState:
        logger.debug("Entering error state %s from %s", key.value, state)
        return state.evolve(
            display="0",
            error=key,
            previous_value=None,
            operator=None,
            waiting_for_operand=False,
        )

    # Entry

    def _digit(self, state: CalculatorState, action: Digit) -> CalculatorState:
        if state.is_error:
            return state.evolve(display=action.digit, error=None, waiting_for_operand=False)
        if state.waiting_for_operand:
            return state.evolve(display=action.digit, waiting_for_operand=False)
        if state.display == "0":
            return state.evolve(display=action.digit)
        return state.evolve(display=state.display + action.digit)

    def _decimal(self, state: CalculatorState, action: Decimal) -> CalculatorState:
        if state.is_error:
            return state.evolve(display="0.", error=None, waiting_for_operand=False)
        if state.waiting_for_operand:
            return state.evolve(display="0.", waiting_for_operand=False)
        if "." in state.display:
            return state
        return state.evolve(display=state.display + ".")

    # Binary operations

    def _operator(self, state: CalculatorState, action: OperatorPress) -> CalculatorState:
        if state.is_error:
            return state

        current = parse_display(state.display)

        if state.previous_value is None:
            return state.evolve(
                previous_value=current,
                operator=action.op,
                waiting_for_operand=True,
            )

        if state.operator is not None and not state.waiting_for_operand:
            try:
                result = apply_operator(state.previous_value, current, state.operator)
            except DivisionByZeroError as e:
                return self._enter_error(state, e.key)
            return state.evolve(
                display=format_number(result),
                previous_value=result,
                operator=action.op,
                waiting_for_operand=True,
            )

        # Operator pressed again before a new operand: change of mind
        return state.evolve(operator=action.op)

    def _equals(self, state: CalculatorState, action: Equals) -> CalculatorState:
        if state.is_error or state.operator is None or state.previous_value is None:
            return state

        current = parse_display(state.display)
        try:
            result = apply_operator(state.previous_value, current, state.operator)
        except DivisionByZeroError as e:
            return self._enter_error(state, e.key)

        expression = format_expression(state.previous_value, state.operator, current, result)
        return state.evolve(
            display=format_number(result),
            previous_value=None,
            operator=None,
            waiting_for_operand=True,
            history=append_entry(state.history, expression),
        )

    # Clearing

    def _clear_entry(self, state: CalculatorState, action: ClearEntry) -> CalculatorState:
        return INITIAL_STATE.evolve(memory=state.memory, history=state.history)

    def _clear_all(self, state: CalculatorState, action: ClearAll) -> CalculatorState:
        return INITIAL_STATE

    # Unary edits

    def _toggle_sign(self, state: CalculatorState, action: ToggleSign) -> CalculatorState:
        if state.is_error:
            return state
        return state.evolve(display=format_number(-parse_display(state.display)))

    def _percent(self, state: CalculatorState, action: Percent) -> CalculatorState:
        if state.is_error:
            return state
        value = parse_display(state.display) / 100
        return state.evolve(display=format_number(value), waiting_for_operand=True)

    def _function(self, state: CalculatorState, action: Function) -> CalculatorState:
        if state.is_error:
            return state
        try:
            result = apply_function(parse_display(state.display), action.name)
        except (DivisionByZeroError, InvalidInputError) as e:
            return self._enter_error(state, e.key)
        return state.evolve(display=format_number(result), waiting_for_operand=True)

    def _memory(self, state: CalculatorState, action: Memory) -> CalculatorState:
        if state.is_error:
            return state
        if action.op is MemoryOp.RECALL:
            return state.evolve(display=format_number(state.memory), waiting_for_operand=True)
        memory = update_memory(state.memory, parse_display(state.display), action.op)
        if action.op is MemoryOp.CLEAR:
            return state.evolve(memory=memory)
        # M+ and M- complete the displayed operand
        return state.evolve(memory=memory, waiting_for_operand=True)


_default_processor = InputProcessor()


def apply(state: CalculatorState, action: Action) -> CalculatorState:
    """Apply one action with the shared processor."""
    return _default_processor.apply(state, action)
