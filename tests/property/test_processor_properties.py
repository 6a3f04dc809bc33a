"""
Property-based tests for the input processor and the Calculator session.

Random key-press sequences are driven through the state machine and the
state invariants are checked after every step.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from pocketcalc import (
    INITIAL_STATE,
    Calculator,
    CalculatorState,
    ClearAll,
    ClearEntry,
    Decimal,
    Digit,
    Equals,
    Function,
    FunctionName,
    Memory,
    MemoryOp,
    MemoryStorage,
    Operator,
    OperatorPress,
    Percent,
    Phase,
    ToggleSign,
    apply,
)

digit_actions = st.sampled_from("0123456789").map(Digit)

actions = st.one_of(
    digit_actions,
    st.just(Decimal()),
    st.sampled_from(list(Operator)).map(OperatorPress),
    st.just(Equals()),
    st.just(ClearEntry()),
    st.just(ClearAll()),
    st.just(ToggleSign()),
    st.just(Percent()),
    st.sampled_from(list(FunctionName)).map(Function),
    st.sampled_from(list(MemoryOp)).map(Memory),
)

contained_actions = st.one_of(
    st.sampled_from(list(Operator)).map(OperatorPress),
    st.just(Equals()),
    st.just(ToggleSign()),
    st.just(Percent()),
    st.sampled_from(list(FunctionName)).map(Function),
    st.sampled_from(list(MemoryOp)).map(Memory),
)

error_triggers = st.sampled_from(
    [
        [Digit("5"), OperatorPress("÷"), Digit("0"), Equals()],
        [Digit("5"), OperatorPress("mod"), Digit("0"), OperatorPress("+")],
        [Function("1/x")],
        [Digit("2"), ToggleSign(), Function("sqrt")],
        [Function("log")],
        [Function("ln")],
    ]
)


def run(sequence, state=INITIAL_STATE):
    for action in sequence:
        state = apply(state, action)
    return state


def check_invariants(state: CalculatorState) -> None:
    assert isinstance(state, CalculatorState)
    assert state.display.count(".") <= 1
    if state.operator is not None:
        assert state.previous_value is not None
    if state.error is not None:
        assert state.display == "0"
        assert state.previous_value is None
        assert state.operator is None


@pytest.mark.property
class TestProcessorProperties:
    @given(sequence=st.lists(actions, max_size=40))
    def test_totality(self, sequence):
        """Every action sequence yields a valid state."""
        state = INITIAL_STATE
        for action in sequence:
            state = apply(state, action)
            check_invariants(state)

    @given(prefix=st.lists(actions, max_size=20), trigger=error_triggers,
           followups=st.lists(contained_actions, max_size=10))
    def test_error_containment(self, prefix, trigger, followups):
        """Only digit, decimal point and clears leave the Error state."""
        state = run(trigger, run(prefix + [ClearEntry()]))
        assert state.phase is Phase.ERROR
        for action in followups:
            assert apply(state, action) is state

    @given(prefix=st.lists(actions, max_size=20), trigger=error_triggers, digit=digit_actions)
    def test_digit_recovers_from_error(self, prefix, trigger, digit):
        state = run(trigger, run(prefix + [ClearEntry()]))
        state = apply(state, digit)
        assert state.error is None
        assert state.display == digit.digit

    @given(sequence=st.lists(actions, max_size=40))
    def test_history_grows_only_on_equals(self, sequence):
        state = INITIAL_STATE
        for action in sequence:
            after = apply(state, action)
            if isinstance(action, ClearAll):
                assert after.history == ()
            elif isinstance(action, Equals):
                assert after.history[: len(state.history)] == state.history
                assert len(after.history) - len(state.history) in (0, 1)
            else:
                assert after.history == state.history
            state = after

    @given(prefix=st.lists(actions, max_size=30))
    def test_clear_entry_keeps_memory(self, prefix):
        state = run(prefix)
        cleared = apply(state, ClearEntry())
        assert cleared.memory is state.memory
        assert cleared.history == state.history
        assert cleared.display == "0"

    @given(digits=st.lists(digit_actions, min_size=1, max_size=12))
    def test_no_leading_zeros(self, digits):
        display = run(digits).display
        assert display == "0" or not display.startswith("0")


@pytest.mark.property
@pytest.mark.slow
class CalculatorSessionMachine(RuleBasedStateMachine):
    """
    Stateful testing for the Calculator session.

    Tracks how many evaluations should have reached the history and checks
    that storage always holds the newest window of it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.storage = MemoryStorage()
        self.calc = Calculator(storage=self.storage)
        self.expected_history_len = 0

    @invariant()
    def state_invariants_hold(self) -> None:
        check_invariants(self.calc.state)

    @invariant()
    def history_length_matches(self) -> None:
        assert len(self.calc.state.history) == self.expected_history_len

    @invariant()
    def persisted_history_is_newest_window(self) -> None:
        restored = Calculator(storage=self.storage).state
        assert restored.history == self.calc.state.history[-20:]

    @rule(action=actions.filter(lambda a: not isinstance(a, (Equals, ClearAll))))
    def press(self, action) -> None:
        self.calc.press(action)

    @rule()
    def equals(self) -> None:
        before = self.calc.state
        after = self.calc.press(Equals())
        if len(after.history) > len(before.history):
            self.expected_history_len += 1

    @rule()
    def evaluate_pair(self) -> None:
        self.calc.clear().digit("7").operator("×").digit("6").equals()
        self.expected_history_len += 1

    @rule()
    def clear_all(self) -> None:
        self.calc.clear_all()
        self.expected_history_len = 0


# Run the state machine as a pytest test
TestSessionMachine = CalculatorSessionMachine.TestCase
