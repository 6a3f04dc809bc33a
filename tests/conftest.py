"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


class FailingStorage:
    """A store whose every call raises, like a full or revoked quota."""

    def __init__(self) -> None:
        self.calls = 0

    def get(self, key):
        self.calls += 1
        raise OSError("storage unavailable")

    def set(self, key, value):
        self.calls += 1
        raise OSError("storage unavailable")

    def remove(self, key):
        self.calls += 1
        raise OSError("storage unavailable")


@pytest.fixture
def processor():
    """Provide a fresh InputProcessor."""
    from pocketcalc import InputProcessor

    return InputProcessor()


@pytest.fixture
def storage():
    """Provide an empty in-memory store."""
    from pocketcalc import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def calculator(storage):
    """Provide a Calculator session backed by the in-memory store."""
    from pocketcalc import Calculator

    return Calculator(storage=storage)


@pytest.fixture
def run(processor):
    """Apply a sequence of actions starting from the initial state."""
    from pocketcalc import INITIAL_STATE

    def _run(*actions, state=INITIAL_STATE):
        for action in actions:
            state = processor.apply(state, action)
        return state

    return _run
