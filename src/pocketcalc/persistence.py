"""
Key/value persistence for history, memory and mode.

The processor never touches storage. The session calls ``hydrate`` once
at start-up and ``persist_changes`` after every transition; both swallow
storage failures so that a broken store can never corrupt or roll back
the in-memory state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import orjson

from pocketcalc.actions import ClearAll
from pocketcalc.config import CalculatorSettings
from pocketcalc.formatting import format_number, parse_display
from pocketcalc.history import persisted_view
from pocketcalc.state import INITIAL_STATE, CalculatorMode, CalculatorState

if TYPE_CHECKING:
    from pocketcalc.actions import Action

logger = logging.getLogger(__name__)


class PersistenceAdapter(Protocol):
    """Durable string store. Any call may raise."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dictionary-backed store, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"MemoryStorage(keys={sorted(self._data)})"


class JsonFileStorage:
    """
    Store backed by a single JSON object file.

    The file is re-read on every call and rewritten on every change, so
    several sessions pointing at one file see each other's writes.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "rb") as f:
            data = orjson.loads(f.read())
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "wb") as f:
            f.write(orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS))

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


# =========================================================================
# Hydration
# =========================================================================


def _load_history(raw: str) -> tuple[str, ...]:
    entries = orjson.loads(raw)
    if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
        raise ValueError("History must be a JSON array of strings")
    return tuple(entries)


def hydrate(
    storage: PersistenceAdapter, settings: CalculatorSettings | None = None
) -> tuple[CalculatorState, CalculatorMode]:
    """
    Build the start-of-session state from storage.

    Only history, memory and mode are restored; every other field starts at
    its initial value. Each key is restored independently and a missing,
    unreadable or corrupt key falls back to its default.

    Returns:
        (state, mode)
    """
    settings = settings or CalculatorSettings()
    state = INITIAL_STATE
    mode = CalculatorMode.BASIC

    try:
        raw_history = storage.get(settings.history_key)
        if raw_history:
            state = state.evolve(history=_load_history(raw_history))
    except Exception as e:
        logger.warning("Could not restore history from %r: %s", settings.history_key, e)

    try:
        raw_memory = storage.get(settings.memory_key)
        if raw_memory:
            state = state.evolve(memory=parse_display(raw_memory))
    except Exception as e:
        logger.warning("Could not restore memory from %r: %s", settings.memory_key, e)

    try:
        raw_mode = storage.get(settings.mode_key)
        if raw_mode:
            mode = CalculatorMode(raw_mode)
    except Exception as e:
        logger.warning("Could not restore mode from %r: %s", settings.mode_key, e)

    return state, mode


# =========================================================================
# Post-transition hook
# =========================================================================


def _attempt(description: str, write, *args) -> bool:
    try:
        write(*args)
    except Exception as e:
        logger.warning("Failed to %s: %s", description, e)
        return False
    return True


def persist_changes(
    storage: PersistenceAdapter,
    before: CalculatorState,
    after: CalculatorState,
    action: Action,
    settings: CalculatorSettings | None = None,
) -> list[str]:
    """
    Write the persisted fields that changed between two states.

    A ``ClearAll`` purges the history key instead of writing an empty list.

    Returns:
        The storage keys successfully written or removed
    """
    settings = settings or CalculatorSettings()
    touched: list[str] = []

    if isinstance(action, ClearAll):
        if _attempt("purge history", storage.remove, settings.history_key):
            touched.append(settings.history_key)
    elif after.history != before.history:
        payload = orjson.dumps(persisted_view(after.history, settings.persisted_history_limit))
        if _attempt("save history", storage.set, settings.history_key, payload.decode()):
            touched.append(settings.history_key)

    if after.memory != before.memory:
        if _attempt("save memory", storage.set, settings.memory_key, format_number(after.memory)):
            touched.append(settings.memory_key)

    return touched


def persist_mode(
    storage: PersistenceAdapter,
    mode: CalculatorMode,
    settings: CalculatorSettings | None = None,
) -> bool:
    """Save the keypad mode. Returns False if the write failed."""
    settings = settings or CalculatorSettings()
    return _attempt("save mode", storage.set, settings.mode_key, CalculatorMode(mode).value)
