"""Completed-expression history."""

from pocketcalc.formatting import format_number
from pocketcalc.operations import Operator

PERSISTED_HISTORY_LIMIT = 20
DISPLAY_HISTORY_LIMIT = 5


def format_expression(left: float, operator: Operator, right: float, result: float) -> str:
    """Render an evaluated expression, e.g. ``"5 + 3 = 8"``."""
    return (
        f"{format_number(left)} {Operator(operator).value} "
        f"{format_number(right)} = {format_number(result)}"
    )


def append_entry(history: tuple[str, ...], entry: str) -> tuple[str, ...]:
    """Return a new history with entry appended as the most recent."""
    return (*history, entry)


def persisted_view(
    history: tuple[str, ...], limit: int = PERSISTED_HISTORY_LIMIT
) -> list[str]:
    """
    The entries kept in storage: the most recent ``limit``, oldest first.

    Older entries are evicted first.
    """
    if limit <= 0:
        return []
    return list(history[-limit:])


def display_view(history: tuple[str, ...], limit: int = DISPLAY_HISTORY_LIMIT) -> list[str]:
    """The entries shown on screen: the most recent ``limit``, newest first."""
    return list(reversed(persisted_view(history, limit)))
