"""
User actions accepted by the input processor.

Each key press is one frozen dataclass. Actions validate their payload on
construction, so a malformed action never reaches a transition:

    >>> Digit("7")
    Digit(digit='7')
    >>> OperatorPress("×").op
    <Operator.MULTIPLY: '×'>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pocketcalc.exceptions import InvalidInputError
from pocketcalc.functions import FunctionName
from pocketcalc.memory import MemoryOp
from pocketcalc.operations import Operator


def _coerce(enum_type, value, what: str):
    try:
        return enum_type(value)
    except ValueError as e:
        raise InvalidInputError(value, f"Unknown {what}") from e


@dataclass(frozen=True)
class Digit:
    digit: str

    def __post_init__(self) -> None:
        if not (isinstance(self.digit, str) and len(self.digit) == 1 and self.digit in "0123456789"):
            raise InvalidInputError(self.digit, "Digit must be a single character 0-9")


@dataclass(frozen=True)
class Decimal:
    pass


@dataclass(frozen=True)
class OperatorPress:
    op: Operator

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _coerce(Operator, self.op, "operator"))


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class ClearEntry:
    pass


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class Function:
    name: FunctionName

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _coerce(FunctionName, self.name, "function"))


@dataclass(frozen=True)
class Memory:
    op: MemoryOp

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _coerce(MemoryOp, self.op, "memory operation"))


Action = Union[
    Digit,
    Decimal,
    OperatorPress,
    Equals,
    ClearEntry,
    ClearAll,
    ToggleSign,
    Percent,
    Function,
    Memory,
]
