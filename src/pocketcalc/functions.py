"""Unary scientific functions applied to the displayed value."""

import math
from collections.abc import Callable
from enum import Enum

from pocketcalc.exceptions import DivisionByZeroError, InvalidInputError


class FunctionName(str, Enum):
    """Scientific keys, valued by their keypad label."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"
    LOG = "log"
    LN = "ln"
    SQUARE = "x²"
    RECIPROCAL = "1/x"
    PI = "π"
    E = "e"


def _in_degrees(trig: Callable[[float], float]) -> Callable[[float], float]:
    def apply(value: float) -> float:
        radians = value * math.pi / 180
        if math.isinf(radians):
            return math.nan
        return trig(radians)

    return apply


def _sqrt(value: float) -> float:
    if value < 0:
        raise InvalidInputError(value, "Square root of a negative number")
    return math.sqrt(value)


def _log10(value: float) -> float:
    if value <= 0:
        raise InvalidInputError(value, "Logarithm of a non-positive number")
    return math.log10(value)


def _ln(value: float) -> float:
    if value <= 0:
        raise InvalidInputError(value, "Logarithm of a non-positive number")
    return math.log(value)


def _reciprocal(value: float) -> float:
    if value == 0:
        raise DivisionByZeroError(1.0)
    return 1 / value


FUNCTIONS: dict[FunctionName, Callable[[float], float]] = {
    FunctionName.SIN: _in_degrees(math.sin),
    FunctionName.COS: _in_degrees(math.cos),
    FunctionName.TAN: _in_degrees(math.tan),
    FunctionName.SQRT: _sqrt,
    FunctionName.LOG: _log10,
    FunctionName.LN: _ln,
    FunctionName.SQUARE: lambda value: value * value,
    FunctionName.RECIPROCAL: _reciprocal,
    FunctionName.PI: lambda value: math.pi,
    FunctionName.E: lambda value: math.e,
}


def apply_function(value: float, name: FunctionName | str) -> float:
    """
    Apply a scientific function to a value.

    Trigonometric functions take degrees, not radians.

    Args:
        value: The displayed value (ignored by the π and e constants)
        name: A FunctionName or its keypad label

    Returns:
        The function result

    Raises:
        InvalidInputError: For sqrt of a negative, log/ln of a non-positive,
            or an unknown function name
        DivisionByZeroError: For 1/x of zero
    """
    try:
        function = FunctionName(name)
    except ValueError as e:
        raise InvalidInputError(name, "Unknown function") from e

    return FUNCTIONS[function](value)
