"""
Binary arithmetic operations.

Overflow and undefined results propagate as IEEE values (``inf``, ``nan``)
and end up on the display. Only a zero divisor is an error.
"""

import math
from enum import Enum

from pocketcalc.exceptions import DivisionByZeroError, InvalidInputError


class Operator(str, Enum):
    """Binary operators, valued by the symbol shown on the keypad."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"
    MODULO = "mod"


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero (either sign)
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and value % 2 == 1


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent with IEEE pow semantics.

    Unlike ``math.pow`` this never raises:
        - Negative base with non-integer exponent: NaN
        - Zero base with negative exponent: infinity
        - Overflow: signed infinity
        - Unit base with infinite exponent, or NaN exponent: NaN

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent
    """
    if math.isnan(exponent):
        return math.nan
    if math.isinf(exponent) and abs(base) == 1:
        return math.nan

    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent) and math.copysign(1.0, base) < 0:
                return -math.inf
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def modulo(a: float, b: float) -> float:
    """
    Calculate the truncated remainder of a divided by b.

    The sign of the result follows the dividend: modulo(-10, 3) == -1.

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    try:
        return math.fmod(a, b)
    except ValueError:
        # Infinite dividend
        return math.nan


OPERATIONS = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
    Operator.POWER: power,
    Operator.MODULO: modulo,
}


def apply_operator(left: float, right: float, op: Operator | str) -> float:
    """
    Resolve ``left op right``.

    Args:
        left: Left operand
        right: Right operand
        op: An Operator or its keypad symbol

    Returns:
        The result, possibly NaN or infinite

    Raises:
        DivisionByZeroError: For ÷ or mod with a zero right operand
        InvalidInputError: If op is not a known operator symbol
    """
    try:
        operator = Operator(op)
    except ValueError as e:
        raise InvalidInputError(op, "Unknown operator") from e

    return OPERATIONS[operator](left, right)
