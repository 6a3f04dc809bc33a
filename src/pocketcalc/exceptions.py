"""Custom exceptions and the error taxonomy for the calculator engine."""

from enum import Enum
from typing import Any


class ErrorKey(str, Enum):
    """Message keys emitted by the engine; translation is the caller's job."""

    DIVIDE_BY_ZERO = "calc.error.divideByZero"
    INVALID_INPUT = "calc.error.invalidInput"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised for a zero divisor in ÷, mod or 1/x."""

    key = ErrorKey.DIVIDE_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """Raised when a value is outside a function's domain or an action is malformed."""

    key = ErrorKey.INVALID_INPUT

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class ConfigurationError(CalculatorError):
    """Raised when calculator settings cannot be loaded."""
