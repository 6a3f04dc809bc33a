"""
Keypad calculator engine.

A left-to-right, immediate-evaluation calculator driven one key press at
a time:
- A pure, total input processor over frozen state snapshots
- Binary operators, degree-based scientific functions and one memory register
- Display text formatted the way a browser runtime prints numbers
- Session glue persisting history, memory and mode to a key/value store
"""

from pocketcalc.actions import (
    Action,
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
from pocketcalc.config import CalculatorSettings, load_settings
from pocketcalc.exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    ErrorKey,
    InvalidInputError,
)
from pocketcalc.formatting import format_number, parse_display
from pocketcalc.functions import FunctionName, apply_function
from pocketcalc.memory import MemoryOp, update_memory
from pocketcalc.operations import (
    Operator,
    add,
    apply_operator,
    divide,
    modulo,
    multiply,
    power,
    subtract,
)
from pocketcalc.persistence import (
    JsonFileStorage,
    MemoryStorage,
    PersistenceAdapter,
    hydrate,
    persist_changes,
    persist_mode,
)
from pocketcalc.processor import InputProcessor, apply
from pocketcalc.session import Calculator
from pocketcalc.state import INITIAL_STATE, CalculatorMode, CalculatorState, Phase
from pocketcalc.translation import DEFAULT_MESSAGES, CatalogTranslator, Translator

__all__ = [
    "Action",
    "Calculator",
    "CalculatorError",
    "CalculatorMode",
    "CalculatorSettings",
    "CalculatorState",
    "CatalogTranslator",
    "ClearAll",
    "ClearEntry",
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "Decimal",
    "Digit",
    "DivisionByZeroError",
    "Equals",
    "ErrorKey",
    "Function",
    "FunctionName",
    "INITIAL_STATE",
    "InputProcessor",
    "InvalidInputError",
    "JsonFileStorage",
    "Memory",
    "MemoryOp",
    "MemoryStorage",
    "Operator",
    "OperatorPress",
    "Percent",
    "PersistenceAdapter",
    "Phase",
    "ToggleSign",
    "Translator",
    "add",
    "apply",
    "apply_function",
    "apply_operator",
    "divide",
    "format_number",
    "hydrate",
    "load_settings",
    "modulo",
    "multiply",
    "persist_changes",
    "persist_mode",
    "power",
    "subtract",
    "update_memory",
]

__version__ = "0.1.0"
