"""
Number formatting and display parsing.

The display text is produced the way a browser runtime prints numbers
(ECMAScript ``Number.prototype.toString``) rather than with ``str(float)``:

    >>> format_number(8.0)
    '8'
    >>> format_number(1e21)
    '1e+21'
    >>> format_number(1e-7)
    '1e-7'
    >>> format_number(0.000001)
    '0.000001'

Parsing is the lenient prefix parse of ``parseFloat``: the longest numeric
prefix wins and text with no numeric prefix is NaN.
"""

import decimal
import math
import re

# Exponential notation is used outside [1e-6, 1e21)
MAX_FIXED_POINT = 21
MIN_FIXED_POINT = -6

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Split a positive finite float into its shortest round-trip digits.

    Returns:
        (digits, point) such that value == 0.<digits> * 10 ** point
    """
    normalized = decimal.Decimal(repr(value)).normalize()
    _, digit_tuple, exponent = normalized.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, exponent + len(digits)


def format_number(value: float) -> str:
    """
    Convert a number to its canonical display string.

    Args:
        value: Any float, including NaN and infinities

    Returns:
        The text a user sees for this value
    """
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Negative zero prints as "0"
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= MAX_FIXED_POINT:
        return sign + digits + "0" * (point - count)
    if 0 < point <= MAX_FIXED_POINT:
        return sign + digits[:point] + "." + digits[point:]
    if MIN_FIXED_POINT < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{sign}{mantissa}e{exponent_sign}{abs(exponent)}"


def parse_display(text: str) -> float:
    """
    Read the numeric value of a display string.

    Never raises: ``"3."`` is 3.0, ``"1e+215"`` is 1e215 and ``"NaN5"``
    (no numeric prefix) is NaN.
    """
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group())
