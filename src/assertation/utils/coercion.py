"""
Loose conversions shared by the rule leaves.

Rule-expression arguments always arrive as strings ("gte,18"), while values
under validation can be anything. These helpers give the leaves one
consistent, forgiving way of reading text, numbers, booleans and lengths.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

Number = Union[int, float]

# Accepts what a form field or a JSON payload usually carries as a number
NUMERIC_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")
LEADING_NUMBER_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

TRUE_STRINGS = ("true", "1", "yes", "on")
FALSE_STRINGS = ("false", "0", "no", "off", "")


def to_text(value: Any) -> str:
    """Render a value as text; None becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_numeric(value: Any) -> bool:
    """True for real numbers and for strings that spell one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return NUMERIC_PATTERN.fullmatch(value) is not None
    return False


def to_number(value: Any) -> Optional[Number]:
    """
    Convert a numeric value or numeric string to int or float.

    Returns:
        The number, or None when the value is not numeric
    """
    if not is_numeric(value):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Decimal):
        return float(value)

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def to_float(value: Any) -> float:
    """
    Convert anything to a float, reading a leading number out of strings.

    Non-numeric input becomes 0.0 ("12abc" -> 12.0, "abc" -> 0.0).
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float, Decimal)):
        return float(value)

    match = LEADING_NUMBER_PATTERN.match(to_text(value))
    return float(match.group(0)) if match else 0.0


def to_decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(to_float(value)))
    except InvalidOperation:
        return Decimal(0)


def to_int(value: Any) -> Optional[int]:
    """Convert integer-like values; None when the value is not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    number = to_number(value)
    if number is None or not float(number).is_integer():
        return None
    return int(number)


def to_bool(value: Any) -> bool:
    """Read booleans the way configuration and rule arguments spell them."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return bool(value)


def length(value: Any) -> int:
    """Length of a value's text form; sized containers use their size."""
    if value is None:
        return 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value)
    return len(to_text(value))


def loose_equals(left: Any, right: Any) -> bool:
    """Equality where numeric strings compare equal to the numbers they spell."""
    left_number, right_number = _numeric_pair(left, right)
    if left_number is not None:
        return left_number == right_number
    if isinstance(left, str) or isinstance(right, str):
        if left is None or right is None:
            return to_text(left) == to_text(right)
    return left == right


def loose_compare(left: Any, right: Any) -> Optional[int]:
    """
    Three-way comparison with numeric coercion.

    Returns:
        -1, 0 or 1, or None when the operands cannot be ordered
    """
    left_number, right_number = _numeric_pair(left, right)
    if left_number is not None:
        left, right = left_number, right_number

    try:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0
    except TypeError:
        return None


def _numeric_pair(left: Any, right: Any):
    """Both operands as numbers when both are numeric, else (None, None)."""
    left_number = to_number(left)
    right_number = to_number(right)
    if left_number is None or right_number is None:
        return None, None
    return left_number, right_number
