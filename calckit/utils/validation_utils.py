"""
Input validators for calculator fields.

Each validator returns a ValidationResult; none of them raise on bad input.
Numeric parsing is strict: the whole string must be a number
("12abc" and "1,000" are rejected), and NaN/infinity are never accepted.
Leading-prefix parsing, where "12abc" would read as 12, is deliberately not
supported; see the strict numeric parsing decision in DESIGN.md.
Integers too large for a float and signaling NaN decimals are invalid too.
"""
import math
from decimal import Decimal
from typing import Any, Optional

from calckit.schemas.validation import ValidationResult

MSG_INVALID_NUMBER = "Please enter a valid number"
MSG_REQUIRED = "This field is required"
MSG_MIN = "Value must be at least {bound}"
MSG_MAX = "Value must be no more than {bound}"


def parse_number(value: Any) -> Optional[float]:
    """
    Convert input to float safely.

    Args:
        value: Input value (int, float, Decimal, str, or anything else)

    Returns:
        Finite float, or None if the value is not a number

    Examples:
        >>> parse_number(" 42.5 ")
        42.5
        >>> parse_number("abc") is None
        True
        >>> parse_number(True) is None  # bools are not numbers here
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def _format_bound(bound: float) -> str:
    """Render 10.0 as '10' and 0.5 as '0.5' in messages."""
    if float(bound).is_integer():
        return str(int(bound))
    return str(bound)


def validate_number(value: Any, min_value: Optional[float] = None, max_value: Optional[float] = None) -> ValidationResult:
    """
    Validate that value is a number within optional inclusive bounds.

    Args:
        value: Raw input
        min_value: Lower bound, ignored if None
        max_value: Upper bound, ignored if None

    Returns:
        ValidationResult with the parsed float on success

    Examples:
        >>> validate_number("50", 0, 100).value
        50.0
        >>> validate_number("150", 0, 100).error
        'Value must be no more than 100'
    """
    number = parse_number(value)
    if number is None:
        return ValidationResult.fail(MSG_INVALID_NUMBER)
    if min_value is not None and number < min_value:
        return ValidationResult.fail(MSG_MIN.format(bound=_format_bound(min_value)))
    if max_value is not None and number > max_value:
        return ValidationResult.fail(MSG_MAX.format(bound=_format_bound(max_value)))
    return ValidationResult.ok(number)


def validate_required(value: Any) -> ValidationResult:
    """Fail on None or an empty string; otherwise pass the value through unchanged."""
    if value is None or value == "":
        return ValidationResult.fail(MSG_REQUIRED)
    return ValidationResult.ok(value)


def validate_percentage(value: Any) -> ValidationResult:
    """Validate a percentage in [0, 100]."""
    return validate_number(value, 0, 100)
