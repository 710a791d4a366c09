"""
Number, currency and percentage formatting for calculator output.

Localized output goes through Babel. Rounding is always half-up on the
exact value (0.125 -> "0.13"), applied before Babel sees the number so that
its own half-even quantization never kicks in.

Missing values (None) and NaN are formatted as 0.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal as babel_format_decimal

from calckit.utils.translation_utils import get_babel_locale

Number = Union[int, float, Decimal]

CURRENCY_DECIMALS = 2


def _or_zero(value: Optional[Number]) -> Number:
    """Map None and NaN to 0, pass everything else through."""
    if value is None:
        return 0
    if isinstance(value, Decimal):
        return Decimal(0) if value.is_nan() else value
    if isinstance(value, float) and math.isnan(value):
        return 0
    return value


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")


def to_fixed(value: Number, decimals: int = 2) -> Decimal:
    """
    Round a number to a fixed number of decimals, half-up.

    Floats are converted exactly (Decimal(0.125) is 0.125), so ties are
    detected on the real binary value rather than its repr.
    Infinite values are returned unrounded.

    Args:
        value: Number to round
        decimals: Number of fraction digits to keep

    Returns:
        Decimal with exactly `decimals` fraction digits

    Example:
        >>> to_fixed(2.5, 0)
        Decimal('3')
        >>> to_fixed(1.005, 2)  # binary value is 1.00499999...
        Decimal('1.00')
    """
    _check_decimals(decimals)
    number = value if isinstance(value, Decimal) else Decimal(value)
    if not number.is_finite():
        return number

    quantizer = Decimal(1).scaleb(-decimals)
    # Large magnitudes need more digits than the default context precision
    with localcontext() as ctx:
        ctx.prec = max(28, number.adjusted() + decimals + 2)
        return number.quantize(quantizer, rounding=ROUND_HALF_UP)


def _decimal_pattern(decimals: int) -> str:
    """Babel pattern with grouping and exactly `decimals` fraction digits."""
    if decimals == 0:
        return "#,##0"
    return "#,##0." + "0" * decimals


def format_currency(amount: Optional[Number], currency: str = "USD", locale: str = "en_US") -> str:
    """
    Format an amount as a localized currency string with 2 fraction digits.

    The currency code is not validated: unknown codes are rendered as-is
    in place of a symbol.

    Args:
        amount: Amount to format (None/NaN -> 0)
        currency: ISO 4217 code (default: USD)
        locale: Locale identifier, 'en_US' or 'en-US' style (default: en_US)

    Returns:
        Formatted string

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(None)
        '$0.00'
        >>> format_currency(1234.5, 'EUR', 'de_DE')
        '1.234,50\\xa0€'
    """
    value = to_fixed(_or_zero(amount), CURRENCY_DECIMALS)
    return babel_format_currency(
        value,
        currency,
        locale=get_babel_locale(locale),
        currency_digits=False,
        )


def format_percentage(value: Optional[Number], decimals: int = 2) -> str:
    """
    Format a number with fixed decimals and a trailing '%'.

    The value is taken as-is: 12.5 becomes '12.50%', not '1250.00%'.

    Examples:
        >>> format_percentage(12.5)
        '12.50%'
        >>> format_percentage(None, 1)
        '0.0%'
    """
    number = to_fixed(_or_zero(value), decimals)
    if not number.is_finite():
        return f"{value}%"
    return f"{number:f}%"


def format_number(value: Optional[Number], decimals: int = 2, locale: str = "en_US") -> str:
    """
    Format a number with locale grouping and exactly `decimals` fraction digits.

    Examples:
        >>> format_number(1234567.891)
        '1,234,567.89'
        >>> format_number(1234.5, 0)
        '1,235'
    """
    number = to_fixed(_or_zero(value), decimals)
    return babel_format_decimal(
        number,
        format=_decimal_pattern(decimals),
        locale=get_babel_locale(locale),
        )
