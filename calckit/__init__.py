"""
CalcKit: formatting, validation and financial formulas for calculator widgets.

Everything a widget needs is importable from the package root:

    from calckit import BaseCalculator, FinancialCalculator, format_currency
"""
from calckit.components import (
    BaseCalculator,
    BusinessCalculator,
    CalculatorComponent,
    FinancialCalculator,
    InvestmentCalculator,
    )
from calckit.schemas.validation import FieldRules, ValidationResult
from calckit.utils.datetime_utils import add_days, days_between
from calckit.utils.financial_math import (
    calculate_percentage_change,
    calculate_ratio,
    compound,
    future_value_annuity,
    monthly_payment,
    present_value,
    present_value_annuity,
    )
from calckit.utils.formatting import format_currency, format_number, format_percentage
from calckit.utils.validation_utils import (
    parse_number,
    validate_number,
    validate_percentage,
    validate_required,
    )

__version__ = "0.1.0"

__all__ = [
    "BaseCalculator",
    "BusinessCalculator",
    "CalculatorComponent",
    "FinancialCalculator",
    "InvestmentCalculator",
    "FieldRules",
    "ValidationResult",
    "add_days",
    "days_between",
    "calculate_percentage_change",
    "calculate_ratio",
    "compound",
    "future_value_annuity",
    "monthly_payment",
    "present_value",
    "present_value_annuity",
    "format_currency",
    "format_number",
    "format_percentage",
    "parse_number",
    "validate_number",
    "validate_percentage",
    "validate_required",
    ]
