"""
Calculator components.

BaseCalculator carries the validation state and formatting defaults of one
widget; the specialized calculators receive it by reference.
"""
from calckit.components.base import BaseCalculator, CalculatorComponent
from calckit.components.business import BusinessCalculator
from calckit.components.financial import FinancialCalculator
from calckit.components.investment import InvestmentCalculator

__all__ = [
    "BaseCalculator",
    "CalculatorComponent",
    "BusinessCalculator",
    "FinancialCalculator",
    "InvestmentCalculator",
    ]
