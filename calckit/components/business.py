"""
Business calculator: ratios, margins and markups.

All percentages are returned in percent (25.0 means 25%).
"""
from calckit.components.base import CalculatorComponent
from calckit.utils.financial_math import calculate_percentage_change, calculate_ratio


class BusinessCalculator(CalculatorComponent):
    """Pricing and growth formulas for business widgets."""

    def calculate_ratio(self, numerator: float, denominator: float) -> float:
        return calculate_ratio(numerator, denominator)

    def calculate_percentage_change(self, old_value: float, new_value: float) -> float:
        return calculate_percentage_change(old_value, new_value)

    def calculate_margin(self, revenue: float, cost: float) -> float:
        """
        Gross margin as a share of revenue.

        Formula: (revenue - cost) / revenue * 100, or 0 when revenue is 0.

        Example:
            >>> BusinessCalculator().calculate_margin(200, 150)
            25.0
        """
        if revenue == 0:
            return 0
        return (revenue - cost) / revenue * 100

    def calculate_markup(self, cost: float, selling_price: float) -> float:
        """
        Markup as a share of cost.

        Formula: (selling_price - cost) / cost * 100, or 0 when cost is 0.

        Example:
            >>> round(BusinessCalculator().calculate_markup(150, 200), 2)
            33.33
        """
        if cost == 0:
            return 0
        return (selling_price - cost) / cost * 100
