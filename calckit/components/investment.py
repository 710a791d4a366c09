"""
Investment calculator: return on investment, CAGR and yield.
"""
import math

from calckit.components.base import CalculatorComponent


class InvestmentCalculator(CalculatorComponent):
    """Return metrics, all expressed in percent."""

    def calculate_roi(self, gain: float, cost: float) -> float:
        """
        Return on investment.

        `gain` is the final value of the investment, not the profit:
        ROI = (gain - cost) / cost * 100, or 0 when cost is 0.
        """
        if cost == 0:
            return 0
        return (gain - cost) / cost * 100

    def calculate_cagr(self, beginning_value: float, ending_value: float, years: float) -> float:
        """
        Compound annual growth rate.

        Formula: ((ending / beginning) ^ (1 / years) - 1) * 100
        Returns 0 when beginning_value or years is 0.

        Raises:
            ValueError: If ending and beginning values have opposite signs

        Example:
            >>> round(InvestmentCalculator().calculate_cagr(1000, 2000, 5), 2)
            14.87
        """
        if beginning_value == 0 or years == 0:
            return 0
        growth = ending_value / beginning_value
        if growth < 0:
            raise ValueError(
                f"CAGR undefined for values of opposite sign: {beginning_value} -> {ending_value}"
                )
        return (math.pow(growth, 1 / years) - 1) * 100

    def calculate_yield(self, annual_income: float, investment: float) -> float:
        """Income yield: annual_income / investment * 100, or 0 when investment is 0."""
        if investment == 0:
            return 0
        return annual_income / investment * 100
