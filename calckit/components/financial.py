"""
Financial calculator: interest, loans and discounting.

Rates are taken in percent (5 means 5%) as typed by the user and converted
to fractions before reaching calckit.utils.financial_math.
"""
from calckit.components.base import CalculatorComponent
from calckit.utils.financial_math import compound, monthly_payment, present_value

MONTHS_PER_YEAR = 12


class FinancialCalculator(CalculatorComponent):
    """Time-value-of-money formulas for savings and loan widgets."""

    def calculate_compound_interest(self, principal: float, rate: float, periods: float, time: float) -> float:
        """
        Final amount of a compounding deposit.

        Args:
            principal: Starting amount
            rate: Annual rate in percent
            periods: Compounding periods per year
            time: Years

        Returns:
            Final amount (principal + interest)
        """
        return compound(principal, rate / 100, periods, time)

    def calculate_monthly_payment(self, principal: float, annual_rate: float, years: float) -> float:
        """
        Monthly installment of a fully amortized loan.

        Example:
            >>> round(FinancialCalculator().calculate_monthly_payment(200000, 6, 30), 2)
            1199.1
        """
        monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR
        number_of_payments = years * MONTHS_PER_YEAR
        return monthly_payment(principal, monthly_rate, number_of_payments)

    def calculate_future_value(self, principal: float, rate: float, time: float) -> float:
        """Value after `time` years of annual compounding at `rate` percent."""
        return compound(principal, rate / 100, 1, time)

    def calculate_present_value(self, future_value: float, rate: float, time: float) -> float:
        """Today's value of `future_value` received in `time` years."""
        return present_value(future_value, rate / 100, time)
