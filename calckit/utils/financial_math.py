"""
Financial mathematics utility functions.

Provides compound interest, time-value-of-money and ratio formulas used by
the calculator components.

All functions are pure (no side effects) and reusable.

Key concepts:
- Rate format: rate per period as a fraction (0.05 = 5%), never percent
- Periods: number of compounding or payment periods
- Division by zero: zero rates, zero denominators and zero base values
  return a documented fallback (0, or the zero-rate limit) instead of
  raising or producing infinity/NaN. Non-positive period counts where the formula is
  meaningless are rejected with ValueError.
- Powers use math.pow: a negative base with a fractional exponent raises
  ValueError instead of producing a complex number.
"""
import math


# ============================================================================
# COMPOUNDING AND DISCOUNTING
# ============================================================================

def compound(principal: float, rate: float, periods: float, time: float) -> float:
    """
    Final amount after periodic compounding.

    Formula: A = P * (1 + r/n)^(n*t)

    Where:
        - P: Principal
        - r: Annual rate (as fraction, e.g. 0.05 for 5%)
        - n: Compounding periods per year
        - t: Time in years

    Args:
        principal: Starting principal
        rate: Annual rate as a fraction
        periods: Compounding periods per year (must be > 0)
        time: Time in years

    Returns:
        Final amount (principal + interest)

    Raises:
        ValueError: If periods <= 0

    Example:
        >>> compound(1000, 0.05, 1, 1)
        1050.0
        >>> round(compound(10000, 0.05, 12, 1), 2)  # monthly compounding
        10511.62
    """
    if periods <= 0:
        raise ValueError(f"Compounding periods must be positive, got {periods}")
    return principal * math.pow(1 + rate / periods, periods * time)


def present_value(future_value: float, rate: float, periods: float) -> float:
    """
    Discount a future amount back to today.

    Formula: PV = FV / (1 + r)^n
    """
    return future_value / math.pow(1 + rate, periods)


# ============================================================================
# ANNUITIES AND LOANS
# ============================================================================

def future_value_annuity(payment: float, rate: float, periods: float) -> float:
    """
    Future value of equal payments made at the end of each period.

    Formula: FV = PMT * ((1 + r)^n - 1) / r
    With r == 0 this degenerates to PMT * n.
    """
    if rate == 0:
        return payment * periods
    return payment * (math.pow(1 + rate, periods) - 1) / rate


def present_value_annuity(payment: float, rate: float, periods: float) -> float:
    """
    Present value of equal payments made at the end of each period.

    Formula: PV = PMT * (1 - (1 + r)^-n) / r
    With r == 0 this degenerates to PMT * n.
    """
    if rate == 0:
        return payment * periods
    return payment * (1 - math.pow(1 + rate, -periods)) / rate


def monthly_payment(principal: float, rate: float, periods: float) -> float:
    """
    Payment per period of a fully amortized loan.

    Formula: PMT = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Despite the name, any period length works as long as rate and periods
    agree (monthly rate with number of months, etc.).

    Args:
        principal: Loan amount
        rate: Rate per period as a fraction
        periods: Number of payments (must be > 0)

    Returns:
        Payment per period; principal / periods when rate == 0

    Raises:
        ValueError: If periods <= 0

    Example:
        >>> round(monthly_payment(200000, 0.06 / 12, 360), 2)
        1199.1
    """
    if periods <= 0:
        raise ValueError(f"Number of payments must be positive, got {periods}")
    if rate == 0:
        return principal / periods
    growth = math.pow(1 + rate, periods)
    return principal * (rate * growth) / (growth - 1)


# ============================================================================
# RATIOS
# ============================================================================

def calculate_percentage_change(old_value: float, new_value: float) -> float:
    """
    Percentage change from old_value to new_value.

    When old_value is 0 the change is undefined: growth from zero to a
    positive value reports 100, anything else reports 0.

    Examples:
        >>> calculate_percentage_change(50, 75)
        50.0
        >>> calculate_percentage_change(0, 10)
        100
    """
    if old_value == 0:
        return 100 if new_value > 0 else 0
    return (new_value - old_value) / old_value * 100


def calculate_ratio(numerator: float, denominator: float) -> float:
    """Divide with protection against zero division (returns 0)."""
    if denominator == 0:
        return 0
    return numerator / denominator
