"""
Tests for FinancialCalculator, BusinessCalculator and InvestmentCalculator,
including sharing a single BaseCalculator between them.
"""
import pytest

from calckit.components import (
    BaseCalculator,
    BusinessCalculator,
    FinancialCalculator,
    InvestmentCalculator,
    )


class TestComposition:
    """Specialized calculators hold a BaseCalculator by reference."""

    def test_default_base_created(self):
        calc = FinancialCalculator()
        assert isinstance(calc.base, BaseCalculator)
        assert calc.base.is_valid is True

    def test_default_bases_are_independent(self):
        first, second = BusinessCalculator(), BusinessCalculator()
        first.base.validate_field("x", "", {"required": True})
        assert second.base.is_valid is True

    def test_shared_error_map(self):
        base = BaseCalculator()
        loan = FinancialCalculator(base)
        pricing = BusinessCalculator(base)

        loan.base.validate_field("principal", "abc", {"type": "number"})

        assert pricing.base is base
        assert pricing.base.is_valid is False
        assert pricing.base.errors == {"principal": "Please enter a valid number"}

    def test_reset_delegates_to_base(self):
        base = BaseCalculator()
        inputs = {"cost": "10"}
        base.add_reset_hook(inputs.clear)
        calc = InvestmentCalculator(base)
        base.validate_field("cost", "", {"required": True})

        calc.reset()

        assert base.is_valid is True
        assert inputs == {}


class TestFinancialCalculator:
    """Rates are given in percent."""

    def setup_method(self):
        self.calc = FinancialCalculator()

    def test_compound_interest(self):
        assert self.calc.calculate_compound_interest(1000, 5, 1, 1) == pytest.approx(1050)

    def test_compound_interest_monthly(self):
        assert self.calc.calculate_compound_interest(10000, 5, 12, 1) == pytest.approx(10511.62, abs=0.01)

    def test_monthly_payment(self):
        assert self.calc.calculate_monthly_payment(200000, 6, 30) == pytest.approx(1199.10, abs=0.01)

    def test_monthly_payment_zero_rate(self):
        assert self.calc.calculate_monthly_payment(1200, 0, 1) == 100

    def test_future_value(self):
        assert self.calc.calculate_future_value(1000, 10, 2) == pytest.approx(1210)

    def test_present_value(self):
        assert self.calc.calculate_present_value(1210, 10, 2) == pytest.approx(1000)


class TestBusinessCalculator:
    """Test margins, markups and delegated ratios."""

    def setup_method(self):
        self.calc = BusinessCalculator()

    def test_margin(self):
        assert self.calc.calculate_margin(200, 150) == 25

    def test_margin_zero_revenue(self):
        assert self.calc.calculate_margin(0, 10) == 0

    def test_markup(self):
        assert self.calc.calculate_markup(150, 200) == pytest.approx(33.3333, rel=1e-4)

    def test_markup_zero_cost(self):
        assert self.calc.calculate_markup(0, 5) == 0

    def test_ratio(self):
        assert self.calc.calculate_ratio(3, 4) == 0.75
        assert self.calc.calculate_ratio(3, 0) == 0

    def test_percentage_change(self):
        assert self.calc.calculate_percentage_change(80, 100) == 25
        assert self.calc.calculate_percentage_change(0, 100) == 100


class TestInvestmentCalculator:
    """Test ROI, CAGR and yield."""

    def setup_method(self):
        self.calc = InvestmentCalculator()

    def test_roi(self):
        assert self.calc.calculate_roi(1500, 1000) == 50

    def test_roi_loss(self):
        assert self.calc.calculate_roi(800, 1000) == -20

    def test_roi_zero_cost(self):
        assert self.calc.calculate_roi(100, 0) == 0

    def test_cagr(self):
        """Doubling in 5 years ≈ 14.87% per year."""
        assert self.calc.calculate_cagr(1000, 2000, 5) == pytest.approx(14.8698, abs=1e-4)

    def test_cagr_one_year_equals_growth(self):
        assert self.calc.calculate_cagr(100, 110, 1) == pytest.approx(10)

    @pytest.mark.parametrize("beginning,years", [(0, 5), (1000, 0)])
    def test_cagr_degenerate_inputs(self, beginning, years):
        assert self.calc.calculate_cagr(beginning, 2000, years) == 0

    def test_cagr_opposite_signs_rejected(self):
        with pytest.raises(ValueError):
            self.calc.calculate_cagr(1000, -500, 2)

    def test_cagr_fractional_years_returns_float(self):
        result = self.calc.calculate_cagr(1000, 1210, 2.5)
        assert isinstance(result, float)
        assert result == pytest.approx((1.21 ** 0.4 - 1) * 100)

    def test_cagr_both_negative(self):
        """Growth is positive when both values share a sign."""
        assert self.calc.calculate_cagr(-1000, -2000, 5) == pytest.approx(14.8698, abs=1e-4)

    def test_yield(self):
        assert self.calc.calculate_yield(50, 1000) == 5

    def test_yield_zero_investment(self):
        assert self.calc.calculate_yield(50, 0) == 0
