"""
Tests for the calculation building blocks.
"""

import math

from investcalc.calculations.amortization import (
    annualize_schedule,
    calculate_payment,
    generate_amortization_schedule,
)
from investcalc.calculations.growth import (
    calculate_compound_value,
    calculate_inflation_factor,
    calculate_required_contribution,
    deflate,
    generate_contribution_schedule,
)
from investcalc.calculations.returns import (
    calculate_cagr,
    calculate_doubling_time,
    calculate_roi_percentage,
    calculate_tax_on_gain,
    finite_or_zero,
    round_money,
    safe_power,
)


class TestAmortization:
    """Test loan amortization calculations."""

    def test_calculate_payment(self):
        """Test monthly payment calculation."""
        # $1M loan at 5% for 30 years
        payment = calculate_payment(1000000, 5, 360)
        # Expected payment around $5,368/month
        assert 5300 < payment < 5500

    def test_zero_rate_payment(self):
        """Zero-rate loans split principal evenly."""
        assert calculate_payment(12000, 0, 24) == 500

    def test_zero_term_payment(self):
        assert calculate_payment(12000, 6, 0) == 0.0

    def test_payment_beyond_float_range_is_interest_only(self):
        """1000% over 100 years overflows (1+r)**N; EMI degrades to P*r."""
        payment = calculate_payment(100000, 1000, 1200)
        assert math.isfinite(payment)
        assert abs(payment - 100000 * 1000 / 100 / 12) < 1e-6

    def test_amortization_schedule_length(self):
        """Test amortization schedule has correct number of periods."""
        schedule = generate_amortization_schedule(100000, 6, 60)
        assert len(schedule) == 60
        assert [row["period"] for row in schedule[:3]] == [1, 2, 3]

    def test_amortization_final_balance(self):
        """Test that final balance is approximately zero."""
        schedule = generate_amortization_schedule(100000, 6, 60)
        assert abs(schedule[-1]["ending_balance"]) < 1
        assert abs(sum(row["principal"] for row in schedule) - 100000) < 1e-6

    def test_amortization_first_month_interest(self):
        schedule = generate_amortization_schedule(100000, 6, 60)
        assert abs(schedule[0]["interest"] - 500) < 1e-9

    def test_zero_rate_schedule(self):
        schedule = generate_amortization_schedule(1200, 0, 3)
        assert [row["principal"] for row in schedule] == [400, 400, 400]
        assert all(row["interest"] == 0 for row in schedule)

    def test_schedule_beyond_float_range_settles_in_final_month(self):
        schedule = generate_amortization_schedule(100000, 1000, 1200)
        assert len(schedule) == 1200
        assert all(math.isfinite(row["interest"]) for row in schedule)
        assert schedule[-1]["ending_balance"] == 0

    def test_annualize_schedule(self):
        """Yearly roll-up carries cumulative totals and year-end balance."""
        schedule = generate_amortization_schedule(100000, 9, 36)
        years = annualize_schedule(schedule)

        total_interest = sum(row["interest"] for row in schedule)
        assert [y["year"] for y in years] == [1, 2, 3]
        assert years[-1]["balance"] < 1
        assert abs(years[-1]["principal_paid"] - 100000) < 1
        assert abs(years[-1]["interest_paid"] - total_interest) < 0.01
        assert years[0]["balance"] > years[1]["balance"] > years[2]["balance"]

    def test_annualize_empty_schedule(self):
        assert annualize_schedule([]) == []


class TestGrowth:
    """Test growth and goal-seeking calculations."""

    def test_compound_annual(self):
        assert abs(calculate_compound_value(10000, 8, 1, 1) - 10800) < 1e-6

    def test_compound_monthly_beats_annual(self):
        annual = calculate_compound_value(10000, 8, 1, 5)
        monthly = calculate_compound_value(10000, 8, 12, 5)
        assert monthly > annual

    def test_compound_invalid_frequency_defaults_to_annual(self):
        assert calculate_compound_value(10000, 8, 0, 2) == calculate_compound_value(
            10000, 8, 1, 2
        )

    def test_contribution_schedule_zero_rate(self):
        snapshots = generate_contribution_schedule(0, 500, 0, 1)
        assert snapshots == [{"year": 1, "invested": 6000, "balance": 6000}]

    def test_step_up_applies_after_year_end(self):
        """Second-year contribution is 10% higher; first year is not."""
        snapshots = generate_contribution_schedule(0, 1000, 0, 2, step_up_rate=10)
        assert snapshots[0]["invested"] == 12000
        assert abs(snapshots[1]["invested"] - (12000 + 13200)) < 1e-6

    def test_contribution_lump_sum_only(self):
        snapshots = generate_contribution_schedule(1000, 0, 12, 1)
        assert abs(snapshots[0]["balance"] - 1000 * 1.01 ** 12) < 1e-6
        assert snapshots[0]["invested"] == 1000

    def test_required_contribution_round_trip(self):
        """Solved payment reproduces the target through the schedule."""
        payment = calculate_required_contribution(1000000, 10000, 8, 120)
        snapshots = generate_contribution_schedule(10000, payment, 8, 10)
        assert abs(snapshots[-1]["balance"] - 1000000) < 0.01

    def test_required_contribution_zero_rate(self):
        assert calculate_required_contribution(12000, 0, 0, 12) == 1000

    def test_required_contribution_target_already_met(self):
        assert calculate_required_contribution(1000, 5000, 5, 12) == 0.0

    def test_required_contribution_no_months(self):
        assert calculate_required_contribution(1000, 0, 5, 0) == 0.0

    def test_required_contribution_beyond_float_range(self):
        assert calculate_required_contribution(1000000, 0, 1000, 1200) == 0.0

    def test_compound_value_beyond_float_range(self):
        assert calculate_compound_value(10000, 1000, 12, 100) == math.inf

    def test_inflation_factor_beyond_float_range(self):
        assert calculate_inflation_factor(1000, 400) == math.inf
        assert deflate(1000, 1000, 400) == 0.0

    def test_deflate(self):
        assert abs(deflate(1030, 3, 1) - 1000) < 1e-9
        assert deflate(500, 0, 10) == 500


class TestReturns:
    """Test return metrics and rounding."""

    def test_round_money_half_up(self):
        assert round_money(2.5) == 3
        assert round_money(3.5) == 4
        assert round_money(-2.5) == -3
        assert round_money(2.4999) == 2

    def test_round_money_non_finite(self):
        assert round_money(float("nan")) == 0
        assert round_money(float("inf")) == 0

    def test_finite_or_zero(self):
        assert finite_or_zero(float("nan")) == 0.0
        assert finite_or_zero(1.5) == 1.5

    def test_tax_on_gain(self):
        assert calculate_tax_on_gain(1500, 1000, 20) == 100
        assert calculate_tax_on_gain(900, 1000, 20) == 0

    def test_cagr(self):
        # Doubling over 7 years is ~10.4% a year
        cagr = calculate_cagr(2000, 1000, 7)
        assert abs(cagr - 10.41) < 0.01

    def test_cagr_undefined_cases(self):
        assert calculate_cagr(1000, 0, 5) == 0.0
        assert calculate_cagr(0, 1000, 5) == 0.0
        assert calculate_cagr(-10, 1000, 5) == 0.0
        assert calculate_cagr(2000, 1000, 0) == 0.0

    def test_doubling_time(self):
        assert calculate_doubling_time(8) == 9
        assert calculate_doubling_time(0) == 0.0

    def test_roi_percentage(self):
        assert calculate_roi_percentage(1500, 1000) == 50
        assert calculate_roi_percentage(1500, 0) == 0.0
        assert not math.isnan(calculate_roi_percentage(0, 0))

    def test_safe_power(self):
        assert safe_power(1.1, 2) == 1.1 ** 2
        assert safe_power(1.1, 0) == 1

    def test_safe_power_overflow(self):
        # 11 ** 400 is beyond the float range
        assert safe_power(11.0, 400) == math.inf
        assert safe_power(0.0, -1) == math.inf
