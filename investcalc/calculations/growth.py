"""
Growth Calculations

Recurring-contribution accumulation, closed-form compound growth,
goal-seeking contribution solve and inflation deflation.
"""

import math
from typing import List, Dict

from investcalc.calculations.returns import safe_power


def calculate_inflation_factor(inflation_rate: float, years: float) -> float:
    """
    Calculate cumulative inflation factor.

    Args:
        inflation_rate: Annual inflation as a percentage (e.g., 3 for 3%)
        years: Elapsed years

    Returns:
        Factor to divide a nominal value by to get today's money
    """
    return safe_power(1 + inflation_rate / 100, years)


def deflate(nominal_value: float, inflation_rate: float, years: float) -> float:
    """Express a future nominal value in today's purchasing power."""
    factor = calculate_inflation_factor(inflation_rate, years)
    if factor <= 0:
        return 0.0
    return nominal_value / factor


def calculate_compound_value(
    principal: float, annual_rate: float, frequency: int, years: float
) -> float:
    """
    Calculate future value of a lump sum.

    FV = P * (1 + r/n) ** (n*t)

    Args:
        principal: Amount invested at the start
        annual_rate: Nominal annual rate as a percentage
        frequency: Compounding periods per year (1, 2, 4 or 12)
        years: Investment horizon in years

    Returns:
        Future value
    """
    if frequency <= 0:
        frequency = 1
    if principal == 0:
        return 0.0
    periodic_rate = annual_rate / 100 / frequency
    return principal * safe_power(1 + periodic_rate, frequency * years)


def generate_contribution_schedule(
    initial_investment: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
    step_up_rate: float = 0.0,
) -> List[Dict]:
    """
    Accumulate monthly contributions with monthly compounding.

    Each month the balance earns interest, then that month's contribution
    is added. The contribution grows by `step_up_rate` percent after every
    12th month, once the year-end snapshot has been taken.

    Args:
        initial_investment: Lump sum invested at month 0
        monthly_contribution: Contribution for the first year
        annual_rate: Annual rate as a percentage
        years: Number of years to simulate
        step_up_rate: Annual contribution increase as a percentage

    Returns:
        Year-end snapshots with cumulative `invested` and `balance`
    """
    monthly_rate = annual_rate / 100 / 12
    balance = initial_investment
    invested = initial_investment
    contribution = monthly_contribution

    snapshots = []
    for month in range(1, years * 12 + 1):
        balance = balance * (1 + monthly_rate) + contribution
        invested += contribution

        if month % 12 == 0:
            snapshots.append(
                {
                    "year": month // 12,
                    "invested": invested,
                    "balance": balance,
                }
            )
            contribution *= 1 + step_up_rate / 100

    return snapshots


def calculate_required_contribution(
    target_amount: float,
    initial_investment: float,
    annual_rate: float,
    months: int,
) -> float:
    """
    Solve for the level monthly contribution that reaches a target.

    Inverts FV = P*(1+i)**n + PMT*((1+i)**n - 1)/i for PMT, with i the
    monthly rate and n the number of months.

    Returns:
        Required monthly contribution; 0 when the lump sum alone already
        reaches the target or there are no months to contribute
    """
    if months <= 0:
        return 0.0

    monthly_rate = annual_rate / 100 / 12
    growth = safe_power(1 + monthly_rate, months)
    lump_sum_value = initial_investment * growth if initial_investment else 0.0
    remaining = target_amount - lump_sum_value

    if remaining <= 0:
        return 0.0

    if monthly_rate == 0 or growth == 1:
        return remaining / months

    if math.isinf(growth):
        # Any contribution grows without bound
        return 0.0

    return remaining * monthly_rate / (growth - 1)
