"""
Loan Amortization Calculations

Implements the equated monthly installment, the month-by-month
amortization schedule and its yearly roll-up used by the LOAN projection.
"""

import math
from typing import List, Dict

from investcalc.calculations.returns import safe_power


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: int
) -> float:
    """
    Calculate the equated monthly installment (EMI).

    EMI = P * r * (1+r)**N / ((1+r)**N - 1), evaluated as
    P * r / (1 - (1+r)**-N) so that a growth factor beyond the float
    range degrades to the interest-only payment P * r.

    Args:
        principal: Loan principal amount
        annual_rate: Nominal annual interest rate as a percentage (e.g., 9 for 9%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount (positive number)
    """
    if principal <= 0:
        return 0.0
    if amortization_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 100 / 12
    growth = safe_power(1 + monthly_rate, amortization_months)

    if monthly_rate == 0 or growth == 1:
        return principal / amortization_months

    if math.isinf(growth):
        return principal * monthly_rate

    return principal * monthly_rate / (1 - 1 / growth)


def generate_amortization_schedule(
    principal: float,
    annual_rate: float,
    months: int,
) -> List[Dict]:
    """
    Generate a month-by-month schedule for a level-payment loan.

    The final month settles whatever balance remains so the loan is
    fully repaid after `months` payments.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as a percentage
        months: Loan term in months

    Returns:
        List of rows with interest, principal and ending balance
    """
    schedule = []
    balance = principal
    monthly_rate = annual_rate / 100 / 12
    payment = calculate_payment(principal, annual_rate, months)

    for period in range(1, months + 1):
        interest = balance * monthly_rate

        if period == months:
            principal_pmt = balance
        else:
            principal_pmt = min(payment - interest, balance)

        balance -= principal_pmt

        schedule.append(
            {
                "period": period,
                "interest": interest,
                "principal": principal_pmt,
                "ending_balance": max(0.0, balance),
            }
        )

    return schedule


def annualize_schedule(monthly_schedule: List[Dict]) -> List[Dict]:
    """
    Roll a monthly schedule up into year-end snapshots.

    Each snapshot carries cumulative principal and interest paid and the
    outstanding balance at the end of that year.
    """
    annual_data = []
    principal_paid = 0.0
    interest_paid = 0.0

    for row in monthly_schedule:
        principal_paid += row["principal"]
        interest_paid += row["interest"]

        if row["period"] % 12 == 0:
            annual_data.append(
                {
                    "year": row["period"] // 12,
                    "principal_paid": principal_paid,
                    "interest_paid": interest_paid,
                    "balance": row["ending_balance"],
                }
            )

    return annual_data
