"""
Mode Strategies

One pure function per projection mode. Each returns the raw invested
amount, final value and yearly schedule; shared post-processing (tax,
CAGR, doubling time, rounding) happens in the engine.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from investcalc.calculations.amortization import (
    annualize_schedule,
    calculate_payment,
    generate_amortization_schedule,
)
from investcalc.calculations.growth import (
    calculate_compound_value,
    calculate_required_contribution,
    deflate,
    generate_contribution_schedule,
)
from investcalc.calculations.returns import round_money
from investcalc.calculations.types import Mode, ProjectionInputs, YearData


@dataclass(frozen=True)
class ProjectionContext:
    """Quantities derived once per projection."""

    inputs: ProjectionInputs
    effective_rate: float  # interest rate net of expense ratio, percent
    duration: int  # whole years
    start_year: int


@dataclass
class ModeOutcome:
    """Unrounded output of a mode strategy."""

    total_invested: float
    final_value: float
    duration: int
    yearly_data: List[YearData] = field(default_factory=list)
    monthly_payment: float = 0.0
    taxable_income: float = 0.0
    # Set only by modes whose tax is the product itself (TAX)
    tax_payable: Optional[float] = None


def build_row(
    ctx: ProjectionContext,
    year: int,
    invested: float,
    total: float,
    interest: Optional[float] = None,
    real_value: Optional[float] = None,
) -> YearData:
    """Build a rounded schedule row, deflating `total` unless told otherwise."""
    if interest is None:
        interest = total - invested
    if real_value is None:
        real_value = deflate(total, ctx.inputs.inflation_rate, year)
    return YearData(
        year=year,
        label=ctx.start_year + year,
        invested=round_money(invested),
        interest=round_money(interest),
        total=round_money(total),
        real_value=round_money(real_value),
    )


def _contribution_outcome(
    ctx: ProjectionContext, monthly_contribution: float, step_up_rate: float
) -> ModeOutcome:
    inputs = ctx.inputs
    snapshots = generate_contribution_schedule(
        initial_investment=inputs.initial_investment,
        monthly_contribution=monthly_contribution,
        annual_rate=ctx.effective_rate,
        years=ctx.duration,
        step_up_rate=step_up_rate,
    )

    rows = [
        build_row(ctx, snap["year"], snap["invested"], snap["balance"])
        for snap in snapshots
    ]

    if snapshots:
        total_invested = snapshots[-1]["invested"]
        final_value = snapshots[-1]["balance"]
    else:
        total_invested = final_value = inputs.initial_investment

    return ModeOutcome(
        total_invested=total_invested,
        final_value=final_value,
        duration=ctx.duration,
        yearly_data=rows,
    )


def project_sip(ctx: ProjectionContext) -> ModeOutcome:
    """Recurring monthly contribution with optional lump sum and step-up."""
    return _contribution_outcome(
        ctx, ctx.inputs.monthly_contribution, ctx.inputs.step_up_rate
    )


def project_goal(ctx: ProjectionContext) -> ModeOutcome:
    """Solve the level monthly contribution that reaches `target_amount`."""
    inputs = ctx.inputs
    payment = calculate_required_contribution(
        target_amount=inputs.target_amount,
        initial_investment=inputs.initial_investment,
        annual_rate=ctx.effective_rate,
        months=ctx.duration * 12,
    )
    outcome = _contribution_outcome(ctx, payment, 0.0)
    outcome.monthly_payment = payment
    return outcome


def _lump_sum_outcome(ctx: ProjectionContext, frequency: int) -> ModeOutcome:
    principal = ctx.inputs.initial_investment
    rows = []
    for year in range(1, ctx.duration + 1):
        value = calculate_compound_value(principal, ctx.effective_rate, frequency, year)
        rows.append(build_row(ctx, year, principal, value))

    return ModeOutcome(
        total_invested=principal,
        final_value=calculate_compound_value(
            principal, ctx.effective_rate, frequency, ctx.duration
        ),
        duration=ctx.duration,
        yearly_data=rows,
    )


def project_lumpsum(ctx: ProjectionContext) -> ModeOutcome:
    """Lump sum compounded annually."""
    return _lump_sum_outcome(ctx, 1)


def project_compound(ctx: ProjectionContext) -> ModeOutcome:
    """Lump sum compounded at the chosen frequency (defaults to annual)."""
    frequency = ctx.inputs.compounding_frequency
    if not math.isfinite(frequency) or frequency < 1:
        return _lump_sum_outcome(ctx, 1)
    return _lump_sum_outcome(ctx, int(frequency))


def project_loan(ctx: ProjectionContext) -> ModeOutcome:
    """
    Amortizing loan at the nominal interest rate.

    Rows carry principal repaid to date as `invested`, cumulative interest
    as `interest` and the outstanding balance as `total`.
    """
    principal = ctx.inputs.initial_investment
    rate = ctx.inputs.interest_rate
    months = ctx.duration * 12

    if months <= 0:
        return ModeOutcome(
            total_invested=principal, final_value=principal, duration=ctx.duration
        )

    payment = calculate_payment(principal, rate, months)
    schedule = generate_amortization_schedule(
        principal=principal,
        annual_rate=rate,
        months=months,
    )

    rows = []
    for snap in annualize_schedule(schedule):
        rows.append(
            build_row(
                ctx,
                snap["year"],
                invested=snap["principal_paid"],
                total=snap["balance"],
                interest=snap["interest_paid"],
                real_value=0.0,
            )
        )

    return ModeOutcome(
        total_invested=principal,
        final_value=payment * months,
        duration=ctx.duration,
        yearly_data=rows,
        monthly_payment=payment,
    )


def project_stock(ctx: ProjectionContext) -> ModeOutcome:
    """
    Equity position: capital gain plus dividends on cost basis.

    Gains and dividends are spread linearly across the holding period;
    dividends are paid out, not reinvested.
    """
    inputs = ctx.inputs
    years = max(1, ctx.duration)

    total_invested = inputs.quantity * inputs.buy_price
    capital_gains = (inputs.sell_price - inputs.buy_price) * inputs.quantity
    annual_dividend = total_invested * inputs.dividend_yield / 100

    rows = []
    for year in range(1, years + 1):
        value = total_invested + capital_gains * (year / years) + annual_dividend * year
        rows.append(build_row(ctx, year, total_invested, value))

    return ModeOutcome(
        total_invested=total_invested,
        final_value=total_invested + capital_gains + annual_dividend * years,
        duration=years,
        yearly_data=rows,
    )


def project_property(ctx: ProjectionContext) -> ModeOutcome:
    """Appreciating property plus accumulated (not reinvested) net rent."""
    inputs = ctx.inputs
    price = inputs.property_price
    annual_net_rent = (inputs.rental_income - inputs.monthly_expenses) * 12

    property_value = price
    accumulated_rent = 0.0
    rows = []
    for year in range(1, ctx.duration + 1):
        property_value *= 1 + inputs.appreciation_rate / 100
        accumulated_rent += annual_net_rent
        rows.append(build_row(ctx, year, price, property_value + accumulated_rent))

    return ModeOutcome(
        total_invested=price,
        final_value=property_value + accumulated_rent,
        duration=ctx.duration,
        yearly_data=rows,
    )


def project_roi(ctx: ProjectionContext) -> ModeOutcome:
    """Simple before/after valuation, interpolated linearly for the schedule."""
    inputs = ctx.inputs
    years = max(1, ctx.duration)
    total_invested = inputs.initial_investment
    profit = inputs.sell_price - total_invested

    rows = [
        build_row(ctx, year, total_invested, total_invested + profit * (year / years))
        for year in range(1, years + 1)
    ]

    return ModeOutcome(
        total_invested=total_invested,
        final_value=inputs.sell_price,
        duration=years,
        yearly_data=rows,
    )


def project_tax(ctx: ProjectionContext) -> ModeOutcome:
    """Flat effective-rate income tax; a single row labelled with the start year."""
    inputs = ctx.inputs
    income = inputs.annual_income
    taxable_income = max(0.0, income - inputs.deductions)
    tax = taxable_income * inputs.tax_rate / 100
    net_income = income - tax

    row = YearData(
        year=1,
        label=ctx.start_year,
        invested=round_money(income),
        interest=round_money(-tax),
        total=round_money(net_income),
        real_value=round_money(net_income),
    )

    return ModeOutcome(
        total_invested=income,
        final_value=net_income,
        duration=1,
        yearly_data=[row],
        taxable_income=taxable_income,
        tax_payable=tax,
    )


STRATEGIES: Dict[Mode, Callable[[ProjectionContext], ModeOutcome]] = {
    Mode.SIP: project_sip,
    Mode.RETIREMENT: project_sip,
    Mode.GOAL: project_goal,
    Mode.LUMPSUM: project_lumpsum,
    Mode.COMPOUND: project_compound,
    Mode.LOAN: project_loan,
    Mode.STOCK: project_stock,
    Mode.PROPERTY: project_property,
    Mode.ROI: project_roi,
    Mode.TAX: project_tax,
}
