"""
Projection Engine

Maps a mode and a parameter set to a deterministic CalculationResult.
The engine holds no state; every call is independent.
"""

import math
from typing import Any, Mapping, Union

from investcalc.calculations.modes import STRATEGIES, ModeOutcome, ProjectionContext
from investcalc.calculations.returns import (
    calculate_cagr,
    calculate_doubling_time,
    calculate_roi_percentage,
    calculate_tax_on_gain,
    round_money,
)
from investcalc.calculations.types import CalculationResult, Mode, ProjectionInputs


def _whole_years(value: float) -> int:
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value)


def calculate_effective_rate(inputs: ProjectionInputs) -> float:
    """Growth rate net of fees, floored at zero (percent)."""
    return max(0.0, inputs.interest_rate - inputs.expense_ratio)


def calculate_duration(mode: Mode, inputs: ProjectionInputs) -> int:
    """
    Whole years the projection runs for.

    Retirement projections run from current age to retirement age (at
    least one year) when both ages are given.
    """
    if mode == Mode.RETIREMENT and inputs.current_age > 0 and inputs.retirement_age > 0:
        return max(1, _whole_years(inputs.retirement_age - inputs.current_age))
    return _whole_years(inputs.time_period_years)


def build_context(mode: Mode, inputs: ProjectionInputs) -> ProjectionContext:
    """Derive the shared per-call quantities."""
    start_year = int(inputs.start_year) if math.isfinite(inputs.start_year) else 0
    return ProjectionContext(
        inputs=inputs,
        effective_rate=calculate_effective_rate(inputs),
        duration=calculate_duration(mode, inputs),
        start_year=start_year,
    )


def finalize(
    mode: Mode, ctx: ProjectionContext, outcome: ModeOutcome
) -> CalculationResult:
    """Apply tax, return metrics and rounding shared by every mode."""
    invested = outcome.total_invested
    final_value = outcome.final_value

    if mode == Mode.LOAN:
        tax_payable = 0.0
    elif outcome.tax_payable is not None:
        tax_payable = outcome.tax_payable
    else:
        tax_payable = calculate_tax_on_gain(final_value, invested, ctx.inputs.tax_rate)

    total_invested_r = round_money(invested)
    final_value_r = round_money(final_value)
    tax_payable_r = round_money(tax_payable)

    if mode == Mode.TAX:
        # Net income is already after tax
        post_tax_value = final_value_r
    else:
        post_tax_value = final_value_r - tax_payable_r

    rows = tuple(outcome.yearly_data)
    purchasing_power_loss = final_value_r - rows[-1].real_value if rows else 0

    return CalculationResult(
        total_invested=total_invested_r,
        final_value=final_value_r,
        total_interest=final_value_r - total_invested_r,
        tax_payable=tax_payable_r,
        post_tax_value=post_tax_value,
        yearly_data=rows,
        monthly_payment=round_money(outcome.monthly_payment),
        roi_percentage=calculate_roi_percentage(final_value, invested),
        cagr=calculate_cagr(final_value, invested, outcome.duration),
        duration_years=outcome.duration,
        doubling_time=calculate_doubling_time(ctx.effective_rate),
        purchasing_power_loss=purchasing_power_loss,
        taxable_income=round_money(outcome.taxable_income),
    )


def project(
    mode: Union[Mode, str],
    inputs: Union[ProjectionInputs, Mapping[str, Any], None],
) -> CalculationResult:
    """
    Run a projection.

    Args:
        mode: Projection mode, as a Mode or its string value
        inputs: ProjectionInputs, or a camelCase/snake_case mapping

    Returns:
        Rounded, immutable CalculationResult

    Raises:
        ValueError: If `mode` is not a known mode
    """
    mode = Mode(mode)
    if not isinstance(inputs, ProjectionInputs):
        inputs = ProjectionInputs.from_mapping(inputs)

    ctx = build_context(mode, inputs)
    outcome = STRATEGIES[mode](ctx)
    return finalize(mode, ctx, outcome)
