"""
Return Metrics

CAGR, Rule-of-72 doubling time, ROI percentage and tax on gains,
plus the rounding helpers applied to every projection result.
"""

import math

RULE_OF_72 = 72.0


def round_money(value: float) -> int:
    """Round to whole currency units, halves away from zero."""
    if not math.isfinite(value):
        return 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def finite_or_zero(value: float) -> float:
    """Replace NaN or infinity with 0."""
    return value if math.isfinite(value) else 0.0


def safe_power(base: float, exponent: float) -> float:
    """
    Raise `base` to `exponent`, returning infinity instead of raising.

    Float `**` raises OverflowError on results beyond the float range;
    callers expect an infinite growth factor instead.
    """
    try:
        return base ** exponent
    except (OverflowError, ZeroDivisionError):
        return math.inf


def calculate_tax_on_gain(final_value: float, total_invested: float, tax_rate: float) -> float:
    """
    Calculate flat tax on a positive gain.

    Args:
        final_value: Nominal value at the end of the horizon
        total_invested: Principal contributed
        tax_rate: Tax rate as a percentage (e.g., 15 for 15%)

    Returns:
        Tax owed; 0 when there is no gain
    """
    gain = final_value - total_invested
    if gain <= 0:
        return 0.0
    return gain * tax_rate / 100


def calculate_cagr(final_value: float, total_invested: float, years: float) -> float:
    """
    Calculate compound annual growth rate in percent.

    Defined only for positive invested, final value and duration; 0 otherwise.
    """
    if total_invested <= 0 or final_value <= 0 or years <= 0:
        return 0.0
    cagr = (safe_power(final_value / total_invested, 1 / years) - 1) * 100
    return finite_or_zero(cagr)


def calculate_doubling_time(annual_rate: float) -> float:
    """Years to double at `annual_rate` percent, by the Rule of 72."""
    if annual_rate <= 0:
        return 0.0
    return finite_or_zero(RULE_OF_72 / annual_rate)


def calculate_roi_percentage(final_value: float, total_invested: float) -> float:
    """Calculate simple return on investment in percent."""
    if total_invested <= 0:
        return 0.0
    return finite_or_zero((final_value - total_invested) / total_invested * 100)
