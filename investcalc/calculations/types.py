"""
Projection Types

Mode enumeration, input record and result snapshot shared by the
calculation modules.
"""

import enum
import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Tuple


class Mode(str, enum.Enum):
    """Projection mode enumeration."""
    SIP = "SIP"
    LUMPSUM = "LUMPSUM"
    COMPOUND = "COMPOUND"
    LOAN = "LOAN"
    STOCK = "STOCK"
    PROPERTY = "PROPERTY"
    ROI = "ROI"
    TAX = "TAX"
    GOAL = "GOAL"
    RETIREMENT = "RETIREMENT"


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class ProjectionInputs:
    """
    Flat parameter record for a projection.

    Rates are percentages (8.0 means 8%). Fields not used by a mode are
    ignored; every field defaults to 0.
    """

    # Core
    initial_investment: float = 0.0
    monthly_contribution: float = 0.0
    step_up_rate: float = 0.0
    time_period_years: float = 0.0
    interest_rate: float = 0.0
    compounding_frequency: float = 0.0
    inflation_rate: float = 0.0
    tax_rate: float = 0.0
    expense_ratio: float = 0.0
    start_year: float = 0.0

    # Stock / ROI
    buy_price: float = 0.0
    sell_price: float = 0.0
    quantity: float = 0.0
    dividend_yield: float = 0.0

    # Property
    property_price: float = 0.0
    rental_income: float = 0.0
    monthly_expenses: float = 0.0
    appreciation_rate: float = 0.0

    # Tax
    annual_income: float = 0.0
    deductions: float = 0.0

    # Goal
    target_amount: float = 0.0

    # Retirement
    current_age: float = 0.0
    retirement_age: float = 0.0

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ProjectionInputs":
        """
        Build inputs from a camelCase or snake_case mapping.

        Unknown keys are ignored; missing, None or non-numeric values
        become 0.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            name = key if key in known else _to_snake(key)
            if name not in known or value is None:
                continue
            try:
                values[name] = float(value)
            except (TypeError, ValueError):
                continue
        return cls(**values)


@dataclass(frozen=True)
class YearData:
    """One schedule row; `year` is 1-indexed relative to the start."""

    year: int
    label: int
    invested: int
    interest: int
    total: int
    real_value: int


@dataclass(frozen=True)
class CalculationResult:
    """Immutable snapshot produced by a single projection."""

    total_invested: int
    final_value: int
    total_interest: int
    tax_payable: int
    post_tax_value: int
    yearly_data: Tuple[YearData, ...] = field(default_factory=tuple)
    monthly_payment: int = 0
    roi_percentage: float = 0.0
    cagr: float = 0.0
    duration_years: int = 0
    doubling_time: float = 0.0
    purchasing_power_loss: int = 0
    taxable_income: int = 0
