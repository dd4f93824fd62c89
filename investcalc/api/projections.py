"""
Projection API endpoints.

The numeric projection and its advisory commentary are served by separate
endpoints so a client can render figures without waiting on the advisor.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import Dict, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from investcalc.calculations import project
from investcalc.calculations.catalog import (
    COMPOUNDING_FREQUENCIES,
    DEFAULT_INPUTS,
    MODE_CATALOG,
    RATE_PRESETS,
)
from investcalc.calculations.export import result_to_csv
from investcalc.calculations.types import CalculationResult, Mode, ProjectionInputs
from investcalc.services.advisory import (
    AdvisoryResult,
    AdvisoryService,
    get_advisory_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bounds keep the monthly simulation loops short
MAX_YEARS = 100
MAX_AGE = 120


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectionRequest(CamelModel):
    """Projection parameters; rates are percentages."""

    # Core
    initial_investment: float = 0.0
    monthly_contribution: float = 0.0
    step_up_rate: float = 0.0
    time_period_years: float = Field(0.0, ge=0, le=MAX_YEARS)
    interest_rate: float = 0.0
    compounding_frequency: int = 1
    inflation_rate: float = 0.0
    tax_rate: float = 0.0
    expense_ratio: float = 0.0
    start_year: int = Field(default_factory=lambda: date.today().year)

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
    current_age: float = Field(0.0, ge=0, le=MAX_AGE)
    retirement_age: float = Field(0.0, ge=0, le=MAX_AGE)

    @field_validator("compounding_frequency")
    @classmethod
    def check_frequency(cls, value: int) -> int:
        if value not in COMPOUNDING_FREQUENCIES:
            raise ValueError(
                f"compoundingFrequency must be one of {COMPOUNDING_FREQUENCIES}"
            )
        return value

    def to_inputs(self) -> ProjectionInputs:
        return ProjectionInputs(**self.model_dump())


class YearDataResponse(CamelModel):
    year: int
    label: int
    invested: int
    interest: int
    total: int
    real_value: int


class ProjectionResponse(CamelModel):
    """Projection result with its yearly schedule."""

    mode: Mode
    total_invested: int
    final_value: int
    total_interest: int
    tax_payable: int
    post_tax_value: int
    yearly_data: List[YearDataResponse]
    monthly_payment: int
    roi_percentage: float
    cagr: float
    duration_years: int
    doubling_time: float
    purchasing_power_loss: int
    taxable_income: int

    @classmethod
    def from_result(cls, mode: Mode, result: CalculationResult) -> "ProjectionResponse":
        return cls.model_validate({"mode": mode, **asdict(result)})


class ModeInfo(CamelModel):
    mode: Mode
    label: str
    description: str


def run_projection(mode: Mode, request: ProjectionRequest) -> CalculationResult:
    """Run the engine for an API request."""
    result = project(mode, request.to_inputs())
    logger.debug(
        f"Projected {mode.value}: invested={result.total_invested} "
        f"final={result.final_value} years={result.duration_years}"
    )
    return result


@router.get("/modes", response_model=List[ModeInfo])
async def list_modes():
    """List the available projection modes."""
    return MODE_CATALOG


@router.get("/defaults")
async def get_defaults() -> Dict[str, float]:
    """Default parameters for a new scenario."""
    return {**DEFAULT_INPUTS, "startYear": date.today().year}


@router.get("/presets")
async def get_rate_presets() -> Dict[str, float]:
    """Expected-return presets by risk appetite (percent)."""
    return RATE_PRESETS


@router.post("/{mode}", response_model=ProjectionResponse)
async def calculate_projection(mode: Mode, request: ProjectionRequest):
    """Calculate a projection and its yearly schedule."""
    result = run_projection(mode, request)
    return ProjectionResponse.from_result(mode, result)


@router.post("/{mode}/schedule.csv")
async def export_schedule(mode: Mode, request: ProjectionRequest):
    """Download the yearly schedule as CSV."""
    result = run_projection(mode, request)
    filename = f"{mode.value.lower()}-schedule.csv"
    return Response(
        content=result_to_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{mode}/advice", response_model=AdvisoryResult)
async def get_advice(
    mode: Mode,
    request: ProjectionRequest,
    advisor: AdvisoryService = Depends(get_advisory_service),
):
    """Generate commentary on a projection; falls back to a static response."""
    inputs = request.to_inputs()
    result = project(mode, inputs)
    return await advisor.advise(mode, inputs, result)
