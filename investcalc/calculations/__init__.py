"""
Projection Engine

Pure calculation modules for personal-finance projections: recurring
investments, lump sums, loans, equities, property, ROI and income tax.
"""

from investcalc.calculations import amortization, growth, returns, modes, export
from investcalc.calculations.engine import project
from investcalc.calculations.types import (
    CalculationResult,
    Mode,
    ProjectionInputs,
    YearData,
)

__all__ = [
    "amortization",
    "growth",
    "returns",
    "modes",
    "export",
    "project",
    "CalculationResult",
    "Mode",
    "ProjectionInputs",
    "YearData",
]
