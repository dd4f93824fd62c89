"""
Schedule Export

Renders a projection schedule as comma-separated text.
"""

import csv
import io
from typing import Iterable

from investcalc.calculations.types import CalculationResult, YearData

CSV_HEADER = ["Year", "Calendar Year", "Invested", "Interest", "Total", "Real Value"]


def schedule_to_csv(rows: Iterable[YearData]) -> str:
    """Render schedule rows as CSV, header first."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(
            [row.year, row.label, row.invested, row.interest, row.total, row.real_value]
        )
    return buffer.getvalue()


def result_to_csv(result: CalculationResult) -> str:
    """Render a result's yearly schedule as CSV."""
    return schedule_to_csv(result.yearly_data)
