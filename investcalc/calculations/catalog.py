"""
Mode Catalogue

Labels, default parameters and rate presets offered to clients.
"""

from typing import Dict, List

from investcalc.calculations.types import Mode

MODE_CATALOG: List[Dict[str, str]] = [
    {
        "mode": Mode.SIP.value,
        "label": "SIP / Mutual Fund",
        "description": "Monthly contributions with optional lump sum and annual step-up.",
    },
    {
        "mode": Mode.LUMPSUM.value,
        "label": "Lumpsum / FD",
        "description": "One-time investment compounded annually.",
    },
    {
        "mode": Mode.GOAL.value,
        "label": "Goal Planner",
        "description": "Monthly contribution required to reach a target amount.",
    },
    {
        "mode": Mode.RETIREMENT.value,
        "label": "Retirement",
        "description": "Monthly contributions from current age until retirement.",
    },
    {
        "mode": Mode.COMPOUND.value,
        "label": "Compound Calc",
        "description": "One-time investment with selectable compounding frequency.",
    },
    {
        "mode": Mode.STOCK.value,
        "label": "Stock Market",
        "description": "Equity position with capital gains and dividends.",
    },
    {
        "mode": Mode.ROI.value,
        "label": "ROI Calculator",
        "description": "Return on a known purchase and sale value.",
    },
    {
        "mode": Mode.PROPERTY.value,
        "label": "Real Estate",
        "description": "Property appreciation plus net rental income.",
    },
    {
        "mode": Mode.LOAN.value,
        "label": "Loans / EMI",
        "description": "Amortizing loan with equated monthly installments.",
    },
    {
        "mode": Mode.TAX.value,
        "label": "Income Tax",
        "description": "Flat effective-rate income tax after deductions.",
    },
]

# camelCase to match the request body
DEFAULT_INPUTS: Dict[str, float] = {
    "initialInvestment": 10000,
    "monthlyContribution": 500,
    "stepUpRate": 5,
    "timePeriodYears": 10,
    "interestRate": 8,
    "compoundingFrequency": 1,
    "inflationRate": 3,
    "taxRate": 15,
    "expenseRatio": 0,
    "buyPrice": 100,
    "sellPrice": 150,
    "quantity": 50,
    "dividendYield": 2,
    "propertyPrice": 500000,
    "rentalIncome": 2000,
    "monthlyExpenses": 500,
    "appreciationRate": 4,
    "annualIncome": 60000,
    "deductions": 5000,
    "targetAmount": 1000000,
    "currentAge": 30,
    "retirementAge": 60,
}

RATE_PRESETS: Dict[str, float] = {
    "conservative": 6,
    "moderate": 12,
    "aggressive": 18,
}

COMPOUNDING_FREQUENCIES = (1, 2, 4, 12)
