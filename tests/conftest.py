"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from investcalc.calculations import ProjectionInputs


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


@pytest.fixture
def sip_inputs():
    """Typical monthly investment plan."""
    return ProjectionInputs(
        initial_investment=10000,
        monthly_contribution=500,
        step_up_rate=5,
        time_period_years=10,
        interest_rate=8,
        inflation_rate=3,
        tax_rate=15,
        start_year=2025,
    )


@pytest.fixture
def loan_inputs():
    """Ten-year loan at 9%."""
    return ProjectionInputs(
        initial_investment=100000,
        time_period_years=10,
        interest_rate=9,
        start_year=2025,
    )
