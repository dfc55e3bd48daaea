"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from fintrack.api.main import create_app
from fintrack.domain.models import (
    LoanParameters,
    SavingsParameters,
    RetirementParameters,
    PayoffParameters,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def loan_params() -> LoanParameters:
    """100,000 over 5 years at 8%"""
    return LoanParameters(principal=100_000, annual_rate_percent=8, term_years=5)


@pytest.fixture
def savings_params() -> SavingsParameters:
    """10,000 initial, 1,000 a month, 7% compounded monthly for 10 years"""
    return SavingsParameters(
        initial_deposit=10_000,
        monthly_contribution=1_000,
        annual_rate_percent=7,
        years=10,
        compounding_periods_per_year=12,
    )


@pytest.fixture
def retirement_params() -> RetirementParameters:
    return RetirementParameters(
        current_age=30,
        retirement_age=60,
        monthly_expenses=50_000,
        inflation_rate_percent=6,
        expected_return_rate_percent=12,
    )


@pytest.fixture
def payoff_params() -> PayoffParameters:
    """50,000 card balance at 36% APR paid 5,000 a month"""
    return PayoffParameters(
        current_balance=50_000,
        annual_interest_rate_percent=36,
        fixed_monthly_payment=5_000,
    )
