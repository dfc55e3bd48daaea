"""Compound savings projection"""

from typing import List
from fintrack.domain.models import SavingsParameters, SavingsResult, SavingsSnapshot
from fintrack.domain.exceptions import InvalidParametersError

SUPPORTED_COMPOUNDING = (1, 12)

# Contributions are monthly regardless of how often interest compounds
CONTRIBUTIONS_PER_YEAR = 12


def _validate(params: SavingsParameters) -> None:
    if params.compounding_periods_per_year not in SUPPORTED_COMPOUNDING:
        raise InvalidParametersError(
            f"Compounding must be one of {SUPPORTED_COMPOUNDING} periods per year, "
            f"got {params.compounding_periods_per_year}"
        )
    if params.years < 0:
        raise InvalidParametersError("Savings horizon cannot be negative")
    if params.initial_deposit < 0 or params.monthly_contribution < 0:
        raise InvalidParametersError("Deposits and contributions cannot be negative")
    if params.annual_rate_percent < 0:
        raise InvalidParametersError("Interest rate cannot be negative")


def _project(params: SavingsParameters, years: int) -> SavingsResult:
    periods_per_year = params.compounding_periods_per_year
    rate = params.annual_rate_percent / 100 / periods_per_year
    periods = years * periods_per_year

    principal_fv = params.initial_deposit * (1 + rate) ** periods
    if rate > 0:
        contribution_fv = params.monthly_contribution * (((1 + rate) ** periods - 1) / rate)
    else:
        contribution_fv = params.monthly_contribution * periods

    future_value = principal_fv + contribution_fv
    total_contributions = params.initial_deposit + params.monthly_contribution * (years * CONTRIBUTIONS_PER_YEAR)

    return SavingsResult(
        future_value=future_value,
        total_contributions=total_contributions,
        interest_earned=future_value - total_contributions,
        principal_future_value=principal_fv,
        contribution_future_value=contribution_fv,
    )


def calculate_savings(params: SavingsParameters) -> SavingsResult:
    """
    Future value of an initial deposit plus level contributions.

    Growth uses the compounding period count (years * periods_per_year) while
    total contributions always count twelve deposits a year. The two period
    counts differ when compounding is annual.

    Raises:
        InvalidParametersError: Unsupported compounding, negative inputs
    """
    _validate(params)
    return _project(params, params.years)


def project_savings_by_year(params: SavingsParameters) -> List[SavingsSnapshot]:
    """Year-end balances from year 1 through params.years"""
    _validate(params)

    snapshots = []
    for year in range(1, params.years + 1):
        result = _project(params, year)
        snapshots.append(
            SavingsSnapshot(
                year=year,
                balance=result.future_value,
                total_contributions=result.total_contributions,
                interest_earned=result.interest_earned,
            )
        )
    return snapshots
