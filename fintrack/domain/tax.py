"""Marginal-rate income tax evaluation"""

from typing import Mapping, Tuple
from fintrack.domain.models import TaxParameters, TaxResult, TaxSchedule, BracketSlice
from fintrack.domain.exceptions import InvalidParametersError, UnknownTaxScheduleError
from fintrack.domain.tax_tables import TAX_SCHEDULES


def find_schedule(
    regime: str,
    age_band: str,
    schedules: Mapping[Tuple[str, str], TaxSchedule] = TAX_SCHEDULES,
) -> TaxSchedule:
    schedule = schedules.get((regime, age_band))
    if schedule is None:
        raise UnknownTaxScheduleError(f"No tax brackets configured for regime={regime!r}, age_band={age_band!r}")
    return schedule


def compute_tax(
    params: TaxParameters,
    schedules: Mapping[Tuple[str, str], TaxSchedule] = TAX_SCHEDULES,
) -> TaxResult:
    """
    Apply each bracket's rate to the slice of income between the previous
    bound and its own, then add the flat surcharge on the base tax.

    Income exactly on a bound is taxed entirely in the lower bracket; no
    zero-width slice is produced for the bracket above it.

    Example (new regime, 600000):
        0-300000 at 0%     -> 0
        300000-600000 at 5% -> 15000
        base 15000, cess 4% -> 15600

    Raises:
        UnknownTaxScheduleError: No table for (regime, age_band)
        InvalidParametersError: Negative income
    """
    if params.annual_income < 0:
        raise InvalidParametersError("Annual income cannot be negative")

    schedule = find_schedule(params.regime, params.age_band, schedules)
    income = params.annual_income

    slices = []
    base_tax = 0.0
    lower = 0.0
    for bracket in schedule.brackets:
        if income <= lower:
            break

        upper = bracket.upper_bound
        top = income if upper is None else min(income, upper)
        taxable = top - lower
        tax = taxable * bracket.rate
        slices.append(
            BracketSlice(
                lower_bound=lower,
                upper_bound=upper,
                rate=bracket.rate,
                taxable_amount=taxable,
                tax=tax,
            )
        )
        base_tax += tax

        if upper is None:
            break
        lower = upper

    surcharge = base_tax * schedule.surcharge_rate
    tax_amount = base_tax + surcharge
    effective_rate = tax_amount / income * 100 if income > 0 else 0.0

    return TaxResult(
        taxable_income=income,
        base_tax=base_tax,
        surcharge=surcharge,
        tax_amount=tax_amount,
        effective_rate_percent=effective_rate,
        slices=tuple(slices),
    )
