"""Retirement corpus planning"""

from fintrack.domain.models import RetirementParameters, RetirementResult
from fintrack.domain.exceptions import InvalidParametersError

# Corpus target expressed in years of (inflated) expenses
CORPUS_MULTIPLE = 25


def annuity_due_future_value(payment: float, monthly_rate: float, months: int) -> float:
    """Future value of `payment` deposited at the start of each month"""
    if monthly_rate == 0:
        return payment * months
    return payment * ((1 + monthly_rate) ** months - 1) / monthly_rate * (1 + monthly_rate)


def plan_retirement(params: RetirementParameters) -> RetirementResult:
    """
    Chain inflation, the corpus rule and an annuity-due solve.

    Steps:
    1. Inflate today's monthly expenses to the retirement year
    2. Corpus = inflated annual expenses * CORPUS_MULTIPLE
    3. Level monthly investment whose annuity-due future value equals the corpus
       (a zero expected return divides the corpus evenly across the months)

    Raises:
        InvalidParametersError: Retirement age not after current age, negative inputs
    """
    years_to_retirement = params.retirement_age - params.current_age
    if years_to_retirement <= 0:
        raise InvalidParametersError("Retirement age must be greater than current age")
    if params.monthly_expenses < 0:
        raise InvalidParametersError("Monthly expenses cannot be negative")
    if params.inflation_rate_percent < 0 or params.expected_return_rate_percent < 0:
        raise InvalidParametersError("Inflation and return rates cannot be negative")

    inflated_monthly_expense = params.monthly_expenses * (
        (1 + params.inflation_rate_percent / 100) ** years_to_retirement
    )
    required_corpus = inflated_monthly_expense * 12 * CORPUS_MULTIPLE

    months = years_to_retirement * 12
    monthly_rate = params.expected_return_rate_percent / 100 / 12
    monthly_investment = required_corpus / annuity_due_future_value(1.0, monthly_rate, months)

    return RetirementResult(
        years_to_retirement=years_to_retirement,
        inflated_monthly_expense=inflated_monthly_expense,
        required_corpus=required_corpus,
        monthly_investment_required=monthly_investment,
    )
