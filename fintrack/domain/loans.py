"""Fixed-payment loan amortization"""

from typing import List
from fintrack.domain.models import LoanParameters, LoanResult, AmortizationEntry
from fintrack.domain.exceptions import InvalidParametersError


def _validate(params: LoanParameters) -> None:
    if params.payments_count <= 0:
        raise InvalidParametersError("Loan term must be at least one year")
    if params.principal < 0:
        raise InvalidParametersError("Loan principal cannot be negative")
    if params.annual_rate_percent < 0:
        raise InvalidParametersError("Interest rate cannot be negative")


def monthly_payment_for(principal: float, monthly_rate: float, payments_count: int) -> float:
    """
    Level payment that retires principal over payments_count months.

    Standard annuity formula P * r * (1+r)^n / ((1+r)^n - 1),
    reducing to P / n when the rate is zero.
    """
    if monthly_rate == 0:
        return principal / payments_count

    growth = (1 + monthly_rate) ** payments_count
    return principal * monthly_rate * growth / (growth - 1)


def calculate_loan(params: LoanParameters) -> LoanResult:
    """
    Compute monthly payment, total paid and total interest for a loan.

    A zero principal yields an all-zero result rather than an error.

    Raises:
        InvalidParametersError: Non-positive term, negative principal or rate
    """
    _validate(params)

    payments_count = params.payments_count
    monthly_payment = monthly_payment_for(params.principal, params.monthly_rate, payments_count)
    total_payment = monthly_payment * payments_count

    return LoanResult(
        monthly_payment=monthly_payment,
        total_payment=total_payment,
        total_interest=total_payment - params.principal,
        payments_count=payments_count,
    )


def build_amortization_schedule(params: LoanParameters) -> List[AmortizationEntry]:
    """
    Month-by-month split of each payment into interest and principal.

    The final month pays off whatever balance remains so the schedule
    closes at exactly zero despite floating-point drift.
    """
    _validate(params)

    payments_count = params.payments_count
    rate = params.monthly_rate
    payment = monthly_payment_for(params.principal, rate, payments_count)

    balance = params.principal
    schedule = []
    for month in range(1, payments_count + 1):
        interest = balance * rate
        if month == payments_count:
            principal_part = balance
        else:
            principal_part = min(payment - interest, balance)

        balance -= principal_part
        schedule.append(
            AmortizationEntry(
                month=month,
                payment=principal_part + interest,
                principal=principal_part,
                interest=interest,
                balance=max(balance, 0.0),
            )
        )

    return schedule
