"""Credit card payoff simulation"""

from fintrack.domain.models import PayoffParameters, PayoffResult
from fintrack.domain.exceptions import InvalidParametersError, InsufficientPaymentError

# ~83 years; bounds the loop when the payment barely exceeds interest
ITERATION_CAP = 1000


def simulate_payoff(params: PayoffParameters, iteration_cap: int = ITERATION_CAP) -> PayoffResult:
    """
    Simulate month-by-month repayment of a revolving balance.

    Each month interest accrues on the running balance, then the fixed payment
    is applied. The last payment is only as large as the remaining balance,
    so total_amount_paid == current_balance + total_interest_paid once the
    balance is cleared, and total interest is exactly what accrued.

    A payment that does not exceed the first month's interest is rejected up
    front. If the cap is reached before the balance clears, the result has
    paid_off=False and carries the remaining balance.

    Raises:
        InvalidParametersError: Non-positive balance or payment, negative rate
        InsufficientPaymentError: Payment <= first month's interest
    """
    if params.current_balance <= 0:
        raise InvalidParametersError("Balance must be greater than zero")
    if params.fixed_monthly_payment <= 0:
        raise InvalidParametersError("Monthly payment must be greater than zero")
    if params.annual_interest_rate_percent < 0:
        raise InvalidParametersError("Interest rate cannot be negative")
    if iteration_cap < 1:
        raise InvalidParametersError("Iteration cap must be at least one month")

    if params.fixed_monthly_payment <= params.first_month_interest:
        raise InsufficientPaymentError(params.fixed_monthly_payment, params.first_month_interest)

    rate = params.monthly_rate
    balance = params.current_balance
    months = 0
    total_interest = 0.0

    while balance > 0 and months < iteration_cap:
        interest = balance * rate
        total_interest += interest
        balance = balance + interest - params.fixed_monthly_payment
        months += 1

        if balance < 0:
            # Final payment only covers what was left; the overshoot is never paid
            balance = 0.0

    return PayoffResult(
        months_to_payoff=months,
        total_interest_paid=total_interest,
        total_amount_paid=params.current_balance + total_interest - balance,
        paid_off=balance <= 0,
        remaining_balance=balance,
    )
