"""POST /v1/calculators/* - financial calculator endpoints"""

import time
from typing import Dict, Mapping, Tuple
from fastapi import APIRouter, Depends, HTTPException, Request

from fintrack.api.v1.schemas import (
    LoanRequest,
    LoanResponse,
    AmortizationEntrySchema,
    SavingsRequest,
    SavingsResponse,
    SavingsSnapshotSchema,
    RetirementRequest,
    RetirementResponse,
    PayoffRequest,
    PayoffResponse,
    TaxRequest,
    TaxResponse,
    BracketSliceSchema,
)
from fintrack.api.dependencies import get_request_id, get_settings, get_tax_schedules
from fintrack.config import Settings
from fintrack.domain.models import (
    LoanParameters,
    SavingsParameters,
    RetirementParameters,
    PayoffParameters,
    TaxParameters,
    TaxSchedule,
)
from fintrack.domain.currency import get_currency, format_amount
from fintrack.domain.loans import calculate_loan, build_amortization_schedule
from fintrack.domain.savings import calculate_savings, project_savings_by_year
from fintrack.domain.retirement import plan_retirement
from fintrack.domain.payoff import simulate_payoff
from fintrack.domain.tax import compute_tax
from fintrack.domain.exceptions import CalculationError
from fintrack.infrastructure.observability.metrics import record_calculation, payoff_unreached_counter
from fintrack.infrastructure.observability.logging import log_calculation, log_rejection

router = APIRouter()


def _money(value: float) -> float:
    return round(value, 2)


def _display(currency: str, **amounts: float) -> Dict[str, str]:
    return {name: format_amount(value, currency) for name, value in amounts.items()}


def _rejected(calculator: str, request_id: str, error: CalculationError) -> HTTPException:
    """Turn a domain refusal into a 422 the form can show inline"""
    record_calculation(calculator, accepted=False)
    log_rejection(request_id, calculator, error.code, str(error))
    return HTTPException(status_code=422, detail={"code": error.code, "message": str(error)})


def _completed(calculator: str, request_id: str, start_time: float, outcome: str = "ok") -> None:
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(calculator, accepted=True)
    log_calculation(request_id, calculator, outcome, duration_ms)


@router.post("/calculators/loan", response_model=LoanResponse)
def loan_calculator(
    request_body: LoanRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Monthly payment, total payment and total interest for an amortizing loan.

    Set include_schedule to get the month-by-month breakdown.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    currency = get_currency(request_body.currency or app_settings.default_currency).code

    params = LoanParameters(
        principal=request_body.principal,
        annual_rate_percent=request_body.annual_rate_percent,
        term_years=request_body.term_years,
    )
    try:
        result = calculate_loan(params)
        schedule = build_amortization_schedule(params) if request_body.include_schedule else None
    except CalculationError as e:
        raise _rejected("loan", request_id, e) from e

    _completed("loan", request_id, start_time)

    return LoanResponse(
        currency=currency,
        monthly_payment=_money(result.monthly_payment),
        total_payment=_money(result.total_payment),
        total_interest=_money(result.total_interest),
        payments_count=result.payments_count,
        display=_display(
            currency,
            monthly_payment=result.monthly_payment,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
        ),
        schedule=[
            AmortizationEntrySchema(
                month=entry.month,
                payment=_money(entry.payment),
                principal=_money(entry.principal),
                interest=_money(entry.interest),
                balance=_money(entry.balance),
            )
            for entry in schedule
        ]
        if schedule is not None
        else None,
    )


@router.post("/calculators/savings", response_model=SavingsResponse)
def savings_calculator(
    request_body: SavingsRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Future value of an initial deposit plus monthly contributions"""
    start_time = time.time()
    request_id = get_request_id(request)
    currency = get_currency(request_body.currency or app_settings.default_currency).code

    params = SavingsParameters(
        initial_deposit=request_body.initial_deposit,
        monthly_contribution=request_body.monthly_contribution,
        annual_rate_percent=request_body.annual_rate_percent,
        years=request_body.years,
        compounding_periods_per_year=request_body.compounding_periods_per_year,
    )
    try:
        result = calculate_savings(params)
        projection = project_savings_by_year(params) if request_body.include_projection else None
    except CalculationError as e:
        raise _rejected("savings", request_id, e) from e

    _completed("savings", request_id, start_time)

    return SavingsResponse(
        currency=currency,
        future_value=_money(result.future_value),
        total_contributions=_money(result.total_contributions),
        interest_earned=_money(result.interest_earned),
        display=_display(
            currency,
            future_value=result.future_value,
            total_contributions=result.total_contributions,
            interest_earned=result.interest_earned,
        ),
        projection=[
            SavingsSnapshotSchema(
                year=snap.year,
                balance=_money(snap.balance),
                total_contributions=_money(snap.total_contributions),
                interest_earned=_money(snap.interest_earned),
            )
            for snap in projection
        ]
        if projection is not None
        else None,
    )


@router.post("/calculators/retirement", response_model=RetirementResponse)
def retirement_calculator(
    request_body: RetirementRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Required retirement corpus and the monthly investment that reaches it"""
    start_time = time.time()
    request_id = get_request_id(request)
    currency = get_currency(request_body.currency or app_settings.default_currency).code

    try:
        result = plan_retirement(
            RetirementParameters(
                current_age=request_body.current_age,
                retirement_age=request_body.retirement_age,
                monthly_expenses=request_body.monthly_expenses,
                inflation_rate_percent=request_body.inflation_rate_percent,
                expected_return_rate_percent=request_body.expected_return_rate_percent,
            )
        )
    except CalculationError as e:
        raise _rejected("retirement", request_id, e) from e

    _completed("retirement", request_id, start_time)

    return RetirementResponse(
        currency=currency,
        years_to_retirement=result.years_to_retirement,
        inflated_monthly_expense=_money(result.inflated_monthly_expense),
        required_corpus=_money(result.required_corpus),
        monthly_investment_required=_money(result.monthly_investment_required),
        display=_display(
            currency,
            inflated_monthly_expense=result.inflated_monthly_expense,
            required_corpus=result.required_corpus,
            monthly_investment_required=result.monthly_investment_required,
        ),
    )


@router.post("/calculators/payoff", response_model=PayoffResponse)
def payoff_calculator(
    request_body: PayoffRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Months and interest needed to clear a credit card balance.

    Returns 422 with code "payment_insufficient" when the payment does not
    cover the first month's interest. A simulation that runs into the
    iteration cap is returned with paid_off=false.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    currency = get_currency(request_body.currency or app_settings.default_currency).code

    try:
        result = simulate_payoff(
            PayoffParameters(
                current_balance=request_body.current_balance,
                annual_interest_rate_percent=request_body.annual_interest_rate_percent,
                fixed_monthly_payment=request_body.fixed_monthly_payment,
            ),
            iteration_cap=app_settings.payoff_iteration_cap,
        )
    except CalculationError as e:
        raise _rejected("payoff", request_id, e) from e

    if not result.paid_off:
        payoff_unreached_counter.inc()
    _completed("payoff", request_id, start_time, outcome="ok" if result.paid_off else "cap_reached")

    return PayoffResponse(
        currency=currency,
        months_to_payoff=result.months_to_payoff,
        total_interest_paid=_money(result.total_interest_paid),
        total_amount_paid=_money(result.total_amount_paid),
        paid_off=result.paid_off,
        remaining_balance=_money(result.remaining_balance),
        display=_display(
            currency,
            total_interest_paid=result.total_interest_paid,
            total_amount_paid=result.total_amount_paid,
            remaining_balance=result.remaining_balance,
        ),
    )


@router.post("/calculators/tax", response_model=TaxResponse)
def tax_calculator(
    request_body: TaxRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
    schedules: Mapping[Tuple[str, str], TaxSchedule] = Depends(get_tax_schedules),
):
    """Income tax under the selected regime and age band, with per-bracket breakdown"""
    start_time = time.time()
    request_id = get_request_id(request)
    currency = get_currency(request_body.currency or app_settings.default_currency).code

    try:
        result = compute_tax(
            TaxParameters(
                annual_income=request_body.annual_income,
                regime=request_body.regime,
                age_band=request_body.age_band,
            ),
            schedules,
        )
    except CalculationError as e:
        raise _rejected("tax", request_id, e) from e

    _completed("tax", request_id, start_time)

    return TaxResponse(
        currency=currency,
        taxable_income=_money(result.taxable_income),
        base_tax=_money(result.base_tax),
        surcharge=_money(result.surcharge),
        tax_amount=_money(result.tax_amount),
        effective_rate_percent=round(result.effective_rate_percent, 2),
        slices=[
            BracketSliceSchema(
                lower_bound=s.lower_bound,
                upper_bound=s.upper_bound,
                rate_percent=round(s.rate * 100, 2),
                taxable_amount=_money(s.taxable_amount),
                tax=_money(s.tax),
            )
            for s in result.slices
        ],
        display=_display(
            currency,
            taxable_income=result.taxable_income,
            tax_amount=result.tax_amount,
        ),
    )
