"""Pydantic schemas for API request/response validation"""

from typing import Any, ClassVar, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from fintrack.config import settings
from fintrack.domain.currency import parse_amount


class NumericInputRequest(BaseModel):
    """
    Base for request bodies whose numbers may arrive as user-typed text.

    Fields listed in `money_fields` or `numeric_fields` go through parse_amount
    before field validation, so "₹1,00,000" and 100000 are the same input and
    unparseable text becomes 0 (then fails any gt=0 constraint normally).

    Only money fields read the request currency's separators. Rates, ages and
    periods always use "." as the decimal point, so "7.5" is 7.5 under EUR too.
    """

    money_fields: ClassVar[Tuple[str, ...]] = ()
    numeric_fields: ClassVar[Tuple[str, ...]] = ()

    currency: Optional[str] = Field(None, description="Currency code; defaults to the service default")

    @model_validator(mode="before")
    @classmethod
    def normalize_numbers(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        code = data.get("currency") or settings.default_currency
        normalized = dict(data)
        for name in cls.money_fields:
            if name in normalized:
                normalized[name] = parse_amount(normalized[name], code)
        for name in cls.numeric_fields:
            if name in normalized:
                normalized[name] = parse_amount(normalized[name], None)
        return normalized


class LoanRequest(NumericInputRequest):
    """Request body for POST /v1/calculators/loan"""

    money_fields: ClassVar[Tuple[str, ...]] = ("principal",)
    numeric_fields: ClassVar[Tuple[str, ...]] = ("annual_rate_percent", "term_years")

    principal: float = Field(..., gt=0, description="Amount borrowed")
    annual_rate_percent: float = Field(..., ge=0, le=100)
    term_years: int = Field(..., gt=0, le=50)
    include_schedule: bool = False


class AmortizationEntrySchema(BaseModel):
    month: int
    payment: float
    principal: float
    interest: float
    balance: float


class LoanResponse(BaseModel):
    """Response for POST /v1/calculators/loan"""

    currency: str
    monthly_payment: float
    total_payment: float
    total_interest: float
    payments_count: int
    display: Dict[str, str]
    schedule: Optional[List[AmortizationEntrySchema]] = None


class SavingsRequest(NumericInputRequest):
    """Request body for POST /v1/calculators/savings"""

    money_fields: ClassVar[Tuple[str, ...]] = ("initial_deposit", "monthly_contribution")
    numeric_fields: ClassVar[Tuple[str, ...]] = ("annual_rate_percent", "years")

    initial_deposit: float = Field(..., ge=0)
    monthly_contribution: float = Field(..., ge=0)
    annual_rate_percent: float = Field(..., ge=0, le=100)
    years: int = Field(..., gt=0, le=100)
    compounding_periods_per_year: Literal[1, 12] = 12
    include_projection: bool = False


class SavingsSnapshotSchema(BaseModel):
    year: int
    balance: float
    total_contributions: float
    interest_earned: float


class SavingsResponse(BaseModel):
    """Response for POST /v1/calculators/savings"""

    currency: str
    future_value: float
    total_contributions: float
    interest_earned: float
    display: Dict[str, str]
    projection: Optional[List[SavingsSnapshotSchema]] = None


class RetirementRequest(NumericInputRequest):
    """Request body for POST /v1/calculators/retirement"""

    money_fields: ClassVar[Tuple[str, ...]] = ("monthly_expenses",)
    numeric_fields: ClassVar[Tuple[str, ...]] = (
        "current_age",
        "retirement_age",
        "inflation_rate_percent",
        "expected_return_rate_percent",
    )

    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., gt=0, le=120)
    monthly_expenses: float = Field(..., gt=0)
    inflation_rate_percent: float = Field(..., ge=0, le=100)
    expected_return_rate_percent: float = Field(..., ge=0, le=100)


class RetirementResponse(BaseModel):
    """Response for POST /v1/calculators/retirement"""

    currency: str
    years_to_retirement: int
    inflated_monthly_expense: float
    required_corpus: float
    monthly_investment_required: float
    display: Dict[str, str]


class PayoffRequest(NumericInputRequest):
    """Request body for POST /v1/calculators/payoff"""

    money_fields: ClassVar[Tuple[str, ...]] = ("current_balance", "fixed_monthly_payment")
    numeric_fields: ClassVar[Tuple[str, ...]] = ("annual_interest_rate_percent",)

    current_balance: float = Field(..., gt=0)
    annual_interest_rate_percent: float = Field(..., gt=0, le=100)
    fixed_monthly_payment: float = Field(..., gt=0)


class PayoffResponse(BaseModel):
    """Response for POST /v1/calculators/payoff"""

    currency: str
    months_to_payoff: int
    total_interest_paid: float
    total_amount_paid: float
    paid_off: bool
    remaining_balance: float
    display: Dict[str, str]


class TaxRequest(NumericInputRequest):
    """Request body for POST /v1/calculators/tax"""

    money_fields: ClassVar[Tuple[str, ...]] = ("annual_income",)

    annual_income: float = Field(..., ge=0)
    regime: str = Field("new", description="Tax regime key, e.g. 'new' or 'old'")
    age_band: str = Field("general", description="'general', 'senior' or 'very_senior'")


class BracketSliceSchema(BaseModel):
    lower_bound: float
    upper_bound: Optional[float] = None
    rate_percent: float
    taxable_amount: float
    tax: float


class TaxResponse(BaseModel):
    """Response for POST /v1/calculators/tax"""

    currency: str
    taxable_income: float
    base_tax: float
    surcharge: float
    tax_amount: float
    effective_rate_percent: float
    slices: List[BracketSliceSchema]
    display: Dict[str, str]


class CurrencyInfo(BaseModel):
    code: str
    symbol: str
    locale: str
    decimal_places: int


class ParseRequest(BaseModel):
    """Request body for POST /v1/currency/parse"""

    raw: Any = None
    currency: Optional[str] = None


class ParseResponse(BaseModel):
    currency: str
    amount: float


class FormatRequest(NumericInputRequest):
    """Request body for POST /v1/currency/format"""

    money_fields: ClassVar[Tuple[str, ...]] = ("amount",)

    amount: float


class FormatResponse(BaseModel):
    currency: str
    formatted: str


class ConvertRequest(BaseModel):
    """Request body for POST /v1/currency/convert"""

    amount: float
    from_currency: str = Field(..., min_length=3, max_length=3)
    to_currency: str = Field(..., min_length=3, max_length=3)

    @model_validator(mode="before")
    @classmethod
    def normalize_amount(cls, data: Any) -> Any:
        if isinstance(data, dict) and "amount" in data:
            data = dict(data)
            data["amount"] = parse_amount(data["amount"], data.get("from_currency"))
        return data


class ConvertResponse(BaseModel):
    from_currency: str
    to_currency: str
    amount: float
    rate: float
    converted: float
    display: Dict[str, str]
