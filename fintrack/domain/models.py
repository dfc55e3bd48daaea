"""Domain models - immutable calculator inputs and outputs"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CurrencyFormat:
    """Display rules for one currency code"""

    code: str
    symbol: str
    locale: str
    decimal_places: int
    group_separator: str = ","
    decimal_separator: str = "."
    symbol_after: bool = False
    indian_grouping: bool = False  # 12,34,567 instead of 1,234,567


@dataclass(frozen=True)
class LoanParameters:
    """Fixed-rate amortizing loan"""

    principal: float
    annual_rate_percent: float
    term_years: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12

    @property
    def payments_count(self) -> int:
        return self.term_years * 12


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: float
    total_payment: float
    total_interest: float
    payments_count: int


@dataclass(frozen=True)
class AmortizationEntry:
    """One month of a loan repayment schedule"""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class SavingsParameters:
    """Lump sum plus monthly contributions under compound interest"""

    initial_deposit: float
    monthly_contribution: float
    annual_rate_percent: float
    years: int
    compounding_periods_per_year: int


@dataclass(frozen=True)
class SavingsResult:
    future_value: float
    total_contributions: float
    interest_earned: float
    principal_future_value: float
    contribution_future_value: float


@dataclass(frozen=True)
class SavingsSnapshot:
    """Projected balance at the end of a year"""

    year: int
    balance: float
    total_contributions: float
    interest_earned: float


@dataclass(frozen=True)
class RetirementParameters:
    current_age: int
    retirement_age: int
    monthly_expenses: float
    inflation_rate_percent: float
    expected_return_rate_percent: float


@dataclass(frozen=True)
class RetirementResult:
    years_to_retirement: int
    inflated_monthly_expense: float
    required_corpus: float
    monthly_investment_required: float


@dataclass(frozen=True)
class PayoffParameters:
    """Revolving balance repaid with a fixed monthly amount"""

    current_balance: float
    annual_interest_rate_percent: float
    fixed_monthly_payment: float

    @property
    def monthly_rate(self) -> float:
        return self.annual_interest_rate_percent / 100 / 12

    @property
    def first_month_interest(self) -> float:
        return self.current_balance * self.monthly_rate


@dataclass(frozen=True)
class PayoffResult:
    months_to_payoff: int
    total_interest_paid: float
    total_amount_paid: float
    paid_off: bool  # False when the iteration cap was reached first
    remaining_balance: float


@dataclass(frozen=True)
class TaxBracket:
    """Marginal rate applied up to upper_bound (None = no ceiling)"""

    upper_bound: Optional[float]
    rate: float


@dataclass(frozen=True)
class TaxSchedule:
    """Ordered bracket rows for one (regime, age band) pair"""

    regime: str
    age_band: str
    brackets: Tuple[TaxBracket, ...]
    surcharge_rate: float

    def __post_init__(self) -> None:
        if not self.brackets:
            raise ValueError(f"Tax schedule {self.regime}/{self.age_band} has no brackets")
        if self.brackets[-1].upper_bound is not None:
            raise ValueError(f"Tax schedule {self.regime}/{self.age_band} must end with an open bracket")

        previous = 0.0
        for bracket in self.brackets[:-1]:
            if bracket.upper_bound is None or bracket.upper_bound <= previous:
                raise ValueError(
                    f"Tax schedule {self.regime}/{self.age_band} bounds must be strictly increasing"
                )
            previous = bracket.upper_bound


@dataclass(frozen=True)
class TaxParameters:
    annual_income: float
    regime: str
    age_band: str


@dataclass(frozen=True)
class BracketSlice:
    """Portion of income taxed inside a single bracket"""

    lower_bound: float
    upper_bound: Optional[float]
    rate: float
    taxable_amount: float
    tax: float


@dataclass(frozen=True)
class TaxResult:
    taxable_income: float
    base_tax: float
    surcharge: float
    tax_amount: float
    effective_rate_percent: float
    slices: Tuple[BracketSlice, ...]
