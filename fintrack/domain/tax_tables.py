"""Income tax bracket tables keyed by (regime, age band)

Amounts are annual INR. Adding a regime or a new assessment year means adding
rows here; the evaluator in tax.py never changes.
"""

from typing import Dict, Tuple
from fintrack.domain.models import TaxBracket, TaxSchedule

REGIMES = ("new", "old")
AGE_BANDS = ("general", "senior", "very_senior")

# Health and education cess, applied on top of the slab tax
CESS_RATE = 0.04

# New regime (FY 2023-24): same slabs for every age band
_NEW_REGIME_BRACKETS = (
    TaxBracket(upper_bound=300_000, rate=0.0),
    TaxBracket(upper_bound=600_000, rate=0.05),
    TaxBracket(upper_bound=900_000, rate=0.10),
    TaxBracket(upper_bound=1_200_000, rate=0.15),
    TaxBracket(upper_bound=1_500_000, rate=0.20),
    TaxBracket(upper_bound=None, rate=0.30),
)

# Old regime: basic exemption depends on age
_OLD_REGIME_BRACKETS = {
    "general": (
        TaxBracket(upper_bound=250_000, rate=0.0),
        TaxBracket(upper_bound=500_000, rate=0.05),
        TaxBracket(upper_bound=1_000_000, rate=0.20),
        TaxBracket(upper_bound=None, rate=0.30),
    ),
    "senior": (  # 60-79
        TaxBracket(upper_bound=300_000, rate=0.0),
        TaxBracket(upper_bound=500_000, rate=0.05),
        TaxBracket(upper_bound=1_000_000, rate=0.20),
        TaxBracket(upper_bound=None, rate=0.30),
    ),
    "very_senior": (  # 80+
        TaxBracket(upper_bound=500_000, rate=0.0),
        TaxBracket(upper_bound=1_000_000, rate=0.20),
        TaxBracket(upper_bound=None, rate=0.30),
    ),
}


def _build_schedules() -> Dict[Tuple[str, str], TaxSchedule]:
    schedules = {}
    for age_band in AGE_BANDS:
        schedules[("new", age_band)] = TaxSchedule(
            regime="new",
            age_band=age_band,
            brackets=_NEW_REGIME_BRACKETS,
            surcharge_rate=CESS_RATE,
        )
        schedules[("old", age_band)] = TaxSchedule(
            regime="old",
            age_band=age_band,
            brackets=_OLD_REGIME_BRACKETS[age_band],
            surcharge_rate=CESS_RATE,
        )
    return schedules


TAX_SCHEDULES: Dict[Tuple[str, str], TaxSchedule] = _build_schedules()
