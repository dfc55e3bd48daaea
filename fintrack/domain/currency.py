"""Currency normalization - parsing user-typed amounts and formatting them for display"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

from fintrack.domain.models import CurrencyFormat
from fintrack.domain.exceptions import UnsupportedConversionError

DEFAULT_CURRENCY = "INR"

CURRENCIES: Dict[str, CurrencyFormat] = {
    "USD": CurrencyFormat(code="USD", symbol="$", locale="en-US", decimal_places=2),
    "EUR": CurrencyFormat(
        code="EUR",
        symbol="€",
        locale="de-DE",
        decimal_places=2,
        group_separator=".",
        decimal_separator=",",
        symbol_after=True,
    ),
    "GBP": CurrencyFormat(code="GBP", symbol="£", locale="en-GB", decimal_places=2),
    "INR": CurrencyFormat(code="INR", symbol="₹", locale="en-IN", decimal_places=0, indian_grouping=True),
    "JPY": CurrencyFormat(code="JPY", symbol="¥", locale="ja-JP", decimal_places=0),
    "CAD": CurrencyFormat(code="CAD", symbol="CA$", locale="en-CA", decimal_places=2),
    "AUD": CurrencyFormat(code="AUD", symbol="A$", locale="en-AU", decimal_places=2),
}

# Fixed demo rates, EXCHANGE_RATES[source][target]. Not reciprocal by construction.
EXCHANGE_RATES: Dict[str, Dict[str, float]] = {
    "INR": {"USD": 0.012, "EUR": 0.011, "GBP": 0.0094, "JPY": 1.78, "INR": 1.0},
    "USD": {"INR": 83.5, "EUR": 0.92, "GBP": 0.78, "JPY": 148.9, "USD": 1.0},
    "EUR": {"INR": 91.1, "USD": 1.09, "GBP": 0.85, "JPY": 162.3, "EUR": 1.0},
    "GBP": {"INR": 106.6, "USD": 1.28, "EUR": 1.17, "JPY": 190.2, "GBP": 1.0},
    "JPY": {"INR": 0.56, "USD": 0.0067, "EUR": 0.0062, "GBP": 0.0053, "JPY": 1.0},
}

_NOT_NUMERIC = re.compile(r"[^0-9.\-]")
# Longest numeric prefix, the same text a JavaScript parseFloat would accept
_NUMERIC_PREFIX = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def get_currency(code: str | None) -> CurrencyFormat:
    """Look up display rules; unknown or empty codes fall back to DEFAULT_CURRENCY"""
    if isinstance(code, str) and code:
        fmt = CURRENCIES.get(code.strip().upper())
        if fmt is not None:
            return fmt
    return CURRENCIES[DEFAULT_CURRENCY]


def symbol_for(code: str | None) -> str:
    return get_currency(code).symbol


def parse_amount(raw: Any, code: str | None = DEFAULT_CURRENCY) -> float:
    """
    Normalize a user-supplied amount to a float. Never raises.

    Numbers pass through unchanged. Strings are reduced to their digits,
    decimal points and minus signs, then the longest numeric prefix is parsed:

        "$1,234.56"  -> 1234.56
        "12-34"      -> 12.0
        "1.2.3"      -> 1.2
        "abc", ""    -> 0.0

    For currencies that write decimals with a comma (EUR), a comma that comes
    after every "." is the decimal point: "1.234,56 €" parses to 1234.56.
    Otherwise "." stays the decimal point, so "12.50" and "$1,234.56" parse as
    they would for any other code. With code=None only the plain rule applies;
    rates, ages and periods are parsed that way. Non-finite results collapse
    to 0.0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    if not isinstance(raw, str):
        return 0.0

    text = raw
    if code is not None:
        fmt = get_currency(code)
        comma = fmt.decimal_separator
        if comma != "." and text.rfind(comma) > text.rfind("."):
            text = text.replace(".", "").replace(comma, ".")

    match = _NUMERIC_PREFIX.match(_NOT_NUMERIC.sub("", text))
    if match is None:
        return 0.0

    value = float(match.group())
    return value if math.isfinite(value) else 0.0


def _group_digits(whole: str, fmt: CurrencyFormat) -> str:
    if len(whole) <= 3:
        return whole

    head, tail = whole[:-3], whole[-3:]
    size = 2 if fmt.indian_grouping else 3
    groups = []
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]

    return fmt.group_separator.join(groups + [tail])


def format_amount(amount: float, code: str | None = DEFAULT_CURRENCY) -> str:
    """
    Render an amount with the currency's symbol, grouping and decimal places.

    Example:
        format_amount(1234567.891, "INR") -> "₹12,34,568"
        format_amount(-1234.5, "EUR")     -> "-1.234,50 €"
    """
    fmt = get_currency(code)
    if not math.isfinite(amount):
        amount = 0.0

    quantum = Decimal(1).scaleb(-fmt.decimal_places)
    value = Decimal(repr(float(amount))).quantize(quantum, rounding=ROUND_HALF_UP)
    negative = value < 0

    whole, _, fraction = f"{abs(value):f}".partition(".")
    number = _group_digits(whole, fmt)
    if fraction:
        number = f"{number}{fmt.decimal_separator}{fraction}"

    text = f"{number} {fmt.symbol}" if fmt.symbol_after else f"{fmt.symbol}{number}"
    return f"-{text}" if negative else text


def exchange_rate(from_code: str, to_code: str) -> float:
    source = from_code.strip().upper()
    target = to_code.strip().upper()
    if source == target:
        return 1.0

    rate = EXCHANGE_RATES.get(source, {}).get(target)
    if rate is None:
        raise UnsupportedConversionError(f"No exchange rate from {source} to {target}")
    return rate


def convert_amount(amount: float, from_code: str, to_code: str) -> float:
    """Convert using the fixed rate table. Raises UnsupportedConversionError for unknown pairs."""
    return amount * exchange_rate(from_code, to_code)
