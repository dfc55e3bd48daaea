"""Currency endpoints - supported codes, parsing, display formatting and conversion"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request

from fintrack.api.v1.schemas import (
    CurrencyInfo,
    ParseRequest,
    ParseResponse,
    FormatRequest,
    FormatResponse,
    ConvertRequest,
    ConvertResponse,
)
from fintrack.api.dependencies import get_request_id, get_settings
from fintrack.config import Settings
from fintrack.domain.currency import (
    CURRENCIES,
    get_currency,
    parse_amount,
    format_amount,
    exchange_rate,
    convert_amount,
)
from fintrack.domain.exceptions import UnsupportedConversionError
from fintrack.infrastructure.observability.logging import log_rejection

router = APIRouter()


@router.get("/currencies", response_model=List[CurrencyInfo])
def list_currencies():
    """Supported currency codes with their display rules"""
    return [
        CurrencyInfo(
            code=fmt.code,
            symbol=fmt.symbol,
            locale=fmt.locale,
            decimal_places=fmt.decimal_places,
        )
        for fmt in CURRENCIES.values()
    ]


@router.post("/currency/parse", response_model=ParseResponse)
def parse_currency(request_body: ParseRequest, app_settings: Settings = Depends(get_settings)):
    """Normalize a typed amount; unparseable input yields 0 instead of an error"""
    currency = get_currency(request_body.currency or app_settings.default_currency).code
    return ParseResponse(currency=currency, amount=parse_amount(request_body.raw, currency))


@router.post("/currency/format", response_model=FormatResponse)
def format_currency(request_body: FormatRequest, app_settings: Settings = Depends(get_settings)):
    currency = get_currency(request_body.currency or app_settings.default_currency).code
    return FormatResponse(currency=currency, formatted=format_amount(request_body.amount, currency))


@router.post("/currency/convert", response_model=ConvertResponse)
def convert_currency(request_body: ConvertRequest, request: Request):
    """Convert between currencies using the fixed rate table"""
    source = request_body.from_currency.upper()
    target = request_body.to_currency.upper()

    try:
        rate = exchange_rate(source, target)
        converted = convert_amount(request_body.amount, source, target)
    except UnsupportedConversionError as e:
        log_rejection(get_request_id(request), "convert", e.code, str(e))
        raise HTTPException(status_code=422, detail={"code": e.code, "message": str(e)}) from e

    return ConvertResponse(
        from_currency=source,
        to_currency=target,
        amount=request_body.amount,
        rate=rate,
        converted=round(converted, 2),
        display={
            "amount": format_amount(request_body.amount, source),
            "converted": format_amount(converted, target),
        },
    )
