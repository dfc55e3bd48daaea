"""Dependency injection for FastAPI endpoints"""

from typing import Mapping, Tuple
from fastapi import Request

from fintrack.config import Settings, settings
from fintrack.domain.models import TaxSchedule
from fintrack.domain.tax_tables import TAX_SCHEDULES


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_tax_schedules() -> Mapping[Tuple[str, str], TaxSchedule]:
    """Provide the bracket tables used by the tax calculator"""
    return TAX_SCHEDULES
