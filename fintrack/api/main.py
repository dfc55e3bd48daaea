"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fintrack.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fintrack.api.v1 import calculators, currency
from fintrack.infrastructure.observability.logging import setup_logging
from fintrack.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinTrack Calculators",
        description="Loan, savings, retirement, credit card payoff and tax calculators with currency normalization",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(calculators.router, prefix="/v1", tags=["calculators"])
    app.include_router(currency.router, prefix="/v1", tags=["currency"])

    return app


app = create_app()
