"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from fintrack.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping timestamp, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(
    request_id: str,
    calculator: str,
    outcome: str,
    duration_ms: float,
) -> None:
    """Log one calculator invocation"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "calculator": calculator,
            "outcome": outcome,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, calculator: str, reason: str, message: str) -> None:
    """Log a calculation the domain refused to compute"""
    logging.warning(
        f"{calculator} calculation rejected: {message}",
        extra={
            "request_id": request_id,
            "calculator": calculator,
            "reason": reason,
        },
    )
