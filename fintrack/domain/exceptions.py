"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    code = "domain_error"


class CalculationError(DomainException):
    """Inputs are well-formed numbers but the result is undefined for them"""

    code = "cannot_compute"


class InvalidParametersError(CalculationError):
    """Parameter combination outside a calculator's domain (negative term, ages reversed, ...)"""

    code = "invalid_parameters"


class InsufficientPaymentError(CalculationError):
    """Fixed payment does not cover the first month's interest"""

    code = "payment_insufficient"

    def __init__(self, payment: float, first_month_interest: float):
        self.payment = payment
        self.first_month_interest = first_month_interest
        super().__init__(
            f"Monthly payment {payment:.2f} does not cover first month's interest "
            f"{first_month_interest:.2f}; the balance would never shrink"
        )


class UnknownTaxScheduleError(CalculationError):
    """No bracket table configured for the requested regime and age band"""

    code = "unknown_tax_schedule"


class UnsupportedConversionError(CalculationError):
    """No exchange rate available for the currency pair"""

    code = "unsupported_conversion"
