"""Prometheus metrics for calculator usage and rejections"""

from prometheus_client import Counter, Histogram

calculation_counter = Counter(
    "fintrack_calculation_total",
    "Calculator invocations",
    ["calculator", "outcome"],  # outcome: ok | rejected
)

payoff_unreached_counter = Counter(
    "fintrack_payoff_unreached_total",
    "Payoff simulations that hit the iteration cap before clearing the balance",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str, accepted: bool) -> None:
    """Count a calculator call by outcome"""
    outcome = "ok" if accepted else "rejected"
    calculation_counter.labels(calculator=calculator, outcome=outcome).inc()
