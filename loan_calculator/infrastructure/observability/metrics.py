"""Prometheus metrics for calculation volume, validation failures and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "loan_calculations_total",
    "Total calculations requested",
    ["operation", "outcome"],  # emi | compound_interest ; success | rejected | error
)

validation_failure_counter = Counter(
    "loan_validation_failures_total",
    "Rejected inputs by error code",
    ["error_code"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str, outcome: str) -> None:
    calculation_counter.labels(operation=operation, outcome=outcome).inc()


def record_validation_failure(error_code: str) -> None:
    """Record a rejected input so the most common user mistakes are visible"""
    validation_failure_counter.labels(error_code=error_code).inc()
