"""Prometheus metrics for monitoring approval rates, approved amounts and period extensions"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | error | InvalidIdentityCode | InvalidAge | NoValidLoan | ...
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts",
    buckets=[2000, 3000, 4000, 5000, 6000, 8000, 10000],
)

period_extension_counter = Counter(
    "loan_period_extended_total",
    "Approvals whose period was extended beyond the request",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: int | None = None, period_extended: bool = False) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is not None:
        approved_amount_histogram.observe(loan_amount)

    if period_extended:
        period_extension_counter.inc()
