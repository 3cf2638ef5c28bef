"""Prometheus metrics for monitoring decision outcomes and approved amounts"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["country", "outcome"],  # approved | age_rejected | no_valid_loan | invalid_request | error
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-3999, 4000-6999, 7000+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(country: str, outcome: str, loan_amount: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(country=country, outcome=outcome).inc()

    if loan_amount is None:
        return

    if loan_amount < 4000:
        bucket = "2000-3999"
    elif loan_amount < 7000:
        bucket = "4000-6999"
    else:
        bucket = "7000+"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
