"""Prometheus metrics for monitoring risk distribution and bank recommendations"""

from prometheus_client import Counter, Histogram

from bank_readiness.domain.models import ReadinessAssessment

# Assessment metrics
assessment_counter = Counter(
    "bank_readiness_assessment_total",
    "Total bank readiness assessments",
    ["category"],  # low | medium | high
)

risk_score_histogram = Histogram(
    "bank_readiness_risk_score",
    "Distribution of applicant risk scores",
    buckets=[10, 25, 40, 55, 70, 85, 100],
)

recommended_bank_counter = Counter(
    "bank_readiness_recommended_bank_total",
    "Times a bank appeared in the recommended list",
    ["bank"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(assessment: ReadinessAssessment) -> None:
    """Record assessment metrics for monitoring risk mix and bank routing"""
    assessment_counter.labels(category=assessment.risk.category).inc()
    risk_score_histogram.observe(assessment.risk.score)

    for recommendation in assessment.recommended_banks:
        recommended_bank_counter.labels(bank=recommendation.bank_name).inc()
