"""Risk scoring engine - core business logic for bank readiness assessments"""

from typing import List

from bank_readiness.domain.models import CaseInput, RiskAssessmentResult
from bank_readiness.domain.reference_data import (
    HIGH_RISK_ACTIVITY_KEYWORDS,
    HIGH_RISK_NATIONALITIES,
    HIGH_RISK_SOURCES_OF_FUNDS,
    HIGHEST_INFLOW_BAND,
    LOWEST_INFLOW_BAND,
    MEDIUM_RISK_ACTIVITY_KEYWORDS,
    MEDIUM_RISK_NATIONALITIES,
    MEDIUM_RISK_SOURCES_OF_FUNDS,
    has_high_risk_payment_country,
    has_medium_risk_payment_country,
)
from bank_readiness.utils.text_utils import find_keyword

# Factor weights (points added when the factor triggers)
HIGH_RISK_NATIONALITY_POINTS = 25
MEDIUM_RISK_NATIONALITY_POINTS = 15
NON_RESIDENT_POINTS = 12
FREEZONE_POINTS = 3
TRADING_MODEL_POINTS = 12
OTHER_MODEL_POINTS = 8
HIGH_RISK_ACTIVITY_POINTS = 20
MEDIUM_RISK_ACTIVITY_POINTS = 10
HIGH_INFLOW_POINTS = 5
LOW_INFLOW_POINTS = 4
HIGH_RISK_SOURCE_POINTS = 12
MEDIUM_RISK_SOURCE_POINTS = 6
HIGH_RISK_COUNTRY_POINTS = 25
MEDIUM_RISK_COUNTRY_POINTS = 12
PREVIOUS_REJECTION_POINTS = 18

MAX_SCORE = 100
LOW_RISK_CEILING = 25
MEDIUM_RISK_CEILING = 55


def categorize_score(score: int) -> str:
    """
    Map a risk score to its tier.

    Bands:
    - 0 - 25:  low
    - 26 - 55: medium
    - 56+:     high
    """
    if score <= LOW_RISK_CEILING:
        return "low"
    elif score <= MEDIUM_RISK_CEILING:
        return "medium"
    else:
        return "high"


def assess_risk(case: CaseInput) -> RiskAssessmentResult:
    """
    Score an applicant profile across nine additive risk factors.

    Each factor adds at most its fixed ceiling and appends exactly one flag
    when it contributes points. Flags follow factor evaluation order:
    nationality, residency, jurisdiction, business model, licence activity,
    monthly inflow, source of funds, payment countries, prior rejection.

    Unknown or empty values fall through to the zero-point branch; this
    function never raises for unrecognised input.
    """
    score = 0
    flags: List[str] = []

    # 1. Nationality
    if case.applicant_nationality in HIGH_RISK_NATIONALITIES:
        score += HIGH_RISK_NATIONALITY_POINTS
        flags.append(f"High-risk nationality: {case.applicant_nationality}")
    elif case.applicant_nationality in MEDIUM_RISK_NATIONALITIES:
        score += MEDIUM_RISK_NATIONALITY_POINTS
        flags.append(f"Medium-risk nationality: {case.applicant_nationality}")

    # 2. UAE residency
    if not case.uae_residency:
        score += NON_RESIDENT_POINTS
        flags.append("Non-UAE resident applicant")

    # 3. Jurisdiction
    if case.company_jurisdiction == "freezone":
        score += FREEZONE_POINTS
        flags.append("Free zone company - some banks prefer mainland entities")

    # 4. Business model
    if case.business_model == "trading":
        score += TRADING_MODEL_POINTS
        flags.append("Trading business model - higher scrutiny expected")
    elif case.business_model == "other":
        score += OTHER_MODEL_POINTS
        flags.append("Unspecified business model")

    # 5. Licence activity
    high_risk_activity = find_keyword(case.license_activity, HIGH_RISK_ACTIVITY_KEYWORDS)
    if high_risk_activity:
        score += HIGH_RISK_ACTIVITY_POINTS
        flags.append(f"High-risk business activity detected: {high_risk_activity}")
    else:
        medium_risk_activity = find_keyword(case.license_activity, MEDIUM_RISK_ACTIVITY_KEYWORDS)
        if medium_risk_activity:
            score += MEDIUM_RISK_ACTIVITY_POINTS
            flags.append(f"Medium-risk business activity: {medium_risk_activity}")

    # 6. Monthly inflow - only the extreme bands carry risk
    if case.expected_monthly_inflow == HIGHEST_INFLOW_BAND:
        score += HIGH_INFLOW_POINTS
        flags.append("High transaction volumes - enhanced due diligence required")
    elif case.expected_monthly_inflow == LOWEST_INFLOW_BAND:
        score += LOW_INFLOW_POINTS
        flags.append("Low transaction volume may limit bank options")

    # 7. Source of funds
    if case.source_of_funds in HIGH_RISK_SOURCES_OF_FUNDS:
        score += HIGH_RISK_SOURCE_POINTS
        flags.append(f"Source of funds requires strong documentation: {case.source_of_funds}")
    elif case.source_of_funds in MEDIUM_RISK_SOURCES_OF_FUNDS:
        score += MEDIUM_RISK_SOURCE_POINTS
        flags.append(f"Source of funds requires supporting evidence: {case.source_of_funds}")

    # 8. Incoming payment countries ("any match", not cumulative)
    if has_high_risk_payment_country(case.incoming_payment_countries):
        score += HIGH_RISK_COUNTRY_POINTS
        flags.append("Incoming payments from sanctioned or high-risk countries")
    elif has_medium_risk_payment_country(case.incoming_payment_countries):
        score += MEDIUM_RISK_COUNTRY_POINTS
        flags.append("Incoming payments from medium-risk countries")

    # 9. Prior rejection
    if case.previous_rejection:
        score += PREVIOUS_REJECTION_POINTS
        flags.append("Previous bank rejection on record")

    score = max(0, min(score, MAX_SCORE))

    return RiskAssessmentResult(
        score=score,
        category=categorize_score(score),
        flags=tuple(flags),
    )
