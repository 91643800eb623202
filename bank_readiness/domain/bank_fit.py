"""Bank fit scoring - how well a single bank's appetite matches a case"""

from bank_readiness.domain.models import BankProfile, CaseInput
from bank_readiness.domain.reference_data import has_high_risk_nationality, turnover_rank
from bank_readiness.utils.text_utils import contains_any

BASE_FIT_SCORE = 50


def matches_jurisdiction(bank: BankProfile, case: CaseInput) -> bool:
    return case.company_jurisdiction in bank.preferred_jurisdictions or "both" in bank.preferred_jurisdictions


def matches_avoided_activity(bank: BankProfile, case: CaseInput) -> bool:
    return contains_any(case.license_activity, bank.avoid_activity_keywords)


def score_fit(bank: BankProfile, case: CaseInput, category: str) -> int:
    """
    Score bank/applicant fit from 0 (no fit) to 100 (ideal fit).

    Starts from 50 and applies independent adjustments:
    - Jurisdiction: +15 preferred (or bank takes both), -20 otherwise
    - Business model: +15 preferred, +5 "other" catch-all, -10 otherwise
    - Activity: -30 on an avoided keyword, else +15 on a preferred keyword
    - Non-resident applicant: +10 if accepted, -25 if not
    - High-risk nationality: +15 if accepted, -30 if not
    - Risk tolerance: high case +20 (high) / -15 (low); low case +10 (low or medium)
    - Turnover: +10 when inflow meets the bank's minimum band, -15 otherwise
    - Previous rejection: +15 with a high-tolerance bank
    """
    fit_score = BASE_FIT_SCORE

    if matches_jurisdiction(bank, case):
        fit_score += 15
    else:
        fit_score -= 20

    if case.business_model in bank.preferred_business_models:
        fit_score += 15
    elif "other" in bank.preferred_business_models:
        fit_score += 5
    else:
        fit_score -= 10

    # Avoid-match takes priority and suppresses the preferred bonus
    if matches_avoided_activity(bank, case):
        fit_score -= 30
    elif contains_any(case.license_activity, bank.preferred_activity_keywords):
        fit_score += 15

    if not case.uae_residency:
        if bank.accepts_non_residents:
            fit_score += 10
        else:
            fit_score -= 25

    if has_high_risk_nationality(case.applicant_nationality):
        if bank.accepts_high_risk_nationalities:
            fit_score += 15
        else:
            fit_score -= 30

    if category == "high":
        if bank.risk_tolerance == "high":
            fit_score += 20
        elif bank.risk_tolerance == "low":
            fit_score -= 15
    elif category == "low":
        if bank.risk_tolerance in ("low", "medium"):
            fit_score += 10

    if turnover_rank(case.expected_monthly_inflow) >= turnover_rank(bank.min_monthly_turnover_band):
        fit_score += 10
    else:
        fit_score -= 15

    if case.previous_rejection and bank.risk_tolerance == "high":
        fit_score += 15

    return max(0, min(100, fit_score))
