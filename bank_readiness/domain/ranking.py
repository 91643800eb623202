"""Bank recommendation and avoidance ranking over the catalog"""

from typing import List, Sequence

from bank_readiness.domain.bank_fit import matches_avoided_activity, matches_jurisdiction, score_fit
from bank_readiness.domain.catalog import BANK_CATALOG
from bank_readiness.domain.models import BankAvoidance, BankProfile, BankRecommendation, CaseInput
from bank_readiness.domain.reference_data import SHARIA_RESTRICTED_KEYWORDS, has_high_risk_nationality
from bank_readiness.utils.text_utils import contains_any, unique_tags

MIN_RECOMMENDED_FIT = 40
MAX_RECOMMENDATIONS = 6
MAX_RECOMMENDATION_TAGS = 5
MAX_AVOIDANCES = 5
MAX_AVOIDANCE_TAGS = 4
MIN_AVOIDANCE_TAGS = 2


def _recommendation_tags(bank: BankProfile, case: CaseInput, category: str) -> List[str]:
    tags = []
    if matches_jurisdiction(bank, case):
        tags.append("Jurisdiction match")
    if case.business_model in bank.preferred_business_models:
        tags.append("Business model fit")
    if not case.uae_residency and bank.accepts_non_residents:
        tags.append("Accepts non-residents")
    if case.previous_rejection and bank.risk_tolerance == "high":
        tags.append("Considers rejected applicants")
    if bank.processing_speed == "fast":
        tags.append(f"Fast processing (~{bank.typical_approval_days} days)")
    if category == "high" and bank.risk_tolerance == "high":
        tags.append("High risk tolerance")
    tags.extend(bank.strengths[:2])
    if bank.special_conditions:
        tags.append(bank.special_conditions[0])
    return unique_tags(tags, limit=MAX_RECOMMENDATION_TAGS) or ["General fit"]


def _avoidance_tags(bank: BankProfile, case: CaseInput, category: str) -> List[str]:
    tags = []
    if matches_avoided_activity(bank, case):
        tags.append("Activity excluded by bank policy")
    if not case.uae_residency and not bank.accepts_non_residents:
        tags.append("No non-resident support")
    if has_high_risk_nationality(case.applicant_nationality) and not bank.accepts_high_risk_nationalities:
        tags.append("Nationality restrictions")
    if category == "high" and bank.risk_tolerance == "low":
        tags.append("Low risk tolerance - likely to reject")
    if bank.type == "islamic" and contains_any(case.license_activity, SHARIA_RESTRICTED_KEYWORDS):
        tags.append("Activity not Sharia-compliant")
    for weakness in bank.weaknesses:
        weakness_lower = weakness.lower()
        if case.business_model == "trading" and "trading" in weakness_lower:
            tags.append(weakness)
        elif category == "high" and "strict" in weakness_lower:
            tags.append(weakness)
    return unique_tags(tags)


def recommend(
    case: CaseInput,
    score: int,
    category: str,
    catalog: Sequence[BankProfile] = BANK_CATALOG,
) -> List[BankRecommendation]:
    """
    Rank catalog banks by fit for the case.

    Keeps banks with fit >= 40, sorted by fit descending (ties keep catalog
    order), capped at 6 entries with at most 5 reason tags each.
    """
    recommendations: List[BankRecommendation] = []
    for bank in catalog:
        fit_score = score_fit(bank, case, category)
        if fit_score < MIN_RECOMMENDED_FIT:
            continue
        recommendations.append(
            BankRecommendation(
                bank_name=bank.name,
                fit_score=fit_score,
                reason_tags=tuple(_recommendation_tags(bank, case, category)),
            )
        )

    # list.sort is stable, so equal fit scores keep catalog order
    recommendations.sort(key=lambda r: r.fit_score, reverse=True)
    return recommendations[:MAX_RECOMMENDATIONS]


def banks_to_avoid(
    case: CaseInput,
    score: int,
    category: str,
    catalog: Sequence[BankProfile] = BANK_CATALOG,
) -> List[BankAvoidance]:
    """
    List banks the applicant should not approach.

    A bank qualifies only with at least two distinct reasons and a fit score
    below 40. Results keep catalog order (not fit order) and are capped at 5
    entries with at most 4 reason tags each.
    """
    avoid: List[BankAvoidance] = []
    for bank in catalog:
        if len(avoid) >= MAX_AVOIDANCES:
            break
        tags = _avoidance_tags(bank, case, category)
        if len(tags) < MIN_AVOIDANCE_TAGS:
            continue
        if score_fit(bank, case, category) >= MIN_RECOMMENDED_FIT:
            continue
        avoid.append(BankAvoidance(bank_name=bank.name, reason_tags=tuple(tags[:MAX_AVOIDANCE_TAGS])))
    return avoid
