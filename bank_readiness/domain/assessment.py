"""Full readiness assessment - runs every engine stage for one case"""

from typing import Optional, Sequence

from bank_readiness.domain.catalog import BANK_CATALOG
from bank_readiness.domain.guidance import helpful_documents, interview_guidance, required_documents
from bank_readiness.domain.models import BankProfile, BankRecommendation, CaseInput, ReadinessAssessment
from bank_readiness.domain.ranking import banks_to_avoid, recommend
from bank_readiness.domain.scoring import assess_risk


def describe_best_bank(recommendation: Optional[BankRecommendation]) -> Optional[str]:
    """Short justification for the top recommendation"""
    if recommendation is None:
        return None
    return f"Highest fit score ({recommendation.fit_score}/100): " + ", ".join(recommendation.reason_tags)


def assess_case(case: CaseInput, catalog: Sequence[BankProfile] = BANK_CATALOG) -> ReadinessAssessment:
    """
    Main entry point: score risk, rank banks and build the checklists.

    Returns complete ReadinessAssessment. Pure function of the case and
    catalog; safe to call concurrently.
    """
    risk = assess_risk(case)
    recommended = recommend(case, risk.score, risk.category, catalog)
    avoid = banks_to_avoid(case, risk.score, risk.category, catalog)
    best = recommended[0] if recommended else None

    return ReadinessAssessment(
        risk=risk,
        recommended_banks=tuple(recommended),
        banks_to_avoid=tuple(avoid),
        best_bank=best.bank_name if best else None,
        best_bank_reason=describe_best_bank(best),
        required_documents=tuple(required_documents(case, risk.category)),
        helpful_documents=tuple(helpful_documents(case, risk.category)),
        interview_guidance=tuple(interview_guidance(case, risk.category)),
    )
