"""Domain models - immutable dataclasses for cases, bank profiles and assessment results"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class CaseInput:
    """Prospective bank-account applicant profile supplied per assessment"""

    applicant_nationality: str
    company_jurisdiction: str  # "mainland" or "freezone"
    business_model: str  # "trading" | "service" | "consulting" | "tech" | "other"
    license_activity: str
    expected_monthly_inflow: str
    source_of_funds: str
    uae_residency: bool
    previous_rejection: bool
    incoming_payment_countries: Tuple[str, ...] = ()
    source_of_funds_notes: Optional[str] = None
    previous_rejection_notes: Optional[str] = None


@dataclass(frozen=True)
class BankProfile:
    """Static bank record from the catalog"""

    name: str
    code: str
    type: str  # "conventional" or "islamic"
    tier: str  # "tier1" | "tier2" | "tier3" | "digital"
    preferred_jurisdictions: FrozenSet[str]
    preferred_business_models: FrozenSet[str]
    preferred_activity_keywords: Tuple[str, ...]
    avoid_activity_keywords: Tuple[str, ...]
    min_monthly_turnover_band: str
    accepts_non_residents: bool
    accepts_high_risk_nationalities: bool
    risk_tolerance: str  # "low" | "medium" | "high"
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    processing_speed: str  # "fast" | "medium" | "slow"
    typical_approval_days: int
    special_conditions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RiskAssessmentResult:
    """Output of the risk scoring engine"""

    score: int
    category: str
    flags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BankRecommendation:
    """Bank suggested for the applicant, with fit score and justification"""

    bank_name: str
    fit_score: int
    reason_tags: Tuple[str, ...]


@dataclass(frozen=True)
class BankAvoidance:
    """Bank the applicant should not approach"""

    bank_name: str
    reason_tags: Tuple[str, ...]


@dataclass(frozen=True)
class ReadinessAssessment:
    """Complete bank readiness assessment for one case"""

    risk: RiskAssessmentResult
    recommended_banks: Tuple[BankRecommendation, ...]
    banks_to_avoid: Tuple[BankAvoidance, ...]
    best_bank: Optional[str]
    best_bank_reason: Optional[str]
    required_documents: Tuple[str, ...] = field(default_factory=tuple)
    helpful_documents: Tuple[str, ...] = field(default_factory=tuple)
    interview_guidance: Tuple[str, ...] = field(default_factory=tuple)
