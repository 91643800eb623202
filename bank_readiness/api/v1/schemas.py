"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from bank_readiness.domain.models import BankProfile, CaseInput, ReadinessAssessment


class AssessmentRequest(BaseModel):
    """Request body for POST /v1/assessment"""

    applicant_nationality: str = Field(..., description="Applicant nationality, e.g. 'India'")
    uae_residency: bool
    company_jurisdiction: Literal["mainland", "freezone"]
    license_activity: str = Field(..., description="Licensed activity as free text")
    business_model: Literal["trading", "service", "consulting", "tech", "other"]
    expected_monthly_inflow: str = Field(..., description="Monthly inflow band, e.g. 'AED 50,000 - 100,000'")
    source_of_funds: str
    source_of_funds_notes: Optional[str] = None
    incoming_payment_countries: List[str] = Field(default_factory=list)
    previous_rejection: bool = False
    previous_rejection_notes: Optional[str] = None

    def to_case(self) -> CaseInput:
        return CaseInput(
            applicant_nationality=self.applicant_nationality,
            company_jurisdiction=self.company_jurisdiction,
            business_model=self.business_model,
            license_activity=self.license_activity,
            expected_monthly_inflow=self.expected_monthly_inflow,
            source_of_funds=self.source_of_funds,
            uae_residency=self.uae_residency,
            previous_rejection=self.previous_rejection,
            incoming_payment_countries=tuple(self.incoming_payment_countries),
            source_of_funds_notes=self.source_of_funds_notes,
            previous_rejection_notes=self.previous_rejection_notes,
        )


class BankRecommendationSchema(BaseModel):
    """Recommended bank with fit score"""

    bank_name: str
    fit_score: int
    reason_tags: List[str]


class BankAvoidanceSchema(BaseModel):
    """Bank to avoid with reasons"""

    bank_name: str
    reason_tags: List[str]


class AssessmentResponse(BaseModel):
    """Response for POST /v1/assessment"""

    risk_score: int
    risk_category: str
    risk_flags: List[str]
    recommended_banks: List[BankRecommendationSchema]
    banks_to_avoid: List[BankAvoidanceSchema]
    best_bank: Optional[str] = None
    best_bank_reason: Optional[str] = None
    required_documents: List[str]
    helpful_documents: List[str]
    interview_guidance: List[str]

    @classmethod
    def from_assessment(cls, assessment: ReadinessAssessment) -> "AssessmentResponse":
        return cls(
            risk_score=assessment.risk.score,
            risk_category=assessment.risk.category,
            risk_flags=list(assessment.risk.flags),
            recommended_banks=[
                BankRecommendationSchema(
                    bank_name=r.bank_name,
                    fit_score=r.fit_score,
                    reason_tags=list(r.reason_tags),
                )
                for r in assessment.recommended_banks
            ],
            banks_to_avoid=[
                BankAvoidanceSchema(bank_name=a.bank_name, reason_tags=list(a.reason_tags))
                for a in assessment.banks_to_avoid
            ],
            best_bank=assessment.best_bank,
            best_bank_reason=assessment.best_bank_reason,
            required_documents=list(assessment.required_documents),
            helpful_documents=list(assessment.helpful_documents),
            interview_guidance=list(assessment.interview_guidance),
        )


class BankProfileSchema(BaseModel):
    """Public view of a catalog bank"""

    name: str
    code: str
    type: str
    tier: str
    preferred_jurisdictions: List[str]
    preferred_business_models: List[str]
    preferred_activity_keywords: List[str]
    avoid_activity_keywords: List[str]
    min_monthly_turnover_band: str
    accepts_non_residents: bool
    accepts_high_risk_nationalities: bool
    risk_tolerance: str
    strengths: List[str]
    weaknesses: List[str]
    processing_speed: str
    typical_approval_days: int
    special_conditions: List[str]

    @classmethod
    def from_profile(cls, bank: BankProfile) -> "BankProfileSchema":
        return cls(
            name=bank.name,
            code=bank.code,
            type=bank.type,
            tier=bank.tier,
            preferred_jurisdictions=sorted(bank.preferred_jurisdictions),
            preferred_business_models=sorted(bank.preferred_business_models),
            preferred_activity_keywords=list(bank.preferred_activity_keywords),
            avoid_activity_keywords=list(bank.avoid_activity_keywords),
            min_monthly_turnover_band=bank.min_monthly_turnover_band,
            accepts_non_residents=bank.accepts_non_residents,
            accepts_high_risk_nationalities=bank.accepts_high_risk_nationalities,
            risk_tolerance=bank.risk_tolerance,
            strengths=list(bank.strengths),
            weaknesses=list(bank.weaknesses),
            processing_speed=bank.processing_speed,
            typical_approval_days=bank.typical_approval_days,
            special_conditions=list(bank.special_conditions),
        )


class BankListResponse(BaseModel):
    """Response for GET /v1/banks"""

    banks: List[BankProfileSchema]
