"""Unit tests for the full readiness assessment and catalog lookup"""

import pytest
from bank_readiness.domain.assessment import assess_case, describe_best_bank
from bank_readiness.domain.catalog import BANK_CATALOG, BANKS_BY_CODE, get_bank
from bank_readiness.domain.exceptions import BankNotFoundError
from bank_readiness.domain.models import BankRecommendation, CaseInput
from bank_readiness.domain.reference_data import MONTHLY_INFLOW_BANDS


def test_assess_case_low_risk(low_risk_case: CaseInput):
    """Test complete assessment flow for a clean profile"""
    assessment = assess_case(low_risk_case)

    assert assessment.risk.score == 0
    assert assessment.risk.category == "low"
    assert assessment.recommended_banks
    assert assessment.best_bank == assessment.recommended_banks[0].bank_name
    assert assessment.best_bank_reason.startswith(
        f"Highest fit score ({assessment.recommended_banks[0].fit_score}/100): "
    )
    assert assessment.required_documents[0] == "Trade License copy"
    assert assessment.interview_guidance[0] == "Be prepared to explain your business model clearly"


def test_assess_case_high_risk(high_risk_case: CaseInput):
    assessment = assess_case(high_risk_case)

    assert assessment.risk.category == "high"
    assert assessment.banks_to_avoid
    assert "Audited financial statements" in assessment.required_documents


def test_assess_case_without_recommendations(make_bank, low_risk_case: CaseInput):
    """No bank reaching the fit threshold leaves best bank empty"""
    catalog = [
        make_bank(
            preferred_jurisdictions=frozenset({"freezone"}),
            preferred_business_models=frozenset({"trading"}),
            min_monthly_turnover_band="Above AED 5,000,000",
        )
    ]

    assessment = assess_case(low_risk_case, catalog)

    assert assessment.recommended_banks == ()
    assert assessment.best_bank is None
    assert assessment.best_bank_reason is None


def test_assess_case_is_deterministic(high_risk_case: CaseInput):
    assert assess_case(high_risk_case) == assess_case(high_risk_case)


def test_describe_best_bank():
    recommendation = BankRecommendation(bank_name="RAKBANK", fit_score=85, reason_tags=("SME focused", "Jurisdiction match"))

    assert describe_best_bank(recommendation) == "Highest fit score (85/100): SME focused, Jurisdiction match"
    assert describe_best_bank(None) is None


def test_catalog_codes_unique_and_indexed():
    assert len(BANKS_BY_CODE) == len(BANK_CATALOG)
    assert len({bank.name for bank in BANK_CATALOG}) == len(BANK_CATALOG)


def test_catalog_profiles_use_known_values():
    for bank in BANK_CATALOG:
        assert bank.type in ("conventional", "islamic")
        assert bank.tier in ("tier1", "tier2", "tier3", "digital")
        assert bank.risk_tolerance in ("low", "medium", "high")
        assert bank.min_monthly_turnover_band in MONTHLY_INFLOW_BANDS
        assert bank.strengths


def test_get_bank_case_insensitive():
    assert get_bank("rakbank") is BANKS_BY_CODE["RAKBANK"]


def test_get_bank_unknown_code():
    with pytest.raises(BankNotFoundError):
        get_bank("NOPE")
