"""Unit tests for risk scoring logic"""

import pytest
from dataclasses import replace
from bank_readiness.domain.models import CaseInput
from bank_readiness.domain.reference_data import has_high_risk_payment_country, has_medium_risk_payment_country
from bank_readiness.domain.scoring import assess_risk, categorize_score

CATEGORY_RANK = {"low": 0, "medium": 1, "high": 2}


def test_assess_risk_clean_profile(low_risk_case: CaseInput):
    """Resident consulting company with no risk factors scores zero"""
    result = assess_risk(low_risk_case)

    assert result.score == 0
    assert result.category == "low"
    assert result.flags == ()


def test_assess_risk_nationality_and_rejection(low_risk_case: CaseInput):
    """High-risk nationality plus prior rejection: 25 + 18 = 43"""
    case = replace(low_risk_case, applicant_nationality="Iran", previous_rejection=True)

    result = assess_risk(case)

    assert result.score == 43
    assert result.category == "medium"
    assert result.flags == (
        "High-risk nationality: Iran",
        "Previous bank rejection on record",
    )


def test_assess_risk_high_risk_profile(high_risk_case: CaseInput):
    """Factors 1, 2, 5 and 8 combine to 25 + 12 + 20 + 25 = 82"""
    result = assess_risk(high_risk_case)

    assert result.score == 82
    assert result.category == "high"
    assert result.flags == (
        "High-risk nationality: Iran",
        "Non-UAE resident applicant",
        "High-risk business activity detected: crypto",
        "Incoming payments from sanctioned or high-risk countries",
    )


def test_assess_risk_clamped_to_100(low_risk_case: CaseInput):
    """Every factor at its maximum would exceed 100"""
    case = replace(
        low_risk_case,
        applicant_nationality="North Korea",
        uae_residency=False,
        company_jurisdiction="freezone",
        business_model="trading",
        license_activity="Forex brokerage",
        expected_monthly_inflow="Above AED 5,000,000",
        source_of_funds="Gift",
        incoming_payment_countries=("Russia",),
        previous_rejection=True,
    )

    result = assess_risk(case)

    assert result.score == 100
    assert result.category == "high"
    assert len(result.flags) == 9


@pytest.mark.parametrize(
    "overrides, points",
    [
        ({"applicant_nationality": "Syria"}, 25),
        ({"applicant_nationality": "Pakistan"}, 15),
        ({"uae_residency": False}, 12),
        ({"company_jurisdiction": "freezone"}, 3),
        ({"business_model": "trading"}, 12),
        ({"business_model": "other"}, 8),
        ({"license_activity": "Online Gambling Platform"}, 20),
        ({"license_activity": "Gold and Jewellery Retail"}, 10),
        ({"expected_monthly_inflow": "Above AED 5,000,000"}, 5),
        ({"expected_monthly_inflow": "Below AED 50,000"}, 4),
        ({"source_of_funds": "Loan/Financing"}, 12),
        ({"source_of_funds": "Inheritance"}, 6),
        ({"incoming_payment_countries": ("Cuba",)}, 25),
        ({"incoming_payment_countries": ("Nigeria",)}, 12),
        ({"incoming_payment_countries": ("Nigeria", "Iran", "Cuba")}, 25),
        ({"previous_rejection": True}, 18),
    ],
)
def test_single_factor_adds_points_and_one_flag(low_risk_case: CaseInput, overrides, points):
    """A factor emits a flag exactly when it contributes points"""
    result = assess_risk(replace(low_risk_case, **overrides))

    assert result.score == points
    assert len(result.flags) == 1


def test_high_risk_activity_suppresses_medium_match(low_risk_case: CaseInput):
    """Activity matching both lists only scores the high-risk branch"""
    result = assess_risk(replace(low_risk_case, license_activity="Crypto and real estate brokerage"))

    assert result.score == 20
    assert result.flags == ("High-risk business activity detected: crypto",)


def test_activity_match_is_case_insensitive(low_risk_case: CaseInput):
    result = assess_risk(replace(low_risk_case, license_activity="REAL ESTATE Development"))

    assert result.score == 10


def test_unknown_values_fall_through_to_zero(low_risk_case: CaseInput):
    """Unrecognised enum values never raise and add no points"""
    case = replace(
        low_risk_case,
        applicant_nationality="",
        company_jurisdiction="offshore",
        business_model="unicorn",
        license_activity="",
        expected_monthly_inflow="a lot",
        source_of_funds="",
        incoming_payment_countries=(),
    )

    result = assess_risk(case)

    assert result.score == 0
    assert result.category == "low"
    assert result.flags == ()


def test_nationality_requires_exact_match(low_risk_case: CaseInput):
    result = assess_risk(replace(low_risk_case, applicant_nationality="iran"))

    assert result.score == 0


def test_assess_risk_is_deterministic(high_risk_case: CaseInput):
    assert assess_risk(high_risk_case) == assess_risk(high_risk_case)


@pytest.mark.parametrize(
    "overrides",
    [
        {"applicant_nationality": "Iran"},
        {"uae_residency": False},
        {"company_jurisdiction": "freezone"},
        {"business_model": "trading"},
        {"license_activity": "Tobacco wholesale"},
        {"expected_monthly_inflow": "Above AED 5,000,000"},
        {"source_of_funds": "Gift"},
        {"incoming_payment_countries": ("Belarus",)},
        {"previous_rejection": True},
    ],
)
def test_raising_a_factor_never_lowers_category(high_risk_case: CaseInput, low_risk_case: CaseInput, overrides):
    """Category monotonicity from both a clean and an already risky baseline"""
    medium_case = replace(low_risk_case, previous_rejection=True, business_model="other")
    for base in (low_risk_case, medium_case, high_risk_case):
        before = assess_risk(base)
        after = assess_risk(replace(base, **overrides))
        assert after.score >= before.score
        assert CATEGORY_RANK[after.category] >= CATEGORY_RANK[before.category]


def test_categorize_score_boundaries():
    """Test category thresholds at the band edges"""
    assert categorize_score(0) == "low"
    assert categorize_score(25) == "low"
    assert categorize_score(26) == "medium"
    assert categorize_score(55) == "medium"
    assert categorize_score(56) == "high"
    assert categorize_score(100) == "high"


@pytest.mark.parametrize("countries", [["UK", "Syria"], ("UK", "Syria"), iter(["UK", "Syria"])])
def test_payment_country_helpers_accept_any_iterable(countries):
    assert has_high_risk_payment_country(countries) is True


def test_payment_country_helpers_exact_membership():
    assert has_medium_risk_payment_country(["Pakistan"]) is True
    assert has_high_risk_payment_country(["Pakistan"]) is False
    assert has_high_risk_payment_country(["syria"]) is False
    assert has_high_risk_payment_country([]) is False
