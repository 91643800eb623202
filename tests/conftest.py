"""Pytest fixtures for testing"""

import pytest
from dataclasses import replace
from typing import Callable
from fastapi.testclient import TestClient
from bank_readiness.api.main import create_app
from bank_readiness.domain.models import BankProfile, CaseInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def low_risk_case() -> CaseInput:
    """UAE-resident consulting company that triggers no risk factor"""
    return CaseInput(
        applicant_nationality="India",
        company_jurisdiction="mainland",
        business_model="consulting",
        license_activity="IT services",
        expected_monthly_inflow="AED 50,000 - 100,000",
        source_of_funds="Business Revenue",
        uae_residency=True,
        previous_rejection=False,
        incoming_payment_countries=("UK", "India"),
    )


@pytest.fixture
def high_risk_case(low_risk_case: CaseInput) -> CaseInput:
    """Non-resident crypto consultant from a sanctioned nationality"""
    return replace(
        low_risk_case,
        applicant_nationality="Iran",
        uae_residency=False,
        license_activity="Cryptocurrency Consulting",
        incoming_payment_countries=("Syria",),
    )


@pytest.fixture
def make_bank() -> Callable[..., BankProfile]:
    """Factory for neutral bank profiles; override any field by keyword"""

    def _make_bank(**overrides) -> BankProfile:
        defaults = dict(
            name="Test Bank",
            code="TEST",
            type="conventional",
            tier="tier2",
            preferred_jurisdictions=frozenset({"both"}),
            preferred_business_models=frozenset({"consulting"}),
            preferred_activity_keywords=(),
            avoid_activity_keywords=(),
            min_monthly_turnover_band="Below AED 50,000",
            accepts_non_residents=True,
            accepts_high_risk_nationalities=False,
            risk_tolerance="medium",
            strengths=(),
            weaknesses=(),
            processing_speed="medium",
            typical_approval_days=14,
            special_conditions=(),
        )
        defaults.update(overrides)
        return BankProfile(**defaults)

    return _make_bank
