"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from bank_readiness.api.dependencies import get_catalog
from bank_readiness.domain.catalog import BANK_CATALOG


@pytest.fixture
def case_payload() -> dict:
    """Clean profile: resident consulting company"""
    return {
        "applicant_nationality": "India",
        "uae_residency": True,
        "company_jurisdiction": "mainland",
        "license_activity": "IT services",
        "business_model": "consulting",
        "expected_monthly_inflow": "AED 50,000 - 100,000",
        "source_of_funds": "Business Revenue",
        "incoming_payment_countries": ["UK"],
        "previous_rejection": False,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "bank_readiness_assessment_total" in response.text


def test_assessment_endpoint_low_risk(client: TestClient, case_payload: dict):
    """Test POST /v1/assessment for a clean profile"""
    response = client.post("/v1/assessment", json=case_payload)

    assert response.status_code == 200
    assert response.headers["X-Request-ID"]
    data = response.json()
    assert data["risk_score"] == 0
    assert data["risk_category"] == "low"
    assert data["risk_flags"] == []
    assert 0 < len(data["recommended_banks"]) <= 6
    assert data["best_bank"] == data["recommended_banks"][0]["bank_name"]
    assert data["required_documents"][0] == "Trade License copy"


def test_assessment_endpoint_high_risk(client: TestClient, case_payload: dict):
    """Test POST /v1/assessment with flags in evaluation order"""
    case_payload.update(
        applicant_nationality="Iran",
        uae_residency=False,
        license_activity="Cryptocurrency Consulting",
        incoming_payment_countries=["Syria"],
    )

    response = client.post("/v1/assessment", json=case_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["risk_score"] == 82
    assert data["risk_category"] == "high"
    assert data["risk_flags"][0] == "High-risk nationality: Iran"
    assert len(data["banks_to_avoid"]) <= 5
    avoided = {a["bank_name"] for a in data["banks_to_avoid"]}
    assert not avoided & {r["bank_name"] for r in data["recommended_banks"]}


def test_assessment_endpoint_free_text_passes_through(client: TestClient, case_payload: dict):
    """Unknown inflow band and source of funds are accepted by the permissive core"""
    case_payload.update(expected_monthly_inflow="not sure", source_of_funds="Crowdfunding")

    response = client.post("/v1/assessment", json=case_payload)

    assert response.status_code == 200
    assert response.json()["risk_score"] == 0


def test_assessment_endpoint_rejects_unknown_business_model(client: TestClient, case_payload: dict):
    case_payload["business_model"] = "unicorn"

    response = client.post("/v1/assessment", json=case_payload)

    assert response.status_code == 422


def test_assessment_endpoint_missing_field(client: TestClient, case_payload: dict):
    del case_payload["company_jurisdiction"]

    response = client.post("/v1/assessment", json=case_payload)

    assert response.status_code == 422


def test_list_banks_endpoint(client: TestClient):
    """Test GET /v1/banks returns the catalog in order"""
    response = client.get("/v1/banks")

    assert response.status_code == 200
    codes = [bank["code"] for bank in response.json()["banks"]]
    assert codes == [bank.code for bank in BANK_CATALOG]


def test_get_bank_endpoint(client: TestClient):
    """Test GET /v1/banks/{code} with a lowercase code"""
    response = client.get("/v1/banks/rakbank")

    assert response.status_code == 200
    data = response.json()
    assert data["code"] == "RAKBANK"
    assert data["risk_tolerance"] == "high"
    assert data["avoid_activity_keywords"] == ["crypto", "gambling", "weapons"]
    assert data["preferred_activity_keywords"][0] == "general trading"


def test_get_bank_not_found(client: TestClient):
    response = client.get("/v1/banks/NOPE")
    assert response.status_code == 404


def test_catalog_dependency_override(client: TestClient, make_bank, case_payload: dict):
    """Injected catalog drives both listing and ranking"""
    bank = make_bank(name="Fixture Bank", code="FIX", risk_tolerance="low")
    client.app.dependency_overrides[get_catalog] = lambda: (bank,)

    banks_response = client.get("/v1/banks")
    assessment_response = client.post("/v1/assessment", json=case_payload)

    assert [b["code"] for b in banks_response.json()["banks"]] == ["FIX"]
    data = assessment_response.json()
    assert data["best_bank"] == "Fixture Bank"
    assert data["recommended_banks"][0]["fit_score"] == 100


def test_request_id_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"
