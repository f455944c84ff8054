"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from docfacts.api.main import create_app
from docfacts.config.profile_loader import ProfileConfig
from docfacts.engines import create_engines


@pytest.fixture
def client():
    engines = create_engines(ProfileConfig(name="test"))
    return TestClient(create_app(engines))


@pytest.fixture
def strict_client():
    engines = create_engines(ProfileConfig(name="test-strict", ogm={"max_corrections": 0}))
    return TestClient(create_app(engines))


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["profile"] == "test"
    assert data["docs"] == "/docs"


class TestOgmEndpoint:
    def test_valid(self, client):
        response = client.post("/api/ogm/validate", json={"reference": "+++123/4567/89002+++"})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "valid"
        assert data["is_valid"] is True
        assert data["normalized"] == "+++123/4567/89002+++"
        assert data["message"].startswith("VALID")

    def test_corrected(self, client):
        response = client.post("/api/ogm/validate", json={"reference": "+++I23/4567/89002+++"})

        data = response.json()
        assert data["status"] == "corrected_valid"
        assert data["original"] == "+++I23/4567/89002+++"
        assert data["corrections"] == [{"position": 3, "from": "I", "to": "1"}]

    def test_checksum_failure(self, client):
        data = client.post("/api/ogm/validate", json={"reference": "+++123/4567/89099+++"}).json()

        assert data["status"] == "invalid_checksum"
        assert data["is_valid"] is False
        assert data["expected"] == "02"
        assert data["actual"] == "99"

    def test_strict_profile_disables_correction(self, strict_client):
        data = strict_client.post("/api/ogm/validate", json={"reference": "+++I23/4567/89002+++"}).json()
        assert data["status"] == "invalid_format"

    def test_missing_reference(self, client):
        assert client.post("/api/ogm/validate", json={}).status_code == 422


class TestDirectionEndpoint:
    def test_vat_match(self, client):
        response = client.post(
            "/api/direction/resolve",
            json={
                "tenant": {"legal_name": "Invoid Vision", "vat_number": "BE0123456789"},
                "extraction": {
                    "kind": "invoice",
                    "seller_vat": "BE 0123.456.789",
                    "buyer_vat": "BE0987654321",
                },
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["direction"] == "Outbound"
        assert data["source"] == "VatMatch"
        assert data["confidence"] == 1.0
        assert data["counterparty_vat"] == "BE0987654321"

    def test_associated_person_names(self, client):
        data = client.post(
            "/api/direction/resolve",
            json={
                "tenant": {"legal_name": "Invoid Vision", "type": "Freelancer"},
                "extraction": {"kind": "invoice", "seller_name": "Globex Corporation", "buyer_name": "Marie Dubois"},
                "associated_person_names": ["Marie Dubois"],
            },
        ).json()

        assert data["direction"] == "Inbound"
        assert data["source"] == "NameMatch"
        assert data["matched_field"] == "buyerName"

    def test_directionless_kind(self, client):
        data = client.post(
            "/api/direction/resolve",
            json={"tenant": {"legal_name": "Invoid"}, "extraction": {"kind": "quote"}},
        ).json()
        assert data["direction"] == "Unknown"
        assert "Quote" in data["reasoning"]

    def test_unknown_kind_is_rejected(self, client):
        response = client.post(
            "/api/direction/resolve",
            json={"tenant": {"legal_name": "Invoid"}, "extraction": {"kind": "letter"}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Invalid document payload"
        assert "letter" in data["detail"]
