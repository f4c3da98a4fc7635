"""Tests for the breeding API endpoints."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from shobergen.engine import encode
from shobergen.server.app import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def breed_body() -> dict:
    """A valid breeding request."""
    return {
        "parent1_dna": encode(1, 2, 3, 4, 0),
        "parent2_dna": encode(5, 6, 7, 8, 1),
        "parent1_generation": 2,
        "parent2_generation": 1,
    }


class TestEligibilityEndpoint:
    """Tests for POST /api/v1/breeding/eligibility."""

    def test_eligible(self, client: TestClient) -> None:
        """No cooldown and not for sale is eligible."""
        response = client.post("/api/v1/breeding/eligibility", json={})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["can_breed"] is True

    def test_for_sale(self, client: TestClient) -> None:
        """For-sale shobers cannot breed."""
        response = client.post("/api/v1/breeding/eligibility", json={"is_for_sale": True})
        data = response.json()
        assert data["can_breed"] is False
        assert "for sale" in data["reason"]

    def test_active_cooldown(self, client: TestClient) -> None:
        """An active cooldown reports remaining time."""
        until = (datetime.now(UTC) + timedelta(hours=2)).isoformat()
        response = client.post("/api/v1/breeding/eligibility", json={"cooldown_until": until})
        data = response.json()
        assert data["can_breed"] is False
        assert "cooldown" in data["reason"]
        assert data["cooldown_remaining"] > 0
        assert data["cooldown_display"].startswith("1h")

    def test_expired_cooldown(self, client: TestClient) -> None:
        """A past cooldown does not block breeding."""
        until = (datetime.now(UTC) - timedelta(minutes=5)).isoformat()
        response = client.post("/api/v1/breeding/eligibility", json={"cooldown_until": until})
        assert response.json()["can_breed"] is True


class TestBreedEndpoint:
    """Tests for POST /api/v1/breeding/breed."""

    def test_breeds(self, client: TestClient, breed_body: dict) -> None:
        """Breeding returns the child and bookkeeping."""
        response = client.post("/api/v1/breeding/breed", json=breed_body)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["child_dna"]) == 24
        assert data["child_generation"] == 3
        assert data["cost"] == 78
        assert data["cooldown_end1"].endswith("Z")
        assert set(data["inherited_traits"]) == {
            "base_color_from",
            "eye_style_from",
            "accessory_from",
            "accessory_color_from",
            "has_mutation",
        }

    def test_self_breeding(self, client: TestClient, breed_body: dict) -> None:
        """The engine allows breeding a genome with itself."""
        breed_body["parent2_dna"] = breed_body["parent1_dna"]
        response = client.post("/api/v1/breeding/breed", json=breed_body)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["child_generation"] == 3

    @pytest.mark.parametrize("dna", ["invalid", "zz" * 12, "0" * 23])
    def test_malformed_genome_rejected(
        self, client: TestClient, breed_body: dict, dna: str
    ) -> None:
        """Malformed parent genomes fail validation."""
        breed_body["parent1_dna"] = dna
        response = client.post("/api/v1/breeding/breed", json=breed_body)
        assert response.status_code == 422

    def test_negative_generation_rejected(self, client: TestClient, breed_body: dict) -> None:
        """Generations must be non-negative."""
        breed_body["parent1_generation"] = -1
        response = client.post("/api/v1/breeding/breed", json=breed_body)
        assert response.status_code == 422


class TestEconomyEndpoints:
    """Tests for cost, stud fee and cooldown endpoints."""

    def test_cost(self, client: TestClient) -> None:
        """Cost for a gen 0 pair is 100."""
        response = client.get(
            "/api/v1/breeding/cost", params={"parent1_generation": 0, "parent2_generation": 0}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"cost": 100}

    def test_cost_requires_generations(self, client: TestClient) -> None:
        """Missing query parameters fail validation."""
        response = client.get("/api/v1/breeding/cost")
        assert response.status_code == 422

    def test_stud_fee(self, client: TestClient) -> None:
        """Gen 0 studs charge the full rarity score."""
        response = client.get(
            "/api/v1/breeding/stud-fee", params={"rarity_score": 120, "generation": 0}
        )
        assert response.json() == {"fee": 120}

    def test_cooldown(self, client: TestClient) -> None:
        """Generation 3 cools down for 1.5 hours."""
        response = client.get("/api/v1/breeding/cooldown/3")
        assert response.json() == {"generation": 3, "cooldown_ms": 5_400_000, "display": "1h 30m"}

    def test_cooldown_unmapped_generation(self, client: TestClient) -> None:
        """Unmapped generations fall back to one hour."""
        response = client.get("/api/v1/breeding/cooldown/-1")
        assert response.json()["cooldown_ms"] == 3_600_000
