"""Tests for health endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from andalus.infrastructure.config import settings
from andalus.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient) -> None:
        """Test health check endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "andalus-catalog"
        assert "version" in data

    def test_readiness_check(self, client: TestClient) -> None:
        """Test readiness check reports the CMS configuration."""
        with patch.object(settings, "cms_url", "https://cms.example.com/graphql"):
            response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "cms_configured": True}

    def test_readiness_without_cms(self, client: TestClient) -> None:
        """The site is ready even without a CMS endpoint."""
        with patch.object(settings, "cms_url", None):
            response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["cms_configured"] is False
