"""End-to-end tests for the locale HTTP API."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check_returns_healthy(self, client: TestClient) -> None:
        """Test health endpoint returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestLanguageResolution:
    """Tests for the per-request language."""

    def test_default_language_without_signals(self, client: TestClient) -> None:
        """Test a first request without hints uses the default."""
        response = client.get("/api/i18n/languages")

        assert response.status_code == 200
        assert response.json() == {
            "languages": ["en", "fr", "es"],
            "default": "fr",
            "current": "fr",
        }
        assert response.headers["content-language"] == "fr"
        assert "set-cookie" not in response.headers

    def test_query_parameter_sets_cookie(self, client: TestClient) -> None:
        """Test an explicit request is used and persisted."""
        response = client.get("/api/i18n/languages", params={"l": "en"})

        assert response.json()["current"] == "en"
        assert "bc-language=en" in response.headers["set-cookie"]

    def test_cookie_is_used_on_next_request(self, client: TestClient) -> None:
        """Test the persisted language applies without a new request."""
        client.get("/api/i18n/languages", params={"l": "en"})
        response = client.get("/api/i18n/languages")

        assert response.json()["current"] == "en"
        assert "set-cookie" not in response.headers

    def test_unsupported_request_keeps_cookie_language(self, client: TestClient) -> None:
        """Test an unsupported request falls back to the stored language."""
        client.cookies.set("bc-language", "es")
        response = client.get("/api/i18n/languages", params={"l": "de"})
        assert response.json()["current"] == "es"

    def test_unsupported_request_without_cookie(self, client: TestClient) -> None:
        """Test an unsupported request with nothing stored gives the default."""
        response = client.get("/api/i18n/languages", params={"l": "de"})
        assert response.json()["current"] == "fr"
        assert "bc-language=fr" in response.headers["set-cookie"]

    def test_accept_language_on_first_visit(self, client: TestClient) -> None:
        """Test the browser language seeds the cookie."""
        response = client.get(
            "/api/i18n/languages", headers={"Accept-Language": "de-DE,en-US;q=0.8"}
        )
        assert response.json()["current"] == "en"
        assert "bc-language=en" in response.headers["set-cookie"]

    def test_country_on_first_visit(self, client_with_ip_language: TestClient) -> None:
        """Test the visitor's country seeds the language when enabled."""
        unknown = client_with_ip_language.get("/api/i18n/languages")
        assert unknown.json()["current"] == "fr"

        response = client_with_ip_language.get(
            "/api/i18n/languages", headers={"X-Country": "Greece"}
        )
        assert response.json()["current"] == "el"
        assert "bc-language=el" in response.headers["set-cookie"]

    @pytest.mark.asyncio
    async def test_concurrent_requests_are_isolated(self, async_client: AsyncClient) -> None:
        """Test concurrent requests each keep their own language."""
        languages = ["en", "fr", "es"] * 4

        responses = await asyncio.gather(
            *(
                async_client.get(
                    "/api/i18n/frontend/catalogs/bookings/NEW_BOOKING",
                    params={"l": language},
                )
                for language in languages
            )
        )
        expected = {"en": "New Booking", "fr": "Nouvelle réservation", "es": "Nueva reserva"}
        for language, response in zip(languages, responses):
            assert response.json()["language"] == language
            assert response.json()["text"] == expected[language]


class TestCatalogEndpoints:
    """Tests for catalog listing and lookup."""

    def test_list_groups(self, client: TestClient) -> None:
        response = client.get("/api/i18n/backend/catalogs")
        assert response.status_code == 200
        assert response.json() == {
            "surface": "backend",
            "groups": [
                "car-range-filter",
                "commission-agreement",
                "header",
                "no-match",
                "sign-in",
                "user-list",
            ],
        }

    def test_unknown_surface(self, client: TestClient) -> None:
        response = client.get("/api/i18n/mobile/catalogs")
        assert response.status_code == 404

    def test_catalog_in_request_language(self, client: TestClient) -> None:
        """Test a full table is served in the request's language."""
        response = client.get("/api/i18n/frontend/catalogs/bookings", params={"l": "en"})

        data = response.json()
        assert data["language"] == "en"
        assert data["table_language"] == "en"
        assert data["strings"]["NEW_BOOKING"] == "New Booking"

    def test_catalog_without_table_serves_default(self, client: TestClient) -> None:
        """Test a language without a table is served the default table."""
        response = client.get("/api/i18n/frontend/catalogs/search", params={"l": "es"})

        data = response.json()
        assert data["language"] == "es"
        assert data["table_language"] == "fr"
        assert data["strings"]["VIEW_ON_MAP"] == "Voir sur la carte"

    def test_unknown_group(self, client: TestClient) -> None:
        response = client.get("/api/i18n/frontend/catalogs/missing")
        assert response.status_code == 404
        assert "missing" in response.json()["detail"]

    def test_string_lookup(self, client: TestClient) -> None:
        response = client.get(
            "/api/i18n/frontend/catalogs/car-range-filter/MINI", params={"l": "fr"}
        )
        assert response.json() == {
            "group": "car-range-filter",
            "key": "MINI",
            "language": "fr",
            "text": "Petite voiture",
        }

    def test_missing_key_uses_caller_default(self, client: TestClient) -> None:
        """Test a gap in a table returns the caller's default, not another language."""
        missing = client.get("/api/i18n/frontend/catalogs/footer/PRIVACY", params={"l": "es"})
        assert missing.status_code == 404

        response = client.get(
            "/api/i18n/frontend/catalogs/footer/PRIVACY",
            params={"l": "es", "default": "Privacidad"},
        )
        assert response.status_code == 200
        assert response.json()["text"] == "Privacidad"

    def test_unknown_key(self, client: TestClient) -> None:
        response = client.get("/api/i18n/frontend/catalogs/footer/NOPE")
        assert response.status_code == 404


class TestAuditEndpoint:
    """Tests for the translation audit endpoint."""

    def test_audit_reports_conflicts_and_gaps(self, client: TestClient) -> None:
        response = client.get("/api/i18n/audit")

        assert response.status_code == 200
        data = response.json()
        assert {c["key"] for c in data["conflicts"]} == {"MINI", "MIDI", "MAXI"}
        assert any(
            m["group"] == "footer" and m["language"] == "es" and m["keys"] == ["PRIVACY"]
            for m in data["missing"]
        )
