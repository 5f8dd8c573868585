"""Test configuration and fixtures."""

import os
from collections.abc import AsyncIterator, Iterator
from enum import Enum
from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from bookcars_locale.app import create_app
from bookcars_locale.config.settings import Settings, get_settings
from bookcars_locale.services.catalog import Catalog, CatalogRegistry
from bookcars_locale.services.locale_context import locale_scope


@pytest.fixture(scope="session", autouse=True)
def set_test_env() -> None:
    """Set test environment variables."""
    os.environ["BC_LANGUAGES"] = '["en", "fr", "es"]'
    os.environ["BC_DEFAULT_LANGUAGE"] = "fr"
    os.environ["BC_ENVIRONMENT"] = "development"
    os.environ["BC_LOG_LEVEL"] = "DEBUG"
    os.environ["BC_LOG_TO_FILE"] = "false"
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_locale() -> Iterator[None]:
    """Give every test its own locale, starting at the default language."""
    with locale_scope("fr"):
        yield


class BookingsKey(str, Enum):
    """Keys of the sample catalog."""

    NEW_BOOKING = "NEW_BOOKING"
    SUPPLIERS_RETRY = "SUPPLIERS_RETRY"


@pytest.fixture
def bookings_catalog() -> Catalog[BookingsKey]:
    """Sample catalog with a partial Spanish table."""
    return Catalog(
        "bookings",
        BookingsKey,
        {
            "fr": {
                BookingsKey.NEW_BOOKING: "Nouvelle réservation",
                BookingsKey.SUPPLIERS_RETRY: "Réessayer",
            },
            "en": {
                BookingsKey.NEW_BOOKING: "New Booking",
                BookingsKey.SUPPLIERS_RETRY: "Retry",
            },
            "es": {
                BookingsKey.NEW_BOOKING: "Nueva reserva",
            },
        },
    )


@pytest.fixture
def registry(bookings_catalog: Catalog[BookingsKey]) -> CatalogRegistry:
    """Registry with the sample catalog registered, default language fr."""
    registry = CatalogRegistry(default_language="fr")
    registry.register(bookings_catalog)
    return registry


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        languages=["en", "fr", "es"],
        default_language="fr",
        environment="development",
        log_level="DEBUG",
        log_to_file=False,
    )


@pytest.fixture
def settings_with_ip_language(settings: Settings) -> Settings:
    """Create test settings deriving first-visit languages from the country."""
    return settings.model_copy(
        update={"set_language_from_ip": True, "languages": ["en", "fr", "el"]}
    )


@pytest.fixture
def app(settings: Settings) -> Any:
    """Create test FastAPI application."""
    return create_app(settings)


@pytest.fixture
def client(app: Any) -> Iterator[TestClient]:
    """Create synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client_with_ip_language(settings_with_ip_language: Settings) -> Iterator[TestClient]:
    """Create synchronous test client with country-based languages enabled."""
    with TestClient(create_app(settings_with_ip_language)) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: Any) -> AsyncIterator[AsyncClient]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
