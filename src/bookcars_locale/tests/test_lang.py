"""Tests for the declared catalogs of both surfaces."""

from datetime import date

import pytest

from bookcars_locale.config.settings import Settings
from bookcars_locale.lang import (
    create_registries,
    create_registry,
    frontend,
    surface_catalogs,
)
from bookcars_locale.lang.backend import CommissionAgreementKey, HeaderKey
from bookcars_locale.lang.frontend import BookingsKey, CarsKey, ContactFormKey, FooterKey
from bookcars_locale.services.catalog import CatalogConfigurationError, Surface


class TestCreateRegistries:
    """Tests for registry construction."""

    def test_every_catalog_registers(self, settings: Settings) -> None:
        """Test all catalogs fully define French."""
        registries = create_registries("fr", settings)
        assert set(registries) == set(Surface)
        for surface, registry in registries.items():
            assert len(registry) == len(surface_catalogs(surface, settings))
            assert registry.surface is surface

    @pytest.mark.parametrize("default_language", ["en", "es"])
    def test_default_without_full_coverage_fails_fast(
        self, settings: Settings, default_language: str
    ) -> None:
        """Test a default language missing from a catalog fails at startup."""
        with pytest.raises(CatalogConfigurationError):
            create_registries(default_language, settings)

    def test_english_default_names_the_gaps(self, settings: Settings) -> None:
        """Test the failure lists the car keys without an English text."""
        with pytest.raises(CatalogConfigurationError, match="DRIVER_LICENSE"):
            create_registry(Surface.FRONTEND, "en", settings)
        assert len(create_registry(Surface.BACKEND, "en", settings)) == 6

    def test_group_names(self, settings: Settings) -> None:
        """Test the groups registered for each surface."""
        assert create_registry(Surface.FRONTEND, "fr", settings).groups() == [
            "activate",
            "bookings",
            "car-range-filter",
            "cars",
            "contact-form",
            "footer",
            "home",
            "location-carrousel",
            "notifications",
            "reset-password",
            "search",
            "sign-in",
            "sign-up",
            "supplier-page",
        ]
        assert create_registry(Surface.BACKEND, "fr", settings).groups() == [
            "car-range-filter",
            "commission-agreement",
            "header",
            "no-match",
            "sign-in",
            "user-list",
        ]

    def test_settings_default_to_application_settings(self) -> None:
        """Test registries build without explicit settings."""
        registry = create_registry(Surface.FRONTEND, "fr")
        assert registry.lookup("cars", CarsKey.LESS_THAN_VALUE_1, "fr") == "Moins de 250 $"


class TestDeclaredStrings:
    """Tests for strings carried as authored."""

    @pytest.fixture
    def frontend_registry(self, settings: Settings):
        return create_registry(Surface.FRONTEND, "fr", settings)

    @pytest.fixture
    def backend_registry(self, settings: Settings):
        return create_registry(Surface.BACKEND, "fr", settings)

    def test_bookings(self, frontend_registry) -> None:
        """Test the bookings group in all three languages."""
        lookup = frontend_registry.lookup
        assert lookup("bookings", BookingsKey.NEW_BOOKING, "fr") == "Nouvelle réservation"
        assert lookup("bookings", BookingsKey.NEW_BOOKING, "en") == "New Booking"
        assert lookup("bookings", BookingsKey.NEW_BOOKING, "es") == "Nueva reserva"

    def test_car_range_filter_differs_between_surfaces(
        self, frontend_registry, backend_registry
    ) -> None:
        """Test the car range labels are kept as authored on each surface."""
        assert frontend_registry.lookup("car-range-filter", "MINI", "fr") == "Petite voiture"
        assert frontend_registry.lookup("car-range-filter", "MINI", "en") == "Mini"
        assert backend_registry.lookup("car-range-filter", "MINI", "fr") == "Mini"
        assert backend_registry.lookup("car-range-filter", "MINI", "en") == "Petite voiture"

    def test_footer_spanish_gap(self, frontend_registry) -> None:
        """Test the Spanish footer lacks the privacy entry."""
        lookup = frontend_registry.lookup
        assert lookup("footer", FooterKey.PRIVACY, "es") is None
        assert lookup("footer", FooterKey.PRIVACY, "es", "Privacidad") == "Privacidad"
        assert lookup("footer", FooterKey.PRIVACY, "en") == "Politique de Confidentialité"

    def test_footer_copyright_year(self, frontend_registry) -> None:
        """Test the copyright line carries the current year."""
        text = frontend_registry.lookup("footer", FooterKey.COPYRIGHT_PART1, "en")
        assert text == f"Copyright © {date.today().year} Plany"

    def test_footer_copyright_year_follows_the_calendar(
        self, frontend_registry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the copyright year is read at lookup time, not at import."""

        class NewYear(date):
            @classmethod
            def today(cls) -> date:
                return date(2031, 1, 1)

        monkeypatch.setattr(frontend, "date", NewYear)

        assert (
            frontend_registry.lookup("footer", FooterKey.COPYRIGHT_PART1, "fr")
            == "Copyright © 2031 Plany"
        )
        assert frontend_registry.view("footer", "es").as_dict()["COPYRIGHT_PART1"] == (
            "Copyright © 2031 Plany"
        )

    def test_language_without_table_serves_default(self, frontend_registry) -> None:
        """Test Spanish search strings come from the French table."""
        view = frontend_registry.view("search", "es")
        assert view.table_language == "fr"
        assert view.get("VIEW_ON_MAP") == "Voir sur la carte"

    def test_greek_contact_form(self, frontend_registry) -> None:
        """Test the contact form carries its Greek table."""
        view = frontend_registry.view("contact-form", "el")
        assert view.table_language == "el"
        assert view[ContactFormKey.CONTACT_HEADING] == "Επικοινωνία"

    def test_sign_in_without_spanish_table(self, frontend_registry) -> None:
        assert frontend_registry.view("sign-in", "es").table_language == "fr"
        assert frontend_registry.lookup("sign-in", "SIGN_IN", "en") == "Sign in"

    def test_backend_header_as_authored(self, backend_registry) -> None:
        """Test back-office header labels are served unchanged."""
        assert backend_registry.lookup("header", HeaderKey.REVIEWS, "en") == "Avis"
        assert backend_registry.lookup("header", HeaderKey.STATS, "en") == "insights"

    def test_commission_agreement_placeholders(self, backend_registry) -> None:
        """Test commission texts are filled in by the caller."""
        view = backend_registry.view("commission-agreement", "en")
        text = view.format(
            CommissionAgreementKey.EXAMPLE_CLIENT, amount="110 DT", base="100 DT", percent=10
        )
        assert text == "Price shown to the client: 110 DT (100 DT + 10%)"


class TestCarDepositLabels:
    """Tests for deposit filter labels built from settings."""

    def _labels(self, settings: Settings, language: str) -> list[str]:
        registry = create_registry(Surface.FRONTEND, "fr", settings)
        view = registry.view("cars", language)
        return [
            view[CarsKey.LESS_THAN_VALUE_1],
            view[CarsKey.LESS_THAN_VALUE_2],
            view[CarsKey.LESS_THAN_VALUE_3],
        ]

    def test_dollar_is_written_first_in_english(self, settings: Settings) -> None:
        assert self._labels(settings, "en") == [
            "Less than $250",
            "Less than $500",
            "Less than $750",
        ]

    @pytest.mark.parametrize(
        ("language", "expected"),
        [("fr", "Moins de 250 $"), ("es", "Menos de 250 $")],
    )
    def test_dollar_is_written_last_elsewhere(
        self, settings: Settings, language: str, expected: str
    ) -> None:
        assert self._labels(settings, language)[0] == expected

    def test_configured_currency_and_thresholds(self, settings: Settings) -> None:
        """Test another currency is written after the amount in every language."""
        dinars = settings.model_copy(
            update={
                "currency": "DT",
                "deposit_filter_value_1": 300,
                "deposit_filter_value_2": 600,
                "deposit_filter_value_3": 900,
            }
        )
        assert self._labels(dinars, "en") == [
            "Less than 300 DT",
            "Less than 600 DT",
            "Less than 900 DT",
        ]
        assert self._labels(dinars, "fr")[2] == "Moins de 900 DT"

    def test_catalog_factory(self, settings: Settings) -> None:
        """Test each call builds a fresh catalog from its settings."""
        euros = settings.model_copy(update={"currency": "€"})
        catalog = frontend.create_cars_catalog(euros)
        assert catalog.group == "cars"
        assert catalog.surface is Surface.FRONTEND
        assert catalog.missing_keys("fr") == []
        assert catalog.view("en", "fr").get(CarsKey.LESS_THAN_VALUE_2) == "Less than 500 €"
