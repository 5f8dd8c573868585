"""Tests for catalog consistency reports."""

import logging
from enum import Enum

import pytest

from bookcars_locale.lang import create_registries
from bookcars_locale.services.audit import (
    MissingTranslation,
    TranslationConflict,
    find_missing_translations,
    find_translation_conflicts,
    log_catalog_audit,
)
from bookcars_locale.services.catalog import (
    Catalog,
    CatalogRegistry,
    Surface,
)


class ColorKey(str, Enum):
    RED = "RED"
    BLUE = "BLUE"


def _registry(surface: Surface, tables: dict) -> CatalogRegistry:
    registry = CatalogRegistry("fr", surface=surface)
    registry.register(Catalog("colors", ColorKey, tables, surface=surface))
    return registry


@pytest.fixture
def registries():
    return create_registries("fr")


class TestTranslationConflicts:
    """Tests for swapped translations across surfaces."""

    def test_car_range_labels_are_reported(self, registries) -> None:
        """Test the swapped car range labels are found."""
        conflicts = find_translation_conflicts(registries)
        assert [c.key for c in conflicts] == ["MINI", "MIDI", "MAXI"]
        assert conflicts[0] == TranslationConflict(
            group="car-range-filter",
            key="MINI",
            first_surface="backend",
            second_surface="frontend",
            first_language="en",
            second_language="fr",
            first_text="Petite voiture",
            second_text="Mini",
        )

    def test_identical_catalogs_do_not_conflict(self) -> None:
        """Test consistent translations are not reported."""
        tables = {"fr": {"RED": "Rouge", "BLUE": "Bleu"}, "en": {"RED": "Red", "BLUE": "Blue"}}
        registries = {
            Surface.FRONTEND: _registry(Surface.FRONTEND, tables),
            Surface.BACKEND: _registry(Surface.BACKEND, tables),
        }
        assert find_translation_conflicts(registries) == []

    def test_swap_is_detected(self) -> None:
        """Test a key swapped between languages is reported once."""
        registries = {
            Surface.FRONTEND: _registry(
                Surface.FRONTEND,
                {"fr": {"RED": "Rouge", "BLUE": "Bleu"}, "en": {"RED": "Red", "BLUE": "Blue"}},
            ),
            Surface.BACKEND: _registry(
                Surface.BACKEND,
                {"fr": {"RED": "Red", "BLUE": "Bleu"}, "en": {"RED": "Rouge", "BLUE": "Blue"}},
            ),
        }
        conflicts = find_translation_conflicts(registries)
        assert len(conflicts) == 1
        assert conflicts[0].key == "RED"
        assert (conflicts[0].first_surface, conflicts[0].second_surface) == (
            "backend",
            "frontend",
        )


class TestMissingTranslations:
    """Tests for incomplete non-default tables."""

    def test_frontend_gaps(self, registries) -> None:
        """Test the Spanish gaps of the customer site are listed."""
        missing = find_missing_translations(registries[Surface.FRONTEND], ["en", "fr", "es"])
        by_group = {(m.group, m.language): m for m in missing}

        footer = by_group[("footer", "es")]
        assert footer.keys == ("PRIVACY",)
        assert footer.has_table is True

        search = by_group[("search", "es")]
        assert search.has_table is False
        assert "VIEW_ON_MAP" in search.keys

        assert ("bookings", "es") not in by_group
        assert all(m.language != "fr" for m in missing)

    def test_complete_registry(self) -> None:
        """Test a fully translated registry has no gaps."""
        registry = _registry(
            Surface.FRONTEND,
            {"fr": {"RED": "Rouge", "BLUE": "Bleu"}, "en": {"RED": "Red", "BLUE": "Blue"}},
        )
        assert find_missing_translations(registry, ["fr", "en"]) == []

    def test_record_fields(self) -> None:
        """Test a missing record carries surface and keys."""
        registry = _registry(
            Surface.BACKEND,
            {"fr": {"RED": "Rouge", "BLUE": "Bleu"}, "en": {"RED": "Red"}},
        )
        assert find_missing_translations(registry, ["fr", "en"]) == [
            MissingTranslation(
                surface="backend",
                group="colors",
                language="en",
                keys=("BLUE",),
                has_table=True,
            )
        ]


class TestLogCatalogAudit:
    """Tests for the startup audit log."""

    def test_conflicts_logged_as_warnings(self, registries, caplog) -> None:
        """Test each swapped key produces a warning."""
        with caplog.at_level(logging.INFO, logger="bookcars_locale.audit"):
            log_catalog_audit(registries, ["en", "fr", "es"])

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 3
        assert all("car-range-filter" in r.getMessage() for r in warnings)
        assert any(
            r.levelno == logging.INFO and "footer" in r.getMessage() for r in caplog.records
        )
