"""Tests for language resolution utilities."""

import pytest

from bookcars_locale.utils.language import (
    ResolutionContext,
    base_language_code,
    language_for_country,
    normalize_language,
    parse_accept_language,
    resolve_language,
)

AVAILABLE = ["fr", "en"]


def _ctx(requested: str | None, stored: str | None) -> ResolutionContext:
    return ResolutionContext(
        requested_language=requested,
        stored_language=stored,
        available_languages=AVAILABLE,
        default_language="fr",
    )


class TestNormalizeLanguage:
    """Tests for the request > stored > default priority chain."""

    def test_requested_language_wins_when_available(self) -> None:
        """Test an available requested language beats the stored one."""
        assert normalize_language(_ctx("en", "fr")) == "en"

    @pytest.mark.parametrize("stored", [None, "", "fr", "en", "es"])
    def test_requested_language_ignores_stored(self, stored: str | None) -> None:
        """Test the stored language never overrides an available request."""
        assert normalize_language(_ctx("en", stored)) == "en"

    def test_stored_language_used_for_unsupported_request(self) -> None:
        """Test the stored language wins over an unsupported request."""
        assert normalize_language(_ctx("de", "fr")) == "fr"
        assert normalize_language(_ctx("de", "en")) == "en"

    def test_default_when_nothing_is_supported(self) -> None:
        """Test the default language is the last resort."""
        assert normalize_language(_ctx("de", "es")) == "fr"
        assert normalize_language(_ctx("de", None)) == "fr"

    def test_default_returned_even_when_not_available(self) -> None:
        """Test the default language is returned as configured."""
        ctx = ResolutionContext("de", None, ["en"], "fr")
        assert normalize_language(ctx) == "fr"

    @pytest.mark.parametrize("requested", [None, ""])
    def test_no_request_means_no_opinion(self, requested: str | None) -> None:
        """Test a missing request yields None, whatever is stored."""
        assert normalize_language(_ctx(requested, "en")) is None

    def test_is_deterministic(self) -> None:
        """Test identical inputs give identical outputs."""
        ctx = _ctx("de", "en")
        assert normalize_language(ctx) == normalize_language(ctx) == "en"

    def test_unsupported_languages_from_other_setup(self) -> None:
        """Test the chain with a three-language setup."""
        languages = ["en", "fr", "el"]
        assert normalize_language(ResolutionContext("fr", None, languages, "en")) == "fr"
        assert normalize_language(ResolutionContext("es", "el", languages, "en")) == "el"
        assert normalize_language(ResolutionContext("es", "pt", languages, "en")) == "en"
        assert normalize_language(ResolutionContext(None, "fr", languages, "en")) is None


class TestResolveLanguage:
    """Tests for full resolution including the no-request case."""

    def test_unsupported_request_uses_stored(self) -> None:
        """Test scenario: de requested, fr stored -> fr."""
        assert resolve_language(_ctx("de", "fr")) == "fr"

    def test_supported_request_wins(self) -> None:
        """Test scenario: en requested, fr stored -> en."""
        assert resolve_language(_ctx("en", "fr")) == "en"

    def test_no_signals_gives_default(self) -> None:
        """Test scenario: nothing requested or stored -> fr."""
        assert resolve_language(_ctx(None, None)) == "fr"

    def test_empty_request_with_unsupported_stored_gives_default(self) -> None:
        """Test scenario: empty request, es stored but unsupported -> fr."""
        assert resolve_language(_ctx("", "es")) == "fr"

    def test_empty_request_uses_available_stored(self) -> None:
        """Test the stored language applies when nothing is requested."""
        assert resolve_language(_ctx("", "en")) == "en"
        assert resolve_language(_ctx(None, "en"), current="fr") == "en"

    def test_keeps_current_language_without_signals(self) -> None:
        """Test the current locale is kept when no signal resolves."""
        assert resolve_language(_ctx(None, "es"), current="en") == "en"

    def test_request_beats_current_language(self) -> None:
        """Test an explicit request overrides the current locale."""
        assert resolve_language(_ctx("fr", None), current="en") == "fr"


class TestBaseLanguageCode:
    """Tests for language tag reduction."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [("en-US", "en"), ("pt_BR", "pt"), ("FR", "fr"), (" es ", "es"), ("el", "el")],
    )
    def test_reduces_tags(self, tag: str, expected: str) -> None:
        """Test region suffixes are stripped and case is lowered."""
        assert base_language_code(tag) == expected

    @pytest.mark.parametrize("tag", [None, "", "   "])
    def test_empty_input(self, tag: str | None) -> None:
        """Test empty input returns None."""
        assert base_language_code(tag) is None


class TestParseAcceptLanguage:
    """Tests for Accept-Language parsing."""

    def test_first_available_language(self) -> None:
        """Test unsupported entries are skipped."""
        assert parse_accept_language("de-DE,fr;q=0.8,en;q=0.5", AVAILABLE) == "fr"

    def test_quality_ordering(self) -> None:
        """Test higher q weights win regardless of position."""
        assert parse_accept_language("fr;q=0.3,en;q=0.9", AVAILABLE) == "en"

    def test_equal_weights_keep_header_order(self) -> None:
        """Test ties keep the header order."""
        assert parse_accept_language("en-GB,fr", AVAILABLE) == "en"

    def test_zero_and_invalid_weights_are_ignored(self) -> None:
        """Test q=0 and malformed weights exclude the entry."""
        assert parse_accept_language("en;q=0,fr;q=abc", AVAILABLE) is None

    def test_weight_after_other_parameters(self) -> None:
        """Test q is read when other parameters come first."""
        assert parse_accept_language("fr;level=1;q=0,en;q=0.5", ["fr", "en"]) == "en"
        assert parse_accept_language("fr;level=1;q=0.2,en;q=0.5", ["fr", "en"]) == "en"

    def test_weight_name_is_case_insensitive(self) -> None:
        assert parse_accept_language("fr;Q=0,en;q=0.4", ["fr", "en"]) == "en"
        assert parse_accept_language("fr ; q = 0.9, en;q=0.5", ["fr", "en"]) == "fr"

    @pytest.mark.parametrize("header", [None, "", "de,it"])
    def test_no_match(self, header: str | None) -> None:
        """Test None when no entry is available."""
        assert parse_accept_language(header, AVAILABLE) is None


class TestLanguageForCountry:
    """Tests for country based first-visit languages."""

    @pytest.mark.parametrize(
        ("country", "expected"),
        [("France", "fr"), ("Morocco", "fr"), ("Greece", "el"), ("Spain", "en")],
    )
    def test_country_mapping(self, country: str, expected: str) -> None:
        """Test known countries map to their language."""
        assert language_for_country(country, "en") == expected

    def test_missing_country(self) -> None:
        """Test a missing country gives the default."""
        assert language_for_country(None, "fr") == "fr"
