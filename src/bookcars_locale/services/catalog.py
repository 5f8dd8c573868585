"""Localized string catalogs and their registry.

A :class:`Catalog` holds one feature group's strings (e.g. ``bookings``)
per language, keyed by a closed ``str`` enum so that every key used by
callers is declared up front. Catalogs are registered once at startup into
a :class:`CatalogRegistry`, which validates them and serves lookups for the
current (or an explicitly given) language.

Example:
    Declare, register and look up::

        class BookingsKey(str, Enum):
            NEW_BOOKING = "NEW_BOOKING"

        registry = CatalogRegistry(default_language="fr")
        registry.register(
            Catalog(
                "bookings",
                BookingsKey,
                {
                    "fr": {BookingsKey.NEW_BOOKING: "Nouvelle réservation"},
                    "en": {BookingsKey.NEW_BOOKING: "New Booking"},
                },
            )
        )
        registry.lookup("bookings", BookingsKey.NEW_BOOKING, "en")  # "New Booking"

Attributes:
    Surface: Platform surfaces owning catalogs.
    Catalog: Immutable per-group translation tables.
    CatalogView: Read-only view of a catalog in one language.
    CatalogRegistry: Validated collection of catalogs for one surface.
"""

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from bookcars_locale.logging_config import get_logger
from bookcars_locale.services.locale_context import get_language

logger = get_logger("catalog")

K = TypeVar("K", bound=Enum)

# Either fixed text or a callable producing it at lookup time
Text = str | Callable[[], str]


class Surface(str, Enum):
    """Platform surfaces that declare their own catalogs.

    Attributes:
        FRONTEND: Customer-facing booking site.
        BACKEND: Admin/back-office site.
    """

    FRONTEND = "frontend"
    BACKEND = "backend"


class CatalogConfigurationError(ValueError):
    """Raised when a catalog declaration cannot be served safely."""


class UnknownCatalogError(KeyError):
    """Raised when a lookup names a group that was never registered."""


def _render(text: Text) -> str:
    return text() if callable(text) else text


class Catalog(Generic[K]):
    """Immutable translation tables of one feature group.

    Args:
        group: Group name, unique within a surface (e.g. ``"bookings"``).
        keys: Enum class declaring every key of the group.
        translations: Language code -> key -> text. Keys may be enum
            members or their string values; a text may be a zero-argument
            callable, evaluated on every lookup.
        surface: Surface the catalog belongs to.

    Raises:
        CatalogConfigurationError: If a table uses a key outside ``keys``.
    """

    def __init__(
        self,
        group: str,
        keys: type[K],
        translations: Mapping[str, Mapping[Any, Text]],
        surface: Surface = Surface.FRONTEND,
    ) -> None:
        self._group = group
        self._keys = keys
        self._surface = surface

        tables: dict[str, Mapping[K, Text]] = {}
        for language, table in translations.items():
            frozen: dict[K, Text] = {}
            for key, text in table.items():
                try:
                    member = keys(key)
                except ValueError as err:
                    raise CatalogConfigurationError(
                        f"Catalog {group!r}: unknown key {key!r} in {language!r} table"
                    ) from err
                frozen[member] = text
            tables[language] = MappingProxyType(frozen)
        self._tables: Mapping[str, Mapping[K, Text]] = MappingProxyType(tables)

    @property
    def group(self) -> str:
        return self._group

    @property
    def keys(self) -> type[K]:
        return self._keys

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def languages(self) -> tuple[str, ...]:
        """Languages that have a table, in declaration order."""
        return tuple(self._tables)

    def has_language(self, language: str) -> bool:
        return language in self._tables

    def missing_keys(self, language: str) -> list[K]:
        """List the declared keys absent from a language's table.

        A language without any table is missing every key.
        """
        table = self._tables.get(language, {})
        return [key for key in self._keys if key not in table]

    def validate(self, default_language: str) -> None:
        """Check that the default language table exists and is complete.

        Args:
            default_language: The configured default language.

        Raises:
            CatalogConfigurationError: If the default table is missing or
                lacks keys.
        """
        if default_language not in self._tables:
            raise CatalogConfigurationError(
                f"Catalog {self._group!r} ({self._surface.value}) has no "
                f"{default_language!r} table"
            )
        missing = self.missing_keys(default_language)
        if missing:
            names = ", ".join(key.value for key in missing)
            raise CatalogConfigurationError(
                f"Catalog {self._group!r} ({self._surface.value}) is missing "
                f"{default_language!r} translations for: {names}"
            )

    def table(self, language: str, default_language: str) -> Mapping[K, Text]:
        """Get the table for a language, or the default table if it has none."""
        if language in self._tables:
            return self._tables[language]
        return self._tables[default_language]

    def view(self, language: str, default_language: str) -> "CatalogView[K]":
        """Get a read-only view of the catalog in one language."""
        table_language = language if language in self._tables else default_language
        return CatalogView(self, language, table_language, self._tables[table_language])

    def coerce_key(self, key: K | str) -> K | None:
        """Convert a key or its string value to the enum member, if declared."""
        try:
            return self._keys(key)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return (
            f"Catalog(group={self._group!r}, surface={self._surface.value!r}, "
            f"languages={list(self._tables)!r})"
        )


class CatalogView(Generic[K]):
    """A catalog seen through one language.

    Missing keys are not filled from other languages: :meth:`get` and
    :meth:`format` return the caller's default instead.

    Attributes:
        catalog: The underlying catalog.
        language: The language the view was requested for.
        table_language: The language whose table actually backs the view.
    """

    def __init__(
        self,
        catalog: Catalog[K],
        language: str,
        table_language: str,
        table: Mapping[K, Text],
    ) -> None:
        self.catalog = catalog
        self.language = language
        self.table_language = table_language
        self._table = table

    def __getitem__(self, key: K | str) -> str:
        member = self.catalog.coerce_key(key)
        if member is None or member not in self._table:
            raise KeyError(key)
        return _render(self._table[member])

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        member = self.catalog.coerce_key(key)
        return member is not None and member in self._table

    def get(self, key: K | str, default: str | None = None) -> str | None:
        member = self.catalog.coerce_key(key)
        if member is None:
            return default
        if member not in self._table:
            return default
        return _render(self._table[member])

    def format(self, key: K | str, default: str | None = None, **values: Any) -> str | None:
        """Look up a key and substitute ``{name}`` placeholders.

        Placeholders without a value leave the text unformatted.

        Args:
            key: The key to look up.
            default: Fallback text when the key is missing.
            **values: Placeholder values.

        Returns:
            The formatted text, or the default when the key is missing.
        """
        text = self.get(key, default)
        if text is None or not values:
            return text
        try:
            return text.format(**values)
        except (KeyError, IndexError, ValueError):
            logger.debug(
                "Could not format %s.%s with %s", self.catalog.group, key, sorted(values)
            )
            return text

    def as_dict(self) -> dict[str, str]:
        """Return the backing table with plain string keys."""
        return {key.value: _render(text) for key, text in self._table.items()}


class CatalogRegistry:
    """Validated catalogs of one surface, looked up by group name.

    Args:
        default_language: Language every catalog must fully define.
        surface: Surface whose catalogs are registered here, if restricted.
    """

    def __init__(self, default_language: str, surface: Surface | None = None) -> None:
        self.default_language = default_language
        self.surface = surface
        self._catalogs: dict[str, Catalog[Any]] = {}

    def register(self, catalog: Catalog[K]) -> Catalog[K]:
        """Validate and register a catalog.

        Args:
            catalog: The catalog to register.

        Returns:
            The registered catalog.

        Raises:
            CatalogConfigurationError: If the catalog is invalid, belongs to
                another surface, or its group is already registered.
        """
        if self.surface is not None and catalog.surface != self.surface:
            raise CatalogConfigurationError(
                f"Catalog {catalog.group!r} belongs to {catalog.surface.value!r}, "
                f"not {self.surface.value!r}"
            )
        if catalog.group in self._catalogs:
            raise CatalogConfigurationError(
                f"Catalog {catalog.group!r} is already registered"
            )
        catalog.validate(self.default_language)

        incomplete = {
            language: len(catalog.missing_keys(language))
            for language in catalog.languages
            if language != self.default_language and catalog.missing_keys(language)
        }
        if incomplete:
            logger.debug(
                "Catalog %s has incomplete translations: %s", catalog.group, incomplete
            )

        self._catalogs[catalog.group] = catalog
        return catalog

    def catalog(self, group: str) -> Catalog[Any]:
        try:
            return self._catalogs[group]
        except KeyError:
            raise UnknownCatalogError(group) from None

    def groups(self) -> list[str]:
        return list(self._catalogs)

    def view(self, group: str, language: str | None = None) -> CatalogView[Any]:
        """Get a catalog view for a language (current locale when omitted)."""
        if language is None:
            language = get_language()
        return self.catalog(group).view(language, self.default_language)

    def lookup(
        self,
        group: str,
        key: Enum | str,
        language: str | None = None,
        default: str | None = None,
    ) -> str | None:
        """Look up one string.

        Args:
            group: Registered group name.
            key: Key member or its string value.
            language: Language to use; the current locale when omitted.
            default: Caller-supplied fallback for a missing key.

        Returns:
            The localized text, or ``default`` if the language's table (or
            the default table, for languages without one) lacks the key.

        Raises:
            UnknownCatalogError: If the group is not registered.
        """
        return self.view(group, language).get(key, default)

    def __contains__(self, group: object) -> bool:
        return group in self._catalogs

    def __iter__(self) -> Iterator[Catalog[Any]]:
        return iter(self._catalogs.values())

    def __len__(self) -> int:
        return len(self._catalogs)
