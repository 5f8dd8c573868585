"""Services module."""

from bookcars_locale.services.catalog import (
    Catalog,
    CatalogConfigurationError,
    CatalogRegistry,
    CatalogView,
    Surface,
    UnknownCatalogError,
)
from bookcars_locale.services.locale_context import (
    LocaleContext,
    current_locale,
    get_language,
    locale_scope,
    set_language,
)

__all__ = [
    "Catalog",
    "CatalogConfigurationError",
    "CatalogRegistry",
    "CatalogView",
    "LocaleContext",
    "Surface",
    "UnknownCatalogError",
    "current_locale",
    "get_language",
    "locale_scope",
    "set_language",
]
