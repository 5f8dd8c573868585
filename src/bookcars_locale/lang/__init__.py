"""Catalog declarations of every surface.

Example:
    Build the registries once at startup::

        from bookcars_locale.lang import create_registries

        registries = create_registries(default_language="fr")
        registries[Surface.FRONTEND].lookup("bookings", "NEW_BOOKING", "en")
"""

from bookcars_locale.config.settings import Settings, get_settings
from bookcars_locale.lang import backend, frontend
from bookcars_locale.services.catalog import Catalog, CatalogRegistry, Surface


def surface_catalogs(surface: Surface, settings: Settings | None = None) -> tuple[Catalog, ...]:
    """Get the catalogs declared for one surface, ordered by group name.

    Args:
        surface: The surface whose catalogs are returned.
        settings: Settings supplying configured catalog values (currency,
            deposit thresholds). Defaults to the cached application settings.

    Returns:
        The surface's catalogs.
    """
    if surface is Surface.FRONTEND:
        return frontend.create_catalogs(settings or get_settings())
    return backend.CATALOGS


def create_registry(
    surface: Surface,
    default_language: str,
    settings: Settings | None = None,
) -> CatalogRegistry:
    """Register every catalog of one surface.

    Args:
        surface: The surface whose catalogs are registered.
        default_language: Language every catalog must fully define.
        settings: Settings supplying configured catalog values.

    Returns:
        A registry holding the surface's catalogs.

    Raises:
        CatalogConfigurationError: If a catalog lacks the default language.
    """
    registry = CatalogRegistry(default_language, surface=surface)
    for catalog in surface_catalogs(surface, settings):
        registry.register(catalog)
    return registry


def create_registries(
    default_language: str,
    settings: Settings | None = None,
) -> dict[Surface, CatalogRegistry]:
    """Register the catalogs of every surface."""
    return {
        surface: create_registry(surface, default_language, settings) for surface in Surface
    }


__all__ = ["create_registries", "create_registry", "surface_catalogs"]
