"""FastAPI application serving localized catalogs.

Every request gets its own locale: :class:`LocaleMiddleware` resolves the
language from the query parameter, the language cookie, the browser
setting and the visitor's country, installs it for the request and persists
explicit choices in the cookie.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request, status
from starlette.middleware.base import BaseHTTPMiddleware

from bookcars_locale.config.settings import Settings, get_settings
from bookcars_locale.lang import create_registries
from bookcars_locale.logging_config import get_logger, setup_logging
from bookcars_locale.services.audit import (
    find_missing_translations,
    find_translation_conflicts,
    log_catalog_audit,
)
from bookcars_locale.services.bootstrap import bootstrap_language
from bookcars_locale.services.catalog import (
    CatalogRegistry,
    Surface,
    UnknownCatalogError,
)
from bookcars_locale.services.locale_context import LocaleContext, locale_scope
from bookcars_locale.services.preferences import CookiePreferenceStore
from bookcars_locale.utils.language import parse_accept_language

logger = get_logger("app")


class LocaleMiddleware(BaseHTTPMiddleware):
    """Middleware resolving and scoping the language of each request."""

    def __init__(self, app: Any, settings: Settings) -> None:
        super().__init__(app)
        self._settings = settings

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Resolve the request language, then run the request inside it.

        Args:
            request: The incoming request.
            call_next: The next middleware/handler.

        Returns:
            Response, with the language cookie updated when needed.
        """
        settings = self._settings
        store = CookiePreferenceStore(
            request.cookies,
            settings.language_cookie_name,
            settings.language_cookie_max_age,
        )
        language = bootstrap_language(
            request.query_params.get(settings.language_query_param),
            store,
            settings,
            browser_language=parse_accept_language(
                request.headers.get("accept-language"), settings.languages
            ),
            country=request.headers.get(settings.country_header),
        )

        with locale_scope(language) as locale:
            request.state.locale = locale
            response = await call_next(request)

        store.apply(response)
        response.headers["Content-Language"] = language
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Logs the catalog audit once the service starts.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    log_catalog_audit(app.state.registries, settings.languages)
    logger.info(
        "Serving %d catalogs in %s (default %s)",
        sum(len(registry) for registry in app.state.registries.values()),
        ", ".join(settings.languages),
        settings.default_language,
    )
    yield
    logger.info("Locale service stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Catalogs are registered here, so a catalog lacking the default language
    prevents the application from being created.

    Args:
        settings: Optional settings instance (uses default if not provided).

    Returns:
        Configured FastAPI application.

    Raises:
        CatalogConfigurationError: If a catalog is misconfigured.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings.log_level, settings=settings)

    app = FastAPI(
        title="BookCars Locale",
        description="Language resolution and localized string catalogs",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(LocaleMiddleware, settings=settings)

    app.state.settings = settings
    app.state.registries = create_registries(settings.default_language, settings)

    register_routes(app, settings)

    return app


def _get_registry(request: Request, surface: str) -> CatalogRegistry:
    registries: dict[Surface, CatalogRegistry] = request.app.state.registries
    try:
        return registries[Surface(surface)]
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown surface: {surface}",
        ) from err


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register application routes.

    Args:
        app: FastAPI application instance.
        settings: Application settings.
    """

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            Health status.
        """
        return {"status": "healthy"}

    @app.get("/api/i18n/languages")
    async def get_languages(request: Request) -> dict[str, Any]:
        """Describe the configured languages and the request's language."""
        locale: LocaleContext = request.state.locale
        return {
            "languages": settings.languages,
            "default": settings.default_language,
            "current": locale.get_language(),
        }

    @app.get("/api/i18n/audit")
    async def get_audit(request: Request) -> dict[str, Any]:
        """Report swapped and missing translations."""
        registries: dict[Surface, CatalogRegistry] = request.app.state.registries
        return {
            "conflicts": [asdict(c) for c in find_translation_conflicts(registries)],
            "missing": [
                asdict(missing)
                for registry in registries.values()
                for missing in find_missing_translations(registry, settings.languages)
            ],
        }

    @app.get("/api/i18n/{surface}/catalogs")
    async def list_catalogs(request: Request, surface: str) -> dict[str, Any]:
        """List the catalog groups of a surface."""
        registry = _get_registry(request, surface)
        return {"surface": surface, "groups": registry.groups()}

    @app.get("/api/i18n/{surface}/catalogs/{group}")
    async def get_catalog(request: Request, surface: str, group: str) -> dict[str, Any]:
        """Return a catalog's table in the request's language."""
        registry = _get_registry(request, surface)
        locale: LocaleContext = request.state.locale
        try:
            view = registry.view(group, locale.get_language())
        except UnknownCatalogError as err:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown catalog: {group}",
            ) from err
        return {
            "group": group,
            "language": view.language,
            "table_language": view.table_language,
            "strings": view.as_dict(),
        }

    @app.get("/api/i18n/{surface}/catalogs/{group}/{key}")
    async def get_string(
        request: Request,
        surface: str,
        group: str,
        key: str,
        default: str | None = Query(default=None),
    ) -> dict[str, Any]:
        """Return one string in the request's language.

        The caller's ``default`` is returned for keys the language's table
        does not define.
        """
        registry = _get_registry(request, surface)
        locale: LocaleContext = request.state.locale
        try:
            text = registry.lookup(group, key, locale.get_language(), default=default)
        except UnknownCatalogError as err:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown catalog: {group}",
            ) from err
        if text is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown key: {group}.{key}",
            )
        return {"group": group, "key": key, "language": locale.get_language(), "text": text}
