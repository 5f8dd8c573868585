"""Language resolution utilities shared by every surface.

Turns the raw language signals of a request (explicit request, persisted
preference, browser setting, geolocated country) into one effective
ISO 639-1 language code. Every function here is pure.
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import Final

from bookcars_locale.logging_config import get_logger

logger = get_logger("language")

# Countries whose visitors get a non-default first-visit language
COUNTRY_LANGUAGES: Final[dict[str, str]] = {
    "France": "fr",
    "Morocco": "fr",
    "Greece": "el",
}


@dataclass(frozen=True)
class ResolutionContext:
    """Signals consumed by a single language resolution attempt.

    Attributes:
        requested_language: Explicit override, usually a query parameter.
        stored_language: Previously confirmed preference (cookie/storage).
        available_languages: Configured language codes.
        default_language: Last-resort language, returned as configured.
    """

    requested_language: str | None
    stored_language: str | None
    available_languages: Collection[str]
    default_language: str


def normalize_language(ctx: ResolutionContext) -> str | None:
    """Compute the effective language for an explicit language request.

    Priority is request > stored > default. Unsupported codes are skipped,
    never reported as errors.

    Args:
        ctx: The resolution signals.

    Returns:
        None when nothing was requested (the caller keeps its current
        language), otherwise the requested language if available, else the
        stored language if available, else the default language.
    """
    requested = ctx.requested_language
    if not requested:
        return None

    if requested in ctx.available_languages:
        return requested

    stored = ctx.stored_language
    if stored and stored in ctx.available_languages:
        logger.debug("Unsupported language %r requested, keeping %r", requested, stored)
        return stored

    logger.debug(
        "Unsupported language %r requested, using default %r",
        requested,
        ctx.default_language,
    )
    return ctx.default_language


def resolve_language(ctx: ResolutionContext, current: str | None = None) -> str:
    """Resolve a language whether or not one was explicitly requested.

    Completes :func:`normalize_language` for the "no opinion" case: the
    stored language is used when available, then the current locale, then
    the default language.

    Args:
        ctx: The resolution signals.
        current: The language currently held by the locale context.

    Returns:
        The effective language code.
    """
    normalized = normalize_language(ctx)
    if normalized is not None:
        return normalized
    stored = ctx.stored_language
    if stored and stored in ctx.available_languages:
        return stored
    return current or ctx.default_language


def base_language_code(language_code: str | None) -> str | None:
    """Reduce a language tag to its lowercase ISO 639-1 part.

    Handles codes like 'en-US' -> 'en', 'pt_BR' -> 'pt'.

    Args:
        language_code: Raw language tag.

    Returns:
        The base code, or None for empty input.
    """
    if not language_code:
        return None
    code = language_code.strip().replace("_", "-").split("-", 1)[0].lower()
    return code or None


def _quality(params: list[str]) -> float | None:
    """Read the q weight among an entry's parameters, 1.0 when absent."""
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value.strip())
            except ValueError:
                return None
    return 1.0


def parse_accept_language(
    header: str | None, available_languages: Collection[str]
) -> str | None:
    """Pick the preferred available language from an Accept-Language header.

    Entries are ordered by their ``q`` weight (stable for equal weights),
    wherever ``q`` sits among the entry's parameters. Entries with an
    unparsable or zero weight are ignored.

    Args:
        header: Raw header value, e.g. ``"de-DE,fr;q=0.8,en;q=0.5"``.
        available_languages: Configured language codes.

    Returns:
        The first available base code, or None.

    Example:
        Pick the first supported language::

            parse_accept_language("de-DE,fr;q=0.8", ["en", "fr"])  # "fr"
    """
    if not header:
        return None

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        tag, *params = part.split(";")
        quality = _quality(params)
        if quality is None or quality <= 0:
            continue
        code = base_language_code(tag)
        if code:
            weighted.append((quality, code))

    # sorted() is stable, so equal weights keep header order
    for _, code in sorted(weighted, key=lambda item: -item[0]):
        if code in available_languages:
            return code
    return None


def language_for_country(country: str | None, default_language: str) -> str:
    """Map a geolocated country name to a first-visit language.

    Args:
        country: Country name as reported by the geolocation service.
        default_language: Language for every other country.

    Returns:
        The country's language code, or the default language.
    """
    if not country:
        return default_language
    return COUNTRY_LANGUAGES.get(country.strip(), default_language)
