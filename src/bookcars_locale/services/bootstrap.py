"""Language selection at the start of a navigation or request.

Combines the explicit request, the persisted preference, the signed-in
user's profile language, the browser setting and the visitor's country
into the language the locale context is set to.

Example:
    Resolve the language of an anonymous visitor::

        store = MemoryPreferenceStore("fr")
        language = bootstrap_language("en", store, get_settings())  # "en"
"""

from collections.abc import Callable
from dataclasses import dataclass

from bookcars_locale.config.settings import Settings
from bookcars_locale.logging_config import get_logger
from bookcars_locale.services.preferences import PreferenceStore
from bookcars_locale.utils.language import (
    ResolutionContext,
    language_for_country,
    normalize_language,
    resolve_language,
)

logger = get_logger("bootstrap")

# Persists a user's language; returns False when the update was rejected
UserLanguageUpdater = Callable[[str, str], bool]


@dataclass(frozen=True)
class UserProfile:
    """The signed-in user as far as language selection is concerned."""

    id: str
    language: str | None = None


def _is_language_code(value: str | None) -> bool:
    return bool(value) and len(value) == 2


def bootstrap_language(
    requested: str | None,
    store: PreferenceStore,
    settings: Settings,
    user: UserProfile | None = None,
    update_user: UserLanguageUpdater | None = None,
    browser_language: str | None = None,
    country: str | None = None,
) -> str:
    """Select the language of the current navigation and persist it.

    Args:
        requested: Explicit language request (query parameter).
        store: Persisted language preference.
        settings: Language configuration.
        user: Signed-in user, if any.
        update_user: Callback saving a new language on the user's profile.
        browser_language: Base code of the browser's preferred language.
        country: Geolocated country of the visitor.

    Returns:
        The language to install in the locale context.
    """
    normalized = normalize_language(
        ResolutionContext(
            requested_language=requested,
            stored_language=store.get_language(),
            available_languages=settings.languages,
            default_language=settings.default_language,
        )
    )

    if requested and normalized:
        if user is None:
            language = normalized
        else:
            language = user.language or settings.default_language
            if _is_language_code(normalized) and user.language != normalized:
                _update_user_language(user, normalized, update_user)
                language = normalized
        store.set_language(language)
    else:
        if user is not None and user.language:
            if user.language in settings.languages:
                return user.language
            logger.debug(
                "Ignoring unsupported language %s of user %s", user.language, user.id
            )

        if not _is_language_code(store.get_language()):
            if browser_language and browser_language in settings.languages:
                store.set_language(browser_language)
            elif settings.set_language_from_ip and country:
                store.set_language(
                    language_for_country(country, settings.default_language)
                )

    return resolve_language(
        ResolutionContext(
            requested_language=None,
            stored_language=store.get_language(),
            available_languages=settings.languages,
            default_language=settings.default_language,
        )
    )


def _update_user_language(
    user: UserProfile, language: str, update_user: UserLanguageUpdater | None
) -> None:
    if update_user is None:
        return
    try:
        updated = update_user(user.id, language)
    except Exception:
        logger.exception("Failed to update language of user %s", user.id)
        return
    if not updated:
        logger.error("Language update to %s rejected for user %s", language, user.id)
