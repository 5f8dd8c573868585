"""Current-language state read by every catalog lookup.

Each execution context (one HTTP request, one task, or the main thread)
has its own :class:`LocaleContext`, stored in a ``ContextVar``. Concurrent
requests therefore never observe each other's language, while every catalog
read within one request sees a language change immediately.

Example:
    Scope a language to a block of work::

        from bookcars_locale.services.locale_context import get_language, locale_scope

        with locale_scope("en"):
            assert get_language() == "en"
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from bookcars_locale.config.settings import get_settings
from bookcars_locale.logging_config import get_logger

logger = get_logger("locale_context")


class LocaleContext:
    """Mutable holder of the current language code.

    The context does not validate codes; callers pass resolved languages.
    """

    __slots__ = ("_language",)

    def __init__(self, language: str) -> None:
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def get_language(self) -> str:
        return self._language

    def set_language(self, code: str) -> None:
        """Set the current language. Setting the same code again is a no-op."""
        if code == self._language:
            return
        logger.debug("Locale changed: %s -> %s", self._language, code)
        self._language = code

    def __repr__(self) -> str:
        return f"LocaleContext(language={self._language!r})"


_current_locale: ContextVar[LocaleContext | None] = ContextVar(
    "bookcars_locale", default=None
)


def current_locale() -> LocaleContext:
    """Return the locale of the current execution context.

    A context without one is initialized with the configured default
    language.
    """
    ctx = _current_locale.get()
    if ctx is None:
        ctx = LocaleContext(get_settings().default_language)
        _current_locale.set(ctx)
    return ctx


def get_language() -> str:
    """Get the language of the current execution context."""
    return current_locale().get_language()


def set_language(code: str) -> None:
    """Set the language of the current execution context."""
    current_locale().set_language(code)


@contextmanager
def locale_scope(language: str) -> Iterator[LocaleContext]:
    """Install a fresh locale for the duration of the block.

    The previously installed locale is restored on exit, even on error.

    Args:
        language: Resolved language code for the scope.

    Yields:
        The scoped LocaleContext.
    """
    ctx = LocaleContext(language)
    token = _current_locale.set(ctx)
    try:
        yield ctx
    finally:
        _current_locale.reset(token)
