"""Storage of the user's chosen language.

A preference store is the only source of the "stored" language signal.
Over HTTP the language lives in a cookie; writes are collected during the
request and applied to the outgoing response.
"""

from collections.abc import Mapping
from typing import Protocol

from starlette.responses import Response

from bookcars_locale.logging_config import get_logger

logger = get_logger("preferences")


class PreferenceStore(Protocol):
    """Read/write access to a persisted language code."""

    def get_language(self) -> str | None: ...

    def set_language(self, language: str) -> None: ...


class MemoryPreferenceStore:
    """Preference store kept in memory, for non-HTTP callers and tests."""

    def __init__(self, language: str | None = None) -> None:
        self._language = language

    def get_language(self) -> str | None:
        return self._language

    def set_language(self, language: str) -> None:
        self._language = language


class CookiePreferenceStore:
    """Preference store backed by a request/response cookie pair.

    Args:
        cookies: Cookies of the incoming request.
        cookie_name: Name of the language cookie.
        max_age: Cookie lifetime in seconds.
    """

    def __init__(
        self, cookies: Mapping[str, str], cookie_name: str, max_age: int
    ) -> None:
        self._cookie_name = cookie_name
        self._max_age = max_age
        self._stored = cookies.get(cookie_name) or None
        self._pending: str | None = None

    def get_language(self) -> str | None:
        if self._pending is not None:
            return self._pending
        return self._stored

    def set_language(self, language: str) -> None:
        self._pending = language

    @property
    def dirty(self) -> bool:
        """Whether the response must update the cookie."""
        return self._pending is not None and self._pending != self._stored

    def apply(self, response: Response) -> None:
        """Write a pending language change to the response cookie."""
        if not self.dirty:
            return
        logger.debug("Persisting language cookie %s=%s", self._cookie_name, self._pending)
        response.set_cookie(
            key=self._cookie_name,
            value=self._pending or "",
            max_age=self._max_age,
            samesite="lax",
            path="/",
        )
