"""Application settings using Pydantic v2.

This module provides centralized configuration for the locale service: the
set of available languages, the default language, the names of the request
signals the language is read from, server options and logging options.

Example:
    Basic usage::

        from bookcars_locale.config.settings import get_settings

        settings = get_settings()
        print(settings.default_language)

Attributes:
    Settings: Main settings class with all configuration options.
    get_settings: Factory function to get cached settings instance.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation.

    All settings can be configured via ``BC_``-prefixed environment variables
    or a .env file (e.g. ``BC_DEFAULT_LANGUAGE=en``,
    ``BC_LANGUAGES='["en", "fr"]'``).

    Attributes:
        languages: ISO 639-1 codes the platform is translated into.
        default_language: Language used when no signal resolves.
        language_query_param: Query parameter carrying an explicit request.
        language_cookie_name: Cookie holding the persisted language.
        language_cookie_max_age: Lifetime of the language cookie in seconds.
        country_header: Header carrying the visitor's geolocated country.
        set_language_from_ip: Derive a first-visit language from the country.
        currency: Display currency symbol used in catalog texts.
        deposit_filter_value_1: First deposit filter threshold.
        deposit_filter_value_2: Second deposit filter threshold.
        deposit_filter_value_3: Third deposit filter threshold.
        server_host: Host to bind the server.
        server_port: Port to bind the server.
        environment: Application environment (development/staging/production).
        log_level: Logging level.
        debug: Enable debug mode.
        workers: Number of uvicorn workers.
        log_to_file: Whether to write logs to file.
        log_dir: Directory for log files.
        log_max_size_mb: Max log file size before rotation.
        log_backup_count: Number of backup log files to keep.
    """

    model_config = SettingsConfigDict(
        env_prefix="BC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Language Configuration
    languages: list[str] = Field(
        default_factory=lambda: ["en", "fr", "es"],
        min_length=1,
        description="ISO 639-1 language codes supported",
    )
    default_language: str = Field(
        default="fr",
        min_length=1,
        description="Language used when no request signal resolves",
    )
    language_query_param: str = Field(
        default="l",
        min_length=1,
        description="Query parameter carrying an explicit language request",
    )
    language_cookie_name: str = Field(
        default="bc-language",
        min_length=1,
        description="Cookie holding the user's persisted language",
    )
    language_cookie_max_age: int = Field(
        default=60 * 60 * 24 * 365,
        ge=0,
        description="Language cookie lifetime in seconds",
    )
    country_header: str = Field(
        default="X-Country",
        description="Request header carrying the geolocated country name",
    )
    set_language_from_ip: bool = Field(
        default=False,
        description="Pick a first-visit language from the visitor's country",
    )

    # Catalog Values
    currency: str = Field(
        default="$",
        min_length=1,
        description='Display currency; "$" is written before amounts in English',
    )
    deposit_filter_value_1: int = Field(
        default=250,
        ge=0,
        description="First deposit filter threshold",
    )
    deposit_filter_value_2: int = Field(
        default=500,
        ge=0,
        description="Second deposit filter threshold",
    )
    deposit_filter_value_3: int = Field(
        default=750,
        ge=0,
        description="Third deposit filter threshold",
    )

    # Server Configuration
    server_host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server",
    )
    server_port: int = Field(
        default=4004,
        ge=1,
        le=65535,
        description="Port to bind the server",
    )

    # Application Configuration
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    workers: int = Field(
        default=1,
        ge=1,
        le=32,
        description="Number of uvicorn workers",
    )

    # Logging Configuration
    log_to_file: bool = Field(
        default=False,
        description="Whether to write logs to file",
    )
    log_dir: str = Field(
        default="./logs",
        description="Directory for log files",
    )
    log_max_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum log file size in megabytes before rotation",
    )
    log_backup_count: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("languages")
    @classmethod
    def normalize_languages(cls, v: list[str]) -> list[str]:
        """Lowercase language codes and drop blanks and duplicates.

        Order is preserved so the first configured language stays first.

        Args:
            v: The configured language codes.

        Returns:
            The normalized list of language codes.

        Raises:
            ValueError: If no usable language code remains.

        Example:
            Normalization::

                ["EN", " fr ", "en", ""] -> ["en", "fr"]
        """
        normalized: list[str] = []
        for code in v:
            code = code.strip().lower()
            if code and code not in normalized:
                normalized.append(code)
        if not normalized:
            raise ValueError("languages must contain at least one language code")
        return normalized

    @field_validator("default_language")
    @classmethod
    def normalize_default_language(cls, v: str) -> str:
        """Lowercase the default language.

        The default is not checked against ``languages``; language
        resolution returns it as configured.

        Args:
            v: The configured default language.

        Returns:
            The stripped, lowercased default language.
        """
        v = v.strip().lower()
        if not v:
            raise ValueError("default_language must not be blank")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure a single settings instance is created
    and reused throughout the application lifecycle.

    Returns:
        Cached Settings instance loaded from environment.
    """
    return Settings()
