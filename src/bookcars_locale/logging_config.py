"""Logging configuration module for the locale service.

Provides logging setup with a colored startup banner and a summary of the
language configuration.

Features:
    - Colored startup banner
    - Language and server configuration summary
    - Multi-worker safe (prints banner only once)
    - Configurable log levels
    - File logging with rotation
    - Separate error log file
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from bookcars_locale.config.settings import Settings

# Flag file to track if banner was already printed (for multi-worker scenarios)
_BANNER_FLAG_FILE = "/tmp/.bookcars_locale_banner_printed"

# Module-level flag to track if this process printed the banner
_banner_printed_by_this_process = False

_LOG_FORMAT_DETAILED = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
)
_LOG_FORMAT_SIMPLE = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "red": "\033[31m",
}


def _try_acquire_banner_lock() -> bool:
    """Try to acquire banner lock atomically using exclusive file creation.

    Returns:
        True if this process should print the banner, False otherwise.
    """
    try:
        fd = os.open(_BANNER_FLAG_FILE, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        os.write(fd, str(os.getpid()).encode())
        os.close(fd)
        return True
    except OSError:
        return False


def print_banner() -> None:
    """Print the service startup banner."""
    global _banner_printed_by_this_process  # noqa: PLW0603
    if not _try_acquire_banner_lock():
        return

    _banner_printed_by_this_process = True
    c = COLORS
    print(f"{c['dim']}{'─' * 72}{c['reset']}")
    print(f"{c['cyan']}{c['bold']}  BookCars Locale Service{c['reset']}")
    print(f"{c['dim']}{'─' * 72}{c['reset']}\n")


def print_config_summary(settings: "Settings") -> None:
    """Print a formatted configuration summary organized by categories.

    Args:
        settings: Settings instance with loaded configuration.
    """
    if not _banner_printed_by_this_process:
        return

    c = COLORS

    def _line(label: str, value: str, color: str = "cyan") -> None:
        print(f"  {c['dim']}│{c['reset']} {label:<28} {c[color]}{value}{c['reset']}")

    def _header(title: str, color: str) -> None:
        print(f"\n  {c[color]}▶ {title}{c['reset']}")
        print(f"  {c['dim']}├{'─' * 50}{c['reset']}")

    _header("Language Configuration", "green")
    _line("Languages", ", ".join(settings.languages))
    _line(
        "Default Language",
        settings.default_language,
        "green" if settings.default_language in settings.languages else "yellow",
    )
    _line("Query Parameter", settings.language_query_param)
    _line("Cookie", settings.language_cookie_name)
    _line("Language From IP", str(settings.set_language_from_ip).lower())
    _line("Currency", settings.currency)

    _header("Server Configuration", "blue")
    _line("Host", settings.server_host)
    _line("Port", str(settings.server_port))
    _line(
        "Environment",
        settings.environment,
        "green" if settings.environment == "production" else "yellow",
    )
    _line(
        "Debug Mode", str(settings.debug).lower(), "red" if settings.debug else "green"
    )
    _line("Workers", str(settings.workers))

    _header("Logging Configuration", "magenta")
    _line("Level", settings.log_level, "green")
    _line(
        "Log to File",
        str(settings.log_to_file).lower(),
        "green" if settings.log_to_file else "yellow",
    )
    _line("Directory", settings.log_dir)

    print(f"\n{c['dim']}{'─' * 72}{c['reset']}\n")


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    settings: "Settings | None" = None,
) -> logging.Logger:
    """Configure application logging with console and optional file handlers.

    Args:
        level: The logging level to use.
        settings: Optional Settings instance for file logging configuration.

    Returns:
        Configured logger instance.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, handlers filter

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level, logging.INFO))
    console_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT_SIMPLE, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if settings and settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        max_bytes = settings.log_max_size_mb * 1024 * 1024

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "bookcars_locale.log",
            maxBytes=max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        # Errors only, half size
        error_handler = logging.handlers.RotatingFileHandler(
            log_dir / "bookcars_locale.error.log",
            maxBytes=max_bytes // 2,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        root_logger.addHandler(error_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger("bookcars_locale")

    print_banner()
    if settings:
        print_config_summary(settings)

    logger.info("Logging configured with level: %s", level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(f"bookcars_locale.{name}")
