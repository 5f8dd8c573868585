"""Main entry point for the locale service.

Example:
    Run from command line::

        bookcars-locale

    Or run directly::

        python -m bookcars_locale.main
"""

import uvicorn

from bookcars_locale.config.settings import get_settings
from bookcars_locale.logging_config import get_logger, setup_logging

logger = get_logger("main")


def main() -> None:
    """Run the locale service with uvicorn.

    Each worker builds its own application through the factory, so catalog
    registration and validation happen once per worker process.

    Configuration is loaded from environment variables or .env file.
    See Settings class for all available options.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings=settings)

    logger.info(
        "Starting locale service | env=%s | host=%s | port=%d | workers=%d",
        settings.environment,
        settings.server_host,
        settings.server_port,
        settings.workers,
    )

    uvicorn.run(
        "bookcars_locale.app:create_app",
        factory=True,
        host=settings.server_host,
        port=settings.server_port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
        access_log=settings.environment != "production",
    )


if __name__ == "__main__":
    main()
