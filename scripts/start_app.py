#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from pastethread.config import Settings
from pastethread.util.logging import setup_logging
from pastethread.util.observability import check_production_settings, configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_production_settings(settings)
        logfire.info(
            "Starting pastethread API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        # The app module builds its own settings and container on import
        uvicorn.run(
            "pastethread.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
