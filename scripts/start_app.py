#!/usr/bin/env python3
"""Start the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from gallery.config import Settings
from gallery.util.logging import setup_logging
from gallery.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app factory."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting Gallery API", port=settings.port)

        # create_app raises ConfigurationError before the server binds
        uvicorn.run(
            "gallery.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
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
        raise


if __name__ == "__main__":
    sys.exit(main())
