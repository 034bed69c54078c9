#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from unihub.config import Settings
from unihub.util.observability import configure_logfire


def main() -> int:
    """Run uvicorn against the app factory until the process is stopped."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting UniHub API", port=settings.port, environment=settings.environment
        )
        uvicorn.run(
            "unihub.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            reload=settings.environment == "development",
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
