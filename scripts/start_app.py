#!/usr/bin/env python3
"""Run the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from ask.config import Settings
from ask.util.logging import setup_logging
from ask.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Logfire first: setup_logging forwards stdlib records into it
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting ask API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "ask.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_config=None,  # keep the logfire handler from setup_logging
        )
    except Exception:
        logfire.exception("API startup failed")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
