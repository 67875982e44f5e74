"""Standard library logging for the server process.

Application code logs through logfire. Records from libraries that use the
standard ``logging`` module (uvicorn, SQLAlchemy, httpx) are forwarded to
logfire as well, so one stream carries both.
"""

import logging

import logfire

from ask.config import Settings

# Library loggers that are too chatty at INFO
_QUIET = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Route standard library log records into logfire.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "test":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
