"""Logfire setup for the API process.

Services open their own spans (``vote_service.cast_vote``,
``acceptance_service.accept_answer`` and so on) and emit structured events
with ``logfire.info``/``warn``/``error``; this module only wires the exporter
and the library instrumentations underneath them.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ask.config import Settings

# The identity cookie must never end up in exported attributes
_SCRUB_PATTERNS = ["auth_token"]


def _send_to_logfire(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire exporter.

    Telemetry leaves the process only when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and a token is configured. Console output is
    always on.
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name="ask-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        version=settings.git_sha,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks."""
    logfire.instrument_fastapi(app, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries, including the vote row locks, on the given engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound notification webhook calls."""
    logfire.instrument_httpx()
