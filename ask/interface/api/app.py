"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from ask.domain.service import ReactionDispatcher
from ask.interface.api.errors import register_error_handlers
from ask.interface.api.routes import answers, health, questions, votes
from ask.util.di.container import create_container, setup_di
from ask.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Flush pending notifications and close the container on shutdown."""
    yield
    container: AsyncContainer = app_instance.state.dishka_container
    reaction_dispatcher = await container.get(ReactionDispatcher)
    await reaction_dispatcher.drain()
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one (tests)
    """
    # Instrument httpx for the notification webhook
    instrument_httpx()

    app_instance = FastAPI(
        title="Ask API",
        description="Voting, answer acceptance and view counting for a Q&A site",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)

    return app_instance
