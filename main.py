from contextlib import asynccontextmanager

from fastapi import FastAPI

from freelance_hub.infrastructure.database import engine, initialize_database
from freelance_hub.infrastructure.scheduling import get_reconciliation_scheduler
from freelance_hub.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; stop session loops and release the pool on shutdown."""

    initialize_database()
    yield
    await get_reconciliation_scheduler().shutdown()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Freelance Hub alerts", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
