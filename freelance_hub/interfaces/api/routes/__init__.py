from fastapi import FastAPI

from .alert_settings import router as alert_settings_router
from .alerts import router as alerts_router
from .sessions import router as sessions_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(alerts_router)
    app.include_router(alert_settings_router)
    app.include_router(sessions_router)
