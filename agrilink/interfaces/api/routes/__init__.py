from fastapi import FastAPI

from .locale import router as locale_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .subscriptions import cron_router
from .subscriptions import router as subscriptions_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(locale_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)
    app.include_router(subscriptions_router)
    app.include_router(cron_router)
    app.include_router(users_router)
