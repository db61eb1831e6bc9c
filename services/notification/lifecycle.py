"""
Where: services/notification/lifecycle.py
What: Startup/shutdown of shared resources for the notification endpoint.
Why: Keep main.py focused on app assembly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .clients import create_sns_client
from .config import NotificationConfig

logger = logging.getLogger("notification.main")


@asynccontextmanager
async def manage_lifespan(
    app: FastAPI, notification_config: NotificationConfig
) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    # Tests may install their own client before startup.
    if getattr(app.state, "sns_client", None) is None:
        app.state.sns_client = create_sns_client(notification_config)

    logger.info("Notification endpoint initialized with shared resources.")
    try:
        yield
    finally:
        logger.info("Notification endpoint shutting down.")
        sns_client = app.state.sns_client
        close = getattr(sns_client, "close", None)
        if callable(close):
            close()
        app.state.sns_client = None
