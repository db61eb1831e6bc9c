"""
SNS Notification Endpoint - HTTP(S) subscriber for Amazon SNS

Receives SNS deliveries, binds envelope values to handler parameters and
confirms subscriptions.
"""

import logging
from typing import Annotated, Optional, Sequence

from fastapi import FastAPI

from .api.endpoint import NotificationEndpoint
from .config import NotificationConfig, config
from .core.logging_config import setup_logging
from .core.markers import NotificationMessage, NotificationSubject
from .core.status import NotificationStatus
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import request_context_middleware

# Logger setup
setup_logging()
logger = logging.getLogger("notification.main")


def build_default_endpoint(notification_config: NotificationConfig) -> NotificationEndpoint:
    """
    Endpoint that logs every notification and confirms subscriptions when
    AUTO_CONFIRM_SUBSCRIPTIONS is enabled.
    """
    endpoint = NotificationEndpoint(notification_config.NOTIFICATION_ENDPOINT_PATH)

    @endpoint.notification_message_mapping
    async def log_notification(
        subject: Annotated[Optional[str], NotificationSubject()],
        message: Annotated[str, NotificationMessage()],
    ) -> None:
        logger.info(
            "Received notification",
            extra={"subject": subject, "message_length": len(message)},
        )

    @endpoint.notification_subscription_mapping
    def confirm_subscription(status: NotificationStatus) -> None:
        if not notification_config.AUTO_CONFIRM_SUBSCRIPTIONS:
            logger.info(f"Ignoring subscription request ({status!r})")
            return
        status.confirm_subscription()

    @endpoint.notification_unsubscribe_confirmation_mapping
    def log_unsubscribe(status: NotificationStatus) -> None:
        logger.info(f"Subscription removed ({status!r})")

    return endpoint


def create_app(
    endpoints: Optional[Sequence[NotificationEndpoint]] = None,
    notification_config: NotificationConfig = config,
) -> FastAPI:
    if endpoints is None:
        endpoints = [build_default_endpoint(notification_config)]

    application = FastAPI(
        title="SNS Notification Endpoint",
        version="1.0.0",
        lifespan=lambda app: manage_lifespan(app, notification_config),
        root_path=notification_config.root_path,
    )
    application.middleware("http")(request_context_middleware)
    register_exception_handlers(application)

    for endpoint in endpoints:
        application.include_router(endpoint.router)

    @application.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return application


app = create_app()
