"""
Notification endpoint configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pydantic import Field
from services.common.core.config import BaseAppConfig


class NotificationConfig(BaseAppConfig):
    """
    Configuration management for the SNS notification endpoint.
    """

    # Endpoint settings
    NOTIFICATION_ENDPOINT_PATH: str = Field(
        default="/topic", description="Path SNS posts HTTP(S) deliveries to"
    )
    AUTO_CONFIRM_SUBSCRIPTIONS: bool = Field(
        default=True, description="Confirm subscription requests on the default endpoint"
    )

    # Logging
    LOG_CONFIG_PATH: str = Field(
        default="/app/config/notification_log.yaml", description="Logging YAML file path"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = NotificationConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
