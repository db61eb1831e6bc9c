import logging

import boto3

from services.common.core.config import BaseAppConfig

logger = logging.getLogger("notification.clients")


def create_sns_client(app_config: BaseAppConfig):
    """Create the boto3 SNS client used to confirm subscriptions."""
    kwargs = {"region_name": app_config.AWS_REGION}
    if app_config.AWS_ENDPOINT_URL:
        kwargs["endpoint_url"] = app_config.AWS_ENDPOINT_URL
    logger.info(
        "Creating SNS client (region=%s, endpoint=%s)",
        app_config.AWS_REGION,
        app_config.AWS_ENDPOINT_URL or "default",
    )
    return boto3.client("sns", **kwargs)
