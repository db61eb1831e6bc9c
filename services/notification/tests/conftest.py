import os
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

# Config is initialized at import time; keep tests away from real AWS and log files.
os.environ.setdefault("AWS_REGION", "eu-west-1")
os.environ.setdefault("LOG_CONFIG_PATH", "/tmp/notification-missing-logging.yml")

from services.notification.tests.helpers import load_fixture  # noqa: E402


@pytest.fixture
def notification_body() -> bytes:
    return load_fixture("notificationMessage.json")


@pytest.fixture
def subscription_body() -> bytes:
    return load_fixture("subscriptionConfirmation.json")


@pytest.fixture
def unsubscribe_body() -> bytes:
    return load_fixture("unsubscribeConfirmation.json")


@pytest.fixture
def sns_client():
    client = MagicMock()
    client.confirm_subscription.return_value = {
        "SubscriptionArn": "arn:aws:sns:eu-west-1:111111111111:mySampleTopic:sub-1"
    }
    return client


@pytest.fixture
def main_app(sns_client):
    from services.notification.main import create_app

    app = create_app()
    app.state.sns_client = sns_client
    return app


@pytest_asyncio.fixture
async def async_client(main_app):
    transport = httpx.ASGITransport(app=main_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
