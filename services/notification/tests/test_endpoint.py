"""
Where: services/notification/tests/test_endpoint.py
What: HTTP tests for NotificationEndpoint dispatch and error mapping.
Why: Verify header routing, argument binding and 4xx responses end to end.
"""

from typing import Annotated
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi import FastAPI
from pydantic import BaseModel

from services.notification.api.endpoint import NotificationEndpoint
from services.notification.core.markers import NotificationMessage, NotificationSubject
from services.notification.core.status import NotificationStatus
from services.notification.exceptions import register_exception_handlers
from services.notification.models import MESSAGE_TYPE_HEADER


class OrderCreated(BaseModel):
    order_id: str


def _build_app(endpoint: NotificationEndpoint, sns_client=None) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(endpoint.router)
    app.state.sns_client = sns_client or MagicMock()
    return app


def _client(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


def _headers(message_type: str) -> dict:
    return {MESSAGE_TYPE_HEADER: message_type, "content-type": "text/plain; charset=UTF-8"}


@pytest.mark.asyncio
async def test_notification_is_dispatched_with_bound_arguments(notification_body):
    endpoint = NotificationEndpoint("/topic")
    received = {}

    @endpoint.notification_message_mapping
    async def handle(
        subject: Annotated[str, NotificationSubject()],
        message: Annotated[str, NotificationMessage()],
    ):
        received.update(subject=subject, message=message)

    async with _client(_build_app(endpoint)) as client:
        response = await client.post("/topic", content=notification_body, headers=_headers("Notification"))

    assert response.status_code == 204
    assert received == {"subject": "Hello from SNS", "message": "asdasd"}


@pytest.mark.asyncio
async def test_sync_handler_result_is_returned_as_json():
    endpoint = NotificationEndpoint("/orders")

    @endpoint.notification_message_mapping
    def handle(order: Annotated[OrderCreated, NotificationMessage()]):
        return {"received": order.order_id}

    body = b'{"Type": "Notification", "Message": "{\\"order_id\\": \\"o-42\\"}"}'
    async with _client(_build_app(endpoint)) as client:
        response = await client.post("/orders", content=body, headers=_headers("Notification"))

    assert response.status_code == 200
    assert response.json() == {"received": "o-42"}


@pytest.mark.asyncio
async def test_subscription_confirmation_confirms_with_sns(subscription_body, sns_client):
    endpoint = NotificationEndpoint("/topic")

    @endpoint.notification_subscription_mapping
    def confirm(status: NotificationStatus):
        status.confirm_subscription()

    async with _client(_build_app(endpoint, sns_client)) as client:
        response = await client.post(
            "/topic", content=subscription_body, headers=_headers("SubscriptionConfirmation")
        )

    assert response.status_code == 204
    sns_client.confirm_subscription.assert_called_once()
    assert sns_client.confirm_subscription.call_args.kwargs["TopicArn"] == (
        "arn:aws:sns:eu-west-1:111111111111:mySampleTopic"
    )


@pytest.mark.asyncio
async def test_message_parameter_on_wrong_envelope_type_returns_400(subscription_body):
    endpoint = NotificationEndpoint("/topic")

    # Mapped on the message type header, but the body is a subscription envelope.
    @endpoint.notification_message_mapping
    async def handle(message: Annotated[str, NotificationMessage()]):
        pytest.fail("handler must not be called")

    async with _client(_build_app(endpoint)) as client:
        response = await client.post(
            "/topic", content=subscription_body, headers=_headers("Notification")
        )

    assert response.status_code == 400
    assert "are only allowed for method that receive a notification message." in (
        response.json()["detail"]
    )


@pytest.mark.asyncio
async def test_malformed_body_returns_400():
    endpoint = NotificationEndpoint("/topic")

    @endpoint.notification_message_mapping
    async def handle(message: Annotated[str, NotificationMessage()]):
        pytest.fail("handler must not be called")

    async with _client(_build_app(endpoint)) as client:
        response = await client.post("/topic", content=b"<xml/>", headers=_headers("Notification"))

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Error reading notification request")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers, status_code",
    [
        ({}, 400),
        ({MESSAGE_TYPE_HEADER: "Bogus"}, 400),
        ({MESSAGE_TYPE_HEADER: "UnsubscribeConfirmation"}, 404),
    ],
)
async def test_unroutable_requests(headers, status_code, notification_body):
    endpoint = NotificationEndpoint("/topic")

    @endpoint.notification_message_mapping
    async def handle(message: Annotated[str, NotificationMessage()]):
        pass

    async with _client(_build_app(endpoint)) as client:
        response = await client.post("/topic", content=notification_body, headers=headers)

    assert response.status_code == status_code
    assert "message" in response.json()


def test_duplicate_mapping_is_rejected():
    endpoint = NotificationEndpoint("/topic")

    @endpoint.notification_message_mapping
    async def first(message: Annotated[str, NotificationMessage()]):
        pass

    with pytest.raises(ValueError, match="already maps Notification"):

        @endpoint.notification_message_mapping
        async def second(message: Annotated[str, NotificationMessage()]):
            pass
