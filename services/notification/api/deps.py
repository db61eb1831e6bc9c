"""
Dependency Injection for plain FastAPI routes.

Expose the envelope resolvers through FastAPI Depends so that ordinary routes
can receive SNS values without a NotificationEndpoint.
"""

from typing import Annotated, Optional
from fastapi import Depends, Request

from ..clients import create_sns_client
from ..config import config
from ..core.markers import NotificationMessage, NotificationSubject
from ..core.resolvers import (
    NotificationMessageArgumentResolver,
    NotificationStatusArgumentResolver,
    NotificationSubjectArgumentResolver,
)
from ..core.status import NotificationStatus
from ..models import BindingContext, ParameterDescriptor


# ==========================================
# 1. Service Accessors
# ==========================================


def get_sns_client(request: Request):
    client = getattr(request.app.state, "sns_client", None)
    if client is None:
        client = create_sns_client(config)
        request.app.state.sns_client = client
    return client


# ==========================================
# 2. Envelope Dependencies
# ==========================================

_message_resolver = NotificationMessageArgumentResolver()
_subject_resolver = NotificationSubjectArgumentResolver()

_MESSAGE_PARAMETER = ParameterDescriptor(
    name="message", index=0, annotation=str, markers=(NotificationMessage(),)
)
_SUBJECT_PARAMETER = ParameterDescriptor(
    name="subject", index=0, annotation=Optional[str], markers=(NotificationSubject(),)
)
_STATUS_PARAMETER = ParameterDescriptor(name="status", index=0, annotation=NotificationStatus)


async def resolve_notification_message(request: Request) -> str:
    """
    Return the `Message` of a Notification envelope.

    Raises:
        UnsupportedEnvelopeTypeError: the envelope is not a Notification
        MalformedNotificationError: the body is not an SNS envelope
    """
    return await _message_resolver.resolve_argument(
        _MESSAGE_PARAMETER, BindingContext(parameters=(_MESSAGE_PARAMETER,)), request
    )


async def resolve_notification_subject(request: Request) -> Optional[str]:
    return await _subject_resolver.resolve_argument(
        _SUBJECT_PARAMETER, BindingContext(parameters=(_SUBJECT_PARAMETER,)), request
    )


async def resolve_notification_status(
    request: Request, sns_client=Depends(get_sns_client)
) -> NotificationStatus:
    resolver = NotificationStatusArgumentResolver(sns_client)
    return await resolver.resolve_argument(
        _STATUS_PARAMETER, BindingContext(parameters=(_STATUS_PARAMETER,)), request
    )


# Dependency Type Aliases
NotificationMessageDep = Annotated[str, Depends(resolve_notification_message)]
NotificationSubjectDep = Annotated[Optional[str], Depends(resolve_notification_subject)]
NotificationStatusDep = Annotated[NotificationStatus, Depends(resolve_notification_status)]
