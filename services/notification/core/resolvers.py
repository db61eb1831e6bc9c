"""
Argument resolvers for SNS HTTP endpoint handlers.

Each resolver answers two questions about a handler parameter:
`supports_parameter` (pure, decided from the descriptor alone) and
`resolve_argument` (reads the request body once and extracts the value).
"""

import inspect
import json
from abc import ABC, abstractmethod
from typing import Any, Optional

from fastapi import Request
from pydantic import ValidationError

from ..models import BindingContext, MessageType, NotificationEnvelope, ParameterDescriptor
from .converters import MessageConverter
from .exceptions import MalformedNotificationError, UnsupportedEnvelopeTypeError
from .markers import NotificationMessage, NotificationSubject
from .status import NotificationStatus, SnsNotificationStatus


def _request_charset(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset" and value:
            return value.strip('"')
    return "utf-8"


async def read_envelope(request: Request) -> NotificationEnvelope:
    """
    Read the whole request body and parse it as an SNS envelope.

    Raises:
        MalformedNotificationError: body is not a JSON object with a `Type` field
    """
    body = await request.body()
    try:
        content = json.loads(body.decode(_request_charset(request)))
    except (UnicodeDecodeError, LookupError, json.JSONDecodeError) as e:
        raise MalformedNotificationError(e) from e

    if not isinstance(content, dict):
        raise MalformedNotificationError("body is not a JSON object")

    try:
        return NotificationEnvelope.model_validate(content)
    except ValidationError as e:
        raise MalformedNotificationError(e) from e


class NotificationArgumentResolver(ABC):
    """
    Base class for resolvers that bind a value out of the SNS envelope.
    """

    @abstractmethod
    def supports_parameter(self, parameter: ParameterDescriptor) -> bool: ...

    async def resolve_argument(
        self,
        parameter: ParameterDescriptor,
        binding_context: BindingContext,
        request: Request,
    ) -> Any:
        envelope = await read_envelope(request)
        return self.resolve_from_envelope(parameter, envelope, request)

    @abstractmethod
    def resolve_from_envelope(
        self,
        parameter: ParameterDescriptor,
        envelope: NotificationEnvelope,
        request: Request,
    ) -> Any: ...


class NotificationMessageArgumentResolver(NotificationArgumentResolver):
    """Binds `Message` of a Notification envelope to `NotificationMessage` parameters."""

    def __init__(self, converter: Optional[MessageConverter] = None):
        self.converter = converter or MessageConverter()

    def supports_parameter(self, parameter: ParameterDescriptor) -> bool:
        return parameter.has_marker(NotificationMessage)

    def resolve_from_envelope(self, parameter, envelope, request):
        if not envelope.is_type(MessageType.NOTIFICATION):
            raise UnsupportedEnvelopeTypeError(
                "@NotificationMessage annotated parameters are only allowed for method "
                "that receive a notification message.",
                envelope.type,
            )
        if envelope.message is None:
            raise MalformedNotificationError("notification has no Message field")
        return self.converter.convert(envelope.message, parameter.annotation)


class NotificationSubjectArgumentResolver(NotificationArgumentResolver):
    """Binds `Subject` of a Notification envelope to `NotificationSubject` parameters."""

    def supports_parameter(self, parameter: ParameterDescriptor) -> bool:
        return parameter.has_marker(NotificationSubject)

    def resolve_from_envelope(self, parameter, envelope, request):
        if not envelope.is_type(MessageType.NOTIFICATION):
            raise UnsupportedEnvelopeTypeError(
                "@NotificationSubject annotated parameters are only allowed for method "
                "that receive a notification message.",
                envelope.type,
            )
        return envelope.subject


class NotificationStatusArgumentResolver(NotificationArgumentResolver):
    """
    Binds a `NotificationStatus` to parameters declared with that type.

    Without an explicit client, the SNS client is taken from
    `request.app.state.sns_client`.
    """

    def __init__(self, sns_client=None):
        self.sns_client = sns_client

    def supports_parameter(self, parameter: ParameterDescriptor) -> bool:
        annotation = parameter.annotation
        return inspect.isclass(annotation) and issubclass(annotation, NotificationStatus)

    def resolve_from_envelope(self, parameter, envelope, request):
        if not (
            envelope.is_type(MessageType.SUBSCRIPTION_CONFIRMATION)
            or envelope.is_type(MessageType.UNSUBSCRIBE_CONFIRMATION)
        ):
            raise UnsupportedEnvelopeTypeError(
                "NotificationStatus is only available for subscription and unsubscription requests",
                envelope.type,
            )
        sns_client = self.sns_client or request.app.state.sns_client
        return SnsNotificationStatus(sns_client, envelope.topic_arn, envelope.token)
