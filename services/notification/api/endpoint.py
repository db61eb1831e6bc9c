"""
Controller-style SNS endpoint.

One POST route per endpoint path; the `x-amz-sns-message-type` header picks
the handler registered for that message type:

    endpoint = NotificationEndpoint("/topic")

    @endpoint.notification_message_mapping
    async def on_message(
        subject: Annotated[str, NotificationSubject()],
        message: Annotated[str, NotificationMessage()],
    ): ...

    @endpoint.notification_subscription_mapping
    def on_subscribe(status: NotificationStatus):
        status.confirm_subscription()

    app.include_router(endpoint.router)
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from ..core.binding import ArgumentResolverComposite
from ..core.resolvers import NotificationArgumentResolver
from ..models import MESSAGE_TYPE_HEADER, BindingContext, MessageType, ParameterDescriptor

logger = logging.getLogger("notification.endpoint")


@dataclass(frozen=True)
class HandlerMethod:
    """A registered handler and the descriptors of its parameters."""

    name: str
    func: Callable
    parameters: Tuple[ParameterDescriptor, ...]


class NotificationEndpoint:
    def __init__(
        self,
        path: str,
        resolvers: Optional[Sequence[NotificationArgumentResolver]] = None,
    ):
        self.path = path
        self.argument_resolver = ArgumentResolverComposite(resolvers)
        self.handlers: Dict[MessageType, HandlerMethod] = {}
        self.router = APIRouter()
        self.router.add_api_route(
            path,
            self.dispatch,
            methods=["POST"],
            summary="Receive an SNS HTTP(S) delivery",
        )

    # ==========================================
    # Mappings
    # ==========================================

    def register(self, message_type: MessageType, func: Callable) -> Callable:
        """
        Register `func` for `message_type` deliveries.

        Parameters are described and validated here, not per request.
        """
        if message_type in self.handlers:
            raise ValueError(
                f"{self.path} already maps {message_type.value} to "
                f"{self.handlers[message_type].name}"
            )
        parameters = self.argument_resolver.describe_handler(func)
        name = getattr(func, "__qualname__", repr(func))
        self.handlers[message_type] = HandlerMethod(name=name, func=func, parameters=parameters)
        logger.info(f"Mapped {message_type.value} deliveries on {self.path} to {name}")
        return func

    def notification_message_mapping(self, func: Callable) -> Callable:
        return self.register(MessageType.NOTIFICATION, func)

    def notification_subscription_mapping(self, func: Callable) -> Callable:
        return self.register(MessageType.SUBSCRIPTION_CONFIRMATION, func)

    def notification_unsubscribe_confirmation_mapping(self, func: Callable) -> Callable:
        return self.register(MessageType.UNSUBSCRIBE_CONFIRMATION, func)

    # ==========================================
    # Dispatch
    # ==========================================

    async def dispatch(self, request: Request) -> Response:
        header = request.headers.get(MESSAGE_TYPE_HEADER)
        if not header:
            raise HTTPException(status_code=400, detail=f"Missing {MESSAGE_TYPE_HEADER} header")
        try:
            message_type = MessageType(header)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown SNS message type: {header}")

        handler = self.handlers.get(message_type)
        if handler is None:
            raise HTTPException(
                status_code=404,
                detail=f"No handler mapped for {message_type.value} messages on {self.path}",
            )

        binding_context = BindingContext(handler_name=handler.name, parameters=handler.parameters)
        arguments = await self.argument_resolver.resolve_arguments(binding_context, request)

        logger.info(
            f"Dispatching {message_type.value} to {handler.name}",
            extra={"path": self.path, "message_type": message_type.value},
        )
        if inspect.iscoroutinefunction(handler.func):
            result = await handler.func(**arguments)
        else:
            result = await run_in_threadpool(handler.func, **arguments)

        if result is None:
            return Response(status_code=204)
        if isinstance(result, Response):
            return result
        return JSONResponse(content=jsonable_encoder(result))
