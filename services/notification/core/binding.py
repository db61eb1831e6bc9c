"""
Argument binding pipeline.

ArgumentResolverComposite walks a handler's parameter descriptors, picks the
first resolver that supports each one and resolves the values for a request.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from fastapi import Request

from ..models import BindingContext, ParameterDescriptor
from .converters import MessageConverter
from .exceptions import UnresolvableParameterError
from .markers import NotificationMessage
from .resolvers import (
    NotificationArgumentResolver,
    NotificationMessageArgumentResolver,
    NotificationStatusArgumentResolver,
    NotificationSubjectArgumentResolver,
)

logger = logging.getLogger("notification.binding")


def default_resolvers(sns_client=None) -> List[NotificationArgumentResolver]:
    """Resolvers for NotificationMessage, NotificationSubject and NotificationStatus."""
    return [
        NotificationMessageArgumentResolver(),
        NotificationSubjectArgumentResolver(),
        NotificationStatusArgumentResolver(sns_client),
    ]


def _is_framework_parameter(parameter: ParameterDescriptor) -> bool:
    annotation = parameter.annotation
    return inspect.isclass(annotation) and issubclass(annotation, (Request, BindingContext))


class ArgumentResolverComposite:
    def __init__(self, resolvers: Optional[Sequence[NotificationArgumentResolver]] = None):
        self.resolvers: List[NotificationArgumentResolver] = list(
            resolvers if resolvers is not None else default_resolvers()
        )
        self._cache: Dict[ParameterDescriptor, NotificationArgumentResolver] = {}

    def add_resolver(self, resolver: NotificationArgumentResolver) -> None:
        self.resolvers.append(resolver)
        self._cache.clear()

    def get_resolver(
        self, parameter: ParameterDescriptor
    ) -> Optional[NotificationArgumentResolver]:
        resolver = self._cache.get(parameter)
        if resolver is None:
            for candidate in self.resolvers:
                if candidate.supports_parameter(parameter):
                    resolver = candidate
                    self._cache[parameter] = candidate
                    break
        return resolver

    def supports_parameter(self, parameter: ParameterDescriptor) -> bool:
        return self.get_resolver(parameter) is not None

    def describe_handler(self, handler: Callable) -> Tuple[ParameterDescriptor, ...]:
        """
        Build and validate descriptors for `handler`.

        Raises:
            UnresolvableParameterError: a parameter has no resolver
            TypeError: a NotificationMessage parameter has an unconvertible type
        """
        handler_name = getattr(handler, "__qualname__", repr(handler))
        parameters = ParameterDescriptor.for_callable(handler)
        converter = MessageConverter()

        for parameter in parameters:
            if _is_framework_parameter(parameter):
                continue
            if not self.supports_parameter(parameter):
                raise UnresolvableParameterError(
                    handler_name, parameter.name, parameter.annotation
                )
            if parameter.has_marker(NotificationMessage) and not converter.can_convert(
                parameter.annotation
            ):
                raise TypeError(
                    f"Parameter '{parameter.name}' of handler {handler_name} "
                    f"cannot receive a notification message as {parameter.annotation!r}"
                )

        logger.debug(f"Registered handler {handler_name} with {len(parameters)} parameters")
        return parameters

    async def resolve_arguments(
        self, binding_context: BindingContext, request: Request
    ) -> Dict[str, Any]:
        """Resolve every parameter in `binding_context` for one request."""
        arguments: Dict[str, Any] = {}
        for parameter in binding_context.parameters:
            annotation = parameter.annotation
            if inspect.isclass(annotation) and issubclass(annotation, Request):
                arguments[parameter.name] = request
                continue
            if inspect.isclass(annotation) and issubclass(annotation, BindingContext):
                arguments[parameter.name] = binding_context
                continue

            resolver = self.get_resolver(parameter)
            if resolver is None:
                raise UnresolvableParameterError(
                    binding_context.handler_name, parameter.name, annotation
                )
            arguments[parameter.name] = await resolver.resolve_argument(
                parameter, binding_context, request
            )
        return arguments
