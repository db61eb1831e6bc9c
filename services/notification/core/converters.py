"""
Message conversion.

SNS always delivers `Message` as text. Handlers may declare the parameter as
`str` (returned unchanged) or as a structured type decoded from JSON text.
"""

import inspect
import json
import types
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from .exceptions import MalformedNotificationError

_PASS_THROUGH = (inspect.Parameter.empty, Any, str, object)
_JSON_CONTAINERS = (dict, list)


def _unwrap_optional(target_type: Any) -> Any:
    if get_origin(target_type) in (Union, types.UnionType):
        args = [arg for arg in get_args(target_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return target_type


class MessageConverter:
    """Convert raw message text into a handler's declared parameter type."""

    def can_convert(self, target_type: Any) -> bool:
        target_type = _unwrap_optional(target_type)
        if target_type in _PASS_THROUGH or target_type is bytes:
            return True
        if (get_origin(target_type) or target_type) in _JSON_CONTAINERS:
            return True
        return inspect.isclass(target_type) and issubclass(target_type, BaseModel)

    def convert(self, message: str, target_type: Any) -> Any:
        target_type = _unwrap_optional(target_type)
        if target_type in _PASS_THROUGH:
            return message
        if target_type is bytes:
            return message.encode("utf-8")

        if inspect.isclass(target_type) and issubclass(target_type, BaseModel):
            try:
                return target_type.model_validate_json(message)
            except ValidationError as e:
                raise MalformedNotificationError(e) from e

        container = get_origin(target_type) or target_type
        if container in _JSON_CONTAINERS:
            try:
                value = json.loads(message)
            except json.JSONDecodeError as e:
                raise MalformedNotificationError(e) from e
            if not isinstance(value, container):
                raise MalformedNotificationError(
                    f"message is {type(value).__name__}, expected {container.__name__}"
                )
            return value

        raise TypeError(f"Cannot convert notification message to {target_type!r}")
