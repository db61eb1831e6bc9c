"""
Data model definitions package.

Aggregates the SNS envelope and parameter binding models.
"""

from .envelope import MESSAGE_TYPE_HEADER, MessageType, NotificationEnvelope
from .parameter import BindingContext, ParameterDescriptor

__all__ = [
    "MESSAGE_TYPE_HEADER",
    "MessageType",
    "NotificationEnvelope",
    "BindingContext",
    "ParameterDescriptor",
]
