"""
Core logic package.

Provides binding markers, argument resolvers and the binding pipeline.
"""

from .binding import ArgumentResolverComposite, default_resolvers
from .markers import NotificationMessage, NotificationSubject
from .resolvers import (
    NotificationArgumentResolver,
    NotificationMessageArgumentResolver,
    NotificationStatusArgumentResolver,
    NotificationSubjectArgumentResolver,
)
from .status import NotificationStatus, SnsNotificationStatus

__all__ = [
    "ArgumentResolverComposite",
    "default_resolvers",
    "NotificationMessage",
    "NotificationSubject",
    "NotificationArgumentResolver",
    "NotificationMessageArgumentResolver",
    "NotificationStatusArgumentResolver",
    "NotificationSubjectArgumentResolver",
    "NotificationStatus",
    "SnsNotificationStatus",
]
