"""
API package.

Controller-style endpoints and FastAPI dependencies for SNS deliveries.
"""

from .deps import NotificationMessageDep, NotificationStatusDep, NotificationSubjectDep
from .endpoint import NotificationEndpoint

__all__ = [
    "NotificationEndpoint",
    "NotificationMessageDep",
    "NotificationStatusDep",
    "NotificationSubjectDep",
]
