"""
Binding markers.

Placed in `Annotated[...]` metadata to tell the argument binder which part of
the SNS envelope a handler parameter receives:

    async def on_message(message: Annotated[str, NotificationMessage()]): ...
"""


class BindingMarker:
    """Base class for envelope binding markers."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class NotificationMessage(BindingMarker):
    """Bind the `Message` field of a Notification envelope."""


class NotificationSubject(BindingMarker):
    """Bind the `Subject` field of a Notification envelope."""
