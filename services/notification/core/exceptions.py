"""
Custom exception classes.

Represent errors raised while binding SNS envelopes to handler parameters.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class NotificationBindingError(ValueError):
    """Base exception class for envelope binding."""

    pass


class UnsupportedEnvelopeTypeError(NotificationBindingError):
    """Raised when a parameter cannot be bound for the received envelope type."""

    def __init__(self, message: str, envelope_type: str = None):
        self.envelope_type = envelope_type
        super().__init__(message)


class MalformedNotificationError(NotificationBindingError):
    """Raised when the request body is not a readable SNS envelope."""

    def __init__(self, cause: object = None):
        self.cause = cause
        message = "Error reading notification request"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UnresolvableParameterError(TypeError):
    """Raised at registration when no resolver can bind a handler parameter."""

    def __init__(self, handler_name: str, parameter_name: str, annotation: object):
        self.handler_name = handler_name
        self.parameter_name = parameter_name
        super().__init__(
            f"No argument resolver for parameter '{parameter_name}' ({annotation!r}) "
            f"of handler {handler_name}"
        )


# ===========================================
# Exception Handlers
# ===========================================


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "detail": str(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTPException.
    """
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


async def notification_binding_exception_handler(request: Request, exc: NotificationBindingError):
    """
    Handler for envelopes that cannot be bound to the target handler.
    """
    logger.warning(
        f"Rejected notification request: {exc}",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Bad Request", "detail": str(exc)},
    )
