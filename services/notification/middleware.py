"""
Where: services/notification/middleware.py
What: HTTP middleware for request id propagation and access logging.
Why: Isolate cross-cutting request concerns from app assembly.
"""

import logging
import time

from fastapi import Request

from services.common.core.request_context import clear_request_id, generate_request_id

from .models import MESSAGE_TYPE_HEADER

logger = logging.getLogger("notification.main")


async def request_context_middleware(request: Request, call_next):
    """Middleware for Request ID propagation and structured access logging."""
    start_time = time.perf_counter()

    req_id = generate_request_id()

    try:
        response = await call_next(request)
        response.headers["x-request-id"] = req_id

        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": req_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "latency_ms": process_time_ms,
                "sns_message_type": request.headers.get(MESSAGE_TYPE_HEADER),
                "sns_message_id": request.headers.get("x-amz-sns-message-id"),
                "topic_arn": request.headers.get("x-amz-sns-topic-arn"),
                "client_ip": request.client.host if request.client else None,
            },
        )

        return response
    finally:
        clear_request_id()
