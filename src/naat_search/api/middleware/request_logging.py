# Request Logging Middleware with Correlation IDs

import uuid
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("naat_search.api")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an ID (X-Request-ID, generated when absent),
    logs start and completion with timing, and echoes the ID back.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.time()
        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                    "error": str(e),
                },
            )
            raise

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response
