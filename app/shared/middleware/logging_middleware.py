# app/shared/middleware/logging_middleware.py

"""
One log line per request and one per response.

Outside production the request line also carries the query string and
the client address. Responses with a 5xx status are logged as errors
so they stand out from routine traffic.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


def _describe_request(request: Request) -> str:
    line = f"{request.method} {request.url.path}"
    if settings.ENVIRONMENT == "production":
        return line
    query = request.url.query or "N/A"
    client = request.client.host if request.client else "N/A"
    return f"{line} | Query: {query} | Client: {client}"


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status code and elapsed time."""

    async def dispatch(self, request: Request, call_next):
        logger.info(f"Request: {_describe_request(request)}")

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"Response: {response.status_code} for {request.method} {request.url.path} | "
            f"Time: {elapsed_ms:.1f}ms"
        )
        return response
