# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    request_validation_exception_handler,
)
from app.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware
from app.shared.middleware.security_headers_middleware import AsyncSecurityHeadersMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "AsyncSecurityHeadersMiddleware",
    "request_validation_exception_handler",
]
