# app/shared/middleware/security_headers_middleware.py

"""
Response headers for the User Management API.

JSON routes under the API prefix get a locked-down header set: no
framing, no sniffing, a same-origin CSP and no caching of user data.
The HTML pages under /web, the OpenAPI docs and the stylesheet are left
out of that set, since they carry inline styles and the docs pull
their assets from a CDN.
"""

import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

API_CSP = "; ".join([
    "default-src 'self'",
    "script-src 'self'",
    "style-src 'self'",
    "img-src 'self' data:",
    "connect-src 'self'",
    "frame-src 'none'",
    "object-src 'none'",
    "base-uri 'self'",
])

PERMISSIONS_POLICY = ", ".join(
    f"{feature}=()" for feature in
    ("accelerometer", "camera", "geolocation", "gyroscope", "magnetometer", "microphone", "payment", "usb")
)

API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "1; mode=block",
    "Content-Security-Policy": API_CSP,
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": PERMISSIONS_POLICY,
    # User records must not linger in shared caches
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}

DOCS_PATHS = ("/", "/docs", "/redoc", "/openapi.json")
EXEMPT_PREFIXES = ("/docs/", "/redoc/", "/web/", "/static/")


def _is_exempt(path: str) -> bool:
    """True for the docs, the HTML pages and static files."""
    return path in DOCS_PATHS or path == "/web" or path.startswith(EXEMPT_PREFIXES)


class AsyncSecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add API_HEADERS to API responses.

    Every response also gets a fixed `Server` value when one is present,
    and HSTS when running in production behind HTTPS. Files under
    /static may be cached for an hour.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        path = request.url.path

        if not _is_exempt(path):
            response.headers.update(API_HEADERS)

        if "Server" in response.headers:
            response.headers["Server"] = "User Management API"

        if settings.ENVIRONMENT == "production" and settings.USE_HTTPS:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        if path.startswith("/static/"):
            response.headers["Cache-Control"] = "public, max-age=3600"

        return response
