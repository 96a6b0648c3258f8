# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client, plus the handler that turns
request validation failures into 400 responses.
"""

import re
import time
import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "detail": "An unexpected error occurred",
    "code": "INTERNAL_SERVER_ERROR",
}

# Domain codes not listed here are treated as unexpected errors
DOMAIN_STATUS_CODES = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "N/A"


def _field_errors(details: Dict[str, Any]) -> List[Dict[str, str]]:
    return [{"field": field, "message": str(message)} for field, message in details.items()]


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.

    Expected domain errors keep their message; anything else is logged
    in full and answered with a generic 500 body.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = DOMAIN_STATUS_CODES.get(exc.internal_code)
            if status_code is None:
                logger.error(
                    f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                    f"Path: {request.url.path}"
                )
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content=INTERNAL_ERROR_BODY
                )

            # Mapping from pure exception to HTTP code based on 'internal_code'
            logger.warning(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            content = {"detail": str(exc), "code": exc.internal_code}
            if exc.internal_code == "INVALID_INPUT":
                content["errors"] = _field_errors(exc.details)

            return JSONResponse(status_code=status_code, content=content)

        except IntegrityError as exc:
            constraint_name = self._extract_constraint_name(str(exc))
            logger.error(
                f"Integrity error: {str(exc)} | "
                f"Constraint={constraint_name or 'N/A'} | "
                f"Path: {request.url.path} | "
                f"Client: {_client_host(request)}"
            )

            error_msg = str(exc).lower()
            if "unique" in error_msg or "duplicate" in error_msg:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={
                        "detail": "Resource already exists",
                        "code": "RESOURCE_ALREADY_EXISTS"
                    }
                )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY
            )

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {_client_host(request)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY
            )

        except Exception as exc:
            # Unhandled exceptions: logged with traceback, never echoed
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {_client_host(request)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY
            )

    def _extract_constraint_name(self, error_message: str) -> Optional[str]:
        """
        Attempts to extract the constraint name from an integrity error message.

        Args:
            error_message: The complete error message

        Returns:
            The constraint name or None if not found
        """
        # Common patterns for different databases
        patterns = [
            r'constraint "(.*?)"',
            r'CONSTRAINT (.*?) FOREIGN KEY',
            r'UNIQUE constraint failed: (.*)',
            r'violates unique constraint "(.*?)"',
            r'duplicate key value violates unique constraint "(.*?)"'
        ]

        for pattern in patterns:
            match = re.search(pattern, error_message)
            if match:
                return match.group(1)
        return None


def _format_validation_error(error: Dict[str, Any]) -> Dict[str, str]:
    """
    Flatten one pydantic error into a field/message pair.

    The leading location segment ("body", "path", "query") is dropped
    unless it is the only one.
    """
    loc = [str(part) for part in error.get("loc", ())]
    if len(loc) > 1 and loc[0] in ("body", "path", "query", "header", "cookie"):
        loc = loc[1:]

    message = str(error.get("msg", "Invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]

    return {"field": ".".join(loc), "message": message}


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer request validation failures with 400 and one entry per invalid field.
    """
    errors = [_format_validation_error(error) for error in exc.errors()]
    logger.warning(
        f"Validation error: {len(errors)} invalid field(s) | "
        f"Path: {request.url.path} | "
        f"Fields: {[error['field'] for error in errors]}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors
        }
    )
