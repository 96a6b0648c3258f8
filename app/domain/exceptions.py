# app/domain/exceptions.py

"""
Application exceptions.

This module defines the domain exceptions raised by repositories and
services. They carry a message and an internal code; the exception
middleware maps the code to an HTTP status.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for every application error.
    Independent of the web framework.
    """

    def __init__(
            self,
            detail: Any = None,
            internal_code: Optional[str] = None,
            details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code
        self.details = details or {}

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists (uniqueness violation)."""

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            detail=detail,
            internal_code="RESOURCE_ALREADY_EXISTS"
        )


class InvalidInputException(DomainException):
    """
    Invalid input data, with one message per offending field.

    Reserved: request bodies are rejected by the pydantic schemas before
    any service runs, so no service raises it today. The exception
    middleware answers it with 400 and the same field-error list as a
    request validation failure.
    """

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        super().__init__(
            detail=detail,
            internal_code="INVALID_INPUT",
            details=fields,
        )


class DatabaseOperationException(DomainException):
    """Error while executing a database operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )
        self.original_error = original_error


########################################################################
# Names of the error taxonomy used throughout the API documentation
########################################################################
ValidationError = InvalidInputException
ConflictError = ResourceAlreadyExistsException
NotFoundError = ResourceNotFoundException
UnexpectedError = DatabaseOperationException
