# app/domain/__init__.py

"""
Main module for the application's domain components.

This module exports the domain exceptions.
"""

from app.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
    InvalidInputException,
    ValidationError,
    ConflictError,
    NotFoundError,
    UnexpectedError,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceAlreadyExistsException",
    "DatabaseOperationException",
    "InvalidInputException",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "UnexpectedError",
]
