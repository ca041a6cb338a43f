"""
Domain exceptions for the field schedule service.

Each exception carries a stable ``code`` so callers can branch on the
outcome without parsing messages. The application exception handler renders them
with their ``status_code``; services never deal with HTTP.
"""

from __future__ import annotations

from typing import Any

from fastapi import status


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    default_code = "DOMAIN_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": self.details}


class ValidationException(DomainException):
    """Raised when caller input is malformed (bad dates, empty slot lists)."""

    default_code = "INVALID_INPUT"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundException(DomainException):
    """Raised when a field, time slot or schedule identity does not resolve."""

    default_code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictException(DomainException):
    """Raised when a write would collide with existing data."""

    default_code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT


class ScheduleAlreadyExistsException(ConflictException):
    """A schedule already occupies the requested (field, date, time slot)."""

    default_code = "SCHEDULE_ALREADY_EXISTS"

    def __init__(
        self,
        message: str = "Field schedule already exists",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)


class RepositoryException(DomainException):
    """Raised when the underlying storage call fails or times out."""

    default_code = "PERSISTENCE_FAILURE"


__all__ = [
    "ConflictException",
    "DomainException",
    "NotFoundException",
    "RepositoryException",
    "ScheduleAlreadyExistsException",
    "ValidationException",
]
