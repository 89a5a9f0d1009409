"""
Error taxonomy shared by every entity service.

A single exception type tagged with an ``ErrorCode`` replaces a subclass per
error kind; the HTTP boundary switches on the tag.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Error kinds with their numeric code, catalog key and fallback message."""

    DATABASE_ERROR = (1001, "error.database", "A database error occurred")
    INVALID_DATA = (1002, "error.invalid_data", "Provided data is invalid")
    RESOURCE_CONFLICT = (1003, "error.resource.conflict", "Resource conflict occurred")
    RESOURCE_NOT_FOUND = (1004, "error.resource.not_found", "Resource not found")
    SERVICE_UNAVAILABLE = (1005, "error.service_unavailable", "Service is currently unavailable")
    UNEXPECTED_ERROR = (1006, "error.unexpected", "An unexpected error occurred")

    def __init__(self, code: int, message_key: str, default_message: str) -> None:
        self.code = code
        self.message_key = message_key
        self.default_message = default_message

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def from_code(cls, code: int) -> ErrorCode:
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"Unknown error code: {code}")


class ServiceError(Exception):
    """
    Raised by entity services for any failure the caller should see.

    ``message_args`` feed the catalog template for the error kind; ``detail``
    is caller-supplied text appended after the resolved message.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        *message_args: Any,
        detail: str | None = None,
    ) -> None:
        self.error_code = error_code
        self.message_args = tuple(message_args)
        self.detail = detail
        super().__init__(self.default_message)

    @property
    def code(self) -> int:
        return self.error_code.code

    @property
    def symbol(self) -> str:
        return self.error_code.symbol

    @property
    def default_message(self) -> str:
        """Message without catalog lookup, used for logs and ``str(exc)``."""
        if self.detail:
            return f"{self.error_code.default_message}: {self.detail}"
        return self.error_code.default_message

    @classmethod
    def not_found(cls, entity: str, field: str, value: Any) -> ServiceError:
        return cls(ErrorCode.RESOURCE_NOT_FOUND, entity, field, value)

    @classmethod
    def conflict(cls, entity: str, field: str, value: Any) -> ServiceError:
        return cls(ErrorCode.RESOURCE_CONFLICT, entity, field, value)

    @classmethod
    def invalid_data(cls, detail: str) -> ServiceError:
        return cls(ErrorCode.INVALID_DATA, detail=detail)

    @classmethod
    def unexpected(cls, detail: str | None) -> ServiceError:
        return cls(ErrorCode.UNEXPECTED_ERROR, detail=detail)

    def __repr__(self) -> str:
        return (
            f"ServiceError({self.symbol}, args={self.message_args!r}, detail={self.detail!r})"
        )
