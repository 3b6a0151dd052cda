"""Structured error types for the signup flow.

This module defines the error values the service reports to clients and the
exceptions its collaborators use to signal distinguishable failures.

Key components:
- **ErrorCode enum**: Standardized error identifiers for programmatic handling
- **Severity enum**: Error classification for logging and alerting
- **AppError**: Base error with code, message, severity and context
- **Specialized errors**: Missing/invalid params, e-mail in use, server failure

Expected validation failures are returned by the signup controller as values
(the error instance becomes the response body); they are never raised.
Only collaborator faults travel as exceptions. Errors compare by value so a
response body can be checked against a freshly built error.
"""

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for the signup service."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred in the system."""

    MISSING_PARAM = "MISSING_PARAM"
    """A required request field was absent or empty."""

    INVALID_PARAM = "INVALID_PARAM"
    """A request field was present but its value was rejected."""

    EMAIL_IN_USE = "EMAIL_IN_USE"
    """An account with the submitted e-mail already exists."""

    BAD_REQUEST = "BAD_REQUEST"
    """The request could not be processed, such as a body that is not JSON."""

    NOT_FOUND = "NOT_FOUND"
    """No route matches the requested path."""

    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    """The route exists but does not accept the request method."""


class Severity(Enum):
    """Severity levels for errors in the signup service."""

    LOW = "LOW"
    """Errors caused by client input, resolved by resubmission."""

    MEDIUM = "MEDIUM"
    """Errors caused by business rules, such as a taken e-mail."""

    HIGH = "HIGH"
    """Errors impacting critical functionality or data integrity."""

    CRITICAL = "CRITICAL"
    """Unexpected faults requiring attention."""


class AppError(Exception):
    """Base class for all errors reported by the signup service.

    Args:
        error_code: Unique identifier for the error type (string or ErrorCode enum)
        message: Human-readable error message
        severity: Severity level of the error (defaults to MEDIUM)
        context: Additional context information about the error
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        error_code: str | ErrorCode,
        message: str,
        severity: Severity = Severity.MEDIUM,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.error_code = (
            error_code.value if isinstance(error_code, ErrorCode) else error_code
        )
        self.message = message
        self.severity = severity
        self.context = context or {}
        self.cause = cause

        super().__init__(message)
        if cause:
            self.__cause__ = cause

    @property
    def is_expected(self) -> bool:
        """Whether this error is part of normal operation (LOW or MEDIUM severity).

        Returns:
            bool: True if the error is expected
        """
        return self.severity in (Severity.LOW, Severity.MEDIUM)

    def __eq__(self, other: object) -> bool:
        """Compare errors by type, code, message and context.

        The cause is not compared: two server errors are equal
        regardless of what triggered them.
        """
        if not isinstance(other, AppError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.error_code == other.error_code
            and self.message == other.message
            and self.context == other.context
        )

    def __hash__(self) -> int:
        """Hash consistently with equality."""
        return hash((type(self), self.error_code, self.message))

    def __str__(self) -> str:
        """Return a string representation of the error.

        Returns:
            str: A formatted string containing the error code and message
        """
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return a detailed representation of the error.

        Returns:
            str: A string showing the class name, error code, message, severity,
                and context
        """
        class_name = self.__class__.__name__
        context_str = f", context={self.context}" if self.context else ""
        return (
            f"{class_name}(error_code='{self.error_code}', "
            f"message='{self.message}', severity={self.severity.value}{context_str})"
        )


class MissingParamError(AppError):
    """A required request field was not provided.

    Args:
        param_name: Name of the missing field, as it appears in the request
    """

    def __init__(self, param_name: str) -> None:
        super().__init__(
            ErrorCode.MISSING_PARAM,
            f"Missing param: {param_name}",
            Severity.LOW,
            {"param_name": param_name},
        )
        self.param_name = param_name


class InvalidParamError(AppError):
    """A request field carried a value that was rejected.

    Args:
        param_name: Name of the offending field, as it appears in the request
    """

    def __init__(self, param_name: str) -> None:
        super().__init__(
            ErrorCode.INVALID_PARAM,
            f"Invalid param: {param_name}",
            Severity.LOW,
            {"param_name": param_name},
        )
        self.param_name = param_name


class EmailInUseError(AppError):
    """An account with the submitted e-mail already exists.

    Raised by the account repository when the store rejects a duplicate;
    the signup controller reports it as a client error.

    Args:
        cause: The storage error that signalled the duplicate
    """

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(
            ErrorCode.EMAIL_IN_USE,
            "The received email is already in use",
            Severity.MEDIUM,
            cause=cause,
        )


class ServerError(AppError):
    """An unexpected collaborator fault.

    The message is generic and the cause is only kept for logging;
    it is never rendered into a response.

    Args:
        cause: The exception that was caught at the controller boundary
    """

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(
            ErrorCode.INTERNAL_ERROR,
            "Internal server error",
            Severity.CRITICAL,
            cause=cause,
        )
