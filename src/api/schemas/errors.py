"""Standardized error response schema.

Every error leaving the service, whether returned by the signup controller
or produced by a global exception handler, is rendered as an
:class:`ErrorResponse`.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Service information for error context."""

    name: str = Field(..., description="Name of the service")
    version: str = Field(..., description="Version of the service")
    environment: str = Field(
        ...,
        description="Environment where the service is running",
        examples=["development", "staging", "production"],
    )


class ErrorResponse(BaseModel):
    """Standardized error response model for API errors."""

    error_code: str = Field(
        ...,
        description="Unique error code identifying the error type",
        examples=["MISSING_PARAM", "INVALID_PARAM", "EMAIL_IN_USE", "NOT_FOUND"],
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Missing param: name", "Invalid param: email"],
    )

    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details, such as the offending parameter",
        examples=[{"param_name": "email"}],
    )

    correlation_id: str | None = Field(
        default=None,
        description="Request correlation ID for tracing and debugging",
    )

    request_id: str | None = Field(
        default=None,
        description="Unique identifier of this request",
    )

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Timestamp when the error occurred (with timezone)",
    )

    severity: str | None = Field(
        default=None,
        description="Error severity level (LOW, MEDIUM, HIGH, CRITICAL)",
    )

    service_info: ServiceInfo | None = Field(
        default=None,
        description="Information about the service that generated the error",
    )

    debug_info: dict[str, Any] | None = Field(
        default=None,
        description="Debug information (only populated in development environments)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error_code": "MISSING_PARAM",
                    "message": "Missing param: passwordConfirmation",
                    "details": {"param_name": "passwordConfirmation"},
                    "correlation_id": "550e8400-e29b-41d4-a716-446655440000",
                    "request_id": "req-660e8400-e29b-41d4-a716-446655440000",
                    "timestamp": "2024-06-14T12:00:00+00:00",
                    "severity": "LOW",
                    "service_info": {
                        "name": "Signup Service",
                        "version": "0.1.0",
                        "environment": "production",
                    },
                },
                {
                    "error_code": "INTERNAL_ERROR",
                    "message": "Internal server error",
                    "timestamp": "2024-06-14T12:00:03+00:00",
                    "severity": "CRITICAL",
                },
            ]
        }
    }
