"""Pydantic schemas and envelopes for the API layer."""

from src.api.schemas.accounts import AccountResponse, SignupRequest
from src.api.schemas.errors import ErrorResponse, ServiceInfo
from src.api.schemas.http import HttpRequest, HttpResponse

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "HttpRequest",
    "HttpResponse",
    "ServiceInfo",
    "SignupRequest",
]
