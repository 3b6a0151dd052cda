"""JSON rendering for API responses.

:class:`ORJSONResponse` is the application's default response class.
:func:`render_http_response` turns a controller envelope into a response:
accounts are rendered as :class:`AccountResponse`, errors as
:class:`ErrorResponse`.
"""

from typing import Any

import orjson
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.api.schemas.accounts import AccountResponse
from src.api.schemas.errors import ErrorResponse, ServiceInfo
from src.api.schemas.http import HttpResponse
from src.core.config import Settings, get_settings
from src.core.context import RequestContext, generate_request_id
from src.core.exceptions import AppError
from src.domain.models import AccountModel


class ORJSONResponse(JSONResponse):
    """FastAPI Response class using orjson for JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:  # noqa: ANN401 - accepts any JSON-serializable content
        """Render the content as JSON using orjson.

        Args:
            content: The content to serialize to JSON.

        Returns:
            bytes: The JSON-encoded bytes.
        """
        if isinstance(content, BaseModel):
            content = content.model_dump(mode="json")

        return orjson.dumps(content, option=orjson.OPT_SORT_KEYS)


def get_service_info(settings: Settings) -> ServiceInfo:
    """Create ServiceInfo from application settings.

    Args:
        settings: Application settings

    Returns:
        ServiceInfo: Instance with current service metadata
    """
    return ServiceInfo(
        name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )


def build_error_response(
    error: AppError,
    settings: Settings | None = None,
    debug_info: dict[str, Any] | None = None,
) -> ErrorResponse:
    """Describe an application error for the client.

    Only the error's own code, message and context are exposed; a wrapped
    cause never is.

    Args:
        error: The error to describe.
        settings: Settings supplying service info. Defaults to get_settings().
        debug_info: Extra diagnostics, for development environments only.

    Returns:
        ErrorResponse: The response body.
    """
    if settings is None:
        settings = get_settings()

    return ErrorResponse(
        error_code=error.error_code,
        message=error.message,
        details=error.context or None,
        correlation_id=RequestContext.get_correlation_id(),
        request_id=RequestContext.get_request_id() or generate_request_id(),
        severity=error.severity.value,
        service_info=get_service_info(settings),
        debug_info=debug_info,
    )


def render_http_response(response: HttpResponse) -> ORJSONResponse:
    """Render a controller envelope as a JSON response.

    Args:
        response: Envelope returned by a controller.

    Returns:
        ORJSONResponse: Response with the envelope's status code.

    Raises:
        TypeError: If the body does not match the status class, such as an
            error under a 2xx status.
    """
    body = response.body
    if response.is_success and isinstance(body, AccountModel):
        content = AccountResponse.from_account(body).model_dump(mode="json")
    elif not response.is_success and isinstance(body, AppError):
        content = build_error_response(body).model_dump(mode="json")
    else:
        msg = (
            f"Status {response.status_code} cannot carry a "
            f"{type(body).__name__} body"
        )
        raise TypeError(msg)

    return ORJSONResponse(status_code=response.status_code, content=content)
