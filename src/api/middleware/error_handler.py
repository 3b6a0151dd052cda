"""Global exception handlers for the FastAPI application.

The signup controller returns expected failures as values, so these handlers
only see what escapes a route: an :class:`AppError` raised outside the
controller, malformed requests, framework HTTP errors and unexpected faults.
All of them are rendered in the :class:`ErrorResponse` shape.
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from loguru import logger
from starlette.exceptions import HTTPException

from src.api.schemas.errors import ErrorResponse
from src.api.utils.responses import (
    ORJSONResponse,
    build_error_response,
    get_service_info,
)
from src.core.config import get_settings
from src.core.context import RequestContext, generate_request_id
from src.core.error_context import sanitize_error_context
from src.core.exceptions import (
    AppError,
    EmailInUseError,
    ErrorCode,
    InvalidParamError,
    MissingParamError,
)

HTTP_SERVER_ERROR_THRESHOLD = 500


def status_code_for(exc: AppError) -> int:
    """Map an application error to its HTTP status code.

    Args:
        exc: The application error.

    Returns:
        int: 400 for parameter errors, 403 for a taken e-mail, 500 otherwise.
    """
    if isinstance(exc, (MissingParamError, InvalidParamError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EmailInUseError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def app_error_handler(request: Request, exc: Exception) -> Response:
    """Handle AppError exceptions raised outside the signup controller.

    Args:
        request: The FastAPI request that caused the exception
        exc: The AppError exception to handle

    Returns:
        Response: ORJSONResponse with error details

    Raises:
        TypeError: If exc is not an AppError instance
    """
    if not isinstance(exc, AppError):
        raise TypeError(f"Expected AppError, got {type(exc).__name__}")

    error_context = sanitize_error_context(
        exc,
        {
            "request_method": request.method,
            "request_path": str(request.url.path),
            "error_code": exc.error_code,
        },
    )
    log = logger.warning if exc.is_expected else logger.error
    log("Handling {}: {}", type(exc).__name__, exc.message, **error_context)

    return ORJSONResponse(
        status_code=status_code_for(exc),
        content=build_error_response(exc).model_dump(mode="json"),
    )


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Handle FastAPI RequestValidationError exceptions.

    Args:
        request: The FastAPI request that caused the exception
        exc: The RequestValidationError exception to handle

    Returns:
        Response: ORJSONResponse with field-level validation details

    Raises:
        TypeError: If exc is not a RequestValidationError instance
    """
    if not isinstance(exc, RequestValidationError):
        raise TypeError(f"Expected RequestValidationError, got {type(exc).__name__}")

    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field_path = error.get("loc", ())
        field_name = ".".join(str(loc) for loc in field_path[1:]) or "root"
        field_errors.setdefault(field_name, []).append(
            error.get("msg", "Invalid value")
        )

    logger.warning(
        "Request validation failed",
        path=str(request.url.path),
        method=request.method,
        validation_errors=field_errors,
    )

    error_response = ErrorResponse(
        error_code=ErrorCode.INVALID_PARAM.value,
        message="Request validation failed",
        details={"validation_errors": field_errors},
        correlation_id=RequestContext.get_correlation_id(),
        request_id=RequestContext.get_request_id() or generate_request_id(),
        severity="LOW",
        service_info=get_service_info(get_settings()),
    )

    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle Starlette HTTPException (unknown routes, wrong methods, bad JSON).

    Args:
        request: The FastAPI request that caused the exception
        exc: The HTTPException to handle

    Returns:
        Response: ORJSONResponse with error details

    Raises:
        TypeError: If exc is not an HTTPException instance
    """
    if not isinstance(exc, HTTPException):
        raise TypeError(f"Expected HTTPException, got {type(exc).__name__}")

    error_code = ErrorCode.BAD_REQUEST.value
    severity = "LOW"

    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_code = ErrorCode.NOT_FOUND.value
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error_code = ErrorCode.METHOD_NOT_ALLOWED.value
    elif exc.status_code >= HTTP_SERVER_ERROR_THRESHOLD:
        error_code = ErrorCode.INTERNAL_ERROR.value
        severity = "HIGH"

    logger.warning(
        "HTTP exception",
        status=exc.status_code,
        method=request.method,
        path=str(request.url.path),
        detail=exc.detail,
    )

    error_response = ErrorResponse(
        error_code=error_code,
        message=str(exc.detail),
        correlation_id=RequestContext.get_correlation_id(),
        request_id=RequestContext.get_request_id() or generate_request_id(),
        severity=severity,
        service_info=get_service_info(get_settings()),
    )

    return ORJSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle any exception no other handler claimed.

    In production the client only sees a generic message; in other
    environments the exception type and traceback are included.

    Args:
        request: The FastAPI request that caused the exception
        exc: The unhandled exception

    Returns:
        Response: ORJSONResponse with a 500 status
    """
    settings = get_settings()

    error_context = sanitize_error_context(
        exc,
        {
            "request_method": request.method,
            "request_path": str(request.url.path),
        },
    )
    logger.opt(exception=exc).error(
        "Unhandled exception: {}", type(exc).__name__, **error_context
    )

    if settings.environment == "production":
        message = "An internal server error occurred"
        debug_info = None
    else:
        message = f"Internal server error: {type(exc).__name__}"
        debug_info = {
            "stack_trace": traceback.format_tb(exc.__traceback__),
            "exception_type": type(exc).__name__,
        }

    error_response = ErrorResponse(
        error_code=ErrorCode.INTERNAL_ERROR.value,
        message=message,
        correlation_id=RequestContext.get_correlation_id(),
        request_id=RequestContext.get_request_id() or generate_request_id(),
        severity="CRITICAL",
        service_info=get_service_info(settings),
        debug_info=debug_info,
    )

    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.debug("Exception handlers registered")
