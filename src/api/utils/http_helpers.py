"""Map controller outcomes to status-coded response envelopes.

These helpers are the only place controller status codes are chosen.
"""

from fastapi import status

from src.api.schemas.http import HttpResponse
from src.core.exceptions import AppError, ServerError
from src.domain.models import AccountModel


def ok(payload: AccountModel) -> HttpResponse:
    """Wrap a successful result in a 200 response."""
    return HttpResponse(status_code=status.HTTP_200_OK, body=payload)


def bad_request(error: AppError) -> HttpResponse:
    """Wrap a client input error in a 400 response."""
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def forbidden(error: AppError) -> HttpResponse:
    """Wrap a refused operation, such as a taken e-mail, in a 403 response."""
    return HttpResponse(status_code=status.HTTP_403_FORBIDDEN, body=error)


def server_error(error: ServerError | None = None) -> HttpResponse:
    """Wrap an unexpected fault in a 500 response."""
    return HttpResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        body=error if error is not None else ServerError(),
    )
