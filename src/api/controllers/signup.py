"""Signup controller: validates a registration request and creates the account."""

from collections.abc import Mapping
from typing import Any, Final

from loguru import logger

from src.api.schemas.http import HttpRequest, HttpResponse
from src.api.utils.http_helpers import bad_request, forbidden, ok, server_error
from src.core.exceptions import (
    EmailInUseError,
    InvalidParamError,
    MissingParamError,
    ServerError,
)
from src.domain.models import AddAccountModel
from src.domain.protocols import AddAccount, EmailValidator

# Checked in this order; the first missing field is the one reported
REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "email",
    "password",
    "passwordConfirmation",
)


class SignupController:
    """Handle ``POST /api/signup``.

    The controller is the single boundary where collaborator faults are
    caught: a validator or use case exception becomes a 500 response with a
    :class:`ServerError` body, and a duplicate e-mail becomes a 403.

    Args:
        email_validator: E-mail syntax checker.
        add_account: Account creation use case.
    """

    def __init__(
        self, email_validator: EmailValidator, add_account: AddAccount
    ) -> None:
        self.email_validator = email_validator
        self.add_account = add_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Validate the request and create the account.

        Args:
            request: Request whose body holds ``name``, ``email``, ``password``
                and ``passwordConfirmation``.

        Returns:
            HttpResponse: 200 with the stored account, 400 with a
                :class:`MissingParamError` or :class:`InvalidParamError`,
                403 with :class:`EmailInUseError`, or 500 with
                :class:`ServerError`.
        """
        body: Mapping[str, Any] = (
            request.body if isinstance(request.body, Mapping) else {}
        )

        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return self._reject(bad_request(MissingParamError(field)))

        for field in REQUIRED_FIELDS:
            if not isinstance(body[field], str):
                return self._reject(bad_request(InvalidParamError(field)))

        name = body["name"]
        email = body["email"]
        password = body["password"]

        if password != body["passwordConfirmation"]:
            return self._reject(bad_request(InvalidParamError("passwordConfirmation")))

        try:
            if not self.email_validator.is_valid(email):
                return self._reject(bad_request(InvalidParamError("email")))

            account = await self.add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
        except EmailInUseError as e:
            return self._reject(forbidden(e))
        except Exception as e:
            logger.exception("Signup failed with {}", type(e).__name__)
            return server_error(ServerError(cause=e))

        logger.info("Account created", account_id=account.id)
        return ok(account)

    @staticmethod
    def _reject(response: HttpResponse) -> HttpResponse:
        """Log a refused signup and pass the response through."""
        error = response.body
        logger.warning(
            "Signup rejected: {}",
            getattr(error, "message", error),
            status_code=response.status_code,
            error_code=getattr(error, "error_code", None),
            param_name=getattr(error, "param_name", None),
        )
        return response
