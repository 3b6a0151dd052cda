"""Composition root wiring the signup controller to its adapters."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.controllers.signup import SignupController
from src.core.config import Settings, get_settings
from src.domain.add_account import DbAddAccount
from src.infrastructure.cryptography.bcrypt_adapter import BcryptAdapter
from src.infrastructure.database.account_repository import AccountRepository
from src.infrastructure.database.dependencies import DatabaseSession
from src.infrastructure.validators.email_validator_adapter import (
    EmailValidatorAdapter,
)


def make_signup_controller(
    session: AsyncSession, settings: Settings | None = None
) -> SignupController:
    """Build a signup controller backed by bcrypt, email-validator and PostgreSQL.

    Args:
        session: Database session the account repository writes through.
        settings: Settings supplying the bcrypt cost. Defaults to get_settings().

    Returns:
        SignupController: A controller ready to handle one request.
    """
    if settings is None:
        settings = get_settings()

    add_account = DbAddAccount(
        BcryptAdapter(settings.security_config.bcrypt_rounds),
        AccountRepository(session),
    )
    return SignupController(EmailValidatorAdapter(), add_account)


def get_signup_controller(
    session: DatabaseSession,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SignupController:
    """FastAPI dependency returning a controller bound to the request's session."""
    return make_signup_controller(session, settings)
