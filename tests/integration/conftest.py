"""Fixtures for integration tests.

The signup route runs against the real FastAPI app, the real e-mail
validator and bcrypt at the minimum cost. Only the database is replaced by
an in-memory repository.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.controllers.signup import SignupController
from src.api.factories import get_signup_controller
from src.api.main import create_app
from src.core.config import get_settings
from src.core.context import RequestContext
from src.domain.add_account import DbAddAccount
from src.infrastructure.cryptography.bcrypt_adapter import BcryptAdapter
from src.infrastructure.validators.email_validator_adapter import (
    EmailValidatorAdapter,
)
from tests.fixtures.doubles import InMemoryAccountRepository


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Reset cached settings and request context around each test."""
    get_settings.cache_clear()
    RequestContext.clear()
    yield
    get_settings.cache_clear()
    RequestContext.clear()


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Provide an empty in-memory account store."""
    return InMemoryAccountRepository()


@pytest.fixture
def app(repository: InMemoryAccountRepository) -> Generator[FastAPI]:
    """Create the application with the signup controller on the in-memory store."""
    application = create_app()

    def _controller() -> SignupController:
        return SignupController(
            EmailValidatorAdapter(), DbAddAccount(BcryptAdapter(4), repository)
        )

    application.dependency_overrides[get_signup_controller] = _controller
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Provide an HTTP client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as http_client:
        yield http_client
