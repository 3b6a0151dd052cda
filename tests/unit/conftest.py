"""Shared fixtures for unit tests.

The port test doubles live in ``tests.fixtures.doubles``; the fixtures here
build fresh instances for every test.
"""

import os
from collections.abc import Callable, Generator
from typing import Any, cast

import pytest
from fastapi import Request
from pytest_mock import MockerFixture, MockType
from starlette.datastructures import URL

from src.api.controllers.signup import SignupController
from src.api.schemas.http import HttpRequest
from src.core.config import Settings, get_settings
from src.core.context import RequestContext
from src.core.error_context import _get_sensitive_fields
from tests.fixtures.doubles import (
    AddAccountRepositoryStub,
    AddAccountStub,
    EmailValidatorStub,
    HasherStub,
)


@pytest.fixture
def email_validator_stub() -> EmailValidatorStub:
    """Provide an e-mail validator that accepts everything."""
    return EmailValidatorStub()


@pytest.fixture
def add_account_stub() -> AddAccountStub:
    """Provide an account creation use case returning a fixed account."""
    return AddAccountStub()


@pytest.fixture
def hasher_stub() -> HasherStub:
    """Provide a hasher returning ``hashed_password``."""
    return HasherStub()


@pytest.fixture
def add_account_repository_stub() -> AddAccountRepositoryStub:
    """Provide a repository that assigns ``valid_id``."""
    return AddAccountRepositoryStub()


@pytest.fixture
def signup_controller(
    email_validator_stub: EmailValidatorStub, add_account_stub: AddAccountStub
) -> SignupController:
    """Provide the signup controller wired to the stubs."""
    return SignupController(email_validator_stub, add_account_stub)


@pytest.fixture
def make_signup_request() -> Callable[..., HttpRequest]:
    """Build signup requests from a valid body with overrides.

    Pass a field as ``None`` to drop it from the body.
    """

    def _make(**overrides: Any) -> HttpRequest:
        body: dict[str, Any] = {
            "name": "any_name",
            "email": "any_email@mail.com",
            "password": "any_password",
            "passwordConfirmation": "any_password",
        }
        body.update(overrides)
        return HttpRequest(body={k: v for k, v in body.items() if v is not None})

    return _make


@pytest.fixture
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Provide a real Settings object with test values."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("APP_VERSION", "1.0.0")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DEBUG", "false")
    return Settings()


@pytest.fixture
def mock_request(mocker: MockerFixture) -> MockType:
    """Create a mock FastAPI Request for ``POST /api/signup``."""
    request = mocker.Mock(spec=Request)
    request.method = "POST"
    request.url = mocker.Mock(spec=URL)
    request.url.path = "/api/signup"
    request.headers = {"user-agent": "test-client/1.0"}
    return cast("MockType", request)


@pytest.fixture(autouse=True)
def clean_lru_cache() -> Generator[None]:
    """Clear cached settings before and after each test."""
    get_settings.cache_clear()
    _get_sensitive_fields.cache_clear()
    yield
    get_settings.cache_clear()
    _get_sensitive_fields.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch]:
    """Drop application env vars a developer shell might leak into tests."""
    original_env = os.environ.copy()

    env_prefixes = ["APP_", "API_", "DEBUG", "DATABASE_CONFIG__"]
    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in env_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield monkeypatch

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clean_context() -> Generator[None]:
    """Clear request context before and after each test."""
    RequestContext.clear()
    yield
    RequestContext.clear()
