"""Unit tests for the e-mail validator adapter."""

import pytest
from email_validator import EmailNotValidError
from pytest_mock import MockerFixture

from src.infrastructure.validators.email_validator_adapter import (
    EmailValidatorAdapter,
)


@pytest.mark.unit
class TestEmailValidatorAdapter:
    """Test cases for EmailValidatorAdapter."""

    def test_returns_false_when_library_rejects(self, mocker: MockerFixture) -> None:
        """EmailNotValidError from the library means invalid."""
        mocker.patch(
            "src.infrastructure.validators.email_validator_adapter.validate_email",
            side_effect=EmailNotValidError("bad"),
        )

        assert EmailValidatorAdapter().is_valid("invalid_email@mail.com") is False

    def test_returns_true_when_library_accepts(self, mocker: MockerFixture) -> None:
        """No exception from the library means valid."""
        mocker.patch(
            "src.infrastructure.validators.email_validator_adapter.validate_email"
        )

        assert EmailValidatorAdapter().is_valid("valid_email@mail.com") is True

    def test_passes_email_without_deliverability_check(
        self, mocker: MockerFixture
    ) -> None:
        """The library is called once with the address and no DNS lookup."""
        mock_validate = mocker.patch(
            "src.infrastructure.validators.email_validator_adapter.validate_email"
        )

        EmailValidatorAdapter().is_valid("any_email@mail.com")

        mock_validate.assert_called_once_with(
            "any_email@mail.com", check_deliverability=False
        )

    def test_propagates_unexpected_errors(self, mocker: MockerFixture) -> None:
        """Errors other than EmailNotValidError are not swallowed."""
        mocker.patch(
            "src.infrastructure.validators.email_validator_adapter.validate_email",
            side_effect=RuntimeError("boom"),
        )

        with pytest.raises(RuntimeError, match="boom"):
            EmailValidatorAdapter().is_valid("any_email@mail.com")

    @pytest.mark.parametrize(
        "email",
        ["valid_email@mail.com", "first.last@company.org", "user+tag@sub.domain.io"],
    )
    def test_accepts_well_formed_addresses(self, email: str) -> None:
        """Well-formed addresses pass the real library."""
        assert EmailValidatorAdapter().is_valid(email) is True

    @pytest.mark.parametrize(
        "email", ["invalid_email", "@mail.com", "user@", "user@@mail.com", "a b@c.com"]
    )
    def test_rejects_malformed_addresses(self, email: str) -> None:
        """Malformed addresses fail the real library."""
        assert EmailValidatorAdapter().is_valid(email) is False
