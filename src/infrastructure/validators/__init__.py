"""E-mail validation adapters."""

from src.infrastructure.validators.email_validator_adapter import (
    EmailValidatorAdapter,
)

__all__ = ["EmailValidatorAdapter"]
