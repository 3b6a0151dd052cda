"""Capability contracts the signup core depends on.

Each port is a structural ``Protocol``: adapters and test doubles satisfy it
by shape, without inheriting from it.
"""

from typing import Protocol

from src.domain.models import AccountModel, AddAccountModel


class EmailValidator(Protocol):
    """Decides whether an e-mail address is syntactically acceptable."""

    def is_valid(self, email: str) -> bool:
        """Return True if ``email`` is a well-formed address.

        Implementations may raise on inputs they cannot process; callers
        treat that as a validator failure, not as an invalid address.
        """
        ...


class Hasher(Protocol):
    """One-way password hashing with a construction-time cost factor."""

    async def hash(self, value: str) -> str:
        """Return the hash of ``value``."""
        ...


class AddAccountRepository(Protocol):
    """Persists accounts and assigns their identifiers."""

    async def add(self, account_data: AddAccountModel) -> AccountModel:
        """Store ``account_data`` and return it with its new identifier.

        Raises:
            EmailInUseError: If an account with the same e-mail exists.
        """
        ...


class AddAccount(Protocol):
    """The account creation use case as seen by the signup controller."""

    async def add(self, account_data: AddAccountModel) -> AccountModel:
        """Create an account from ``account_data``."""
        ...
