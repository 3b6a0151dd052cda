"""SQLAlchemy implementation of the account repository port."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import EmailInUseError
from src.domain.models import AccountModel, AddAccountModel
from src.infrastructure.database.models import AccountRecord
from src.infrastructure.database.repository import BaseRepository

UNIQUE_EMAIL_CONSTRAINT = "uq_accounts_email"


class AccountRepository(BaseRepository[AccountRecord]):
    """Store accounts in the ``accounts`` table.

    E-mail uniqueness is enforced by the table's unique constraint; a
    violation surfaces as :class:`EmailInUseError`.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AccountRecord)

    async def add(self, account_data: AddAccountModel) -> AccountModel:
        """Insert an account and return it with its database identifier.

        Args:
            account_data: Account input whose password is already hashed.

        Returns:
            AccountModel: The stored account; ``id`` is the row ID as a string.

        Raises:
            EmailInUseError: If an account with the same e-mail exists.
        """
        record = AccountRecord(
            name=account_data.name,
            email=account_data.email,
            password=account_data.password,
        )

        try:
            record = await self.create(record)
        except IntegrityError as e:
            if UNIQUE_EMAIL_CONSTRAINT not in str(e.orig):
                raise
            logger.warning("Account insert rejected: e-mail already registered")
            raise EmailInUseError(cause=e) from e

        return AccountModel(
            id=str(record.id),
            name=record.name,
            email=record.email,
            password=record.password,
        )
