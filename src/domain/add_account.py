"""Account creation use case."""

from loguru import logger

from src.domain.models import AccountModel, AddAccountModel
from src.domain.protocols import AddAccountRepository, Hasher


class DbAddAccount:
    """Create an account by hashing its password and handing it to storage.

    Failures of the hasher or the repository propagate unchanged; mapping them
    to a response is the controller's job.

    Args:
        hasher: Password hashing capability.
        add_account_repository: Account persistence capability.
    """

    def __init__(
        self, hasher: Hasher, add_account_repository: AddAccountRepository
    ) -> None:
        self.hasher = hasher
        self.add_account_repository = add_account_repository

    async def add(self, account_data: AddAccountModel) -> AccountModel:
        """Hash the password, store the account and return the stored account.

        Args:
            account_data: Account input carrying the plaintext password.

        Returns:
            AccountModel: The account exactly as returned by the repository.
        """
        hashed_password = await self.hasher.hash(account_data.password)
        logger.debug("Password hashed for new account")

        return await self.add_account_repository.add(
            account_data.model_copy(update={"password": hashed_password})
        )
