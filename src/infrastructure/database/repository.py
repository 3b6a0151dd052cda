"""Generic async repository for SQLAlchemy models."""

from typing import Generic, TypeVar

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.models import BaseModel


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository bound to one session and one model class.

    Repositories never commit: the request-scoped session owns the
    transaction and commits or rolls back once the request is done.

    Args:
        session: The async SQLAlchemy session to use for operations.
        model_class: The SQLAlchemy model class this repository manages.

    Example:
        class AccountRepository(BaseRepository[AccountRecord]):
            def __init__(self, session: AsyncSession) -> None:
                super().__init__(session, AccountRecord)
    """

    def __init__(self, session: AsyncSession, model_class: type[T]) -> None:
        self.session = session
        self.model_class = model_class
        logger.debug("Initialized repository for {}", model_class.__name__)

    async def create(self, obj: T) -> T:
        """Insert a new model instance.

        The insert runs inside a savepoint, so a constraint violation rolls
        back only this insert and leaves the session usable.

        Args:
            obj: The model instance to create.

        Returns:
            T: The created instance with its ID and timestamps populated.

        Raises:
            sqlalchemy.exc.IntegrityError: If the insert violates a constraint.
        """
        logger.debug("Creating new {} instance", self.model_class.__name__)

        async with self.session.begin_nested():
            self.session.add(obj)
            await self.session.flush()

        await self.session.refresh(obj)

        logger.info(
            "Created {} instance with ID: {}", self.model_class.__name__, obj.id
        )

        return obj
