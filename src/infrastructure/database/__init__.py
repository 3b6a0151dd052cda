"""Database infrastructure: async PostgreSQL access through SQLAlchemy 2.0.

- **models**: Declarative base and the ``accounts`` table
- **session**: Engine, session factory and health check
- **repository**: Generic insert support shared by repositories
- **account_repository**: The account repository adapter
- **dependencies**: FastAPI session dependency
"""

from src.infrastructure.database.account_repository import AccountRepository
from src.infrastructure.database.dependencies import DatabaseSession, get_db
from src.infrastructure.database.models import AccountRecord, Base, BaseModel
from src.infrastructure.database.repository import BaseRepository
from src.infrastructure.database.session import (
    check_database_connection,
    close_database,
    create_database_engine,
    get_async_session,
    get_engine,
    get_session_factory,
)

__all__ = [
    "AccountRecord",
    "AccountRepository",
    "Base",
    "BaseModel",
    "BaseRepository",
    "DatabaseSession",
    "check_database_connection",
    "close_database",
    "create_database_engine",
    "get_async_session",
    "get_db",
    "get_engine",
    "get_session_factory",
]
