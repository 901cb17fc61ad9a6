"""
Read-only access to the element tables.

`RecordStore` is the only component that talks to the database at request
time. It executes SQLAlchemy statements (never raw request text) and turns
any driver, connection or SQL failure into a `StoreError`.
"""

from typing import Any, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.sql import Executable
from core.exceptions import StoreError
import logging

logger = logging.getLogger(__name__)

# Driver connect failures surface as OSError rather than DBAPI errors
STORE_FAILURES = (SQLAlchemyError, OSError)


class RecordStore:
    """
    Thin wrapper around an async session factory.

    Each call opens its own session, so independent lookups can be awaited
    together with `asyncio.gather` without sharing a session.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def fetch_all(self, statement: Executable) -> List[Any]:
        """
        Execute a statement and return every row.

        Single-entity or single-column selects return the bare values
        (ORM instances or scalars).
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(statement)
                return list(result.scalars().all())
        except STORE_FAILURES as e:
            logger.error(f"Store query failed: {e}")
            raise StoreError(
                "Database operation failed",
                context={"operation": "fetch_all"},
                original_exception=e
            )

    async def fetch_one(self, statement: Executable) -> Optional[Any]:
        """Execute a statement and return the first row, or None"""
        try:
            async with self.session_factory() as session:
                result = await session.execute(statement)
                return result.scalars().first()
        except STORE_FAILURES as e:
            logger.error(f"Store query failed: {e}")
            raise StoreError(
                "Database operation failed",
                context={"operation": "fetch_one"},
                original_exception=e
            )
