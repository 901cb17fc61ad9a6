"""
Async engine and session factory for the element store.

The API never shares a session between concurrent lookups: every query
goes through `core.store.RecordStore`, which opens a short-lived session
from the factory defined here.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from core.config import settings
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """Create an async engine; defaults come from settings."""
    if echo is None:
        echo = settings.ENVIRONMENT == "development"
    return create_async_engine(
        database_url or settings.DATABASE_URL,
        echo=echo,
        poolclass=NullPool,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Session factory used by the store and the import tooling"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine()
async_session_maker = build_session_factory(engine)
