"""
Core utilities and configuration for the periodic table API.

This package provides the foundational components shared by the HTTP
service and the import tooling:

Modules:
    config: Application configuration and environment variable management
    database: Async engine and session factory
    store: Read-only query execution for request handlers
    cache: Edge response cache (TTL, in-process)
    exceptions: Custom exception hierarchy with HTTP status mapping
    logging: Logging configuration

Usage:
    from core.config import settings
    from core.database import async_session_maker
    from core.store import RecordStore
    from core.exceptions import NotFoundError, ValidationError
    from core.logging import setup_logging

Example:
    # Initialize logging
    setup_logging()

    # Run a query
    store = RecordStore(async_session_maker)
    element = await store.fetch_one(select(Element).where(Element.symbol == "Fe"))
"""

__all__ = [
    "settings",
    "async_session_maker",
    "RecordStore",
    "ResponseCache",
    "InMemoryResponseCache",
    "setup_logging",
    # Exceptions
    "PeriodicTableError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    "CacheError",
    "ImportPipelineError",
    "DocumentFormatError",
    "DocumentValidationError",
    "LoadError",
]
