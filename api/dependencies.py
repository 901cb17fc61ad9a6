"""
FastAPI dependencies shared by the route modules
"""

from core.database import async_session_maker
from core.store import RecordStore


_store = RecordStore(async_session_maker)


def get_store() -> RecordStore:
    """Record store bound to the application session factory"""
    return _store
