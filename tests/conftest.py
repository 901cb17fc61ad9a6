"""
Pytest configuration and fixtures
"""

import os
import tempfile

# Settings are read at import time; point them at a throwaway database
# before any application module is imported.
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'periodic_table_unused.db')}"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from api.dependencies import get_store
from api.main import app
from core.cache import InMemoryResponseCache
from core.database import build_engine, build_session_factory
from core.store import RecordStore
from models.base import Base
from models.element import Element, ElementSource, ElementUse, OxidationState
from sample_data import ELEMENTS, OXIDATION_STATES, SOURCES, USES


def seed_elements(sync_engine):
    """Create the schema and insert the fixture dataset"""
    Base.metadata.create_all(sync_engine)
    with Session(sync_engine) as session:
        session.add_all([Element(**row) for row in ELEMENTS])
        session.flush()
        for number, states in OXIDATION_STATES.items():
            session.add_all([OxidationState(atomic_number=number, oxidation_state=s) for s in states])
        for number, uses in USES.items():
            session.add_all([ElementUse(atomic_number=number, use_description=u) for u in uses])
        for number, sources in SOURCES.items():
            session.add_all([ElementSource(atomic_number=number, source_description=s) for s in sources])
        session.commit()


@pytest.fixture
def db_path(tmp_path):
    """Path of an empty SQLite database file"""
    return tmp_path / "periodic_table.db"


@pytest.fixture
def sync_engine(db_path):
    """Synchronous engine on the test database, for seeding and mutation"""
    engine = create_engine(f"sqlite:///{db_path}", poolclass=NullPool)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(sync_engine):
    seed_elements(sync_engine)
    return sync_engine


@pytest.fixture
def empty_engine(sync_engine):
    """Schema without any rows"""
    Base.metadata.create_all(sync_engine)
    return sync_engine


@pytest.fixture
def session_factory(db_path):
    """Async session factory on the same database file"""
    return build_session_factory(build_engine(f"sqlite+aiosqlite:///{db_path}", echo=False))


@pytest.fixture
def store(seeded_engine, session_factory):
    """Record store over the seeded database"""
    return RecordStore(session_factory)


@pytest.fixture
def response_cache():
    return InMemoryResponseCache(ttl_seconds=3600, max_entries=256)


@pytest.fixture
def client(store, response_cache):
    """Create test client with store override and a fresh edge cache"""
    app.dependency_overrides[get_store] = lambda: store
    previous_cache = app.state.response_cache
    app.state.response_cache = response_cache

    with TestClient(app) as test_client:
        yield test_client

    app.state.response_cache = previous_cache
    app.dependency_overrides.clear()


@pytest.fixture
def element_document():
    """Source document in the import format"""
    return {
        "atomicNumber": 1,
        "symbol": "H",
        "name": "Hydrogen",
        "category": "Reactive Nonmetal",
        "groupNumber": 1,
        "period": 1,
        "block": "s",
        "atomicMass": 1.008,
        "standardState": "gas",
        "density": {"value": 0.08988, "conditions": "g/L at STP"},
        "meltingPoint": {"value": 13.99, "unit": "K"},
        "boilingPoint": {"value": 20.271, "unit": "K"},
        "ionizationEnergy": {"value": 13.598, "unit": "eV"},
        "electronegativity": 2.2,
        "electronConfiguration": "1s1",
        "discoveredBy": "Henry Cavendish",
        "discoveryYear": 1766,
        "summary": "Hydrogen's the lightest element; it's \"everywhere\".",
        "oxidationStates": [-1, 1, None],
        "uses": ["Rocket fuel", "", None, "Ammonia production"],
        "sources": ["Electrolysis of water"],
        "attribution": ["Wikipedia", "", None, "Royal Society of Chemistry"],
    }
