import os
import sys
import tempfile
import pytest
import pytest_asyncio
from pathlib import Path
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

# Fix Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# The application database lives in a throwaway directory during tests
_TEST_DB_DIR = tempfile.mkdtemp(prefix="evalserver-tests-")
os.environ.setdefault("EVALSERVER_DB_PATH", os.path.join(_TEST_DB_DIR, "app.db"))

from evalserver.main import app
from evalserver.database.init_db import create_engine_for
from evalserver.dependencies import get_store
from evalserver.models import Base
from evalserver.repositories import MemoryStore, SQLAlchemyStore


@pytest.fixture
def memory_store():
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest_asyncio.fixture
async def session_factory():
    """Create an in-memory database and return its session factory."""
    test_engine = create_engine_for(":memory:")

    # Create all tables from Base metadata
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        test_engine,
        expire_on_commit=False,
        class_=AsyncSession
    )

    yield TestingSessionLocal

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    """Create a database file and return a session factory opening a connection per session."""
    db_path = tmp_path / "store.db"

    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    test_engine = create_engine_for(str(db_path))
    yield sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession)

    await test_engine.dispose()


@pytest_asyncio.fixture
async def sql_store(session_factory):
    """Return a store backed by the in-memory database."""
    return SQLAlchemyStore(session_factory)


@pytest.fixture
def memory_client(memory_store):
    """Return a TestClient whose endpoints use an in-memory store."""
    app.dependency_overrides[get_store] = lambda: memory_store

    with TestClient(app) as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()


@pytest.fixture
def sql_client(tmp_path):
    """Return a TestClient whose endpoints use a fresh database file."""
    db_path = tmp_path / "api.db"

    # Create the schema synchronously so no async connection is tied to this thread
    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    test_engine = create_engine_for(str(db_path))
    store = SQLAlchemyStore(sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession))
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()
