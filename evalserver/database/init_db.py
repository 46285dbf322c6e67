import os
import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool, NullPool

from evalserver.config import DB_PATH, IS_TEST
from evalserver.models import Base

logger = logging.getLogger(__name__)


def database_url(db_path: str) -> str:
    return f"sqlite+aiosqlite:///{db_path}"


def create_engine_for(db_path: str) -> AsyncEngine:
    """Create the async engine for a SQLite file or ``:memory:``."""
    if db_path == ":memory:":
        # One shared connection keeps the in-memory schema alive across sessions
        pool = StaticPool
    else:
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
        # Connections are opened per session so none outlives the event loop that created it
        pool = NullPool

    return create_async_engine(
        database_url(db_path),
        connect_args={"check_same_thread": False},
        poolclass=pool,
    )


engine = create_engine_for(DB_PATH)

async_session = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db():
    """Create the evaluation tables that do not exist yet."""
    reset = IS_TEST and os.environ.get("EVALSERVER_RESET_TEST_DB", "false").lower() == "true"
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Test database tables dropped")
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database tables ready at {DB_PATH}")
