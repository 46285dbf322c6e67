"""Database engine and session management."""

from evalserver.database.init_db import engine, async_session, init_db

__all__ = ["engine", "async_session", "init_db"]
