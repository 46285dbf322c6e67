"""
Dependencies for the Teacher Evaluation Server.

This module provides the FastAPI dependency that hands the evaluation store
to the API endpoints.
"""

import logging
from typing import Optional

from evalserver import config
from evalserver.database.init_db import async_session
from evalserver.repositories import EvaluationStore, SQLAlchemyStore, FallbackStore

logger = logging.getLogger(__name__)

_store: Optional[EvaluationStore] = None


def build_store(session_factory=async_session, enable_fallback: bool = config.ENABLE_FALLBACK) -> EvaluationStore:
    """Create the store used by the API.

    Args:
        session_factory: Factory for database sessions
        enable_fallback: Whether to layer an in-memory cache behind the database

    Returns:
        The configured store
    """
    store = SQLAlchemyStore(session_factory)
    if enable_fallback:
        return FallbackStore(store)
    return store


def get_store() -> EvaluationStore:
    """Get the evaluation store.
    
    This is a FastAPI dependency. The store is created on first use and
    shared by all requests.
    
    Example:
        ```python
        @router.get("/words")
        async def get_words(store: EvaluationStore = Depends(get_store)):
            return await store.query_filter_words()
        ```
    """
    global _store
    if _store is None:
        _store = build_store()
        logger.info(f"Using {_store.get_name()} for evaluation data")
    return _store
