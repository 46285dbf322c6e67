"""
Evaluation stores.

The business logic only talks to ``EvaluationStore``; the concrete store is
chosen when the application starts.
"""

from evalserver.repositories.base import (
    EvaluationStore, StoreError,
    DuplicateRecordError, DuplicateEvaluationError, DuplicateFilterWordError, DuplicateAssignmentError,
)
from evalserver.repositories.memory import MemoryStore
from evalserver.repositories.sql import SQLAlchemyStore
from evalserver.repositories.fallback import FallbackStore

__all__ = [
    "EvaluationStore",
    "StoreError",
    "DuplicateRecordError",
    "DuplicateEvaluationError",
    "DuplicateFilterWordError",
    "DuplicateAssignmentError",
    "MemoryStore",
    "SQLAlchemyStore",
    "FallbackStore",
]
