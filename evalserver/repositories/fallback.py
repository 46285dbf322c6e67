"""
Two-tier evaluation store.

Combines a primary store (normally the database) with a ``MemoryStore``
cache:

- Writes go to the primary first and are then mirrored into the cache. When
  the primary raises ``StoreError`` the write lands in the cache only.
- Reads go to the primary. When it raises ``StoreError`` the read is served
  from the cache, which only holds what passed through this process.
- A record refused as a duplicate (``DuplicateRecordError``) is not an
  outage. It propagates and nothing is cached.
"""

import logging
from typing import Iterable, List, Optional, Set

from evalserver.repositories.base import EvaluationStore, StoreError
from evalserver.repositories.memory import MemoryStore
from evalserver.schemas import (
    TeacherCreate, TeacherRead, QuestionCreate, QuestionRead,
    EvaluationCreate, EvaluationRead,
    CommentAnalysisCreate, CommentAnalysisRead,
    TeacherEvaluationResultRecord, EvaluationSettingsData,
    TeacherAssignmentCreate, TeacherAssignmentRead,
)

logger = logging.getLogger(__name__)


class FallbackStore(EvaluationStore):
    """Store that keeps working from a cache while the primary is unreachable."""

    def __init__(self, primary: EvaluationStore, fallback: Optional[MemoryStore] = None):
        self.primary = primary
        self.fallback = fallback if fallback is not None else MemoryStore()

    async def _read(self, operation: str, *args, **kwargs):
        try:
            return await getattr(self.primary, operation)(*args, **kwargs)
        except StoreError as e:
            logger.warning(f"{self.primary.get_name()}.{operation} failed, reading from cache: {str(e)}")
            return await getattr(self.fallback, operation)(*args, **kwargs)

    async def _write(self, operation: str, *args, **kwargs):
        """Apply an operation whose effect does not depend on generated IDs to both tiers."""
        try:
            result = await getattr(self.primary, operation)(*args, **kwargs)
        except StoreError as e:
            logger.warning(f"{self.primary.get_name()}.{operation} failed, writing to cache only: {str(e)}")
            return await getattr(self.fallback, operation)(*args, **kwargs)
        await getattr(self.fallback, operation)(*args, **kwargs)
        return result

    async def list_teachers(self, active_only: bool = False) -> List[TeacherRead]:
        return await self._read("list_teachers", active_only=active_only)

    async def get_teacher(self, teacher_id: str) -> Optional[TeacherRead]:
        return await self._read("get_teacher", teacher_id)

    async def add_teacher(self, teacher: TeacherCreate) -> TeacherRead:
        try:
            record = await self.primary.add_teacher(teacher)
        except StoreError as e:
            logger.warning(f"Could not store teacher in {self.primary.get_name()}, caching it: {str(e)}")
            return await self.fallback.add_teacher(teacher)
        self.fallback.mirror_teacher(record)
        return record

    async def list_questions(self, active_only: bool = False) -> List[QuestionRead]:
        return await self._read("list_questions", active_only=active_only)

    async def add_question(self, question: QuestionCreate) -> QuestionRead:
        try:
            record = await self.primary.add_question(question)
        except StoreError as e:
            logger.warning(f"Could not store question in {self.primary.get_name()}, caching it: {str(e)}")
            return await self.fallback.add_question(question)
        self.fallback.mirror_question(record)
        return record

    async def list_assignments(self, teacher_id: Optional[str] = None,
                               strand_course: Optional[str] = None,
                               section: Optional[str] = None) -> List[TeacherAssignmentRead]:
        return await self._read("list_assignments", teacher_id=teacher_id,
                                strand_course=strand_course, section=section)

    async def add_assignment(self, assignment: TeacherAssignmentCreate) -> TeacherAssignmentRead:
        try:
            record = await self.primary.add_assignment(assignment)
        except StoreError as e:
            logger.warning(f"Could not store assignment in {self.primary.get_name()}, caching it: {str(e)}")
            return await self.fallback.add_assignment(assignment)
        self.fallback.mirror_assignment(record)
        return record

    async def delete_assignment(self, assignment_id: str) -> bool:
        return await self._write("delete_assignment", assignment_id)

    async def insert_evaluation(self, evaluation: EvaluationCreate,
                                evaluation_period: str) -> EvaluationRead:
        try:
            record = await self.primary.insert_evaluation(evaluation, evaluation_period)
        except StoreError as e:
            logger.warning(f"Could not store evaluation in {self.primary.get_name()}, caching it: {str(e)}")
            return await self.fallback.insert_evaluation(evaluation, evaluation_period)
        self.fallback.mirror_evaluation(record)
        return record

    async def get_evaluation(self, evaluation_id: str) -> Optional[EvaluationRead]:
        return await self._read("get_evaluation", evaluation_id)

    async def query_evaluations(self, teacher_id: Optional[str] = None) -> List[EvaluationRead]:
        return await self._read("query_evaluations", teacher_id=teacher_id)

    async def reset_evaluations(self) -> int:
        return await self._write("reset_evaluations")

    async def insert_comment_analysis(self, records: Iterable[CommentAnalysisCreate]) -> List[CommentAnalysisRead]:
        records = list(records)
        try:
            created = await self.primary.insert_comment_analysis(records)
        except StoreError as e:
            logger.warning(f"Could not store comment analysis in {self.primary.get_name()}, caching it: {str(e)}")
            return await self.fallback.insert_comment_analysis(records)
        self.fallback.mirror_comment_analysis(created)
        return created

    async def query_comment_analysis(self, evaluation_ids: Optional[Iterable[str]] = None,
                                     flagged: Optional[bool] = None) -> List[CommentAnalysisRead]:
        if evaluation_ids is not None:
            evaluation_ids = list(evaluation_ids)
        return await self._read("query_comment_analysis", evaluation_ids=evaluation_ids, flagged=flagged)

    async def upsert_teacher_result(self, record: TeacherEvaluationResultRecord) -> TeacherEvaluationResultRecord:
        return await self._write("upsert_teacher_result", record)

    async def list_results(self, evaluation_period: Optional[str] = None) -> List[TeacherEvaluationResultRecord]:
        return await self._read("list_results", evaluation_period=evaluation_period)

    async def query_filter_words(self) -> Set[str]:
        return await self._read("query_filter_words")

    async def insert_filter_word(self, word: str) -> None:
        # A duplicate refused by the primary propagates; only an outage falls back
        try:
            await self.primary.insert_filter_word(word)
        except StoreError as e:
            logger.warning(f"Could not store filter word in {self.primary.get_name()}, caching it: {str(e)}")
            await self.fallback.insert_filter_word(word)
            return
        self.fallback.mirror_filter_word(word)

    async def delete_filter_word(self, word: str) -> None:
        await self._write("delete_filter_word", word)

    async def get_settings(self) -> Optional[EvaluationSettingsData]:
        return await self._read("get_settings")

    async def save_settings(self, settings: EvaluationSettingsData) -> EvaluationSettingsData:
        return await self._write("save_settings", settings)
