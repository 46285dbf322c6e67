"""
SQLAlchemy-backed evaluation store.

Every operation runs in its own async session so a failure in one unit of
work never leaves another unit's session in a broken state.
"""

import logging
from contextlib import asynccontextmanager
from typing import Iterable, List, Optional, Set

from sqlalchemy import select, delete, literal_column
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from evalserver.models import (
    Teacher, Question, Evaluation, CommentAnalysis,
    TeacherEvaluationResult, FilterWord, EvaluationSettings, TeacherAssignment,
)
from evalserver.repositories.base import (
    EvaluationStore, StoreError,
    DuplicateEvaluationError, DuplicateFilterWordError, DuplicateAssignmentError,
)
from evalserver.schemas import (
    TeacherCreate, TeacherRead, QuestionCreate, QuestionRead,
    EvaluationCreate, EvaluationRead,
    CommentAnalysisCreate, CommentAnalysisRead,
    TeacherEvaluationResultRecord, EvaluationSettingsData,
    TeacherAssignmentCreate, TeacherAssignmentRead,
)

# Set up logging
logger = logging.getLogger(__name__)

RESULT_KEY = ("teacher_id", "evaluation_period")
SETTINGS_ROW_ID = 1


class SQLAlchemyStore(EvaluationStore):
    """Evaluation store persisting to the relational database."""

    def __init__(self, session_factory):
        """Initialize the store.

        Args:
            session_factory: Callable returning an ``AsyncSession`` usable as
                an async context manager
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self):
        async with self.session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Database error in {self.get_name()}: {str(e)}")
                raise StoreError(str(e)) from e

    async def list_teachers(self, active_only: bool = False) -> List[TeacherRead]:
        async with self._session() as session:
            query = select(Teacher).order_by(Teacher.name)
            if active_only:
                query = query.where(Teacher.is_active.is_(True))
            result = await session.execute(query)
            return [TeacherRead.model_validate(t) for t in result.scalars().all()]

    async def get_teacher(self, teacher_id: str) -> Optional[TeacherRead]:
        async with self._session() as session:
            teacher = await session.get(Teacher, teacher_id)
            return TeacherRead.model_validate(teacher) if teacher else None

    async def add_teacher(self, teacher: TeacherCreate) -> TeacherRead:
        async with self._session() as session:
            row = Teacher(**teacher.model_dump())
            session.add(row)
            await session.commit()
            return TeacherRead.model_validate(row)

    async def list_questions(self, active_only: bool = False) -> List[QuestionRead]:
        async with self._session() as session:
            query = select(Question).order_by(Question.question_order)
            if active_only:
                query = query.where(Question.is_active.is_(True))
            result = await session.execute(query)
            return [QuestionRead.model_validate(q) for q in result.scalars().all()]

    async def add_question(self, question: QuestionCreate) -> QuestionRead:
        async with self._session() as session:
            row = Question(**question.model_dump())
            session.add(row)
            await session.commit()
            return QuestionRead.model_validate(row)

    async def list_assignments(self, teacher_id: Optional[str] = None,
                               strand_course: Optional[str] = None,
                               section: Optional[str] = None) -> List[TeacherAssignmentRead]:
        query = select(TeacherAssignment).order_by(
            TeacherAssignment.level,
            TeacherAssignment.strand_course,
            TeacherAssignment.section,
            TeacherAssignment.subject,
        )
        if teacher_id is not None:
            query = query.where(TeacherAssignment.teacher_id == teacher_id)
        if strand_course is not None:
            query = query.where(TeacherAssignment.strand_course == strand_course)
        if section is not None:
            query = query.where(TeacherAssignment.section == section)

        async with self._session() as session:
            result = await session.execute(query)
            return [TeacherAssignmentRead.model_validate(a) for a in result.scalars().all()]

    async def add_assignment(self, assignment: TeacherAssignmentCreate) -> TeacherAssignmentRead:
        async with self._session() as session:
            row = TeacherAssignment(**assignment.model_dump())
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise DuplicateAssignmentError(assignment) from e
            return TeacherAssignmentRead.model_validate(row)

    async def delete_assignment(self, assignment_id: str) -> bool:
        async with self._session() as session:
            result = await session.execute(
                delete(TeacherAssignment).where(TeacherAssignment.id == assignment_id)
            )
            await session.commit()
            return result.rowcount > 0

    async def insert_evaluation(self, evaluation: EvaluationCreate,
                                evaluation_period: str) -> EvaluationRead:
        async with self._session() as session:
            row = Evaluation(evaluation_period=evaluation_period, **evaluation.model_dump())
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise DuplicateEvaluationError(
                    evaluation.student_id, evaluation.teacher_id, evaluation_period
                ) from e
            return EvaluationRead.model_validate(row)

    async def get_evaluation(self, evaluation_id: str) -> Optional[EvaluationRead]:
        async with self._session() as session:
            row = await session.get(Evaluation, evaluation_id)
            return EvaluationRead.model_validate(row) if row else None

    async def query_evaluations(self, teacher_id: Optional[str] = None) -> List[EvaluationRead]:
        async with self._session() as session:
            # rowid preserves submission order
            query = select(Evaluation).order_by(literal_column("evaluations.rowid"))
            if teacher_id is not None:
                query = query.where(Evaluation.teacher_id == teacher_id)
            result = await session.execute(query)
            return [EvaluationRead.model_validate(e) for e in result.scalars().all()]

    async def reset_evaluations(self) -> int:
        async with self._session() as session:
            await session.execute(delete(CommentAnalysis))
            result = await session.execute(delete(Evaluation))
            await session.commit()
            logger.info(f"Deleted {result.rowcount} evaluations")
            return result.rowcount

    async def insert_comment_analysis(self, records: Iterable[CommentAnalysisCreate]) -> List[CommentAnalysisRead]:
        async with self._session() as session:
            rows = [CommentAnalysis(**record.model_dump()) for record in records]
            session.add_all(rows)
            await session.commit()
            return [CommentAnalysisRead.model_validate(row) for row in rows]

    async def query_comment_analysis(self, evaluation_ids: Optional[Iterable[str]] = None,
                                     flagged: Optional[bool] = None) -> List[CommentAnalysisRead]:
        query = select(CommentAnalysis).order_by(literal_column("comment_analysis.rowid"))
        if evaluation_ids is not None:
            evaluation_ids = list(evaluation_ids)
            if not evaluation_ids:
                return []
            query = query.where(CommentAnalysis.evaluation_id.in_(evaluation_ids))
        if flagged is not None:
            query = query.where(CommentAnalysis.is_flagged.is_(flagged))

        async with self._session() as session:
            result = await session.execute(query)
            return [CommentAnalysisRead.model_validate(c) for c in result.scalars().all()]

    async def upsert_teacher_result(self, record: TeacherEvaluationResultRecord) -> TeacherEvaluationResultRecord:
        values = record.model_dump()
        stmt = sqlite_insert(TeacherEvaluationResult).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(RESULT_KEY),
            set_={name: stmt.excluded[name] for name in values if name not in RESULT_KEY},
        )
        async with self._session() as session:
            await session.execute(stmt)
            await session.commit()
        return record

    async def list_results(self, evaluation_period: Optional[str] = None) -> List[TeacherEvaluationResultRecord]:
        async with self._session() as session:
            query = select(TeacherEvaluationResult).order_by(
                TeacherEvaluationResult.evaluation_period,
                TeacherEvaluationResult.teacher_id,
            )
            if evaluation_period is not None:
                query = query.where(TeacherEvaluationResult.evaluation_period == evaluation_period)
            result = await session.execute(query)
            return [TeacherEvaluationResultRecord.model_validate(r) for r in result.scalars().all()]

    async def query_filter_words(self) -> Set[str]:
        async with self._session() as session:
            result = await session.execute(select(FilterWord.word))
            return set(result.scalars().all())

    async def insert_filter_word(self, word: str) -> None:
        async with self._session() as session:
            session.add(FilterWord(word=word))
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise DuplicateFilterWordError(word) from e

    async def delete_filter_word(self, word: str) -> None:
        async with self._session() as session:
            await session.execute(delete(FilterWord).where(FilterWord.word == word))
            await session.commit()

    async def get_settings(self) -> Optional[EvaluationSettingsData]:
        async with self._session() as session:
            row = await session.get(EvaluationSettings, SETTINGS_ROW_ID)
            return EvaluationSettingsData.model_validate(row) if row else None

    async def save_settings(self, settings: EvaluationSettingsData) -> EvaluationSettingsData:
        async with self._session() as session:
            row = await session.get(EvaluationSettings, SETTINGS_ROW_ID)
            if row is None:
                row = EvaluationSettings(id=SETTINGS_ROW_ID)
                session.add(row)
            row.current_semester = settings.current_semester
            row.school_year = settings.school_year
            row.is_evaluation_active = settings.is_evaluation_active
            await session.commit()
            return EvaluationSettingsData.model_validate(row)
