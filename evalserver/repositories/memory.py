"""
In-memory evaluation store.

Keeps records in process memory. Used as the fallback tier of
``FallbackStore`` and as a lightweight store in tests.
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple

from evalserver.repositories.base import (
    EvaluationStore, DuplicateEvaluationError, DuplicateFilterWordError, DuplicateAssignmentError,
)
from evalserver.schemas import (
    TeacherCreate, TeacherRead, QuestionCreate, QuestionRead,
    EvaluationCreate, EvaluationRead,
    CommentAnalysisCreate, CommentAnalysisRead,
    TeacherEvaluationResultRecord, EvaluationSettingsData,
    TeacherAssignmentCreate, TeacherAssignmentRead,
)

logger = logging.getLogger(__name__)


class MemoryStore(EvaluationStore):
    """Evaluation store holding records in dictionaries.

    Dictionaries keep insertion order, which stands in for submission order.
    """

    def __init__(self):
        self._teachers: Dict[str, TeacherRead] = {}
        self._questions: Dict[str, QuestionRead] = {}
        self._assignments: Dict[str, TeacherAssignmentRead] = {}
        self._evaluations: Dict[str, EvaluationRead] = {}
        self._comment_analysis: Dict[str, CommentAnalysisRead] = {}
        self._results: Dict[Tuple[str, str], TeacherEvaluationResultRecord] = {}
        self._filter_words: Set[str] = set()
        self._settings: Optional[EvaluationSettingsData] = None

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    # Mirroring records created by another store keeps their generated IDs

    def mirror_teacher(self, teacher: TeacherRead) -> None:
        self._teachers[teacher.id] = teacher

    def mirror_question(self, question: QuestionRead) -> None:
        self._questions[question.id] = question

    def mirror_assignment(self, assignment: TeacherAssignmentRead) -> None:
        self._assignments[assignment.id] = assignment

    def mirror_evaluation(self, evaluation: EvaluationRead) -> None:
        self._evaluations[evaluation.id] = evaluation

    def mirror_comment_analysis(self, records: Iterable[CommentAnalysisRead]) -> None:
        for record in records:
            self._comment_analysis[record.id] = record

    def mirror_filter_word(self, word: str) -> None:
        self._filter_words.add(word)

    async def list_teachers(self, active_only: bool = False) -> List[TeacherRead]:
        teachers = sorted(self._teachers.values(), key=lambda t: t.name)
        if active_only:
            teachers = [t for t in teachers if t.is_active]
        return teachers

    async def get_teacher(self, teacher_id: str) -> Optional[TeacherRead]:
        return self._teachers.get(teacher_id)

    async def add_teacher(self, teacher: TeacherCreate) -> TeacherRead:
        record = TeacherRead(id=self._new_id(), **teacher.model_dump())
        self.mirror_teacher(record)
        return record

    async def list_questions(self, active_only: bool = False) -> List[QuestionRead]:
        questions = sorted(self._questions.values(), key=lambda q: q.question_order)
        if active_only:
            questions = [q for q in questions if q.is_active]
        return questions

    async def add_question(self, question: QuestionCreate) -> QuestionRead:
        record = QuestionRead(id=self._new_id(), **question.model_dump())
        self.mirror_question(record)
        return record

    async def list_assignments(self, teacher_id: Optional[str] = None,
                               strand_course: Optional[str] = None,
                               section: Optional[str] = None) -> List[TeacherAssignmentRead]:
        assignments = [
            a for a in self._assignments.values()
            if (teacher_id is None or a.teacher_id == teacher_id)
            and (strand_course is None or a.strand_course == strand_course)
            and (section is None or a.section == section)
        ]
        return sorted(assignments, key=lambda a: (a.level, a.strand_course, a.section, a.subject))

    async def add_assignment(self, assignment: TeacherAssignmentCreate) -> TeacherAssignmentRead:
        for existing in self._assignments.values():
            if (existing.level, existing.strand_course, existing.section, existing.subject) == (
                    assignment.level, assignment.strand_course, assignment.section, assignment.subject):
                raise DuplicateAssignmentError(assignment)

        record = TeacherAssignmentRead(id=self._new_id(), **assignment.model_dump())
        self.mirror_assignment(record)
        return record

    async def delete_assignment(self, assignment_id: str) -> bool:
        return self._assignments.pop(assignment_id, None) is not None

    async def insert_evaluation(self, evaluation: EvaluationCreate,
                                evaluation_period: str) -> EvaluationRead:
        for existing in self._evaluations.values():
            if (existing.student_id == evaluation.student_id
                    and existing.teacher_id == evaluation.teacher_id
                    and existing.evaluation_period == evaluation_period):
                raise DuplicateEvaluationError(
                    evaluation.student_id, evaluation.teacher_id, evaluation_period
                )

        record = EvaluationRead(
            id=self._new_id(),
            evaluation_period=evaluation_period,
            submitted_at=datetime.utcnow(),
            **evaluation.model_dump()
        )
        self.mirror_evaluation(record)
        return record

    async def get_evaluation(self, evaluation_id: str) -> Optional[EvaluationRead]:
        return self._evaluations.get(evaluation_id)

    async def query_evaluations(self, teacher_id: Optional[str] = None) -> List[EvaluationRead]:
        return [
            e for e in self._evaluations.values()
            if teacher_id is None or e.teacher_id == teacher_id
        ]

    async def reset_evaluations(self) -> int:
        count = len(self._evaluations)
        self._evaluations.clear()
        self._comment_analysis.clear()
        return count

    async def insert_comment_analysis(self, records: Iterable[CommentAnalysisCreate]) -> List[CommentAnalysisRead]:
        created = [
            CommentAnalysisRead(id=self._new_id(), created_at=datetime.utcnow(), **record.model_dump())
            for record in records
        ]
        self.mirror_comment_analysis(created)
        return created

    async def query_comment_analysis(self, evaluation_ids: Optional[Iterable[str]] = None,
                                     flagged: Optional[bool] = None) -> List[CommentAnalysisRead]:
        wanted = set(evaluation_ids) if evaluation_ids is not None else None
        return [
            c for c in self._comment_analysis.values()
            if (wanted is None or c.evaluation_id in wanted)
            and (flagged is None or c.is_flagged == flagged)
        ]

    async def upsert_teacher_result(self, record: TeacherEvaluationResultRecord) -> TeacherEvaluationResultRecord:
        self._results[(record.teacher_id, record.evaluation_period)] = record.model_copy(deep=True)
        return record

    async def list_results(self, evaluation_period: Optional[str] = None) -> List[TeacherEvaluationResultRecord]:
        return [
            self._results[key] for key in sorted(self._results, key=lambda k: (k[1], k[0]))
            if evaluation_period is None or key[1] == evaluation_period
        ]

    async def query_filter_words(self) -> Set[str]:
        return set(self._filter_words)

    async def insert_filter_word(self, word: str) -> None:
        if word in self._filter_words:
            raise DuplicateFilterWordError(word)
        self.mirror_filter_word(word)

    async def delete_filter_word(self, word: str) -> None:
        self._filter_words.discard(word)

    async def get_settings(self) -> Optional[EvaluationSettingsData]:
        return self._settings

    async def save_settings(self, settings: EvaluationSettingsData) -> EvaluationSettingsData:
        self._settings = settings.model_copy()
        return self._settings
