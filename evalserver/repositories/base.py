"""
Base module for evaluation stores.

This module defines the storage interface the classifier, aggregator and
keyword filter are written against. Concrete stores persist to the database
or keep records in process memory; ``FallbackStore`` layers the two.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set

from evalserver.schemas import (
    TeacherCreate, TeacherRead, QuestionCreate, QuestionRead,
    EvaluationCreate, EvaluationRead,
    CommentAnalysisCreate, CommentAnalysisRead,
    TeacherEvaluationResultRecord, EvaluationSettingsData,
    TeacherAssignmentCreate, TeacherAssignmentRead,
)


class StoreError(Exception):
    """Raised when the backing store cannot be read or written."""


class DuplicateRecordError(Exception):
    """Raised when a write violates a uniqueness rule of the store.
    
    Not a ``StoreError``: the store is reachable and refused the record.
    """


class DuplicateEvaluationError(DuplicateRecordError):
    """Raised when a student already evaluated a teacher in the period."""
    
    def __init__(self, student_id: str, teacher_id: str, evaluation_period: str):
        self.student_id = student_id
        self.teacher_id = teacher_id
        self.evaluation_period = evaluation_period
        super().__init__(
            f"Student {student_id} already evaluated teacher {teacher_id} for {evaluation_period}"
        )


class DuplicateFilterWordError(DuplicateRecordError):
    """Raised when the filter word is already in the list."""
    
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Filter word '{word}' already exists")


class DuplicateAssignmentError(DuplicateRecordError):
    """Raised when the subject is already assigned in the section."""
    
    def __init__(self, assignment):
        self.assignment = assignment
        super().__init__(
            f"{assignment.subject} is already assigned to {assignment.level} "
            f"{assignment.strand_course} {assignment.section}"
        )


class EvaluationStore(ABC):
    """Interface to the records shared by all evaluation components."""
    
    def get_name(self) -> str:
        """Get the name of the store."""
        return self.__class__.__name__
    
    # Teachers and questionnaire
    
    @abstractmethod
    async def list_teachers(self, active_only: bool = False) -> List[TeacherRead]:
        pass
    
    @abstractmethod
    async def get_teacher(self, teacher_id: str) -> Optional[TeacherRead]:
        pass
    
    @abstractmethod
    async def add_teacher(self, teacher: TeacherCreate) -> TeacherRead:
        pass
    
    @abstractmethod
    async def list_questions(self, active_only: bool = False) -> List[QuestionRead]:
        pass
    
    @abstractmethod
    async def add_question(self, question: QuestionCreate) -> QuestionRead:
        pass
    
    # Section assignments
    
    @abstractmethod
    async def list_assignments(self, teacher_id: Optional[str] = None,
                               strand_course: Optional[str] = None,
                               section: Optional[str] = None) -> List[TeacherAssignmentRead]:
        """Get assignments ordered by level, strand or course, section and subject."""
        pass
    
    @abstractmethod
    async def add_assignment(self, assignment: TeacherAssignmentCreate) -> TeacherAssignmentRead:
        """Assign a teacher to a subject in a section.
        
        Raises:
            DuplicateAssignmentError: If the subject already has a teacher
                in that section
        """
        pass
    
    @abstractmethod
    async def delete_assignment(self, assignment_id: str) -> bool:
        """Remove an assignment. Returns False when it does not exist."""
        pass
    
    # Evaluations
    
    @abstractmethod
    async def insert_evaluation(self, evaluation: EvaluationCreate,
                                evaluation_period: str) -> EvaluationRead:
        """Store a submission.
        
        Raises:
            DuplicateEvaluationError: If the student already evaluated the
                teacher in ``evaluation_period``
        """
        pass
    
    @abstractmethod
    async def get_evaluation(self, evaluation_id: str) -> Optional[EvaluationRead]:
        pass
    
    @abstractmethod
    async def query_evaluations(self, teacher_id: Optional[str] = None) -> List[EvaluationRead]:
        """Get evaluations in submission order, optionally for one teacher."""
        pass
    
    @abstractmethod
    async def reset_evaluations(self) -> int:
        """Delete every evaluation and its comment analyses.
        
        Returns:
            Number of evaluations deleted
        """
        pass
    
    # Comment analysis
    
    @abstractmethod
    async def insert_comment_analysis(self, records: Iterable[CommentAnalysisCreate]) -> List[CommentAnalysisRead]:
        pass
    
    @abstractmethod
    async def query_comment_analysis(self, evaluation_ids: Optional[Iterable[str]] = None,
                                     flagged: Optional[bool] = None) -> List[CommentAnalysisRead]:
        pass
    
    # Aggregated results
    
    @abstractmethod
    async def upsert_teacher_result(self, record: TeacherEvaluationResultRecord) -> TeacherEvaluationResultRecord:
        """Insert or fully replace the result keyed by (teacher_id, evaluation_period)."""
        pass
    
    @abstractmethod
    async def list_results(self, evaluation_period: Optional[str] = None) -> List[TeacherEvaluationResultRecord]:
        pass
    
    # Filter words
    
    @abstractmethod
    async def query_filter_words(self) -> Set[str]:
        pass
    
    @abstractmethod
    async def insert_filter_word(self, word: str) -> None:
        """Add a normalized word.
        
        Raises:
            DuplicateFilterWordError: If the word is already stored
        """
        pass
    
    @abstractmethod
    async def delete_filter_word(self, word: str) -> None:
        pass
    
    # Settings
    
    @abstractmethod
    async def get_settings(self) -> Optional[EvaluationSettingsData]:
        """Get the saved settings, or None when none were saved yet."""
        pass
    
    @abstractmethod
    async def save_settings(self, settings: EvaluationSettingsData) -> EvaluationSettingsData:
        pass
