from evalserver.models.base import Base
from evalserver.models.teacher import Teacher
from evalserver.models.evaluation import Evaluation, RATING_FIELDS
from evalserver.models.comment_analysis import CommentAnalysis
from evalserver.models.teacher_evaluation_result import TeacherEvaluationResult
from evalserver.models.filter_word import FilterWord
from evalserver.models.evaluation_settings import EvaluationSettings
from evalserver.models.question import Question
from evalserver.models.teacher_assignment import TeacherAssignment

# Export all models
__all__ = [
    "Base",
    "Teacher",
    "Evaluation",
    "RATING_FIELDS",
    "CommentAnalysis",
    "TeacherEvaluationResult",
    "FilterWord",
    "EvaluationSettings",
    "Question",
    "TeacherAssignment",
]
