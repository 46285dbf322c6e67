"""
API schemas for the Teacher Evaluation Server.

This module contains Pydantic models for API requests and responses and for
the records exchanged with the evaluation store.
"""

from evalserver.schemas.errors import ErrorResponse, ValidationErrorItem, ErrorDetail
from evalserver.schemas.teacher import TeacherCreate, TeacherRead, QuestionCreate, QuestionRead
from evalserver.schemas.evaluation import EvaluationCreate, EvaluationRead, EvaluationList, ResetResponse
from evalserver.schemas.comments import (
    CommentAnalysisCreate, CommentAnalysisRead, CommentAnalysisList,
    EvaluationComments, AnalyzeCommentsRequest, AnalyzeCommentsResponse
)
from evalserver.schemas.results import (
    TeacherEvaluationResultRecord, RankedTeacherResult, RankedResultList,
    ComputeResultsResponse, EvaluationSettingsData
)
from evalserver.schemas.filter_words import (
    FilterWordCreate, FilterWordResult, FilterWordList,
    RedactRequest, RedactResponse, HiddenComment, HiddenCommentList
)
from evalserver.schemas.sections import (
    TeacherAssignmentCreate, TeacherAssignmentRead, TeacherAssignmentList,
    SectionCount, SectionCountList
)

# Export schemas
__all__ = [
    "ErrorResponse", "ValidationErrorItem", "ErrorDetail",
    "TeacherCreate", "TeacherRead", "QuestionCreate", "QuestionRead",
    "EvaluationCreate", "EvaluationRead", "EvaluationList", "ResetResponse",
    "CommentAnalysisCreate", "CommentAnalysisRead", "CommentAnalysisList",
    "EvaluationComments", "AnalyzeCommentsRequest", "AnalyzeCommentsResponse",
    "TeacherEvaluationResultRecord", "RankedTeacherResult", "RankedResultList",
    "ComputeResultsResponse", "EvaluationSettingsData",
    "FilterWordCreate", "FilterWordResult", "FilterWordList",
    "RedactRequest", "RedactResponse", "HiddenComment", "HiddenCommentList",
    "TeacherAssignmentCreate", "TeacherAssignmentRead", "TeacherAssignmentList",
    "SectionCount", "SectionCountList",
]
