"""
Business logic for the Teacher Evaluation Server.

This package holds the comment classifier, the result aggregator and the
keyword filter. Everything here works against the ``EvaluationStore``
interface and keeps no state between calls.
"""

from evalserver.business_logic.classifier import classify, CommentClassification, FLAG_RULES
from evalserver.business_logic.comment_analyzer import CommentAnalyzer, build_comment_analyses
from evalserver.business_logic.aggregator import (
    EvaluationAggregator,
    calculate_teacher_result,
    rating_to_percentage,
)
from evalserver.business_logic.keyword_filter import KeywordFilter, scan, redact
from evalserver.business_logic.rankings import rank_results
from evalserver.business_logic.sections import count_by_section, section_counts
from evalserver.business_logic.settings import current_settings, default_settings

__all__ = [
    "classify",
    "CommentClassification",
    "FLAG_RULES",
    "CommentAnalyzer",
    "build_comment_analyses",
    "EvaluationAggregator",
    "calculate_teacher_result",
    "rating_to_percentage",
    "KeywordFilter",
    "scan",
    "redact",
    "rank_results",
    "count_by_section",
    "section_counts",
    "current_settings",
    "default_settings",
]
