"""
Comment analyzer module.

Runs the classifier over the feedback fields of one evaluation and stores a
CommentAnalysis record for every non-empty field.
"""

import logging
from typing import List, Optional

from evalserver.business_logic.classifier import classify
from evalserver.repositories.base import EvaluationStore
from evalserver.schemas import CommentAnalysisCreate, CommentAnalysisRead, EvaluationComments, AnalyzeCommentsResponse

# Set up logging
logger = logging.getLogger(__name__)

COMMENT_POSITIVE = "positive"
COMMENT_NEGATIVE = "negative"
COMMENT_SUGGESTION = "suggestion"

# Comment field on the request -> stored comment type
COMMENT_FIELDS = (
    ("positive", COMMENT_POSITIVE),
    ("negative", COMMENT_NEGATIVE),
    ("suggestions", COMMENT_SUGGESTION),
)


def build_comment_analyses(evaluation_id: str, comments: EvaluationComments) -> List[CommentAnalysisCreate]:
    """Classify the comments of one evaluation.

    Args:
        evaluation_id: The evaluation the comments belong to
        comments: The free-text fields to classify

    Returns:
        One record per non-empty comment, in positive/negative/suggestion order
    """
    records = []
    for field, comment_type in COMMENT_FIELDS:
        text: Optional[str] = getattr(comments, field)
        try:
            analysis = classify(text)
        except Exception as e:
            logger.error(f"Error classifying {comment_type} comment of evaluation {evaluation_id}: {str(e)}")
            continue

        if analysis is None:
            continue

        records.append(CommentAnalysisCreate(
            evaluation_id=evaluation_id,
            comment_text=text,
            comment_type=comment_type,
            is_flagged=analysis.is_flagged,
            flag_reason=analysis.flag_reason,
            language_detected=analysis.language,
        ))
    return records


class CommentAnalyzer:
    """Stores classifications for the comments of an evaluation."""

    def __init__(self, store: EvaluationStore):
        self.store = store

    async def analyze(self, evaluation_id: str, comments: EvaluationComments) -> AnalyzeCommentsResponse:
        """Classify and persist the comments of one evaluation.

        Raises:
            StoreError: If the analyses could not be stored
        """
        logger.info(f"Analyzing comments for evaluation {evaluation_id}")
        records = build_comment_analyses(evaluation_id, comments)

        stored: List[CommentAnalysisRead] = []
        if records:
            stored = await self.store.insert_comment_analysis(records)
            logger.info(f"Comment analysis completed: {len(stored)} comments analyzed")

        return AnalyzeCommentsResponse(
            success=True,
            analysis_count=len(records),
            flagged_count=sum(1 for record in records if record.is_flagged),
        )
