"""
Evaluation aggregator module.

Turns the raw evaluations of each teacher into one TeacherEvaluationResult per
evaluation period: mean ratings on a percentage scale, the collected comments
and the comments the classifier flagged.
"""

import logging
import statistics
from typing import Dict, List, Optional, Sequence

from evalserver.business_logic.settings import current_settings
from evalserver.repositories.base import EvaluationStore, StoreError
from evalserver.schemas import EvaluationRead, TeacherEvaluationResultRecord

# Set up logging
logger = logging.getLogger(__name__)

# Ratings use a 1-5 scale; 5 maps to 100%
RATING_SCALE_FACTOR = 20
SCORE_PRECISION = 2

CATEGORY_FIELDS = (
    "teaching_effectiveness",
    "classroom_management",
    "course_content",
    "responsiveness",
)

# Evaluation text field -> result list
COMMENT_FIELDS = (
    ("positive_feedback", "positive_comments"),
    ("negative_feedback", "negative_comments"),
    ("suggestions", "suggestions"),
)


def rating_to_percentage(rating: float) -> float:
    """Convert a mean 1-5 rating to a percentage rounded to two places."""
    return round(rating * RATING_SCALE_FACTOR, SCORE_PRECISION)


def mean_rating(evaluations: Sequence[EvaluationRead], field: str) -> float:
    return statistics.mean(getattr(evaluation, field) for evaluation in evaluations)


def collect_comments(evaluations: Sequence[EvaluationRead], field: str) -> List[str]:
    """Get the non-empty values of a text field, in evaluation order."""
    return [getattr(e, field) for e in evaluations if getattr(e, field)]


def calculate_teacher_result(teacher_id: str, evaluation_period: str,
                             evaluations: Sequence[EvaluationRead],
                             flagged_comments: Sequence[str]) -> Optional[TeacherEvaluationResultRecord]:
    """Calculate a teacher's result from their evaluations.

    Args:
        teacher_id: The evaluated teacher
        evaluation_period: Period the result is stored under
        evaluations: All evaluations of the teacher
        flagged_comments: Texts of the flagged comments on those evaluations

    Returns:
        The result record, or None when there are no evaluations
    """
    if not evaluations:
        return None

    average_scores: Dict[str, float] = {
        field: rating_to_percentage(mean_rating(evaluations, field))
        for field in CATEGORY_FIELDS
    }
    comments = {
        result_field: collect_comments(evaluations, source_field)
        for source_field, result_field in COMMENT_FIELDS
    }

    return TeacherEvaluationResultRecord(
        teacher_id=teacher_id,
        evaluation_period=evaluation_period,
        overall_rating=rating_to_percentage(mean_rating(evaluations, "overall_rating")),
        total_evaluations=len(evaluations),
        average_scores=average_scores,
        flagged_comments=list(flagged_comments),
        **comments
    )


class EvaluationAggregator:
    """Recomputes the stored results of every evaluated teacher.

    Each run overwrites the result rows of the current evaluation period.
    A teacher whose result cannot be computed or stored is skipped and the
    run continues with the next teacher.
    """

    def __init__(self, store: EvaluationStore):
        self.store = store

    async def aggregate_teacher(self, teacher_id: str,
                                evaluation_period: str) -> Optional[TeacherEvaluationResultRecord]:
        """Compute and store one teacher's result.

        Returns:
            The stored record, or None if the teacher has no evaluations

        Raises:
            StoreError: If reading evaluations or storing the result fails
        """
        evaluations = await self.store.query_evaluations(teacher_id=teacher_id)
        if not evaluations:
            return None

        flagged = await self.store.query_comment_analysis(
            evaluation_ids=[e.id for e in evaluations],
            flagged=True,
        )
        record = calculate_teacher_result(
            teacher_id,
            evaluation_period,
            evaluations,
            [analysis.comment_text for analysis in flagged],
        )
        return await self.store.upsert_teacher_result(record)

    async def run(self) -> List[TeacherEvaluationResultRecord]:
        """Recompute the results of all teachers for the current period.

        Returns:
            The records that were stored

        Raises:
            StoreError: If the teachers or settings cannot be read
        """
        settings = await current_settings(self.store)
        evaluation_period = settings.evaluation_period
        logger.info(f"Computing evaluation results for {evaluation_period}")

        teachers = await self.store.list_teachers()
        updated = []
        for teacher in teachers:
            try:
                record = await self.aggregate_teacher(teacher.id, evaluation_period)
            except StoreError as e:
                logger.error(f"Error upserting results for teacher {teacher.name}: {str(e)}")
                continue

            if record is not None:
                logger.info(f"Updated results for teacher: {teacher.name}")
                updated.append(record)

        logger.info(f"Computed results for {len(updated)} of {len(teachers)} teachers")
        return updated
