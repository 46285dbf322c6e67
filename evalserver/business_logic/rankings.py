"""
Teacher rankings.

Ranks the results of one evaluation period by overall rating and by each
category score. Ties share the best rank and the next rank is skipped
(1, 2, 2, 4).
"""

from typing import Callable, Dict, List, Sequence

from evalserver.business_logic.aggregator import CATEGORY_FIELDS
from evalserver.schemas import TeacherEvaluationResultRecord, RankedTeacherResult


def competition_ranks(results: Sequence[TeacherEvaluationResultRecord],
                      score: Callable[[TeacherEvaluationResultRecord], float]) -> Dict[str, int]:
    """Rank results by descending score.

    Returns:
        Mapping of teacher ID to rank
    """
    ordered = sorted(results, key=score, reverse=True)
    ranks = {}
    previous_score = None
    previous_rank = 0
    for position, result in enumerate(ordered, start=1):
        value = score(result)
        rank = previous_rank if value == previous_score else position
        ranks[result.teacher_id] = rank
        previous_score, previous_rank = value, rank
    return ranks


def rank_results(results: Sequence[TeacherEvaluationResultRecord]) -> List[RankedTeacherResult]:
    """Attach overall and per-category ranks to the results of one period.

    Returns:
        Ranked results ordered by overall rank
    """
    overall = competition_ranks(results, lambda r: r.overall_rating)
    by_category = {
        category: competition_ranks(results, lambda r, c=category: r.average_scores.get(c, 0.0))
        for category in CATEGORY_FIELDS
    }

    ranked = [
        RankedTeacherResult(
            **result.model_dump(),
            overall_rank=overall[result.teacher_id],
            category_ranks={
                f"{category}_rank": ranks[result.teacher_id]
                for category, ranks in by_category.items()
            },
        )
        for result in results
    ]
    ranked.sort(key=lambda r: (r.overall_rank, r.teacher_id))
    return ranked
