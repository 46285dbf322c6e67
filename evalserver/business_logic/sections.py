"""
Section submission counts.

Groups evaluations by the level, strand or course and section of the
submitting student so administrators can see which sections are done.
"""

import logging
from collections import defaultdict
from typing import Dict, Optional, Sequence, Set, Tuple

from evalserver.repositories.base import EvaluationStore
from evalserver.schemas import EvaluationRead, SectionCount, SectionCountList

logger = logging.getLogger(__name__)

SectionKey = Tuple[str, str, str]


def count_by_section(evaluations: Sequence[EvaluationRead]) -> SectionCountList:
    """Count evaluations and distinct students per section.

    Evaluations submitted without a complete section are left out.

    Returns:
        Counts ordered by level, strand or course and section
    """
    evaluation_counts: Dict[SectionKey, int] = defaultdict(int)
    students: Dict[SectionKey, Set[str]] = defaultdict(set)

    for evaluation in evaluations:
        if not (evaluation.level and evaluation.strand_course and evaluation.section):
            continue
        key = (evaluation.level, evaluation.strand_course, evaluation.section)
        evaluation_counts[key] += 1
        students[key].add(evaluation.student_id)

    sections = [
        SectionCount(
            level=level,
            strand_course=strand_course,
            section=section,
            evaluation_count=evaluation_counts[(level, strand_course, section)],
            student_count=len(students[(level, strand_course, section)]),
        )
        for level, strand_course, section in sorted(evaluation_counts)
    ]
    return SectionCountList(sections=sections, total_evaluations=sum(evaluation_counts.values()))


async def section_counts(store: EvaluationStore, evaluation_period: Optional[str] = None) -> SectionCountList:
    """Count the submissions of each section, optionally for one period."""
    evaluations = await store.query_evaluations()
    if evaluation_period is not None:
        evaluations = [e for e in evaluations if e.evaluation_period == evaluation_period]
    logger.debug(f"Counting {len(evaluations)} evaluations by section")
    return count_by_section(evaluations)
