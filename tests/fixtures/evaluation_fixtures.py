"""
Evaluation fixtures for testing.

Builders for evaluation records used across unit and integration tests.
"""

import uuid
from datetime import datetime, timedelta

from evalserver.schemas import EvaluationCreate, EvaluationRead, TeacherEvaluationResultRecord

TEST_PERIOD = "1st Semester 2024-2025"
BASE_TIME = datetime(2024, 9, 1, 8, 0, 0)


def make_evaluation(teacher_id="teacher-1", student_id=None, rating=5, **overrides):
    """Build an evaluation submission with every rating set to ``rating``."""
    values = dict(
        student_id=student_id or f"student-{uuid.uuid4().hex[:8]}",
        teacher_id=teacher_id,
        overall_rating=rating,
        teaching_effectiveness=rating,
        classroom_management=rating,
        course_content=rating,
        responsiveness=rating,
    )
    values.update(overrides)
    return EvaluationCreate(**values)


def make_evaluation_read(index=0, teacher_id="teacher-1", rating=5, **overrides):
    """Build a stored evaluation."""
    submission = make_evaluation(teacher_id=teacher_id, student_id=f"student-{index}", rating=rating, **overrides)
    return EvaluationRead(
        id=f"evaluation-{index}",
        evaluation_period=TEST_PERIOD,
        submitted_at=BASE_TIME + timedelta(minutes=index),
        **submission.model_dump()
    )


def make_result(teacher_id, overall, scores=None, period=TEST_PERIOD):
    """Build an aggregated result with the given overall and category percentages."""
    scores = scores or {}
    return TeacherEvaluationResultRecord(
        teacher_id=teacher_id,
        evaluation_period=period,
        overall_rating=overall,
        total_evaluations=1,
        average_scores={
            "teaching_effectiveness": scores.get("teaching_effectiveness", overall),
            "classroom_management": scores.get("classroom_management", overall),
            "course_content": scores.get("course_content", overall),
            "responsiveness": scores.get("responsiveness", overall),
        },
    )
