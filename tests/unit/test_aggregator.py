"""
Unit tests for the evaluation aggregator.
"""

import asyncio
import unittest
from unittest.mock import AsyncMock

from evalserver.business_logic.aggregator import (
    EvaluationAggregator,
    calculate_teacher_result,
    rating_to_percentage,
    collect_comments,
)
from evalserver.repositories import MemoryStore, StoreError
from evalserver.schemas import TeacherCreate, CommentAnalysisCreate, EvaluationSettingsData
from tests.fixtures.evaluation_fixtures import (
    make_evaluation,
    make_evaluation_read,
    TEST_PERIOD,
)


class TestRatingToPercentage(unittest.TestCase):

    def test_scale_bounds(self):
        self.assertEqual(rating_to_percentage(5), 100)
        self.assertEqual(rating_to_percentage(1), 20)

    def test_rounds_to_two_places(self):
        self.assertEqual(rating_to_percentage(13 / 3), 86.67)


class TestCalculateTeacherResult(unittest.TestCase):
    """Tests for the pure result calculation."""

    def test_no_evaluations(self):
        self.assertIsNone(calculate_teacher_result("teacher-1", TEST_PERIOD, [], []))

    def test_overall_rating_scenario(self):
        evaluations = [
            make_evaluation_read(0, overall_rating=5),
            make_evaluation_read(1, overall_rating=4),
            make_evaluation_read(2, overall_rating=3),
        ]

        result = calculate_teacher_result("teacher-1", TEST_PERIOD, evaluations, [])

        self.assertEqual(result.overall_rating, 80.0)
        self.assertEqual(result.total_evaluations, 3)
        self.assertEqual(result.teacher_id, "teacher-1")
        self.assertEqual(result.evaluation_period, TEST_PERIOD)

    def test_category_scores(self):
        evaluations = [
            make_evaluation_read(0, rating=4, course_content=5),
            make_evaluation_read(1, rating=3, course_content=4, responsiveness=1),
        ]

        result = calculate_teacher_result("teacher-1", TEST_PERIOD, evaluations, [])

        self.assertEqual(result.average_scores, {
            "teaching_effectiveness": 70.0,
            "classroom_management": 70.0,
            "course_content": 90.0,
            "responsiveness": 50.0,
        })

    def test_overall_rating_matches_mean_formula(self):
        ratings = [5, 5, 4, 2, 3, 1, 4]
        evaluations = [make_evaluation_read(i, overall_rating=r) for i, r in enumerate(ratings)]

        result = calculate_teacher_result("teacher-1", TEST_PERIOD, evaluations, [])

        self.assertEqual(result.overall_rating, round(sum(ratings) / len(ratings) * 20, 2))
        self.assertGreaterEqual(result.overall_rating, 20.0)
        self.assertLessEqual(result.overall_rating, 100.0)

    def test_comments_keep_order_and_drop_empty(self):
        evaluations = [
            make_evaluation_read(0, positive_feedback="Very clear lessons", suggestions=""),
            make_evaluation_read(1, negative_feedback="Too fast", suggestions="More examples"),
            make_evaluation_read(2, positive_feedback="Patient teacher"),
        ]

        result = calculate_teacher_result("teacher-1", TEST_PERIOD, evaluations, ["flagged text"])

        self.assertEqual(result.positive_comments, ["Very clear lessons", "Patient teacher"])
        self.assertEqual(result.negative_comments, ["Too fast"])
        self.assertEqual(result.suggestions, ["More examples"])
        self.assertEqual(result.flagged_comments, ["flagged text"])

    def test_collect_comments_skips_none(self):
        evaluations = [make_evaluation_read(0), make_evaluation_read(1, suggestions="Quiz more")]
        self.assertEqual(collect_comments(evaluations, "suggestions"), ["Quiz more"])


class TestEvaluationAggregator(unittest.TestCase):
    """Tests for aggregation runs against a store."""

    def setUp(self):
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)
        self.store = MemoryStore()
        self.aggregator = EvaluationAggregator(self.store)

    def tearDown(self):
        self.loop.close()
        asyncio.set_event_loop(None)

    def run_async(self, coro):
        return self.loop.run_until_complete(coro)

    def add_teacher(self, name):
        return self.run_async(self.store.add_teacher(TeacherCreate(name=name)))

    def test_end_to_end_scenario(self):
        teacher = self.add_teacher("Ms. Santos")
        for rating in (5, 4, 3):
            self.run_async(self.store.insert_evaluation(
                make_evaluation(teacher.id, overall_rating=rating), TEST_PERIOD
            ))

        updated = self.run_async(self.aggregator.run())

        self.assertEqual(len(updated), 1)
        results = self.run_async(self.store.list_results(TEST_PERIOD))
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].overall_rating, 80.0)
        self.assertEqual(results[0].total_evaluations, 3)

    def test_teacher_without_evaluations_is_skipped(self):
        evaluated = self.add_teacher("Mr. Cruz")
        self.add_teacher("Ms. Reyes")
        self.run_async(self.store.insert_evaluation(make_evaluation(evaluated.id), TEST_PERIOD))

        self.run_async(self.aggregator.run())

        results = self.run_async(self.store.list_results())
        self.assertEqual([r.teacher_id for r in results], [evaluated.id])

    def test_flagged_comments_collected(self):
        teacher = self.add_teacher("Mr. Cruz")
        other = self.add_teacher("Ms. Reyes")
        evaluation = self.run_async(self.store.insert_evaluation(make_evaluation(teacher.id), TEST_PERIOD))
        other_evaluation = self.run_async(self.store.insert_evaluation(make_evaluation(other.id), TEST_PERIOD))
        self.run_async(self.store.insert_comment_analysis([
            CommentAnalysisCreate(evaluation_id=evaluation.id, comment_text="bobo",
                                  comment_type="negative", is_flagged=True, flag_reason="offensive"),
            CommentAnalysisCreate(evaluation_id=evaluation.id, comment_text="Great lessons every day",
                                  comment_type="positive", is_flagged=False),
            CommentAnalysisCreate(evaluation_id=other_evaluation.id, comment_text="aaaaaa",
                                  comment_type="positive", is_flagged=True, flag_reason="spam"),
        ]))

        self.run_async(self.aggregator.run())

        results = {r.teacher_id: r for r in self.run_async(self.store.list_results())}
        self.assertEqual(results[teacher.id].flagged_comments, ["bobo"])
        self.assertEqual(results[other.id].flagged_comments, ["aaaaaa"])

    def test_rerun_is_idempotent(self):
        teacher = self.add_teacher("Ms. Santos")
        self.run_async(self.store.insert_evaluation(
            make_evaluation(teacher.id, rating=4, positive_feedback="Clear lessons"), TEST_PERIOD
        ))

        self.run_async(self.aggregator.run())
        first = self.run_async(self.store.list_results())
        self.run_async(self.aggregator.run())
        second = self.run_async(self.store.list_results())

        self.assertEqual([r.model_dump() for r in first], [r.model_dump() for r in second])
        self.assertEqual(len(second), 1)

    def test_rerun_overwrites_instead_of_merging(self):
        teacher = self.add_teacher("Ms. Santos")
        self.run_async(self.store.insert_evaluation(
            make_evaluation(teacher.id, rating=5, positive_feedback="Great"), TEST_PERIOD
        ))
        self.run_async(self.aggregator.run())

        self.run_async(self.store.reset_evaluations())
        self.run_async(self.store.insert_evaluation(make_evaluation(teacher.id, rating=1), TEST_PERIOD))
        self.run_async(self.aggregator.run())

        result = self.run_async(self.store.list_results())[0]
        self.assertEqual(result.overall_rating, 20.0)
        self.assertEqual(result.total_evaluations, 1)
        self.assertEqual(result.positive_comments, [])

    def test_rerun_after_reset_keeps_stored_result(self):
        teacher = self.add_teacher("Ms. Santos")
        self.run_async(self.store.insert_evaluation(
            make_evaluation(teacher.id, rating=4, suggestions="More examples"), TEST_PERIOD
        ))
        self.run_async(self.aggregator.run())
        before = self.run_async(self.store.list_results())

        self.run_async(self.store.reset_evaluations())
        updated = self.run_async(self.aggregator.run())

        # A teacher without evaluations is skipped, so the stored result is not zeroed
        self.assertEqual(updated, [])
        after = self.run_async(self.store.list_results())
        self.assertEqual([r.model_dump() for r in after], [r.model_dump() for r in before])
        self.assertEqual(after[0].overall_rating, 80.0)

    def test_results_keyed_by_current_period(self):
        self.run_async(self.store.save_settings(
            EvaluationSettingsData(current_semester="2nd Semester", school_year="2025-2026")
        ))
        teacher = self.add_teacher("Ms. Santos")
        self.run_async(self.store.insert_evaluation(make_evaluation(teacher.id), TEST_PERIOD))

        self.run_async(self.aggregator.run())

        results = self.run_async(self.store.list_results())
        self.assertEqual(results[0].evaluation_period, "2nd Semester 2025-2026")


class FlakyStore(MemoryStore):
    """Memory store that cannot store the results of some teachers."""

    def __init__(self, failing_teacher_ids):
        super().__init__()
        self.failing_teacher_ids = set(failing_teacher_ids)
        self.upsert_attempts = 0

    async def upsert_teacher_result(self, record):
        self.upsert_attempts += 1
        if record.teacher_id in self.failing_teacher_ids:
            raise StoreError("connection lost")
        return await super().upsert_teacher_result(record)


class TestAggregatorFailures(unittest.TestCase):
    """A failing teacher does not stop the run."""

    def setUp(self):
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)

    def tearDown(self):
        self.loop.close()
        asyncio.set_event_loop(None)

    def test_upsert_failure_skips_teacher(self):
        store = FlakyStore(failing_teacher_ids=[])
        first = self.loop.run_until_complete(store.add_teacher(TeacherCreate(name="A Teacher")))
        second = self.loop.run_until_complete(store.add_teacher(TeacherCreate(name="B Teacher")))
        for teacher in (first, second):
            self.loop.run_until_complete(store.insert_evaluation(make_evaluation(teacher.id), TEST_PERIOD))
        store.failing_teacher_ids.add(first.id)

        updated = self.loop.run_until_complete(EvaluationAggregator(store).run())

        self.assertEqual([r.teacher_id for r in updated], [second.id])
        self.assertEqual(store.upsert_attempts, 2)
        results = self.loop.run_until_complete(store.list_results())
        self.assertEqual([r.teacher_id for r in results], [second.id])

    def test_unreadable_teacher_list_raises(self):
        store = AsyncMock()
        store.get_settings.return_value = None
        store.list_teachers.side_effect = StoreError("database is locked")

        with self.assertRaises(StoreError):
            self.loop.run_until_complete(EvaluationAggregator(store).run())


if __name__ == "__main__":
    unittest.main()
