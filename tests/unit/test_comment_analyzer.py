"""
Unit tests for the comment analyzer.
"""

from unittest.mock import AsyncMock

import pytest

from evalserver.business_logic.comment_analyzer import CommentAnalyzer, build_comment_analyses
from evalserver.repositories import StoreError
from evalserver.schemas import EvaluationComments


def test_build_skips_empty_comments():
    comments = EvaluationComments(
        positive="The teacher was helpful and explained the lesson clearly",
        negative="   ",
        suggestions=None,
    )

    records = build_comment_analyses("evaluation-1", comments)

    assert len(records) == 1
    assert records[0].comment_type == "positive"
    assert records[0].evaluation_id == "evaluation-1"
    assert records[0].language_detected == "english"
    assert not records[0].is_flagged


def test_build_tags_comment_types():
    comments = EvaluationComments(
        positive="Patient with every student in class",
        negative="bobo ka",
        suggestions="Give more examples in the lesson",
    )

    records = build_comment_analyses("evaluation-1", comments)

    assert [r.comment_type for r in records] == ["positive", "negative", "suggestion"]
    assert records[1].is_flagged
    assert records[1].flag_reason == "offensive"
    assert records[1].comment_text == "bobo ka"


async def test_analyze_stores_records(memory_store):
    analyzer = CommentAnalyzer(memory_store)

    response = await analyzer.analyze("evaluation-1", EvaluationComments(
        positive="Explains every lesson well",
        negative="aaaaaa",
        suggestions="",
    ))

    assert response.success
    assert response.analysis_count == 2
    assert response.flagged_count == 1

    stored = await memory_store.query_comment_analysis(evaluation_ids=["evaluation-1"])
    assert [s.comment_type for s in stored] == ["positive", "negative"]
    flagged = await memory_store.query_comment_analysis(flagged=True)
    assert [f.flag_reason for f in flagged] == ["spam"]


async def test_analyze_without_comments_stores_nothing():
    store = AsyncMock()
    analyzer = CommentAnalyzer(store)

    response = await analyzer.analyze("evaluation-1", EvaluationComments())

    assert response.analysis_count == 0
    assert response.flagged_count == 0
    store.insert_comment_analysis.assert_not_awaited()


async def test_analyze_propagates_store_failure():
    store = AsyncMock()
    store.insert_comment_analysis.side_effect = StoreError("disk I/O error")
    analyzer = CommentAnalyzer(store)

    with pytest.raises(StoreError):
        await analyzer.analyze("evaluation-1", EvaluationComments(positive="Great teacher overall"))
