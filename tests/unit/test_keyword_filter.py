"""
Unit tests for the keyword filter.
"""

import unittest

import pytest

from evalserver.business_logic.keyword_filter import (
    KeywordFilter,
    feedback_text,
    normalize_word,
    redact,
    scan,
)
from evalserver.repositories import MemoryStore, DuplicateFilterWordError
from tests.fixtures.evaluation_fixtures import make_evaluation, TEST_PERIOD


class TestRedact(unittest.TestCase):

    def test_single_word(self):
        self.assertEqual(redact("this is bad", ["bad"]), "this is ***")

    def test_case_insensitive(self):
        self.assertEqual(redact("BAD and Bad", ["bad"]), "*** and ***")

    def test_no_words(self):
        self.assertEqual(redact("this is bad", []), "this is bad")

    def test_multiple_words(self):
        self.assertEqual(redact("lazy and boring", {"lazy", "boring"}), "**** and ******")

    def test_words_applied_in_sorted_order(self):
        # "bad" is masked first, so "badge" no longer matches afterwards
        self.assertEqual(redact("badge", ["badge", "bad"]), "***ge")

    def test_regex_characters_are_literal(self):
        self.assertEqual(redact("a+b or ab", ["a+b"]), "*** or ab")

    def test_none_text(self):
        self.assertEqual(redact(None, ["bad"]), "")


class TestScan(unittest.TestCase):

    def test_match(self):
        self.assertTrue(scan("The class is Boring", ["boring"]))

    def test_no_match(self):
        self.assertFalse(scan("Great class", ["boring"]))

    def test_empty_words_ignored(self):
        self.assertFalse(scan("Great class", [""]))

    def test_feedback_text_joins_all_fields(self):
        evaluation = make_evaluation(positive_feedback="kind", negative_feedback=None, suggestions="slower")
        self.assertTrue(scan(feedback_text(evaluation), ["slower"]))
        self.assertTrue(scan(feedback_text(evaluation), ["kind"]))

    def test_normalize_word(self):
        self.assertEqual(normalize_word("  Lazy "), "lazy")
        self.assertEqual(normalize_word(None), "")


@pytest.fixture
def keyword_filter(memory_store):
    return KeywordFilter(memory_store)


async def test_add_word(keyword_filter, memory_store):
    result = await keyword_filter.add("  Lazy ")

    assert result.success
    assert result.word == "lazy"
    assert await memory_store.query_filter_words() == {"lazy"}


async def test_add_duplicate_variant_rejected(keyword_filter, memory_store):
    await keyword_filter.add("lazy")

    result = await keyword_filter.add(" LAZY")

    assert not result.success
    assert result.message == "This keyword is already in the list"
    assert await memory_store.query_filter_words() == {"lazy"}


async def test_add_empty_word_rejected(keyword_filter, memory_store):
    result = await keyword_filter.add("   ")

    assert not result.success
    assert result.message == "Please enter a keyword"
    assert await memory_store.query_filter_words() == set()


async def test_remove_word(keyword_filter, memory_store):
    await keyword_filter.add("lazy")
    await keyword_filter.add("boring")

    result = await keyword_filter.remove("lazy")

    assert result.success
    assert await keyword_filter.words() == ["boring"]


async def test_remove_missing_word_is_noop(keyword_filter):
    await keyword_filter.add("lazy")

    result = await keyword_filter.remove("unknown")

    assert result.success
    assert await keyword_filter.words() == ["lazy"]


async def test_hidden_comments(keyword_filter, memory_store):
    await keyword_filter.add("lazy")
    hidden = await memory_store.insert_evaluation(
        make_evaluation("teacher-1", suggestions="Do not be LAZY in checking papers"), TEST_PERIOD
    )
    await memory_store.insert_evaluation(
        make_evaluation("teacher-1", positive_feedback="Very organized"), TEST_PERIOD
    )

    comments = await keyword_filter.hidden_comments()

    assert [c.evaluation_id for c in comments] == [hidden.id]
    assert comments[0].suggestions == "Do not be LAZY in checking papers"


async def test_hidden_comments_without_words(keyword_filter, memory_store):
    await memory_store.insert_evaluation(make_evaluation("teacher-1", positive_feedback="lazy"), TEST_PERIOD)

    assert await keyword_filter.hidden_comments() == []


async def test_redact_with_stored_words(keyword_filter):
    await keyword_filter.add("bad")

    assert await keyword_filter.redact("this is bad") == "this is ***"


class StaleListStore(MemoryStore):
    """Store whose word list is read before another request added the same word."""

    async def query_filter_words(self):
        return set()


async def test_add_word_refused_by_store_is_rejected():
    store = StaleListStore()
    await store.insert_filter_word("lazy")

    result = await KeywordFilter(store).add("Lazy")

    assert not result.success
    assert result.message == "This keyword is already in the list"


async def test_memory_store_refuses_duplicate_word(memory_store):
    await memory_store.insert_filter_word("lazy")

    with pytest.raises(DuplicateFilterWordError):
        await memory_store.insert_filter_word("lazy")
