"""
Keyword filter module.

Administrators curate a list of words that should not be shown in student
feedback. Comments containing any of them are surfaced as "hidden" for review
and can be redacted before display. This is independent of the classifier's
flagging.
"""

import logging
import re
from typing import Iterable, List, Optional

from evalserver.repositories.base import EvaluationStore, DuplicateFilterWordError
from evalserver.schemas import EvaluationRead, FilterWordResult, HiddenComment

# Set up logging
logger = logging.getLogger(__name__)

REDACTION_CHAR = "*"
DUPLICATE_WORD_MESSAGE = "This keyword is already in the list"


def normalize_word(word: Optional[str]) -> str:
    return (word or "").strip().lower()


def feedback_text(evaluation: EvaluationRead) -> str:
    """Join the feedback fields of an evaluation for scanning."""
    return " ".join(
        value or ""
        for value in (evaluation.positive_feedback, evaluation.negative_feedback, evaluation.suggestions)
    )


def scan(candidate_text: Optional[str], words: Iterable[str]) -> bool:
    """Check whether the text contains any of the words (case-insensitive)."""
    lowered = (candidate_text or "").lower()
    return any(word.lower() in lowered for word in words if word)


def redact(text: Optional[str], words: Iterable[str]) -> str:
    """Replace every occurrence of the words with asterisks.

    Words are applied one after another in sorted order, each to the output of
    the previous replacement. Overlapping words are not reconciled, so a
    shorter word may no longer match after a longer one was masked.

    Args:
        text: The text to redact
        words: Filter words

    Returns:
        The redacted text
    """
    redacted = text or ""
    for word in sorted(set(w for w in words if w)):
        pattern = re.compile(re.escape(word), re.IGNORECASE)
        redacted = pattern.sub(REDACTION_CHAR * len(word), redacted)
    return redacted


class KeywordFilter:
    """Maintains the filter word list in the store."""

    def __init__(self, store: EvaluationStore):
        self.store = store

    async def words(self) -> List[str]:
        return sorted(await self.store.query_filter_words())

    async def add(self, word: str) -> FilterWordResult:
        """Add a word to the list.

        Empty and duplicate words are rejected through the result.
        """
        normalized = normalize_word(word)
        if not normalized:
            return FilterWordResult(success=False, word=normalized, message="Please enter a keyword")

        existing = await self.store.query_filter_words()
        if normalized in existing:
            return self._already_listed(normalized)

        # A concurrent add of the same word is refused by the store
        try:
            await self.store.insert_filter_word(normalized)
        except DuplicateFilterWordError:
            return self._already_listed(normalized)
        logger.info(f"Added filter word '{normalized}'")
        return FilterWordResult(success=True, word=normalized,
                                message=f'Added "{normalized}" to keyword list')

    @staticmethod
    def _already_listed(word: str) -> FilterWordResult:
        return FilterWordResult(success=False, word=word, message=DUPLICATE_WORD_MESSAGE)

    async def remove(self, word: str) -> FilterWordResult:
        """Remove a word by its stored value. Removing an unknown word is a no-op."""
        await self.store.delete_filter_word(word)
        logger.info(f"Removed filter word '{word}'")
        return FilterWordResult(success=True, word=word,
                                message=f'Removed "{word}" from keyword list')

    async def hidden_comments(self) -> List[HiddenComment]:
        """Get the evaluations whose feedback contains a filter word."""
        words = await self.store.query_filter_words()
        if not words:
            return []

        evaluations = await self.store.query_evaluations()
        return [
            HiddenComment(
                evaluation_id=evaluation.id,
                teacher_id=evaluation.teacher_id,
                positive_feedback=evaluation.positive_feedback,
                negative_feedback=evaluation.negative_feedback,
                suggestions=evaluation.suggestions,
            )
            for evaluation in evaluations
            if scan(feedback_text(evaluation), words)
        ]

    async def redact(self, text: str) -> str:
        return redact(text, await self.store.query_filter_words())
