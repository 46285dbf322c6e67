"""
Comment classifier module.

Tags a feedback comment with the language it is written in (English, Tagalog
or a Taglish mix) and decides whether it should be flagged as offensive, spam
or unrelated to the teacher.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

LANGUAGE_ENGLISH = "english"
LANGUAGE_TAGALOG = "tagalog"
LANGUAGE_TAGLISH = "taglish"

FLAG_OFFENSIVE = "offensive"
FLAG_SPAM = "spam"
FLAG_UNRELATED = "unrelated"

TAGALOG_MARKERS = (
    "ang", "mga", "kay", "sa", "ng", "ni", "na", "ko", "mo",
    "siya", "tayo", "kami", "kayo", "sila",
)
ENGLISH_MARKERS = (
    "the", "and", "is", "are", "was", "were", "have", "has", "had",
    "will", "would", "could", "should",
)

# A Tagalog tag needs more than this many distinct Tagalog markers
MIN_TAGALOG_MARKERS = 2

OFFENSIVE_WORDS = (
    # English
    "stupid", "idiot", "hate", "sucks", "terrible", "worst", "useless", "boring",
    # Tagalog
    "bobo", "tanga", "walang kwenta", "pangit", "ayoko", "napaka",
    # Profanity
    "wtf", "damn", "shit", "fuck", "bitch",
)

SPAM_PATTERNS = (
    re.compile(r"^[a-z]{1,3}$", re.IGNORECASE | re.ASCII),  # a few random letters
    re.compile(r"(.)\1{4,}"),                                # same character five or more times
    re.compile(r"^[A-Z\s]{1,10}$"),                          # short shouting
    re.compile(r"^\d+$", re.ASCII),                          # numbers only
)

TOPIC_PATTERN = re.compile(r"teacher|lesson|class|subject", re.IGNORECASE)
MIN_COMMENT_LENGTH = 3
MIN_OFF_TOPIC_LENGTH = 10


@dataclass(frozen=True)
class CommentClassification:
    """Outcome of classifying one comment."""

    language: str
    is_flagged: bool
    flag_reason: Optional[str]


def count_markers(text: str, markers) -> int:
    """Count how many of the markers occur in the text (case-insensitive)."""
    lowered = text.lower()
    return sum(1 for marker in markers if marker in lowered)


def detect_language(text: str) -> str:
    tagalog_count = count_markers(text, TAGALOG_MARKERS)
    english_count = count_markers(text, ENGLISH_MARKERS)

    if tagalog_count > english_count and tagalog_count > MIN_TAGALOG_MARKERS:
        return LANGUAGE_TAGALOG
    if tagalog_count > 0 and english_count > 0:
        return LANGUAGE_TAGLISH
    return LANGUAGE_ENGLISH


def is_offensive(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in OFFENSIVE_WORDS)


def is_spam(text: str) -> bool:
    stripped = text.strip()
    return any(pattern.search(stripped) for pattern in SPAM_PATTERNS)


def is_unrelated(text: str) -> bool:
    stripped = text.strip()
    if len(stripped) < MIN_COMMENT_LENGTH:
        return True
    return len(stripped) < MIN_OFF_TOPIC_LENGTH and not TOPIC_PATTERN.search(text)


# Checked top to bottom; the first matching rule names the flag reason
FLAG_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (is_offensive, FLAG_OFFENSIVE),
    (is_spam, FLAG_SPAM),
    (is_unrelated, FLAG_UNRELATED),
]


def flag_reasons(text: str, rules=None) -> List[str]:
    """Get every flag reason that applies to the text, in precedence order."""
    rules = FLAG_RULES if rules is None else rules
    return [reason for predicate, reason in rules if predicate(text)]


def classify(text: Optional[str]) -> Optional[CommentClassification]:
    """Classify a single comment.

    Args:
        text: The comment to classify

    Returns:
        CommentClassification, or None when the comment is empty or blank
    """
    if not text or not text.strip():
        return None

    reasons = flag_reasons(text)
    return CommentClassification(
        language=detect_language(text),
        is_flagged=bool(reasons),
        flag_reason=reasons[0] if reasons else None,
    )
