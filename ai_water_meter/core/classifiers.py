"""
Prompt classifiers.

Three independent, pure analyzers over raw prompt text:

1. Vocabulary complexity - readability grade normalized to [0, 1]
2. Reasoning level - Simple, Moderate or Complex
3. Openness - Low, Medium or High

Tier precedence is load-bearing. The reasoning classifier tests the complex
table first and stops on the first hit, so a prompt that also contains
moderate phrases is still Complex. The openness classifier does the same
with its high table before the medium one.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import lru_cache
from typing import Optional, Pattern, Tuple

import textstat

from .keywords import (
    COMPLEX_REASONING_PHRASES,
    HIGH_OPENNESS_PHRASES,
    MEDIUM_OPENNESS_PHRASES,
    MODERATE_REASONING_PHRASES,
)

logger = logging.getLogger(__name__)

# Flesch-Kincaid grade that maps to a complexity score of 1.0
COMPLEXITY_GRADE_CEILING = 12.0


class MatchMode(Enum):
    """How a phrase is located inside prompt text."""
    WORD = "word"            # Phrase must sit on word boundaries
    SUBSTRING = "substring"  # Raw containment, nested words match too


@lru_cache(maxsize=4096)
def _word_pattern(phrase: str) -> Pattern:
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)")


def contains_phrase(lower_text: str, phrase: str, mode: MatchMode = MatchMode.WORD) -> bool:
    """Check whether an already lowercased text contains a phrase."""
    if mode == MatchMode.SUBSTRING:
        return phrase in lower_text
    return _word_pattern(phrase).search(lower_text) is not None


@dataclass(frozen=True)
class PhraseTable:
    """An ordered, named list of lowercase phrases."""
    name: str
    phrases: Tuple[str, ...]

    def first_match(self, text: str, mode: MatchMode = MatchMode.WORD) -> Optional[str]:
        """Return the first phrase in table order found in text, if any."""
        lower = text.lower()
        for phrase in self.phrases:
            if contains_phrase(lower, phrase, mode):
                return phrase
        return None


class ReasoningLevel(IntEnum):
    """How much reasoning a prompt asks for."""
    SIMPLE = 1
    MODERATE = 2
    COMPLEX = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class OpennessLevel(IntEnum):
    """How creative or open-ended a prompt is."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


COMPLEX_REASONING = PhraseTable("complex_reasoning", COMPLEX_REASONING_PHRASES)
MODERATE_REASONING = PhraseTable("moderate_reasoning", MODERATE_REASONING_PHRASES)
HIGH_OPENNESS = PhraseTable("high_openness", HIGH_OPENNESS_PHRASES)
MEDIUM_OPENNESS = PhraseTable("medium_openness", MEDIUM_OPENNESS_PHRASES)

# Tiers are tested in this order; the first table with a match decides
REASONING_TIERS: Tuple[Tuple[ReasoningLevel, PhraseTable], ...] = (
    (ReasoningLevel.COMPLEX, COMPLEX_REASONING),
    (ReasoningLevel.MODERATE, MODERATE_REASONING),
)
OPENNESS_TIERS: Tuple[Tuple[OpennessLevel, PhraseTable], ...] = (
    (OpennessLevel.HIGH, HIGH_OPENNESS),
    (OpennessLevel.MEDIUM, MEDIUM_OPENNESS),
)


def classify_reasoning(text: str, match_mode: MatchMode = MatchMode.WORD) -> ReasoningLevel:
    """
    Classify the reasoning level a prompt requires.

    Args:
        text: Raw prompt text (case-insensitive)
        match_mode: Phrase matching strategy

    Returns:
        ReasoningLevel: COMPLEX if any complex phrase matches, else MODERATE
        if any moderate phrase matches, else SIMPLE
    """
    for level, table in REASONING_TIERS:
        if table.first_match(text or "", match_mode) is not None:
            return level
    return ReasoningLevel.SIMPLE


def classify_openness(text: str, match_mode: MatchMode = MatchMode.WORD) -> OpennessLevel:
    """
    Classify how open-ended a prompt is.

    Args:
        text: Raw prompt text (case-insensitive)
        match_mode: Phrase matching strategy

    Returns:
        OpennessLevel: HIGH if any high-openness phrase matches, else MEDIUM
        if any medium-openness phrase matches, else LOW
    """
    for level, table in OPENNESS_TIERS:
        if table.first_match(text or "", match_mode) is not None:
            return level
    return OpennessLevel.LOW


def score_vocabulary_complexity(text: str) -> float:
    """Score vocabulary complexity as the Flesch-Kincaid grade over 12, clamped to [0, 1]."""
    if not text or not text.strip():
        return 0.0
    try:
        grade = textstat.flesch_kincaid_grade(text)
    except LookupError as exc:
        # Raised when the pronouncing dictionary is missing and cannot be fetched
        logger.warning("Readability data unavailable, scoring complexity as 0: %s", exc)
        return 0.0
    return min(1.0, max(0.0, grade / COMPLEXITY_GRADE_CEILING))
