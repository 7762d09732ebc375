"""
Unit tests for prompt classifiers.

Covers reasoning tiers, openness tiers, phrase matching modes and the
vocabulary complexity score.
"""

from unittest.mock import patch

import pytest

from ai_water_meter.core.classifiers import (
    COMPLEX_REASONING,
    MatchMode,
    OpennessLevel,
    PhraseTable,
    ReasoningLevel,
    classify_openness,
    classify_reasoning,
    contains_phrase,
    score_vocabulary_complexity,
)


class TestPhraseMatching:
    """Test phrase lookup in both match modes."""

    def test_word_mode_requires_boundaries(self):
        assert contains_phrase("is paris the capital of france?", "api") is False
        assert contains_phrase("call the api now", "api") is True

    def test_substring_mode_matches_inside_words(self):
        assert contains_phrase("is paris the capital of france?", "api", MatchMode.SUBSTRING) is True

    def test_multi_word_phrase(self):
        assert contains_phrase("how to bake bread", "how to") is True
        assert contains_phrase("somehow tomorrow", "how to") is False

    def test_phrase_with_punctuation(self):
        assert contains_phrase("use async/await here", "async/await") is True

    def test_first_match_follows_table_order(self):
        table = PhraseTable("test", ("beta", "alpha"))
        assert table.first_match("alpha and beta") == "beta"
        assert table.first_match("gamma") is None

    def test_first_match_is_case_insensitive(self):
        assert COMPLEX_REASONING.first_match("ANALYZE this") == "analyze"


class TestReasoningClassifier:
    """Test reasoning level classification."""

    def test_simple_prompt(self):
        assert classify_reasoning("Hello there") == ReasoningLevel.SIMPLE

    def test_empty_and_none(self):
        assert classify_reasoning("") == ReasoningLevel.SIMPLE
        assert classify_reasoning(None) == ReasoningLevel.SIMPLE

    def test_moderate_prompt(self):
        assert classify_reasoning("How to bake bread") == ReasoningLevel.MODERATE

    def test_complex_prompt(self):
        assert classify_reasoning("Analyze the causes of the French Revolution") == ReasoningLevel.COMPLEX

    def test_complex_tier_takes_precedence(self):
        """A prompt with both moderate and complex phrases is complex."""
        assert classify_reasoning("Explain the ethics of cloning") == ReasoningLevel.COMPLEX

    def test_factual_question_word_mode(self):
        assert classify_reasoning("Is Paris the capital of France?") == ReasoningLevel.SIMPLE

    def test_factual_question_substring_mode(self):
        """Substring matching finds 'api' inside 'capital'."""
        level = classify_reasoning("Is Paris the capital of France?", MatchMode.SUBSTRING)
        assert level == ReasoningLevel.MODERATE

    def test_labels(self):
        assert ReasoningLevel.SIMPLE.label == "Simple"
        assert ReasoningLevel.MODERATE.label == "Moderate"
        assert ReasoningLevel.COMPLEX.label == "Complex"
        assert int(ReasoningLevel.COMPLEX) == 3


class TestOpennessClassifier:
    """Test openness classification."""

    def test_low_openness(self):
        assert classify_openness("Hello there") == OpennessLevel.LOW

    def test_empty_and_none(self):
        assert classify_openness("") == OpennessLevel.LOW
        assert classify_openness(None) == OpennessLevel.LOW

    def test_medium_openness(self):
        assert classify_openness("Explain photosynthesis") == OpennessLevel.MEDIUM

    def test_high_openness(self):
        assert classify_openness("Write a story about a dragon") == OpennessLevel.HIGH

    def test_high_tier_takes_precedence(self):
        assert classify_openness("Explain and imagine a new planet") == OpennessLevel.HIGH

    def test_substring_mode_is_more_permissive(self):
        text = "Is Paris the capital of France?"
        assert classify_openness(text) == OpennessLevel.LOW
        assert classify_openness(text, MatchMode.SUBSTRING) == OpennessLevel.HIGH

    def test_labels(self):
        assert OpennessLevel.LOW.label == "Low"
        assert OpennessLevel.HIGH.label == "High"
        assert int(OpennessLevel.MEDIUM) == 1


class TestVocabularyComplexity:
    """Test the readability based complexity score."""

    def test_empty_text(self):
        assert score_vocabulary_complexity("") == 0.0
        assert score_vocabulary_complexity("   ") == 0.0
        assert score_vocabulary_complexity(None) == 0.0

    @pytest.mark.parametrize("text", [
        "The cat sat on the mat.",
        "Hello",
        "Notwithstanding epistemological considerations, institutionalized organizational "
        "interdependencies necessitate comprehensive reconceptualization.",
    ])
    def test_score_in_unit_interval(self, text):
        score = score_vocabulary_complexity(text)
        assert 0.0 <= score <= 1.0

    def test_dense_vocabulary_scores_higher(self):
        plain = score_vocabulary_complexity("The cat sat on the mat.")
        dense = score_vocabulary_complexity(
            "Notwithstanding epistemological considerations, institutionalized organizational "
            "interdependencies necessitate comprehensive reconceptualization."
        )
        assert plain < dense
        assert dense == 1.0

    def test_missing_readability_data_scores_zero(self):
        with patch("ai_water_meter.core.classifiers.textstat.flesch_kincaid_grade") as mock_grade:
            mock_grade.side_effect = LookupError("cmudict not found")
            assert score_vocabulary_complexity("The cat sat on the mat.") == 0.0
