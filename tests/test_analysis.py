"""
Unit tests for the prompt analysis pipeline.
"""

import pytest

from ai_water_meter.core.analysis import PromptAnalyzer, analyze_prompt, measure_prompt
from ai_water_meter.core.classifiers import MatchMode, OpennessLevel, ReasoningLevel
from ai_water_meter.core.energy import EnergyModelConfig, compute_energy


class TestAnalyzePrompt:
    """Test prompt analysis."""

    def test_factual_question(self):
        analysis = analyze_prompt("Is Paris the capital of France?")

        assert analysis.prompt_tokens == 8
        assert analysis.estimated_response_tokens == 20
        assert analysis.total_tokens == 28
        assert analysis.reasoning_level == ReasoningLevel.SIMPLE
        assert analysis.openness_level == OpennessLevel.LOW
        assert analysis.estimation_rule == "simple_factual"
        assert 0.0 <= analysis.vocabulary_complexity <= 1.0

    def test_usage(self):
        usage = analyze_prompt("Is Paris the capital of France?").usage
        assert usage.prompt_tokens == 8
        assert usage.response_tokens == 20
        assert usage.total_tokens == 28

    def test_empty_prompt(self):
        analysis = analyze_prompt("")

        assert analysis.raw_text == ""
        assert analysis.prompt_tokens == 0
        assert analysis.estimated_response_tokens == 100
        assert analysis.vocabulary_complexity == 0.0
        assert analysis.reasoning_level == ReasoningLevel.SIMPLE
        assert analysis.openness_level == OpennessLevel.LOW

    def test_none_prompt(self):
        assert analyze_prompt(None).raw_text == ""

    def test_match_mode_is_passed_through(self):
        analyzer = PromptAnalyzer(match_mode=MatchMode.SUBSTRING)
        analysis = analyzer.analyze("Is Paris the capital of France?")
        assert analysis.reasoning_level == ReasoningLevel.MODERATE
        assert analysis.openness_level == OpennessLevel.HIGH


class TestMeasurePrompt:
    """Test the footprint of a prompt."""

    def test_energy_matches_model(self):
        footprint = measure_prompt("Write a poem about the ocean")
        analysis = footprint.analysis
        expected = compute_energy(
            analysis.total_tokens,
            analysis.vocabulary_complexity,
            analysis.reasoning_level,
            analysis.openness_level,
        )
        assert footprint.energy == expected

    def test_custom_energy_config(self):
        default = measure_prompt("Hello there")
        doubled = PromptAnalyzer(
            energy_config=EnergyModelConfig(water_ml_per_kwh=3000.0)
        ).measure("Hello there")
        assert doubled.energy.real_world_water_ml == pytest.approx(
            default.energy.real_world_water_ml * 2
        )

    def test_to_dict_shape(self):
        result = measure_prompt("Is Paris the capital of France?").to_dict()

        assert list(result) == [
            "promptTokens",
            "estimatedResponseTokens",
            "totalTokens",
            "complexity",
            "reasoningLevel",
            "reasoningType",
            "opennessLevel",
            "openness",
            "baseKWh",
            "totalModifier",
            "inferenceOverhead",
            "directKWh",
            "directWattHours",
            "directWaterUsageMl",
            "realWorldKWh",
            "realWorldWattHours",
            "realWorldWaterUsageMl",
        ]
        assert result["promptTokens"] == 8
        assert result["totalTokens"] == 28
        assert result["reasoningLevel"] == 1
        assert result["reasoningType"] == "Simple"
        assert result["opennessLevel"] == 0
        assert result["openness"] == "Low"
        assert result["realWorldWaterUsageMl"] > result["directWaterUsageMl"]


class TestScenarios:
    """End-to-end prompts with known outcomes."""

    def test_factual_question_is_cheap(self):
        analysis = analyze_prompt("Is Paris the capital of France?")
        assert analysis.reasoning_level == ReasoningLevel.SIMPLE
        assert analysis.openness_level == OpennessLevel.LOW
        assert analysis.estimated_response_tokens < 50

    def test_python_scraper(self):
        analysis = analyze_prompt("Write 50 lines of Python code to scrape a website")
        assert 50 * 30 <= analysis.estimated_response_tokens <= 50 * 40

    def test_fan_fiction(self):
        analysis = analyze_prompt(
            "Write a Harry Potter fanfic where Harry and Hermione go on an adventure"
        )
        assert analysis.estimated_response_tokens > 1000

    def test_word_count_essay(self):
        analysis = analyze_prompt("Write a 500 word essay about renewable energy")
        assert analysis.estimated_response_tokens == pytest.approx(500 * 1.3, rel=0.1)

    def test_empty_prompt(self):
        footprint = measure_prompt("")
        assert footprint.analysis.prompt_tokens == 0
        assert footprint.analysis.estimated_response_tokens >= 15
        assert footprint.energy.direct_kwh >= 0
        assert footprint.energy.real_world_water_ml >= 0

    def test_classification_is_idempotent_and_case_insensitive(self):
        text = "Analyze the ethical implications of AI"
        first = analyze_prompt(text)
        assert analyze_prompt(text) == first
        upper = analyze_prompt(text.upper())
        assert upper.reasoning_level == first.reasoning_level
        assert upper.openness_level == first.openness_level
