"""
Prompt analysis pipeline.

raw text -> token count -> classifier scores -> length estimate -> energy figures
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .classifiers import (
    MatchMode,
    OpennessLevel,
    ReasoningLevel,
    classify_openness,
    classify_reasoning,
    score_vocabulary_complexity,
)
from .energy import DEFAULT_ENERGY_CONFIG, EnergyEstimate, EnergyModelConfig, compute_energy
from .estimator import ResponseLengthEstimator
from .token_counter import TokenCounter, TokenUsage


@dataclass(frozen=True)
class PromptAnalysis:
    """Classification and token figures for a single prompt."""
    raw_text: str
    prompt_tokens: int
    estimated_response_tokens: int
    vocabulary_complexity: float
    reasoning_level: ReasoningLevel
    openness_level: OpennessLevel
    estimation_rule: str

    @property
    def total_tokens(self) -> int:
        return self.usage.total_tokens

    @property
    def usage(self) -> TokenUsage:
        return TokenUsage(self.prompt_tokens, self.estimated_response_tokens)


@dataclass(frozen=True)
class PromptFootprint:
    """A prompt analysis together with its energy estimate."""
    analysis: PromptAnalysis
    energy: EnergyEstimate

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the external camelCase result shape."""
        analysis = self.analysis
        energy = self.energy
        return {
            "promptTokens": analysis.prompt_tokens,
            "estimatedResponseTokens": analysis.estimated_response_tokens,
            "totalTokens": analysis.total_tokens,
            "complexity": analysis.vocabulary_complexity,
            "reasoningLevel": int(analysis.reasoning_level),
            "reasoningType": analysis.reasoning_level.label,
            "opennessLevel": int(analysis.openness_level),
            "openness": analysis.openness_level.label,
            "baseKWh": energy.base_kwh,
            "totalModifier": energy.total_modifier,
            "inferenceOverhead": energy.inference_overhead,
            "directKWh": energy.direct_kwh,
            "directWattHours": energy.direct_watt_hours,
            "directWaterUsageMl": energy.direct_water_ml,
            "realWorldKWh": energy.real_world_kwh,
            "realWorldWattHours": energy.real_world_watt_hours,
            "realWorldWaterUsageMl": energy.real_world_water_ml,
        }


class PromptAnalyzer:
    """Runs the full analysis pipeline with a fixed configuration."""

    def __init__(
        self,
        energy_config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG,
        match_mode: MatchMode = MatchMode.WORD,
        token_counter: Optional[TokenCounter] = None
    ):
        self.energy_config = energy_config
        self.match_mode = match_mode
        self.token_counter = token_counter or TokenCounter()
        self.estimator = ResponseLengthEstimator(match_mode=match_mode)

    def analyze(self, text: Optional[str]) -> PromptAnalysis:
        """Classify a prompt and estimate its token usage. Never raises for string input."""
        text = text or ""
        prompt_tokens = self.token_counter.count(text)
        estimation = self.estimator.explain(text, prompt_tokens)
        return PromptAnalysis(
            raw_text=text,
            prompt_tokens=prompt_tokens,
            estimated_response_tokens=estimation.tokens,
            vocabulary_complexity=score_vocabulary_complexity(text),
            reasoning_level=classify_reasoning(text, self.match_mode),
            openness_level=classify_openness(text, self.match_mode),
            estimation_rule=estimation.rule,
        )

    def measure(self, text: Optional[str]) -> PromptFootprint:
        """Analyze a prompt and compute its energy and water footprint."""
        analysis = self.analyze(text)
        energy = compute_energy(
            analysis.total_tokens,
            analysis.vocabulary_complexity,
            analysis.reasoning_level,
            analysis.openness_level,
            self.energy_config,
        )
        return PromptFootprint(analysis=analysis, energy=energy)


def analyze_prompt(text: Optional[str]) -> PromptAnalysis:
    """Analyze a prompt with the default configuration."""
    return PromptAnalyzer().analyze(text)


def measure_prompt(text: Optional[str]) -> PromptFootprint:
    """Measure a prompt's footprint with the default configuration."""
    return PromptAnalyzer().measure(text)
