"""
Energy and water estimation.

Converts a token count and the prompt classification into direct inference
energy and a real-world figure that includes datacenter overheads.

    base_kwh       = total_tokens / 1000 * base_kwh_per_1k_tokens
    total_modifier = 1 + reasoning + openness + complexity * coefficient + inference overhead
    direct_kwh     = base_kwh * total_modifier
    real_world_kwh = direct_kwh * PUE * idle * network * training * production
    water_ml       = kwh * water_ml_per_kwh
"""

import math
from dataclasses import dataclass
from typing import Union

from .classifiers import OpennessLevel, ReasoningLevel


@dataclass(frozen=True)
class EnergyModelConfig:
    """Tunable constants of the energy model.

    Defaults follow published per-token inference estimates and
    datacenter cooling figures.
    """
    base_kwh_per_1k_tokens: float = 0.002
    water_ml_per_kwh: float = 1500.0

    # Additive modifiers by classification
    reasoning_simple_modifier: float = 0.15
    reasoning_moderate_modifier: float = 0.4
    reasoning_complex_modifier: float = 0.8
    openness_low_modifier: float = 0.0
    openness_medium_modifier: float = 0.25
    openness_high_modifier: float = 0.4
    complexity_coefficient: float = 0.4

    # Inference overhead, stepped on complex reasoning and vocabulary
    inference_overhead_base: float = 0.1
    inference_overhead_elevated: float = 0.2
    inference_overhead_high: float = 0.3
    complexity_threshold: float = 0.6

    # Real-world multipliers
    datacenter_pue: float = 2.5
    idle_load_factor: float = 1.7
    network_overhead_factor: float = 1.15
    amortized_training_factor: float = 1.2
    production_environment_factor: float = 1.3

    def __post_init__(self):
        """Validate that the model can never produce negative or shrinking energy."""
        if self.base_kwh_per_1k_tokens <= 0:
            raise ValueError("base_kwh_per_1k_tokens must be positive")
        if self.water_ml_per_kwh <= 0:
            raise ValueError("water_ml_per_kwh must be positive")

        modifiers = {
            "reasoning_simple_modifier": self.reasoning_simple_modifier,
            "reasoning_moderate_modifier": self.reasoning_moderate_modifier,
            "reasoning_complex_modifier": self.reasoning_complex_modifier,
            "openness_low_modifier": self.openness_low_modifier,
            "openness_medium_modifier": self.openness_medium_modifier,
            "openness_high_modifier": self.openness_high_modifier,
            "complexity_coefficient": self.complexity_coefficient,
            "inference_overhead_base": self.inference_overhead_base,
            "inference_overhead_elevated": self.inference_overhead_elevated,
            "inference_overhead_high": self.inference_overhead_high,
        }
        for name, value in modifiers.items():
            if value < 0:
                raise ValueError(f"{name} cannot be negative")

        if not 0.0 <= self.complexity_threshold <= 1.0:
            raise ValueError("complexity_threshold must be between 0 and 1")

        for name, value in self.overhead_factors().items():
            if value < 1.0:
                raise ValueError(f"{name} must be at least 1.0")

    def overhead_factors(self) -> dict:
        """Real-world multipliers by name."""
        return {
            "datacenter_pue": self.datacenter_pue,
            "idle_load_factor": self.idle_load_factor,
            "network_overhead_factor": self.network_overhead_factor,
            "amortized_training_factor": self.amortized_training_factor,
            "production_environment_factor": self.production_environment_factor,
        }

    def overhead_multiplier(self) -> float:
        """Product of all real-world multipliers."""
        product = 1.0
        for value in self.overhead_factors().values():
            product *= value
        return product

    def reasoning_modifier(self, level: ReasoningLevel) -> float:
        return {
            ReasoningLevel.SIMPLE: self.reasoning_simple_modifier,
            ReasoningLevel.MODERATE: self.reasoning_moderate_modifier,
            ReasoningLevel.COMPLEX: self.reasoning_complex_modifier,
        }[level]

    def openness_modifier(self, level: OpennessLevel) -> float:
        return {
            OpennessLevel.LOW: self.openness_low_modifier,
            OpennessLevel.MEDIUM: self.openness_medium_modifier,
            OpennessLevel.HIGH: self.openness_high_modifier,
        }[level]

    def inference_overhead(self, level: ReasoningLevel, complexity: float) -> float:
        complex_reasoning = level == ReasoningLevel.COMPLEX
        complex_vocabulary = complexity > self.complexity_threshold
        if complex_reasoning and complex_vocabulary:
            return self.inference_overhead_high
        if complex_reasoning or complex_vocabulary:
            return self.inference_overhead_elevated
        return self.inference_overhead_base


DEFAULT_ENERGY_CONFIG = EnergyModelConfig()


@dataclass(frozen=True)
class EnergyEstimate:
    """Energy and water figures for one prompt/response pair."""
    base_kwh: float
    total_modifier: float
    inference_overhead: float
    direct_kwh: float
    direct_water_ml: float
    real_world_kwh: float
    real_world_water_ml: float

    @property
    def direct_watt_hours(self) -> float:
        return self.direct_kwh * 1000

    @property
    def real_world_watt_hours(self) -> float:
        return self.real_world_kwh * 1000


def compute_energy(
    total_tokens: int,
    complexity: float,
    reasoning_level: Union[ReasoningLevel, int],
    openness_level: Union[OpennessLevel, int],
    config: EnergyModelConfig = DEFAULT_ENERGY_CONFIG
) -> EnergyEstimate:
    """
    Compute direct and real-world energy and water usage.

    Args:
        total_tokens: Prompt plus response tokens
        complexity: Vocabulary complexity in [0, 1]
        reasoning_level: ReasoningLevel or its integer value (1-3)
        openness_level: OpennessLevel or its integer value (0-2)
        config: Model constants

    Returns:
        EnergyEstimate with real_world_kwh >= direct_kwh >= base_kwh

    Raises:
        ValueError: If the token count is negative or not an integer, the
            complexity is outside [0, 1], or a level is unknown
    """
    if isinstance(total_tokens, bool) or not isinstance(total_tokens, int):
        raise ValueError(f"total_tokens must be an integer, got {total_tokens!r}")
    if total_tokens < 0:
        raise ValueError("total_tokens cannot be negative")
    if not isinstance(complexity, (int, float)) or math.isnan(complexity):
        raise ValueError(f"complexity must be a number, got {complexity!r}")
    if not 0.0 <= complexity <= 1.0:
        raise ValueError(f"complexity must be between 0 and 1, got {complexity}")

    reasoning = ReasoningLevel(reasoning_level)
    openness = OpennessLevel(openness_level)

    base_kwh = (total_tokens / 1000) * config.base_kwh_per_1k_tokens
    inference_overhead = config.inference_overhead(reasoning, complexity)
    total_modifier = (
        1
        + config.reasoning_modifier(reasoning)
        + config.openness_modifier(openness)
        + complexity * config.complexity_coefficient
        + inference_overhead
    )

    direct_kwh = base_kwh * total_modifier
    real_world_kwh = direct_kwh * config.overhead_multiplier()

    return EnergyEstimate(
        base_kwh=base_kwh,
        total_modifier=total_modifier,
        inference_overhead=inference_overhead,
        direct_kwh=direct_kwh,
        direct_water_ml=direct_kwh * config.water_ml_per_kwh,
        real_world_kwh=real_world_kwh,
        real_world_water_ml=real_world_kwh * config.water_ml_per_kwh,
    )
