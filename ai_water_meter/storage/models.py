"""
Data models for storage layer.

Defines the persisted prompt history record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into a naive local datetime.

    Accepts the trailing "Z" that JavaScript's toISOString produces.

    Raises:
        ValueError: If the value is not a valid ISO-8601 string
    """
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be an ISO-8601 string, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _number(energy_data: Mapping[str, Any], key: str) -> float:
    value = energy_data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


@dataclass(frozen=True)
class PromptRecord:
    """Immutable history entry for one unique prompt.

    Created once per distinct prompt text and never modified; history is
    only ever appended to or cleared as a whole.
    """
    timestamp: datetime
    prompt: str
    energy_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_tokens(self) -> int:
        return int(_number(self.energy_data, "totalTokens"))

    @property
    def real_world_kwh(self) -> float:
        return float(_number(self.energy_data, "realWorldKWh"))

    @property
    def real_world_water_ml(self) -> float:
        return float(_number(self.energy_data, "realWorldWaterUsageMl"))

    @classmethod
    def from_footprint(cls, footprint, timestamp: Optional[datetime] = None) -> "PromptRecord":
        """Snapshot a PromptFootprint into a history record."""
        return cls(
            timestamp=timestamp or datetime.now(),
            prompt=footprint.analysis.raw_text,
            energy_data=footprint.to_dict(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the portable JSON shape."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "prompt": self.prompt,
            "energyData": dict(self.energy_data),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PromptRecord":
        """Build a record from its JSON shape.

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise ValueError("record must be an object")
        prompt = data.get("prompt")
        if not isinstance(prompt, str):
            raise ValueError("record prompt must be a string")
        energy_data = data.get("energyData", {})
        if energy_data is None:
            energy_data = {}
        if not isinstance(energy_data, Mapping):
            raise ValueError("record energyData must be an object")
        return cls(
            timestamp=parse_timestamp(data.get("timestamp")),
            prompt=prompt,
            energy_data=dict(energy_data),
        )
