"""
Configuration management and loading.

Handles meter settings read from a YAML file. Every section is optional
and falls back to defaults, but unknown keys and wrong types are rejected.

Example:

    energy:
      base_kwh_per_1k_tokens: 0.002
      datacenter_pue: 1.8
    estimator:
      match_mode: word
      tokenizer: heuristic
    storage:
      db_path: ~/.ai-water-meter.db
    aggregation:
      server_url: http://localhost:3000
      timeout_seconds: 5
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type

import yaml

from ai_water_meter.core.classifiers import MatchMode
from ai_water_meter.core.energy import EnergyModelConfig
from ai_water_meter.core.token_counter import TokenizerMethod
from ai_water_meter.storage.db import DEFAULT_DB_PATH

DEFAULT_SERVER_URL = "http://localhost:3000"


@dataclass(frozen=True)
class EstimatorConfig:
    """Token counting and phrase matching settings."""
    match_mode: MatchMode = MatchMode.WORD
    tokenizer: TokenizerMethod = TokenizerMethod.HEURISTIC
    encoding: str = "cl100k_base"

    def __post_init__(self):
        """Validate the encoding name."""
        if not self.encoding or not self.encoding.strip():
            raise ValueError("encoding cannot be empty")


@dataclass(frozen=True)
class StorageConfig:
    """Prompt history location."""
    db_path: str = DEFAULT_DB_PATH

    def __post_init__(self):
        """Validate the database path."""
        if not self.db_path or not self.db_path.strip():
            raise ValueError("db_path cannot be empty")


@dataclass(frozen=True)
class AggregationConfig:
    """Aggregation server settings."""
    server_url: str = DEFAULT_SERVER_URL
    timeout_seconds: float = 10.0
    user_id: Optional[str] = None

    def __post_init__(self):
        """Validate the server URL and timeout."""
        if not self.server_url.startswith(("http://", "https://")):
            raise ValueError("server_url must start with http:// or https://")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")


@dataclass(frozen=True)
class MeterConfig:
    """Complete meter configuration."""
    energy: EnergyModelConfig = field(default_factory=EnergyModelConfig)
    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)


def load_meter_config(path: str) -> MeterConfig:
    """Load and validate meter configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated MeterConfig; an empty file yields the defaults

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Meter config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if raw_config is None:
        return MeterConfig()
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a mapping of sections")

    allowed_top_keys = {'energy', 'estimator', 'storage', 'aggregation'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    return MeterConfig(
        energy=_parse_energy(_section(raw_config, 'energy')),
        estimator=_parse_estimator(_section(raw_config, 'estimator')),
        storage=_parse_storage(_section(raw_config, 'storage')),
        aggregation=_parse_aggregation(_section(raw_config, 'aggregation')),
    )


def _section(raw_config: Dict, name: str) -> Dict:
    data = raw_config.get(name)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' must be a dictionary")
    return data


def _check_keys(data: Dict, allowed, path: str) -> None:
    unknown_keys = set(data.keys()) - set(allowed)
    if unknown_keys:
        raise ValueError(f"Unknown keys in {path}: {unknown_keys}")


def _number(value: Any, key: str, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' in {path} must be a number")
    return float(value)


def _string(value: Any, key: str, path: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{key}' in {path} must be a string")
    return value


def _enum(value: Any, enum_type: Type[Enum], key: str, path: str) -> Enum:
    text = _string(value, key, path)
    try:
        return enum_type(text.lower())
    except ValueError:
        valid = [member.value for member in enum_type]
        raise ValueError(f"'{key}' in {path} must be one of: {valid}")


def _parse_energy(data: Dict) -> EnergyModelConfig:
    """Parse energy model constants; every key is an EnergyModelConfig field."""
    allowed_keys = {f.name for f in fields(EnergyModelConfig)}
    _check_keys(data, allowed_keys, "energy")
    values = {key: _number(value, key, "energy") for key, value in data.items()}
    return EnergyModelConfig(**values)


def _parse_estimator(data: Dict) -> EstimatorConfig:
    _check_keys(data, {'match_mode', 'tokenizer', 'encoding'}, "estimator")
    values = {}
    if 'match_mode' in data:
        values['match_mode'] = _enum(data['match_mode'], MatchMode, 'match_mode', "estimator")
    if 'tokenizer' in data:
        values['tokenizer'] = _enum(data['tokenizer'], TokenizerMethod, 'tokenizer', "estimator")
    if 'encoding' in data:
        values['encoding'] = _string(data['encoding'], 'encoding', "estimator")
    return EstimatorConfig(**values)


def _parse_storage(data: Dict) -> StorageConfig:
    _check_keys(data, {'db_path'}, "storage")
    if 'db_path' not in data:
        return StorageConfig()
    db_path = _string(data['db_path'], 'db_path', "storage")
    return StorageConfig(db_path=str(Path(db_path).expanduser()))


def _parse_aggregation(data: Dict) -> AggregationConfig:
    _check_keys(data, {'server_url', 'timeout_seconds', 'user_id'}, "aggregation")
    values = {}
    if 'server_url' in data:
        values['server_url'] = _string(data['server_url'], 'server_url', "aggregation")
    if 'timeout_seconds' in data:
        values['timeout_seconds'] = _number(data['timeout_seconds'], 'timeout_seconds', "aggregation")
    if data.get('user_id') is not None:
        values['user_id'] = _string(data['user_id'], 'user_id', "aggregation")
    return AggregationConfig(**values)
