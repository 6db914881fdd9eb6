"""
Configuration management for PyHermite.

This module provides:
- SplineConfig: Typed configuration dataclass
- ConfigManager: Central configuration management with environment support
- create_default_config: Default configuration as a dictionary
- get_config / init_config: Process-wide configuration used by splines built without one
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from pyhermite.exceptions import ConfigNotFoundError, ConfigValidationError

ZERO_VELOCITY_POLICIES = ("propagate", "zero", "raise")


# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class ConstructionConfig:
    """Spline construction settings."""

    # Tangent magnitude at both endpoints of a pose-built spline, as a
    # multiple of the distance between the two poses.
    pose_tangent_scale: float = 1.2

    def validate(self) -> None:
        if self.pose_tangent_scale <= 0:
            raise ConfigValidationError(
                "construction.pose_tangent_scale", "must be > 0", self.pose_tangent_scale
            )


@dataclass
class EvaluationConfig:
    """Spline evaluation settings."""

    cache_enabled: bool = True
    zero_velocity: str = "propagate"

    def validate(self) -> None:
        if not isinstance(self.cache_enabled, bool):
            raise ConfigValidationError(
                "evaluation.cache_enabled", "must be a boolean", self.cache_enabled
            )
        if self.zero_velocity not in ZERO_VELOCITY_POLICIES:
            raise ConfigValidationError(
                "evaluation.zero_velocity",
                f"must be one of {ZERO_VELOCITY_POLICIES}",
                self.zero_velocity,
            )


@dataclass
class CostConfig:
    """Curvature-derivative cost settings."""

    num_samples: int = 100
    sensitivity_step: float = 1e-3

    def validate(self) -> None:
        if self.num_samples < 1:
            raise ConfigValidationError("cost.num_samples", "must be >= 1", self.num_samples)
        if self.sensitivity_step <= 0:
            raise ConfigValidationError(
                "cost.sensitivity_step", "must be > 0", self.sensitivity_step
            )


@dataclass
class SplineConfig:
    """Complete PyHermite configuration."""

    construction: ConstructionConfig = field(default_factory=ConstructionConfig)
    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    cost: CostConfig = field(default_factory=CostConfig)

    def validate(self) -> None:
        """Validate all configuration settings."""
        self.construction.validate()
        self.evaluation.validate()
        self.cost.validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "construction": {
                "pose_tangent_scale": self.construction.pose_tangent_scale,
            },
            "evaluation": {
                "cache_enabled": self.evaluation.cache_enabled,
                "zero_velocity": self.evaluation.zero_velocity,
            },
            "cost": {
                "num_samples": self.cost.num_samples,
                "sensitivity_step": self.cost.sensitivity_step,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SplineConfig":
        """Create SplineConfig from dictionary."""
        construction_data = data.get("construction", {})
        evaluation_data = data.get("evaluation", {})
        cost_data = data.get("cost", {})

        return cls(
            construction=ConstructionConfig(
                pose_tangent_scale=float(construction_data.get("pose_tangent_scale", 1.2)),
            ),
            evaluation=EvaluationConfig(
                cache_enabled=_as_bool(evaluation_data.get("cache_enabled", True)),
                zero_velocity=str(evaluation_data.get("zero_velocity", "propagate")),
            ),
            cost=CostConfig(
                num_samples=int(cost_data.get("num_samples", 100)),
                sensitivity_step=float(cost_data.get("sensitivity_step", 1e-3)),
            ),
        )


# =============================================================================
# Loading
# =============================================================================


def parse_scalar(value: str) -> Any:
    """Turn a string from the environment (or a quoted YAML value) into bool, int, float or str."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            pass
    return value


def _as_bool(value: Any) -> Any:
    # Non-boolean leftovers are reported by EvaluationConfig.validate.
    return parse_scalar(value) if isinstance(value, str) else value


def _merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``update`` into ``base`` in place."""
    for key, value in update.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigManager:
    """Builds a SplineConfig from layered sources, later ones winning:

    1. defaults
    2. the YAML file given at construction, if any
    3. environment variables PYHERMITE_<SECTION>_<KEY>,
       e.g. PYHERMITE_COST_NUM_SAMPLES=200

    Variables whose section is unknown (such as PYHERMITE_LOG_LEVEL) are
    left to their own consumers.
    """

    ENV_PREFIX = "PYHERMITE_"

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[SplineConfig] = None

    def load(self, validate: bool = True) -> SplineConfig:
        raw = create_default_config()
        if self.config_path:
            _merge(raw, self._read_file(self.config_path))
        _merge(raw, self._env_overrides(raw))

        config = SplineConfig.from_dict(raw)
        if validate:
            config.validate()
        self._config = config
        return config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigNotFoundError(str(path))
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def _env_overrides(self, sections: Dict[str, Any]) -> Dict[str, Any]:
        overrides: Dict[str, Dict[str, Any]] = {}
        for name, value in os.environ.items():
            if not name.startswith(self.ENV_PREFIX):
                continue
            section, _, key = name[len(self.ENV_PREFIX):].lower().partition("_")
            if key and isinstance(sections.get(section), dict):
                overrides.setdefault(section, {})[key] = parse_scalar(value)
        return overrides

    @property
    def config(self) -> SplineConfig:
        """Loaded configuration, loading on first access."""
        if self._config is None:
            self.load()
        return self._config


# =============================================================================
# Process-wide configuration
# =============================================================================


def create_default_config() -> Dict[str, Any]:
    return SplineConfig().to_dict()


_global_config: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Manager behind splines constructed without an explicit config."""
    global _global_config
    if _global_config is None:
        _global_config = ConfigManager()
    return _global_config


def init_config(path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Replace the process-wide configuration, loading it from ``path``."""
    global _global_config
    manager = ConfigManager(path)
    manager.load()
    _global_config = manager
    return manager
