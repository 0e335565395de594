"""
Configuration management for heat-load calculations.

This module provides typed configuration dataclasses for the design
parameters that tune the calculation engine, with support for loading from
YAML or JSON files.

Usage:
    from heatload.core.config import (
        SystemDesign,
        ComfortBounds,
        VentilationRates,
        DesignConfig,
        load_config,
    )

    # Load from file
    config = create_design_config(load_config("design.yaml"))

    # Or use defaults
    tuning = SystemDesign(safety_factor=15.0)
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import json
import logging

import yaml

from heatload.core.coercion import coerce_number
from heatload.core.constants import (
    COMFORT_DB_MAX,
    COMFORT_DB_MIN,
    COMFORT_RH_MAX,
    DEFAULT_ADP,
    DEFAULT_BYPASS_FACTOR,
    DEFAULT_FAN_HEAT_PCT,
    DEFAULT_SAFETY_FACTOR_PCT,
    VENT_AREA_CFM,
    VENT_PEOPLE_CFM,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemDesign:
    """Tuning parameters for system sizing."""

    safety_factor: float = DEFAULT_SAFETY_FACTOR_PCT  # %
    bypass_factor: float = DEFAULT_BYPASS_FACTOR  # 0-1
    adp: float = DEFAULT_ADP  # °F apparatus dew point
    fan_heat: float = DEFAULT_FAN_HEAT_PCT  # %


@dataclass(frozen=True)
class ComfortBounds:
    """ASHRAE 55 comfort zone limits for the inside design condition."""

    db_min: float = COMFORT_DB_MIN  # °F
    db_max: float = COMFORT_DB_MAX  # °F
    rh_max: float = COMFORT_RH_MAX  # %


@dataclass(frozen=True)
class VentilationRates:
    """ASHRAE 62.1 ventilation rate procedure outdoor air rates."""

    people_cfm: float = VENT_PEOPLE_CFM  # Rp, CFM/person
    area_cfm: float = VENT_AREA_CFM  # Ra, CFM/ft²


@dataclass(frozen=True)
class DesignConfig:
    """Complete design configuration."""

    system_design: SystemDesign = field(default_factory=SystemDesign)
    comfort: ComfortBounds = field(default_factory=ComfortBounds)
    ventilation: VentilationRates = field(default_factory=VentilationRates)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
        elif path.suffix == ".json":
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def save_config(config: Mapping[str, Any], path: Union[str, Path]) -> None:
    """
    Save configuration to a YAML or JSON file.

    Args:
        config: Configuration dictionary
        path: Path to save the file

    Raises:
        ValueError: If the file format is not supported
    """
    path = Path(path)

    if path.suffix not in (".yaml", ".yml", ".json"):
        raise ValueError(f"Unsupported config file format: {path.suffix}")

    with open(path, "w") as f:
        if path.suffix == ".json":
            json.dump(dict(config), f, indent=2)
        else:
            yaml.safe_dump(dict(config), f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: Any) -> Dict[str, Any]:
    """
    Convert a dataclass config to a dictionary.

    Args:
        config: A dataclass instance

    Returns:
        Dictionary representation
    """
    return asdict(config)


def _numeric_dataclass(cls, data: Optional[Mapping[str, Any]]):
    """Build a dataclass of float fields from a mapping, ignoring unknown keys."""
    if not data:
        return cls()
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        logger.warning("Ignoring unknown %s keys: %s", cls.__name__, sorted(unknown))
    return cls(**{key: coerce_number(value) for key, value in data.items() if key in known})


def create_system_design(data: Optional[Mapping[str, Any]]) -> SystemDesign:
    """Create a SystemDesign from a dictionary; absent keys keep the ASHRAE defaults."""
    return _numeric_dataclass(SystemDesign, data)


def create_comfort_bounds(data: Optional[Mapping[str, Any]]) -> ComfortBounds:
    """Create ComfortBounds from a dictionary."""
    return _numeric_dataclass(ComfortBounds, data)


def create_ventilation_rates(data: Optional[Mapping[str, Any]]) -> VentilationRates:
    """Create VentilationRates from a dictionary."""
    return _numeric_dataclass(VentilationRates, data)


def create_design_config(data: Optional[Mapping[str, Any]]) -> DesignConfig:
    """Create a DesignConfig from a dictionary."""
    data = data or {}
    return DesignConfig(
        system_design=create_system_design(data.get("system_design")),
        comfort=create_comfort_bounds(data.get("comfort")),
        ventilation=create_ventilation_rates(data.get("ventilation")),
    )


def get_default_config() -> DesignConfig:
    """Get the default ASHRAE design configuration."""
    return DesignConfig(
        system_design=SystemDesign(),
        comfort=ComfortBounds(),
        ventilation=VentilationRates(),
    )
