"""Core utilities, configuration and constants for heat-load calculations."""

from heatload.core.config import (
    # Config dataclasses
    SystemDesign,
    ComfortBounds,
    VentilationRates,
    DesignConfig,
    # Config utilities
    load_config,
    save_config,
    create_design_config,
    get_default_config,
)
from heatload.core.coercion import coerce_number, coerce_int, coerce_text
from heatload.core.constants import (
    # Conversion factors
    BTU_PER_WATT,
    KW_TO_BTU,
    BTU_PER_TON,
    # Psychrometrics
    SENSIBLE_FACTOR,
    LATENT_FACTOR,
    # People loads
    PEOPLE_SENSIBLE_SEATED,
    PEOPLE_LATENT_SEATED,
    # Ventilation
    VENT_PEOPLE_CFM,
    VENT_AREA_CFM,
    # System design defaults
    DEFAULT_SAFETY_FACTOR_PCT,
    DEFAULT_BYPASS_FACTOR,
    DEFAULT_ADP,
    DEFAULT_FAN_HEAT_PCT,
    # Comfort zone
    COMFORT_DB_MIN,
    COMFORT_DB_MAX,
    COMFORT_RH_MAX,
)

__all__ = [
    # Config dataclasses
    "SystemDesign",
    "ComfortBounds",
    "VentilationRates",
    "DesignConfig",
    # Config utilities
    "load_config",
    "save_config",
    "create_design_config",
    "get_default_config",
    # Coercion
    "coerce_number",
    "coerce_int",
    "coerce_text",
    # Conversion factors
    "BTU_PER_WATT",
    "KW_TO_BTU",
    "BTU_PER_TON",
    # Psychrometrics
    "SENSIBLE_FACTOR",
    "LATENT_FACTOR",
    # People loads
    "PEOPLE_SENSIBLE_SEATED",
    "PEOPLE_LATENT_SEATED",
    # Ventilation
    "VENT_PEOPLE_CFM",
    "VENT_AREA_CFM",
    # System design defaults
    "DEFAULT_SAFETY_FACTOR_PCT",
    "DEFAULT_BYPASS_FACTOR",
    "DEFAULT_ADP",
    "DEFAULT_FAN_HEAT_PCT",
    # Comfort zone
    "COMFORT_DB_MIN",
    "COMFORT_DB_MAX",
    "COMFORT_RH_MAX",
]
