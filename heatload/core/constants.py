"""
ASHRAE constants and conversion factors for heat-load calculations.

This module centralizes all magic numbers used by the calculation engine.
Values follow the ASHRAE Handbook - Fundamentals (2021) and ASHRAE 55/62.1
unless otherwise noted. All values are Imperial.

Usage:
    from heatload.core.constants import SENSIBLE_FACTOR, LATENT_FACTOR

    sensible = SENSIBLE_FACTOR * cfm * delta_t  # BTU/hr
    latent = LATENT_FACTOR * cfm * delta_gr  # BTU/hr
"""

from typing import Dict, Tuple

# =============================================================================
# Conversion Factors
# =============================================================================

M2_TO_FT2: float = 10.7639  # ft² per m²
BTU_PER_WATT: float = 3.412  # BTU/hr per watt
KW_TO_BTU: float = 3412.0  # BTU/hr per kilowatt
BTU_PER_TON: float = 12000.0  # BTU/hr per ton of refrigeration

# =============================================================================
# Psychrometrics (standard air)
# =============================================================================

SENSIBLE_FACTOR: float = 1.08  # Qs = 1.08 × CFM × ΔT
LATENT_FACTOR: float = 0.68  # Ql = 0.68 × CFM × ΔGr

# =============================================================================
# People Loads (BTU/hr) - Table 1, Ch 18
# =============================================================================

PEOPLE_SENSIBLE_SEATED: float = 245.0
PEOPLE_LATENT_SEATED: float = 205.0

# Lighting power density, office
LPD_OFFICE: float = 1.1  # W/ft²

# =============================================================================
# Ventilation Defaults (ASHRAE 62.1 ventilation rate procedure)
# =============================================================================

VENT_PEOPLE_CFM: float = 5.0  # Rp - CFM per person
VENT_AREA_CFM: float = 0.06  # Ra - CFM per ft²

# =============================================================================
# System Design Defaults
# =============================================================================

DEFAULT_SAFETY_FACTOR_PCT: float = 10.0
DEFAULT_BYPASS_FACTOR: float = 0.10
DEFAULT_ADP: float = 55.0  # °F - apparatus dew point
DEFAULT_FAN_HEAT_PCT: float = 5.0

# Supply air allowance for duct leakage (5%)
DUCT_LEAKAGE_ALLOWANCE: float = 1.05

# =============================================================================
# Comfort Zone (ASHRAE 55-2020, summer)
# =============================================================================

COMFORT_DB_MIN: float = 73.0  # °F
COMFORT_DB_MAX: float = 79.0  # °F
COMFORT_RH_MAX: float = 60.0  # %

# =============================================================================
# Cleanroom Standards (ISO 14644-1 air change bands)
# =============================================================================

ISO_CLASSES: Dict[str, Dict[str, object]] = {
    "ISO 5": {"label": "ISO 5 (Class 100)", "ach_min": 240, "ach_max": 480},
    "ISO 6": {"label": "ISO 6 (Class 1,000)", "ach_min": 150, "ach_max": 240},
    "ISO 7": {"label": "ISO 7 (Class 10,000)", "ach_min": 60, "ach_max": 90},
    "ISO 8": {"label": "ISO 8 (Class 100,000)", "ach_min": 5, "ach_max": 48},
    "CNC": {"label": "CNC (Controlled Not Classified)", "ach_min": 2, "ach_max": 4},
}

# Room pressurization options in inches of water gauge
PRESSURE_OPTIONS: Tuple[Tuple[float, str], ...] = (
    (0.05, "High Positive (+0.05 in.wg)"),
    (0.03, "Standard Positive (+0.03 in.wg)"),
    (-0.03, "Negative (-0.03 in.wg)"),
    (0.0, "Neutral (0.00 in.wg)"),
)

# =============================================================================
# AHU Selection Defaults
# =============================================================================

DEFAULT_ISO_CLASS: str = "ISO 8"
DEFAULT_DESIGN_SCHEME: str = "Conventional Pharma Ducting"
DEFAULT_AHU_CONFIGURATION: str = "Draw-through"

DESIGN_SCHEMES: Tuple[str, ...] = (
    "Conventional Pharma Ducting",
    "Once Through System",
    "Dehumidifier Integration",
    "Plenum / Fan Filter Unit Design",
)

AHU_CONFIGURATIONS: Tuple[str, ...] = (
    "Draw-through",  # fan after coil
    "Blow-through",  # fan before coil
)

# =============================================================================
# Envelope Row Defaults
# =============================================================================

# U-value (BTU/hr·ft²·°F) given to a freshly added envelope row
DEFAULT_U_VALUES: Dict[str, float] = {
    "glass": 0.8,
    "walls": 0.3,
    "roof": 0.2,
    "ceiling": 0.1,
    "floor": 0.1,
}
DEFAULT_U_VALUE: float = 0.5
