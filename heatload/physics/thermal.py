"""
Thermal calculations for heat-load estimation.

This module provides the fundamental ASHRAE heat transfer formulas used by
the derived metrics engine. All calculations use consistent units:
- Temperature: °F
- Humidity ratio: grains of moisture per lb of dry air
- Airflow: CFM (cubic feet per minute)
- Heat: BTU/hr
- Power: kW / W

Usage:
    from heatload.physics.thermal import calculate_sensible_heat, calculate_latent_heat

    sensible = calculate_sensible_heat(cfm=100, delta_t=30)
    latent = calculate_latent_heat(cfm=100, delta_gr=35)
"""

import math

from heatload.core.constants import (
    BTU_PER_TON,
    BTU_PER_WATT,
    KW_TO_BTU,
    LATENT_FACTOR,
    SENSIBLE_FACTOR,
)


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to the nearest value, with ties going towards positive infinity.

    Python's built-in round() uses banker's rounding; load tables are
    conventionally rounded half-up, so every rounded quantity in the engine
    goes through here.

    Args:
        value: Number to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value (a float; callers cast to int for whole numbers), or
        0.0 if the value overflows to infinity or is NaN

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
    """
    scale = 10**digits
    scaled = value * scale + 0.5
    if not math.isfinite(scaled):
        return 0.0
    return math.floor(scaled) / scale


def round_up(value: float) -> int:
    """
    Round up to a whole number, as airflow figures are.

    Args:
        value: Number to round

    Returns:
        The ceiling as an int, or 0 if the value is infinite or NaN
    """
    if not math.isfinite(value):
        return 0
    return math.ceil(value)


def calculate_envelope_gain(area: float, u_value: float, delta_t: float) -> float:
    """
    Calculate conduction heat gain through an envelope element.

    Uses the formula: Q = U × A × CLTD

    Args:
        area: Element area in ft²
        u_value: Overall heat transfer coefficient in BTU/hr·ft²·°F
        delta_t: Temperature difference (or CLTD) in °F

    Returns:
        Heat gain in BTU/hr
    """
    return area * u_value * delta_t


def calculate_sensible_heat(cfm: float, delta_t: float) -> float:
    """
    Calculate sensible heat carried by an airstream.

    Uses the standard air formula: Qs = 1.08 × CFM × ΔT
    where 1.08 = 0.075 lb/ft³ × 0.24 BTU/lb·°F × 60 min/hr

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        delta_t: Dry-bulb temperature difference in °F

    Returns:
        Sensible heat in BTU/hr

    Example:
        >>> calculate_sensible_heat(100, 30)
        3240.0
    """
    return SENSIBLE_FACTOR * cfm * delta_t


def calculate_latent_heat(cfm: float, delta_gr: float) -> float:
    """
    Calculate latent heat carried by an airstream.

    Uses the standard air formula: Ql = 0.68 × CFM × ΔGr

    Args:
        cfm: Volumetric air flow in cubic feet per minute
        delta_gr: Humidity ratio difference in grains/lb

    Returns:
        Latent heat in BTU/hr
    """
    return LATENT_FACTOR * cfm * delta_gr


def calculate_airflow_for_sensible(sensible_btu: float, delta_t: float) -> float:
    """
    Calculate the airflow needed to carry a sensible load.

    Inverse of the sensible heat equation: CFM = Qs / (1.08 × ΔT)

    Args:
        sensible_btu: Sensible load in BTU/hr
        delta_t: Supply temperature difference in °F

    Returns:
        Airflow in CFM, or 0.0 when delta_t is zero or negative
    """
    if delta_t <= 0:
        return 0.0
    return sensible_btu / (SENSIBLE_FACTOR * delta_t)


def calculate_air_change_airflow(volume: float, air_changes: float) -> float:
    """
    Convert an air change rate into airflow.

    CFM = volume × ACH / 60

    Args:
        volume: Room volume in ft³
        air_changes: Air changes per hour

    Returns:
        Airflow in CFM
    """
    return volume * air_changes / 60


def convert_kw_to_btu(kw: float) -> float:
    """
    Convert kilowatts to BTU/hr.

    Args:
        kw: Power in kilowatts

    Returns:
        Power in BTU/hr
    """
    return kw * KW_TO_BTU


def convert_watts_to_btu(watts: float) -> float:
    """
    Convert watts to BTU/hr.

    Args:
        watts: Power in watts

    Returns:
        Power in BTU/hr
    """
    return watts * BTU_PER_WATT


def convert_btu_to_tons(btu: float) -> float:
    """
    Convert BTU/hr to tons of refrigeration.

    Args:
        btu: Heat rate in BTU/hr

    Returns:
        Capacity in tons
    """
    return btu / BTU_PER_TON
