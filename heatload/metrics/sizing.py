"""
System sizing: effective room heat, dehumidified airflow and tonnage.

Sizing is a design-day calculation using the summer column of the envelope
table. Steps, in order:

1. Room sensible heat: A × U × CLTD(summer) over glass, walls, roof,
   ceiling and floor, plus people, equipment and lighting
2. Infiltration sensible: 1.08 × CFM × (DB_out - DB_in)
3. ERSH = sensible × (1 + safety/100)
4. Room latent heat: people latent plus 0.68 × CFM × (Gr_out - Gr_in)
5. ERLH = latent × (1 + safety/100)
6. ESHF = ERSH / (ERSH + ERLH)
7. Dehumidified rise = (1 - BF) × (DB_in - ADP)
8. Dehumidified CFM = ERSH / (1.08 × rise)
9. Grand total heat = (ERSH + ERLH) × (1 + fan heat/100)
10. Tonnage = grand total / 12000
11. Supply air = dehumidified CFM × 1.05
12. Fresh air per ASHRAE 62.1

Partitions appear in the seasonal heat gain table but are not part of the
sizing sum.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from heatload.core.coercion import coerce_number
from heatload.core.config import SystemDesign, VentilationRates, create_system_design
from heatload.core.constants import (
    DUCT_LEAKAGE_ALLOWANCE,
    PEOPLE_LATENT_SEATED,
    PEOPLE_SENSIBLE_SEATED,
)
from heatload.metrics.ventilation import ventilation_requirement
from heatload.model.enums import ElementCategory, Season
from heatload.model.state import ProjectState
from heatload.physics.thermal import (
    calculate_airflow_for_sensible,
    calculate_envelope_gain,
    calculate_latent_heat,
    calculate_sensible_heat,
    convert_btu_to_tons,
    convert_kw_to_btu,
    convert_watts_to_btu,
    round_half_up,
    round_up,
)

logger = logging.getLogger(__name__)

SIZING_CATEGORIES = (
    ElementCategory.GLASS,
    ElementCategory.WALLS,
    ElementCategory.ROOF,
    ElementCategory.CEILING,
    ElementCategory.FLOOR,
)


@dataclass(frozen=True)
class SizingResult:
    """Final system sizing figures."""

    ersh: int  # BTU/hr
    erlh: int  # BTU/hr
    eshf: float  # 3 decimal places
    rise: float  # °F, 2 decimal places
    deh_cfm: int
    grand_total: int  # BTU/hr
    tonnage: float  # tons, 2 decimal places
    supply_air: int  # CFM
    fresh_air: int  # CFM
    # Unrounded breakdown
    room_sensible: float
    room_latent: float
    infiltration_sensible: float
    infiltration_latent: float
    # False when ADP/bypass leave no positive rise; deh_cfm is then 0 by guard
    is_configured: bool


def size_system(
    state: ProjectState,
    tuning: Optional[Union[SystemDesign, Mapping[str, Any]]] = None,
    rates: Optional[VentilationRates] = None,
) -> SizingResult:
    """
    Size the air handling system for a project.

    Args:
        state: Project state document
        tuning: Safety factor, bypass factor, ADP and fan heat; a mapping is
            filled in with the ASHRAE defaults, and None uses the project's
            stored system design
        rates: Ventilation rates for the fresh air figure

    Returns:
        SizingResult
    """
    if tuning is None:
        tuning = state.system_design
    elif not isinstance(tuning, SystemDesign):
        tuning = create_system_design(tuning)

    elements = state.elements
    loads = state.internal_loads
    climate = state.climate
    floor_area = coerce_number(state.room.floor_area)

    # 1. Room sensible heat
    sensible = 0.0
    for category in SIZING_CATEGORIES:
        for element in elements.for_category(category):
            sensible += calculate_envelope_gain(
                coerce_number(element.area),
                coerce_number(element.u_value),
                coerce_number(element.diff.get(Season.SUMMER)),
            )

    people_count = coerce_number(loads.people.count)
    sensible_per_person = coerce_number(loads.people.sensible_per_person) or PEOPLE_SENSIBLE_SEATED
    latent_per_person = coerce_number(loads.people.latent_per_person) or PEOPLE_LATENT_SEATED

    sensible += people_count * sensible_per_person
    sensible += convert_kw_to_btu(coerce_number(loads.equipment.kw))
    sensible += convert_watts_to_btu(coerce_number(loads.lights.watts_per_sq_ft) * floor_area)

    # 2. Infiltration sensible, from the stored aggregate airflow
    infil_cfm = coerce_number(state.infiltration.cfm)
    outside = climate.outside.summer
    inside = climate.inside
    delta_t = coerce_number(outside.db) - coerce_number(inside.db)
    infiltration_sensible = calculate_sensible_heat(infil_cfm, delta_t)
    sensible += infiltration_sensible

    # 3. ERSH
    safety_mult = 1 + coerce_number(tuning.safety_factor) / 100
    ersh = sensible * safety_mult

    # 4-5. Room latent heat and ERLH
    latent = people_count * latent_per_person
    delta_gr = coerce_number(outside.gr) - coerce_number(inside.gr)
    infiltration_latent = calculate_latent_heat(infil_cfm, delta_gr)
    latent += infiltration_latent
    erlh = latent * safety_mult

    # 6. ESHF
    total_room_heat = ersh + erlh
    eshf = ersh / total_room_heat if total_room_heat > 0 else 1.0

    # 7-8. Dehumidified rise and airflow
    bypass_factor = coerce_number(tuning.bypass_factor)
    rise = (1 - bypass_factor) * (coerce_number(inside.db) - coerce_number(tuning.adp))
    if rise > 0:
        deh_cfm = round_up(calculate_airflow_for_sensible(ersh, rise))
    else:
        logger.debug("Dehumidified rise %.2f °F is not positive; dehumidified CFM set to 0", rise)
        deh_cfm = 0

    # 9-10. Grand total heat and tonnage
    grand_total = total_room_heat * (1 + coerce_number(tuning.fan_heat) / 100)
    tonnage = convert_btu_to_tons(grand_total)

    # 11-12. Supply and fresh air
    supply_air = round_up(deh_cfm * DUCT_LEAKAGE_ALLOWANCE)
    fresh_air = ventilation_requirement(floor_area, people_count, rates).total_cfm

    return SizingResult(
        ersh=int(round_half_up(ersh)),
        erlh=int(round_half_up(erlh)),
        eshf=round_half_up(eshf, 3),
        rise=round_half_up(rise, 2),
        deh_cfm=int(deh_cfm),
        grand_total=int(round_half_up(grand_total)),
        tonnage=round_half_up(tonnage, 2),
        supply_air=int(supply_air),
        fresh_air=fresh_air,
        room_sensible=sensible,
        room_latent=latent,
        infiltration_sensible=infiltration_sensible,
        infiltration_latent=infiltration_latent,
        is_configured=rise > 0,
    )
