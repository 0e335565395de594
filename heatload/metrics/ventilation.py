"""
Outdoor air and air change requirements.

Ventilation follows the ASHRAE 62.1 ventilation rate procedure for the
breathing zone:

    Vbz = Rp × Pz + Ra × Az

where Rp is CFM per person, Pz the number of people, Ra CFM per ft² and Az
the floor area in ft². Cleanroom airflow follows from the air change band
of the room's ISO class.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from heatload.core.coercion import coerce_number
from heatload.core.config import VentilationRates
from heatload.core.constants import ISO_CLASSES
from heatload.model.state import Room
from heatload.physics.thermal import calculate_air_change_airflow, round_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VentilationResult:
    """Breathing zone outdoor airflow."""

    cfm_people: float
    cfm_area: float
    total_cfm: int
    formula: str


@dataclass(frozen=True)
class CleanroomAirflow:
    """Supply airflow band implied by an ISO class air change range."""

    iso_class: str
    ach_min: float
    ach_max: float
    cfm_min: float
    cfm_max: float


def ventilation_requirement(
    floor_area: float, people_count: float, rates: Optional[VentilationRates] = None
) -> VentilationResult:
    """
    Calculate the breathing zone outdoor airflow (fresh air).

    Args:
        floor_area: Floor area in ft²
        people_count: Number of occupants
        rates: Rp/Ra rates; ASHRAE 62.1 office defaults when omitted

    Returns:
        VentilationResult with the total rounded up to whole CFM

    Example:
        >>> ventilation_requirement(150, 4).total_cfm
        29
    """
    rates = rates or VentilationRates()
    area = coerce_number(floor_area)
    people = coerce_number(people_count)

    cfm_people = rates.people_cfm * people
    cfm_area = rates.area_cfm * area
    total_cfm = round_up(cfm_people + cfm_area)

    formula = f"({rates.people_cfm:g} × {people:g}p) + ({rates.area_cfm:g} × {area:g}ft²) = {total_cfm} CFM"
    return VentilationResult(
        cfm_people=cfm_people,
        cfm_area=cfm_area,
        total_cfm=total_cfm,
        formula=formula,
    )


def min_air_change_cfm(room: Room) -> float:
    """Airflow needed to meet the room's minimum air changes per hour."""
    return calculate_air_change_airflow(coerce_number(room.volume), coerce_number(room.min_air_changes))


def cleanroom_airflow(room: Room, iso_class: str) -> Optional[CleanroomAirflow]:
    """
    Calculate the supply airflow band for a cleanroom class.

    Args:
        room: Room whose volume is conditioned
        iso_class: Key of the ISO class table (e.g. "ISO 7")

    Returns:
        CleanroomAirflow, or None if the class has no air change band
    """
    standard = ISO_CLASSES.get(iso_class)
    if standard is None:
        logger.debug("No air change band for cleanroom class %r", iso_class)
        return None

    volume = coerce_number(room.volume)
    ach_min = float(standard["ach_min"])
    ach_max = float(standard["ach_max"])
    return CleanroomAirflow(
        iso_class=iso_class,
        ach_min=ach_min,
        ach_max=ach_max,
        cfm_min=calculate_air_change_airflow(volume, ach_min),
        cfm_max=calculate_air_change_airflow(volume, ach_max),
    )
