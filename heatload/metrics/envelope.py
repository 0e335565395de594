"""
Envelope and internal heat gain totals.

Seasonal room sensible heat for the heat gain table: conduction through
every envelope category plus people, lighting and equipment, which are the
same in every season.
"""

from dataclasses import dataclass

from heatload.core.coercion import coerce_number
from heatload.model.enums import ElementCategory, Season
from heatload.model.state import Elements, EnvelopeElement, InternalLoads
from heatload.physics.thermal import (
    calculate_envelope_gain,
    convert_kw_to_btu,
    convert_watts_to_btu,
    round_half_up,
)


@dataclass(frozen=True)
class SeasonalTotals:
    """Whole BTU/hr per design season."""

    summer: int
    monsoon: int
    winter: int

    def get(self, season: Season) -> int:
        return getattr(self, season.value)


@dataclass(frozen=True)
class InternalLoadBreakdown:
    """Rounded BTU/hr contributions of each internal load."""

    people_sensible: int
    people_latent: int
    lights: int
    equipment: int


def _element_gain(element: EnvelopeElement, season: Season) -> float:
    return calculate_envelope_gain(
        coerce_number(element.area),
        coerce_number(element.u_value),
        coerce_number(element.diff.get(season)),
    )


def element_heat_gain(element: EnvelopeElement, season: Season) -> int:
    """
    Heat gain through a single envelope row for one season.

    Args:
        element: Envelope row
        season: Design season

    Returns:
        Q = A × U × CLTD, rounded to whole BTU/hr
    """
    return int(round_half_up(_element_gain(element, season)))


def envelope_totals(elements: Elements, internal_loads: InternalLoads, floor_area: float) -> SeasonalTotals:
    """
    Calculate seasonal sensible heat gain totals.

    Sums A × U × CLTD[season] over every row of every category (partitions
    included), then adds people sensible, lighting and equipment once to
    each season. Each season is rounded only at the end.

    Args:
        elements: Envelope rows by category
        internal_loads: People, equipment and lighting loads
        floor_area: Room floor area in ft² (for lighting)

    Returns:
        SeasonalTotals in whole BTU/hr
    """
    totals = {season: 0.0 for season in Season}

    for category in ElementCategory:
        for element in elements.for_category(category):
            for season in Season:
                totals[season] += _element_gain(element, season)

    people = internal_loads.people
    people_btu = coerce_number(people.count) * coerce_number(people.sensible_per_person)
    lights_btu = convert_watts_to_btu(
        coerce_number(floor_area) * coerce_number(internal_loads.lights.watts_per_sq_ft)
    )
    equipment_btu = convert_kw_to_btu(coerce_number(internal_loads.equipment.kw))

    for season in Season:
        totals[season] += people_btu
        totals[season] += lights_btu
        totals[season] += equipment_btu

    return SeasonalTotals(**{season.value: int(round_half_up(total)) for season, total in totals.items()})


def internal_load_breakdown(internal_loads: InternalLoads, floor_area: float) -> InternalLoadBreakdown:
    """
    Break internal loads down into their rounded BTU/hr contributions.

    Args:
        internal_loads: People, equipment and lighting loads
        floor_area: Room floor area in ft²

    Returns:
        InternalLoadBreakdown
    """
    people = internal_loads.people
    count = coerce_number(people.count)
    lights_watts = coerce_number(floor_area) * coerce_number(internal_loads.lights.watts_per_sq_ft)
    return InternalLoadBreakdown(
        people_sensible=int(round_half_up(count * coerce_number(people.sensible_per_person))),
        people_latent=int(round_half_up(count * coerce_number(people.latent_per_person))),
        lights=int(round_half_up(convert_watts_to_btu(lights_watts))),
        equipment=int(round_half_up(convert_kw_to_btu(coerce_number(internal_loads.equipment.kw)))),
    )
