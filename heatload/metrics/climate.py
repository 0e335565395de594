"""Comfort zone check and outside/inside design differences."""

from dataclasses import dataclass
from typing import Dict, Optional

from heatload.core.coercion import coerce_number
from heatload.core.config import ComfortBounds
from heatload.model.enums import Season
from heatload.model.state import Climate, InsideCondition


@dataclass(frozen=True)
class ClimateDifference:
    """Outside minus inside condition for one season."""

    db: float  # °F
    gr: float  # grains/lb


def is_comfortable(inside: InsideCondition, bounds: Optional[ComfortBounds] = None) -> bool:
    """
    Check the inside design condition against the ASHRAE 55 comfort zone.

    Args:
        inside: Inside design condition
        bounds: Comfort limits; ASHRAE 55 summer defaults when omitted

    Returns:
        True if the dry bulb is within [db_min, db_max] and RH ≤ rh_max
    """
    bounds = bounds or ComfortBounds()
    db = coerce_number(inside.db)
    rh = coerce_number(inside.rh)
    return bounds.db_min <= db <= bounds.db_max and rh <= bounds.rh_max


def climate_differences(climate: Climate) -> Dict[Season, ClimateDifference]:
    """
    Calculate outside minus inside dry bulb and humidity ratio per season.

    Args:
        climate: Outside and inside design conditions

    Returns:
        Mapping of season to ClimateDifference
    """
    inside = climate.inside
    differences = {}
    for season in Season:
        outside = climate.outside.for_season(season)
        differences[season] = ClimateDifference(
            db=coerce_number(outside.db) - coerce_number(inside.db),
            gr=coerce_number(outside.gr) - coerce_number(inside.gr),
        )
    return differences
