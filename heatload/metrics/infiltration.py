"""Infiltration and exfiltration airflow totals across leakage openings."""

from dataclasses import dataclass
from typing import Iterable

from heatload.core.coercion import coerce_number
from heatload.model.state import Opening


@dataclass(frozen=True)
class InfiltrationTotals:
    """Summed airflow through all openings, in CFM."""

    total_infil_cfm: float
    total_exfil_cfm: float


def aggregate_infiltration(doors: Iterable[Opening]) -> InfiltrationTotals:
    """
    Sum infiltration and exfiltration CFM across openings.

    Non-numeric airflow values count as 0. ``total_infil_cfm`` is the value
    stored back into ``Infiltration.cfm`` for system sizing.

    Args:
        doors: Opening records

    Returns:
        InfiltrationTotals
    """
    infil = 0.0
    exfil = 0.0
    for door in doors:
        infil += coerce_number(door.infil_cfm)
        exfil += coerce_number(door.exfil_cfm)
    return InfiltrationTotals(total_infil_cfm=infil, total_exfil_cfm=exfil)
