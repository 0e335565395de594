"""Derived metrics computed from the project state."""

from heatload.metrics.climate import ClimateDifference, climate_differences, is_comfortable
from heatload.metrics.envelope import (
    InternalLoadBreakdown,
    SeasonalTotals,
    element_heat_gain,
    envelope_totals,
    internal_load_breakdown,
)
from heatload.metrics.infiltration import InfiltrationTotals, aggregate_infiltration
from heatload.metrics.sizing import SizingResult, size_system
from heatload.metrics.ventilation import (
    CleanroomAirflow,
    VentilationResult,
    cleanroom_airflow,
    min_air_change_cfm,
    ventilation_requirement,
)

__all__ = [
    "ClimateDifference",
    "climate_differences",
    "is_comfortable",
    "InternalLoadBreakdown",
    "SeasonalTotals",
    "element_heat_gain",
    "envelope_totals",
    "internal_load_breakdown",
    "InfiltrationTotals",
    "aggregate_infiltration",
    "SizingResult",
    "size_system",
    "CleanroomAirflow",
    "VentilationResult",
    "cleanroom_airflow",
    "min_air_change_cfm",
    "ventilation_requirement",
]
