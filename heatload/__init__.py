"""HVAC heat-load and AHU sizing calculations following ASHRAE formulas."""

from heatload.engine import ProjectSession, Rejection, apply, dispatch
from heatload.metrics import aggregate_infiltration, envelope_totals, is_comfortable, size_system
from heatload.model import ProjectState, default_project_state

__version__ = "0.1.0"

__all__ = [
    "ProjectSession",
    "ProjectState",
    "Rejection",
    "aggregate_infiltration",
    "apply",
    "default_project_state",
    "dispatch",
    "envelope_totals",
    "is_comfortable",
    "size_system",
]
