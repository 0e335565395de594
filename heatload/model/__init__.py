"""Project state model: enums, immutable records and the default document."""

from heatload.model.enums import (
    ClimateTarget,
    ElementCategory,
    LoadKind,
    OpeningType,
    PressureRegime,
    Season,
)
from heatload.model.records import assign_ids, build_record, merge_fields
from heatload.model.state import (
    AhuConfiguration,
    Ambient,
    Climate,
    Elements,
    EnvelopeElement,
    Equipment,
    Infiltration,
    InsideCondition,
    InternalLoads,
    Lights,
    Opening,
    OutsideCondition,
    OutsideConditions,
    People,
    ProjectInfo,
    ProjectState,
    Room,
    SeasonalValues,
    default_project_state,
)

__all__ = [
    # Enums
    "ClimateTarget",
    "ElementCategory",
    "LoadKind",
    "OpeningType",
    "PressureRegime",
    "Season",
    # Records
    "AhuConfiguration",
    "Ambient",
    "Climate",
    "Elements",
    "EnvelopeElement",
    "Equipment",
    "Infiltration",
    "InsideCondition",
    "InternalLoads",
    "Lights",
    "Opening",
    "OutsideCondition",
    "OutsideConditions",
    "People",
    "ProjectInfo",
    "ProjectState",
    "Room",
    "SeasonalValues",
    # Helpers
    "assign_ids",
    "build_record",
    "merge_fields",
    "default_project_state",
]
