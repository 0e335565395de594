"""State transition engine: commands, the pure reducer and the session container."""

from heatload.engine.commands import (
    AddAhu,
    AddElementRow,
    AddOpening,
    Command,
    DeleteAhu,
    DeleteElementRow,
    DeleteOpening,
    ResetProject,
    UpdateAhu,
    UpdateAmbient,
    UpdateClimate,
    UpdateElementRow,
    UpdateInfiltration,
    UpdateInternalLoads,
    UpdateOpening,
    UpdateProject,
    UpdateRoom,
    UpdateSystemDesign,
)
from heatload.engine.reducer import Rejection, TransitionResult, apply, dispatch
from heatload.engine.session import ProjectSession

__all__ = [
    # Commands
    "AddAhu",
    "AddElementRow",
    "AddOpening",
    "Command",
    "DeleteAhu",
    "DeleteElementRow",
    "DeleteOpening",
    "ResetProject",
    "UpdateAhu",
    "UpdateAmbient",
    "UpdateClimate",
    "UpdateElementRow",
    "UpdateInfiltration",
    "UpdateInternalLoads",
    "UpdateOpening",
    "UpdateProject",
    "UpdateRoom",
    "UpdateSystemDesign",
    # Reducer
    "Rejection",
    "TransitionResult",
    "apply",
    "dispatch",
    "ProjectSession",
]
