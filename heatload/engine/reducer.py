"""
State transition engine.

``dispatch`` takes the current project document and a command and returns a
new document. It never mutates its input and never raises for a
structurally valid command. A command the engine refuses (deleting the last
AHU, addressing a season or category that does not exist, an id that is not
there) leaves the document unchanged and is reported as a ``Rejection`` so
the caller can tell the user.

Usage:
    from heatload.engine.reducer import apply, dispatch
    from heatload.engine.commands import DeleteAhu

    result = dispatch(state, DeleteAhu(id=4))
    if result.rejection is Rejection.MINIMUM_COUNT_VIOLATION:
        ...
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from heatload.core.constants import (
    AHU_CONFIGURATIONS,
    DEFAULT_U_VALUE,
    DEFAULT_U_VALUES,
    DESIGN_SCHEMES,
    ISO_CLASSES,
)
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
from heatload.metrics.infiltration import aggregate_infiltration
from heatload.model.enums import ClimateTarget, ElementCategory, LoadKind, OpeningType, Season
from heatload.model.records import assign_ids, merge_fields
from heatload.model.state import (
    AhuConfiguration,
    EnvelopeElement,
    Infiltration,
    Opening,
    ProjectState,
    Room,
    default_project_state,
)
from heatload.physics.thermal import round_half_up

logger = logging.getLogger(__name__)

# AHU fields restricted to a selection list
_AHU_CHOICES = {
    "iso_class": tuple(ISO_CLASSES),
    "design_scheme": DESIGN_SCHEMES,
    "configuration": AHU_CONFIGURATIONS,
}


class Rejection(Enum):
    """Reason a command left the document unchanged."""

    MINIMUM_COUNT_VIOLATION = "minimum_count_violation"
    INVALID_TARGET = "invalid_target"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class TransitionResult:
    """New document plus the refusal, if the command was refused."""

    state: ProjectState
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def dispatch(state: ProjectState, command: Command) -> TransitionResult:
    """
    Apply a command and report whether it was refused.

    Args:
        state: Current project document
        command: Command to apply

    Returns:
        TransitionResult with the new document (``state`` itself on refusal)
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        logger.debug("Ignoring unknown command %r", command)
        return TransitionResult(state, Rejection.UNKNOWN_COMMAND)
    return handler(state, command)


def apply(state: ProjectState, command: Command) -> ProjectState:
    """Apply a command and return the new project document."""
    return dispatch(state, command).state


# =============================================================================
# Helpers
# =============================================================================


def _reject(state: ProjectState, rejection: Rejection, reason: str, *args: Any) -> TransitionResult:
    logger.warning("Command rejected (%s): " + reason, rejection.value, *args)
    return TransitionResult(state, rejection)


def _as_mapping(fields: Any) -> Mapping[str, Any]:
    if isinstance(fields, Mapping):
        return fields
    logger.debug("Expected a mapping of fields, got %r", fields)
    return {}


def _index_of(records: Tuple[Any, ...], record_id: Any) -> Optional[int]:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None


def _with_fresh_id(record: Any, taken: Tuple[Any, ...], next_id: int) -> Tuple[Any, int]:
    """Keep a caller-supplied id if it is free, otherwise allocate one."""
    (record,), next_id = assign_ids((record,), next_id, {other.id for other in taken})
    return record, next_id


def _with_doors(infiltration: Infiltration, doors: Tuple[Opening, ...]) -> Infiltration:
    """Replace the openings and write the aggregate airflow back atomically."""
    totals = aggregate_infiltration(doors)
    return replace(infiltration, doors=doors, cfm=totals.total_infil_cfm)


def _default_element(category: ElementCategory) -> EnvelopeElement:
    return EnvelopeElement(
        label=f"New {category.value}",
        direction="",
        area=0.0,
        u_value=DEFAULT_U_VALUES.get(category.value, DEFAULT_U_VALUE),
    )


def _default_opening() -> Opening:
    return Opening(
        thru=OpeningType.DOOR,
        nos=1.0,
        area=20.0,  # ft²
        width=3.0,  # ft
        height=7.0,  # ft
        pressure=0.1,
        infil_cfm=0.0,
        exfil_cfm=0.0,
    )


def _new_record(base: Any, item: Any) -> Optional[Any]:
    """Build a new row from a record, a mapping over ``base``, or None for ``base``."""
    if item is None:
        return base
    if isinstance(item, type(base)):
        return item
    if isinstance(item, Mapping):
        return merge_fields(base, item, allow_read_only=True)
    return None


# =============================================================================
# Project metadata
# =============================================================================


def _update_project(state: ProjectState, command: UpdateProject) -> TransitionResult:
    project = merge_fields(state.project, _as_mapping(command.fields))
    return TransitionResult(replace(state, project=project))


def _update_ambient(state: ProjectState, command: UpdateAmbient) -> TransitionResult:
    ambient = merge_fields(state.project.ambient, _as_mapping(command.fields))
    return TransitionResult(replace(state, project=replace(state.project, ambient=ambient)))


# =============================================================================
# AHUs
# =============================================================================


def _add_ahu(state: ProjectState, command: AddAhu) -> TransitionResult:
    ahu = AhuConfiguration(id=state.next_id)
    return TransitionResult(replace(state, ahus=state.ahus + (ahu,), next_id=state.next_id + 1))


def _update_ahu(state: ProjectState, command: UpdateAhu) -> TransitionResult:
    index = _index_of(state.ahus, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no AHU with id %r", command.id)

    choices = _AHU_CHOICES.get(command.field)
    if choices is not None and command.value not in choices:
        logger.warning("Ignoring unknown AHU %s %r", command.field, command.value)
        return TransitionResult(state)

    ahu = merge_fields(state.ahus[index], {command.field: command.value})
    ahus = state.ahus[:index] + (ahu,) + state.ahus[index + 1 :]
    return TransitionResult(replace(state, ahus=ahus))


def _delete_ahu(state: ProjectState, command: DeleteAhu) -> TransitionResult:
    index = _index_of(state.ahus, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no AHU with id %r", command.id)
    if len(state.ahus) <= 1:
        return _reject(state, Rejection.MINIMUM_COUNT_VIOLATION, "at least one AHU is required")

    ahus = state.ahus[:index] + state.ahus[index + 1 :]
    return TransitionResult(replace(state, ahus=ahus))


# =============================================================================
# Room and climate
# =============================================================================


def _update_room(state: ProjectState, command: UpdateRoom) -> TransitionResult:
    fields = _as_mapping(command.fields)
    room: Room = merge_fields(state.room, fields)
    if "floor_area" in fields or "height" in fields:
        room = replace(room, volume=round_half_up(room.floor_area * room.height))
    return TransitionResult(replace(state, room=room))


def _update_climate(state: ProjectState, command: UpdateClimate) -> TransitionResult:
    target = ClimateTarget.parse(command.target)
    if target is None:
        return _reject(state, Rejection.INVALID_TARGET, "unknown climate target %r", command.target)

    fields = _as_mapping(command.fields)
    climate = state.climate

    if target is ClimateTarget.INSIDE:
        climate = replace(climate, inside=merge_fields(climate.inside, fields))
    else:
        season = Season.parse(command.season)
        if season is None:
            return _reject(state, Rejection.INVALID_TARGET, "unknown season %r", command.season)
        condition = merge_fields(climate.outside.for_season(season), fields)
        outside = replace(climate.outside, **{season.value: condition})
        climate = replace(climate, outside=outside)

    return TransitionResult(replace(state, climate=climate))


# =============================================================================
# Envelope
# =============================================================================


def _replace_category(state: ProjectState, category: ElementCategory, rows, **changes) -> ProjectState:
    elements = replace(state.elements, **{category.value: rows})
    return replace(state, elements=elements, **changes)


def _add_element_row(state: ProjectState, command: AddElementRow) -> TransitionResult:
    category = ElementCategory.parse(command.category)
    if category is None:
        return _reject(state, Rejection.INVALID_TARGET, "unknown envelope category %r", command.category)

    element = _new_record(_default_element(category), command.item)
    if element is None:
        return _reject(state, Rejection.INVALID_TARGET, "malformed envelope row %r", command.item)

    rows = state.elements.for_category(category)
    element, next_id = _with_fresh_id(element, rows, state.next_id)
    return TransitionResult(_replace_category(state, category, rows + (element,), next_id=next_id))


def _update_element_row(state: ProjectState, command: UpdateElementRow) -> TransitionResult:
    category = ElementCategory.parse(command.category)
    if category is None:
        return _reject(state, Rejection.INVALID_TARGET, "unknown envelope category %r", command.category)

    rows = state.elements.for_category(category)
    index = _index_of(rows, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no %s row with id %r", category.value, command.id)

    row = merge_fields(rows[index], {command.field: command.value})
    rows = rows[:index] + (row,) + rows[index + 1 :]
    return TransitionResult(_replace_category(state, category, rows))


def _delete_element_row(state: ProjectState, command: DeleteElementRow) -> TransitionResult:
    category = ElementCategory.parse(command.category)
    if category is None:
        return _reject(state, Rejection.INVALID_TARGET, "unknown envelope category %r", command.category)

    rows = state.elements.for_category(category)
    index = _index_of(rows, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no %s row with id %r", category.value, command.id)

    return TransitionResult(_replace_category(state, category, rows[:index] + rows[index + 1 :]))


# =============================================================================
# Loads and infiltration
# =============================================================================


def _update_internal_loads(state: ProjectState, command: UpdateInternalLoads) -> TransitionResult:
    kind = LoadKind.parse(command.kind)
    if kind is None:
        return _reject(state, Rejection.INVALID_TARGET, "unknown internal load kind %r", command.kind)

    record = merge_fields(state.internal_loads.for_kind(kind), _as_mapping(command.fields))
    loads = replace(state.internal_loads, **{kind.value: record})
    return TransitionResult(replace(state, internal_loads=loads))


def _update_infiltration(state: ProjectState, command: UpdateInfiltration) -> TransitionResult:
    fields = _as_mapping(command.fields)
    infiltration = merge_fields(state.infiltration, fields)
    next_id = state.next_id
    if "doors" in fields:
        doors, next_id = assign_ids(infiltration.doors, next_id)
        infiltration = _with_doors(infiltration, doors)
    return TransitionResult(replace(state, infiltration=infiltration, next_id=next_id))


def _add_opening(state: ProjectState, command: AddOpening) -> TransitionResult:
    opening = _new_record(_default_opening(), command.item)
    if opening is None:
        return _reject(state, Rejection.INVALID_TARGET, "malformed opening %r", command.item)

    doors = state.infiltration.doors
    opening, next_id = _with_fresh_id(opening, doors, state.next_id)
    infiltration = _with_doors(state.infiltration, doors + (opening,))
    return TransitionResult(replace(state, infiltration=infiltration, next_id=next_id))


def _update_opening(state: ProjectState, command: UpdateOpening) -> TransitionResult:
    doors = state.infiltration.doors
    index = _index_of(doors, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no opening with id %r", command.id)

    door = merge_fields(doors[index], {command.field: command.value})
    infiltration = _with_doors(state.infiltration, doors[:index] + (door,) + doors[index + 1 :])
    return TransitionResult(replace(state, infiltration=infiltration))


def _delete_opening(state: ProjectState, command: DeleteOpening) -> TransitionResult:
    doors = state.infiltration.doors
    index = _index_of(doors, command.id)
    if index is None:
        return _reject(state, Rejection.INVALID_TARGET, "no opening with id %r", command.id)

    infiltration = _with_doors(state.infiltration, doors[:index] + doors[index + 1 :])
    return TransitionResult(replace(state, infiltration=infiltration))


# =============================================================================
# System design and reset
# =============================================================================


def _update_system_design(state: ProjectState, command: UpdateSystemDesign) -> TransitionResult:
    system_design = merge_fields(state.system_design, _as_mapping(command.fields))
    return TransitionResult(replace(state, system_design=system_design))


def _renumber(records: Tuple[Any, ...], next_id: int) -> Tuple[Tuple[Any, ...], int]:
    renumbered = tuple(replace(record, id=next_id + offset) for offset, record in enumerate(records))
    return renumbered, next_id + len(records)


def _reset_project(state: ProjectState, command: ResetProject) -> TransitionResult:
    # ids keep counting across a reset so none is handed out twice in a session
    default = default_project_state()
    next_id = max(default.next_id, state.next_id)

    ahus, next_id = _renumber(default.ahus, next_id)
    elements = default.elements
    for category in ElementCategory:
        rows, next_id = _renumber(elements.for_category(category), next_id)
        elements = replace(elements, **{category.value: rows})

    return TransitionResult(replace(default, ahus=ahus, elements=elements, next_id=next_id))


_HANDLERS: Dict[Type[Command], Callable[[ProjectState, Any], TransitionResult]] = {
    UpdateProject: _update_project,
    UpdateAmbient: _update_ambient,
    AddAhu: _add_ahu,
    UpdateAhu: _update_ahu,
    DeleteAhu: _delete_ahu,
    UpdateRoom: _update_room,
    UpdateClimate: _update_climate,
    AddElementRow: _add_element_row,
    UpdateElementRow: _update_element_row,
    DeleteElementRow: _delete_element_row,
    UpdateInternalLoads: _update_internal_loads,
    UpdateInfiltration: _update_infiltration,
    AddOpening: _add_opening,
    UpdateOpening: _update_opening,
    DeleteOpening: _delete_opening,
    UpdateSystemDesign: _update_system_design,
    ResetProject: _reset_project,
}
