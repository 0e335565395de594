"""
Commands accepted by the state transition engine.

Each command is an immutable value describing one edit of the project
document. Targets that select a keyed collection (category, season, load
kind, climate target) take either the enum member or its text form, as a
presentation layer would send it.

Usage:
    from heatload.engine.commands import UpdateRoom, AddAhu

    state = apply(state, UpdateRoom({"floor_area": 200}))
    state = apply(state, AddAhu())
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from heatload.model.enums import ClimateTarget, ElementCategory, LoadKind, Season
from heatload.model.state import EnvelopeElement, Opening


@dataclass(frozen=True)
class Command:
    """Base class for all state commands."""


# =============================================================================
# Project metadata
# =============================================================================


@dataclass(frozen=True)
class UpdateProject(Command):
    """Shallow-merge fields into the project metadata."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateAmbient(Command):
    """Shallow-merge fields into the project's ambient data."""

    fields: Mapping[str, Any]


# =============================================================================
# AHUs
# =============================================================================


@dataclass(frozen=True)
class AddAhu(Command):
    """Append an AHU with a fresh id and the default selection."""


@dataclass(frozen=True)
class UpdateAhu(Command):
    """Set one field of the AHU with the given id."""

    id: int
    field: str
    value: Any


@dataclass(frozen=True)
class DeleteAhu(Command):
    """Remove an AHU, unless it is the last one."""

    id: int


# =============================================================================
# Room and climate
# =============================================================================


@dataclass(frozen=True)
class UpdateRoom(Command):
    """Shallow-merge room fields; geometry edits recompute the volume."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateClimate(Command):
    """Merge fields into the inside record or one season's outside record."""

    target: Union[ClimateTarget, str]
    fields: Mapping[str, Any]
    season: Optional[Union[Season, str]] = None


# =============================================================================
# Envelope
# =============================================================================


@dataclass(frozen=True)
class AddElementRow(Command):
    """Append a row to an envelope category; None appends the default row."""

    category: Union[ElementCategory, str]
    item: Optional[Union[EnvelopeElement, Mapping[str, Any]]] = None


@dataclass(frozen=True)
class UpdateElementRow(Command):
    """Set one field of an envelope row."""

    category: Union[ElementCategory, str]
    id: int
    field: str
    value: Any


@dataclass(frozen=True)
class DeleteElementRow(Command):
    """Remove an envelope row."""

    category: Union[ElementCategory, str]
    id: int


# =============================================================================
# Loads and infiltration
# =============================================================================


@dataclass(frozen=True)
class UpdateInternalLoads(Command):
    """Shallow-merge fields into the people, equipment or lights record."""

    kind: Union[LoadKind, str]
    fields: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateInfiltration(Command):
    """Shallow-merge infiltration fields; replacing doors refreshes cfm."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class AddOpening(Command):
    """Append an infiltration opening; None appends the default door."""

    item: Optional[Union[Opening, Mapping[str, Any]]] = None


@dataclass(frozen=True)
class UpdateOpening(Command):
    """Set one field of an infiltration opening."""

    id: int
    field: str
    value: Any


@dataclass(frozen=True)
class DeleteOpening(Command):
    """Remove an infiltration opening."""

    id: int


# =============================================================================
# System design and reset
# =============================================================================


@dataclass(frozen=True)
class UpdateSystemDesign(Command):
    """Shallow-merge tuning parameters into the stored system design."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class ResetProject(Command):
    """Replace the whole document with the default project."""
