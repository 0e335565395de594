"""
Snapshot persistence for the project document.

The whole ``ProjectState`` is stored as one structured record, in YAML or
JSON depending on the file suffix. Loading never fails on bad content: a
missing, unreadable or malformed snapshot is logged and replaced by the
default project document.

Times of day (``time`` in the outside conditions) must be quoted in a
hand-edited YAML snapshot: YAML 1.1 reads an unquoted ``15:00`` as the
number 900. Snapshots written by ``save_snapshot`` are always quoted.

Usage:
    from heatload.persistence.snapshot import load_snapshot, save_snapshot

    save_snapshot(state, "project.yaml")
    state = load_snapshot("project.yaml")
"""

import json
import logging
from dataclasses import fields, is_dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from heatload.core.config import load_config, save_config
from heatload.model.enums import ElementCategory
from heatload.model.records import assign_ids, merge_fields
from heatload.model.state import ProjectState, default_project_state
from heatload.physics.thermal import round_half_up

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when snapshot content cannot be turned into a project document."""


def _to_plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_to_plain(item) for item in value]
    return value


def state_to_dict(state: ProjectState) -> Dict[str, Any]:
    """
    Convert a project document to plain dictionaries and lists.

    Args:
        state: Project document

    Returns:
        Snapshot dictionary, tagged with the snapshot version
    """
    data = {"version": SNAPSHOT_VERSION}
    data.update(_to_plain(state))
    return data


def state_from_dict(data: Any) -> ProjectState:
    """
    Rebuild a project document from a snapshot dictionary.

    Sections missing from the snapshot keep their default values. Derived
    values (room volume, infiltration airflow) are recomputed rather than
    trusted. Missing, zero or duplicate ids are renumbered so every AHU,
    envelope row and opening has a unique positive id, and the id counter
    is moved past every id in the document.

    Args:
        data: Snapshot dictionary

    Returns:
        ProjectState

    Raises:
        SnapshotError: If the snapshot is not a mapping, has an unknown
            version or holds no AHU
    """
    if not isinstance(data, Mapping):
        raise SnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")

    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")

    body = {key: value for key, value in data.items() if key != "version"}
    state = merge_fields(default_project_state(), body, allow_read_only=True)

    if not state.ahus:
        raise SnapshotError("Snapshot holds no AHU")

    room = state.room
    room = replace(room, volume=round_half_up(room.floor_area * room.height))

    infiltration = state.infiltration
    if infiltration.doors:
        infiltration = replace(infiltration, cfm=infiltration.door_cfm)

    # ids from the file are kept where they are positive and unique; the rest
    # are renumbered past the highest id in the document
    elements = state.elements
    ids = [ahu.id for ahu in state.ahus] + [door.id for door in infiltration.doors]
    for category in ElementCategory:
        ids.extend(element.id for element in elements.for_category(category))
    next_id = max([state.next_id] + [record_id + 1 for record_id in ids])

    taken = set()
    ahus, next_id = assign_ids(state.ahus, next_id, taken)
    for category in ElementCategory:
        rows, next_id = assign_ids(elements.for_category(category), next_id, taken)
        elements = replace(elements, **{category.value: rows})
    doors, next_id = assign_ids(infiltration.doors, next_id, taken)
    infiltration = replace(infiltration, doors=doors)

    return replace(
        state, ahus=ahus, room=room, elements=elements, infiltration=infiltration, next_id=next_id
    )


def save_snapshot(state: ProjectState, path: Union[str, Path]) -> None:
    """
    Write a project snapshot to a YAML or JSON file.

    Args:
        state: Project document
        path: Destination file (.yaml, .yml or .json)

    Raises:
        ValueError: If the file format is not supported
    """
    save_config(state_to_dict(state), path)
    logger.debug("Saved project snapshot to %s", path)


def load_snapshot(path: Union[str, Path]) -> ProjectState:
    """
    Load a project snapshot, falling back to the default document.

    Args:
        path: Snapshot file (.yaml, .yml or .json)

    Returns:
        The restored ProjectState, or the default document if the snapshot
        is missing, unreadable or malformed
    """
    try:
        data = load_config(path)
    except FileNotFoundError:
        logger.info("No project snapshot at %s; starting from defaults", path)
        return default_project_state()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning("Could not read project snapshot %s: %s", path, e)
        return default_project_state()

    try:
        return state_from_dict(data)
    except SnapshotError as e:
        logger.warning("Malformed project snapshot %s: %s", path, e)
        return default_project_state()


def dumps_snapshot(state: ProjectState) -> str:
    """Serialize a project document to a JSON string."""
    return json.dumps(state_to_dict(state))


def loads_snapshot(text: str) -> ProjectState:
    """
    Restore a project document from a JSON string.

    Empty or malformed text yields the default document.
    """
    if not text:
        return default_project_state()
    try:
        return state_from_dict(json.loads(text))
    except (ValueError, TypeError) as e:
        logger.warning("Malformed project snapshot: %s", e)
        return default_project_state()
