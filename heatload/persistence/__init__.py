"""Snapshot persistence for the project document."""

from heatload.persistence.snapshot import (
    SNAPSHOT_VERSION,
    SnapshotError,
    dumps_snapshot,
    load_snapshot,
    loads_snapshot,
    save_snapshot,
    state_from_dict,
    state_to_dict,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "SnapshotError",
    "dumps_snapshot",
    "load_snapshot",
    "loads_snapshot",
    "save_snapshot",
    "state_from_dict",
    "state_to_dict",
]
