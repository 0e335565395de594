"""
Key-wise merging of updates into frozen state records.

Every update the engine applies is a mapping of field names to raw values.
``merge_fields`` copies a record with those fields replaced, coercing each
raw value according to the declared type of the field:

- ``float`` / ``int`` fields go through numeric coercion (bad input → 0)
- ``str`` fields are stringified
- enum fields are parsed; text that names no member leaves the field as is
- nested record fields accept a mapping, merged recursively
- tuple-of-record fields accept a sequence of records or mappings

Unknown keys and read-only keys are skipped.
"""

import logging
from dataclasses import fields, is_dataclass, replace
from typing import Any, Mapping, Optional, Sequence, Set, Tuple, Type, TypeVar, get_args, get_origin

from heatload.core.coercion import coerce_int, coerce_number, coerce_text
from heatload.model.enums import ParseableEnum

logger = logging.getLogger(__name__)

R = TypeVar("R")

_INVALID = object()


def merge_fields(record: R, updates: Mapping[str, Any], allow_read_only: bool = False) -> R:
    """
    Return a copy of ``record`` with ``updates`` merged in by key.

    Args:
        record: A frozen dataclass instance
        updates: Field names mapped to raw values
        allow_read_only: Also set fields listed in READ_ONLY_FIELDS (used when
            rebuilding records from a snapshot)

    Returns:
        The updated record, or ``record`` itself when nothing changed
    """
    by_name = {f.name: f for f in fields(record)}
    read_only = getattr(record, "READ_ONLY_FIELDS", frozenset())
    changes = {}

    for key, value in updates.items():
        f = by_name.get(key)
        if f is None:
            logger.debug("Ignoring unknown %s field %r", type(record).__name__, key)
            continue
        if key in read_only and not allow_read_only:
            logger.debug("Ignoring read-only %s field %r", type(record).__name__, key)
            continue

        coerced = _coerce_field(f.type, getattr(record, key), value, allow_read_only)
        if coerced is _INVALID:
            logger.warning(
                "Ignoring invalid value %r for %s.%s", value, type(record).__name__, key
            )
            continue
        changes[key] = coerced

    if not changes:
        return record
    return replace(record, **changes)


def build_record(cls: Type[R], data: Mapping[str, Any]) -> R:
    """Build a record from a mapping, starting from the class defaults."""
    return merge_fields(cls(), data, allow_read_only=True)


def assign_ids(
    records: Sequence[R], next_id: int, taken: Optional[Set[int]] = None
) -> Tuple[Tuple[R, ...], int]:
    """
    Give every record a positive id that is not already in use.

    A record keeps its id when it is positive and not yet taken; otherwise it
    is given ``next_id`` and the counter advances.

    Args:
        records: Records with an ``id`` field
        next_id: Next free id of the document
        taken: Ids already in use; extended with the ids assigned here

    Returns:
        Tuple of (records with unique ids, updated next_id)
    """
    taken = set() if taken is None else taken
    assigned = []
    for record in records:
        if record.id <= 0 or record.id in taken:
            record = replace(record, id=next_id)
        taken.add(record.id)
        next_id = max(next_id, record.id + 1)
        assigned.append(record)
    return tuple(assigned), next_id


def _coerce_field(field_type: Any, current: Any, value: Any, allow_read_only: bool) -> Any:
    if field_type is float:
        return coerce_number(value)
    if field_type is int:
        return coerce_int(value)
    if field_type is str:
        return coerce_text(value)

    if isinstance(field_type, type) and issubclass(field_type, ParseableEnum):
        member = field_type.parse(value)
        return _INVALID if member is None else member

    if is_dataclass(field_type):
        if isinstance(value, field_type):
            return value
        if isinstance(value, Mapping):
            return merge_fields(current, value, allow_read_only)
        return _INVALID

    if get_origin(field_type) is tuple:
        item_type = get_args(field_type)[0]
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            return _INVALID
        return _coerce_records(item_type, value)

    return value


def _coerce_records(item_type: Type[R], items: Sequence[Any]) -> tuple:
    records = []
    for item in items:
        if isinstance(item, item_type):
            records.append(item)
        elif isinstance(item, Mapping):
            records.append(build_record(item_type, item))
        else:
            logger.warning("Dropping malformed %s entry %r", item_type.__name__, item)
    return tuple(records)
