"""Compute the minimal change set between two profile record lists."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from profilesync.observability import get_observability
from profilesync.records.schema import ProfileRecord, ProfileRecordGroup


def _as_records(records: Iterable[ProfileRecord | Mapping[str, Any]] | None) -> List[ProfileRecord]:
    return [
        record if isinstance(record, ProfileRecord) else ProfileRecord.model_validate(record)
        for record in records or ()
    ]


def _index_by_identity(records: Sequence[ProfileRecord]) -> Dict[tuple[str, str], ProfileRecord]:
    index: Dict[tuple[str, str], ProfileRecord] = {}
    for record in records:
        index.setdefault(record.identity, record)
    return index


def get_profile_records_diff(
    current_records: Iterable[ProfileRecord | Mapping[str, Any]],
    previous_records: Iterable[ProfileRecord | Mapping[str, Any]] | None = None,
) -> List[ProfileRecord]:
    """Return new and updated records followed by deletion tombstones.

    Records are matched on ``(key, group)``. Current records with an empty
    value are never emitted. A previous record with no current match is
    emitted with an empty value, except that any current website record
    counts as a match for a previous website record, since only one website
    may exist and its key changes with the protocol.

    Args:
        current_records: Edited state.
        previous_records: State the edit started from.

    Returns:
        New list; changes keep ``current_records`` order and tombstones keep
        ``previous_records`` order.
    """

    current = _as_records(current_records)
    previous = _as_records(previous_records)
    previous_index = _index_by_identity(previous)

    changes: List[ProfileRecord] = []
    for record in current:
        if not record.value:
            continue
        identical = previous_index.get(record.identity)
        if identical is None or identical.value != record.value:
            changes.append(record)

    current_identities = {record.identity for record in current}
    has_website = any(record.group is ProfileRecordGroup.WEBSITE for record in current)

    deletions: List[ProfileRecord] = []
    for record in previous:
        if record.group is ProfileRecordGroup.WEBSITE:
            deleted = not has_website
        else:
            deleted = record.identity not in current_identities
        if deleted:
            deletions.append(record.model_copy(update={"value": ""}))

    get_observability(component="diff").emit_event(
        "records_diffed",
        changed=len(changes),
        deleted=len(deletions),
    )
    return [*changes, *deletions]


__all__ = ["get_profile_records_diff"]
