"""Flatten a stored profile into a sorted list of profile records."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Mapping

from profilesync.observability import get_observability
from profilesync.records.contenthash import ContentHashDecoder, DefaultContentHashDecoder
from profilesync.records.schema import (
    ABI_KEY,
    AVATAR_KEY,
    Profile,
    ProfileRecord,
    ProfileRecordGroup,
    RecordType,
)
from profilesync.records.tables import ReferenceTables, get_reference_tables

LOGGER = logging.getLogger(__name__)

_DEFAULT_DECODER = DefaultContentHashDecoder()


def record_sort_rank(record: ProfileRecord, *, tables: ReferenceTables | None = None) -> int:
    """Return the display rank of ``record`` within its group."""

    resolved = tables or get_reference_tables()
    return resolved.rank(record.group.value, record.key)


def sort_profile_records(
    records: Iterable[ProfileRecord], *, tables: ReferenceTables | None = None
) -> List[ProfileRecord]:
    """Return ``records`` in display order; equal ranks keep their input order."""

    resolved = tables or get_reference_tables()
    return sorted(records, key=lambda record: record_sort_rank(record, tables=resolved))


def _text_records(profile: Profile, tables: ReferenceTables) -> List[ProfileRecord]:
    records = []
    for entry in profile.texts:
        if entry.key == AVATAR_KEY:
            group = ProfileRecordGroup.MEDIA
        else:
            group = ProfileRecordGroup(tables.group_for_text_key(entry.key))
        records.append(ProfileRecord(key=entry.key, type=RecordType.TEXT, group=group, value=entry.value))
    return records


def _address_records(profile: Profile) -> List[ProfileRecord]:
    return [
        ProfileRecord(key=coin.name, type=RecordType.ADDR, group=ProfileRecordGroup.ADDRESS, value=coin.value)
        for coin in profile.coins
    ]


def _website_records(profile: Profile, decoder: ContentHashDecoder) -> List[ProfileRecord]:
    content_hash = decoder.content_hash_to_string(profile.content_hash)
    protocol = decoder.get_protocol_type(content_hash) if content_hash else None
    codec = decoder.get_internal_codec(protocol.protocol_type) if protocol else None
    if not codec:
        if profile.content_hash:
            get_observability(component="classifier").emit_event(
                "contenthash_undecodable", content_hash=content_hash
            )
        return []
    return [
        ProfileRecord(key=codec, type=RecordType.CONTENTHASH, group=ProfileRecordGroup.WEBSITE, value=content_hash)
    ]


def _integral_floats_as_ints(value: Any) -> Any:
    """Render whole floats the way JavaScript numbers serialise (``1.0`` -> ``1``)."""

    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def _abi_records(profile: Profile) -> List[ProfileRecord]:
    descriptor = profile.abi.abi if profile.abi else None
    if not descriptor:
        return []
    value = json.dumps(_integral_floats_as_ints(descriptor), separators=(",", ":"), ensure_ascii=False)
    return [ProfileRecord(key=ABI_KEY, type=RecordType.ABI, group=ProfileRecordGroup.OTHER, value=value)]


def profile_to_profile_records(
    profile: Profile | Mapping[str, Any] | None = None,
    *,
    tables: ReferenceTables | None = None,
    decoder: ContentHashDecoder | None = None,
) -> List[ProfileRecord]:
    """Classify every field of a stored profile into a sorted record list.

    Text records are grouped by key (``avatar`` is always media), addresses
    land in the address group, a decodable content hash becomes the single
    website record and a non-empty ABI becomes the single ``other`` record.

    Args:
        profile: Stored profile, or a mapping in the reader's shape.
        tables: Classification tables. Defaults to the process-wide tables.
        decoder: Content hash decoder. Defaults to the URI pattern decoder.

    Returns:
        New list of records in display order.
    """

    if profile is None:
        source = Profile()
    elif isinstance(profile, Profile):
        source = profile
    else:
        source = Profile.model_validate(profile)
    resolved = tables or get_reference_tables()
    records = [
        *_text_records(source, resolved),
        *_address_records(source),
        *_website_records(source, decoder or _DEFAULT_DECODER),
        *_abi_records(source),
    ]
    LOGGER.debug("Classified %d profile records", len(records))
    return sort_profile_records(records, tables=resolved)


__all__ = ["profile_to_profile_records", "record_sort_rank", "sort_profile_records"]
