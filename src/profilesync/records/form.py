"""Convert between profile records and the editor form shape."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from profilesync.observability import get_observability
from profilesync.records.schema import (
    AVATAR_KEY,
    ProfileEditorForm,
    ProfileRecord,
    ProfileRecordGroup,
    RecordType,
)


def _as_record(record: ProfileRecord | Mapping[str, Any]) -> ProfileRecord:
    if isinstance(record, ProfileRecord):
        return record
    return ProfileRecord.model_validate(record)


def profile_editor_form_to_profile_records(form: ProfileEditorForm | Mapping[str, Any]) -> List[ProfileRecord]:
    """Return the form's records with the avatar appended as a media record."""

    data = form if isinstance(form, ProfileEditorForm) else ProfileEditorForm.model_validate(form)
    records = list(data.records)
    if data.avatar:
        records.append(
            ProfileRecord(
                key=AVATAR_KEY,
                type=RecordType.TEXT,
                group=ProfileRecordGroup.MEDIA,
                value=data.avatar,
            )
        )
    return records


def profile_records_to_profile_editor_form(
    records: Iterable[ProfileRecord | Mapping[str, Any]],
) -> ProfileEditorForm:
    """Lift the media avatar out of ``records`` into the form's ``avatar`` field.

    If more than one avatar record is present, the last one wins.
    """

    avatar = ""
    avatar_count = 0
    remaining: List[ProfileRecord] = []
    for item in records:
        record = _as_record(item)
        if record.is_avatar():
            avatar = record.value or ""
            avatar_count += 1
            continue
        remaining.append(record.model_copy(update={"value": record.value or ""}))
    if avatar_count > 1:
        get_observability(component="form").emit_event("multiple_avatar_records", count=avatar_count)
    return ProfileEditorForm(avatar=avatar, records=remaining)


__all__ = ["profile_editor_form_to_profile_records", "profile_records_to_profile_editor_form"]
