"""profilesync: reconcile identity profile records across representations.

This package converts a stored profile into a canonical list of records,
lifts the avatar out for editing, folds records into an update payload,
and computes the minimal diff between two profile states.
"""

from profilesync.records import (
    Profile,
    ProfileEditorForm,
    ProfileRecord,
    ProfileRecordGroup,
    RecordOptions,
    RecordType,
    get_profile_records_diff,
    profile_editor_form_to_profile_records,
    profile_records_to_profile_editor_form,
    profile_records_to_record_options,
    profile_to_profile_records,
)

__all__ = [
    "Profile",
    "ProfileEditorForm",
    "ProfileRecord",
    "ProfileRecordGroup",
    "RecordOptions",
    "RecordType",
    "get_profile_records_diff",
    "profile_editor_form_to_profile_records",
    "profile_records_to_profile_editor_form",
    "profile_records_to_record_options",
    "profile_to_profile_records",
]
