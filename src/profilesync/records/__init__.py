"""Profile record conversion, folding, and diffing."""

from .classifier import profile_to_profile_records, record_sort_rank, sort_profile_records
from .diff import get_profile_records_diff
from .form import profile_editor_form_to_profile_records, profile_records_to_profile_editor_form
from .options import profile_records_to_record_options
from .schema import (
    Profile,
    ProfileEditorForm,
    ProfileRecord,
    ProfileRecordGroup,
    RecordOptions,
    RecordType,
)
from .tables import ReferenceTables, get_reference_tables, load_reference_tables

__all__ = [
    "Profile",
    "ProfileEditorForm",
    "ProfileRecord",
    "ProfileRecordGroup",
    "RecordOptions",
    "RecordType",
    "ReferenceTables",
    "get_profile_records_diff",
    "get_reference_tables",
    "load_reference_tables",
    "profile_editor_form_to_profile_records",
    "profile_records_to_profile_editor_form",
    "profile_records_to_record_options",
    "profile_to_profile_records",
    "record_sort_rank",
    "sort_profile_records",
]
