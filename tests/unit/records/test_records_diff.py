"""Unit tests for profilesync.records.diff."""

from profilesync.records.diff import get_profile_records_diff
from profilesync.records.schema import ProfileRecord


def _record(key, value, group="general", type_="text"):
    return ProfileRecord(key=key, type=type_, group=group, value=value)


def test_new_record_is_emitted():
    assert get_profile_records_diff([_record("a", "1")], []) == [_record("a", "1")]


def test_previous_defaults_to_empty():
    assert get_profile_records_diff([_record("a", "1")]) == [_record("a", "1")]


def test_updated_record_is_emitted():
    assert get_profile_records_diff([_record("a", "2")], [_record("a", "1")]) == [_record("a", "2")]


def test_removed_record_becomes_tombstone():
    assert get_profile_records_diff([], [_record("a", "1")]) == [_record("a", "")]


def test_unchanged_record_is_dropped():
    assert get_profile_records_diff([_record("a", "1")], [_record("a", "1")]) == []


def test_empty_current_value_without_previous_is_noop():
    assert get_profile_records_diff([_record("a", "")], []) == []


def test_empty_current_value_matching_previous_is_noop():
    """Deletions come only from records missing in the current list."""
    assert get_profile_records_diff([_record("a", "")], [_record("a", "1")]) == []


def test_same_key_in_other_group_is_a_different_record():
    current = [_record("avatar", "x", group="custom")]
    previous = [_record("avatar", "x", group="media")]

    diff = get_profile_records_diff(current, previous)

    assert diff == [_record("avatar", "x", group="custom"), _record("avatar", "", group="media")]


def test_website_switch_replaces_without_tombstone():
    """Any current website counts as a match, so the new hash is not wiped by a tombstone."""
    current = [_record("ipns", "h2", group="website", type_="contenthash")]
    previous = [_record("ipfs", "h1", group="website", type_="contenthash")]

    diff = get_profile_records_diff(current, previous)

    assert diff == [_record("ipns", "h2", group="website", type_="contenthash")]


def test_removed_website_is_deleted():
    previous = [_record("ipfs", "h1", group="website", type_="contenthash")]
    assert get_profile_records_diff([], previous) == [_record("ipfs", "", group="website", type_="contenthash")]


def test_unchanged_website_emits_nothing():
    website = _record("ipfs", "h1", group="website", type_="contenthash")
    assert get_profile_records_diff([website], [website]) == []


def test_changes_precede_deletions_in_source_order():
    current = [_record("c", "3"), _record("a", "1-new")]
    previous = [_record("z", "9"), _record("a", "1"), _record("y", "8")]

    diff = get_profile_records_diff(current, previous)

    assert [(record.key, record.value) for record in diff] == [
        ("c", "3"),
        ("a", "1-new"),
        ("z", ""),
        ("y", ""),
    ]


def test_first_previous_match_is_used():
    previous = [_record("a", "1"), _record("a", "2")]
    assert get_profile_records_diff([_record("a", "1")], previous) == []


def test_mapping_inputs_are_accepted():
    diff = get_profile_records_diff(
        [{"key": "eth", "type": "addr", "group": "address", "value": "0x2"}],
        [{"key": "eth", "type": "addr", "group": "address", "value": "0x1"}],
    )
    assert diff == [_record("eth", "0x2", group="address", type_="addr")]


def test_inputs_are_not_mutated():
    previous = [_record("a", "1")]
    get_profile_records_diff([], previous)
    assert previous == [_record("a", "1")]
