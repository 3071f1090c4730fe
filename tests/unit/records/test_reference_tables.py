"""Unit tests for loading record classification tables."""

from __future__ import annotations

import json
import textwrap

import pytest

from profilesync.records.reference_data import GENERAL_RECORD_KEYS, SOCIAL_RECORD_KEYS, UNKNOWN_GROUP_RANK
from profilesync.records.tables import (
    ReferenceTables,
    get_reference_tables,
    load_reference_tables,
    reset_reference_tables,
)
from profilesync.settings.config import get_settings, reload_settings


@pytest.fixture(autouse=True)
def _reset_caches():
    reset_reference_tables()
    get_settings.cache_clear()
    yield
    reset_reference_tables()
    get_settings.cache_clear()


def test_default_tables_match_reference_data():
    tables = ReferenceTables()
    assert tables.general_keys == frozenset(GENERAL_RECORD_KEYS)
    assert tables.social_keys == frozenset(SOCIAL_RECORD_KEYS)
    assert dict(tables.default_ranks) == UNKNOWN_GROUP_RANK


@pytest.mark.parametrize(
    "group,key,expected",
    [
        ("general", "name", 101),
        ("general", "NAME", 101),
        ("general", "unknown", 199),
        ("media", "anything", 1),
        ("custom", "name", 999),
    ],
)
def test_rank_lookup(group, key, expected):
    assert ReferenceTables().rank(group, key) == expected


def test_zero_rank_falls_back_to_group_default():
    tables = ReferenceTables(sort_values={"general": {"name": 0}})
    assert tables.rank("general", "name") == 199


def test_json_file_overrides_only_given_sections(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text(json.dumps({"social_keys": ["xyz.chat"], "sort_values": {"social": {"XYZ.Chat": 7}}}), encoding="utf-8")

    tables = load_reference_tables(path)

    assert tables.social_keys == frozenset({"xyz.chat"})
    assert tables.general_keys == frozenset(GENERAL_RECORD_KEYS)
    assert tables.rank("social", "xyz.chat") == 7
    assert tables.group_for_text_key("xyz.chat") == "social"


def test_toml_file_merges_default_ranks(tmp_path):
    path = tmp_path / "tables.toml"
    path.write_text(
        textwrap.dedent(
            """
            general_keys = ["title"]

            [default_ranks]
            custom = 42
            """
        ).strip(),
        encoding="utf-8",
    )

    tables = load_reference_tables(path)

    assert tables.group_for_text_key("title") == "general"
    assert tables.group_for_text_key("name") == "custom"
    assert tables.rank("custom", "anything") == 42
    assert tables.rank("general", "anything") == 199


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"sort_values": {"general": {"name": "high"}}}'])
def test_malformed_file_raises_value_error(tmp_path, content):
    path = tmp_path / "tables.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_reference_tables(path)


def test_missing_file_raises_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_reference_tables(tmp_path / "missing.json")


def test_settings_select_tables_file(tmp_path, monkeypatch):
    path = tmp_path / "tables.json"
    path.write_text(json.dumps({"general_keys": ["headline"]}), encoding="utf-8")
    monkeypatch.setenv("PROFILESYNC_RECORDS__REFERENCE_TABLES_FILE", str(path))
    reload_settings()
    reset_reference_tables()

    tables = get_reference_tables()

    assert tables.general_keys == frozenset({"headline"})
    assert get_reference_tables() is tables


def test_builtin_tables_without_settings_override(monkeypatch):
    monkeypatch.delenv("PROFILESYNC_RECORDS__REFERENCE_TABLES_FILE", raising=False)
    monkeypatch.delenv("PROFILESYNC_SETTINGS_FILE", raising=False)
    reload_settings()
    assert get_reference_tables() == ReferenceTables()
