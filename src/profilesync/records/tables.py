"""Classification tables passed into the classifier and sorter.

The built-in tables come from :mod:`profilesync.records.reference_data`. A
JSON or TOML file named by ``records.reference_tables_file`` replaces any
section it defines; sections it leaves out keep their built-in values.
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from profilesync.records.reference_data import (
    GENERAL_RECORD_KEYS,
    SOCIAL_RECORD_KEYS,
    SORT_VALUES,
    UNKNOWN_GROUP_RANK,
)
from profilesync.settings import get_settings

LOGGER = logging.getLogger(__name__)


def _freeze_ranks(table: Mapping[str, Mapping[str, int]]) -> Mapping[str, Mapping[str, int]]:
    return MappingProxyType({str(group): MappingProxyType(dict(ranks)) for group, ranks in table.items()})


@dataclass(frozen=True)
class ReferenceTables:
    """Immutable lookup tables for grouping and ordering records.

    Attributes:
        general_keys: Text keys classified into the ``general`` group.
        social_keys: Text keys classified into the ``social`` group.
        sort_values: ``group -> lowercase key -> rank``.
        default_ranks: ``group -> rank`` used when a key has no entry.
    """

    general_keys: frozenset[str] = frozenset(GENERAL_RECORD_KEYS)
    social_keys: frozenset[str] = frozenset(SOCIAL_RECORD_KEYS)
    sort_values: Mapping[str, Mapping[str, int]] = field(default_factory=lambda: _freeze_ranks(SORT_VALUES))
    default_ranks: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(UNKNOWN_GROUP_RANK)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReferenceTables":
        """Build tables from a parsed config document, keeping built-ins for absent sections."""

        defaults = cls()
        general = data.get("general_keys")
        social = data.get("social_keys")
        sort_values = data.get("sort_values")
        default_ranks = data.get("default_ranks")
        return cls(
            general_keys=_key_set(general) if general is not None else defaults.general_keys,
            social_keys=_key_set(social) if social is not None else defaults.social_keys,
            sort_values=_freeze_ranks(_rank_table(sort_values)) if sort_values is not None else defaults.sort_values,
            default_ranks=(
                MappingProxyType({**defaults.default_ranks, **_ranks(default_ranks)})
                if default_ranks is not None
                else defaults.default_ranks
            ),
        )

    def group_for_text_key(self, key: str) -> str:
        """Return ``general``, ``social`` or ``custom`` for a non-avatar text key."""

        if key in self.general_keys:
            return "general"
        if key in self.social_keys:
            return "social"
        return "custom"

    def rank(self, group: str, key: str) -> int:
        """Return the display rank of ``key`` within ``group``."""

        group = getattr(group, "value", group)
        ranked = self.sort_values.get(group, {}).get(key.lower())
        return ranked or self.default_ranks.get(group, 0)


def _key_set(values: Iterable[Any]) -> frozenset[str]:
    return frozenset(str(value) for value in values)


def _ranks(values: Mapping[str, Any]) -> dict[str, int]:
    return {str(key): int(rank) for key, rank in values.items()}


def _rank_table(values: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, int]]:
    return {str(group): {str(key).lower(): int(rank) for key, rank in ranks.items()} for group, ranks in values.items()}


def load_reference_tables(path: Path) -> ReferenceTables:
    """Load classification tables from a JSON or TOML file.

    Raises:
        ValueError: If the file cannot be read or parsed.
    """

    try:
        if path.suffix.lower() == ".toml":
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        else:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ValueError(f"Unable to load reference tables from {path}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"Reference tables in {path} must be a mapping")
    try:
        tables = ReferenceTables.from_mapping(data)
    except (AttributeError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed reference tables in {path}") from exc
    LOGGER.info("Loaded record reference tables from %s", path)
    return tables


@lru_cache(maxsize=1)
def get_reference_tables() -> ReferenceTables:
    """Return the process-wide tables, loaded once from settings."""

    path = get_settings().reference_tables_file
    if path is None:
        return ReferenceTables()
    return load_reference_tables(path)


def reset_reference_tables() -> None:
    """Drop the cached tables (used in tests)."""

    get_reference_tables.cache_clear()


__all__ = ["ReferenceTables", "get_reference_tables", "load_reference_tables", "reset_reference_tables"]
