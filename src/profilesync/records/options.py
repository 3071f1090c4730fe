"""Fold profile records into the grouped update payload."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from profilesync.observability import get_observability
from profilesync.records.contenthash import string_to_hex
from profilesync.records.schema import (
    AVATAR_KEY,
    AbiRecordOption,
    CoinRecordOption,
    ProfileRecord,
    ProfileRecordGroup,
    RecordOptions,
    RecordType,
    TextRecordOption,
)

ABI_CONTENT_TYPE_JSON = 1


class _OptionsAccumulator:
    """Mutable fold state; each bucket stays ``None`` until a record touches it."""

    def __init__(self, base: RecordOptions | None) -> None:
        self.texts: Dict[str, str] | None = None
        self.coins: Dict[str, str] | None = None
        self.content_hash: str | None = None
        self.abi: AbiRecordOption | None = None
        if base is not None:
            if base.texts is not None:
                self.texts = {item.key: item.value for item in base.texts}
            if base.coins is not None:
                self.coins = {item.coin: item.value for item in base.coins}
            self.content_hash = base.content_hash
            self.abi = base.abi

    def upsert_text(self, key: str, value: str) -> None:
        if self.texts is None:
            self.texts = {}
        self.texts.pop(key, None)
        self.texts[key] = value

    def upsert_coin(self, match_key: str, coin: str, value: str) -> None:
        if self.coins is None:
            self.coins = {}
        self.coins.pop(match_key, None)
        self.coins.pop(coin, None)
        self.coins[coin] = value

    def build(self, clear_records: bool) -> RecordOptions:
        return RecordOptions(
            clear_records=clear_records,
            texts=None if self.texts is None else [TextRecordOption(key=k, value=v) for k, v in self.texts.items()],
            coins=None if self.coins is None else [CoinRecordOption(coin=k, value=v) for k, v in self.coins.items()],
            content_hash=self.content_hash,
            abi=self.abi,
        )


def _merged_avatar(current: str, incoming: str, group: ProfileRecordGroup) -> str:
    """Media avatars replace an accumulated avatar; other sources only fill a gap."""

    preferred = incoming if current and incoming and group is ProfileRecordGroup.MEDIA else current
    return preferred or current or incoming


def profile_records_to_record_options(
    records: Iterable[ProfileRecord | Mapping[str, Any]] | None = None,
    clear_records: bool = False,
    *,
    base: RecordOptions | None = None,
) -> RecordOptions:
    """Fold ``records`` left to right into a :class:`RecordOptions` payload.

    Text and address records upsert by key (last value wins, ordered by last
    occurrence). Content hash and ABI records overwrite their single slot.
    Records with an empty key or an unknown type are skipped.

    Args:
        records: Records to fold.
        clear_records: Whether the submission should wipe unlisted records.
        base: Payload to continue folding from. It is not modified.

    Returns:
        A new payload.
    """

    observability = get_observability(component="options")
    state = _OptionsAccumulator(base)

    for item in records or ():
        record = item if isinstance(item, ProfileRecord) else ProfileRecord.model_validate(item)
        if not record.key:
            observability.emit_event("record_skipped", reason="empty_key", type=record.type)
            continue

        key = record.key.strip()
        value = record.value.strip()

        if record.key == AVATAR_KEY:
            current = (state.texts or {}).get(AVATAR_KEY, "")
            state.upsert_text(AVATAR_KEY, _merged_avatar(current, value, record.group))
            continue

        record_type = record.record_type
        if record_type is RecordType.TEXT:
            state.upsert_text(key, value)
        elif record_type is RecordType.ADDR:
            state.upsert_coin(key, record.key, record.value)
        elif record_type is RecordType.CONTENTHASH:
            state.content_hash = value
        elif record_type is RecordType.ABI:
            state.abi = AbiRecordOption(content_type=ABI_CONTENT_TYPE_JSON, encoded_data=string_to_hex(value))
        else:
            observability.emit_event("record_skipped", reason="unknown_type", key=key, type=record.type)

    return state.build(bool(clear_records))


__all__ = ["profile_records_to_record_options"]
