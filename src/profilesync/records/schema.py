"""Pydantic models for profile records and the payloads built from them.

Three shapes live here:

* :class:`Profile`: the stored profile as supplied by the source reader.
* :class:`ProfileRecord`: the uniform, flattened representation of one field.
* :class:`RecordOptions`: the update payload handed to the submission layer.

:class:`ProfileEditorForm` is the editable view with the avatar lifted out.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordType(str, Enum):
    """Protocol primitive a record maps onto."""

    TEXT = "text"
    ADDR = "addr"
    CONTENTHASH = "contenthash"
    ABI = "abi"


class ProfileRecordGroup(str, Enum):
    """Display category used for sorting and constraint checks."""

    MEDIA = "media"
    GENERAL = "general"
    SOCIAL = "social"
    ADDRESS = "address"
    WEBSITE = "website"
    OTHER = "other"
    CUSTOM = "custom"


AVATAR_KEY = "avatar"
ABI_KEY = "abi"


class ProfileRecord(BaseModel):
    """A single profile field.

    Attributes:
        key: Record identifier, e.g. ``"com.twitter"`` or ``"eth"``.
        type: A :class:`RecordType`; unknown tags are kept as plain strings.
        group: Display category, independent of ``type``.
        value: Payload. An empty string marks the record as deleted.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    type: RecordType | str = Field(union_mode="left_to_right")
    group: ProfileRecordGroup
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def record_type(self) -> RecordType | None:
        """RecordType | None: Known record type, or ``None`` for unknown tags."""

        return self.type if isinstance(self.type, RecordType) else None

    @property
    def identity(self) -> tuple[str, str]:
        """tuple[str, str]: The ``(key, group)`` pair records are matched on."""

        return self.key, self.group.value

    def is_avatar(self) -> bool:
        return self.key == AVATAR_KEY and self.group is ProfileRecordGroup.MEDIA


class TextEntry(BaseModel):
    """Stored text record."""

    key: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, value: Any) -> Any:
        return "" if value is None else value


class CoinEntry(BaseModel):
    """Stored address record for one coin type."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, value: Any) -> Any:
        return "" if value is None else value


class ContentHashData(BaseModel):
    """Decoded content hash as returned by some profile readers."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_type: str | None = Field(default=None, alias="protocolType")
    decoded: str | None = None


class AbiEntry(BaseModel):
    """Stored application binary interface record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    abi: Any = None
    content_type: int | None = Field(default=None, alias="contentType")


class Profile(BaseModel):
    """Stored profile as supplied by the source reader."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    texts: List[TextEntry] = Field(default_factory=list)
    coins: List[CoinEntry] = Field(default_factory=list)
    content_hash: str | ContentHashData | None = Field(default=None, alias="contentHash")
    abi: AbiEntry | None = None

    @field_validator("texts", "coins", mode="before")
    @classmethod
    def _default_list(cls, value: Any) -> Any:
        return [] if value is None else value


class TextRecordOption(BaseModel):
    key: str
    value: str


class CoinRecordOption(BaseModel):
    coin: str
    value: str


class AbiRecordOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type: int = Field(default=1, alias="contentType")
    encoded_data: str = Field(alias="encodedData")


class RecordOptions(BaseModel):
    """Update payload grouped by protocol primitive.

    ``None`` buckets were never touched by the fold; the submission layer
    leaves the matching on-chain records alone unless ``clear_records`` is set.
    """

    model_config = ConfigDict(populate_by_name=True)

    clear_records: bool = Field(default=False, alias="clearRecords")
    texts: List[TextRecordOption] | None = None
    coins: List[CoinRecordOption] | None = None
    content_hash: str | None = Field(default=None, alias="contentHash")
    abi: AbiRecordOption | None = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the camelCase mapping consumed by the submission layer."""

        return self.model_dump(by_alias=True, exclude_none=True)


class ProfileEditorForm(BaseModel):
    """Editable profile with the avatar lifted out of the record list."""

    avatar: str = ""
    records: List[ProfileRecord] = Field(default_factory=list)
