"""Content hash decoding and hex encoding helpers.

These are the narrow collaborators the classifier and options builder call
out to. :class:`DefaultContentHashDecoder` understands the URI forms a
profile reader produces (``ipfs://<cid>``, ``/ipns/<name>`` and so on) and
maps each protocol to the internal codec key used as the website record key.
Callers with a richer decoder can pass any object matching
:class:`ContentHashDecoder`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from profilesync.records.schema import ContentHashData

_URI_PATTERN = re.compile(r"^(ipfs|sia|ipns|bzz|onion|onion3|arweave|ar)://(.*)", re.DOTALL)
_PATH_PATTERNS = (
    re.compile(r"/(ipfs)/(.*)", re.DOTALL),
    re.compile(r"/(ipns)/(.*)", re.DOTALL),
)

# Display protocol -> internal codec key.
INTERNAL_CODECS = {
    "ipfs": "ipfs",
    "ipns": "ipns",
    "sia": "skynet",
    "bzz": "swarm",
    "onion": "onion",
    "onion3": "onion3",
    "arweave": "arweave",
    "ar": "arweave",
}


@dataclass(frozen=True)
class ProtocolTypeData:
    protocol_type: str
    decoded: str


class ContentHashDecoder(Protocol):
    """Interface for turning a stored content hash into a website record."""

    def content_hash_to_string(self, content_hash: Any) -> str:
        ...

    def get_protocol_type(self, encoded: str) -> ProtocolTypeData | None:
        ...

    def get_internal_codec(self, protocol_type: str) -> str | None:
        ...


class DefaultContentHashDecoder:
    """Pattern-based decoder for content hash URIs."""

    def content_hash_to_string(self, content_hash: Any) -> str:
        if isinstance(content_hash, str):
            return content_hash
        if isinstance(content_hash, Mapping):
            content_hash = ContentHashData.model_validate(content_hash)
        if isinstance(content_hash, ContentHashData) and content_hash.decoded and content_hash.protocol_type:
            return f"{content_hash.protocol_type}://{content_hash.decoded}"
        return ""

    def get_protocol_type(self, encoded: str) -> ProtocolTypeData | None:
        matched = _URI_PATTERN.match(encoded)
        if matched is None:
            for pattern in _PATH_PATTERNS:
                matched = pattern.search(encoded)
                if matched is not None:
                    break
        if matched is None:
            return None
        return ProtocolTypeData(protocol_type=matched.group(1), decoded=matched.group(2))

    def get_internal_codec(self, protocol_type: str) -> str | None:
        return INTERNAL_CODECS.get(protocol_type)


def string_to_hex(value: str) -> str:
    """Return ``value`` as a ``0x``-prefixed UTF-8 hex string."""

    return "0x" + value.encode("utf-8").hex()


__all__ = [
    "ContentHashDecoder",
    "DefaultContentHashDecoder",
    "INTERNAL_CODECS",
    "ProtocolTypeData",
    "string_to_hex",
]
