"""Unit tests for the default content hash decoder."""

import pytest

from profilesync.records.contenthash import DefaultContentHashDecoder, ProtocolTypeData, string_to_hex
from profilesync.records.schema import ContentHashData


@pytest.fixture(name="decoder")
def decoder_fixture():
    return DefaultContentHashDecoder()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("ipfs://cid", "ipfs://cid"),
        ({"protocolType": "ipns", "decoded": "name.eth"}, "ipns://name.eth"),
        (ContentHashData(protocol_type="bzz", decoded="abc"), "bzz://abc"),
        ({"protocolType": "ipfs", "decoded": ""}, ""),
        (None, ""),
        (42, ""),
    ],
)
def test_content_hash_to_string(decoder, raw, expected):
    assert decoder.content_hash_to_string(raw) == expected


@pytest.mark.parametrize(
    "encoded,expected",
    [
        ("ipfs://bafy", ProtocolTypeData("ipfs", "bafy")),
        ("onion3://p53lf57q", ProtocolTypeData("onion3", "p53lf57q")),
        ("https://gateway.io/ipfs/bafy", ProtocolTypeData("ipfs", "bafy")),
        ("/ipns/app.eth", ProtocolTypeData("ipns", "app.eth")),
        ("https://example.com", None),
        ("", None),
    ],
)
def test_get_protocol_type(decoder, encoded, expected):
    assert decoder.get_protocol_type(encoded) == expected


@pytest.mark.parametrize(
    "protocol,codec",
    [("ipfs", "ipfs"), ("bzz", "swarm"), ("sia", "skynet"), ("ar", "arweave"), ("ftp", None)],
)
def test_get_internal_codec(decoder, protocol, codec):
    assert decoder.get_internal_codec(protocol) == codec


def test_string_to_hex():
    assert string_to_hex("") == "0x"
    assert string_to_hex("hi") == "0x6869"
    assert string_to_hex("é") == "0xc3a9"
