"""Tests for message framing, compact signatures and key recovery."""

import base64

import pytest
from coincurve import PrivateKey

from sigcheck.crypto.ecc import (
    SECP256K1_HALF_ORDER,
    SECP256K1_ORDER,
    RecoveryError,
    recover_compact,
    taproot_tweak_pubkey,
    verify_der,
    xonly_pubkey,
)
from sigcheck.crypto.signatures import (
    MESSAGE_MAGIC,
    SignatureFormatError,
    SignatureSizeError,
    compact_to_der,
    create_magic_message,
    create_message_hash,
    decode_compact_signature,
    encode_der_signature,
    normalize_signature,
    parse_der_signature,
    split_compact_signature,
    varint,
)
from sigcheck.crypto.hashing import sha256d

from conftest import MESSAGE, G_COMPRESSED, sign_compact


@pytest.mark.parametrize("n,expected", [
    (0, "00"),
    (0xfc, "fc"),
    (0xfd, "fdfd00"),
    (0xffff, "fdffff"),
    (0x10000, "fe00000100"),
    (0x100000000, "ff0000000001000000"),
])
def test_varint(n: int, expected: str) -> None:
    assert varint(n).hex() == expected


def test_magic_message_framing() -> None:
    assert MESSAGE_MAGIC == b"\x18Bitcoin Signed Message:\n"
    assert create_magic_message(MESSAGE) == MESSAGE_MAGIC + b"\x0bhello world"


def test_magic_message_long_and_utf8() -> None:
    framed = create_magic_message("a" * 253)
    assert framed[len(MESSAGE_MAGIC):len(MESSAGE_MAGIC) + 3] == b"\xfd\xfd\x00"

    # Length counts UTF-8 bytes, not characters
    framed = create_magic_message("é")
    assert framed[len(MESSAGE_MAGIC):] == b"\x02\xc3\xa9"


def test_message_hash() -> None:
    assert create_message_hash(MESSAGE) == sha256d(create_magic_message(MESSAGE))
    assert len(create_message_hash("")) == 32


def test_decode_compact_signature() -> None:
    raw = bytes([31]) + bytes(range(64))
    sig = decode_compact_signature(base64.b64encode(raw).decode())
    assert isinstance(sig, bytearray)
    assert sig == raw


@pytest.mark.parametrize("text", ["not base64!", "AAAA=aa", "AA=A"])
def test_decode_compact_signature_bad_base64(text: str) -> None:
    with pytest.raises(SignatureFormatError):
        decode_compact_signature(text)


@pytest.mark.parametrize("length", [0, 64, 66])
def test_decode_compact_signature_wrong_length(length: int) -> None:
    with pytest.raises(SignatureSizeError) as exc:
        decode_compact_signature(base64.b64encode(bytes(length)).decode())
    assert exc.value.length == length
    assert str(exc.value) == f"wrong signature length: {length} instead of 65"


def test_split_compact_signature() -> None:
    raw = bytes([32]) + (5).to_bytes(32, "big") + (7).to_bytes(32, "big")
    assert split_compact_signature(raw) == (32, 5, 7)


def test_der_encoding() -> None:
    der = encode_der_signature(0x80, 1)
    # High bit of r needs a leading zero byte
    assert der.hex() == "300702020080020101"
    assert parse_der_signature(der) == (0x80, 1)


def test_parse_der_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_der_signature(b"\x31\x06\x02\x01\x01\x02\x01\x01")


def test_normalize_signature_low_s() -> None:
    high = SECP256K1_ORDER - 5
    r, s = parse_der_signature(normalize_signature(encode_der_signature(9, high)))
    assert (r, s) == (9, 5)
    assert parse_der_signature(normalize_signature(encode_der_signature(9, 5))) == (9, 5)


def test_compact_to_der_is_low_s() -> None:
    raw = bytes([31]) + (3).to_bytes(32, "big") + (SECP256K1_ORDER - 2).to_bytes(32, "big")
    r, s = parse_der_signature(compact_to_der(raw))
    assert r == 3
    assert s == 2
    assert s <= SECP256K1_HALF_ORDER


def test_recover_compact(privkey) -> None:
    msg_hash = create_message_hash(MESSAGE)

    raw = base64.b64decode(sign_compact(privkey, MESSAGE, 31))
    key = recover_compact(raw, msg_hash)
    assert key.compressed is True
    assert key.public_key.format() == privkey.public_key.format()
    assert len(key.serialize()) == 33

    raw = base64.b64decode(sign_compact(privkey, MESSAGE, 27))
    key = recover_compact(raw, msg_hash)
    assert key.compressed is False
    assert len(key.serialize()) == 65
    assert verify_der(key.public_key, compact_to_der(raw), msg_hash)


@pytest.mark.parametrize("header", [0, 26, 35, 42])
def test_recover_compact_header_range(privkey, header: int) -> None:
    raw = bytearray(base64.b64decode(sign_compact(privkey, MESSAGE, 31)))
    raw[0] = header
    with pytest.raises(RecoveryError, match="recovery code"):
        recover_compact(bytes(raw), create_message_hash(MESSAGE))


def test_recover_compact_lengths() -> None:
    with pytest.raises(RecoveryError):
        recover_compact(bytes(64), bytes(32))
    with pytest.raises(RecoveryError):
        recover_compact(bytes([31]) + bytes(64), bytes(31))


def test_recover_compact_zero_signature() -> None:
    with pytest.raises(RecoveryError):
        recover_compact(bytes([31]) + bytes(64), create_message_hash(MESSAGE))


def test_verify_der_wrong_key(privkey) -> None:
    msg_hash = create_message_hash(MESSAGE)
    raw = base64.b64decode(sign_compact(privkey, MESSAGE, 31))
    other = PrivateKey(bytes(31) + b"\x01").public_key
    assert verify_der(privkey.public_key, compact_to_der(raw), msg_hash)
    assert not verify_der(other, compact_to_der(raw), msg_hash)


def test_xonly_pubkey() -> None:
    key = PrivateKey(bytes(31) + b"\x01").public_key
    assert xonly_pubkey(key) == G_COMPRESSED[1:]


def test_taproot_tweak_output(privkey) -> None:
    internal = xonly_pubkey(privkey.public_key)
    output = taproot_tweak_pubkey(internal)
    assert len(output) == 32
    assert output != internal


def test_taproot_tweak_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        taproot_tweak_pubkey(G_COMPRESSED)
