import base64
import binascii
from typing import Tuple

from sigcheck.crypto.hashing import sha256d
from sigcheck.crypto.ecc import SECP256K1_ORDER, SECP256K1_HALF_ORDER


MESSAGE_MAGIC = b'\x18Bitcoin Signed Message:\n'

COMPACT_SIGNATURE_LENGTH = 65


class SignatureFormatError(ValueError):
    """Signature text is not valid base64"""


class SignatureSizeError(ValueError):
    """Decoded signature has the wrong number of bytes"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"wrong signature length: {length} instead of {COMPACT_SIGNATURE_LENGTH}")


def varint(n: int) -> bytes:
    """Encode integer as Bitcoin varint"""
    if n < 0xfd:
        return bytes([n])
    elif n <= 0xffff:
        return b'\xfd' + n.to_bytes(2, 'little')
    elif n <= 0xffffffff:
        return b'\xfe' + n.to_bytes(4, 'little')
    else:
        return b'\xff' + n.to_bytes(8, 'little')


def create_magic_message(message: str) -> bytes:
    """Frame message as MAGIC || varint(len) || message"""
    msg_bytes = message.encode('utf-8')
    return MESSAGE_MAGIC + varint(len(msg_bytes)) + msg_bytes


def create_message_hash(message: str) -> bytes:
    """
    Create Bitcoin signed message hash.
    Format: SHA256(SHA256("\\x18Bitcoin Signed Message:\\n" + varint(len) + message))
    """
    return sha256d(create_magic_message(message))


def decode_compact_signature(signature: str) -> bytearray:
    """
    Decode a base64 compact signature into its 65 raw bytes.

    Returned as a bytearray so the header byte can be rewritten.
    """
    try:
        raw = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SignatureFormatError(f"illegal base64 data: {e}") from e

    if len(raw) != COMPACT_SIGNATURE_LENGTH:
        raise SignatureSizeError(len(raw))
    return bytearray(raw)


def split_compact_signature(sig: bytes) -> Tuple[int, int, int]:
    """Split compact signature into (header, r, s)"""
    return (
        sig[0],
        int.from_bytes(sig[1:33], 'big'),
        int.from_bytes(sig[33:65], 'big'),
    )


def parse_der_signature(sig: bytes) -> Tuple[int, int]:
    """Parse DER signature into (r, s) integers"""
    if len(sig) < 8 or sig[0] != 0x30:
        raise ValueError("Invalid DER signature")

    idx = 2

    if sig[idx] != 0x02:
        raise ValueError("Invalid DER signature")
    idx += 1
    r_len = sig[idx]
    idx += 1
    r = int.from_bytes(sig[idx:idx + r_len], 'big')
    idx += r_len

    if sig[idx] != 0x02:
        raise ValueError("Invalid DER signature")
    idx += 1
    s_len = sig[idx]
    idx += 1
    s = int.from_bytes(sig[idx:idx + s_len], 'big')

    return r, s


def encode_der_signature(r: int, s: int) -> bytes:
    """Encode (r, s) integers as DER signature"""
    def encode_int(n: int) -> bytes:
        b = n.to_bytes((n.bit_length() + 7) // 8 or 1, 'big')
        if b[0] & 0x80:
            b = b'\x00' + b
        return bytes([0x02, len(b)]) + b

    r_enc = encode_int(r)
    s_enc = encode_int(s)
    payload = r_enc + s_enc
    return bytes([0x30, len(payload)]) + payload


def normalize_signature(sig_der: bytes) -> bytes:
    """Normalize signature to low-S form per BIP-62"""
    r, s = parse_der_signature(sig_der)

    if s > SECP256K1_HALF_ORDER:
        s = SECP256K1_ORDER - s

    return encode_der_signature(r, s)


def compact_to_der(sig: bytes) -> bytes:
    """Low-S DER encoding of the r || s part of a compact signature"""
    _, r, s = split_compact_signature(sig)
    return normalize_signature(encode_der_signature(r, s))
