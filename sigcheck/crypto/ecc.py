"""
secp256k1 operations used for message verification.

Point arithmetic is delegated to libsecp256k1 through coincurve; this module
only adapts the compact signature convention to it.
"""

from dataclasses import dataclass

from coincurve import PublicKey

from sigcheck.crypto.hashing import tagged_hash


# secp256k1 group order
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_ORDER = SECP256K1_N
SECP256K1_HALF_ORDER = SECP256K1_ORDER // 2

# Compact signature header bytes understood by the recovery primitive
COMPACT_HEADER_MIN = 27
COMPACT_HEADER_MAX = 34


class RecoveryError(ValueError):
    """The compact signature does not yield a public key"""


@dataclass(frozen=True)
class RecoveredKey:
    """Public key recovered from a compact signature"""
    public_key: PublicKey
    compressed: bool

    def serialize(self) -> bytes:
        return self.public_key.format(compressed=self.compressed)


def recover_compact(signature: bytes, msg_hash: bytes) -> RecoveredKey:
    """
    Recover the signing key from a 65-byte compact signature.

    The header must lie in 27..34: (header - 27) & 3 is the recovery id and
    (header - 27) & 4 marks a compressed key.
    """
    if len(signature) != 65:
        raise RecoveryError(f"Invalid compact signature length {len(signature)}")
    if len(msg_hash) != 32:
        raise RecoveryError(f"Invalid message hash length {len(msg_hash)}")

    header = signature[0]
    if not COMPACT_HEADER_MIN <= header <= COMPACT_HEADER_MAX:
        raise RecoveryError(f"Invalid compact signature recovery code {header}")

    code = header - COMPACT_HEADER_MIN
    recovery_id = code & 3
    compressed = bool(code & 4)

    # coincurve wants r || s || recid
    recoverable = signature[1:] + bytes([recovery_id])
    try:
        public_key = PublicKey.from_signature_and_message(recoverable, msg_hash, hasher=None)
    except ValueError as e:
        raise RecoveryError(str(e)) from e

    return RecoveredKey(public_key=public_key, compressed=compressed)


def verify_der(public_key: PublicKey, sig_der: bytes, msg_hash: bytes) -> bool:
    """Verify a low-S DER signature over a 32-byte hash"""
    try:
        return public_key.verify(sig_der, msg_hash, hasher=None)
    except ValueError:
        return False


def xonly_pubkey(public_key: PublicKey) -> bytes:
    """32-byte x-only serialization (BIP-340)"""
    return public_key.format(compressed=True)[1:]


def taproot_tweak_pubkey(internal_key: bytes) -> bytes:
    """
    BIP-341 key-path tweak without a script tree.

    Q = lift_x(P) + int(hashTapTweak(P)) * G, returns x(Q).
    """
    if len(internal_key) != 32:
        raise ValueError(f"Invalid x-only key length {len(internal_key)}")
    tweak = tagged_hash("TapTweak", internal_key)
    if int.from_bytes(tweak, 'big') >= SECP256K1_ORDER:
        raise ValueError("Taproot tweak exceeds curve order")
    # lift_x picks the even-y point
    point = PublicKey(b'\x02' + internal_key)
    return xonly_pubkey(point.add(tweak))
