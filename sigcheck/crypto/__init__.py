"""sigcheck cryptographic primitives"""

from sigcheck.crypto.hashing import sha256, sha256d, ripemd160, hash160, tagged_hash

from sigcheck.crypto.encoding import (
    B58_ALPHABET,
    BECH32_CHARSET,
    BECH32,
    BECH32M,
    EncodingError,
    ChecksumError,
    b58encode,
    b58decode,
    b58check_encode,
    b58check_decode,
    bech32_polymod,
    bech32_hrp_expand,
    bech32_create_checksum,
    bech32_encode,
    bech32_decode,
    convertbits,
    segwit_encode,
    segwit_decode,
)

from sigcheck.crypto.ecc import (
    SECP256K1_N,
    SECP256K1_ORDER,
    SECP256K1_HALF_ORDER,
    RecoveryError,
    RecoveredKey,
    recover_compact,
    verify_der,
    xonly_pubkey,
    taproot_tweak_pubkey,
)

from sigcheck.crypto.signatures import (
    MESSAGE_MAGIC,
    COMPACT_SIGNATURE_LENGTH,
    SignatureFormatError,
    SignatureSizeError,
    varint,
    create_magic_message,
    create_message_hash,
    decode_compact_signature,
    split_compact_signature,
    parse_der_signature,
    encode_der_signature,
    normalize_signature,
    compact_to_der,
)
