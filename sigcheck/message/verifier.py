"""
Signed message verification.

A verification decodes the address and signature, then runs one pass per
ranged offset:

    resolve flag -> recover key -> check compression -> re-verify -> reconstruct

Only an address mismatch moves on to the next offset, so a call makes at
most two passes. All failures come back as a VerificationResult.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from sigcheck.bitcoin.addresses import (
    AddressFormatError, AddressKind, DecodedAddress, UnsupportedAddressError,
    decode_address, reconstruct_address,
)
from sigcheck.bitcoin.config import NetworkParams, get_network
from sigcheck.bitcoin.flags import RANGED_OFFSETS, InvalidFlagError, RecoveryFlag, resolve_flag
from sigcheck.crypto.ecc import RecoveryError, recover_compact, verify_der
from sigcheck.crypto.encoding import ChecksumError, EncodingError
from sigcheck.crypto.signatures import (
    SignatureFormatError, SignatureSizeError,
    compact_to_der, create_message_hash, decode_compact_signature,
)
from sigcheck.message.armor import parse_armored
from sigcheck.message.errors import (
    MessageVerificationError,
    AddressMismatchError,
    ChecksumMismatchError,
    CompressionMismatchError,
    InvalidRecoveryFlag,
    KeyRecoveryError,
    MessageEncodingError,
    SignatureDecodeError,
    SignatureLengthError,
    SignatureReverificationError,
    UnknownAddressFormatError,
    UnsupportedAddressKind,
    WrongNetworkError,
)

logger = logging.getLogger(__name__)

Network = Union[str, NetworkParams]


@dataclass(frozen=True)
class SignedMessage:
    """Verification request"""
    # Address that was used to sign the message
    address: str
    # Message that has been signed by the address
    message: str
    # Base64 compact signature over the message
    signature: str


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of a verification.

    verified is True exactly when error is None. kind and flag record the
    address kind and header byte of the pass that succeeded.
    """
    verified: bool
    error: Optional[MessageVerificationError] = None
    kind: Optional[AddressKind] = None
    flag: Optional[int] = None

    @classmethod
    def ok(cls, kind: AddressKind, flag: int) -> "VerificationResult":
        return cls(verified=True, kind=kind, flag=flag)

    @classmethod
    def fail(cls, error: MessageVerificationError) -> "VerificationResult":
        return cls(verified=False, error=error)

    def __bool__(self) -> bool:
        return self.verified

    def __iter__(self) -> Iterator:
        yield self.verified
        yield self.error


def _decode_address(address: str, params: NetworkParams) -> DecodedAddress:
    try:
        return decode_address(address, params)
    except ChecksumError as e:
        raise ChecksumMismatchError(str(e)) from e
    except EncodingError as e:
        raise UnknownAddressFormatError(str(e)) from e
    except AddressFormatError as e:
        raise WrongNetworkError(str(e)) from e
    except UnsupportedAddressError as e:
        raise UnsupportedAddressKind(str(e)) from e


def _decode_signature(signature: str) -> bytearray:
    try:
        return decode_compact_signature(signature)
    except SignatureFormatError as e:
        raise SignatureDecodeError(str(e)) from e
    except SignatureSizeError as e:
        raise SignatureLengthError(e.length) from e


def _run_pass(decoded: DecodedAddress, signature: bytearray, message: str,
              offset: int) -> RecoveryFlag:
    """One pass of flag resolution, recovery and reconstruction"""
    try:
        flag = resolve_flag(decoded.kind, offset)
    except InvalidFlagError as e:
        raise InvalidRecoveryFlag(e.value) from e

    sig = bytearray(signature)
    sig[0] = flag.recovery_header
    sig = bytes(sig)

    try:
        msg_hash = create_message_hash(message)
    except UnicodeEncodeError as e:
        raise MessageEncodingError(str(e)) from e

    try:
        key = recover_compact(sig, msg_hash)
    except RecoveryError as e:
        raise KeyRecoveryError(str(e)) from e

    # Hardware wallet segwit headers are remapped to the uncompressed range
    if flag.checks_compression and key.compressed != flag.is_compressed:
        raise CompressionMismatchError()

    if not verify_der(key.public_key, compact_to_der(sig), msg_hash):
        raise SignatureReverificationError()

    try:
        expected = reconstruct_address(decoded.kind, key, flag.is_compressed, decoded.network)
    except UnsupportedAddressError as e:
        raise UnsupportedAddressKind(str(e)) from e

    if expected != decoded.canonical:
        raise AddressMismatchError()
    return flag


def _verify(signed: SignedMessage, params: NetworkParams,
            offset: int) -> Tuple[DecodedAddress, RecoveryFlag]:
    decoded = _decode_address(signed.address, params)
    signature = _decode_signature(signed.signature)

    mismatch = None
    for current in RANGED_OFFSETS[RANGED_OFFSETS.index(offset):]:
        try:
            return decoded, _run_pass(decoded, signature, signed.message, current)
        except AddressMismatchError as e:
            logger.debug("Address mismatch for %s at offset %d", signed.address, current)
            mismatch = e
    raise mismatch


def verify_signature(signed: SignedMessage, network: Network, offset: int = 0) -> VerificationResult:
    """
    Verify a SignedMessage on a network, starting at ranged offset 0 or 1.

    Raises UnknownNetworkError for an unknown network name and ValueError for
    an offset other than 0 or 1; every other failure is returned.
    """
    if offset not in RANGED_OFFSETS:
        raise ValueError(f"Ranged offset must be 0 or 1, got {offset}")
    params = get_network(network)

    try:
        decoded, flag = _verify(signed, params, offset)
    except MessageVerificationError as e:
        logger.debug("Verification failed for %s on %s: %s", signed.address, params.name, e)
        return VerificationResult.fail(e)

    return VerificationResult.ok(decoded.kind, flag.value)


def verify(signed: SignedMessage, network: Network) -> VerificationResult:
    """Verify a SignedMessage on a network"""
    return verify_signature(signed, network, 0)


def verify_message(address: str, message: str, signature: str,
                   network: Network = "mainnet") -> VerificationResult:
    """Verify address, message and base64 signature given separately"""
    return verify(SignedMessage(address=address, message=message, signature=signature), network)


def verify_armored(armored: str, network: Network) -> VerificationResult:
    """Verify a BIP-137 ASCII armored signed message block"""
    params = get_network(network)
    try:
        address, message, signature = parse_armored(armored)
    except MessageVerificationError as e:
        logger.debug("Rejected armored block: %s", e)
        return VerificationResult.fail(e)
    return verify(SignedMessage(address=address, message=message, signature=signature), params)

