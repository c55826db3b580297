"""sigcheck - verify Bitcoin signed messages against P2PKH, P2SH-P2WPKH, P2WPKH and P2TR addresses."""

__version__ = "1.0.0"

from sigcheck.bitcoin.config import Config, NetworkParams, NETWORKS, get_network
from sigcheck.message import (
    MessageVerificationError,
    AddressDecodeError,
    ChecksumMismatchError,
    UnknownAddressFormatError,
    WrongNetworkError,
    MessageEncodingError,
    SignatureDecodeError,
    SignatureLengthError,
    UnsupportedAddressKind,
    InvalidRecoveryFlag,
    KeyRecoveryError,
    CompressionMismatchError,
    SignatureReverificationError,
    AddressMismatchError,
    ArmorFormatError,
    SignedMessage,
    VerificationResult,
    verify,
    verify_signature,
    verify_message,
    verify_armored,
)
