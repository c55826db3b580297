"""Bitcoin signed message verification"""

from sigcheck.message.errors import (
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
)
from sigcheck.message.armor import parse_armored, format_armored
from sigcheck.message.verifier import (
    SignedMessage,
    VerificationResult,
    verify,
    verify_signature,
    verify_message,
    verify_armored,
)
