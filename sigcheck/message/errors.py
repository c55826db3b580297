"""
Signed message verification errors.

Every failure of a verification is one of these; the orchestrator returns
them inside a VerificationResult rather than raising.
"""


class MessageVerificationError(Exception):
    """Base class for verification failures"""
    reason = "verification failed"

    def __init__(self, message: str = None):
        self.message = message or self.reason
        super().__init__(self.message)


class AddressDecodeError(MessageVerificationError):
    reason = "could not decode address"

    def __init__(self, detail: str = None):
        self.detail = detail
        super().__init__(f"{self.reason}: {detail}" if detail else None)


class ChecksumMismatchError(AddressDecodeError):
    """Address text decodes but its checksum is wrong"""


class UnknownAddressFormatError(AddressDecodeError):
    """No address codec accepts the text"""


class WrongNetworkError(AddressDecodeError):
    """Address is valid on a different network"""


class MessageEncodingError(MessageVerificationError):
    reason = "message is not encodable as UTF-8"


class SignatureDecodeError(MessageVerificationError):
    reason = "signature is not valid base64"


class SignatureLengthError(MessageVerificationError):
    reason = "wrong signature length"

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"wrong signature length: {length} instead of 65")


class UnsupportedAddressKind(MessageVerificationError):
    reason = "unsupported address type"


class InvalidRecoveryFlag(MessageVerificationError):
    reason = "invalid recovery flag"

    def __init__(self, flag: int):
        self.flag = flag
        super().__init__(f"invalid recovery flag: {flag}")


class KeyRecoveryError(MessageVerificationError):
    reason = "could not recover pubkey"

    def __init__(self, detail: str = None):
        self.detail = detail
        super().__init__(f"{self.reason}: {detail}" if detail else None)


class CompressionMismatchError(MessageVerificationError):
    reason = "recovered key compression does not match the recovery flag"


class SignatureReverificationError(MessageVerificationError):
    reason = "signature does not verify against the recovered key"


class AddressMismatchError(MessageVerificationError):
    reason = "address mismatched"


class ArmorFormatError(MessageVerificationError):
    reason = "message is not a valid BIP-137 armored block"
