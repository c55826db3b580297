from typing import Tuple, List

from sigcheck.crypto.hashing import sha256d


B58_ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'

BECH32_CHARSET = 'qpzry9x8gf2tvdw0s3jn54khce6mua7l'

# Checksum constants: BIP-173 (bech32) and BIP-350 (bech32m)
BECH32_CONST = 1
BECH32M_CONST = 0x2bc830a3

BECH32 = 'bech32'
BECH32M = 'bech32m'


class EncodingError(ValueError):
    """Text could not be decoded by any address codec"""


class ChecksumError(EncodingError):
    """Text decoded but its checksum does not match"""


def b58encode(data: bytes) -> str:
    """Base58 encode (no checksum)"""
    n = int.from_bytes(data, 'big')
    result = ''
    while n > 0:
        n, r = divmod(n, 58)
        result = B58_ALPHABET[r] + result
    for byte in data:
        if byte == 0:
            result = '1' + result
        else:
            break
    return result or '1'


def b58decode(text: str) -> bytes:
    """Base58 decode (no checksum)"""
    if not text:
        raise EncodingError("Empty Base58 string")
    n = 0
    for c in text:
        idx = B58_ALPHABET.find(c)
        if idx < 0:
            raise EncodingError(f"Invalid Base58 character {c!r}")
        n = n * 58 + idx
    body = n.to_bytes((n.bit_length() + 7) // 8, 'big') if n else b''
    pad = len(text) - len(text.lstrip('1'))
    return b'\x00' * pad + body


def b58check_encode(version: bytes, payload: bytes) -> str:
    """Base58Check encode with version byte and checksum"""
    data = version + payload
    checksum = sha256d(data)[:4]
    return b58encode(data + checksum)


def b58check_decode(addr: str) -> Tuple[bytes, bytes]:
    """Base58Check decode, returns (version, payload)"""
    data = b58decode(addr)
    if len(data) < 5:
        raise EncodingError("Base58Check data too short")
    version, payload, checksum = data[0:1], data[1:-4], data[-4:]
    if sha256d(version + payload)[:4] != checksum:
        raise ChecksumError("checksum mismatch")
    return version, payload


def bech32_polymod(values: List[int]) -> int:
    """Bech32 checksum computation"""
    GEN = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for v in values:
        b = chk >> 25
        chk = ((chk & 0x1ffffff) << 5) ^ v
        for i in range(5):
            chk ^= GEN[i] if ((b >> i) & 1) else 0
    return chk


def bech32_hrp_expand(hrp: str) -> List[int]:
    """Expand HRP for checksum computation"""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def bech32_create_checksum(hrp: str, data: List[int], spec: str = BECH32) -> List[int]:
    """Create Bech32 or Bech32m checksum"""
    const = BECH32M_CONST if spec == BECH32M else BECH32_CONST
    values = bech32_hrp_expand(hrp) + data
    polymod = bech32_polymod(values + [0, 0, 0, 0, 0, 0]) ^ const
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def bech32_verify_checksum(hrp: str, data: List[int]) -> str:
    """Return which checksum variant matches, raise if neither does"""
    const = bech32_polymod(bech32_hrp_expand(hrp) + data)
    if const == BECH32_CONST:
        return BECH32
    if const == BECH32M_CONST:
        return BECH32M
    raise ChecksumError("invalid bech32 checksum")


def bech32_encode(hrp: str, data: List[int], spec: str = BECH32) -> str:
    """Encode to Bech32 / Bech32m"""
    combined = data + bech32_create_checksum(hrp, data, spec)
    return hrp + '1' + ''.join([BECH32_CHARSET[d] for d in combined])


def bech32_decode(bech: str) -> Tuple[str, List[int], str]:
    """Decode Bech32 / Bech32m string, returns (hrp, data, spec)"""
    if any(ord(c) < 33 or ord(c) > 126 for c in bech):
        raise EncodingError("Invalid character in bech32 string")
    if bech.lower() != bech and bech.upper() != bech:
        raise EncodingError("Mixed case bech32 string")
    bech = bech.lower()
    pos = bech.rfind('1')
    if pos < 1 or pos + 7 > len(bech) or len(bech) > 90:
        raise EncodingError("Invalid bech32 separator position or length")
    hrp = bech[:pos]
    data = []
    for c in bech[pos + 1:]:
        idx = BECH32_CHARSET.find(c)
        if idx < 0:
            raise EncodingError(f"Invalid bech32 character {c!r}")
        data.append(idx)
    spec = bech32_verify_checksum(hrp, data)
    return hrp, data[:-6], spec


def convertbits(data: List[int], frombits: int, tobits: int, pad: bool = True) -> List[int]:
    """Convert between bit widths"""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise EncodingError("Value out of range for bit conversion")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        raise EncodingError("Invalid padding in bit conversion")
    return ret


def segwit_encode(hrp: str, witness_version: int, witness_program: bytes) -> str:
    """Encode a segwit address (bech32 for v0, bech32m for v1+)"""
    spec = BECH32 if witness_version == 0 else BECH32M
    return bech32_encode(hrp, [witness_version] + convertbits(witness_program, 8, 5), spec)


def segwit_decode(addr: str) -> Tuple[str, int, bytes]:
    """Decode segwit address, returns (hrp, witness_version, witness_program)"""
    hrp, data, spec = bech32_decode(addr)
    if not data:
        raise EncodingError("Empty witness data")
    witness_version = data[0]
    if witness_version > 16:
        raise EncodingError(f"Invalid witness version {witness_version}")
    witness_program = bytes(convertbits(data[1:], 5, 8, pad=False))
    if len(witness_program) < 2 or len(witness_program) > 40:
        raise EncodingError(f"Invalid witness program length {len(witness_program)}")
    if witness_version == 0 and len(witness_program) not in (20, 32):
        raise EncodingError(f"Invalid v0 witness program length {len(witness_program)}")
    if (witness_version == 0) != (spec == BECH32):
        raise ChecksumError(f"Witness version {witness_version} must not use {spec}")
    return hrp, witness_version, witness_program
