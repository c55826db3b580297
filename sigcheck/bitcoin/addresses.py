"""
Bitcoin address decoding and reconstruction from public keys.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from sigcheck.crypto.hashing import hash160
from sigcheck.crypto.encoding import (
    ChecksumError, EncodingError,
    b58check_decode, b58check_encode, segwit_decode, segwit_encode,
)
from sigcheck.crypto.ecc import RecoveredKey, xonly_pubkey, taproot_tweak_pubkey
from sigcheck.bitcoin.config import NetworkParams, SEGWIT_HRPS, get_network


class AddressKind(Enum):
    P2PKH = "p2pkh"
    P2SH_P2WPKH = "p2sh-p2wpkh"
    P2WPKH = "p2wpkh"
    P2TR = "p2tr"


class AddressFormatError(ValueError):
    """Address text is well formed but not valid for the network"""


class UnsupportedAddressError(ValueError):
    """Address decodes but is not one of the supported kinds"""


@dataclass(frozen=True)
class DecodedAddress:
    kind: AddressKind
    payload: bytes
    network: NetworkParams
    text: str

    @property
    def canonical(self) -> str:
        """Address re-encoded from kind and payload (lower-case bech32)"""
        return encode_address(self.kind, self.payload, self.network)


def encode_address(kind: AddressKind, payload: bytes, params: NetworkParams) -> str:
    if kind is AddressKind.P2PKH:
        return b58check_encode(params.pubkey_hash_prefix, payload)
    if kind is AddressKind.P2SH_P2WPKH:
        return b58check_encode(params.script_hash_prefix, payload)
    if kind is AddressKind.P2WPKH:
        return segwit_encode(params.bech32_hrp, 0, payload)
    if kind is AddressKind.P2TR:
        return segwit_encode(params.bech32_hrp, 1, payload)
    raise UnsupportedAddressError(f"unsupported address type '{kind}'")


def p2wpkh_redeem_script(pubkey_hash: bytes) -> bytes:
    """Witness v0 keyhash program: OP_0 PUSH20 <hash160(pubkey)>"""
    return bytes([0x00, 0x14]) + pubkey_hash


def _decode_segwit(address: str, params: NetworkParams) -> DecodedAddress:
    hrp, witness_version, program = segwit_decode(address)
    if hrp != params.bech32_hrp:
        raise AddressFormatError(f"address is for another network (hrp '{hrp}')")

    if witness_version == 0 and len(program) == 20:
        return DecodedAddress(AddressKind.P2WPKH, program, params, address)
    if witness_version == 1 and len(program) == 32:
        return DecodedAddress(AddressKind.P2TR, program, params, address)
    raise UnsupportedAddressError(
        f"unsupported address type 'witness v{witness_version}, {len(program)}-byte program'"
    )


def _decode_base58(address: str, params: NetworkParams) -> DecodedAddress:
    try:
        version, payload = b58check_decode(address)
    except EncodingError as e:
        if isinstance(e, ChecksumError):
            raise
        raise EncodingError("decoded address is of unknown format") from e

    if len(payload) != 20:
        raise EncodingError("decoded address is of unknown format")

    if version == params.pubkey_hash_prefix:
        return DecodedAddress(AddressKind.P2PKH, payload, params, address)
    # Script hashes are taken to wrap a P2WPKH program
    if version == params.script_hash_prefix:
        return DecodedAddress(AddressKind.P2SH_P2WPKH, payload, params, address)
    raise AddressFormatError(f"unknown address type (version byte 0x{version.hex()})")


def decode_address(address: str, network: Union[str, NetworkParams]) -> DecodedAddress:
    """
    Decode address text for the given network.

    Raises EncodingError (ChecksumError on checksum mismatch) for text no codec
    accepts, AddressFormatError for addresses of another network, and
    UnsupportedAddressError for valid addresses of other kinds.
    """
    params = get_network(network)

    pos = address.rfind('1')
    if pos > 0 and address[:pos].lower() in SEGWIT_HRPS:
        return _decode_segwit(address, params)
    return _decode_base58(address, params)


def derive_p2pkh(pubkey: bytes, params: NetworkParams) -> str:
    """Legacy address for a serialized public key"""
    return b58check_encode(params.pubkey_hash_prefix, hash160(pubkey))


def derive_p2sh_p2wpkh(pubkey_compressed: bytes, params: NetworkParams) -> str:
    """Nested segwit address for a compressed public key"""
    redeem_script = p2wpkh_redeem_script(hash160(pubkey_compressed))
    return b58check_encode(params.script_hash_prefix, hash160(redeem_script))


def derive_p2wpkh(pubkey_compressed: bytes, params: NetworkParams) -> str:
    """Native segwit (bech32, v0) address for a compressed public key"""
    return segwit_encode(params.bech32_hrp, 0, hash160(pubkey_compressed))


def derive_p2tr(internal_key: bytes, params: NetworkParams) -> str:
    """Taproot (bech32m, v1) key-path address for an x-only internal key"""
    return segwit_encode(params.bech32_hrp, 1, taproot_tweak_pubkey(internal_key))


def reconstruct_address(kind: AddressKind, key: RecoveredKey, compressed: bool,
                        params: NetworkParams) -> str:
    """
    Address that `key` controls for the given kind.

    `compressed` comes from the recovery flag and only affects P2PKH; the
    segwit kinds always commit to the compressed key.
    """
    if kind is AddressKind.P2PKH:
        return derive_p2pkh(key.public_key.format(compressed=compressed), params)
    if kind is AddressKind.P2SH_P2WPKH:
        return derive_p2sh_p2wpkh(key.public_key.format(compressed=True), params)
    if kind is AddressKind.P2WPKH:
        return derive_p2wpkh(key.public_key.format(compressed=True), params)
    if kind is AddressKind.P2TR:
        return derive_p2tr(xonly_pubkey(key.public_key), params)
    raise UnsupportedAddressError(f"unsupported address type '{kind}'")


def derive_addresses(pubkey_compressed: bytes, network: Union[str, NetworkParams]) -> Dict[str, str]:
    """All supported addresses for a compressed public key"""
    params = get_network(network)
    return {
        'legacy': derive_p2pkh(pubkey_compressed, params),
        'nested_segwit': derive_p2sh_p2wpkh(pubkey_compressed, params),
        'segwit': derive_p2wpkh(pubkey_compressed, params),
        'taproot': derive_p2tr(pubkey_compressed[1:], params),
        'pubkey_hash': hash160(pubkey_compressed).hex(),
    }
