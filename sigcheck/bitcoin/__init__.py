"""
sigcheck.bitcoin - Bitcoin address and network utilities.

Re-exports the public API from submodules.
"""

from sigcheck.bitcoin.config import (
    Config,
    NetworkParams,
    NETWORKS,
    MAINNET,
    TESTNET,
    SIGNET,
    REGTEST,
    UnknownNetworkError,
    get_network,
)
from sigcheck.bitcoin.addresses import (
    AddressKind,
    DecodedAddress,
    AddressFormatError,
    UnsupportedAddressError,
    decode_address,
    encode_address,
    reconstruct_address,
    derive_addresses,
)
from sigcheck.bitcoin.flags import (
    FlagConvention,
    RecoveryFlag,
    InvalidFlagError,
    resolve_flag,
)

__all__ = [
    # config
    "Config",
    "NetworkParams",
    "NETWORKS",
    "MAINNET",
    "TESTNET",
    "SIGNET",
    "REGTEST",
    "UnknownNetworkError",
    "get_network",
    # addresses
    "AddressKind",
    "DecodedAddress",
    "AddressFormatError",
    "UnsupportedAddressError",
    "decode_address",
    "encode_address",
    "reconstruct_address",
    "derive_addresses",
    # flags
    "FlagConvention",
    "RecoveryFlag",
    "InvalidFlagError",
    "resolve_flag",
]
