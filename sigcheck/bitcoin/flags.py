"""
Signature header byte (recovery flag) conventions.

BIP-137 header ranges:
  27..30  P2PKH, uncompressed key
  31..34  P2PKH, compressed key
  35..38  P2SH-P2WPKH (hardware wallet segwit convention)
  39..42  P2WPKH      (hardware wallet segwit convention)

The recovery primitive only understands 27..34, so the segwit ranges are
rewritten to 27 + recovery id before recovery.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from sigcheck.bitcoin.addresses import AddressKind


UNCOMPRESSED_RECOVERY_FLAG = 27
COMPRESSED_RECOVERY_FLAG = 31


class FlagConvention(Enum):
    STANDARD = "standard"
    TREZOR_SEGWIT = "trezor-segwit"


@dataclass(frozen=True)
class FlagRange:
    base: int
    convention: FlagConvention
    compressed: bool

    @property
    def values(self) -> range:
        return range(self.base, self.base + 4)


FLAG_RANGES: Tuple[FlagRange, ...] = (
    FlagRange(27, FlagConvention.STANDARD, False),
    FlagRange(31, FlagConvention.STANDARD, True),
    FlagRange(35, FlagConvention.TREZOR_SEGWIT, True),
    FlagRange(39, FlagConvention.TREZOR_SEGWIT, True),
)

ALL_FLAGS = frozenset(v for fr in FLAG_RANGES for v in fr.values)
UNCOMPRESSED_FLAGS = frozenset(v for fr in FLAG_RANGES if not fr.compressed for v in fr.values)
TREZOR_FLAGS = frozenset(
    v for fr in FLAG_RANGES if fr.convention is FlagConvention.TREZOR_SEGWIT for v in fr.values
)

# Base header written into the signature before recovery, per address kind.
# Taproot keys are x-only, the recovery convention marks them uncompressed.
BASE_FLAGS = {
    AddressKind.P2PKH: COMPRESSED_RECOVERY_FLAG,
    AddressKind.P2SH_P2WPKH: COMPRESSED_RECOVERY_FLAG,
    AddressKind.P2WPKH: COMPRESSED_RECOVERY_FLAG,
    AddressKind.P2TR: UNCOMPRESSED_RECOVERY_FLAG,
}

RANGED_OFFSETS = (0, 1)


class InvalidFlagError(ValueError):
    """Header byte is outside every recognized range"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"invalid recovery flag: {value}")


def _range_for(value: int) -> FlagRange:
    for fr in FLAG_RANGES:
        if value in fr.values:
            return fr
    raise InvalidFlagError(value)


@dataclass(frozen=True)
class RecoveryFlag:
    """A validated header byte and what it says about the key"""
    value: int

    def __post_init__(self):
        if self.value not in ALL_FLAGS:
            raise InvalidFlagError(self.value)

    @property
    def recovery_id(self) -> int:
        return self.value - _range_for(self.value).base

    @property
    def is_compressed(self) -> bool:
        return self.value not in UNCOMPRESSED_FLAGS

    @property
    def convention(self) -> FlagConvention:
        return _range_for(self.value).convention

    @property
    def checks_compression(self) -> bool:
        return self.convention is not FlagConvention.TREZOR_SEGWIT

    @property
    def recovery_header(self) -> int:
        """Header byte handed to the recovery primitive"""
        if self.value in TREZOR_FLAGS:
            return UNCOMPRESSED_RECOVERY_FLAG + self.recovery_id
        return self.value


def base_flag(kind: AddressKind) -> int:
    """Header base for an address kind"""
    return BASE_FLAGS[kind]


def resolve_flag(kind: AddressKind, offset: int) -> RecoveryFlag:
    """Header byte to try for `kind` at ranged offset 0 or 1"""
    if offset not in RANGED_OFFSETS:
        raise ValueError(f"Ranged offset must be 0 or 1, got {offset}")
    return RecoveryFlag(base_flag(kind) + offset)
