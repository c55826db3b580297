"""
Network parameters and service configuration for sigcheck.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Union

logger = logging.getLogger(__name__)


class UnknownNetworkError(ValueError):
    """Raised for a network name that is not in the parameter table"""


@dataclass(frozen=True)
class NetworkParams:
    """Address encoding parameters of one chain"""
    name: str
    pubkey_hash_version: int
    script_hash_version: int
    bech32_hrp: str

    @property
    def pubkey_hash_prefix(self) -> bytes:
        return bytes([self.pubkey_hash_version])

    @property
    def script_hash_prefix(self) -> bytes:
        return bytes([self.script_hash_version])


MAINNET = NetworkParams("mainnet", 0x00, 0x05, "bc")
TESTNET = NetworkParams("testnet", 0x6f, 0xc4, "tb")
SIGNET = NetworkParams("signet", 0x6f, 0xc4, "tb")
REGTEST = NetworkParams("regtest", 0x6f, 0xc4, "bcrt")

NETWORKS: Mapping[str, NetworkParams] = MappingProxyType({
    params.name: params for params in (MAINNET, TESTNET, SIGNET, REGTEST)
})

SEGWIT_HRPS = frozenset(params.bech32_hrp for params in NETWORKS.values())


def get_network(network: Union[str, NetworkParams, None] = None) -> NetworkParams:
    """Resolve a network name (or params) to its parameter table entry"""
    if isinstance(network, NetworkParams):
        return network
    name = network or Config.NETWORK
    if not isinstance(name, str):
        raise UnknownNetworkError(f"Unknown network {network!r}")
    name = name.lower()
    if name == "testnet3" or name == "testnet4":
        name = "testnet"
    try:
        return NETWORKS[name]
    except KeyError:
        raise UnknownNetworkError(f"Unknown network '{network}'") from None


class Config:
    """Service configuration"""
    # Data directory for settings
    SETTINGS_DIR = Path.home() / ".sigcheck"

    # Network: "mainnet", "testnet", "signet" or "regtest"
    NETWORK = "mainnet"

    # Development server
    HOST = "127.0.0.1"
    PORT = 5000

    # Largest message accepted by the web API, in bytes
    MAX_MESSAGE_BYTES = 64 * 1024

    @classmethod
    def settings_path(cls) -> Path:
        return cls.SETTINGS_DIR / "settings.json"

    @classmethod
    def params(cls) -> NetworkParams:
        return get_network(cls.NETWORK)

    @classmethod
    def load_saved_settings(cls, path: Path = None) -> bool:
        """Load settings from the JSON settings file if it exists"""
        config_path = path or cls.settings_path()
        if not config_path.exists():
            return False
        try:
            with open(config_path, 'r') as f:
                settings = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", config_path, e)
            return False

        if 'network' in settings:
            if settings['network'] in NETWORKS:
                cls.NETWORK = settings['network']
            else:
                logger.warning("Ignoring unknown network '%s' in %s", settings['network'], config_path)
        if 'host' in settings:
            cls.HOST = settings['host']
        if 'port' in settings:
            cls.PORT = int(settings['port'])
        if 'max_message_bytes' in settings:
            cls.MAX_MESSAGE_BYTES = int(settings['max_message_bytes'])
        return True
