"""Shared vectors and fixtures for sigcheck tests."""

import base64

import pytest
from coincurve import PrivateKey

from sigcheck.bitcoin.config import Config
from sigcheck.crypto.signatures import create_message_hash


MESSAGE = "hello world"

# Signatures over MESSAGE produced by UniSat and OKX wallets
UNISAT_MAINNET = {
    "p2tr": (
        "bc1pead7k9rdu4ged9q7qt2hqcxr6sx2jvxp7z86tqa8a9tncct657dq6cn4y7",
        "G3loPvTHNcZ8DrPBthoq/VEYoEaH3XXQN4T5gXa5RgG9DHlAn4QFk3oqIjEntXo8CHNoynoH1AF4BMBbXHDWMT4=",
    ),
    "p2wpkh": (
        "bc1qp290l5642zjpj0arcqrqjfnk9sm99gcx4egdxg",
        "HK0zjJT1BNzVyfuY02aPzVLNf71mlw0DQIkKX+iyCOJkKf5CeH8T07xkj+qggmSqy7HliylMd1GKq+b5xlOzHME=",
    ),
    "p2sh-p2wpkh": (
        "3Pk3gGKJmftjgDc4ykhXRZKkvf7PSwhfwa",
        "G34VIXQLfn0BQpdQRVw8zqLXc0F2BZzEjtkqmwsHIngPE80EKKsYcxPzQ/emI5ejG/FkKCViRKG809tcHUR8fbU=",
    ),
    "p2pkh": (
        "1DFox8Q22CAftbgPJwKAA2PZ446ARuepnP",
        "HC4YrhY0qTsgGlOGRmSzHzwRTUsYIFjkiKRlIffhXV/kUQWAAYG9NDjV441JlwsbqR7WUNrqGGqMcbfTGaa66Z8=",
    ),
}

UNISAT_TESTNET = {
    "p2tr": (
        "tb1pead7k9rdu4ged9q7qt2hqcxr6sx2jvxp7z86tqa8a9tncct657dqds9673",
        "HBapBhmp8LcqF+9Nej4nnNvCaLdIQvD1qH27UaNSaq7hCYWsXBRO92mv8tHbv1iPJwkAb+EqXdmDyILd+NxGGf8=",
    ),
    "p2wpkh": (
        "tb1qp290l5642zjpj0arcqrqjfnk9sm99gcxlln7am",
        "G+UOhPKmZOyfIbiZ3Mv7QQ2fHZ0RntihWbZ46//PCvaOYvYze+Dgb4epd49NbN3RWuKayJxGD1o8oq8Kq54Mgl0=",
    ),
    "p2sh-p2wpkh": (
        "2NFJFk1FLP8Q5t1EcetKQ3WK291KZEoUPbm",
        "G0lDvE3WkasJk33EPH2tFyRCb0I3eEtkHQhqmHGOarG7ODaG5VXQ0Ziclz8naiYbThF20qNJnWgjlzinBuIMZR8=",
    ),
    "p2pkh": (
        "msmmFBUzqDbvfiA12WHXywbsv3gsKd1Kke",
        "G3HjU+tnrcmlwnQ7n7q6tToXgk1gcDa1nfxoFumKpQ03aKe4/ymiI7YHvnonnZNa4hKtfvazYXkq2VVtL/Wky2I=",
    ),
}

OKX_MAINNET = {
    "p2tr": (
        "bc1prx22p25nvvf5sjvuvdzek095eahmnl5mfapxf4vec94nkm3g49hsf0tg9y",
        "IOIzS2zyKFXyyTP2ZJP5E18bENjlYNHvzbqHHn9muz/6XkuumgcvlyWaSprT7yfNDLPQ6o+IoAEd+wc48iwtGE4=",
    ),
    "p2wpkh": (
        "bc1qtqnuww423nacmj0d2705qm6r72hqneavvs2gmx",
        "IMW7tLuVMPDcRvA86QQZn912WDUTVbEsaFU/QF8uy3xcMaJZk/Xomwvr6BFiOvIB9qqPHjc02eH2xc0mhF0KtKM=",
    ),
    "p2pkh": (
        "12u8y8GbAwZezip25KLpJTPzcuUBTHNbT3",
        "H/Q3xf1Lr1/gMoSLQQec16+gdT8mg/es7X6rFgC2x30FTkU3LxGHkXHEPzke4i3Lmn8EwIhr6zopacWFkgfgKdU=",
    ),
    "p2sh-p2wpkh": (
        "3MTbJEyWaNsYVjRzcjUCc34yoxE5CNZKm4",
        "H/Or+rgO5LA3UrajQU+lzaoWPhXFyCsepmV4r5gebwKnS3WDb4Vc4XgtHXT/NIejO8gfPQNFEa+dEKCgnNMztPo=",
    ),
}

# Generator point G, private key 1
G_COMPRESSED = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
G_HASH160 = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")


def sign_compact(privkey: PrivateKey, message: str, header_base: int) -> str:
    """Base64 compact signature with header header_base + recovery id"""
    sig = privkey.sign_recoverable(create_message_hash(message), hasher=None)
    return base64.b64encode(bytes([header_base + sig[64]]) + sig[:64]).decode("ascii")


def recovery_id_of(privkey: PrivateKey, message: str) -> int:
    return privkey.sign_recoverable(create_message_hash(message), hasher=None)[64]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep Config class attributes and settings file per test"""
    monkeypatch.setattr(Config, "NETWORK", "mainnet")
    monkeypatch.setattr(Config, "SETTINGS_DIR", tmp_path / ".sigcheck")
    monkeypatch.setattr(Config, "HOST", "127.0.0.1")
    monkeypatch.setattr(Config, "PORT", 5000)
    monkeypatch.setattr(Config, "MAX_MESSAGE_BYTES", 64 * 1024)


@pytest.fixture
def privkey() -> PrivateKey:
    return PrivateKey(bytes.fromhex("e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"))
