import hashlib

from Crypto.Hash import RIPEMD160


def sha256(data: bytes) -> bytes:
    """Single SHA256 hash"""
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """Double SHA256 hash (Bitcoin standard)"""
    return sha256(sha256(data))


def ripemd160(data: bytes) -> bytes:
    """RIPEMD160 hash (pycryptodome, hashlib may lack it on OpenSSL 3)"""
    h = RIPEMD160.new()
    h.update(data)
    return h.digest()


def hash160(data: bytes) -> bytes:
    """HASH160: SHA256 followed by RIPEMD160"""
    return ripemd160(sha256(data))


def tagged_hash(tag: str, data: bytes) -> bytes:
    """BIP-340 tagged hash: SHA256(SHA256(tag) || SHA256(tag) || data)"""
    tag_hash = sha256(tag.encode('utf-8'))
    return sha256(tag_hash + tag_hash + data)
