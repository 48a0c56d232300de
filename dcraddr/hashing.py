"""Digest helpers used to fingerprint keys and scripts and to checksum addresses."""

from __future__ import annotations

import hashlib

from blake256.blake256 import blake_hash
from Crypto.Hash import RIPEMD160

HASH160_SIZE = 20
CHECKSUM_SIZE = 4


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    return RIPEMD160.new(bytes(data)).digest()


def hash160(data: bytes) -> bytes:
    """Return ``ripemd160(sha256(data))``, the 20-byte fingerprint of *data*.

    Pay-to-pubkey-hash and pay-to-script-hash payloads are derived from
    serialized public keys and redeem scripts with this function.
    """

    return ripemd160(sha256(data))


def blake256(data: bytes) -> bytes:
    return bytes(blake_hash(bytes(data)))


def checksum(data: bytes) -> bytes:
    """Return the 4-byte address checksum: the head of a double BLAKE-256."""

    return blake256(blake256(data))[:CHECKSUM_SIZE]
