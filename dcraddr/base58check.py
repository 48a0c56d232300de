"""Base58 check encoding with a two-byte network identifier.

The layout is ``net_id (2 bytes) || payload || checksum (4 bytes)`` where the
checksum covers the network identifier and the payload.
"""

from __future__ import annotations

import base58

from .hashing import CHECKSUM_SIZE, checksum

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
NET_ID_SIZE = 2

_ALPHABET_SET = frozenset(ALPHABET)


class Base58FormatError(ValueError):
    """Raised when a string is not well-formed base58 check data."""


class Base58ChecksumError(ValueError):
    """Raised when the embedded checksum does not match the data."""


def check_encode(payload: bytes, net_id: bytes) -> str:
    """Encode *payload* prefixed with the two-byte *net_id*."""

    if len(net_id) != NET_ID_SIZE:
        raise ValueError(f"net_id must be {NET_ID_SIZE} bytes, got {len(net_id)}")
    data = bytes(net_id) + bytes(payload)
    return base58.b58encode(data + checksum(data)).decode("ascii")


def check_decode(text: str) -> tuple[bytes, bytes]:
    """Decode *text* and return ``(payload, net_id)``.

    Raises :class:`Base58FormatError` for characters outside the alphabet or
    data too short to hold a network identifier and checksum, and
    :class:`Base58ChecksumError` when the checksum does not verify.
    """

    if any(character not in _ALPHABET_SET for character in text):
        raise Base58FormatError("string contains characters outside the base58 alphabet")

    decoded = base58.b58decode(text)
    if len(decoded) < NET_ID_SIZE + CHECKSUM_SIZE:
        raise Base58FormatError(
            f"decoded data is {len(decoded)} bytes, need at least {NET_ID_SIZE + CHECKSUM_SIZE}"
        )

    data, embedded = decoded[:-CHECKSUM_SIZE], decoded[-CHECKSUM_SIZE:]
    if checksum(data) != embedded:
        raise Base58ChecksumError("checksum mismatch")
    return data[NET_ID_SIZE:], data[:NET_ID_SIZE]
