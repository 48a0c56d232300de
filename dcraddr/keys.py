"""Public key parsing for the secp256k1 and Ed25519 curves.

Keys are represented with the ``cryptography`` public key types.  The parsing
helpers here accept the raw encodings that show up in addresses and scripts
and reject anything that does not describe a point on the curve.
"""

from __future__ import annotations

import nacl.bindings
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

SECP256K1_FIELD_SIZE = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F

PUBKEY_COMPRESSED_LEN = 33
PUBKEY_UNCOMPRESSED_LEN = 65

PUBKEY_FORMAT_COMPRESSED_EVEN = 0x02
PUBKEY_FORMAT_COMPRESSED_ODD = 0x03
PUBKEY_FORMAT_UNCOMPRESSED = 0x04
PUBKEY_FORMAT_HYBRID_EVEN = 0x06
PUBKEY_FORMAT_HYBRID_ODD = 0x07

ED25519_PUBKEY_LEN = 32


class KeyParseError(ValueError):
    """Raised when bytes do not describe a valid public key."""


def parse_secp256k1_pubkey(data: bytes) -> ec.EllipticCurvePublicKey:
    """Parse a compressed, uncompressed or hybrid secp256k1 public key.

    Hybrid keys (0x06/0x07) carry both coordinates plus a parity flag in the
    format byte; the flag has to agree with the Y coordinate.
    """

    data = bytes(data)
    if not data:
        raise KeyParseError("public key is empty")

    key_format = data[0]
    if len(data) == PUBKEY_COMPRESSED_LEN:
        if key_format not in (PUBKEY_FORMAT_COMPRESSED_EVEN, PUBKEY_FORMAT_COMPRESSED_ODD):
            raise KeyParseError(f"invalid compressed public key format 0x{key_format:02x}")
        encoded = data
    elif len(data) == PUBKEY_UNCOMPRESSED_LEN:
        if key_format == PUBKEY_FORMAT_UNCOMPRESSED:
            encoded = data
        elif key_format in (PUBKEY_FORMAT_HYBRID_EVEN, PUBKEY_FORMAT_HYBRID_ODD):
            y = int.from_bytes(data[33:], "big")
            if y & 1 != key_format & 1:
                raise KeyParseError("hybrid public key format does not match y parity")
            encoded = bytes([PUBKEY_FORMAT_UNCOMPRESSED]) + data[1:]
        else:
            raise KeyParseError(f"invalid uncompressed public key format 0x{key_format:02x}")
    else:
        raise KeyParseError(f"malformed public key: invalid length {len(data)}")

    x = int.from_bytes(encoded[1:33], "big")
    if x >= SECP256K1_FIELD_SIZE:
        raise KeyParseError("public key x coordinate exceeds field size")

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), encoded)
    except ValueError as exc:
        raise KeyParseError(f"public key is not on the secp256k1 curve: {exc}") from exc


def is_compressed_secp256k1(data: bytes) -> bool:
    return len(data) == PUBKEY_COMPRESSED_LEN and data[0] in (
        PUBKEY_FORMAT_COMPRESSED_EVEN,
        PUBKEY_FORMAT_COMPRESSED_ODD,
    )


def serialize_secp256k1_compressed(pubkey: ec.EllipticCurvePublicKey) -> bytes:
    """Return the 33-byte compressed encoding of a secp256k1 public key."""

    if not isinstance(pubkey, ec.EllipticCurvePublicKey):
        raise KeyParseError(f"expected an elliptic curve public key, got {type(pubkey).__name__}")
    if pubkey.curve.name != ec.SECP256K1.name:
        raise KeyParseError(f"public key is on curve {pubkey.curve.name}, not secp256k1")
    return pubkey.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


def parse_ed25519_pubkey(data: bytes) -> ed25519.Ed25519PublicKey:
    data = bytes(data)
    if len(data) != ED25519_PUBKEY_LEN:
        raise KeyParseError(
            f"malformed Ed25519 public key: got {len(data)} bytes, want {ED25519_PUBKEY_LEN}"
        )
    # libsodium also rejects small order points.
    if not nacl.bindings.crypto_core_ed25519_is_valid_point(data):
        raise KeyParseError("public key is not a valid Ed25519 point")
    return ed25519.Ed25519PublicKey.from_public_bytes(data)


def serialize_ed25519(pubkey: ed25519.Ed25519PublicKey) -> bytes:
    if not isinstance(pubkey, ed25519.Ed25519PublicKey):
        raise KeyParseError(f"expected an Ed25519 public key, got {type(pubkey).__name__}")
    return pubkey.public_bytes(Encoding.Raw, PublicFormat.Raw)
