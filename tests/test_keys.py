import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from dcraddr.keys import (
    KeyParseError,
    is_compressed_secp256k1,
    parse_ed25519_pubkey,
    parse_secp256k1_pubkey,
    serialize_ed25519,
    serialize_secp256k1_compressed,
)

UNCOMPRESSED = (
    "0464c44653d6567eff5753c5d24a682ddc2b2cadfe1b0c6433b16374dace6778f0"
    "b87ca4279b565d2130ce59f75bfbb2b88da794143d7cfd3e80808a1fa3203904"
)
COMPRESSED = "0264c44653d6567eff5753c5d24a682ddc2b2cadfe1b0c6433b16374dace6778f0"
ED25519_KEY = "cecc1507dc1ddd7295951c290888f095adb9044d1b73d696e6df065d683bd4fc"


def test_uncompressed_key_serializes_compressed() -> None:
    pubkey = parse_secp256k1_pubkey(bytes.fromhex(UNCOMPRESSED))

    assert serialize_secp256k1_compressed(pubkey).hex() == COMPRESSED


def test_hybrid_key_parses_when_parity_matches() -> None:
    hybrid = bytes.fromhex("06" + UNCOMPRESSED[2:])

    pubkey = parse_secp256k1_pubkey(hybrid)

    assert serialize_secp256k1_compressed(pubkey).hex() == COMPRESSED


def test_hybrid_key_rejected_when_parity_mismatches() -> None:
    with pytest.raises(KeyParseError):
        parse_secp256k1_pubkey(bytes.fromhex("07" + UNCOMPRESSED[2:]))


@pytest.mark.parametrize(
    "hex_key",
    [
        "",
        "028f53838b7639563f27c94845549a41e5146bcd52e7fef0ea6da143a02b0fe2",
        "058f53838b7639563f27c94845549a41e5146bcd52e7fef0ea6da143a02b0fe2ed",
        "02" + "ff" * 32,
    ],
)
def test_malformed_secp256k1_keys_rejected(hex_key: str) -> None:
    with pytest.raises(KeyParseError):
        parse_secp256k1_pubkey(bytes.fromhex(hex_key))


def test_compressed_predicate() -> None:
    assert is_compressed_secp256k1(bytes.fromhex(COMPRESSED))
    assert not is_compressed_secp256k1(bytes.fromhex(UNCOMPRESSED))


def test_serialize_rejects_other_curves() -> None:
    p256_key = ec.generate_private_key(ec.SECP256R1()).public_key()

    with pytest.raises(KeyParseError):
        serialize_secp256k1_compressed(p256_key)


def test_ed25519_key_round_trips() -> None:
    pubkey = parse_ed25519_pubkey(bytes.fromhex(ED25519_KEY))

    assert isinstance(pubkey, ed25519.Ed25519PublicKey)
    assert serialize_ed25519(pubkey).hex() == ED25519_KEY


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        bytes.fromhex(ED25519_KEY)[:31],
        # y equal to the field prime is not a canonical encoding.
        bytes.fromhex("ed" + "ff" * 30 + "7f"),
        # y = 1 with the sign bit set names x = -0.
        bytes.fromhex("01" + "00" * 30 + "80"),
        # identity point
        bytes([1]) + bytes(31),
        # y = -1 is the point of order two.
        bytes.fromhex("ec" + "ff" * 30 + "7f"),
    ],
)
def test_invalid_ed25519_keys_rejected(raw: bytes) -> None:
    with pytest.raises(KeyParseError):
        parse_ed25519_pubkey(raw)
