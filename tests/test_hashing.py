import pytest

from dcraddr.hashing import CHECKSUM_SIZE, HASH160_SIZE, checksum, hash160, ripemd160, sha256


def test_hash160_of_generator_point_pubkey() -> None:
    pubkey = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")

    digest = hash160(pubkey)

    assert len(digest) == HASH160_SIZE
    assert digest.hex() == "751e76e8199196d454941c45d1b3a323f1433bd6"


def test_sha256_known_value() -> None:
    assert sha256(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_checksum_is_deterministic_and_short() -> None:
    first = checksum(b"\x07\x3f" + b"\x00" * 20)
    second = checksum(b"\x07\x3f" + b"\x00" * 20)

    assert first == second
    assert len(first) == CHECKSUM_SIZE
    assert checksum(b"\x07\x3f" + b"\x01" * 20) != first


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        (b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
        (b"abc", "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"),
        (b"message digest", "5d0689ef49d2fae572b881b123a85ffa21595f36"),
    ],
)
def test_ripemd160_reference_vectors(message: bytes, expected: str) -> None:
    assert ripemd160(message).hex() == expected


def test_hash160_of_uncompressed_generator_pubkey() -> None:
    pubkey = bytes.fromhex(
        "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    )

    assert hash160(pubkey).hex() == "91b24bf9f5288532960ac687abb035127b1d28a5"
