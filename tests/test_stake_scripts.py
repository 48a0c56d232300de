import pytest

from dcraddr import (
    MAINNET,
    TESTNET,
    StakeAddress,
    new_address_pubkey_hash_ecdsa_secp256k1,
    new_address_pubkey_hash_ed25519,
    new_address_pubkey_hash_schnorr_secp256k1,
    new_address_script_hash_from_hash,
)

DIGEST = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")

PKH_CASES = [
    (new_address_pubkey_hash_ecdsa_secp256k1, "ac"),
    (new_address_pubkey_hash_ed25519, "51be"),
    (new_address_pubkey_hash_schnorr_secp256k1, "52be"),
]


@pytest.fixture
def p2sh() -> StakeAddress:
    return new_address_script_hash_from_hash(0, DIGEST, MAINNET)


@pytest.mark.parametrize(("constructor", "checksig"), PKH_CASES)
def test_pubkey_hash_stake_scripts_prefix_payment_script(constructor, checksig: str) -> None:
    addr = constructor(0, DIGEST, TESTNET)
    body = "76a914" + DIGEST.hex() + "88" + checksig

    assert addr.as_stake_address() is addr
    assert addr.voting_rights_script() == (0, bytes.fromhex("ba" + body))
    assert addr.stake_change_script() == (0, bytes.fromhex("bd" + body))
    assert addr.pay_vote_commitment_script() == (0, bytes.fromhex("bb" + body))
    assert addr.pay_revoke_commitment_script() == (0, bytes.fromhex("bc" + body))
    assert addr.pay_from_treasury_script() == (0, bytes.fromhex("c3" + body))


def test_script_hash_stake_scripts_prefix_payment_script(p2sh: StakeAddress) -> None:
    body = "a914" + DIGEST.hex() + "87"

    assert p2sh.as_stake_address() is p2sh
    assert p2sh.voting_rights_script() == (0, bytes.fromhex("ba" + body))
    assert p2sh.stake_change_script() == (0, bytes.fromhex("bd" + body))
    assert p2sh.pay_vote_commitment_script() == (0, bytes.fromhex("bb" + body))
    assert p2sh.pay_revoke_commitment_script() == (0, bytes.fromhex("bc" + body))
    assert p2sh.pay_from_treasury_script() == (0, bytes.fromhex("c3" + body))


@pytest.mark.parametrize(("constructor", "checksig"), PKH_CASES)
def test_pubkey_hash_reward_commitment(constructor, checksig: str) -> None:
    addr = constructor(0, DIGEST, MAINNET)

    version, script = addr.reward_commitment_script(100_000_000, 0x5800)

    assert version == 0
    assert script.hex() == "6a1e" + DIGEST.hex() + "00e1f50500000000" + "0058"
    assert len(script) == 32


def test_script_hash_reward_commitment_sets_amount_flag(p2sh: StakeAddress) -> None:
    _, script = p2sh.reward_commitment_script(100_000_000, 0x5800)

    assert script.hex() == "6a1e" + DIGEST.hex() + "00e1f50500000080" + "0058"
    assert script[29] & 0x80


def test_pubkey_hash_reward_commitment_leaves_amount_flag_clear() -> None:
    addr = new_address_pubkey_hash_ecdsa_secp256k1(0, DIGEST, MAINNET)

    _, script = addr.reward_commitment_script((1 << 63) - 1, 0)

    assert script[22:30] == bytes.fromhex("ffffffffffffff7f")
    assert script[30:] == b"\x00\x00"


@pytest.mark.parametrize("constructor", [constructor for constructor, _ in PKH_CASES])
def test_pubkey_hash_reward_commitment_amounts_never_collide(constructor) -> None:
    addr = constructor(0, DIGEST, MAINNET)

    largest = addr.reward_commitment_script((1 << 63) - 1, 0)

    with pytest.raises(ValueError):
        addr.reward_commitment_script(-1, 0)
    assert largest != addr.reward_commitment_script((1 << 63) - 2, 0)


def test_reward_commitment_is_deterministic(p2sh: StakeAddress) -> None:
    first = p2sh.reward_commitment_script(12_345, 0x1234)
    second = p2sh.reward_commitment_script(12_345, 0x1234)
    other_amount = p2sh.reward_commitment_script(12_346, 0x1234)

    assert first == second
    assert first[1][:22] == other_amount[1][:22]
    assert first[1][22:30] != other_amount[1][22:30]
    assert first[1][30:] == bytes.fromhex("3412")


@pytest.mark.parametrize(
    ("amount", "fee_limits"),
    [(1 << 63, 0), (-1, 0), (-(1 << 63), 0), (0, -1), (0, 0x10000)],
)
def test_reward_commitment_rejects_out_of_range_values(p2sh: StakeAddress, amount: int, fee_limits: int) -> None:
    with pytest.raises(ValueError):
        p2sh.reward_commitment_script(amount, fee_limits)
