"""Version 0 address variants, their constructors and script generators.

The set of address kinds is closed:

* pay-to-pubkey for ECDSA/secp256k1, Ed25519 and Schnorr/secp256k1 keys
* pay-to-pubkey-hash for the same three signature schemes
* pay-to-script-hash

Every hash-based kind is also a :class:`StakeAddress` and can produce the
stake-specific scripts (voting rights, reward commitment, stake change, vote
and revocation payouts, treasury payouts).  Pay-to-pubkey kinds are not.
Use :meth:`Address.as_stake_address` to ask for the capability instead of
checking types.

Values are immutable and always valid: every constructor checks the script
version, the key or hash and raises :class:`~dcraddr.errors.AddressError` on
failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from . import opcodes as op
from .base58check import NET_ID_SIZE, check_encode
from .errors import ErrorKind, make_error
from .hashing import HASH160_SIZE, hash160
from .keys import (
    PUBKEY_FORMAT_COMPRESSED_ODD,
    KeyParseError,
    is_compressed_secp256k1,
    parse_ed25519_pubkey,
    parse_secp256k1_pubkey,
    serialize_ed25519,
    serialize_secp256k1_compressed,
)
from .params import AddressParams

SCRIPT_VERSION_V0 = 0

# The first byte of the data in a pay-to-pubkey address holds the signature
# type in the low bits and the parity of the Y coordinate in the high bit.
PUBKEY_ODDNESS_BIT = 1 << 7

_AMOUNT_FLAG_SCRIPT_HASH = 1 << 63


class Address(ABC):
    """An encodable payment destination."""

    script_version: ClassVar[int] = SCRIPT_VERSION_V0

    @abstractmethod
    def address(self) -> str:
        """Return the base58 check encoded address."""

    @abstractmethod
    def payment_script(self) -> tuple[int, bytes]:
        """Return ``(script_version, script)`` paying to this address."""

    def as_stake_address(self) -> StakeAddress | None:
        """Return this address as a :class:`StakeAddress`, or ``None``."""

        return None

    def __str__(self) -> str:
        return self.address()


class StakeAddress(Address):
    """An address that can be used with the staking system."""

    def as_stake_address(self) -> StakeAddress:
        return self

    @abstractmethod
    def hash160(self) -> bytes:
        """Return the 20-byte hash the address commits to."""

    @abstractmethod
    def voting_rights_script(self) -> tuple[int, bytes]:
        """Script granting voting rights for a ticket purchase."""

    @abstractmethod
    def reward_commitment_script(self, amount: int, fee_limits: int) -> tuple[int, bytes]:
        """Script committing the original contribution and fee limits of a ticket."""

    @abstractmethod
    def stake_change_script(self) -> tuple[int, bytes]:
        """Script paying change from a ticket purchase."""

    @abstractmethod
    def pay_vote_commitment_script(self) -> tuple[int, bytes]:
        """Script paying the reward of a vote back to the committed address."""

    @abstractmethod
    def pay_revoke_commitment_script(self) -> tuple[int, bytes]:
        """Script paying a revoked ticket back to the committed address."""

    @abstractmethod
    def pay_from_treasury_script(self) -> tuple[int, bytes]:
        """Script receiving funds in a treasury spend."""


def _check_net_id(value: bytes, field_name: str) -> bytes:
    value = bytes(value)
    if len(value) != NET_ID_SIZE:
        raise ValueError(f"{field_name} must be {NET_ID_SIZE} bytes, got {len(value)}")
    return value


# ---------------------------------------------------------------------------
# Pay-to-pubkey
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _PubKeyAddressV0(Address):
    pubkey_id: bytes
    pubkey_hash_id: bytes
    pubkey: bytes

    sig_type: ClassVar[int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pubkey_id", _check_net_id(self.pubkey_id, "pubkey_id"))
        object.__setattr__(
            self, "pubkey_hash_id", _check_net_id(self.pubkey_hash_id, "pubkey_hash_id")
        )
        object.__setattr__(self, "pubkey", bytes(self.pubkey or b""))
        self._validate_pubkey(self.pubkey)

    @classmethod
    @abstractmethod
    def _validate_pubkey(cls, serialized: bytes) -> None:
        ...

    @abstractmethod
    def _address_data(self) -> bytes:
        ...

    def address(self) -> str:
        return check_encode(self._address_data(), self.pubkey_id)

    def serialized_pubkey(self) -> bytes:
        """Return the serialized public key the address pays to."""

        return self.pubkey


@dataclass(frozen=True)
class _Secp256k1PubKeyAddressV0(_PubKeyAddressV0):
    @classmethod
    def _validate_pubkey(cls, serialized: bytes) -> None:
        try:
            parse_secp256k1_pubkey(serialized)
        except KeyParseError as exc:
            raise make_error(
                ErrorKind.INVALID_PUBKEY, f"failed to parse public key: {exc}"
            ) from exc

        # Uncompressed and hybrid encodings parse fine but are rejected so
        # that every key has exactly one address.
        if not is_compressed_secp256k1(serialized):
            raise make_error(
                ErrorKind.INVALID_PUBKEY_FORMAT,
                f"serialized public key {serialized.hex()} is not a compressed secp256k1 key",
            )

    def _address_data(self) -> bytes:
        flag = self.sig_type
        if self.pubkey[0] == PUBKEY_FORMAT_COMPRESSED_ODD:
            flag |= PUBKEY_ODDNESS_BIT
        return bytes([flag]) + self.pubkey[1:]


@dataclass(frozen=True)
class AddressPubKeyEcdsaSecp256k1V0(_Secp256k1PubKeyAddressV0):
    """Pay-to-pubkey address for an ECDSA secp256k1 key."""

    sig_type: ClassVar[int] = op.SIG_TYPE_ECDSA_SECP256K1

    def payment_script(self) -> tuple[int, bytes]:
        # <33-byte pubkey> OP_CHECKSIG
        return self.script_version, bytes([op.OP_DATA_33]) + self.pubkey + bytes([op.OP_CHECKSIG])

    def address_pubkey_hash(self) -> AddressPubKeyHashEcdsaSecp256k1V0:
        return AddressPubKeyHashEcdsaSecp256k1V0(self.pubkey_hash_id, hash160(self.pubkey))


@dataclass(frozen=True)
class AddressPubKeySchnorrSecp256k1V0(_Secp256k1PubKeyAddressV0):
    """Pay-to-pubkey address for a secp256k1 key used with Schnorr signatures."""

    sig_type: ClassVar[int] = op.SIG_TYPE_SCHNORR_SECP256K1

    def payment_script(self) -> tuple[int, bytes]:
        # <33-byte pubkey> 2 OP_CHECKSIGALT
        script = (
            bytes([op.OP_DATA_33])
            + self.pubkey
            + bytes([op.OP_2, op.OP_CHECKSIGALT])
        )
        return self.script_version, script

    def address_pubkey_hash(self) -> AddressPubKeyHashSchnorrSecp256k1V0:
        return AddressPubKeyHashSchnorrSecp256k1V0(self.pubkey_hash_id, hash160(self.pubkey))


@dataclass(frozen=True)
class AddressPubKeyEd25519V0(_PubKeyAddressV0):
    """Pay-to-pubkey address for an Ed25519 key."""

    sig_type: ClassVar[int] = op.SIG_TYPE_ED25519

    @classmethod
    def _validate_pubkey(cls, serialized: bytes) -> None:
        try:
            parse_ed25519_pubkey(serialized)
        except KeyParseError as exc:
            raise make_error(
                ErrorKind.INVALID_PUBKEY, f"failed to parse public key: {exc}"
            ) from exc

    def _address_data(self) -> bytes:
        return bytes([self.sig_type]) + self.pubkey

    def payment_script(self) -> tuple[int, bytes]:
        # <32-byte pubkey> 1 OP_CHECKSIGALT
        script = (
            bytes([op.OP_DATA_32])
            + self.pubkey
            + bytes([op.OP_1, op.OP_CHECKSIGALT])
        )
        return self.script_version, script

    def address_pubkey_hash(self) -> AddressPubKeyHashEd25519V0:
        return AddressPubKeyHashEd25519V0(self.pubkey_hash_id, hash160(self.pubkey))


# ---------------------------------------------------------------------------
# Hash based (pay-to-pubkey-hash and pay-to-script-hash)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _HashAddressV0(StakeAddress):
    net_id: bytes
    digest: bytes

    is_script_hash: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "net_id", _check_net_id(self.net_id, "net_id"))
        digest = bytes(self.digest or b"")
        if len(digest) != HASH160_SIZE:
            raise make_error(
                ErrorKind.INVALID_HASH_LEN,
                f"hash of {len(digest)} bytes is not the required {HASH160_SIZE} bytes",
            )
        object.__setattr__(self, "digest", digest)

    @abstractmethod
    def _payment_body(self) -> bytes:
        ...

    def address(self) -> str:
        return check_encode(self.digest, self.net_id)

    def hash160(self) -> bytes:
        return self.digest

    def payment_script(self) -> tuple[int, bytes]:
        return self.script_version, self._payment_body()

    def _tagged_script(self, tag: int) -> tuple[int, bytes]:
        return self.script_version, bytes([tag]) + self._payment_body()

    def voting_rights_script(self) -> tuple[int, bytes]:
        return self._tagged_script(op.OP_SSTX)

    def reward_commitment_script(self, amount: int, fee_limits: int) -> tuple[int, bytes]:
        # OP_RETURN <30-byte push: hash || 8-byte LE amount || 2-byte LE fee limits>
        #
        # The most significant bit of the amount marks whether the hash is a
        # script hash.
        if not 0 <= amount < _AMOUNT_FLAG_SCRIPT_HASH:
            raise ValueError(f"amount {amount} must be non-negative and below 2**63")
        if not 0 <= fee_limits <= 0xFFFF:
            raise ValueError(f"fee limits {fee_limits} do not fit in 16 bits")

        encoded_amount = amount
        if self.is_script_hash:
            encoded_amount |= _AMOUNT_FLAG_SCRIPT_HASH

        script = (
            bytes([op.OP_RETURN, op.OP_DATA_30])
            + self.digest
            + encoded_amount.to_bytes(8, "little")
            + fee_limits.to_bytes(2, "little")
        )
        return self.script_version, script

    def stake_change_script(self) -> tuple[int, bytes]:
        return self._tagged_script(op.OP_SSTXCHANGE)

    def pay_vote_commitment_script(self) -> tuple[int, bytes]:
        return self._tagged_script(op.OP_SSGEN)

    def pay_revoke_commitment_script(self) -> tuple[int, bytes]:
        return self._tagged_script(op.OP_SSRTX)

    def pay_from_treasury_script(self) -> tuple[int, bytes]:
        return self._tagged_script(op.OP_TGEN)


@dataclass(frozen=True)
class _PubKeyHashAddressV0(_HashAddressV0):
    checksig: ClassVar[bytes]

    def _payment_body(self) -> bytes:
        # OP_DUP OP_HASH160 <20-byte hash> OP_EQUALVERIFY <checksig>
        return (
            bytes([op.OP_DUP, op.OP_HASH160, op.OP_DATA_20])
            + self.digest
            + bytes([op.OP_EQUALVERIFY])
            + self.checksig
        )


@dataclass(frozen=True)
class AddressPubKeyHashEcdsaSecp256k1V0(_PubKeyHashAddressV0):
    """Pay-to-pubkey-hash address for an ECDSA secp256k1 key."""

    checksig: ClassVar[bytes] = bytes([op.OP_CHECKSIG])


@dataclass(frozen=True)
class AddressPubKeyHashEd25519V0(_PubKeyHashAddressV0):
    """Pay-to-pubkey-hash address for an Ed25519 key."""

    checksig: ClassVar[bytes] = bytes([op.OP_1, op.OP_CHECKSIGALT])


@dataclass(frozen=True)
class AddressPubKeyHashSchnorrSecp256k1V0(_PubKeyHashAddressV0):
    """Pay-to-pubkey-hash address for a secp256k1 key used with Schnorr signatures."""

    checksig: ClassVar[bytes] = bytes([op.OP_2, op.OP_CHECKSIGALT])


@dataclass(frozen=True)
class AddressScriptHashV0(_HashAddressV0):
    """Pay-to-script-hash address."""

    is_script_hash: ClassVar[bool] = True

    def _payment_body(self) -> bytes:
        # OP_HASH160 <20-byte hash> OP_EQUAL
        return bytes([op.OP_HASH160, op.OP_DATA_20]) + self.digest + bytes([op.OP_EQUAL])


# ---------------------------------------------------------------------------
# Version 0 constructors
# ---------------------------------------------------------------------------


def new_address_pubkey_ecdsa_secp256k1_v0_raw(
    serialized_pubkey: bytes, params: AddressParams
) -> AddressPubKeyEcdsaSecp256k1V0:
    """Create a pay-to-pubkey address from a compressed secp256k1 key."""

    return AddressPubKeyEcdsaSecp256k1V0(
        params.addr_id_pubkey_v0(), params.addr_id_pubkey_hash_ecdsa_v0(), serialized_pubkey
    )


def new_address_pubkey_ecdsa_secp256k1_v0(
    pubkey: ec.EllipticCurvePublicKey, params: AddressParams
) -> AddressPubKeyEcdsaSecp256k1V0:
    return new_address_pubkey_ecdsa_secp256k1_v0_raw(_compressed(pubkey), params)


def new_address_pubkey_schnorr_secp256k1_v0_raw(
    serialized_pubkey: bytes, params: AddressParams
) -> AddressPubKeySchnorrSecp256k1V0:
    return AddressPubKeySchnorrSecp256k1V0(
        params.addr_id_pubkey_v0(), params.addr_id_pubkey_hash_schnorr_v0(), serialized_pubkey
    )


def new_address_pubkey_schnorr_secp256k1_v0(
    pubkey: ec.EllipticCurvePublicKey, params: AddressParams
) -> AddressPubKeySchnorrSecp256k1V0:
    return new_address_pubkey_schnorr_secp256k1_v0_raw(_compressed(pubkey), params)


def new_address_pubkey_ed25519_v0_raw(
    serialized_pubkey: bytes, params: AddressParams
) -> AddressPubKeyEd25519V0:
    return AddressPubKeyEd25519V0(
        params.addr_id_pubkey_v0(), params.addr_id_pubkey_hash_ed25519_v0(), serialized_pubkey
    )


def new_address_pubkey_ed25519_v0(
    pubkey: ed25519.Ed25519PublicKey, params: AddressParams
) -> AddressPubKeyEd25519V0:
    try:
        serialized = serialize_ed25519(pubkey)
    except KeyParseError as exc:
        raise make_error(ErrorKind.INVALID_PUBKEY, str(exc)) from exc
    return new_address_pubkey_ed25519_v0_raw(serialized, params)


def new_address_pubkey_hash_ecdsa_secp256k1_v0(
    pk_hash: bytes, params: AddressParams
) -> AddressPubKeyHashEcdsaSecp256k1V0:
    return AddressPubKeyHashEcdsaSecp256k1V0(params.addr_id_pubkey_hash_ecdsa_v0(), pk_hash)


def new_address_pubkey_hash_ed25519_v0(
    pk_hash: bytes, params: AddressParams
) -> AddressPubKeyHashEd25519V0:
    return AddressPubKeyHashEd25519V0(params.addr_id_pubkey_hash_ed25519_v0(), pk_hash)


def new_address_pubkey_hash_schnorr_secp256k1_v0(
    pk_hash: bytes, params: AddressParams
) -> AddressPubKeyHashSchnorrSecp256k1V0:
    return AddressPubKeyHashSchnorrSecp256k1V0(params.addr_id_pubkey_hash_schnorr_v0(), pk_hash)


def new_address_script_hash_v0_from_hash(
    script_hash: bytes, params: AddressParams
) -> AddressScriptHashV0:
    return AddressScriptHashV0(params.addr_id_script_hash_v0(), script_hash)


def new_address_script_hash_v0(redeem_script: bytes, params: AddressParams) -> AddressScriptHashV0:
    """Create a pay-to-script-hash address by hashing *redeem_script*."""

    return new_address_script_hash_v0_from_hash(hash160(bytes(redeem_script)), params)


def _compressed(pubkey: ec.EllipticCurvePublicKey) -> bytes:
    try:
        return serialize_secp256k1_compressed(pubkey)
    except KeyParseError as exc:
        raise make_error(ErrorKind.INVALID_PUBKEY, str(exc)) from exc


# ---------------------------------------------------------------------------
# Versioned constructors
# ---------------------------------------------------------------------------


def _check_script_version(script_version: int) -> None:
    if script_version != SCRIPT_VERSION_V0:
        raise make_error(
            ErrorKind.UNSUPPORTED_SCRIPT_VERSION,
            f"script version {script_version} is not supported",
        )


def new_address_pubkey_ecdsa_secp256k1_raw(
    script_version: int, serialized_pubkey: bytes, params: AddressParams
) -> Address:
    _check_script_version(script_version)
    return new_address_pubkey_ecdsa_secp256k1_v0_raw(serialized_pubkey, params)


def new_address_pubkey_ecdsa_secp256k1(
    script_version: int, pubkey: ec.EllipticCurvePublicKey, params: AddressParams
) -> Address:
    """Create a pay-to-pubkey address from a parsed secp256k1 key.

    The key is always serialized in compressed form, so a key that was parsed
    from an uncompressed encoding yields the address of its compressed form.
    """

    _check_script_version(script_version)
    return new_address_pubkey_ecdsa_secp256k1_v0(pubkey, params)


def new_address_pubkey_schnorr_secp256k1_raw(
    script_version: int, serialized_pubkey: bytes, params: AddressParams
) -> Address:
    _check_script_version(script_version)
    return new_address_pubkey_schnorr_secp256k1_v0_raw(serialized_pubkey, params)


def new_address_pubkey_schnorr_secp256k1(
    script_version: int, pubkey: ec.EllipticCurvePublicKey, params: AddressParams
) -> Address:
    _check_script_version(script_version)
    return new_address_pubkey_schnorr_secp256k1_v0(pubkey, params)


def new_address_pubkey_ed25519_raw(
    script_version: int, serialized_pubkey: bytes, params: AddressParams
) -> Address:
    _check_script_version(script_version)
    return new_address_pubkey_ed25519_v0_raw(serialized_pubkey, params)


def new_address_pubkey_ed25519(
    script_version: int, pubkey: ed25519.Ed25519PublicKey, params: AddressParams
) -> Address:
    _check_script_version(script_version)
    return new_address_pubkey_ed25519_v0(pubkey, params)


def new_address_pubkey_hash_ecdsa_secp256k1(
    script_version: int, pk_hash: bytes, params: AddressParams
) -> StakeAddress:
    _check_script_version(script_version)
    return new_address_pubkey_hash_ecdsa_secp256k1_v0(pk_hash, params)


def new_address_pubkey_hash_ed25519(
    script_version: int, pk_hash: bytes, params: AddressParams
) -> StakeAddress:
    _check_script_version(script_version)
    return new_address_pubkey_hash_ed25519_v0(pk_hash, params)


def new_address_pubkey_hash_schnorr_secp256k1(
    script_version: int, pk_hash: bytes, params: AddressParams
) -> StakeAddress:
    _check_script_version(script_version)
    return new_address_pubkey_hash_schnorr_secp256k1_v0(pk_hash, params)


def new_address_script_hash(
    script_version: int, redeem_script: bytes, params: AddressParams
) -> StakeAddress:
    _check_script_version(script_version)
    return new_address_script_hash_v0(redeem_script, params)


def new_address_script_hash_from_hash(
    script_version: int, script_hash: bytes, params: AddressParams
) -> StakeAddress:
    _check_script_version(script_version)
    return new_address_script_hash_v0_from_hash(script_hash, params)
