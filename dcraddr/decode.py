"""Decoding of text addresses into address values."""

from __future__ import annotations

import logging
from operator import methodcaller
from typing import Callable

from . import opcodes as op
from .address import (
    PUBKEY_ODDNESS_BIT,
    Address,
    new_address_pubkey_ecdsa_secp256k1_v0_raw,
    new_address_pubkey_ed25519_v0_raw,
    new_address_pubkey_hash_ecdsa_secp256k1_v0,
    new_address_pubkey_hash_ed25519_v0,
    new_address_pubkey_hash_schnorr_secp256k1_v0,
    new_address_pubkey_schnorr_secp256k1_v0_raw,
    new_address_script_hash_v0_from_hash,
)
from .base58check import ALPHABET, Base58ChecksumError, Base58FormatError, check_decode
from .errors import AddressError, ErrorKind, make_error
from .keys import PUBKEY_FORMAT_COMPRESSED_EVEN, PUBKEY_FORMAT_COMPRESSED_ODD
from .params import AddressParams

logger = logging.getLogger(__name__)

# Encoded lengths of every supported version 0 address: 35 characters for
# the hash based kinds and 53 for pay-to-pubkey.
_V0_ADDRESS_LENGTHS = frozenset({35, 53})
_BASE58_CHARS = frozenset(ALPHABET)

_PUBKEY_DATA_LEN = 33


def probably_v0_base58_addr(text: str) -> bool:
    """Cheaply check whether *text* could be a version 0 base58 address.

    Only the length and the alphabet are examined; the string is not decoded.
    """

    if len(text) not in _V0_ADDRESS_LENGTHS:
        return False
    return all(character in _BASE58_CHARS for character in text)


def _decode_pubkey_v0(data: bytes, params: AddressParams) -> Address:
    # identifier byte (signature type | y oddness) || 32 bytes of key material
    if len(data) != _PUBKEY_DATA_LEN:
        raise make_error(
            ErrorKind.MALFORMED_ADDRESS_DATA,
            f"pay-to-pubkey data is {len(data)} bytes, want {_PUBKEY_DATA_LEN}",
        )

    sig_type = data[0] & ~PUBKEY_ODDNESS_BIT
    is_odd = bool(data[0] & PUBKEY_ODDNESS_BIT)
    if sig_type in (op.SIG_TYPE_ECDSA_SECP256K1, op.SIG_TYPE_SCHNORR_SECP256K1):
        key_format = PUBKEY_FORMAT_COMPRESSED_ODD if is_odd else PUBKEY_FORMAT_COMPRESSED_EVEN
        serialized = bytes([key_format]) + data[1:]
        if sig_type == op.SIG_TYPE_ECDSA_SECP256K1:
            return new_address_pubkey_ecdsa_secp256k1_v0_raw(serialized, params)
        return new_address_pubkey_schnorr_secp256k1_v0_raw(serialized, params)
    if sig_type == op.SIG_TYPE_ED25519 and not is_odd:
        return new_address_pubkey_ed25519_v0_raw(data[1:], params)

    raise make_error(
        ErrorKind.MALFORMED_ADDRESS_DATA,
        f"pay-to-pubkey data specifies unsupported signature type byte 0x{data[0]:02x}",
    )


_Decoder = Callable[[bytes, AddressParams], Address]

_V0_DECODERS: tuple[tuple[Callable[[AddressParams], bytes], _Decoder], ...] = (
    (methodcaller("addr_id_pubkey_v0"), _decode_pubkey_v0),
    (methodcaller("addr_id_pubkey_hash_ecdsa_v0"), new_address_pubkey_hash_ecdsa_secp256k1_v0),
    (methodcaller("addr_id_pubkey_hash_ed25519_v0"), new_address_pubkey_hash_ed25519_v0),
    (methodcaller("addr_id_pubkey_hash_schnorr_v0"), new_address_pubkey_hash_schnorr_secp256k1_v0),
    (methodcaller("addr_id_script_hash_v0"), new_address_script_hash_v0_from_hash),
)


def decode_address_v0(text: str, params: AddressParams) -> Address:
    """Decode *text* as a version 0 address for the network in *params*.

    Unlike :func:`decode_address` the string is always decoded, which allows
    finer grained errors: ``MALFORMED_ADDRESS`` when the text is not base58
    check data at all and ``MALFORMED_ADDRESS_DATA`` when it decodes with a
    known prefix but the payload is not valid for that kind.
    """

    try:
        payload, net_id = check_decode(text)
    except Base58ChecksumError as exc:
        raise make_error(
            ErrorKind.BAD_ADDRESS_CHECKSUM, f"checksum mismatch for address {text!r}"
        ) from exc
    except Base58FormatError as exc:
        raise make_error(
            ErrorKind.MALFORMED_ADDRESS, f"failed to decode address {text!r}: {exc}"
        ) from exc

    # Every kind is checked, so params that reuse a prefix for several kinds
    # are detected instead of resolved by table order.
    candidates = [decoder for prefix_of, decoder in _V0_DECODERS if bytes(prefix_of(params)) == net_id]
    if not candidates:
        raise make_error(
            ErrorKind.UNSUPPORTED_ADDRESS,
            f"address {text!r} has unknown network prefix 0x{net_id.hex()}",
        )

    decoded: list[Address] = []
    failures: list[AddressError] = []
    for decoder in candidates:
        try:
            decoded.append(decoder(payload, params))
        except AddressError as exc:
            failures.append(exc)

    if not decoded:
        raise make_error(
            ErrorKind.MALFORMED_ADDRESS_DATA,
            f"failed to decode address {text!r}: {failures[0]}",
        ) from failures[0]
    if len(decoded) > 1:
        raise make_error(
            ErrorKind.UNSUPPORTED_ADDRESS,
            f"address {text!r} matches {len(decoded)} address kinds for the network",
        )
    return decoded[0]


def decode_address(text: str, params: AddressParams) -> Address:
    """Decode *text* into an address for the network in *params*.

    Strings that cannot possibly be a supported address are rejected without
    decoding.  A checksum mismatch is reported as ``BAD_ADDRESS_CHECKSUM``;
    every other failure is reported as ``UNSUPPORTED_ADDRESS``.
    """

    if probably_v0_base58_addr(text):
        try:
            return decode_address_v0(text, params)
        except AddressError as exc:
            if exc.is_kind(ErrorKind.BAD_ADDRESS_CHECKSUM):
                raise
            logger.debug("Rejected version 0 address %r: %s (%s)", text, exc, exc.kind)
            raise make_error(
                ErrorKind.UNSUPPORTED_ADDRESS, f"address {text!r} is not a supported type"
            ) from exc

    logger.debug("Rejected %r without decoding: not a plausible version 0 address", text)
    raise make_error(ErrorKind.UNSUPPORTED_ADDRESS, f"address {text!r} is not a supported type")
