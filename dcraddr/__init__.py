"""Decred-style address encoding, decoding and script generation."""

from .address import (
    Address,
    AddressPubKeyEcdsaSecp256k1V0,
    AddressPubKeyEd25519V0,
    AddressPubKeyHashEcdsaSecp256k1V0,
    AddressPubKeyHashEd25519V0,
    AddressPubKeyHashSchnorrSecp256k1V0,
    AddressPubKeySchnorrSecp256k1V0,
    AddressScriptHashV0,
    StakeAddress,
    new_address_pubkey_ecdsa_secp256k1,
    new_address_pubkey_ecdsa_secp256k1_raw,
    new_address_pubkey_ecdsa_secp256k1_v0,
    new_address_pubkey_ecdsa_secp256k1_v0_raw,
    new_address_pubkey_ed25519,
    new_address_pubkey_ed25519_raw,
    new_address_pubkey_ed25519_v0,
    new_address_pubkey_ed25519_v0_raw,
    new_address_pubkey_hash_ecdsa_secp256k1,
    new_address_pubkey_hash_ecdsa_secp256k1_v0,
    new_address_pubkey_hash_ed25519,
    new_address_pubkey_hash_ed25519_v0,
    new_address_pubkey_hash_schnorr_secp256k1,
    new_address_pubkey_hash_schnorr_secp256k1_v0,
    new_address_pubkey_schnorr_secp256k1,
    new_address_pubkey_schnorr_secp256k1_raw,
    new_address_pubkey_schnorr_secp256k1_v0,
    new_address_pubkey_schnorr_secp256k1_v0_raw,
    new_address_script_hash,
    new_address_script_hash_from_hash,
    new_address_script_hash_v0,
    new_address_script_hash_v0_from_hash,
)
from .decode import decode_address, decode_address_v0, probably_v0_base58_addr
from .errors import AddressError, ErrorKind
from .hashing import hash160
from .params import (
    MAINNET,
    REGNET,
    SIMNET,
    TESTNET,
    AddressParams,
    ConfigurationError,
    NetworkParams,
    get_network,
    load_network_params,
    resolve_network,
)

__all__ = [
    "Address",
    "AddressError",
    "AddressParams",
    "AddressPubKeyEcdsaSecp256k1V0",
    "AddressPubKeyEd25519V0",
    "AddressPubKeyHashEcdsaSecp256k1V0",
    "AddressPubKeyHashEd25519V0",
    "AddressPubKeyHashSchnorrSecp256k1V0",
    "AddressPubKeySchnorrSecp256k1V0",
    "AddressScriptHashV0",
    "ConfigurationError",
    "ErrorKind",
    "MAINNET",
    "NetworkParams",
    "REGNET",
    "SIMNET",
    "StakeAddress",
    "TESTNET",
    "decode_address",
    "decode_address_v0",
    "get_network",
    "hash160",
    "load_network_params",
    "new_address_pubkey_ecdsa_secp256k1",
    "new_address_pubkey_ecdsa_secp256k1_raw",
    "new_address_pubkey_ecdsa_secp256k1_v0",
    "new_address_pubkey_ecdsa_secp256k1_v0_raw",
    "new_address_pubkey_ed25519",
    "new_address_pubkey_ed25519_raw",
    "new_address_pubkey_ed25519_v0",
    "new_address_pubkey_ed25519_v0_raw",
    "new_address_pubkey_hash_ecdsa_secp256k1",
    "new_address_pubkey_hash_ecdsa_secp256k1_v0",
    "new_address_pubkey_hash_ed25519",
    "new_address_pubkey_hash_ed25519_v0",
    "new_address_pubkey_hash_schnorr_secp256k1",
    "new_address_pubkey_hash_schnorr_secp256k1_v0",
    "new_address_pubkey_schnorr_secp256k1",
    "new_address_pubkey_schnorr_secp256k1_raw",
    "new_address_pubkey_schnorr_secp256k1_v0",
    "new_address_pubkey_schnorr_secp256k1_v0_raw",
    "new_address_script_hash",
    "new_address_script_hash_from_hash",
    "new_address_script_hash_v0",
    "new_address_script_hash_v0_from_hash",
    "probably_v0_base58_addr",
    "resolve_network",
]
