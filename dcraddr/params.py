"""Network address parameters.

Address constructors and decoders never consult global state: callers pass an
object implementing :class:`AddressParams` for the network they are working
with.  :class:`NetworkParams` is the concrete implementation used by the
built-in networks and by YAML-defined custom networks.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when network parameters are invalid."""


class AddressParams(Protocol):
    """Per-network magic prefixes for version 0 addresses."""

    def addr_id_pubkey_v0(self) -> bytes:
        """Prefix for pay-to-pubkey addresses."""

    def addr_id_pubkey_hash_ecdsa_v0(self) -> bytes:
        """Prefix for pay-to-pubkey-hash addresses with ECDSA secp256k1 keys."""

    def addr_id_pubkey_hash_ed25519_v0(self) -> bytes:
        """Prefix for pay-to-pubkey-hash addresses with Ed25519 keys."""

    def addr_id_pubkey_hash_schnorr_v0(self) -> bytes:
        """Prefix for pay-to-pubkey-hash addresses with Schnorr secp256k1 keys."""

    def addr_id_script_hash_v0(self) -> bytes:
        """Prefix for pay-to-script-hash addresses."""


_ID_FIELDS = (
    "pubkey_id",
    "pkh_ecdsa_id",
    "pkh_ed25519_id",
    "pkh_schnorr_id",
    "script_hash_id",
)


@dataclass(frozen=True)
class NetworkParams:
    """Immutable prefix table for one network."""

    name: str
    pubkey_id: bytes
    pkh_ecdsa_id: bytes
    pkh_ed25519_id: bytes
    pkh_schnorr_id: bytes
    script_hash_id: bytes

    def __post_init__(self) -> None:
        ids = []
        for field_name in _ID_FIELDS:
            value = getattr(self, field_name)
            if not isinstance(value, (bytes, bytearray)) or len(value) != 2:
                raise ConfigurationError(
                    f"{self.name}: {field_name} must be exactly 2 bytes, got {value!r}"
                )
            object.__setattr__(self, field_name, bytes(value))
            ids.append(bytes(value))
        if len(set(ids)) != len(ids):
            raise ConfigurationError(f"{self.name}: address prefixes must be unique")

    def addr_id_pubkey_v0(self) -> bytes:
        return self.pubkey_id

    def addr_id_pubkey_hash_ecdsa_v0(self) -> bytes:
        return self.pkh_ecdsa_id

    def addr_id_pubkey_hash_ed25519_v0(self) -> bytes:
        return self.pkh_ed25519_id

    def addr_id_pubkey_hash_schnorr_v0(self) -> bytes:
        return self.pkh_schnorr_id

    def addr_id_script_hash_v0(self) -> bytes:
        return self.script_hash_id


MAINNET = NetworkParams(
    name="mainnet",
    pubkey_id=b"\x13\x86",  # Dk
    pkh_ecdsa_id=b"\x07\x3f",  # Ds
    pkh_ed25519_id=b"\x07\x1f",  # De
    pkh_schnorr_id=b"\x07\x01",  # DS
    script_hash_id=b"\x07\x1a",  # Dc
)

TESTNET = NetworkParams(
    name="testnet",
    pubkey_id=b"\x28\xf7",  # Tk
    pkh_ecdsa_id=b"\x0f\x21",  # Ts
    pkh_ed25519_id=b"\x0f\x01",  # Te
    pkh_schnorr_id=b"\x0e\xe3",  # TS
    script_hash_id=b"\x0e\xfc",  # Tc
)

REGNET = NetworkParams(
    name="regnet",
    pubkey_id=b"\x25\xe5",  # Rk
    pkh_ecdsa_id=b"\x0e\x00",  # Rs
    pkh_ed25519_id=b"\x0d\xe0",  # Re
    pkh_schnorr_id=b"\x0d\xc2",  # RS
    script_hash_id=b"\x0d\xdb",  # Rc
)

SIMNET = NetworkParams(
    name="simnet",
    pubkey_id=b"\x27\x6f",  # Sk
    pkh_ecdsa_id=b"\x0e\x91",  # Ss
    pkh_ed25519_id=b"\x0e\x71",  # Se
    pkh_schnorr_id=b"\x0e\x53",  # SS
    script_hash_id=b"\x0e\x6c",  # Sc
)

BUILTIN_NETWORKS: dict[str, NetworkParams] = {
    params.name: params for params in (MAINNET, TESTNET, REGNET, SIMNET)
}

DEFAULT_NETWORK = "mainnet"


def get_network(name: str) -> NetworkParams:
    """Return the built-in parameters for *name* (case-insensitive)."""

    try:
        return BUILTIN_NETWORKS[name.strip().lower()]
    except KeyError as exc:
        known = ", ".join(sorted(BUILTIN_NETWORKS))
        raise ConfigurationError(f"Unknown network {name!r}; expected one of: {known}") from exc


def _parse_prefix(raw: Any, *, source: str) -> bytes:
    if isinstance(raw, int):
        if not 0 <= raw <= 0xFFFF:
            raise ConfigurationError(f"Prefix out of range in {source}: {raw}")
        return raw.to_bytes(2, "big")
    if not isinstance(raw, str):
        raise ConfigurationError(f"Prefix in {source} must be a hex string, got {raw!r}")
    text = raw.strip().lower().removeprefix("0x")
    try:
        value = bytes.fromhex(text)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid hex prefix in {source}: {raw!r}") from exc
    if len(value) != 2:
        raise ConfigurationError(f"Prefix in {source} must be 2 bytes, got {raw!r}")
    return value


def _network_from_mapping(name: str, payload: Any, *, path: Path) -> NetworkParams:
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Network {name!r} in {path} must be a mapping")

    values: dict[str, bytes] = {}
    for field_name in _ID_FIELDS:
        if field_name not in payload:
            raise ConfigurationError(f"Network {name!r} in {path} is missing {field_name}")
        values[field_name] = _parse_prefix(payload[field_name], source=f"{path} {name}.{field_name}")
    return NetworkParams(name=name, **values)


def _read_networks_section(path: Path) -> dict[Any, Any]:
    try:
        with path.open(encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Network config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Network config {path} is not valid YAML: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigurationError(f"Network config {path} must be a YAML object with a 'networks' key")
    section = document.get("networks")
    if not isinstance(section, dict) or not section:
        raise ConfigurationError(f"'networks' in {path} must be a non-empty mapping")
    return section


def load_network_params(path: str | Path) -> dict[str, NetworkParams]:
    """Load custom network prefix tables from a YAML file.

    The file holds a ``networks`` mapping of network name to the five
    two-byte prefixes, written as hex strings::

        networks:
          privnet:
            pubkey_id: "1386"
            pkh_ecdsa_id: "073f"
            ...
    """

    path = Path(path).expanduser()
    section = _read_networks_section(path)
    networks = {
        str(name): _network_from_mapping(str(name), payload, path=path)
        for name, payload in section.items()
    }
    logger.info("Loaded %d network definitions from %s", len(networks), path)
    return networks


def resolve_network(
    name: str | None = None,
    *,
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> NetworkParams:
    """Pick network parameters from an explicit name, the environment or the default.

    ``DCRADDR_NETWORK`` supplies the name when *name* is omitted and
    ``DCRADDR_CONFIG`` names a YAML file of custom networks when
    *config_path* is omitted.  Custom networks shadow built-in ones.
    """

    env_map = os.environ if env is None else env
    resolved_name = name or env_map.get("DCRADDR_NETWORK") or DEFAULT_NETWORK
    path = config_path if config_path is not None else env_map.get("DCRADDR_CONFIG")

    if path:
        custom = load_network_params(path)
        if resolved_name in custom:
            return custom[resolved_name]
    return get_network(resolved_name)
