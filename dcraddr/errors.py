"""Error taxonomy shared by the address constructors and decoders."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Identifies a class of address error.

    Every failure raised by this package carries exactly one kind so callers
    can branch on ``err.kind`` instead of matching message text.
    """

    UNSUPPORTED_ADDRESS = "ErrUnsupportedAddress"
    UNSUPPORTED_SCRIPT_VERSION = "ErrUnsupportedScriptVersion"
    MALFORMED_ADDRESS = "ErrMalformedAddress"
    MALFORMED_ADDRESS_DATA = "ErrMalformedAddressData"
    BAD_ADDRESS_CHECKSUM = "ErrBadAddressChecksum"
    INVALID_PUBKEY = "ErrInvalidPubKey"
    INVALID_PUBKEY_FORMAT = "ErrInvalidPubKeyFormat"
    INVALID_HASH_LEN = "ErrInvalidHashLen"

    def __str__(self) -> str:
        return self.value


class AddressError(RuntimeError):
    """Raised when an address cannot be constructed or decoded."""

    def __init__(self, kind: ErrorKind, description: str) -> None:
        super().__init__(description)
        self.kind = kind
        self.description = description

    def is_kind(self, kind: ErrorKind) -> bool:
        return self.kind is kind

    def __str__(self) -> str:
        return self.description


def make_error(kind: ErrorKind, description: str) -> AddressError:
    return AddressError(kind, description)
