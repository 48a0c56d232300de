from dcraddr import AddressError, ErrorKind


def test_error_carries_kind_and_description() -> None:
    err = AddressError(ErrorKind.INVALID_PUBKEY, "failed to parse public key")

    assert isinstance(err, RuntimeError)
    assert err.is_kind(ErrorKind.INVALID_PUBKEY)
    assert not err.is_kind(ErrorKind.INVALID_PUBKEY_FORMAT)
    assert str(err) == "failed to parse public key"
    assert err.description == "failed to parse public key"


def test_error_kind_names_are_stable() -> None:
    assert str(ErrorKind.BAD_ADDRESS_CHECKSUM) == "ErrBadAddressChecksum"
    assert len({kind.value for kind in ErrorKind}) == len(ErrorKind)
