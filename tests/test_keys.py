import pytest

from resettoken.errors import ExpectedTypeError, InvalidConfigurationError
from resettoken.keys import RawSecret, SaltedSecret, resolve_key


def test_resolve_raw_secret() -> None:
    key = resolve_key(secret=b"secret", salt=b"salt")
    assert key == RawSecret(b"secret", b"salt")


def test_resolve_salted_wins() -> None:
    key = resolve_key(secret=b"secret", salted=b"\x01" * 32)
    assert key == SaltedSecret(b"\x01" * 32)


def test_resolve_nothing() -> None:
    with pytest.raises(InvalidConfigurationError, match="either 'secret' or 'salted'"):
        resolve_key()


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_salted_secret_size(size: int) -> None:
    with pytest.raises(InvalidConfigurationError):
        SaltedSecret(b"\x00" * size)


def test_salted_secret_type() -> None:
    with pytest.raises(ExpectedTypeError):
        SaltedSecret("0" * 32)


def test_reprs_hide_key_material() -> None:
    assert repr(RawSecret(b"secret", b"salt")) == "RawSecret(...)"
    assert repr(SaltedSecret(b"\x07" * 32)) == "SaltedSecret(...)"
