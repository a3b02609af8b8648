import string

import pytest

from resettoken import generate_salt


@pytest.mark.parametrize(
    ("entropy_bits", "length"),
    [
        (128, 22),
        (256, 43),
    ],
)
def test_generate_salt_length(entropy_bits: int, length: int) -> None:
    salt = generate_salt(entropy_bits)
    assert len(salt) == length
    assert set(salt) <= set(string.ascii_letters + string.digits)


def test_generate_salt_custom_chars() -> None:
    salt = generate_salt(64, chars="01")
    assert len(salt) == 64
    assert set(salt) <= {"0", "1"}


def test_generate_salt_is_random() -> None:
    assert generate_salt() != generate_salt()


@pytest.mark.parametrize(
    ("kwargs",),
    [
        ({"entropy_bits": 0},),
        ({"chars": "a"},),
    ],
)
def test_generate_salt_invalid(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        generate_salt(**kwargs)
