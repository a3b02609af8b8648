import pytest

from resettoken.encoding import encode_token, tokens_equal
from resettoken.errors import ExpectedTypeError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (b"hello world", "StV1DL6CwTryKyV"),
        (b"\x01", "2"),
        (b"\x00\x01", "12"),
        (b"\x00\x00\x00\x01", "1112"),
    ],
)
def test_encode_token(value: bytes, expected: str) -> None:
    assert encode_token(value) == expected


def test_encode_token_keeps_leading_zeros() -> None:
    digest = b"\x00" + b"\xff" * 31
    token = encode_token(digest)
    assert token.startswith("1")
    assert not encode_token(b"\xff" * 32).startswith("1")


@pytest.mark.parametrize(
    ("presented", "expected", "result"),
    [
        ("abc", "abc", True),
        (b"abc", "abc", True),
        ("abd", "abc", False),
        ("ab", "abc", False),
        ("", "abc", False),
        ("ä", "abc", False),
    ],
)
def test_tokens_equal(presented, expected: str, result: bool) -> None:
    assert tokens_equal(presented, expected) is result


def test_tokens_equal_rejects_other_types() -> None:
    with pytest.raises(ExpectedTypeError):
        tokens_equal(123, "123")
