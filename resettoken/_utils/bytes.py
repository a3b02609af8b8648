from typing import Union

from resettoken.errors import ExpectedTypeError

StrOrBytes = Union[str, bytes]


def as_bytes(value: StrOrBytes, param: str = "value") -> bytes:
    if isinstance(value, str):
        return value.encode("utf8")
    if isinstance(value, bytes):
        return value
    raise ExpectedTypeError(value, "str or bytes", param)
