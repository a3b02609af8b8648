"""resettoken.keys -- key material accepted by :class:`~resettoken.context.ResetTokenContext`"""
from __future__ import annotations

import dataclasses
from typing import Union

from resettoken.digest import DIGEST_SIZE
from resettoken.errors import ExpectedTypeError, InvalidConfigurationError

__all__ = ["Key", "RawSecret", "SaltedSecret", "resolve_key"]


@dataclasses.dataclass(frozen=True)
class RawSecret:
    """
    A user secret which still has to be salted & digested,
    e.g. the password hash stored for the user.
    """

    secret: bytes
    salt: bytes | None = None

    def __repr__(self) -> str:
        return "RawSecret(...)"


@dataclasses.dataclass(frozen=True)
class SaltedSecret:
    """
    The output of :meth:`ResetTokenContext.digest_secret`, which may be
    cached and used directly as token key.
    """

    key: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.key, bytes):
            raise ExpectedTypeError(self.key, "bytes", "salted")
        if len(self.key) != DIGEST_SIZE:
            msg = f"salted secret must be {DIGEST_SIZE} bytes, got {len(self.key)}"
            raise InvalidConfigurationError(msg)

    def __repr__(self) -> str:
        return "SaltedSecret(...)"


Key = Union[RawSecret, SaltedSecret]


def resolve_key(
    secret: bytes | None = None,
    salt: bytes | None = None,
    salted: bytes | None = None,
) -> Key:
    """
    Pick the key material for a call: a pre-salted secret wins over a raw one.
    """
    if salted is not None:
        return SaltedSecret(salted)
    if secret is not None:
        return RawSecret(secret, salt)
    raise InvalidConfigurationError("either 'secret' or 'salted' must be provided")
