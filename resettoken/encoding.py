"""resettoken.encoding -- rendering & comparing URL-safe tokens"""
from __future__ import annotations

import hmac

import base58

from resettoken._utils.bytes import StrOrBytes, as_bytes

__all__ = ["encode_token", "tokens_equal"]


def encode_token(digest: bytes) -> str:
    """
    Render a digest as a base58 string (bitcoin alphabet).

    Every leading zero byte becomes one leading ``"1"``, so the length of
    the result varies with the digest.
    """
    return base58.b58encode(digest).decode("ascii")


def tokens_equal(presented: StrOrBytes, expected: str) -> bool:
    """
    Compare a presented token against an expected one in constant time.
    """
    return hmac.compare_digest(as_bytes(presented, "token"), as_bytes(expected))
