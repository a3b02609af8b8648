"""resettoken.errors -- exceptions raised by resettoken"""
from __future__ import annotations

from typing import Any

__all__ = [
    "ResetTokenError",
    "InvalidConfigurationError",
    "ExpectedTypeError",
]


class ResetTokenError(Exception):
    """Base class for all errors raised by resettoken."""


class InvalidConfigurationError(ResetTokenError, ValueError):
    """
    Raised when a context or a call is given a value it can't work with,
    e.g. a non-positive step, a negative window, or no key material at all.
    """


class ExpectedTypeError(InvalidConfigurationError, TypeError):
    """
    Raised when an argument has the wrong type.
    """

    def __init__(self, value: Any, expected: str, param: str) -> None:
        msg = f"expected {expected}, got {type(value).__name__} ({param})"
        super().__init__(msg)
