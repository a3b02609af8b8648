"""resettoken -- time-limited, secret-derived password reset tokens"""
from resettoken._salt import generate_salt
from resettoken.context import (
    DEFAULT_SALT,
    DEFAULT_STEP,
    DEFAULT_WINDOW,
    ResetTokenContext,
    digest,
    digest_secret,
    expire_time,
    generate,
    match,
    verify,
)
from resettoken.errors import (
    ExpectedTypeError,
    InvalidConfigurationError,
    ResetTokenError,
)
from resettoken.keys import RawSecret, SaltedSecret

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_SALT",
    "DEFAULT_STEP",
    "DEFAULT_WINDOW",
    "ExpectedTypeError",
    "InvalidConfigurationError",
    "RawSecret",
    "ResetTokenContext",
    "ResetTokenError",
    "SaltedSecret",
    "digest",
    "digest_secret",
    "expire_time",
    "generate",
    "generate_salt",
    "match",
    "verify",
]
