"""resettoken.digest -- keyed digest primitives used to derive tokens"""
from __future__ import annotations

import calendar
import hashlib
import hmac
import math
import struct
from typing import TYPE_CHECKING, Union

from resettoken._utils.validation import validate_counter, validate_step
from resettoken.errors import ExpectedTypeError, InvalidConfigurationError

if TYPE_CHECKING:
    from datetime import datetime

__all__ = [
    "hmac_sha256",
    "int_to_bytestring",
    "normalize_time",
    "otp_digest",
    "time_to_counter",
]

TimeLike = Union[int, float, "datetime"]

#: size of every digest produced by this module
DIGEST_SIZE = hashlib.sha256().digest_size


def hmac_sha256(key: bytes, msg: bytes) -> bytes:
    return hmac.new(key=key, msg=msg, digestmod=hashlib.sha256).digest()


def int_to_bytestring(counter: int) -> bytes:
    """
    Render a counter as the 8 byte big-endian message fed to the HMAC.
    """
    return struct.pack(">Q", validate_counter(counter))


def normalize_time(time: TimeLike) -> int:
    """
    Normalize time value to unix epoch seconds.

    :arg time:
        unix epoch timestamp as :class:`!int` or :class:`!float`,
        or a :class:`!datetime` (naive datetimes are treated as UTC).

    :returns:
        unix epoch timestamp as :class:`int`.
    """
    if isinstance(time, bool):
        raise ExpectedTypeError(time, "int, float, or datetime", "time")
    if isinstance(time, int):
        value = time
    elif isinstance(time, float):
        if not math.isfinite(time):
            msg = f"time must be a finite number, got {time}"
            raise InvalidConfigurationError(msg)
        value = int(time)
    elif hasattr(time, "utctimetuple"):
        # NOTE: microseconds are dropped, same as truncating a float
        value = calendar.timegm(time.utctimetuple())
    else:
        raise ExpectedTypeError(time, "int, float, or datetime", "time")
    if value < 0:
        msg = f"time must be >= 0, got {value}"
        raise InvalidConfigurationError(msg)
    return value


def time_to_counter(step: int, time: TimeLike) -> int:
    """
    Convert a timestamp to the number of whole ``step`` intervals since the epoch.
    """
    return normalize_time(time) // validate_step(step)


def otp_digest(secret: bytes, counter: int, algorithm: str = "sha256") -> bytes:
    """
    HOTP style digest: HMAC of the big-endian counter keyed by ``secret``.

    The full HMAC output is returned, no dynamic truncation is applied.

    :arg secret: key bytes
    :arg counter: non-negative counter value
    :arg algorithm: name of a :mod:`hashlib` digest
    """
    return hmac.new(
        key=secret,
        msg=int_to_bytestring(counter),
        digestmod=algorithm,
    ).digest()
