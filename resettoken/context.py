"""resettoken.context -- time-limited password reset tokens"""
from __future__ import annotations

import logging
import time as _time
from typing import TYPE_CHECKING, Callable

import typing_extensions

from resettoken._utils.bytes import StrOrBytes, as_bytes
from resettoken._utils.validation import (
    MAX_COUNTER,
    validate_counter,
    validate_step,
    validate_window,
)
from resettoken.digest import hmac_sha256, otp_digest, time_to_counter
from resettoken.encoding import encode_token, tokens_equal
from resettoken.errors import ExpectedTypeError
from resettoken.keys import RawSecret, SaltedSecret, resolve_key

if TYPE_CHECKING:
    from resettoken.digest import TimeLike

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SALT",
    "DEFAULT_STEP",
    "DEFAULT_WINDOW",
    "ResetTokenContext",
]

DEFAULT_SALT = ""
DEFAULT_STEP = 24 * 60 * 60
DEFAULT_WINDOW = 1


class ResetTokenContext:
    """
    Generates & verifies password reset tokens.

    A token is derived from a user specific secret (e.g. the stored password
    hash) and the current time step, so it stops verifying once the secret
    changes or the window has passed, without storing anything server side.

    :param salt:
        application wide salt mixed into every secret before use.
        Keeping it out of the database means a leaked database alone
        isn't enough to forge tokens. Defaults to ``""``.

    :param step:
        size of a time step, in seconds. Defaults to 24 hours.

    :param window:
        number of time steps before & after the current one for which a
        token is still accepted, e.g. with ``window=5`` and counter 1000,
        tokens for counters 995 through 1005 (inclusive) verify.
        Defaults to 1, which (with the default step) gives users at least
        24 hours and at most 48 hours to use a token.

    :param now:
        clock used when a call doesn't pass ``time``. Defaults to :func:`time.time`.

    Instances are immutable, use :meth:`replace` to derive a differently
    configured context.
    """

    def __init__(
        self,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        window: int | None = None,
        now: Callable[[], float] | None = None,
    ) -> None:
        self._salt = as_bytes(DEFAULT_SALT if salt is None else salt, "salt")
        self._step = validate_step(DEFAULT_STEP if step is None else step)
        self._window = validate_window(DEFAULT_WINDOW if window is None else window)
        self._now = now or _time.time
        log.debug(
            "configured %s(step=%d, window=%d)",
            type(self).__name__,
            self._step,
            self._window,
        )

    @property
    def salt(self) -> bytes:
        return self._salt

    @property
    def step(self) -> int:
        return self._step

    @property
    def window(self) -> int:
        return self._window

    def replace(
        self,
        *,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        window: int | None = None,
        now: Callable[[], float] | None = None,
    ) -> ResetTokenContext:
        """
        Return a new context with the given options overridden.
        """
        return type(self)(
            salt=self._salt if salt is None else salt,
            step=self._step if step is None else step,
            window=self._window if window is None else window,
            now=now or self._now,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} step={self._step} window={self._window}>"

    # =========================================================================
    # key & counter helpers
    # =========================================================================

    def digest_secret(self, secret: StrOrBytes, salt: StrOrBytes | None = None) -> bytes:
        """
        Salt & digest a secret, i.e. ``HMAC-SHA256(key=salt, msg=secret)``.

        The result fully determines the tokens for that secret; it can be
        stored & later passed as ``salted`` instead of the raw secret.

        :param secret: user specific secret, e.g. the password hash.
        :param salt: overrides the context's salt for this call.
        :returns: 32 raw bytes.
        """
        salt = self._salt if salt is None else as_bytes(salt, "salt")
        return hmac_sha256(key=salt, msg=as_bytes(secret, "secret"))

    def _salted_key(
        self,
        secret: StrOrBytes | None,
        salt: StrOrBytes | None,
        salted: bytes | None,
    ) -> bytes:
        key = resolve_key(
            secret=None if secret is None else as_bytes(secret, "secret"),
            salt=None if salt is None else as_bytes(salt, "salt"),
            salted=salted,
        )
        if isinstance(key, SaltedSecret):
            return key.key
        if isinstance(key, RawSecret):
            return self.digest_secret(key.secret, salt=key.salt)
        typing_extensions.assert_never(key)

    def _counter(
        self,
        step: int | None,
        time: TimeLike | None,
        counter: int | None,
    ) -> int:
        step = self._step if step is None else validate_step(step)
        if counter is not None:
            return validate_counter(counter)
        if time is None:
            log.debug("no time given, using current system time")
            time = self._now()
        return time_to_counter(step, time)

    # =========================================================================
    # token generation
    # =========================================================================

    def digest(
        self,
        secret: StrOrBytes | None = None,
        *,
        salted: bytes | None = None,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        time: TimeLike | None = None,
        counter: int | None = None,
    ) -> bytes:
        """
        Derive the raw token for a secret & time step.

        :param secret: user specific secret, e.g. the password hash.
        :param salted: output of :meth:`digest_secret`, used instead of ``secret``.
        :param salt: overrides the context's salt (ignored with ``salted``).
        :param step: overrides the context's step.
        :param time: unix time or datetime, the current time if omitted.
        :param counter: time step counter, computed from ``time`` if omitted.
        :returns: 32 raw bytes.
        """
        key = self._salted_key(secret, salt, salted)
        return otp_digest(key, self._counter(step, time, counter), algorithm="sha256")

    def generate(
        self,
        secret: StrOrBytes | None = None,
        *,
        salted: bytes | None = None,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        time: TimeLike | None = None,
        counter: int | None = None,
    ) -> str:
        """
        Generate a URL-safe token, takes the same arguments as :meth:`digest`.

        Usage example::

            >>> ctx = ResetTokenContext()
            >>> ctx.generate("xyzzy", time=0)
            'J5vk2Bzw4YBvJj6fF934aVoatu17wuzgtxmvjtP1Di28'
        """
        return encode_token(
            self.digest(
                secret,
                salted=salted,
                salt=salt,
                step=step,
                time=time,
                counter=counter,
            )
        )

    def expire_time(
        self,
        time: TimeLike | None = None,
        *,
        step: int | None = None,
        window: int | None = None,
    ) -> int:
        """
        Return the unix time at which a token generated at ``time`` stops verifying.
        """
        step = self._step if step is None else validate_step(step)
        window = self._window if window is None else validate_window(window)
        counter = self._counter(step, time, None)
        return (counter + window + 1) * step

    # =========================================================================
    # token verification
    # =========================================================================

    def match(
        self,
        token: StrOrBytes,
        secret: StrOrBytes | None = None,
        *,
        salted: bytes | None = None,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        time: TimeLike | None = None,
        counter: int | None = None,
        window: int | None = None,
    ) -> int | None:
        """
        Find the time step counter a token was generated for.

        Checks every counter from ``counter - window`` to ``counter + window``
        (inclusive) in ascending order.

        :returns:
            the first matching counter, or ``None`` if the token doesn't verify.
        """
        if not isinstance(token, (str, bytes)):
            raise ExpectedTypeError(token, "str or bytes", "token")
        window = self._window if window is None else validate_window(window)
        key = self._salted_key(secret, salt, salted)
        counter = self._counter(step, time, counter)

        # counters outside 0 .. 2**64-1 can't be generated, so never match
        start = max(counter - window, 0)
        end = min(counter + window, MAX_COUNTER - 1)
        for candidate in range(start, end + 1):
            if tokens_equal(token, encode_token(otp_digest(key, candidate))):
                return candidate
        return None

    def verify(
        self,
        token: StrOrBytes,
        secret: StrOrBytes | None = None,
        *,
        salted: bytes | None = None,
        salt: StrOrBytes | None = None,
        step: int | None = None,
        time: TimeLike | None = None,
        counter: int | None = None,
        window: int | None = None,
    ) -> bool:
        """
        Check a token, takes the same arguments as :meth:`match`.

        :returns: ``True`` if the token is valid, ``False`` otherwise.
        """
        matched = self.match(
            token,
            secret,
            salted=salted,
            salt=salt,
            step=step,
            time=time,
            counter=counter,
            window=window,
        )
        return matched is not None


_default_context = ResetTokenContext()
digest_secret = _default_context.digest_secret
digest = _default_context.digest
generate = _default_context.generate
verify = _default_context.verify
match = _default_context.match
expire_time = _default_context.expire_time
