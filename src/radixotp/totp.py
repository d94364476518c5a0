import logging
import time
from typing import Any, Optional, Tuple, Union

from . import utils
from .algorithm import Algorithm
from .errors import AfterError, DriftBehindError, InvalidSecretError, UnsupportedIntervalError
from .otp import DEFAULT_ALGORITHM, DEFAULT_INTERVAL, DEFAULT_LENGTH, DEFAULT_RADIX, MIN_PROVISIONING_INTERVAL, OTP
from .values import Interval, Length, Radix, Secret

logger = logging.getLogger(__name__)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        secret: Union[Secret, bytes, str],
        length: Union[Length, int] = DEFAULT_LENGTH,
        radix: Union[Radix, int] = DEFAULT_RADIX,
        algorithm: Union[Algorithm, str] = DEFAULT_ALGORITHM,
        interval: Union[Interval, int] = DEFAULT_INTERVAL,
    ) -> None:
        """
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        super().__init__(secret, length=length, radix=radix, algorithm=algorithm)
        object.__setattr__(self, "_interval", Interval.coerce(interval))

    @classmethod
    def default(cls, secret: Secret) -> "TOTP":
        """
        SHA1, six decimal digits, 30 second steps: RFC 6238 recommendations.
        """
        return cls(secret)

    rfc6238_default = default

    @property
    def interval(self) -> Interval:
        return self._interval  # type: ignore[attr-defined]

    def time_code(self, timestamp: int) -> int:
        """
        Number of whole intervals elapsed since the epoch at ``timestamp``.
        """
        return utils.check_counter(timestamp) // self.interval.value

    def generate(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.generate_at(int(time.time()))

    def generate_at(self, timestamp: int) -> str:
        """
        Accepts a Unix timestamp in seconds and returns the OTP for the
        interval it falls in.

        :param timestamp: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.time_code(timestamp))

    def verify(
        self,
        otp: str,
        after: Optional[int] = None,
        drift_ahead: int = 0,
        drift_behind: int = 0,
    ) -> Optional[int]:
        """
        Verifies the OTP against the current time; see :meth:`verify_at`.
        """
        return self.verify_at(otp, int(time.time()), after, drift_ahead, drift_behind)

    def verify_at(
        self,
        otp: str,
        at: int,
        after: Optional[int] = None,
        drift_ahead: int = 0,
        drift_behind: int = 0,
    ) -> Optional[int]:
        """
        Verifies the OTP against every timestamp from ``at - drift_behind``
        to ``at + drift_ahead`` inclusive.

        :param otp: the OTP to check against
        :param at: the Unix timestamp to verify at
        :param after: a timestamp the OTP must not predate, typically the
            time of the last accepted OTP; it raises the start of the window
        :param drift_ahead: seconds the client clock may be ahead
        :param drift_behind: seconds the client clock may be behind
        :returns: the earliest matching timestamp, or None
        :raises DriftBehindError: if ``drift_behind`` is not less than ``at``
        :raises AfterError: if ``after`` is later than ``at``
        """
        otp = str(otp)
        if not self._accepts_length(otp):
            return None
        utils.check_counter(at)
        utils.check_counter(drift_ahead)
        utils.check_counter(drift_behind)
        if drift_behind >= at:
            raise DriftBehindError(drift_behind, at)

        start = at - drift_behind
        if after is not None:
            utils.check_counter(after)
            if after > at:
                raise AfterError(after, at)
            start = max(start, after)
        end = min(at + drift_ahead, utils.MAX_COUNTER)

        # Every second in an interval shares one code, so only the earliest
        # second of each interval inside the window needs checking.
        interval = self.interval.value
        for code in range(start // interval, end // interval + 1):
            if self._matches(otp, code):
                matched = max(start, code * interval)
                logger.debug("TOTP matched at %d (%+d seconds from %d)", matched, matched - at, at)
                return matched
        logger.debug("TOTP did not match between %d and %d", start, end)
        return None

    def provisioning_uri(self, issuer: str, user: str) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        See also:
            https://github.com/google/google-authenticator/wiki/Key-Uri-Format

        :param issuer: the name of the OTP issuer; may be empty
        :param user: name of the user account
        :returns: provisioning URI
        :raises ConfigurationMismatchError: unless the interval is at least
            30 seconds and the OTP is SHA1, six characters long and decimal
        """
        if self.interval.value < MIN_PROVISIONING_INTERVAL:
            raise UnsupportedIntervalError(self.interval.value)
        self._check_provisioning()
        return utils.build_uri("totp", self.secret.value, user, issuer=issuer)

    @classmethod
    def from_uri(cls, uri: str) -> "TOTP":
        """
        Parses an ``otpauth://totp/`` URI into an RFC-default TOTP.

        Only ``secret`` is read; issuer, algorithm, digits and period are
        ignored, so a non-default TOTP does not survive the round trip.
        """
        params = utils.parse_query(uri, "totp")
        if not params.get("secret"):
            logger.debug("TOTP URI has no secret")
            raise InvalidSecretError()
        return cls.default(Secret.from_base32(params["secret"]))

    def _key(self) -> Tuple[Any, ...]:
        return super()._key() + (self.interval,)

    def __repr__(self) -> str:
        return "{}(algorithm={}, length={}, radix={}, interval={})".format(
            type(self).__name__, self.algorithm.name, self.length.value, self.radix.value, self.interval.value
        )
