import logging
from typing import Optional, Tuple

from . import utils
from .errors import InvalidSecretError
from .otp import OTP
from .values import Secret

logger = logging.getLogger(__name__)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    @classmethod
    def default(cls, secret: Secret) -> "HOTP":
        """
        SHA1, six decimal digits: the configuration recommended by RFC 4226.
        """
        return cls(secret)

    rfc4226_default = default

    def generate(self, counter: int) -> str:
        """
        Generates the OTP for the given count.

        :param counter: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(counter)

    def verify(self, otp: str, counter: int, retries: int = 0) -> Optional[int]:
        """
        Verifies the OTP passed in against the counters from ``counter`` to
        ``counter + retries`` inclusive, to resynchronize with a client that
        has moved ahead.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        :param retries: how many counters past ``counter`` to try
        :returns: the first matching counter, or None
        """
        otp = str(otp)
        if not self._accepts_length(otp):
            return None
        utils.check_counter(counter)
        utils.check_counter(retries)

        end = min(counter + retries, utils.MAX_COUNTER)
        for i in range(counter, end + 1):
            if self._matches(otp, i):
                logger.debug("HOTP matched at counter %d (%d ahead)", i, i - counter)
                return i
        logger.debug("HOTP did not match counters %d to %d", counter, end)
        return None

    def provisioning_uri(self, issuer: str, user: str, initial_count: int = 0) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        See also:
            https://github.com/google/google-authenticator/wiki/Key-Uri-Format

        :param issuer: the name of the OTP issuer; this will be the
            organization title of the OTP entry in Authenticator
        :param user: name of the user account
        :param initial_count: starting HMAC counter value, defaults to 0
        :returns: provisioning URI
        :raises ConfigurationMismatchError: unless the OTP is SHA1, six
            characters long and decimal
        """
        self._check_provisioning()
        return utils.build_uri(
            "hotp",
            self.secret.value,
            user,
            issuer=issuer,
            initial_count=utils.check_counter(initial_count),
        )

    @classmethod
    def parse_uri(cls, uri: str) -> Tuple["HOTP", int]:
        """
        Parses an ``otpauth://hotp/`` URI into an RFC-default HOTP and the
        initial counter it carries (0 when absent).

        Only ``secret`` and ``counter`` are read; issuer, algorithm, digits
        and any other parameters are ignored.
        """
        params = utils.parse_query(uri, "hotp")
        if not params.get("secret"):
            logger.debug("HOTP URI has no secret")
            raise InvalidSecretError()
        secret = Secret.from_base32(params["secret"])
        counter = utils.parse_counter(params["counter"]) if "counter" in params else 0
        return cls.default(secret), counter

    @classmethod
    def from_uri(cls, uri: str) -> "HOTP":
        return cls.parse_uri(uri)[0]
