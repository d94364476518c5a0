import logging
from typing import Any, Tuple, Union

from . import utils
from .algorithm import Algorithm
from .errors import UnsupportedAlgorithmError, UnsupportedLengthError, UnsupportedRadixError
from .values import Length, Radix, Secret

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.SHA1
DEFAULT_LENGTH = 6
DEFAULT_RADIX = 10
DEFAULT_INTERVAL = 30

# Only configuration authenticator apps accept from a provisioning URI.
PROVISIONING_ALGORITHM = Algorithm.SHA1
PROVISIONING_LENGTH = 6
PROVISIONING_RADIX = 10
MIN_PROVISIONING_INTERVAL = 30

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def format_radix(value: int, radix: int, length: int) -> str:
    """
    Renders ``value`` in base ``radix`` (upper-case digits), left-padded
    with ``"0"`` to ``length`` characters.
    """
    chars = []
    while value:
        value, digit = divmod(value, radix)
        chars.append(DIGITS[digit])
    return "".join(reversed(chars)).rjust(length, "0")


def truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 dynamic truncation: a 31-bit integer taken from four digest
    bytes starting at the offset in the low nibble of the last byte.
    """
    offset = hmac_hash[-1] & 0xF
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def otp(algorithm: Algorithm, secret: Secret, length: Length, radix: Radix, counter: int) -> str:
    """
    Derives the OTP for ``counter``. Implements RFC 4226 with the decimal
    reduction generalized to any radix between 2 and 36.

    :param counter: the HMAC counter value to use as the OTP input.
        Usually either the counter, or the computed integer based on the Unix timestamp
    :raises CounterError: if counter is outside the unsigned 64-bit range
    :raises HashError: if the HMAC cannot be computed
    """
    code = truncate(algorithm.hash(secret.value, counter))
    # Python ints are unbounded, so radix**length never overflows.
    return format_radix(code % radix.value**length.value, radix.value, length.value)


class OTP(object):
    """
    Base class for OTP handlers.

    Instances are immutable; the configuration is fixed at construction and
    counters or timestamps are passed to each call.
    """

    def __init__(
        self,
        secret: Union[Secret, bytes, str],
        length: Union[Length, int] = DEFAULT_LENGTH,
        radix: Union[Radix, int] = DEFAULT_RADIX,
        algorithm: Union[Algorithm, str] = DEFAULT_ALGORITHM,
    ) -> None:
        """
        :param secret: the shared key; ``str`` is taken as UTF-8 text, use
            ``Secret.from_base32`` for base32 secrets
        :param length: number of characters in the OTP
        :param radix: numeric base of the OTP, 2 to 36
        :param algorithm: HMAC digest
        """
        object.__setattr__(self, "_secret", Secret.coerce(secret))
        object.__setattr__(self, "_length", Length.coerce(length))
        object.__setattr__(self, "_radix", Radix.coerce(radix))
        object.__setattr__(self, "_algorithm", Algorithm.from_string(algorithm))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("{} is immutable".format(type(self).__name__))

    @property
    def secret(self) -> Secret:
        return self._secret  # type: ignore[attr-defined]

    @property
    def length(self) -> Length:
        return self._length  # type: ignore[attr-defined]

    @property
    def radix(self) -> Radix:
        return self._radix  # type: ignore[attr-defined]

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm  # type: ignore[attr-defined]

    def generate_otp(self, counter: int) -> str:
        return otp(self.algorithm, self.secret, self.length, self.radix, counter)

    def _key(self) -> Tuple[Any, ...]:
        return (self.algorithm, self.secret, self.length, self.radix)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self),) + self._key())

    def __repr__(self) -> str:
        return "{}(algorithm={}, length={}, radix={})".format(
            type(self).__name__, self.algorithm.name, self.length.value, self.radix.value
        )

    def _accepts_length(self, otp: str) -> bool:
        # A wrong-length candidate is an ordinary failed verification.
        if len(otp) != self.length.value:
            logger.debug("rejected OTP of length %d, expected %d", len(otp), self.length.value)
            return False
        return True

    def _matches(self, otp: str, counter: int) -> bool:
        # Only ASCII letters are case-folded; str.upper() maps some non-ASCII
        # letters onto ASCII ones.
        return otp.isascii() and utils.strings_equal(otp.upper(), self.generate_otp(counter))

    def _check_provisioning(self) -> None:
        if self.length.value != PROVISIONING_LENGTH:
            raise UnsupportedLengthError(self.length.value)
        if self.radix.value != PROVISIONING_RADIX:
            raise UnsupportedRadixError(self.radix.value)
        if self.algorithm is not PROVISIONING_ALGORITHM:
            raise UnsupportedAlgorithmError(self.algorithm)
