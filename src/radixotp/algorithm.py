import hashlib
import hmac
from enum import Enum
from typing import Any, Union

from . import utils
from .errors import HashError, UnsupportedAlgorithmNameError


class Algorithm(Enum):
    """
    HMAC digest used to derive an OTP.

    The member name (``"SHA1"``, ``"SHA256"``, ``"SHA512"``) is the canonical
    spelling used both for display and in provisioning URIs.
    """

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digest(self) -> Any:
        return getattr(hashlib, self.value)

    def hash(self, secret: bytes, counter: int) -> bytes:
        """
        HMAC of the 8-byte big-endian ``counter`` keyed with ``secret``.

        :param secret: raw key bytes
        :param counter: HOTP counter or TOTP time code
        :returns: 20, 32 or 64 bytes depending on the algorithm
        """
        message = utils.int_to_bytestring(counter)
        try:
            return hmac.new(secret, message, self.digest).digest()
        except (TypeError, ValueError) as e:
            raise HashError("{} failed: {}".format(self.name, e)) from e

    @classmethod
    def from_string(cls, name: Union[str, "Algorithm"]) -> "Algorithm":
        """
        Looks up an algorithm by name; ``"sha256"``, ``"SHA256"`` and
        ``"SHA-256"`` are all accepted.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedAlgorithmNameError(name)
        try:
            return cls[name.strip().upper().replace("-", "")]
        except KeyError:
            raise UnsupportedAlgorithmNameError(name) from None

    def __str__(self) -> str:
        return self.name
