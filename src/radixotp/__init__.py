import logging
from typing import Union
from urllib.parse import urlparse

from .algorithm import Algorithm as Algorithm
from .errors import (
    AfterError as AfterError,
    ConfigurationMismatchError as ConfigurationMismatchError,
    CounterError as CounterError,
    DriftBehindError as DriftBehindError,
    HashError as HashError,
    IntervalError as IntervalError,
    InvalidSecretError as InvalidSecretError,
    InvalidURIError as InvalidURIError,
    LengthError as LengthError,
    OTPError as OTPError,
    RadixError as RadixError,
    SecretError as SecretError,
    UnsupportedAlgorithmError as UnsupportedAlgorithmError,
    UnsupportedAlgorithmNameError as UnsupportedAlgorithmNameError,
    UnsupportedIntervalError as UnsupportedIntervalError,
    UnsupportedLengthError as UnsupportedLengthError,
    UnsupportedRadixError as UnsupportedRadixError,
)
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .shortcuts import (
    generate_hotp as generate_hotp,
    generate_totp as generate_totp,
    generate_totp_at as generate_totp_at,
    hotp_provisioning_uri as hotp_provisioning_uri,
    totp_provisioning_uri as totp_provisioning_uri,
    verify_hotp as verify_hotp,
    verify_totp as verify_totp,
    verify_totp_at as verify_totp_at,
)
from .totp import TOTP as TOTP
from .values import Interval as Interval, Length as Length, Radix as Radix, Secret as Secret

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse_uri(uri: str) -> Union[HOTP, TOTP]:
    """
    Parses the provisioning URI for the OTP; works for either TOTP or HOTP.

    The result always has the RFC default configuration with the secret
    taken from the URI; use :meth:`HOTP.parse_uri` to also recover the
    initial counter.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param uri: the hotp/totp URI to parse
    :returns: OTP object
    """
    otp_type = urlparse(uri.strip()).netloc.lower() if isinstance(uri, str) else None
    if otp_type == "totp":
        return TOTP.from_uri(uri)
    if otp_type == "hotp":
        return HOTP.from_uri(uri)
    raise InvalidURIError("Not a supported OTP type")
