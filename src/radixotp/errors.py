"""
Exceptions raised by radixotp.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch that, while callers that need to tell a misconfigured verifier
from a bad secret can catch the specific class.
"""
from typing import Any


class OTPError(ValueError):
    """
    Base class for all radixotp errors.
    """


# Construction


class SecretError(OTPError):
    def __init__(self) -> None:
        super().__init__("secret must not be empty")


class RadixError(OTPError):
    def __init__(self, radix: Any) -> None:
        self.radix = radix
        super().__init__("{} must be between 2 and 36".format(radix))


class LengthError(OTPError):
    def __init__(self, length: Any) -> None:
        self.length = length
        super().__init__("{} must be greater than or equal to 1".format(length))


class IntervalError(OTPError):
    def __init__(self, interval: Any) -> None:
        self.interval = interval
        super().__init__("{} must be greater than or equal to 1".format(interval))


class CounterError(OTPError):
    def __init__(self, counter: Any) -> None:
        self.counter = counter
        super().__init__("{} must be an integer between 0 and 2**64 - 1".format(counter))


class UnsupportedAlgorithmNameError(OTPError):
    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__("Unsupported algorithm {!r}, must be SHA1, SHA256 or SHA512".format(name))


# Verification


class DriftBehindError(OTPError):
    """
    ``drift_behind`` reaches back to (or past) the epoch.
    """

    def __init__(self, drift_behind: int, at: int) -> None:
        self.drift_behind = drift_behind
        self.at = at
        super().__init__("{} must be less than `at` ({})".format(drift_behind, at))


class AfterError(OTPError):
    """
    The ``after`` checkpoint lies in the future of the verification time.
    """

    def __init__(self, after: int, at: int) -> None:
        self.after = after
        self.at = at
        super().__init__("{} must be less than or equal to `at` ({})".format(after, at))


# Provisioning


class ConfigurationMismatchError(OTPError):
    """
    The OTP configuration cannot be expressed in a provisioning URI that
    authenticator apps accept.
    """


class UnsupportedAlgorithmError(ConfigurationMismatchError):
    def __init__(self, algorithm: Any) -> None:
        self.algorithm = algorithm
        super().__init__("{} must be SHA1".format(getattr(algorithm, "name", algorithm)))


class UnsupportedLengthError(ConfigurationMismatchError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__("{} must be 6".format(length))


class UnsupportedRadixError(ConfigurationMismatchError):
    def __init__(self, radix: int) -> None:
        self.radix = radix
        super().__init__("{} must be 10".format(radix))


class UnsupportedIntervalError(ConfigurationMismatchError):
    def __init__(self, interval: int) -> None:
        self.interval = interval
        super().__init__("{} must be greater than or equal to 30".format(interval))


# URI parsing


class InvalidSecretError(OTPError):
    def __init__(self, reason: str = "secret is missing or not valid base32") -> None:
        super().__init__(reason)


class InvalidURIError(OTPError):
    pass


# Hashing


class HashError(OTPError):
    """
    The HMAC primitive refused to produce a digest.
    """
