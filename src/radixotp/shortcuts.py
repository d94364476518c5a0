"""
One-call helpers over primitive arguments.

Each helper builds the validated configuration from plain values (an
algorithm name, a text secret, integers), so invalid input raises the same
construction errors as the classes, then delegates to :class:`HOTP` or
:class:`TOTP`.
"""
from typing import Optional, Union

from .algorithm import Algorithm
from .hotp import HOTP
from .totp import TOTP

AlgorithmLike = Union[Algorithm, str]


def _hotp(algorithm: AlgorithmLike, secret: str, length: int, radix: int) -> HOTP:
    return HOTP(secret, length=length, radix=radix, algorithm=algorithm)


def _totp(algorithm: AlgorithmLike, secret: str, length: int, radix: int, interval: int) -> TOTP:
    return TOTP(secret, length=length, radix=radix, algorithm=algorithm, interval=interval)


def generate_hotp(algorithm: AlgorithmLike, secret: str, length: int, radix: int, counter: int) -> str:
    return _hotp(algorithm, secret, length, radix).generate(counter)


def verify_hotp(
    algorithm: AlgorithmLike, secret: str, otp: str, length: int, radix: int, counter: int, retries: int = 0
) -> Optional[int]:
    return _hotp(algorithm, secret, length, radix).verify(otp, counter, retries)


def hotp_provisioning_uri(
    algorithm: AlgorithmLike, secret: str, length: int, radix: int, issuer: str, user: str, counter: int = 0
) -> str:
    return _hotp(algorithm, secret, length, radix).provisioning_uri(issuer, user, counter)


def generate_totp(algorithm: AlgorithmLike, secret: str, length: int, radix: int, interval: int) -> str:
    return _totp(algorithm, secret, length, radix, interval).generate()


def generate_totp_at(
    algorithm: AlgorithmLike, secret: str, length: int, radix: int, interval: int, timestamp: int
) -> str:
    return _totp(algorithm, secret, length, radix, interval).generate_at(timestamp)


def verify_totp(
    algorithm: AlgorithmLike,
    secret: str,
    otp: str,
    length: int,
    radix: int,
    interval: int,
    after: Optional[int] = None,
    drift_ahead: int = 0,
    drift_behind: int = 0,
) -> Optional[int]:
    return _totp(algorithm, secret, length, radix, interval).verify(otp, after, drift_ahead, drift_behind)


def verify_totp_at(
    algorithm: AlgorithmLike,
    secret: str,
    otp: str,
    length: int,
    radix: int,
    interval: int,
    at: int,
    after: Optional[int] = None,
    drift_ahead: int = 0,
    drift_behind: int = 0,
) -> Optional[int]:
    return _totp(algorithm, secret, length, radix, interval).verify_at(otp, at, after, drift_ahead, drift_behind)


def totp_provisioning_uri(
    algorithm: AlgorithmLike, secret: str, length: int, radix: int, interval: int, issuer: str, user: str
) -> str:
    return _totp(algorithm, secret, length, radix, interval).provisioning_uri(issuer, user)
