"""
Validated value types.

Each type checks its value once, at construction, so the OTP classes and
the codec can use ``.value`` without re-checking it.
"""
from dataclasses import dataclass, field
from typing import Any, Union

from . import utils
from .errors import IntervalError, LengthError, RadixError, SecretError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Secret:
    """
    Shared HMAC key, a non-empty byte string.
    """

    value: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        if not isinstance(self.value, bytes):
            raise TypeError("Secret expects bytes, use Secret.from_str() or Secret.from_base32() for text")
        if not self.value:
            raise SecretError()

    @classmethod
    def from_str(cls, secret: str) -> "Secret":
        """
        Uses the UTF-8 bytes of ``secret`` as the key, e.g. the RFC 4226
        test key ``"12345678901234567890"``.
        """
        return cls(secret.encode("utf-8"))

    @classmethod
    def from_base32(cls, secret: str) -> "Secret":
        return cls(utils.decode_secret(secret))

    @classmethod
    def coerce(cls, secret: Union["Secret", bytes, bytearray, str]) -> "Secret":
        if isinstance(secret, cls):
            return secret
        if isinstance(secret, str):
            return cls.from_str(secret)
        return cls(secret)

    def to_base32(self) -> str:
        return utils.encode_secret(self.value)


@dataclass(frozen=True)
class Radix:
    """
    Numeric base of the OTP, 2 to 36; digits are ``0-9`` then ``A-Z``.
    """

    value: int = 10

    def __post_init__(self) -> None:
        if not _is_int(self.value) or not 2 <= self.value <= 36:
            raise RadixError(self.value)

    @classmethod
    def coerce(cls, radix: Union["Radix", int]) -> "Radix":
        return radix if isinstance(radix, cls) else cls(radix)


@dataclass(frozen=True)
class Length:
    """
    Number of characters in a generated OTP.
    """

    value: int = 6

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value < 1:
            raise LengthError(self.value)

    @classmethod
    def coerce(cls, length: Union["Length", int]) -> "Length":
        return length if isinstance(length, cls) else cls(length)


@dataclass(frozen=True)
class Interval:
    """
    TOTP time step in seconds.
    """

    value: int = 30

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value < 1:
            raise IntervalError(self.value)

    @classmethod
    def coerce(cls, interval: Union["Interval", int]) -> "Interval":
        return interval if isinstance(interval, cls) else cls(interval)
