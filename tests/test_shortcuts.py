from unittest.mock import patch

import pytest

import radixotp
from radixotp import (
    HOTP,
    TOTP,
    InvalidURIError,
    LengthError,
    RadixError,
    Secret,
    SecretError,
    UnsupportedAlgorithmNameError,
)

SECRET = "12345678901234567890"
SECRET_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_generate_and_verify_hotp() -> None:
    assert radixotp.generate_hotp("SHA1", SECRET, 6, 10, 1) == "287082"
    assert radixotp.verify_hotp("SHA1", SECRET, "287082", 6, 10, 0, 3) == 1
    assert radixotp.verify_hotp("SHA1", SECRET, "28708", 6, 10, 0, 3) is None


@pytest.mark.parametrize(
    "args,error",
    [
        (("SHA256", "", 6, 10, 0), SecretError),
        (("SHA256", SECRET, 0, 10, 0), LengthError),
        (("SHA256", SECRET, 6, 1, 0), RadixError),
        (("SHA256", SECRET, 6, 37, 0), RadixError),
        (("MD5", SECRET, 6, 10, 0), UnsupportedAlgorithmNameError),
    ],
)
def test_generate_hotp_rejects_invalid_arguments(args: tuple, error: type) -> None:
    with pytest.raises(error):
        radixotp.generate_hotp(*args)


def test_hotp_provisioning_uri() -> None:
    assert radixotp.hotp_provisioning_uri("SHA1", SECRET, 6, 10, "Github", "rachel", 4) == (
        "otpauth://hotp/Github%3Arachel?secret=" + SECRET_B32 + "&counter=4&issuer=Github"
    )


def test_generate_and_verify_totp_at() -> None:
    assert radixotp.generate_totp_at("SHA256", "12345678901234567890123456789012", 8, 10, 30, 59) == "46119246"
    assert radixotp.verify_totp_at("SHA1", SECRET, "94287082", 8, 10, 30, 59) == 59
    assert radixotp.verify_totp_at("SHA1", SECRET, "94287082", 8, 10, 30, 59, None, 0, 30) == 30


def test_totp_against_clock() -> None:
    with patch("time.time", return_value=59):
        assert radixotp.generate_totp("SHA1", SECRET, 8, 10, 30) == "94287082"
        assert radixotp.verify_totp("SHA1", SECRET, "94287082", 8, 10, 30) == 59


def test_totp_provisioning_uri() -> None:
    assert radixotp.totp_provisioning_uri("SHA1", SECRET, 6, 10, 30, "", "rachel") == (
        "otpauth://totp/rachel?secret=" + SECRET_B32
    )


def test_parse_uri_dispatches_on_type() -> None:
    hotp = radixotp.parse_uri("otpauth://hotp/a?secret=" + SECRET_B32 + "&counter=3")
    totp = radixotp.parse_uri("otpauth://totp/a?secret=" + SECRET_B32)
    assert hotp == HOTP.default(Secret.from_str(SECRET))
    assert totp == TOTP.default(Secret.from_str(SECRET))


@pytest.mark.parametrize("uri", ["otpauth://motp/a?secret=" + SECRET_B32, "not a uri"])
def test_parse_uri_rejects_unknown_type(uri: str) -> None:
    with pytest.raises(InvalidURIError):
        radixotp.parse_uri(uri)
