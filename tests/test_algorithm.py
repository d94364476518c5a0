import hashlib
import hmac
import struct

import pytest

from radixotp import Algorithm, CounterError, UnsupportedAlgorithmNameError


def test_names() -> None:
    assert str(Algorithm.SHA1) == "SHA1"
    assert Algorithm.SHA256.name == "SHA256"
    assert Algorithm.SHA512.name == "SHA512"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("SHA1", Algorithm.SHA1),
        ("sha256", Algorithm.SHA256),
        ("SHA-512", Algorithm.SHA512),
        (Algorithm.SHA256, Algorithm.SHA256),
    ],
)
def test_from_string(name: str, expected: Algorithm) -> None:
    assert Algorithm.from_string(name) is expected


@pytest.mark.parametrize("name", ["MD5", "INVALID", "", 1])
def test_from_string_rejects_unknown(name: str) -> None:
    with pytest.raises(UnsupportedAlgorithmNameError, match="Unsupported algorithm"):
        Algorithm.from_string(name)


@pytest.mark.parametrize(
    "algorithm,digestmod,size",
    [
        (Algorithm.SHA1, hashlib.sha1, 20),
        (Algorithm.SHA256, hashlib.sha256, 32),
        (Algorithm.SHA512, hashlib.sha512, 64),
    ],
)
def test_hash_is_hmac_of_big_endian_counter(algorithm: Algorithm, digestmod: object, size: int) -> None:
    expected = hmac.new(b"mysecret", struct.pack(">Q", 12345), digestmod).digest()
    result = algorithm.hash(b"mysecret", 12345)
    assert result == expected
    assert len(result) == size


@pytest.mark.parametrize("counter", [-1, 2**64])
def test_hash_rejects_counter_outside_u64(counter: int) -> None:
    with pytest.raises(CounterError):
        Algorithm.SHA1.hash(b"key", counter)
