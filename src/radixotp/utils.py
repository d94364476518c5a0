import base64
import binascii
import logging
from hmac import compare_digest
from typing import Dict, List, Optional
from urllib.parse import parse_qsl, quote, urlparse

from .errors import CounterError, InvalidSecretError, InvalidURIError

logger = logging.getLogger(__name__)

MAX_COUNTER = 2**64 - 1
OTP_TYPES = ("hotp", "totp")


def check_counter(i: int) -> int:
    if not isinstance(i, int) or isinstance(i, bool) or not 0 <= i <= MAX_COUNTER:
        raise CounterError(i)
    return i


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    check_counter(i)
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def encode_secret(secret: bytes) -> str:
    # The otpauth scheme does not use base32 padding.
    return base64.b32encode(bytes(secret)).decode("ascii").rstrip("=")


def decode_secret(value: str) -> bytes:
    """
    Decodes a base32 secret as found in provisioning URIs: case-insensitive,
    with or without ``=`` padding.

    :raises InvalidSecretError: if the value is empty or not base32
    """
    secret = "".join(value.split()).rstrip("=") if value else ""
    if not secret:
        raise InvalidSecretError("secret must not be empty")
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    try:
        decoded = base64.b32decode(secret, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecretError("secret is not valid base32: {}".format(e)) from e
    if not decoded:
        raise InvalidSecretError("secret must not be empty")
    return decoded


def build_uri(
    otp_type: str,
    secret: bytes,
    user: str,
    issuer: Optional[str] = None,
    initial_count: Optional[int] = None,
) -> str:
    """
    Returns the provisioning URI for the OTP; works for either TOTP or HOTP.

    This can then be encoded in a QR Code and used to provision the Google
    Authenticator app.

    For module-internal use; callers are expected to have checked that the
    configuration is one authenticator apps accept.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param otp_type: ``"hotp"`` or ``"totp"``
    :param secret: raw secret bytes, written base32-encoded
    :param user: name of the account
    :param issuer: the name of the OTP issuer; when empty the label is just
        ``user`` and no ``issuer`` parameter is written
    :param initial_count: HOTP starting counter, written as ``counter``
    :returns: provisioning uri
    """
    if otp_type not in OTP_TYPES:
        raise InvalidURIError("Not a supported OTP type: {!r}".format(otp_type))

    label = "{}:{}".format(issuer, user) if issuer else user
    url_args: List[str] = ["secret=" + quote(encode_secret(secret), safe="")]
    if initial_count is not None:
        url_args.append("counter={}".format(initial_count))
    if issuer:
        url_args.append("issuer=" + quote(issuer, safe=""))

    return "otpauth://{0}/{1}?{2}".format(otp_type, quote(label, safe=""), "&".join(url_args))


def parse_query(uri: str, otp_type: str) -> Dict[str, str]:
    """
    Splits an ``otpauth://`` URI into its percent-decoded query parameters.

    Parameters may appear in any order; when a key is repeated the first
    occurrence wins. Blank values are kept so that ``secret=`` can be told
    apart from a missing secret.

    :raises InvalidURIError: if the scheme is not ``otpauth`` or the type
        is not ``otp_type``
    """
    if not isinstance(uri, str):
        raise InvalidURIError("URI must be a string")
    parsed_uri = urlparse(uri.strip())

    if parsed_uri.scheme != "otpauth":
        logger.debug("rejected URI with scheme %r", parsed_uri.scheme)
        raise InvalidURIError("Not an otpauth URI")
    if parsed_uri.netloc.lower() != otp_type:
        logger.debug("rejected %r URI where %r was expected", parsed_uri.netloc, otp_type)
        raise InvalidURIError("Not a {} URI".format(otp_type))

    params: Dict[str, str] = {}
    for key, value in parse_qsl(parsed_uri.query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def parse_counter(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InvalidURIError("counter must be a non-negative integer, got {!r}".format(value))
    counter = int(value)
    if counter > MAX_COUNTER:
        raise InvalidURIError("counter {} does not fit in 64 bits".format(counter))
    return counter


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length. No Unicode normalization is applied: lookalike digits such as
    fullwidth or superscript forms do not compare equal.
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
