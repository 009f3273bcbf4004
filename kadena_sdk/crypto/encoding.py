"""
Hex and URL-safe base64 helpers used for keys, signatures and hashes.
"""
import base64
import binascii
import re

from kadena_sdk.exceptions import DecodingError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def bin_to_hex(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return bytes(data).hex()


def hex_to_bin(s: str) -> bytes:
    """
    Decode a hex string.

    Args:
        s: Hex string without prefix or separators

    Returns:
        Decoded bytes

    Raises:
        DecodingError: If the string has odd length or non-hex characters
    """
    if not isinstance(s, str) or not _HEX_RE.fullmatch(s):
        raise DecodingError(f"Invalid hex string: {s!r}")
    if len(s) % 2:
        raise DecodingError(f"Hex string has odd length {len(s)}")
    return bytes.fromhex(s)


def base64url_encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 with the trailing padding stripped."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def base64url_decode(s: str) -> bytes:
    """
    Decode unpadded URL-safe base64.

    Args:
        s: Base64url string without '=' padding

    Returns:
        Decoded bytes

    Raises:
        DecodingError: On characters outside the URL-safe alphabet, an
            impossible length or non-canonical trailing bits
    """
    if not isinstance(s, str) or not _B64URL_RE.fullmatch(s):
        raise DecodingError(f"Invalid base64url string: {s!r}")
    if len(s) % 4 == 1:
        raise DecodingError(f"Invalid base64url length {len(s)}")

    try:
        decoded = base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"Invalid base64url string: {e}") from e

    # Leftover bits in the last character must be zero
    if base64url_encode(decoded) != s:
        raise DecodingError("Invalid base64url string: non-canonical trailing bits")
    return decoded
