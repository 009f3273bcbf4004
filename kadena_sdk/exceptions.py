"""
Exceptions for the Kadena SDK.
"""
from typing import Optional


class KadenaError(Exception):
    """Base exception for all SDK errors."""
    pass


class CryptoError(KadenaError):
    """Base exception for encoding, key and signature errors."""
    pass


class DecodingError(CryptoError):
    """Raised when hex or base64url input is malformed."""
    pass


class InvalidKeyLength(DecodingError):
    """Raised when a decoded key is not exactly 32 bytes."""
    pass


class SigningError(CryptoError):
    """Raised when the signature scheme fails to sign a message."""

    def __init__(self, message: str, signer_index: Optional[int] = None):
        self.signer_index = signer_index
        super().__init__(message)


class CommandError(KadenaError):
    """Base exception for command preparation errors."""
    pass


class SerializationError(CommandError):
    """Raised when a command payload cannot be canonically serialized."""
    pass


class FetchError(KadenaError):
    """Base exception for errors talking to a Pact API endpoint."""
    pass


class NetworkError(FetchError):
    """Raised when the request could not be delivered (connection, timeout)."""
    pass


class ApiError(FetchError):
    """Raised when the node answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
