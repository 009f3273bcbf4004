"""
Kadena SDK - create, sign and submit Pact commands.
"""
from .version import __version__
from .exceptions import (
    KadenaError, CryptoError, DecodingError, InvalidKeyLength, SigningError,
    CommandError, SerializationError, FetchError, NetworkError, ApiError
)
from .crypto import (
    Keypair, hash_bytes, verify_signature,
    bin_to_hex, hex_to_bin, base64url_encode, base64url_decode
)
from .pact import (
    Cap, Meta, Command, CommandPayload, CommandSigner, CommandVerifier,
    SignaturePayload, Signer, generate_nonce, prepare_exec
)
from .fetch import ApiClient, ApiConfig, NetworkConfig

__all__ = [
    "__version__",
    "KadenaError",
    "CryptoError",
    "DecodingError",
    "InvalidKeyLength",
    "SigningError",
    "CommandError",
    "SerializationError",
    "FetchError",
    "NetworkError",
    "ApiError",
    "Keypair",
    "hash_bytes",
    "verify_signature",
    "bin_to_hex",
    "hex_to_bin",
    "base64url_encode",
    "base64url_decode",
    "Cap",
    "Meta",
    "Command",
    "CommandPayload",
    "CommandSigner",
    "CommandVerifier",
    "SignaturePayload",
    "Signer",
    "generate_nonce",
    "prepare_exec",
    "ApiClient",
    "ApiConfig",
    "NetworkConfig",
]
