"""
Cryptographic operations for Pact commands.

Ed25519 key generation, signing and verification, the Blake2b command hash,
and the hex/base64url encodings used on the wire. Private keys should never
be logged or exposed.
"""
from kadena_sdk.crypto.encoding import (
    bin_to_hex, hex_to_bin, base64url_encode, base64url_decode
)
from kadena_sdk.crypto.keypair import Keypair, hash_bytes, verify_signature

__all__ = [
    "bin_to_hex",
    "hex_to_bin",
    "base64url_encode",
    "base64url_decode",
    "Keypair",
    "hash_bytes",
    "verify_signature",
]
