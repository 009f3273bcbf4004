"""
Ed25519 keypairs, signatures and the Blake2b command hash.
"""
import hashlib
import logging
from typing import Callable, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey, Ed25519PublicKey
)
from cryptography.hazmat.primitives.serialization import (
    Encoding, PrivateFormat, PublicFormat, NoEncryption
)

from kadena_sdk.crypto.encoding import bin_to_hex, hex_to_bin, base64url_encode
from kadena_sdk.exceptions import DecodingError, InvalidKeyLength, SigningError

logger = logging.getLogger(__name__)

KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
HASH_LENGTH = 32

RandomSource = Callable[[int], bytes]


def hash_bytes(data: bytes) -> str:
    """
    Compute the Blake2b-256 hash of the input.

    Args:
        data: Bytes to hash

    Returns:
        Base64url (unpadded) encoding of the 32-byte digest, 43 characters
    """
    digest = hashlib.blake2b(bytes(data), digest_size=HASH_LENGTH).digest()
    return base64url_encode(digest)


def verify_signature(message: bytes, signature: str, public_key: str) -> bool:
    """
    Verify a hex signature against a hex public key.

    This is the standalone check for when only a public key is at hand.

    Args:
        message: The exact bytes that were signed
        signature: Hex encoded 64-byte Ed25519 signature
        public_key: Hex encoded 32-byte Ed25519 public key

    Returns:
        True if the signature is valid for message under public_key

    Raises:
        DecodingError: If the signature is malformed
        InvalidKeyLength: If the public key is not 32 bytes
    """
    sig_bytes = hex_to_bin(signature)
    pub_bytes = hex_to_bin(public_key)

    if len(pub_bytes) != KEY_LENGTH:
        raise InvalidKeyLength(f"Public key must be {KEY_LENGTH} bytes, got {len(pub_bytes)}")
    if len(sig_bytes) != SIGNATURE_LENGTH:
        raise DecodingError(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(sig_bytes)}")

    try:
        verifying_key = Ed25519PublicKey.from_public_bytes(pub_bytes)
    except ValueError as e:
        raise DecodingError(f"Invalid public key: {e}") from e

    try:
        verifying_key.verify(sig_bytes, bytes(message))
    except InvalidSignature:
        return False
    return True


class Keypair:
    """
    An Ed25519 signing identity.

    The public key is always derived from the private key, so the two can
    never disagree. Instances are immutable.
    """

    __slots__ = ("_signing_key", "_public_bytes")

    def __init__(self, signing_key: Ed25519PrivateKey):
        object.__setattr__(self, "_signing_key", signing_key)
        object.__setattr__(
            self,
            "_public_bytes",
            signing_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw),
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def generate(cls, random_source: Optional[RandomSource] = None) -> "Keypair":
        """
        Generate a new keypair.

        Args:
            random_source: Optional callable returning n random bytes. Defaults
                to the operating system CSPRNG. Intended for deterministic tests.

        Returns:
            New Keypair
        """
        if random_source is None:
            return cls(Ed25519PrivateKey.generate())

        seed = random_source(KEY_LENGTH)
        if len(seed) != KEY_LENGTH:
            raise InvalidKeyLength(f"Random source returned {len(seed)} bytes, expected {KEY_LENGTH}")
        return cls(Ed25519PrivateKey.from_private_bytes(bytes(seed)))

    @classmethod
    def from_private_key(cls, private_key: str) -> "Keypair":
        """
        Restore a keypair from a hex encoded private key.

        Args:
            private_key: 64 hex characters (32 bytes)

        Returns:
            Keypair with the derived public key

        Raises:
            DecodingError: If private_key is not valid hex
            InvalidKeyLength: If it does not decode to exactly 32 bytes
        """
        secret = hex_to_bin(private_key)
        if len(secret) != KEY_LENGTH:
            raise InvalidKeyLength(f"Private key must be {KEY_LENGTH} bytes, got {len(secret)}")
        return cls(Ed25519PrivateKey.from_private_bytes(secret))

    @property
    def public_key_bytes(self) -> bytes:
        return self._public_bytes

    @property
    def private_key_bytes(self) -> bytes:
        return self._signing_key.private_bytes(
            encoding=Encoding.Raw,
            format=PrivateFormat.Raw,
            encryption_algorithm=NoEncryption()
        )

    @property
    def public_key(self) -> str:
        """Hex encoded public key"""
        return bin_to_hex(self._public_bytes)

    @property
    def private_key(self) -> str:
        """Hex encoded private key"""
        return bin_to_hex(self.private_key_bytes)

    def sign(self, message: bytes) -> str:
        """
        Sign a message.

        Args:
            message: Raw bytes to sign

        Returns:
            Hex encoded 64-byte signature (128 characters)

        Raises:
            SigningError: If the signature scheme rejects the input
        """
        try:
            signature = self._signing_key.sign(bytes(message))
        except (TypeError, ValueError) as e:
            raise SigningError(f"Failed to sign message: {e}") from e
        return bin_to_hex(signature)

    def verify(self, message: bytes, signature: str) -> bool:
        """
        Verify a signature with this keypair's public key.

        Args:
            message: The exact bytes that were signed
            signature: Hex encoded signature

        Returns:
            True if the signature is valid

        Raises:
            DecodingError: If the signature is not 64 bytes of hex
        """
        return verify_signature(message, signature, self.public_key)

    def __eq__(self, other):
        if not isinstance(other, Keypair):
            return NotImplemented
        return self._public_bytes == other._public_bytes

    def __hash__(self):
        return hash(self._public_bytes)

    def __repr__(self):
        return f"Keypair(public_key={self.public_key!r})"
