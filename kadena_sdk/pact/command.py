"""
Pact command payloads and the signed command envelope.

A command is prepared by serializing a CommandPayload to canonical JSON,
hashing that exact text with Blake2b and signing the raw digest once per
signer. The resulting Command carries the hash, the signatures (in signer
order) and the serialized text itself, which must be transmitted unmodified.
"""
import json
import logging
import secrets
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from kadena_sdk.crypto.encoding import base64url_decode, base64url_encode
from kadena_sdk.crypto.keypair import RandomSource, hash_bytes, verify_signature
from kadena_sdk.exceptions import DecodingError, SerializationError, SigningError
from kadena_sdk.pact.cap import Cap
from kadena_sdk.pact.meta import Meta

logger = logging.getLogger(__name__)

ED25519_SCHEME = "ED25519"
NONCE_SOURCE_BYTES = 32
NONCE_BYTES = 24


class Signer(Protocol):
    """Protocol for anything that can sign a command hash"""
    public_key: str

    def sign(self, message: bytes) -> str:
        """Sign raw bytes and return a hex signature"""
        ...


def generate_nonce(random_source: Optional[RandomSource] = None) -> str:
    """
    Generate a random command nonce.

    32 bytes are drawn from the random source and the first 24 of them are
    base64url encoded, giving a 32 character string.

    Args:
        random_source: Callable returning n random bytes (defaults to
            secrets.token_bytes)
    """
    source = random_source or secrets.token_bytes
    random_bytes = source(NONCE_SOURCE_BYTES)
    return base64url_encode(random_bytes[:NONCE_BYTES])


class CommandSigner(BaseModel):
    """A signer entry of the command: scheme, public key and capability list"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scheme: str = ED25519_SCHEME
    pub_key: str = Field(..., alias="pubKey")
    clist: List[Cap] = []

    @classmethod
    def new_ed25519(cls, pub_key: str, caps: Sequence[Cap]) -> "CommandSigner":
        return cls(scheme=ED25519_SCHEME, pub_key=pub_key, clist=list(caps))


class CommandVerifier(BaseModel):
    """A verifier plugin entry: plugin name, proof and capability list"""
    model_config = ConfigDict(frozen=True)

    name: str
    proof: str
    clist: List[Cap] = []

    @classmethod
    def new_verifier(cls, name: str, proof: str, caps: Sequence[Cap]) -> "CommandVerifier":
        return cls(name=name, proof=proof, clist=list(caps))


class ExecCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = ""
    data: Any = Field(default_factory=dict)


class ExecPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    exec: ExecCommand = Field(default_factory=ExecCommand)


class CommandPayload(BaseModel):
    """
    The command body that gets hashed and signed.

    Field order is part of the wire format:
    nonce, meta, signers, verifiers, networkId, payload.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nonce: str
    meta: Meta
    signers: List[CommandSigner] = []
    verifiers: List[CommandVerifier] = []
    network_id: Optional[str] = Field(None, alias="networkId")
    payload: ExecPayload = Field(default_factory=ExecPayload)

    @classmethod
    def new(cls, meta: Meta, random_source: Optional[RandomSource] = None) -> "CommandPayload":
        """Create an empty payload with a fresh random nonce."""
        return cls(nonce=generate_nonce(random_source), meta=meta)

    def with_nonce(self, nonce: str) -> "CommandPayload":
        return self._replace(nonce=nonce)

    def with_network_id(self, network_id: Optional[str]) -> "CommandPayload":
        return self._replace(network_id=network_id)

    def with_code(self, code: str) -> "CommandPayload":
        return self._with_exec(code=code)

    def with_env_data(self, data: Any) -> "CommandPayload":
        return self._with_exec(data=data)

    def with_signers(self, signers: Sequence[CommandSigner]) -> "CommandPayload":
        return self._replace(signers=list(signers))

    def with_verifiers(self, verifiers: Sequence[CommandVerifier]) -> "CommandPayload":
        return self._replace(verifiers=list(verifiers))

    def add_signer(self, signer: CommandSigner) -> "CommandPayload":
        return self._replace(signers=[*self.signers, signer])

    def add_verifier(self, verifier: CommandVerifier) -> "CommandPayload":
        return self._replace(verifiers=[*self.verifiers, verifier])

    def _with_exec(self, **update) -> "CommandPayload":
        exec_cmd = ExecCommand.model_validate({**dict(self.payload.exec), **update})
        return self._replace(payload=ExecPayload(exec=exec_cmd))

    def _replace(self, **update) -> "CommandPayload":
        """Validated copy with ``update`` applied."""
        return self.model_validate({**dict(self), **update})

    def to_json(self) -> str:
        """
        Serialize to canonical JSON.

        Compact separators, declaration field order, networkId omitted when
        unset. The same payload always yields the same text.

        Raises:
            SerializationError: If a value has no JSON representation
        """
        try:
            body = self.model_dump(mode="python", by_alias=True)
            if body.get("networkId") is None:
                body.pop("networkId", None)
            return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize command: {e}") from e


class SignaturePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    sig: str


class Command(BaseModel):
    """
    A prepared, signed command.

    sigs[i] belongs to the i-th signer of the serialized payload unless that
    signer is listed in missing_signers (only possible with allow_partial).
    """
    model_config = ConfigDict(frozen=True)

    hash: str
    sigs: List[SignaturePayload]
    cmd: str
    missing_signers: Tuple[int, ...] = Field((), exclude=True)

    @property
    def is_fully_signed(self) -> bool:
        return not self.missing_signers

    def to_request(self) -> Dict[str, Any]:
        """Return the envelope as posted to the Pact API."""
        return {
            "hash": self.hash,
            "sigs": [{"sig": s.sig} for s in self.sigs],
            "cmd": self.cmd,
        }

    def signer_public_keys(self) -> List[str]:
        """Public keys of the signers, in order, as found in the serialized payload."""
        try:
            body = json.loads(self.cmd)
            return [s["pubKey"] for s in body.get("signers", [])]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise DecodingError(f"Command body is not a valid payload: {e}") from e

    def verify(self, public_keys: Optional[Sequence[str]] = None) -> bool:
        """
        Check the hash against the command text and every signature against
        its signer's public key.

        Args:
            public_keys: Signer public keys in payload order; read from the
                command body when omitted

        Returns:
            True if the hash matches and all present signatures verify
        """
        if hash_bytes(self.cmd.encode("utf-8")) != self.hash:
            return False

        keys = list(public_keys) if public_keys is not None else self.signer_public_keys()
        signed_keys = [k for i, k in enumerate(keys) if i not in self.missing_signers]
        if len(signed_keys) != len(self.sigs):
            return False

        raw_hash = base64url_decode(self.hash)
        return all(
            verify_signature(raw_hash, s.sig, key)
            for s, key in zip(self.sigs, signed_keys)
        )

    @classmethod
    def prepare_exec(
        cls,
        signers: Sequence[Tuple[Signer, Sequence[Cap]]],
        verifiers: Optional[Sequence[CommandVerifier]],
        nonce: Optional[str],
        code: str,
        env_data: Optional[Any],
        meta: Meta,
        network_id: Optional[str] = None,
        *,
        random_source: Optional[RandomSource] = None,
        allow_partial: bool = False
    ) -> "Command":
        """
        Prepare and sign an exec command.

        Args:
            signers: (signer, capabilities) pairs; the order is kept in the
                payload and in the signature list
            verifiers: Verifier plugin entries (None for none)
            nonce: Nonce to embed verbatim; a random one is generated if None
            code: Pact code to execute
            env_data: Environment data; defaults to an empty object
            meta: Command metadata
            network_id: Network identifier, e.g. "testnet04"
            random_source: Callable returning n random bytes, used for the nonce
            allow_partial: Skip signers whose signing fails instead of raising;
                skipped indices are reported in Command.missing_signers

        Returns:
            The signed Command

        Raises:
            SerializationError: If the payload cannot be serialized
            SigningError: If a signer fails and allow_partial is False
        """
        signers = list(signers)
        signer_entries = [
            CommandSigner.new_ed25519(signer.public_key, caps)
            for signer, caps in signers
        ]

        payload = CommandPayload(
            nonce=nonce if nonce is not None else generate_nonce(random_source),
            meta=meta,
            signers=signer_entries,
            verifiers=list(verifiers or []),
            network_id=network_id,
            payload=ExecPayload(exec=ExecCommand(
                code=code,
                data=env_data if env_data is not None else {},
            )),
        )

        cmd = payload.to_json()
        cmd_hash = hash_bytes(cmd.encode("utf-8"))
        raw_hash = base64url_decode(cmd_hash)
        logger.debug(f"Prepared command {cmd_hash} with {len(signer_entries)} signer(s)")

        sigs: List[SignaturePayload] = []
        missing: List[int] = []
        for index, (signer, _) in enumerate(signers):
            try:
                sigs.append(SignaturePayload(sig=signer.sign(raw_hash)))
            except Exception as e:
                if not allow_partial:
                    logger.error(f"Signer {index} failed to sign command {cmd_hash}: {e}")
                    raise SigningError(
                        f"Signer {index} failed to sign command: {e}", signer_index=index
                    ) from e
                logger.warning(f"Signer {index} failed to sign command {cmd_hash}, omitting: {e}")
                missing.append(index)

        return cls(hash=cmd_hash, sigs=sigs, cmd=cmd, missing_signers=tuple(missing))


prepare_exec = Command.prepare_exec
