"""
Pact command creation and signing.

- cap: capabilities granted to signers
- meta: command metadata (chain, sender, gas, ttl)
- command: payload serialization, hashing and signing
"""
from kadena_sdk.pact.cap import Cap
from kadena_sdk.pact.meta import Meta
from kadena_sdk.pact.command import (
    Command, CommandPayload, CommandSigner, CommandVerifier, ExecCommand,
    ExecPayload, SignaturePayload, Signer, generate_nonce, prepare_exec
)

__all__ = [
    "Cap",
    "Meta",
    "Command",
    "CommandPayload",
    "CommandSigner",
    "CommandVerifier",
    "ExecCommand",
    "ExecPayload",
    "SignaturePayload",
    "Signer",
    "generate_nonce",
    "prepare_exec",
]
