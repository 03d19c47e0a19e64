"""Sutera identities and signed messages."""

from .identity import IdentityKind, SuteraIdentity
from .signature import Ed25519Keypair, Ed25519Signature, SignedMessage, SignedMessagePayload

__all__ = [
    "Ed25519Keypair",
    "Ed25519Signature",
    "IdentityKind",
    "SignedMessage",
    "SignedMessagePayload",
    "SuteraIdentity",
]
