"""
Sutera signature module.

Provides the signed message envelope, its wire payload, and the Ed25519
signing capability it uses by default.
"""

from .keypair import Ed25519Keypair, SigningCapability, Verifier, verify_signature
from .message import SignedMessage, SignedMessagePayload
from .signature import Ed25519Signature

__all__ = [
    "Ed25519Keypair",
    "Ed25519Signature",
    "SignedMessage",
    "SignedMessagePayload",
    "SigningCapability",
    "Verifier",
    "verify_signature",
]
