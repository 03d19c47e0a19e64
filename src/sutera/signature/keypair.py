"""
Ed25519 signing capability for Sutera identities.

Signed messages do not depend on a concrete key type. They take any object
satisfying `SigningCapability` to sign, and a `Verifier` callable to check.
`Ed25519Keypair` and `verify_signature` are the default implementations,
backed by the `cryptography` package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from sutera.constants import PRIVATE_KEY_LENGTH
from sutera.types import Bytes32, Bytes64

__all__ = [
    "Ed25519Keypair",
    "SigningCapability",
    "Verifier",
    "verify_signature",
]


@runtime_checkable
class SigningCapability(Protocol):
    """
    Holder of a private key, able to sign on behalf of one identity.

    Matches `Ed25519Keypair` and test fakes.
    """

    def verifying_key(self) -> Bytes32:
        """Return the 32-byte public key matching the private key."""
        ...

    def sign(self, message: bytes) -> Bytes64:
        """Sign raw bytes, returning a 64-byte signature."""
        ...


Verifier = Callable[[Bytes32, bytes, Bytes64], bool]
"""Checks `(public_key, message, signature)`. Must return False rather than raise."""


@dataclass(frozen=True, slots=True)
class Ed25519Keypair:
    """
    Ed25519 keypair for a Sutera identity.

    Attributes:
        private_key: The Ed25519 private key.
    """

    private_key: ed25519.Ed25519PrivateKey

    @classmethod
    def generate(cls) -> Ed25519Keypair:
        """
        Generate a new random Ed25519 keypair.

        Returns:
            A fresh keypair.
        """
        return cls(private_key=ed25519.Ed25519PrivateKey.generate())

    @classmethod
    def from_bytes(cls, data: bytes) -> Ed25519Keypair:
        """
        Load keypair from a raw private key seed.

        Args:
            data: 32-byte Ed25519 seed.

        Returns:
            Keypair derived from the seed.

        Raises:
            ValueError: If data is not 32 bytes.
        """
        if len(data) != PRIVATE_KEY_LENGTH:
            raise ValueError(f"Expected {PRIVATE_KEY_LENGTH} bytes, got {len(data)}")

        return cls(private_key=ed25519.Ed25519PrivateKey.from_private_bytes(bytes(data)))

    def private_key_bytes(self) -> Bytes32:
        """Return the raw 32-byte private key seed."""
        return Bytes32(self.private_key.private_bytes_raw())

    def verifying_key(self) -> Bytes32:
        """Return the raw 32-byte public key."""
        return Bytes32(self.private_key.public_key().public_bytes_raw())

    def sign(self, message: bytes) -> Bytes64:
        """
        Sign a message with Ed25519.

        Ed25519 is deterministic: the same key and message give the same signature.

        Args:
            message: Data to sign.

        Returns:
            64-byte signature.
        """
        return Bytes64(self.private_key.sign(message))


def verify_signature(public_key: Bytes32, message: bytes, signature: Bytes64) -> bool:
    """
    Verify an Ed25519 signature.

    Args:
        public_key: 32-byte public key.
        message: Original message that was signed.
        signature: 64-byte signature.

    Returns:
        True if signature is valid, False otherwise.
    """
    try:
        key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(public_key))
        key.verify(bytes(signature), message)
    except (InvalidSignature, ValueError):
        return False
    return True
