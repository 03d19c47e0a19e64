"""
Deterministic signing fakes.

The fake scheme "signs" by hashing the public key together with the message,
which makes signatures reproducible and independent of any real curve.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from sutera.identity import IdentityKind, SuteraIdentity
from sutera.types import Bytes32, Bytes64


def _fake_signature(public_key: bytes, message: bytes) -> Bytes64:
    return Bytes64(hashlib.sha512(bytes(public_key) + message).digest())


@dataclass(frozen=True)
class FakeSigner:
    """Signing capability whose signatures are sha512(public_key || message)."""

    public_key: Bytes32

    def verifying_key(self) -> Bytes32:
        """Return the configured public key."""
        return self.public_key

    def sign(self, message: bytes) -> Bytes64:
        """Produce the deterministic fake signature."""
        return _fake_signature(self.public_key, message)


def fake_verify(public_key: Bytes32, message: bytes, signature: Bytes64) -> bool:
    """Verifier matching `FakeSigner`."""
    return bytes(signature) == _fake_signature(public_key, message)


def make_identity(
    key_byte: int = 0,
    display_name: str | None = None,
    kind: IdentityKind = IdentityKind.USER,
) -> SuteraIdentity:
    """Build an identity whose public key repeats `key_byte`."""
    return SuteraIdentity(
        kind=kind,
        display_name=display_name,
        public_key=Bytes32(bytes([key_byte]) * 32),
    )
