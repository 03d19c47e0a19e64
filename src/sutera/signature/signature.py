"""
Ed25519 signature value and its text encoding.

On the wire a signature is 128 uppercase hexadecimal characters. Decoding
accepts either case, so lowercase text produced by other tools round-trips to
the same value.
"""

from __future__ import annotations

from typing_extensions import Self

from sutera.constants import HEX_DIGITS, SIGNATURE_HEX_LENGTH
from sutera.types import Bytes64
from sutera.types.exceptions import SignatureFormatError


class Ed25519Signature(Bytes64):
    """A 64-byte Ed25519 signature."""

    def to_string(self) -> str:
        """Return the canonical text form (uppercase hex)."""
        return self.hex().upper()

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> Self:
        """
        Decode a signature from hex text.

        Args:
            text: 128 hex characters, either case.

        Returns:
            The decoded signature.

        Raises:
            SignatureFormatError: If the length is wrong or a character is not hex.
        """
        if len(text) != SIGNATURE_HEX_LENGTH:
            raise SignatureFormatError(
                f"expected {SIGNATURE_HEX_LENGTH} hex characters, got {len(text)}"
            )
        if not HEX_DIGITS.issuperset(text):
            raise SignatureFormatError("contains non-hex characters")
        return cls(bytes.fromhex(text))
