"""
Protocol constants for Sutera identities and signed messages.

The identity string format is::

    <kind>[@<display_name>].sutera-identity-v1.<hex(public_key)>
"""

from typing import Final

IDENTITY_VERSION: Final[str] = "sutera-identity-v1"
"""Version token expected in the middle segment of an identity string."""

SEGMENT_SEPARATOR: Final[str] = "."
"""Separator between the kind, version and key segments."""

SEGMENT_COUNT: Final[int] = 3
"""Number of segments in a well-formed identity string."""

DISPLAY_NAME_SEPARATOR: Final[str] = "@"
"""Separator between the kind token and the optional display name."""

PUBLIC_KEY_LENGTH: Final[int] = 32
"""Ed25519 public key size in bytes."""

PRIVATE_KEY_LENGTH: Final[int] = 32
"""Ed25519 private key seed size in bytes."""

PUBLIC_KEY_HEX_LENGTH: Final[int] = 2 * PUBLIC_KEY_LENGTH
"""Length of the hex-encoded public key segment."""

SIGNATURE_LENGTH: Final[int] = 64
"""Ed25519 signature size in bytes."""

SIGNATURE_HEX_LENGTH: Final[int] = 2 * SIGNATURE_LENGTH
"""Length of the hex-encoded signature text."""

HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")
"""Characters accepted in hex-encoded keys and signatures."""
