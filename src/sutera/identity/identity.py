"""
Sutera Identity
===============

An identity names a network participant by its kind, an optional display
name, and the Ed25519 public key that authenticates it.

String Format
-------------

Identities have a single canonical text form::

    <kind>[@<display_name>].sutera-identity-v1.<hex(public_key)>

- `kind`: token of an `IdentityKind` (currently only "user")
- `display_name`: optional, ASCII alphanumeric, for humans only
- `hex(public_key)`: exactly 64 lowercase hex characters

Examples::

    user.sutera-identity-v1.0000000000000000000000000000000000000000000000000000000000000000
    user@alice.sutera-identity-v1.ab01...ef

The display name carries no authentication weight. Two identities with the
same key and different names are different values but the same signer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import field_validator
from typing_extensions import Self

from sutera.constants import (
    DISPLAY_NAME_SEPARATOR,
    HEX_DIGITS,
    IDENTITY_VERSION,
    PUBLIC_KEY_HEX_LENGTH,
    SEGMENT_COUNT,
    SEGMENT_SEPARATOR,
)
from sutera.types import Bytes32, StrictBaseModel
from sutera.types.exceptions import InvalidFormatError, VersionMismatchError

from .kind import IdentityKind

if TYPE_CHECKING:
    from sutera.signature.keypair import SigningCapability


def is_valid_display_name(name: str) -> bool:
    """Check that a display name is non-empty and only contains ASCII letters and digits."""
    return name.isascii() and name.isalnum()


class SuteraIdentity(StrictBaseModel):
    """A participant in the Sutera network."""

    kind: IdentityKind = IdentityKind.USER
    """Category of entity this identity denotes."""

    display_name: str | None = None
    """Human-readable label. Plays no role in authentication."""

    public_key: Bytes32
    """Ed25519 verifying key. The sole authentication anchor."""

    @field_validator("display_name")
    @classmethod
    def _validate_display_name(cls, v: str | None) -> str | None:
        """Reject empty or non-alphanumeric display names."""
        if v is not None and not is_valid_display_name(v):
            raise ValueError(f"display name must be non-empty ASCII alphanumeric, got {v!r}")
        return v

    @classmethod
    def from_keypair(
        cls,
        signer: SigningCapability,
        display_name: str | None = None,
        kind: IdentityKind = IdentityKind.USER,
    ) -> Self:
        """
        Build the identity matching a signing capability.

        Args:
            signer: Holder of the private key.
            display_name: Optional human-readable label.
            kind: Identity kind.

        Returns:
            Identity whose public key is the signer's verifying key.
        """
        return cls(kind=kind, display_name=display_name, public_key=signer.verifying_key())

    def to_string(self) -> str:
        """
        Serialize to the canonical text form.

        The `@<display_name>` suffix is omitted when there is no display name.
        """
        block = self.kind.token
        if self.display_name is not None:
            block = f"{block}{DISPLAY_NAME_SEPARATOR}{self.display_name}"
        return SEGMENT_SEPARATOR.join([block, IDENTITY_VERSION, self.public_key.hex()])

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> Self:
        """
        Parse an identity from its text form.

        Checks run in a fixed order and the first failure wins:

        1. Exactly three `.`-separated segments.
        2. Non-empty kind segment.
        3. Version token equals `sutera-identity-v1`.
        4. Key segment is 64 characters long.
        5. Kind token is recognized.
        6. Key segment is valid hex.
        7. Display name, when present, is ASCII alphanumeric.

        Args:
            text: Identity string.

        Returns:
            The parsed identity.

        Raises:
            InvalidFormatError: On structural problems (checks 1, 2, 4, 6, 7).
            VersionMismatchError: If the version token is not supported.
            UnsupportedKindError: If the kind token is not recognized.
        """
        segments = text.split(SEGMENT_SEPARATOR)
        if len(segments) != SEGMENT_COUNT:
            raise InvalidFormatError(
                f"expected {SEGMENT_COUNT} segments, got {len(segments)}"
            )

        block, version, key_hex = segments

        if not block:
            raise InvalidFormatError("empty kind segment")

        if version != IDENTITY_VERSION:
            raise VersionMismatchError(version)

        if len(key_hex) != PUBLIC_KEY_HEX_LENGTH:
            raise InvalidFormatError(
                f"public key must be {PUBLIC_KEY_HEX_LENGTH} hex characters, got {len(key_hex)}"
            )

        # Only the first '@' splits; anything after it belongs to the name.
        kind_token, sep, name = block.partition(DISPLAY_NAME_SEPARATOR)
        kind = IdentityKind.from_token(kind_token)
        display_name = name if sep else None

        # bytes.fromhex alone would also accept whitespace.
        if not HEX_DIGITS.issuperset(key_hex):
            raise InvalidFormatError("public key contains non-hex characters")
        public_key = Bytes32(bytes.fromhex(key_hex))

        if display_name is not None and not is_valid_display_name(display_name):
            raise InvalidFormatError(
                f"display name must be non-empty ASCII alphanumeric, got {display_name!r}"
            )

        return cls(kind=kind, display_name=display_name, public_key=public_key)
