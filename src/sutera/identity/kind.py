"""
Identity kinds.

The kind is the first token of an identity string and names the category of
entity the identity denotes. The set is closed: a parser only accepts the
tokens listed here, so a string minted by a newer library with an unknown
kind is rejected rather than misread.
"""

from __future__ import annotations

from enum import Enum

from sutera.types.exceptions import UnsupportedKindError


class IdentityKind(Enum):
    """
    Enumerates identity kinds, each bound to its canonical text token.

    Adding a kind is a single new member; both directions of the mapping
    read the member's value.
    """

    USER = "user"
    """A human participant."""

    @property
    def token(self) -> str:
        """Canonical text token used in the identity string."""
        return self.value

    @classmethod
    def from_token(cls, token: str) -> IdentityKind:
        """
        Look up a kind by its text token.

        Matching is exact and case-sensitive.

        Args:
            token: Kind token taken from an identity string.

        Returns:
            The matching kind.

        Raises:
            UnsupportedKindError: If no kind uses this token.
        """
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedKindError(token) from None

    def __str__(self) -> str:
        return self.token
