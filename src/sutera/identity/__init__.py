"""
Sutera identity module.

Provides the identity record and its canonical text codec::

    user@alice.sutera-identity-v1.<64 hex characters>
"""

from .identity import SuteraIdentity, is_valid_display_name
from .kind import IdentityKind

__all__ = [
    "IdentityKind",
    "SuteraIdentity",
    "is_valid_display_name",
]
