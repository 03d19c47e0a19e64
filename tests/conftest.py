"""Pytest configuration and shared fixtures."""

import pytest
from hypothesis import settings

from sutera.identity import SuteraIdentity
from sutera.signature import Ed25519Keypair

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")


@pytest.fixture
def keypair() -> Ed25519Keypair:
    """A fresh random Ed25519 keypair."""
    return Ed25519Keypair.generate()


@pytest.fixture
def identity(keypair: Ed25519Keypair) -> SuteraIdentity:
    """Identity named "see2et" bound to the `keypair` fixture."""
    return SuteraIdentity.from_keypair(keypair, display_name="see2et")
