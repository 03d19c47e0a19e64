"""Test helpers for Sutera unit tests."""

from .mocks import FakeSigner, fake_verify, make_identity

__all__ = [
    "FakeSigner",
    "fake_verify",
    "make_identity",
]
