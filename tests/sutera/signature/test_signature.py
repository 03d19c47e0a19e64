"""Tests for the signature text encoding."""

import pytest

from sutera.signature import Ed25519Keypair, Ed25519Signature
from sutera.types.exceptions import SignatureFormatError


class TestEd25519Signature:
    """Tests for encoding and decoding signature text."""

    def test_to_string_is_uppercase_hex(self) -> None:
        signature = Ed25519Signature(bytes(range(64)))
        text = signature.to_string()
        assert len(text) == 128
        assert text == bytes(range(64)).hex().upper()
        assert str(signature) == text

    def test_round_trip(self) -> None:
        signature = Ed25519Signature(Ed25519Keypair.generate().sign(b"hello"))
        assert Ed25519Signature.from_string(signature.to_string()) == signature

    def test_accepts_lowercase(self) -> None:
        assert Ed25519Signature.from_string("ab" * 64) == Ed25519Signature(b"\xab" * 64)

    @pytest.mark.parametrize("text", ["", "AB" * 63, "AB" * 65])
    def test_wrong_length(self, text: str) -> None:
        with pytest.raises(SignatureFormatError, match="expected 128 hex characters"):
            Ed25519Signature.from_string(text)

    @pytest.mark.parametrize("text", ["X" + "0" * 127, "0" * 127 + " ", "0x" + "0" * 126])
    def test_non_hex(self, text: str) -> None:
        with pytest.raises(SignatureFormatError, match="non-hex"):
            Ed25519Signature.from_string(text)
