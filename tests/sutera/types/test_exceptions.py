"""Tests for the exception hierarchy."""

from sutera.types.exceptions import (
    DeserializationError,
    IdentityParseError,
    InvalidFormatError,
    MessageEncodingError,
    SignatureFormatError,
    SigningKeyMismatchError,
    SuteraError,
    UnsupportedKindError,
    VersionMismatchError,
)


class TestHierarchy:
    """Every error derives from SuteraError; parse errors share a base."""

    def test_identity_parse_errors(self) -> None:
        for err in (
            InvalidFormatError("x"),
            VersionMismatchError("sutera-identity-v2"),
            UnsupportedKindError("bot"),
        ):
            assert isinstance(err, IdentityParseError)
            assert isinstance(err, SuteraError)

    def test_other_errors(self) -> None:
        assert isinstance(SignatureFormatError("x"), SuteraError)
        assert isinstance(SigningKeyMismatchError("aa", "bb"), SuteraError)
        assert isinstance(DeserializationError("x"), SuteraError)
        assert isinstance(MessageEncodingError(), SuteraError)
        assert not isinstance(SignatureFormatError("x"), IdentityParseError)


class TestMessages:
    """Errors carry their diagnostic values."""

    def test_version_mismatch_carries_token(self) -> None:
        err = VersionMismatchError("sutera-identity-v2")
        assert err.found == "sutera-identity-v2"
        assert str(err) == "invalid identity string, sutera-identity-v2 is not supported"

    def test_unsupported_kind_carries_token(self) -> None:
        err = UnsupportedKindError("unknown")
        assert err.found == "unknown"
        assert "'unknown'" in str(err)

    def test_key_mismatch_carries_keys(self) -> None:
        err = SigningKeyMismatchError(expected="aa", actual="bb")
        assert (err.expected, err.actual) == ("aa", "bb")

    def test_deserialization_field(self) -> None:
        err = DeserializationError("bad", field="author")
        assert err.field == "author"
        assert str(err) == "Failed to decode signed message field 'author': bad"
        assert str(DeserializationError("bad")) == "Failed to decode signed message: bad"

    def test_repr(self) -> None:
        assert repr(InvalidFormatError("empty kind segment")) == (
            "InvalidFormatError('invalid identity string: empty kind segment')"
        )
