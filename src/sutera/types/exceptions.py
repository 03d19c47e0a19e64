"""Exception hierarchy for the Sutera identity and signature library."""

from __future__ import annotations


class SuteraError(Exception):
    """
    Base exception for all Sutera errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class IdentityParseError(SuteraError):
    """Base class for errors raised while parsing an identity string."""


class InvalidFormatError(IdentityParseError):
    """
    Raised when an identity string is structurally malformed.

    Covers a wrong segment count, an empty kind segment, a key segment of the
    wrong length or with non-hex characters, and an invalid display name.

    Attributes:
        detail: What was wrong with the input.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid identity string: {detail}")


class VersionMismatchError(IdentityParseError):
    """
    Raised when an identity string carries an unsupported version token.

    Attributes:
        found: The version token found in the input.
    """

    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(f"invalid identity string, {found} is not supported")


class UnsupportedKindError(IdentityParseError):
    """
    Raised when an identity kind token is not in the recognized set.

    Attributes:
        found: The kind token found in the input.
    """

    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(f"invalid identity string, kind {found!r} is not supported")


class SignatureFormatError(SuteraError):
    """
    Raised when a signature's textual form cannot be decoded.

    Attributes:
        detail: What was wrong with the input.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid signature string: {detail}")


class SigningKeyMismatchError(SuteraError):
    """
    Raised when a signing key does not belong to the message author.

    Attributes:
        expected: Hex of the author's public key.
        actual: Hex of the verifying key derived from the signing capability.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__("the signing key does not match the author's verifying key")


class DeserializationError(SuteraError):
    """
    Raised when a signed message wire payload cannot be decoded.

    The underlying error is chained as `__cause__`.

    Attributes:
        field: The payload field that failed to decode, if known.
        detail: Description of the failure.
    """

    def __init__(self, detail: str, *, field: str | None = None) -> None:
        self.field = field
        self.detail = detail

        msg = f"Failed to decode signed message: {detail}"
        if field is not None:
            msg = f"Failed to decode signed message field '{field}': {detail}"

        super().__init__(msg)


class MessageEncodingError(SuteraError):
    """
    Raised when message text cannot be encoded as UTF-8 for signing.

    Python strings may hold lone surrogates, which have no UTF-8 encoding.
    """

    def __init__(self) -> None:
        super().__init__("message text cannot be encoded as UTF-8")
