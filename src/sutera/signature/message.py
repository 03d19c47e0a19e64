"""
Signed messages exchanged within the Sutera network.

A signed message binds an author identity to a piece of text::

    signed = SignedMessage(author, message, signature)
    signature = Ed25519-Sign(author_private_key, utf8(message))

Wire Format
-----------

For transport and storage a signed message becomes three strings::

    {
        "author": "user@alice.sutera-identity-v1.<64 hex>",
        "message": "Hello, Sutera!",
        "signature": "<128 uppercase hex>"
    }

Trust
-----

Only `SignedMessage.new` checks anything at creation time. Deserialized
messages may carry a stale or forged signature. Callers must call `verify`
before acting on the content.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError, field_validator, model_serializer, model_validator
from typing_extensions import Self

from sutera.identity import SuteraIdentity
from sutera.types import StrictBaseModel
from sutera.types.exceptions import (
    DeserializationError,
    IdentityParseError,
    MessageEncodingError,
    SignatureFormatError,
    SigningKeyMismatchError,
    SuteraError,
)

from .keypair import SigningCapability, Verifier, verify_signature
from .signature import Ed25519Signature

logger = logging.getLogger(__name__)


def _encode_message(message: str) -> bytes | None:
    """Return the UTF-8 bytes of `message`, or None if it holds lone surrogates."""
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError:
        return None


class SignedMessagePayload(StrictBaseModel):
    """Wire form of a signed message: three text fields."""

    model_config = StrictBaseModel.model_config | {"extra": "ignore"}

    author: str
    """Identity string of the author."""

    message: str
    """Message text, unmodified."""

    signature: str
    """Signature text (uppercase hex)."""


class SignedMessage(StrictBaseModel):
    """A message bundled with its author and the author's signature."""

    author: SuteraIdentity
    """The author. Its public key is what verification uses."""

    message: str
    """The message content."""

    signature: Ed25519Signature
    """Signature over the UTF-8 bytes of `message`."""

    @field_validator("message")
    @classmethod
    def _validate_message(cls, v: str) -> str:
        """Reject text that has no UTF-8 encoding."""
        if _encode_message(v) is None:
            raise ValueError("message text cannot be encoded as UTF-8")
        return v

    @model_validator(mode="before")
    @classmethod
    def _decode_wire_fields(cls, data: Any) -> Any:
        """Accept the wire form: author and signature given as text."""
        if not isinstance(data, dict):
            return data
        try:
            if isinstance(data.get("author"), str):
                data = data | {"author": SuteraIdentity.from_string(data["author"])}
            if isinstance(data.get("signature"), str):
                data = data | {"signature": Ed25519Signature.from_string(data["signature"])}
        except SuteraError as e:
            raise ValueError(e.message) from e
        return data

    @model_serializer
    def _serialize_wire_fields(self) -> dict[str, str]:
        """Serialize to the three-string wire form."""
        return self.to_payload().model_dump()

    @classmethod
    def new(cls, author: SuteraIdentity, message: str, signer: SigningCapability) -> Self:
        """
        Sign a message with the author's signing key.

        Args:
            author: The author of the message.
            message: The content of the message.
            signer: The signing key of the author.

        Returns:
            A new signed message.

        Raises:
            SigningKeyMismatchError: If the signer's verifying key is not the
                author's public key.
            MessageEncodingError: If the message has no UTF-8 encoding.
        """
        verifying_key = signer.verifying_key()
        if verifying_key != author.public_key:
            raise SigningKeyMismatchError(
                expected=author.public_key.hex(),
                actual=verifying_key.hex(),
            )

        data = _encode_message(message)
        if data is None:
            raise MessageEncodingError()
        signature = Ed25519Signature(signer.sign(data))
        logger.debug("Signed %d-byte message for %s", len(data), author)
        return cls(author=author, message=message, signature=signature)

    def verify(self, verifier: Verifier = verify_signature) -> bool:
        """
        Check if the signature is valid.

        A signed message should be verified before processing the message.
        Messages built by `new` always verify, so for those this is an assertion.

        Args:
            verifier: Signature check to use. Defaults to Ed25519.

        Returns:
            True if the signature is valid, otherwise False.
        """
        data = _encode_message(self.message)
        if data is None:
            logger.debug("Message from %s has no UTF-8 encoding", self.author)
            return False

        valid = verifier(self.author.public_key, data, self.signature)
        if not valid:
            logger.debug("Signature verification failed for %s", self.author)
        return valid

    def to_payload(self) -> SignedMessagePayload:
        """Convert to the three-string wire form."""
        return SignedMessagePayload(
            author=self.author.to_string(),
            message=self.message,
            signature=self.signature.to_string(),
        )

    def to_json(self) -> str:
        """Serialize the wire form as a JSON object."""
        return self.to_payload().model_dump_json()

    @classmethod
    def from_payload(cls, payload: SignedMessagePayload) -> Self:
        """
        Rebuild a signed message from its wire form.

        The signature is NOT verified.

        Args:
            payload: The three wire fields.

        Returns:
            The decoded, unverified message.

        Raises:
            DeserializationError: If the author, message or signature is invalid.
        """
        try:
            author = SuteraIdentity.from_string(payload.author)
        except IdentityParseError as e:
            raise DeserializationError(e.message, field="author") from e

        try:
            signature = Ed25519Signature.from_string(payload.signature)
        except SignatureFormatError as e:
            raise DeserializationError(e.message, field="signature") from e

        try:
            decoded = cls(author=author, message=payload.message, signature=signature)
        except ValidationError as e:
            raise DeserializationError(
                "message text cannot be encoded as UTF-8", field="message"
            ) from e

        logger.debug("Decoded unverified signed message from %s", author)
        return decoded

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """
        Parse a signed message from a JSON object.

        The signature is NOT verified.

        Args:
            text: JSON with `author`, `message` and `signature` string fields.

        Returns:
            The decoded, unverified message.

        Raises:
            DeserializationError: If the JSON or any field is invalid.
        """
        try:
            payload = SignedMessagePayload.model_validate_json(text)
        except ValidationError as e:
            raise DeserializationError(f"malformed payload ({e.error_count()} errors)") from e
        return cls.from_payload(payload)
