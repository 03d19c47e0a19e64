"""Reusable type definitions for the Sutera library."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, Bytes64
from .exceptions import (
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

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes32",
    "Bytes64",
    "StrictBaseModel",
    # Exceptions
    "SuteraError",
    "IdentityParseError",
    "InvalidFormatError",
    "VersionMismatchError",
    "UnsupportedKindError",
    "SignatureFormatError",
    "SigningKeyMismatchError",
    "MessageEncodingError",
    "DeserializationError",
]
