"""Reusable, strict base models for the Sutera library."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Every record in the library derives from it: values are validated once at
    construction and cannot be mutated afterwards. Custom byte types (public
    keys, signatures) are allowed as field types.
    """

    model_config = ConfigDict(
        validate_default=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
