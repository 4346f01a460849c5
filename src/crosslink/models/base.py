"""Base message class and crosslink-specific Pydantic configuration.

This module provides the BaseMessage class that all crosslink messages inherit from.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..codec.schema import SCHEMA_ATTRIBUTE, MessageSchema


class BaseMessage(BaseModel):
    """Base class for all crosslink messages.

    Messages declare every field with ProtoInt(), which assigns the field
    number and protobuf scalar type. Instances are immutable once built.

    crosslink-specific options can be configured as ClassVar attributes:

    Example:
        >>> from typing import ClassVar, Optional
        >>> class Quote(BaseMessage):
        ...     bid: int = ProtoInt(number=1)
        ...     ask: int = ProtoInt(number=2)
        ...
        ...     crosslink_package: ClassVar[Optional[str]] = "market"
        ...     crosslink_max_bytes: ClassVar[Optional[int]] = 16

    Attributes:
        crosslink_package: Protobuf package name used when rendering .proto text
        crosslink_max_bytes: Maximum encoded size in bytes (optional, checked by encode())
    """

    model_config = ConfigDict(
        # Field values are fixed at construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    crosslink_package: ClassVar[str | None] = None
    crosslink_max_bytes: ClassVar[int | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Build and attach the wire schema as soon as a message class is defined.

        Raises:
            SchemaError: If a field declaration cannot be encoded
        """
        super().__pydantic_init_subclass__(**kwargs)
        setattr(cls, SCHEMA_ATTRIBUTE, MessageSchema(cls))
