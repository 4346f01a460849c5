"""Field helpers for declaring protobuf scalar fields.

This module provides ProtoInt(), a wrapper around Pydantic's Field() that
records a field's number and scalar type for the codec.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.schema import SCALAR_TYPES
from ..exceptions import SchemaError


def ProtoInt(*, number: int, proto_type: str = "int64", **kwargs: Any) -> FieldInfo:
    """Create an integer field with a protobuf field number.

    The field defaults to 0 (the proto3 default) and is validated to the range
    of its scalar type, so any constructed message can be encoded.

    Args:
        number: Protobuf field number (1 to 2**29-1, excluding 19000-19999)
        proto_type: One of "int64", "int32", "sint64", "sint32". The int types
            sign-extend negatives to 64 bits on the wire; the sint types use
            zig-zag encoding. The two are not wire-compatible.
        **kwargs: Additional Field() arguments (description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default.

    Raises:
        SchemaError: If proto_type is not supported

    Example:
        >>> class Quote(BaseMessage):
        ...     bid: int = ProtoInt(number=1, description="Best bid.")
        ...     depth: int = ProtoInt(number=2, proto_type="sint32")
    """
    scalar = SCALAR_TYPES.get(proto_type)
    if scalar is None:
        raise SchemaError(
            f"Unsupported proto type {proto_type!r}. Supported: {', '.join(SCALAR_TYPES)}"
        )

    return cast(
        FieldInfo,
        Field(
            default=0,
            ge=scalar.min_value,
            le=scalar.max_value,
            strict=True,
            json_schema_extra={"proto_number": number, "proto_type": proto_type},
            **kwargs,
        ),
    )
