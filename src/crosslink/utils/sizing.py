"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without actually encoding them.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import MessageSchema
from ..codec.wire import tag_size, varint_size


def encoded_size(message: BaseModel) -> int:
    """Calculate the encoded size of a message in bytes.

    Unlike a fixed-layout format, the size depends on the field values: zero
    fields take no bytes and larger magnitudes take longer varints.

    Args:
        message: Message instance to calculate size for

    Returns:
        Size in bytes, always equal to len(encode(message))

    Example:
        >>> encoded_size(DecimalValue(value=1, decimal=2))
        4
        >>> encoded_size(DecimalValue(value=-1))
        11
    """
    return sum(field_sizes(message).values())


def field_sizes(message: BaseModel) -> dict[str, int]:
    """Calculate the encoded size of each field in bytes.

    Args:
        message: Message instance to analyze

    Returns:
        Dictionary mapping field names to tag + payload bytes (0 for elided fields)

    Example:
        >>> field_sizes(DecimalValue(value=300))
        {'value': 3, 'decimal': 0}
    """
    schema = MessageSchema.from_model(type(message))

    sizes: dict[str, int] = {}
    for field_schema in schema.fields:
        value = getattr(message, field_schema.name)
        if value == 0:
            sizes[field_schema.name] = 0
        else:
            sizes[field_schema.name] = tag_size(field_schema.number) + varint_size(
                field_schema.scalar.to_wire(value)
            )

    return sizes
