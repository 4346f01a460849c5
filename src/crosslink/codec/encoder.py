"""Protobuf wire encoder for Pydantic messages.

This module provides the encode() function that converts a message instance
to the proto3 wire format using the field numbers declared on its schema.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..exceptions import EncodeError
from .schema import FieldSchema, MessageSchema
from .wire import WireType, WireWriter


def encode(message: BaseModel) -> bytes:
    """Encode a Pydantic message to the proto3 wire format.

    Fields are written in ascending field number order. A field whose value is
    0 is omitted entirely, so every message has exactly one canonical encoding
    and the all-zero message encodes to b"".

    Args:
        message: Message instance to encode

    Returns:
        Canonical binary representation

    Raises:
        SchemaError: If the message schema is invalid
        EncodeError: If a field value does not fit its declared type, or the
            encoding exceeds crosslink_max_bytes

    Examples:
        ```python
        from crosslink import DecimalValue, encode

        encode(DecimalValue(value=1, decimal=2))   # b"\\x08\\x01\\x10\\x02"
        encode(DecimalValue())                     # b""
        ```
    """
    schema = MessageSchema.from_model(type(message))
    writer = WireWriter()

    for field_schema in schema.fields:
        _encode_field(writer, field_schema, getattr(message, field_schema.name))

    encoded = writer.to_bytes()

    max_bytes = getattr(type(message), "crosslink_max_bytes", None)
    if max_bytes is not None and len(encoded) > max_bytes:
        raise EncodeError(
            f"Encoded message size ({len(encoded)} bytes) exceeds crosslink_max_bytes={max_bytes}"
        )

    return encoded


def _encode_field(writer: WireWriter, field_schema: FieldSchema, value: object) -> None:
    """Encode a single field value, or nothing if it is the zero value.

    Raises:
        EncodeError: If value is not an int in range for the field's type
    """
    # bool is an int subclass but never a valid scalar here.
    if not isinstance(value, int) or isinstance(value, bool):
        raise EncodeError(f"Field {field_schema.name}: expected int, got {type(value).__name__}")

    if not field_schema.fits(value):
        raise EncodeError(
            f"Field {field_schema.name}: value {value} out of bounds for "
            f"{field_schema.proto_type} [{field_schema.scalar.min_value}, "
            f"{field_schema.scalar.max_value}]"
        )

    if value == 0:
        return

    writer.write_tag(field_schema.number, WireType.VARINT)
    writer.write_varint(field_schema.scalar.to_wire(value))
