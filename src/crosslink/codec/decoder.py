"""Protobuf wire decoder for Pydantic messages.

This module provides the decode() function that converts proto3 wire-format
bytes back to a message instance.
"""

from __future__ import annotations

import logging
from typing import Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, WireTypeMismatchError
from .schema import MessageSchema
from .wire import WireReader, WireType

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode(message_class: Type[T], data: bytes | bytearray | memoryview) -> T:
    """Decode proto3 wire-format bytes to a Pydantic message.

    Fields may appear in any order. When a field occurs more than once, the
    last occurrence wins. Fields missing from the input take their zero value.
    Unknown field numbers are skipped, so messages written by a newer schema
    can still be read.

    Args:
        message_class: Message class to decode to
        data: Binary data to decode

    Returns:
        Decoded message instance

    Raises:
        SchemaError: If the message schema is invalid
        TruncatedInputError: If the input ends inside a tag or payload
        MalformedVarintError: If a varint is longer than 10 bytes or overflows 64 bits
        WireTypeMismatchError: If a known field arrives with a non-VARINT wire type
        InvalidTagError: If a tag has field number 0 or exceeds 32 bits

    Examples:
        ```python
        from crosslink import DecimalValue, decode

        decode(DecimalValue, b"\\x10\\x02\\x08\\x01")  # DecimalValue(value=1, decimal=2)
        decode(DecimalValue, b"")                      # DecimalValue(value=0, decimal=0)
        ```
    """
    schema = MessageSchema.from_model(message_class)
    reader = WireReader(data)

    field_values: Dict[str, int] = {}
    try:
        while not reader.at_end():
            offset = reader.position()
            field_number, wire_type = reader.read_tag()

            field_schema = schema.by_number.get(field_number)
            if field_schema is None:
                logger.debug(
                    "Skipping unknown field %d (%s) at offset %d in %s",
                    field_number,
                    wire_type.name,
                    offset,
                    message_class.__name__,
                )
                reader.skip_field(field_number, wire_type)
                continue

            if wire_type is not WireType.VARINT:
                raise WireTypeMismatchError(
                    f"Field {field_schema.name} (number {field_number}) at offset {offset}: "
                    f"expected wire type VARINT, got {wire_type.name}",
                    offset=offset,
                )

            field_values[field_schema.name] = field_schema.scalar.from_wire(reader.read_varint())
    except DecodeError as e:
        logger.debug("Rejected %s input: %s", message_class.__name__, e)
        raise

    try:
        return message_class(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {message_class.__name__}: {e}") from e
