"""Protobuf schema generation.

This module renders the .proto definition of a message class. Bindings
generated from that text by protoc (or prost, or any other protobuf
toolchain) read and write exactly the bytes produced by crosslink.encode().
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import MessageSchema
from ..exceptions import SchemaError


def to_proto_schema(
    message_class: type[BaseModel],
    *,
    package: str | None = None,
    syntax: str = "proto3",
) -> str:
    """Generate a Protobuf .proto schema from a message class.

    Args:
        message_class: Message class to convert
        package: Protobuf package name; defaults to the class's crosslink_package
        syntax: Protobuf syntax version (only "proto3" is supported)

    Returns:
        .proto schema as a string

    Raises:
        SchemaError: If syntax is not proto3 or the message schema is invalid

    Example:
        >>> print(to_proto_schema(DecimalValue))
        syntax = "proto3";
        package crosslink;
        <BLANKLINE>
        message DecimalValue {
          // Unscaled significand.
          int64 value = 1;
          ...
        }
    """
    if syntax != "proto3":
        raise SchemaError(
            f"Unsupported syntax {syntax!r}: zero-value elision requires proto3"
        )

    schema = MessageSchema.from_model(message_class)
    if package is None:
        package = getattr(message_class, "crosslink_package", None)

    lines = [f'syntax = "{syntax}";']
    if package:
        lines.append(f"package {package};")
    lines.append("")

    lines.append(f"message {message_class.__name__} {{")
    for field in schema.fields:
        if field.description:
            lines.append(f"  // {field.description}")
        lines.append(f"  {field.proto_type} {field.name} = {field.number};")
    lines.append("}")

    return "\n".join(lines) + "\n"
