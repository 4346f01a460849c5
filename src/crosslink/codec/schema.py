"""Schema introspection for Pydantic models.

This module analyzes message classes and extracts the wire-relevant
information for each field: its field number and protobuf scalar type.
Field metadata is declared with crosslink.models.ProtoInt, which stores it in
the field's json_schema_extra.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .wire import MAX_FIELD_NUMBER, UINT64_MASK, to_signed, zigzag_decode, zigzag_encode

RESERVED_FIELD_NUMBERS = range(19000, 20000)

# Class attribute holding the schema computed when a BaseMessage subclass is defined
SCHEMA_ATTRIBUTE = "__crosslink_schema__"


@dataclass(frozen=True)
class ScalarType:
    """A protobuf integer scalar type carried as a VARINT.

    Attributes:
        name: Protobuf type name (e.g. "int64")
        num_bits: Width of the signed type
        zigzag: Whether the value is zig-zag mapped (sint32/sint64) rather than
            sign-extended to 64 bits (int32/int64)
    """

    name: str
    num_bits: int
    zigzag: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.num_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.num_bits - 1)) - 1

    def to_wire(self, value: int) -> int:
        """Convert a signed value to the unsigned integer written as a varint."""
        if self.zigzag:
            return zigzag_encode(value, self.num_bits)
        # int32 is sign-extended to 64 bits, so negatives always take 10 bytes.
        return value & UINT64_MASK

    def from_wire(self, raw: int) -> int:
        """Convert a decoded varint back to a signed value.

        Wider inputs are truncated to num_bits, matching protobuf runtimes.
        """
        if self.zigzag:
            return zigzag_decode(raw & ((1 << self.num_bits) - 1))
        return to_signed(raw, self.num_bits)


SCALAR_TYPES: Dict[str, ScalarType] = {
    scalar.name: scalar
    for scalar in (
        ScalarType("int64", 64, zigzag=False),
        ScalarType("int32", 32, zigzag=False),
        ScalarType("sint64", 64, zigzag=True),
        ScalarType("sint32", 32, zigzag=True),
    )
}


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        number: Protobuf field number
        scalar: Scalar type used on the wire
        description: Field description, if any
    """

    name: str
    number: int
    scalar: ScalarType
    description: str | None = None

    @property
    def proto_type(self) -> str:
        return self.scalar.name

    def fits(self, value: int) -> bool:
        """Return True if value is representable in this field's scalar type."""
        return self.scalar.min_value <= value <= self.scalar.max_value


class MessageSchema:
    """Schema information for an entire message.

    Fields are ordered by ascending field number, which is also the order the
    encoder writes them in.

    Example:
        >>> schema = MessageSchema.from_model(DecimalValue)
        >>> [(f.name, f.number) for f in schema.fields]
        [('value', 1), ('decimal', 2)]
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Pydantic model class to introspect

        Raises:
            SchemaError: If any field declaration is invalid
        """
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self.by_number: Dict[int, FieldSchema] = {}
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        """Return the schema for a Pydantic model class.

        BaseMessage subclasses carry their schema from class creation; other
        models are introspected on each call.
        """
        schema = model_class.__dict__.get(SCHEMA_ATTRIBUTE)
        if schema is None:
            schema = cls(model_class)
        return schema

    def _introspect(self) -> None:
        fields = [
            self._extract_field_schema(name, info)
            for name, info in self.model_class.model_fields.items()
        ]

        for field_schema in sorted(fields, key=lambda f: f.number):
            existing = self.by_number.get(field_schema.number)
            if existing is not None:
                raise SchemaError(
                    f"{self.model_class.__name__}: fields {existing.name} and "
                    f"{field_schema.name} share field number {field_schema.number}"
                )
            self.by_number[field_schema.number] = field_schema
            self.fields.append(field_schema)

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        if field_info.annotation is not int:
            raise SchemaError(
                f"Field {name}: unsupported type {field_info.annotation}. "
                f"Only int fields declared with ProtoInt are supported."
            )

        extra: Any = field_info.json_schema_extra
        if not isinstance(extra, dict) or "proto_number" not in extra:
            raise SchemaError(f"Field {name}: missing field number (declare it with ProtoInt)")

        number = extra["proto_number"]
        if not isinstance(number, int) or number < 1 or number > MAX_FIELD_NUMBER:
            raise SchemaError(f"Field {name}: field number must be 1-{MAX_FIELD_NUMBER}, got {number}")
        if number in RESERVED_FIELD_NUMBERS:
            raise SchemaError(f"Field {name}: field number {number} is reserved (19000-19999)")

        type_name = extra.get("proto_type", "int64")
        scalar = SCALAR_TYPES.get(type_name)  # type: ignore[arg-type]
        if scalar is None:
            raise SchemaError(
                f"Field {name}: unsupported proto type {type_name!r}. "
                f"Supported: {', '.join(SCALAR_TYPES)}"
            )

        if field_info.default != 0:
            raise SchemaError(f"Field {name}: default must be 0, got {field_info.default!r}")

        return FieldSchema(
            name=name,
            number=number,
            scalar=scalar,
            description=field_info.description,
        )

