"""crosslink: DecimalValue wire codec

A Python library for exchanging decimal numbers between services as scaled
integers, using the proto3 binary wire format of the crosslink
``DecimalValue`` message. Bytes produced here are read by any protobuf
runtime, and vice versa.

Key Features:
- Pydantic-based message modeling
- Exact round-trip of the full signed 64-bit range (no floating point)
- Canonical encoding with zero-value elision
- Forward-compatible decoding (unknown fields are skipped)

Quick Start:
    >>> from decimal import Decimal
    >>> from crosslink import DecimalCodec, DecimalValue
    >>>
    >>> price = DecimalValue.from_decimal(Decimal("1.25"))
    >>> data = DecimalCodec.encode(price)
    >>> DecimalCodec.decode(data).to_decimal()
    Decimal('1.25')
"""

from __future__ import annotations

from .codec import decode, encode
from .codec.decimal_codec import DecimalCodec
from .exceptions import (
    CrosslinkError,
    DecodeError,
    EncodeError,
    InvalidTagError,
    MalformedVarintError,
    SchemaError,
    TruncatedInputError,
    WireTypeMismatchError,
)
from .models import BaseMessage, DecimalValue, ProtoInt
from .protobuf import to_proto_schema
from .utils import encoded_size, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "DecimalValue",
    "DecimalCodec",
    "BaseMessage",
    "encode",
    "decode",
    # Field helpers
    "ProtoInt",
    # Exceptions
    "CrosslinkError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "TruncatedInputError",
    "MalformedVarintError",
    "WireTypeMismatchError",
    "InvalidTagError",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Protobuf
    "to_proto_schema",
    # Version
    "__version__",
]
