"""Protobuf wire-format codec for crosslink.

This module provides schema-driven encoding and decoding of messages made of
integer scalar fields, using the proto3 binary wire format.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .schema import FieldSchema, MessageSchema, ScalarType
from .wire import WireType

__all__ = [
    "encode",
    "decode",
    "MessageSchema",
    "FieldSchema",
    "ScalarType",
    "WireType",
]
