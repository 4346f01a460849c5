"""Protobuf interoperability for crosslink.

This module provides .proto schema generation for message classes.
"""

from __future__ import annotations

from .convert import to_proto_schema

__all__ = [
    "to_proto_schema",
]
