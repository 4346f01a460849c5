"""Message models for crosslink."""

from __future__ import annotations

from .base import BaseMessage
from .decimal_value import DecimalValue
from .fields import ProtoInt

__all__ = [
    "BaseMessage",
    "DecimalValue",
    "ProtoInt",
]
