"""DecimalCodec: the encode/decode pair for DecimalValue."""

from __future__ import annotations

from ..models.decimal_value import DecimalValue
from .decoder import decode
from .encoder import encode


class DecimalCodec:
    """Encodes DecimalValue to proto3 bytes and decodes it back.

    Both operations are pure and hold no state, so a single codec (or the
    class itself) can be shared freely between threads.

    Example:
        >>> DecimalCodec.encode(DecimalValue(value=1, decimal=2))
        b'\\x08\\x01\\x10\\x02'
        >>> DecimalCodec.decode(b'\\x08\\x01\\x10\\x02')
        DecimalValue(value=1, decimal=2)
    """

    @staticmethod
    def encode(value: DecimalValue) -> bytes:
        """Return the canonical encoding of value. Never fails for a valid DecimalValue."""
        return encode(value)

    @staticmethod
    def decode(data: bytes | bytearray | memoryview) -> DecimalValue:
        """Decode bytes produced by any conformant proto3 encoder.

        Raises:
            DecodeError: If the input is truncated or malformed
        """
        return decode(DecimalValue, data)
