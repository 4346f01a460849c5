"""Protobuf wire primitives: varints, field tags and unknown-field skipping.

This module provides the low-level reader and writer used by the message
codec. Multi-byte integers are little-endian base-128 varints: each byte
carries 7 payload bits, and the high bit is set on every byte except the last.
"""

from __future__ import annotations

import enum

from ..exceptions import (
    DecodeError,
    InvalidTagError,
    MalformedVarintError,
    TruncatedInputError,
    WireTypeMismatchError,
)

MAX_VARINT_BYTES = 10
MAX_FIELD_NUMBER = (1 << 29) - 1
MAX_GROUP_DEPTH = 100

UINT64_MASK = (1 << 64) - 1


class WireType(enum.IntEnum):
    """Wire type codes carried in the low 3 bits of a field tag."""

    VARINT = 0
    I64 = 1
    LEN = 2
    SGROUP = 3
    EGROUP = 4
    I32 = 5


def varint_size(value: int) -> int:
    """Return the number of bytes needed to encode an unsigned value as a varint.

    Args:
        value: Unsigned integer (0 to 2**64-1)

    Returns:
        Encoded length in bytes (1-10)
    """
    return max(1, (value.bit_length() + 6) // 7)


def tag_size(field_number: int) -> int:
    """Return the encoded length of a tag for the given field number."""
    return varint_size(field_number << 3)


def zigzag_encode(value: int, num_bits: int = 64) -> int:
    """Map a signed integer to an unsigned one, alternating sign.

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, ...

    Args:
        value: Signed integer that fits in num_bits
        num_bits: Width of the signed type (32 or 64)

    Returns:
        Unsigned integer in [0, 2**num_bits)
    """
    return ((value << 1) ^ (value >> (num_bits - 1))) & ((1 << num_bits) - 1)


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode."""
    return (value >> 1) ^ -(value & 1)


def to_signed(value: int, num_bits: int) -> int:
    """Reinterpret the low num_bits of an unsigned value as two's complement."""
    value &= (1 << num_bits) - 1
    if value & (1 << (num_bits - 1)):
        return value - (1 << num_bits)
    return value


class WireWriter:
    """Appends varints and field tags to a byte buffer.

    Example:
        >>> writer = WireWriter()
        >>> writer.write_tag(1, WireType.VARINT)
        >>> writer.write_varint(150)
        >>> writer.to_bytes()
        b'\\x08\\x96\\x01'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_varint(self, value: int) -> None:
        """Write an unsigned integer as a varint.

        Args:
            value: Unsigned integer value (0 to 2**64-1)

        Raises:
            ValueError: If value is negative or wider than 64 bits
        """
        if value < 0 or value > UINT64_MASK:
            raise ValueError(f"Varint value must be in [0, 2**64), got {value}")

        while value > 0x7F:
            self._buffer.append((value & 0x7F) | 0x80)
            value >>= 7
        self._buffer.append(value)

    def write_tag(self, field_number: int, wire_type: WireType) -> None:
        """Write a field tag.

        Args:
            field_number: Field number (1 to 2**29-1)
            wire_type: Wire type of the payload that follows

        Raises:
            ValueError: If field_number is out of range
        """
        if field_number < 1 or field_number > MAX_FIELD_NUMBER:
            raise ValueError(f"Field number must be 1-{MAX_FIELD_NUMBER}, got {field_number}")
        self.write_varint((field_number << 3) | int(wire_type))

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)


class WireReader:
    """Reads varints and field tags from a byte buffer.

    All read methods raise a DecodeError subclass carrying the byte offset of
    the failure; they never raise IndexError.

    Example:
        >>> reader = WireReader(b"\\x08\\x96\\x01")
        >>> reader.read_tag()
        (1, <WireType.VARINT: 0>)
        >>> reader.read_varint()
        150
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current byte offset."""
        return self._position

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def read_varint(self) -> int:
        """Read an unsigned 64-bit varint.

        Returns:
            Unsigned integer value (0 to 2**64-1)

        Raises:
            TruncatedInputError: If the input ends before the final byte
            MalformedVarintError: If the varint runs past 10 bytes or overflows 64 bits
        """
        start = self._position
        result = 0
        shift = 0
        for _ in range(MAX_VARINT_BYTES):
            if self._position >= len(self._data):
                raise TruncatedInputError(f"Truncated varint at offset {start}", offset=start)

            byte = self._data[self._position]
            self._position += 1

            result |= (byte & 0x7F) << shift
            if byte < 0x80:
                if result > UINT64_MASK:
                    raise MalformedVarintError(
                        f"Varint at offset {start} overflows 64 bits", offset=start
                    )
                return result
            shift += 7

        raise MalformedVarintError(
            f"Varint at offset {start} exceeds {MAX_VARINT_BYTES} bytes", offset=start
        )

    def read_tag(self) -> tuple[int, WireType]:
        """Read a field tag.

        Returns:
            Tuple of (field_number, wire_type)

        Raises:
            TruncatedInputError: If the tag is incomplete
            MalformedVarintError: If the tag varint is malformed
            InvalidTagError: If the field number is 0 or the tag exceeds 32 bits
            WireTypeMismatchError: If the wire type code is 6 or 7
        """
        start = self._position
        key = self.read_varint()
        if key > 0xFFFFFFFF:
            raise InvalidTagError(f"Tag at offset {start} exceeds 32 bits: {key}", offset=start)

        field_number = key >> 3
        if field_number == 0:
            raise InvalidTagError(f"Tag at offset {start} has field number 0", offset=start)

        try:
            wire_type = WireType(key & 0x07)
        except ValueError:
            raise WireTypeMismatchError(
                f"Field {field_number} at offset {start}: invalid wire type {key & 0x07}",
                offset=start,
            ) from None

        return field_number, wire_type

    def read_fixed(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            TruncatedInputError: If fewer than num_bytes remain
        """
        start = self._position
        if num_bytes > self.bytes_remaining():
            raise TruncatedInputError(
                f"Need {num_bytes} bytes at offset {start}, have {self.bytes_remaining()}",
                offset=start,
            )
        self._position += num_bytes
        return self._data[start : self._position]

    def skip_field(self, field_number: int, wire_type: WireType, depth: int = 0) -> None:
        """Skip the payload of a field whose tag has just been read.

        Args:
            field_number: Field number from the tag
            wire_type: Wire type from the tag
            depth: Current group nesting depth

        Raises:
            TruncatedInputError: If the payload is incomplete
            WireTypeMismatchError: If an end-group tag does not match its start
            DecodeError: If groups nest deeper than MAX_GROUP_DEPTH
        """
        if wire_type is WireType.VARINT:
            self.read_varint()
        elif wire_type is WireType.I64:
            self.read_fixed(8)
        elif wire_type is WireType.I32:
            self.read_fixed(4)
        elif wire_type is WireType.LEN:
            length = self.read_varint()
            self.read_fixed(length)
        elif wire_type is WireType.SGROUP:
            if depth >= MAX_GROUP_DEPTH:
                raise DecodeError(
                    f"Groups nested deeper than {MAX_GROUP_DEPTH} at offset {self._position}",
                    offset=self._position,
                )
            while True:
                inner_number, inner_type = self.read_tag()
                if inner_type is WireType.EGROUP:
                    if inner_number != field_number:
                        raise WireTypeMismatchError(
                            f"End-group tag for field {inner_number} closes group {field_number}",
                            offset=self._position,
                        )
                    return
                self.skip_field(inner_number, inner_type, depth + 1)
        else:
            raise WireTypeMismatchError(
                f"Unexpected end-group tag for field {field_number}", offset=self._position
            )
