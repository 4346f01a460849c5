"""Exception hierarchy for crosslink.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CrosslinkError for easy catching of any crosslink-specific error.
"""

from __future__ import annotations


class CrosslinkError(Exception):
    """Base exception for all crosslink errors."""

    pass


class SchemaError(CrosslinkError):
    """Raised when a message class declaration is invalid.

    Examples:
        - Field declared without a field number
        - Two fields sharing a field number
        - Field number outside 1..2**29-1 or in the reserved range
        - Unsupported scalar type
    """

    pass


class EncodeError(CrosslinkError):
    """Raised when encoding a message fails.

    Examples:
        - Value does not fit the field's declared scalar type
        - Message exceeds crosslink_max_bytes constraint
    """

    pass


class DecodeError(CrosslinkError):
    """Raised when decoding binary data fails.

    Callers receiving a DecodeError must treat the whole input as corrupt;
    no partially decoded value is ever returned.

    Attributes:
        offset: Byte offset in the input at which the failure was detected
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(DecodeError):
    """Raised when the input ends before a tag, varint or payload is complete."""

    pass


class MalformedVarintError(DecodeError):
    """Raised when a varint does not terminate within 10 bytes or overflows 64 bits."""

    pass


class WireTypeMismatchError(DecodeError):
    """Raised when a tag's wire type cannot be used for its field.

    Examples:
        - A known field arrives with a wire type other than VARINT
        - Wire types 6 and 7, which are not defined
        - An end-group tag with no matching start-group tag
    """

    pass


class InvalidTagError(DecodeError):
    """Raised when a tag carries field number 0 or does not fit in 32 bits."""

    pass
