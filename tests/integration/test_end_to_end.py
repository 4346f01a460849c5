"""End-to-end integration tests."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from crosslink import (
    DecimalCodec,
    DecimalValue,
    DecodeError,
    encoded_size,
    field_sizes,
    to_proto_schema,
)

# Reference encodings of crosslink.DecimalValue as written by protobuf runtimes.
GOLDEN_VECTORS = [
    (DecimalValue(), b""),
    (DecimalValue(value=1, decimal=2), b"\x08\x01\x10\x02"),
    (DecimalValue(value=125, decimal=2), b"\x08\x7d\x10\x02"),
    (DecimalValue(value=150), b"\x08\x96\x01"),
    (DecimalValue(decimal=-2), b"\x10\xfe\xff\xff\xff\xff\xff\xff\xff\xff\x01"),
    (
        DecimalValue(value=-(2**63), decimal=2**63 - 1),
        b"\x08\x80\x80\x80\x80\x80\x80\x80\x80\x80\x01\x10\xff\xff\xff\xff\xff\xff\xff\xff\x7f",
    ),
]


class TestEndToEndWorkflow:
    """Test complete producer-to-consumer workflows."""

    def test_price_workflow(self) -> None:
        """Test a price crossing a process boundary."""
        # 1. Producer builds the value from its native decimal
        price = DecimalValue.from_decimal(Decimal("27123.45"))
        assert price == DecimalValue(value=2712345, decimal=2)

        # 2. Check encoded size
        sizes = field_sizes(price)
        assert sizes == {"value": 5, "decimal": 2}
        assert encoded_size(price) == 7

        # 3. Encode
        data = DecimalCodec.encode(price)
        assert len(data) == 7

        # 4. Consumer decodes and recovers the exact decimal
        received = DecimalCodec.decode(data)
        assert received == price
        assert received.to_decimal() == Decimal("27123.45")

    def test_short_quantity_workflow(self) -> None:
        """Negative quantities (shorts) survive the round trip."""
        quantity = DecimalValue.from_decimal(Decimal("-0.5"))
        received = DecimalCodec.decode(DecimalCodec.encode(quantity))

        assert received.value == -5
        assert received.decimal == 1
        assert received.to_decimal() == Decimal("-0.5")

    def test_schema_matches_wire(self) -> None:
        """The rendered .proto describes the layout the codec writes."""
        proto = to_proto_schema(DecimalValue)

        assert "int64 value = 1;" in proto
        assert "int64 decimal = 2;" in proto
        # Field 1 varint tag, field 2 varint tag
        assert DecimalCodec.encode(DecimalValue(value=1, decimal=1)) == b"\x08\x01\x10\x01"


class TestInteroperability:
    """Test against encodings produced by other protobuf runtimes."""

    @pytest.mark.parametrize(("msg", "data"), GOLDEN_VECTORS)
    def test_encode_golden(self, msg: DecimalValue, data: bytes) -> None:
        """Encoding matches reference bytes exactly."""
        assert DecimalCodec.encode(msg) == data

    @pytest.mark.parametrize(("msg", "data"), GOLDEN_VECTORS)
    def test_decode_golden(self, msg: DecimalValue, data: bytes) -> None:
        """Reference bytes decode to the expected value."""
        assert DecimalCodec.decode(data) == msg

    def test_decode_int32_scale_writer(self) -> None:
        """Older writers that declared decimal as int32 still sign-extend to 10 bytes."""
        older = b"\x08\x7d\x10\xfe\xff\xff\xff\xff\xff\xff\xff\xff\x01"

        assert DecimalCodec.decode(older) == DecimalValue(value=125, decimal=-2)

    def test_decode_newer_schema(self) -> None:
        """A writer with extra fields (e.g. a currency id and a label) is still readable."""
        newer = b"\x08\x7d\x10\x02\x18\x2a\x22\x03USD"

        assert DecimalCodec.decode(newer) == DecimalValue(value=125, decimal=2)

    def test_corrupt_input_rejected(self) -> None:
        """Corruption surfaces as DecodeError, never as a wrong value."""
        corrupt = b"\x08\x7d\x10"

        with pytest.raises(DecodeError):
            DecimalCodec.decode(corrupt)


class TestConcurrency:
    """Test that the codec holds no shared state."""

    def test_parallel_roundtrips(self) -> None:
        """Concurrent encode/decode calls do not interfere."""
        values = [DecimalValue(value=i * 7919 - 500000, decimal=i % 19) for i in range(2000)]

        def roundtrip(msg: DecimalValue) -> DecimalValue:
            return DecimalCodec.decode(DecimalCodec.encode(msg))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(roundtrip, values))

        assert results == values
