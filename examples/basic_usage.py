#!/usr/bin/env python3
"""Basic usage example for crosslink.

This example demonstrates:
1. Building a DecimalValue from a Python Decimal
2. Encoding to the proto3 wire format
3. Decoding back, including input from a newer schema
4. Rendering the .proto definition for other languages
"""

from __future__ import annotations

from decimal import Decimal

from crosslink import DecimalCodec, DecimalValue, DecodeError, field_sizes, to_proto_schema


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("crosslink Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Building a fill price...")
    price = DecimalValue.from_decimal(Decimal("27123.45"))
    print(f"   value={price.value} decimal={price.decimal}")
    print()

    print("2. Encoding...")
    data = DecimalCodec.encode(price)
    print(f"   {len(data)} bytes: {data.hex(' ')}")
    for name, size in field_sizes(price).items():
        print(f"   {name:<8} {size} bytes")
    print()

    print("3. Decoding...")
    received = DecimalCodec.decode(data)
    print(f"   {received.to_decimal()} (equal: {received == price})")

    newer = data + b"\x18\x2a"  # field 3 from a newer writer
    print(f"   with unknown field: {DecimalCodec.decode(newer).to_decimal()}")

    try:
        DecimalCodec.decode(data[:-1])
    except DecodeError as e:
        print(f"   truncated input rejected: {e}")
    print()

    print("4. Schema for other runtimes:")
    print(to_proto_schema(DecimalValue))


if __name__ == "__main__":
    main()
