"""Unit tests for the DecimalValue model."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import pytest
from pydantic import ValidationError

from crosslink import DecimalCodec, DecimalValue


class TestConstruction:
    """Test DecimalValue construction and validation."""

    def test_defaults(self) -> None:
        """Both fields default to 0."""
        msg = DecimalValue()

        assert msg.value == 0
        assert msg.decimal == 0

    def test_full_range(self) -> None:
        """Both fields accept the whole signed 64-bit range."""
        msg = DecimalValue(value=-(2**63), decimal=2**63 - 1)

        assert msg.value == -(2**63)
        assert msg.decimal == 2**63 - 1

    @pytest.mark.parametrize("bad", [2**63, -(2**63) - 1])
    def test_out_of_range(self, bad: int) -> None:
        """Values wider than 64 bits are rejected at construction."""
        with pytest.raises(ValidationError):
            DecimalValue(value=bad)

        with pytest.raises(ValidationError):
            DecimalValue(decimal=bad)

    @pytest.mark.parametrize("bad", [1.5, "1", True])
    def test_strict_int(self, bad: object) -> None:
        """Floats, strings and bools are not coerced."""
        with pytest.raises(ValidationError):
            DecimalValue(value=bad)

    def test_extra_field_forbidden(self) -> None:
        """Unknown keyword arguments are rejected."""
        with pytest.raises(ValidationError):
            DecimalValue(value=1, scale=2)  # type: ignore[call-arg]

    def test_immutable(self) -> None:
        """Field values are fixed at construction."""
        msg = DecimalValue(value=1, decimal=2)

        with pytest.raises(ValidationError):
            msg.value = 5  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Values compare and hash by their fields."""
        a = DecimalValue(value=125, decimal=2)
        b = DecimalValue(value=125, decimal=2)

        assert a == b
        assert hash(a) == hash(b)
        assert a != DecimalValue(value=1250, decimal=3)
        assert len({a, b}) == 1


class TestDecimalConversion:
    """Test conversion to and from decimal.Decimal."""

    @pytest.mark.parametrize(
        ("number", "value", "decimal"),
        [
            (Decimal("1.25"), 125, 2),
            (Decimal("-0.001"), -1, 3),
            (Decimal("1.250"), 1250, 3),
            (Decimal("1E+3"), 1, -3),
            (Decimal("0"), 0, 0),
            (Decimal("-0.00"), 0, 2),
            (42, 42, 0),
        ],
    )
    def test_from_decimal(self, number: Decimal | int, value: int, decimal: int) -> None:
        """The Decimal's digits and exponent map directly to value and decimal."""
        msg = DecimalValue.from_decimal(number)

        assert msg.value == value
        assert msg.decimal == decimal

    @pytest.mark.parametrize("number", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_from_non_finite(self, number: str) -> None:
        """NaN and infinity have no scaled-integer form."""
        with pytest.raises(ValueError, match="non-finite"):
            DecimalValue.from_decimal(Decimal(number))

    def test_from_decimal_too_wide(self) -> None:
        """Significands wider than 64 bits are rejected."""
        with pytest.raises(ValueError):
            DecimalValue.from_decimal(Decimal("9223372036854775808"))

    @pytest.mark.parametrize(
        ("value", "decimal", "expected"),
        [
            (125, 2, "1.25"),
            (-5, 0, "-5"),
            (1, -3, "1E+3"),
            (0, 3, "0.000"),
            (-(2**63), 0, "-9223372036854775808"),
        ],
    )
    def test_to_decimal(self, value: int, decimal: int, expected: str) -> None:
        """to_decimal reproduces the exact digits and exponent."""
        result = DecimalValue(value=value, decimal=decimal).to_decimal()

        assert result == Decimal(expected)
        assert result.as_tuple() == Decimal(expected).as_tuple()

    def test_to_decimal_extreme_scale(self) -> None:
        """Scales beyond the default context limits are kept exactly."""
        result = DecimalValue(value=7, decimal=10**12).to_decimal()

        assert result.as_tuple().exponent == -(10**12)
        assert result.as_tuple().digits == (7,)

    def test_decimal_roundtrip(self) -> None:
        """from_decimal and to_decimal are inverses."""
        number = Decimal("-12345.678900")

        assert DecimalValue.from_decimal(number).to_decimal().as_tuple() == number.as_tuple()

    def test_to_decimal_scale_past_10_pow_18(self) -> None:
        """Scales just past 10**18 still convert exactly."""
        result = DecimalValue(value=7, decimal=10**18 + 1).to_decimal()

        assert result.as_tuple().exponent == -(10**18 + 1)

    @pytest.mark.parametrize("decimal", [2**63 - 1, -(2**63)])
    def test_to_decimal_int64_scale_limits(self, decimal: int) -> None:
        """Both ends of the int64 scale range fail with the same documented error."""
        msg = DecimalValue(value=7, decimal=decimal)

        with pytest.raises(InvalidOperation):
            msg.to_decimal()

    def test_decoded_extreme_scale_to_decimal(self) -> None:
        """A decoded minimum scale is a valid value whose Decimal form is out of range."""
        msg = DecimalCodec.decode(b"\x10" + b"\x80" * 9 + b"\x01")

        assert msg == DecimalValue(decimal=-(2**63))
        with pytest.raises(InvalidOperation):
            msg.to_decimal()
