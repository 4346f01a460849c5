"""The DecimalValue message: a decimal number carried as a scaled integer."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import ClassVar

from .base import BaseMessage
from .fields import ProtoInt


class DecimalValue(BaseMessage):
    """A decimal number expressed as an integer and a scale.

    The represented number is ``value / 10**decimal``, so 1.25 is
    ``DecimalValue(value=125, decimal=2)``. Both fields are independent signed
    64-bit integers; the codec places no bound on ``decimal``.

    Wire layout (proto3):

        message DecimalValue {
          int64 value = 1;
          int64 decimal = 2;
        }

    Example:
        >>> price = DecimalValue.from_decimal(Decimal("1.25"))
        >>> price
        DecimalValue(value=125, decimal=2)
        >>> price.to_decimal()
        Decimal('1.25')
    """

    crosslink_package: ClassVar[str | None] = "crosslink"

    value: int = ProtoInt(number=1, description="Unscaled significand.")
    decimal: int = ProtoInt(
        number=2,
        description="Power-of-ten scale; the number is value / 10**decimal.",
    )

    @classmethod
    def from_decimal(cls, number: Decimal | int) -> DecimalValue:
        """Build a DecimalValue from a finite Decimal, keeping its exponent.

        ``Decimal("1.250")`` gives ``value=1250, decimal=3``; trailing zeros
        are not normalized away.

        Raises:
            ValueError: If number is NaN or infinite, or does not fit in 64 bits
        """
        sign, digits, exponent = Decimal(number).as_tuple()
        if not isinstance(exponent, int):
            raise ValueError(f"Cannot represent non-finite {number!r} as a DecimalValue")

        significand = int("".join(str(digit) for digit in digits))
        return cls(value=-significand if sign else significand, decimal=-exponent)

    def to_decimal(self) -> Decimal:
        """Return the exact Decimal this value represents (no context rounding).

        Raises:
            decimal.InvalidOperation: If decimal is outside the exponent range
                the decimal module can represent (reached near the ends of the
                64-bit range)
        """
        digits = tuple(int(c) for c in str(abs(self.value)))
        try:
            return Decimal((1 if self.value < 0 else 0, digits, -self.decimal))
        except OverflowError as err:
            raise InvalidOperation(
                f"Scale {self.decimal} is outside the range of decimal.Decimal"
            ) from err
