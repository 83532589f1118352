"""
Price types — money value object with fallible arithmetic.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

from kungfu import Result, Ok, Error


# ═══════════════════════════════════════════════════════════════════════════════
# Price Error
# ═══════════════════════════════════════════════════════════════════════════════


class PriceErrorKind(Enum):
    """Price error kinds."""

    CURRENCY_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class PriceError:
    """Price arithmetic error."""

    kind: PriceErrorKind
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Price
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Price:
    """
    Amount of money in one currency.

    The empty price (zero amount, no currency) is neutral for addition:
    it adopts the currency of whatever is added to it.

    Example:
        Price(Decimal("5.00"), "EUR").add(Price(Decimal("3.00"), "EUR"))
        # Ok(Price(amount=Decimal('8.00'), currency='EUR'))
    """

    amount: Decimal = Decimal(0)
    currency: str = ""

    @staticmethod
    def zero(currency: str = "") -> Price:
        return Price(Decimal(0), currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def add(self, other: Price) -> Result[Price, PriceError]:
        """Add two prices. Fails if both carry different currencies."""
        match self._currency_guard(other):
            case Ok(currency):
                return Ok(Price(self.amount + other.amount, currency))
            case Error(e):
                return Error(e)

    def _currency_guard(self, other: Price) -> Result[str, PriceError]:
        if self.currency == other.currency:
            return Ok(self.currency)
        if self.currency == "" and self.is_zero():
            return Ok(other.currency)
        if other.currency == "" and other.is_zero():
            return Ok(self.currency)
        return Error(PriceError(
            PriceErrorKind.CURRENCY_MISMATCH,
            f"cannot add {other.currency or 'no currency'} to {self.currency or 'no currency'}",
        ))

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}".strip()


def sum_prices(prices: Iterable[Price]) -> Result[Price, PriceError]:
    """
    Sum prices, stopping at the first failing addition.

    An empty iterable sums to the empty price.
    """
    total = Price()
    for price in prices:
        match total.add(price):
            case Ok(value):
                total = value
            case Error(e):
                return Error(e)
    return Ok(total)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Price",
    "PriceError",
    "PriceErrorKind",
    "sum_prices",
)
