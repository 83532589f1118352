"""
Price — money value object.

    from cartcore import price as P

    total = P.sum_prices([P.Price(Decimal("5"), "EUR"), P.Price(Decimal("3"), "EUR")])
"""

from __future__ import annotations

from cartcore.price._types import (
    Price,
    PriceError,
    PriceErrorKind,
    sum_prices,
)

__all__ = (
    "Price",
    "PriceError",
    "PriceErrorKind",
    "sum_prices",
)
