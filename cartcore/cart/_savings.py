"""
Savings — accumulate discount prices into a non-negative total.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kungfu import Result, Ok, Error

from cartcore.price import Price, PriceError, sum_prices

logger = logging.getLogger(__name__)


def savings_of(prices: Iterable[Price]) -> Result[Price, PriceError]:
    """
    Sum prices as savings.

    The first failing addition is returned as is; no partial sum leaks out.
    A negative sum counts as no savings and becomes zero in its currency.
    """
    match sum_prices(prices):
        case Ok(total):
            if total.is_negative():
                return Ok(Price.zero(total.currency))
            return Ok(total)
        case Error(e):
            logger.debug("Savings not computable: %s", e.message)
            return Error(e)


__all__ = ("savings_of",)
