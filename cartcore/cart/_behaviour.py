"""
Behaviours — boundaries the cart service implements per backend.

Only the data crossing the boundary is defined here.
"""

from __future__ import annotations

from typing import Protocol

from kungfu import Result

from cartcore._types import DeferEvents
from cartcore.cart._cart import Cart
from cartcore.cart._errors import CartError

type ApplyResult = Result[tuple[Cart, DeferEvents], CartError]
"""Replacement cart plus events to dispatch, or the failure."""


class GiftCardAndVoucherBehaviour(Protocol):
    """
    Applies gift card and voucher codes.

    Example:
        class LocalGiftCards:
            async def apply_any(self, cart: Cart, any_code: str) -> ApplyResult:
                updated = replace(
                    cart,
                    applied_coupon_codes=(*cart.applied_coupon_codes, CouponCode(any_code)),
                )
                return Ok((updated, (InvalidateCartEvent(),)))
    """

    async def apply_any(self, cart: Cart, any_code: str) -> ApplyResult:
        """Apply a code that may be either a gift card or a voucher."""
        ...


__all__ = (
    "ApplyResult",
    "GiftCardAndVoucherBehaviour",
)
