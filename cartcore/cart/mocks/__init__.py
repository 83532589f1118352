"""
Mocks — test doubles for cart behaviours.
"""

from __future__ import annotations

from cartcore.cart.mocks._gift_card_and_voucher_behaviour import (
    ApplyAnyReturn,
    GiftCardAndVoucherBehaviourMock,
)

__all__ = (
    "ApplyAnyReturn",
    "GiftCardAndVoucherBehaviourMock",
)
