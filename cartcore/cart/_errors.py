"""
Cart errors — value-carrying failures returned inside Result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CartErrorKind(Enum):
    """Cart error kinds."""

    DELIVERY_NOT_FOUND = auto()
    ITEM_NOT_FOUND = auto()
    ADDITIONAL_INFO_NOT_FOUND = auto()
    ADDITIONAL_INFO_DECODE = auto()
    ADDITIONAL_INFO_ENCODE = auto()
    CODE_REJECTED = auto()  # Gift card or voucher code not applicable


@dataclass(frozen=True, slots=True)
class CartError:
    """
    Cart operation error.

    Note: cause holds the underlying exception or error value, if any.
    """

    kind: CartErrorKind
    message: str
    cause: object | None = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════════════


def delivery_not_found(delivery_code: str) -> CartError:
    return CartError(
        CartErrorKind.DELIVERY_NOT_FOUND,
        f"Delivery for code {delivery_code} not found",
    )


def item_not_found(item_id: str) -> CartError:
    return CartError(
        CartErrorKind.ITEM_NOT_FOUND,
        f"itemId {item_id} in cart not existing",
    )


def additional_infos_not_found() -> CartError:
    return CartError(
        CartErrorKind.ADDITIONAL_INFO_NOT_FOUND,
        "additional infos not found",
    )


__all__ = (
    "CartError",
    "CartErrorKind",
    "delivery_not_found",
    "item_not_found",
    "additional_infos_not_found",
)
