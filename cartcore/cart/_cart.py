"""
Cart — root aggregate and its read-only queries.

The cart is a value object: the cart service owns every modification and
returns a new cart each time. All queries are plain traversals of the
deliveries and their items.

Example:
    match cart.get_by_item_id("item-1", "delivery"):
        case Ok(item):
            print(item.qty)
        case Error(e):
            print(e.message)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kungfu import Result, Ok, Error, Option, Some, Nothing

from cartcore._types import Factory
from cartcore.cart._delivery import Delivery
from cartcore.cart._errors import CartError, delivery_not_found, item_not_found
from cartcore.cart._item import Item
from cartcore.cart._savings import savings_of
from cartcore.cart._totals import Totals
from cartcore.cart._types import (
    TOTALS_TYPE_DISCOUNT,
    TOTALS_TYPE_VOUCHER,
    AdditionalData,
    Address,
    CouponCode,
    ItemCartReference,
    Person,
    Teaser,
)
from cartcore.price import Price, PriceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cart:
    id: str = ""
    # Secondary identifier some backends use
    entity_id: str = ""
    # Order ID already reserved for the future order
    reserved_order_id: str = ""
    totals: Totals = field(default_factory=Totals)
    # Relevant for all payments and invoices
    billing_address: Address = field(default_factory=Address)
    purchaser: Person = field(default_factory=Person)
    deliveries: tuple[Delivery, ...] = ()
    additional_data: AdditionalData = field(default_factory=AdditionalData)
    # False for guest carts
    belongs_to_authenticated_user: bool = False
    authenticated_user_id: str = ""
    applied_coupon_codes: tuple[CouponCode, ...] = ()

    # ═══════════════════════════════════════════════════════════════════════════
    # Deliveries
    # ═══════════════════════════════════════════════════════════════════════════

    def get_main_shipping_email(self) -> str:
        """First email found on a delivery address, empty string if none."""
        for delivery in self.deliveries:
            address = delivery.delivery_info.delivery_location.address
            if address is not None and address.email:
                return address.email
        return ""

    def get_delivery_by_code(self, delivery_code: str) -> Option[Delivery]:
        """First delivery with the given code."""
        for delivery in self.deliveries:
            if delivery.delivery_info.code == delivery_code:
                return Some(delivery)
        return Nothing()

    def has_delivery_for_code(self, delivery_code: str) -> bool:
        match self.get_delivery_by_code(delivery_code):
            case Some(_):
                return True
            case _:
                return False

    def get_delivery_codes(self) -> list[str]:
        """Codes of all deliveries that hold at least one item."""
        return [
            delivery.delivery_info.code
            for delivery in self.deliveries
            if delivery.cart_items
        ]

    # ═══════════════════════════════════════════════════════════════════════════
    # Items
    # ═══════════════════════════════════════════════════════════════════════════

    def get_by_item_id(self, item_id: str, delivery_code: str) -> Result[Item, CartError]:
        """
        Find an item inside a delivery.

        Fails with DELIVERY_NOT_FOUND or ITEM_NOT_FOUND, in that order.
        """
        match self.get_delivery_by_code(delivery_code):
            case Some(delivery):
                for item in delivery.cart_items:
                    if item.id == item_id:
                        return Ok(item)
                logger.debug("Item %r not in delivery %r", item_id, delivery_code)
                return Error(item_not_found(item_id))
            case _:
                logger.debug("Delivery %r not in cart %r", delivery_code, self.id)
                return Error(delivery_not_found(delivery_code))

    def item_count(self) -> int:
        """Number of units: sum of all item quantities."""
        return sum(
            item.qty
            for delivery in self.deliveries
            for item in delivery.cart_items
        )

    def product_count(self) -> int:
        """Number of item lines across all deliveries."""
        return sum(len(delivery.cart_items) for delivery in self.deliveries)

    def get_item_cart_references(self) -> list[ItemCartReference]:
        return [
            ItemCartReference(item_id=item.id, delivery_code=delivery.delivery_info.code)
            for delivery in self.deliveries
            for item in delivery.cart_items
        ]

    # ═══════════════════════════════════════════════════════════════════════════
    # Savings & Coupons
    # ═══════════════════════════════════════════════════════════════════════════

    def get_voucher_savings(self) -> Result[Price, PriceError]:
        """Sum of all voucher total items, never negative."""
        return savings_of(
            item.price for item in self.totals.get_total_items_by_type(TOTALS_TYPE_VOUCHER)
        )

    def get_savings(self) -> Result[Price, PriceError]:
        """Sum of all discount total items, never negative."""
        return savings_of(
            item.price for item in self.totals.get_total_items_by_type(TOTALS_TYPE_DISCOUNT)
        )

    def has_applied_coupon_code(self) -> bool:
        return len(self.applied_coupon_codes) > 0

    def get_cart_teaser(self) -> Teaser:
        return Teaser(
            product_count=self.product_count(),
            item_count=self.item_count(),
            delivery_codes=tuple(self.get_delivery_codes()),
        )


type Provider = Factory[Cart]
"""Creates cart value objects."""


__all__ = (
    "Cart",
    "Provider",
)
