"""
Item — one cart line.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from kungfu import Result

from cartcore.cart._savings import savings_of
from cartcore.cart._types import ItemDiscount
from cartcore.price import Price, PriceError


@dataclass(frozen=True, slots=True)
class Item:
    """
    Cart line with precomputed row totals.

    The derived fields are filled in by the cart service and expected to hold:

        row_total                       = single_price * qty
        tax_amount                      = qty * (single_price_incl_tax - single_price)
        row_total_incl_tax              = row_total + tax_amount
        total_discount_amount           = item_related + non_item_related discount amounts
        row_total_with_item_related_discount          = row_total - item_related_discount_amount
        row_total_with_item_related_discount_incl_tax = row_total_incl_tax - item_related_discount_amount
        row_total_with_discount_incl_tax              = row_total_incl_tax - total_discount_amount

    Nothing here recomputes or checks them.
    """

    # Unique within the delivery
    id: str
    unique_id: str = ""
    marketplace_code: str = ""
    # Used for configurable products
    variant_marketplace_code: str = ""
    product_name: str = ""
    # Where the item is initially picked, set by sourcing
    source_id: str = ""
    qty: int = 0
    additional_data: Mapping[str, str] = field(default_factory=dict)

    single_price: Price = Price()
    single_price_incl_tax: Price = Price()
    row_total: Price = Price()
    tax_amount: Price = Price()
    row_total_incl_tax: Price = Price()

    applied_discounts: tuple[ItemDiscount, ...] = ()
    total_discount_amount: Price = Price()
    item_related_discount_amount: Price = Price()
    non_item_related_discount_amount: Price = Price()
    row_total_with_item_related_discount: Price = Price()
    row_total_with_item_related_discount_incl_tax: Price = Price()
    # What the customer finally pays for this line
    row_total_with_discount_incl_tax: Price = Price()

    def get_savings_by_item(self) -> Result[Price, PriceError]:
        """Sum of all discounts applied to this item, never negative."""
        return savings_of(d.price for d in self.applied_discounts)


__all__ = ("Item",)
