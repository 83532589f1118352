"""
Totals — summary costs and discounts of a whole cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cartcore.cart._types import ShippingItem, Totalitem
from cartcore.price import Price


@dataclass(frozen=True, slots=True)
class Totals:
    """
    Cart totals.

    grand_total is the final amount to pay:
        sub_total + tax_amount - total_discount_amount + some of total_items
    """

    total_items: tuple[Totalitem, ...] = ()
    total_shipping_item: ShippingItem = field(default_factory=ShippingItem)
    grand_total: Price = Price()
    # SUM of item row_total
    sub_total: Price = Price()
    # SUM of item row_total_incl_tax
    sub_total_incl_tax: Price = Price()
    # sub_total - SUM of item item_related_discount_amount
    sub_total_with_discounts: Price = Price()
    # SUM of item row_total_with_item_related_discount_incl_tax
    sub_total_with_discounts_and_tax: Price = Price()
    # SUM of item total_discount_amount
    total_discount_amount: Price = Price()
    # SUM of item non_item_related_discount_amount
    total_non_item_related_discount_amount: Price = Price()
    # SUM of item tax_amount
    tax_amount: Price = Price()

    def get_total_items_by_type(self, type_code: str) -> list[Totalitem]:
        """Total items of the given type, in order."""
        return [item for item in self.total_items if item.type == type_code]


__all__ = ("Totals",)
