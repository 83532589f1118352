"""
Cart value objects — the small records hanging off the aggregate.

Everything here is immutable. The cart service builds a fresh graph on each
modification and hands it out whole.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from cartcore.price import Price


# ═══════════════════════════════════════════════════════════════════════════════
# Constants
# ═══════════════════════════════════════════════════════════════════════════════

DELIVERY_WORKFLOW_PICKUP = "pickup"
DELIVERY_WORKFLOW_DELIVERY = "delivery"
DELIVERY_WORKFLOW_UNSPECIFIED = "unspecified"

DELIVERY_LOCATION_TYPE_UNSPECIFIED = "unspecified"
DELIVERY_LOCATION_TYPE_COLLECTION_POINT = "collection-point"
DELIVERY_LOCATION_TYPE_STORE = "store"
DELIVERY_LOCATION_TYPE_ADDRESS = "address"
DELIVERY_LOCATION_TYPE_FREIGHT_STATION = "freight-station"

TOTALS_TYPE_DISCOUNT = "totals_type_discount"
TOTALS_TYPE_VOUCHER = "totals_type_voucher"
TOTALS_TYPE_TAX = "totals_type_tax"
TOTALS_TYPE_LOYALTY_POINTS = "totals_loyaltypoints"
TOTALS_TYPE_SHIPPING = "totals_type_shipping"


# ═══════════════════════════════════════════════════════════════════════════════
# Customer Domain
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Address:
    vat: str = ""
    firstname: str = ""
    lastname: str = ""
    middle_name: str = ""
    title: str = ""
    salutation: str = ""
    street: str = ""
    street_nr: str = ""
    additional_address_lines: tuple[str, ...] = ()
    company: str = ""
    city: str = ""
    post_code: str = ""
    state: str = ""
    region_code: str = ""
    country: str = ""
    country_code: str = ""
    telephone: str = ""
    email: str = ""


@dataclass(frozen=True, slots=True)
class PersonalDetails:
    date_of_birth: str = ""
    passport_country: str = ""
    passport_number: str = ""
    nationality: str = ""


@dataclass(frozen=True, slots=True)
class ExistingCustomerData:
    id: str


@dataclass(frozen=True, slots=True)
class Person:
    """Legal contact person for the order."""

    address: Address | None = None
    personal_details: PersonalDetails = field(default_factory=PersonalDetails)
    # Set only if the purchaser is a known customer
    existing_customer_data: ExistingCustomerData | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Cart Extras
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CouponCode:
    code: str


@dataclass(frozen=True, slots=True)
class SelectedPayment:
    provider: str = ""
    method: str = ""


@dataclass(frozen=True, slots=True)
class AdditionalData:
    """Supplementary cart data."""

    custom_attributes: Mapping[str, str] = field(default_factory=dict)
    selected_payment: SelectedPayment = field(default_factory=SelectedPayment)


@dataclass(frozen=True, slots=True)
class Teaser:
    """Summary projection of a cart for display."""

    product_count: int
    item_count: int
    delivery_codes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ItemCartReference:
    """Points at one item inside one delivery."""

    item_id: str
    delivery_code: str


# ═══════════════════════════════════════════════════════════════════════════════
# Pricing Lines
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ItemDiscount:
    code: str
    title: str
    price: Price
    # False when the discount is a share of a cart-wide discount
    is_item_related: bool = False


@dataclass(frozen=True, slots=True)
class Totalitem:
    """Summary line of the cart totals: tax, discount, voucher, shipping..."""

    code: str
    title: str
    price: Price
    type: str


@dataclass(frozen=True, slots=True)
class ShippingItem:
    title: str = ""
    price: Price = Price()
    tax_amount: Price = Price()
    discount_amount: Price = Price()


# ═══════════════════════════════════════════════════════════════════════════════
# Events & Orders
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class InvalidateCartEvent:
    """Asks listeners to drop cached carts bound to the session."""

    session: object | None = None


@dataclass(frozen=True, slots=True)
class PlacedOrderInfo:
    order_number: str
    delivery_code: str


@dataclass(frozen=True, slots=True)
class PlacedOrderInfos:
    """Orders placed from a cart, one per delivery."""

    infos: tuple[PlacedOrderInfo, ...] = ()

    def __iter__(self) -> Iterator[PlacedOrderInfo]:
        return iter(self.infos)

    def __len__(self) -> int:
        return len(self.infos)

    def get_order_number_for_delivery_code(self, delivery_code: str) -> str:
        """Order number placed for the delivery, empty string if none."""
        for info in self.infos:
            if info.delivery_code == delivery_code:
                return info.order_number
        return ""


__all__ = (
    "DELIVERY_WORKFLOW_PICKUP",
    "DELIVERY_WORKFLOW_DELIVERY",
    "DELIVERY_WORKFLOW_UNSPECIFIED",
    "DELIVERY_LOCATION_TYPE_UNSPECIFIED",
    "DELIVERY_LOCATION_TYPE_COLLECTION_POINT",
    "DELIVERY_LOCATION_TYPE_STORE",
    "DELIVERY_LOCATION_TYPE_ADDRESS",
    "DELIVERY_LOCATION_TYPE_FREIGHT_STATION",
    "TOTALS_TYPE_DISCOUNT",
    "TOTALS_TYPE_VOUCHER",
    "TOTALS_TYPE_TAX",
    "TOTALS_TYPE_LOYALTY_POINTS",
    "TOTALS_TYPE_SHIPPING",
    "Address",
    "PersonalDetails",
    "ExistingCustomerData",
    "Person",
    "CouponCode",
    "SelectedPayment",
    "AdditionalData",
    "Teaser",
    "ItemCartReference",
    "ItemDiscount",
    "Totalitem",
    "ShippingItem",
    "InvalidateCartEvent",
    "PlacedOrderInfo",
    "PlacedOrderInfos",
)
