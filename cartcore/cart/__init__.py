"""
Cart — the cart aggregate and its queries.

    from cartcore import cart as CT

    teaser = cart.get_cart_teaser()
    match cart.get_savings():
        case Ok(savings):
            ...

Test doubles live in cartcore.cart.mocks.
"""

from __future__ import annotations

from cartcore.cart._types import (
    DELIVERY_WORKFLOW_PICKUP,
    DELIVERY_WORKFLOW_DELIVERY,
    DELIVERY_WORKFLOW_UNSPECIFIED,
    DELIVERY_LOCATION_TYPE_UNSPECIFIED,
    DELIVERY_LOCATION_TYPE_COLLECTION_POINT,
    DELIVERY_LOCATION_TYPE_STORE,
    DELIVERY_LOCATION_TYPE_ADDRESS,
    DELIVERY_LOCATION_TYPE_FREIGHT_STATION,
    TOTALS_TYPE_DISCOUNT,
    TOTALS_TYPE_VOUCHER,
    TOTALS_TYPE_TAX,
    TOTALS_TYPE_LOYALTY_POINTS,
    TOTALS_TYPE_SHIPPING,
    Address,
    PersonalDetails,
    ExistingCustomerData,
    Person,
    CouponCode,
    SelectedPayment,
    AdditionalData,
    Teaser,
    ItemCartReference,
    ItemDiscount,
    Totalitem,
    ShippingItem,
    InvalidateCartEvent,
    PlacedOrderInfo,
    PlacedOrderInfos,
)
from cartcore.cart._errors import (
    CartError,
    CartErrorKind,
    delivery_not_found,
    item_not_found,
    additional_infos_not_found,
)
from cartcore.cart._additional_info import (
    AdditionalDeliveryInfo,
    AdditionalDeliveryInfoModel,
)
from cartcore.cart._item import Item
from cartcore.cart._totals import Totals
from cartcore.cart._delivery import (
    DeliveryLocation,
    DeliveryInfo,
    DeliveryTotals,
    Delivery,
)
from cartcore.cart._cart import Cart, Provider
from cartcore.cart._behaviour import ApplyResult, GiftCardAndVoucherBehaviour

__all__ = (
    # Constants
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
    # Value objects
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
    # Errors
    "CartError",
    "CartErrorKind",
    "delivery_not_found",
    "item_not_found",
    "additional_infos_not_found",
    # Additional delivery infos
    "AdditionalDeliveryInfo",
    "AdditionalDeliveryInfoModel",
    # Aggregate
    "Item",
    "Totals",
    "DeliveryLocation",
    "DeliveryInfo",
    "DeliveryTotals",
    "Delivery",
    "Cart",
    "Provider",
    # Behaviours
    "ApplyResult",
    "GiftCardAndVoucherBehaviour",
)
