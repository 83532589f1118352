"""
Delivery — a shipment or pickup group of cart items.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime

from kungfu import Result, Ok, Error

from cartcore.cart._additional_info import AdditionalDeliveryInfo
from cartcore.cart._errors import (
    CartError,
    CartErrorKind,
    additional_infos_not_found,
)
from cartcore.cart._item import Item
from cartcore.cart._types import (
    DELIVERY_LOCATION_TYPE_UNSPECIFIED,
    DELIVERY_WORKFLOW_UNSPECIFIED,
    Address,
    ShippingItem,
)
from cartcore.price import Price

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeliveryLocation:
    type: str = DELIVERY_LOCATION_TYPE_UNSPECIFIED
    # Only set for type "address"
    address: Address | None = None
    # Identifier of special destinations (store, collection point...)
    code: str = ""


@dataclass(frozen=True, slots=True)
class DeliveryInfo:
    """
    Details of one delivery, usually completed during checkout.

    code is project specific and expected unique within a cart. A common
    convention is Type_Method_LocationType_LocationCode.

    additional_data holds flat key/value pairs; additional_delivery_infos holds
    raw JSON blobs. Unknown keys in both are opaque and must survive a
    round-trip untouched.
    """

    code: str = ""
    workflow: str = DELIVERY_WORKFLOW_UNSPECIFIED
    method: str = ""
    carrier: str = ""
    delivery_location: DeliveryLocation = field(default_factory=DeliveryLocation)
    desired_time: datetime | None = None
    additional_data: Mapping[str, str] = field(default_factory=dict)
    additional_delivery_infos: Mapping[str, bytes] | None = None

    def load_additional_info(
        self, key: str, info: AdditionalDeliveryInfo
    ) -> Result[None, CartError]:
        """
        Decode the blob stored under key into info.

        Returns Error(ADDITIONAL_INFO_NOT_FOUND) if nothing is stored under key,
        otherwise whatever info.unmarshal returns.
        """
        if self.additional_delivery_infos is None:
            return Error(additional_infos_not_found())
        raw = self.additional_delivery_infos.get(key)
        if raw is None:
            logger.debug("No additional info %r on delivery %r", key, self.code)
            return Error(additional_infos_not_found())
        return info.unmarshal(raw)

    def with_additional_info(
        self, key: str, info: AdditionalDeliveryInfo
    ) -> Result[DeliveryInfo, CartError]:
        """
        Copy of self with info encoded under key.

        Other keys are kept. The copy owns its maps, nothing is shared with self.
        """
        match info.marshal():
            case Ok(raw):
                infos = dict(self.additional_delivery_infos or {})
                infos[key] = raw
                return Ok(replace(
                    self,
                    additional_data=dict(self.additional_data),
                    additional_delivery_infos=infos,
                ))
            case Error(e):
                return Error(CartError(
                    CartErrorKind.ADDITIONAL_INFO_ENCODE,
                    f"cannot encode additional info {key!r}: {e}",
                    e,
                ))


@dataclass(frozen=True, slots=True)
class DeliveryTotals:
    """Summary costs of one delivery, for display."""

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


@dataclass(frozen=True, slots=True)
class Delivery:
    delivery_info: DeliveryInfo = field(default_factory=DeliveryInfo)
    cart_items: tuple[Item, ...] = ()
    delivery_totals: DeliveryTotals = field(default_factory=DeliveryTotals)
    shipping_item: ShippingItem = field(default_factory=ShippingItem)

    @property
    def code(self) -> str:
        return self.delivery_info.code


__all__ = (
    "DeliveryLocation",
    "DeliveryInfo",
    "DeliveryTotals",
    "Delivery",
)
