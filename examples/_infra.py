"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field, replace
from decimal import Decimal

from kungfu import Ok, Error

from cartcore.cart import (
    DELIVERY_LOCATION_TYPE_ADDRESS,
    DELIVERY_LOCATION_TYPE_STORE,
    DELIVERY_WORKFLOW_DELIVERY,
    DELIVERY_WORKFLOW_PICKUP,
    TOTALS_TYPE_DISCOUNT,
    TOTALS_TYPE_VOUCHER,
    Address,
    ApplyResult,
    Cart,
    CartError,
    CartErrorKind,
    CouponCode,
    Delivery,
    DeliveryInfo,
    DeliveryLocation,
    InvalidateCartEvent,
    Item,
    ItemDiscount,
    Totalitem,
    Totals,
)
from cartcore.price import Price


def eur(amount: str) -> Price:
    return Price(Decimal(amount), "EUR")


# Fake cart service data
def sample_cart() -> Cart:
    home = Delivery(
        delivery_info=DeliveryInfo(
            code="delivery_standard_address_home",
            workflow=DELIVERY_WORKFLOW_DELIVERY,
            method="standard",
            delivery_location=DeliveryLocation(
                type=DELIVERY_LOCATION_TYPE_ADDRESS,
                address=Address(firstname="Alice", city="Berlin", email="alice@example.com"),
            ),
        ),
        cart_items=(
            Item(
                id="1",
                marketplace_code="mug",
                product_name="Mug",
                qty=2,
                single_price=eur("8.00"),
                applied_discounts=(
                    ItemDiscount(code="spring", title="Spring sale", price=eur("1.60"), is_item_related=True),
                ),
            ),
            Item(id="2", marketplace_code="tea", product_name="Green tea", qty=3, single_price=eur("4.50")),
        ),
    )
    store = Delivery(
        delivery_info=DeliveryInfo(
            code="pickup_store_store_042",
            workflow=DELIVERY_WORKFLOW_PICKUP,
            delivery_location=DeliveryLocation(type=DELIVERY_LOCATION_TYPE_STORE, code="042"),
        ),
        cart_items=(
            Item(id="1", marketplace_code="kettle", product_name="Kettle", qty=1, single_price=eur("39.00")),
        ),
    )
    return Cart(
        id="cart-42",
        deliveries=(home, store),
        totals=Totals(total_items=(
            Totalitem(code="spring", title="Spring sale", price=eur("1.60"), type=TOTALS_TYPE_DISCOUNT),
        )),
    )


# Fake behaviour
@dataclass(slots=True)
class FakeGiftCards:
    vouchers: dict[str, Price] = field(default_factory=lambda: {
        "WELCOME5": eur("5.00"),
    })

    async def apply_any(self, cart: Cart, any_code: str) -> ApplyResult:
        await asyncio.sleep(0.01)
        value = self.vouchers.get(any_code)
        if value is None:
            return Error(CartError(CartErrorKind.CODE_REJECTED, f"code {any_code} not applicable"))
        voucher = Totalitem(code=any_code, title="Voucher", price=value, type=TOTALS_TYPE_VOUCHER)
        updated = replace(
            cart,
            totals=replace(cart.totals, total_items=(*cart.totals.total_items, voucher)),
            applied_coupon_codes=(*cart.applied_coupon_codes, CouponCode(any_code)),
        )
        return Ok((updated, (InvalidateCartEvent(),)))


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
