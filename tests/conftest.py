import pytest

from cartcore.cart import (
    TOTALS_TYPE_DISCOUNT,
    TOTALS_TYPE_TAX,
    TOTALS_TYPE_VOUCHER,
    Cart,
    CouponCode,
    Item,
    ItemDiscount,
    Totalitem,
    Totals,
)
from tests.factories import eur, make_delivery


@pytest.fixture
def empty_cart():
    return Cart(id="empty")


@pytest.fixture
def cart():
    """D1 with quantities 2 and 3, D2 with quantity 1, discounts and a voucher."""
    return Cart(
        id="cart-1",
        deliveries=(
            make_delivery("D1", 2, 3),
            make_delivery("D2", 1, email="d2@example.com"),
        ),
        totals=Totals(
            total_items=(
                Totalitem(code="summer", title="Summer sale", price=eur("5"), type=TOTALS_TYPE_DISCOUNT),
                Totalitem(code="vat", title="VAT", price=eur("19"), type=TOTALS_TYPE_TAX),
                Totalitem(code="loyal", title="Loyalty", price=eur("3"), type=TOTALS_TYPE_DISCOUNT),
                Totalitem(code="GIFT-2", title="Voucher", price=eur("2"), type=TOTALS_TYPE_VOUCHER),
            ),
        ),
        applied_coupon_codes=(CouponCode("GIFT-2"),),
    )


@pytest.fixture
def discounted_item():
    return Item(
        id="item-1",
        qty=2,
        applied_discounts=(
            ItemDiscount(code="promo", title="Promo", price=eur("1.50"), is_item_related=True),
            ItemDiscount(code="cart", title="Cart share", price=eur("0.50")),
        ),
    )
