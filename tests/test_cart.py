from dataclasses import replace
from decimal import Decimal

import pytest
from kungfu import Ok, Error, Some, Nothing

from cartcore.cart import (
    TOTALS_TYPE_DISCOUNT,
    TOTALS_TYPE_TAX,
    TOTALS_TYPE_VOUCHER,
    Cart,
    CartErrorKind,
    ItemCartReference,
    PlacedOrderInfo,
    PlacedOrderInfos,
    Teaser,
    Totalitem,
    Totals,
)
from cartcore.price import Price, PriceErrorKind
from tests.factories import eur, usd, make_delivery, make_store_delivery


# ═══════════════════════════════════════════════════════════════════════════════
# Counting
# ═══════════════════════════════════════════════════════════════════════════════


def test_empty_cart_counts(empty_cart):
    assert empty_cart.item_count() == 0
    assert empty_cart.product_count() == 0
    assert empty_cart.get_delivery_codes() == []
    assert empty_cart.get_item_cart_references() == []


def test_item_count_sums_quantities(cart):
    assert cart.item_count() == 6


def test_product_count_counts_lines(cart):
    assert cart.product_count() == 3


def test_delivery_codes_skip_empty_deliveries(cart):
    cart = replace(cart, deliveries=(*cart.deliveries, make_delivery("D3")))
    assert cart.get_delivery_codes() == ["D1", "D2"]


def test_item_cart_references_keep_order(cart):
    assert cart.get_item_cart_references() == [
        ItemCartReference(item_id="D1-item-1", delivery_code="D1"),
        ItemCartReference(item_id="D1-item-2", delivery_code="D1"),
        ItemCartReference(item_id="D2-item-1", delivery_code="D2"),
    ]


def test_cart_teaser(cart):
    assert cart.get_cart_teaser() == Teaser(
        product_count=3,
        item_count=6,
        delivery_codes=("D1", "D2"),
    )


def test_cart_teaser_is_hashable(cart):
    teaser = cart.get_cart_teaser()
    assert hash(teaser) == hash(cart.get_cart_teaser())
    assert {teaser} == {cart.get_cart_teaser()}


# ═══════════════════════════════════════════════════════════════════════════════
# Lookup
# ═══════════════════════════════════════════════════════════════════════════════


def test_get_delivery_by_code_missing(cart):
    match cart.get_delivery_by_code("nope"):
        case Some(delivery):
            pytest.fail(f"unexpected delivery {delivery}")
        case Nothing():
            pass
    assert not cart.has_delivery_for_code("nope")


def test_get_delivery_by_code_found(cart):
    match cart.get_delivery_by_code("D1"):
        case Some(delivery):
            assert delivery.code == "D1"
            assert [item.qty for item in delivery.cart_items] == [2, 3]
        case _:
            pytest.fail("D1 not found")
    assert cart.has_delivery_for_code("D2")


def test_get_by_item_id_found(cart):
    match cart.get_by_item_id("D1-item-2", "D1"):
        case Ok(item):
            assert item.qty == 3
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


def test_get_by_item_id_missing_item(cart):
    match cart.get_by_item_id("x", "D1"):
        case Error(e):
            assert e.kind is CartErrorKind.ITEM_NOT_FOUND
            assert "not existing" in e.message
        case Ok(item):
            pytest.fail(f"unexpected item {item}")


def test_get_by_item_id_missing_delivery(cart):
    match cart.get_by_item_id("D1-item-1", "D9"):
        case Error(e):
            assert e.kind is CartErrorKind.DELIVERY_NOT_FOUND
            assert "not found" in e.message
        case Ok(item):
            pytest.fail(f"unexpected item {item}")


def test_duplicate_delivery_codes_first_match_wins():
    cart = Cart(deliveries=(make_delivery("D1", 2), make_delivery("D1", 5, 7)))

    match cart.get_delivery_by_code("D1"):
        case Some(delivery):
            assert delivery is cart.deliveries[0]
            assert [item.qty for item in delivery.cart_items] == [2]
        case _:
            pytest.fail("D1 not found")

    match cart.get_by_item_id("D1-item-1", "D1"):
        case Ok(item):
            assert item.qty == 2
        case Error(e):
            pytest.fail(f"unexpected error: {e}")

    # Only in the second D1, which is never searched
    match cart.get_by_item_id("D1-item-2", "D1"):
        case Error(e):
            assert e.kind is CartErrorKind.ITEM_NOT_FOUND
        case Ok(item):
            pytest.fail(f"unexpected item {item}")


def test_main_shipping_email_first_match(cart):
    assert cart.get_main_shipping_email() == "d2@example.com"
    assert Cart().get_main_shipping_email() == ""


def test_main_shipping_email_skips_deliveries_without_address():
    cart = Cart(deliveries=(
        make_store_delivery("S1", 1),
        make_delivery("D1", 1, email="late@example.com"),
    ))
    assert cart.get_main_shipping_email() == "late@example.com"


def test_main_shipping_email_empty_without_addresses():
    cart = Cart(deliveries=(make_store_delivery("S1", 1), make_store_delivery("S2", 2)))
    assert cart.get_main_shipping_email() == ""


# ═══════════════════════════════════════════════════════════════════════════════
# Savings & Coupons
# ═══════════════════════════════════════════════════════════════════════════════


def test_savings_exclude_vouchers(cart):
    match cart.get_savings():
        case Ok(savings):
            assert savings == eur("8")
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


def test_voucher_savings(cart):
    match cart.get_voucher_savings():
        case Ok(savings):
            assert savings == eur("2")
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


def test_savings_currency_mismatch_is_reported():
    cart = Cart(totals=Totals(total_items=(
        Totalitem(code="a", title="A", price=eur("5"), type=TOTALS_TYPE_DISCOUNT),
        Totalitem(code="b", title="B", price=usd("3"), type=TOTALS_TYPE_DISCOUNT),
    )))
    match cart.get_savings():
        case Error(e):
            assert e.kind is PriceErrorKind.CURRENCY_MISMATCH
        case Ok(savings):
            pytest.fail(f"expected mismatch, got {savings}")


def test_negative_savings_clamp_to_zero():
    cart = Cart(totals=Totals(total_items=(
        Totalitem(code="fee", title="Fee", price=eur("-4"), type=TOTALS_TYPE_VOUCHER),
    )))
    match cart.get_voucher_savings():
        case Ok(savings):
            assert savings == Price(Decimal(0), "EUR")
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


def test_no_savings_is_empty_price(empty_cart):
    match empty_cart.get_savings():
        case Ok(savings):
            assert savings.is_zero()
        case Error(e):
            pytest.fail(f"unexpected error: {e}")


def test_total_items_by_type(cart):
    assert [t.code for t in cart.totals.get_total_items_by_type(TOTALS_TYPE_DISCOUNT)] == [
        "summer",
        "loyal",
    ]
    assert [t.code for t in cart.totals.get_total_items_by_type(TOTALS_TYPE_TAX)] == ["vat"]
    assert cart.totals.get_total_items_by_type("unknown") == []


def test_has_applied_coupon_code(cart, empty_cart):
    assert cart.has_applied_coupon_code()
    assert not empty_cart.has_applied_coupon_code()


# ═══════════════════════════════════════════════════════════════════════════════
# Placed Orders
# ═══════════════════════════════════════════════════════════════════════════════


def test_order_number_for_delivery_code():
    infos = PlacedOrderInfos((
        PlacedOrderInfo(order_number="100", delivery_code="D1"),
        PlacedOrderInfo(order_number="101", delivery_code="D2"),
        PlacedOrderInfo(order_number="102", delivery_code="D2"),
    ))
    assert infos.get_order_number_for_delivery_code("D2") == "101"
    assert infos.get_order_number_for_delivery_code("D3") == ""
    assert len(infos) == 3
    assert [info.order_number for info in infos] == ["100", "101", "102"]
