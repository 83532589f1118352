"""
Cart — queries over a cart snapshot, then redeeming a voucher.

Level 3: cartcore.cart
Level 2: kungfu.Result / kungfu.Option
"""

from kungfu import Ok, Error, Some

from cartcore.cart import GiftCardAndVoucherBehaviour
from examples._infra import banner, run, sample_cart, FakeGiftCards


async def main() -> None:
    cart = sample_cart()
    behaviour: GiftCardAndVoucherBehaviour = FakeGiftCards()

    banner("Cart: Teaser")
    teaser = cart.get_cart_teaser()
    print(f"  items={teaser.item_count} products={teaser.product_count}")
    print(f"  deliveries={teaser.delivery_codes}")
    print(f"  ship to={cart.get_main_shipping_email() or '-'}")

    banner("Cart: Lookups")
    match cart.get_delivery_by_code("pickup_store_store_042"):
        case Some(delivery):
            print(f"  ✓ pickup at store {delivery.delivery_info.delivery_location.code}")
        case _:
            print("  ✗ no pickup delivery")

    for item_id, code in [("2", "delivery_standard_address_home"), ("9", "delivery_standard_address_home"), ("1", "express")]:
        match cart.get_by_item_id(item_id, code):
            case Ok(item):
                print(f"  ✓ {item.product_name} x{item.qty}")
            case Error(e):
                print(f"  ✗ {e.message}")

    banner("Cart: Redeem Voucher")
    for code in ["NOPE", "WELCOME5"]:
        match await behaviour.apply_any(cart, code):
            case Ok((updated, events)):
                cart = updated
                print(f"  ✓ {code} applied, {len(events)} event(s) deferred")
            case Error(e):
                print(f"  ✗ {e.message}")

    match cart.get_voucher_savings():
        case Ok(savings):
            print(f"  voucher savings: {savings}")
        case Error(e):
            print(f"  cannot compute savings: {e.message}")

    match cart.get_savings():
        case Ok(savings):
            print(f"  discount savings: {savings}")
        case Error(e):
            print(f"  cannot compute savings: {e.message}")


if __name__ == "__main__":
    run(main)
