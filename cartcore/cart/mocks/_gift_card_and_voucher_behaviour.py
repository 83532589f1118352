"""
Test double for GiftCardAndVoucherBehaviour.

Expectations are registered per code, or as a fallback for any code. A
result is either a ready Result or a function computing it from the call
arguments. Calls are recorded on a unittest.mock.Mock.

Example:
    behaviour = GiftCardAndVoucherBehaviourMock()
    behaviour.on_apply_any("GIFT-10", Ok((updated_cart, ())))
    behaviour.on_apply_any(None, lambda cart, code: Error(unknown_code(code)))

    result = await service.redeem(cart, "GIFT-10", behaviour)
    behaviour.apply_any_calls.assert_called_once_with(cart, "GIFT-10")
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock

from kungfu import Ok, Error

from cartcore.cart._behaviour import ApplyResult
from cartcore.cart._cart import Cart

type ApplyAnyReturn = ApplyResult | Callable[[Cart, str], ApplyResult]


class GiftCardAndVoucherBehaviourMock:
    """Scriptable GiftCardAndVoucherBehaviour recording every call."""

    def __init__(self) -> None:
        self.apply_any_calls = Mock(name="apply_any")
        self._by_code: dict[str, ApplyAnyReturn] = {}
        self._fallback: ApplyAnyReturn | None = None

    def on_apply_any(
        self, any_code: str | None, result: ApplyAnyReturn
    ) -> GiftCardAndVoucherBehaviourMock:
        """Script the result for any_code, or for every code when None."""
        if any_code is None:
            self._fallback = result
        else:
            self._by_code[any_code] = result
        return self

    async def apply_any(self, cart: Cart, any_code: str) -> ApplyResult:
        self.apply_any_calls(cart, any_code)

        ret = self._by_code.get(any_code, self._fallback)
        if ret is None:
            raise AssertionError(
                f"apply_any({any_code!r}) was called but no result was scripted. "
                "Did you forget on_apply_any()?"
            )
        if isinstance(ret, (Ok, Error)):
            return ret
        return ret(cart, any_code)


__all__ = (
    "ApplyAnyReturn",
    "GiftCardAndVoucherBehaviourMock",
)
