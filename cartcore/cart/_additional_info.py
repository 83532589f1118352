"""
Additional delivery infos — arbitrary structured data stored on a delivery.

Values are kept as raw JSON blobs keyed by string and decoded on demand into
types this package knows nothing about.

Example:
    class GiftWrap(AdditionalDeliveryInfoModel):
        paper: str = ""
        message: str = ""

    info = GiftWrap()
    match delivery_info.load_additional_info("gift_wrap", info):
        case Ok(_):
            print(info.paper)
        case Error(e):
            print(e.message)
"""

from __future__ import annotations

import logging
from typing import Protocol

from kungfu import Result, Ok, Error
from pydantic import BaseModel, ValidationError

from cartcore.cart._errors import CartError, CartErrorKind

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class AdditionalDeliveryInfo(Protocol):
    """Anything that can be stored as a raw blob on a delivery."""

    def marshal(self) -> Result[bytes, CartError]:
        """Encode self into a raw blob."""
        ...

    def unmarshal(self, raw: bytes) -> Result[None, CartError]:
        """Populate self from a raw blob."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Pydantic Implementation
# ═══════════════════════════════════════════════════════════════════════════════


class AdditionalDeliveryInfoModel(BaseModel):
    """
    JSON-backed AdditionalDeliveryInfo.

    Subclass and declare fields; unmarshal validates the blob against the
    subclass and copies the parsed fields onto the instance. Frozen subclasses
    cannot be populated and always fail with ADDITIONAL_INFO_DECODE.
    """

    def marshal(self) -> Result[bytes, CartError]:
        return Ok(self.model_dump_json().encode())

    def unmarshal(self, raw: bytes) -> Result[None, CartError]:
        try:
            parsed = type(self).model_validate_json(raw)
            # Frozen models reject the first assignment, before any field changes
            for name in type(self).model_fields:
                setattr(self, name, getattr(parsed, name))
        except ValidationError as e:
            logger.debug("Failed to decode %s: %s", type(self).__name__, e)
            return Error(CartError(
                CartErrorKind.ADDITIONAL_INFO_DECODE,
                f"cannot decode {type(self).__name__}: {e.error_count()} validation error(s)",
                e,
            ))
        return Ok(None)


__all__ = (
    "AdditionalDeliveryInfo",
    "AdditionalDeliveryInfoModel",
)
