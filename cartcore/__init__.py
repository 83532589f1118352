"""
cartcore — shopping cart domain model.

    from cartcore import cart as CT    # Cart aggregate & queries
    from cartcore import price as P    # Money value object
"""

from cartcore import cart
from cartcore import price
from cartcore._types import (
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    DeferEvents,
    Factory,
)

__version__ = "0.1.0"

__all__ = (
    "cart",
    "price",
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "DeferEvents",
    "Factory",
)
