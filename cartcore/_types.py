"""
Core types for cartcore.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing

# ═══════════════════════════════════════════════════════════════════════════════
# Deferred Events
# ═══════════════════════════════════════════════════════════════════════════════

type DeferEvents = tuple[object, ...]
"""Events a behaviour hands back to the caller for later dispatch."""

# ═══════════════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════════════

type Factory[T] = Callable[[], T]
"""Zero-argument constructor for value objects."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    # Type aliases
    "DeferEvents",
    "Factory",
)
