"""Domain Types: identity types that replace bare ints across the codebase.

Invariants:
    - UserId, OrderId, ItemId are server-assigned positive integers <= INT32_MAX
    - Resource names are the strings used in error messages and log extras

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
OrderId = NewType("OrderId", int)
ItemId = NewType("ItemId", int)

# Upper bound of the Integer columns backing ids and quantities
INT32_MAX = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Resource(str, Enum):
    """Resources exposed over HTTP, as named in messages and logs."""
    USER = "user"
    ORDER = "order"
    ITEM = "item"
