"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the storage-assigned integer — never assigned by the core
    - PriceInCents is an integer in minor currency units (never float)
    - All violation kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)


# ─── Value Types ─────────────────────────────────────────────────

PriceInCents = NewType("PriceInCents", int)   # 1..MAX_STORED_INT

# Upper bound of the 32-bit INTEGER columns holding ids and prices
MAX_STORED_INT: int = 2_147_483_647


# ─── Enums ───────────────────────────────────────────────────────

class ViolationTag(str, Enum):
    """Constraint that a submitted product field failed."""
    NAME_BLANK = "NAME_BLANK"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    PRICE_NOT_POSITIVE = "PRICE_NOT_POSITIVE"
    PRICE_TOO_LARGE = "PRICE_TOO_LARGE"


class ProductField(str, Enum):
    """External (wire) names of the writable product fields."""
    NAME = "name"
    PRICE_IN_CENTS = "priceInCents"
