"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via explicit constructor injection
    - Absence is a value (None / False), never an exception
    - Unreachable storage raises StorageUnavailableError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
    - Each method is atomic on its own; no cross-call transactions are assumed
"""

from typing import Protocol

from catalog.core.domain_types import ProductId
from catalog.core.product import Product


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def save(self, product: Product) -> Product: ...
    async def find_by_id(self, product_id: ProductId) -> Product | None: ...
    async def find_all(self) -> list[Product]: ...
    async def exists_by_id(self, product_id: ProductId) -> bool: ...
    async def delete_by_id(self, product_id: ProductId) -> None: ...
