"""Product Entity — immutable value object for the single catalog resource.

Invariants:
    - id is None until the storage layer assigns it on first save
    - with_details() never touches id (updates replace name and price only)

Design Decisions:
    - Frozen dataclass: a Product never changes in place, updates return copies
"""

from dataclasses import dataclass, replace

from catalog.core.domain_types import ProductId, PriceInCents


@dataclass(frozen=True)
class Product:
    name: str
    price_in_cents: PriceInCents
    id: ProductId | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, product_id: ProductId) -> "Product":
        return replace(self, id=product_id)

    def with_details(self, name: str, price_in_cents: PriceInCents) -> "Product":
        """Full replacement of name and price; id is preserved."""
        return replace(self, name=name, price_in_cents=price_in_cents)
