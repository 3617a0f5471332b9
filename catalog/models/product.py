"""ProductRecord ORM — persisted row behind the Product entity.

Invariants:
    - id is an integer identity primary key assigned by the database
    - name is non-nullable, at most MAX_NAME_LENGTH characters
    - price_in_cents is non-nullable and strictly positive (CHECK constraint)

Design Decisions:
    - Separate from core.product.Product: the core stays free of SQLAlchemy
    - CHECK constraints duplicate the core rules as a last line at the storage level
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.domain_types import PriceInCents, ProductId
from catalog.core.product import Product
from catalog.core.validate_product import MAX_NAME_LENGTH
from catalog.db.base import Base


class ProductRecord(Base):
    """Row in the products table."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price_in_cents > 0", name="ck_products_price_positive"),
        CheckConstraint("length(trim(name)) > 0", name="ck_products_name_not_blank"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    price_in_cents: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_entity(self) -> Product:
        return Product(
            id=ProductId(self.id),
            name=self.name,
            price_in_cents=PriceInCents(self.price_in_cents),
        )
