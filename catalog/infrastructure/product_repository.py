"""SQL Product Repository — ProductRepository implementation over an AsyncSession.

Invariants:
    - Each method is its own unit of work: writes commit before returning
    - Any SQLAlchemyError is rolled back and re-raised as StorageUnavailableError
    - Only core.Product crosses the method boundary (ORM rows stay inside)
    - find_all orders by id ascending (callers must not rely on it)
    - Ids outside 1..MAX_STORED_INT cannot exist in the id column: looked up as absent

Design Decisions:
    - Session injected per request by the API layer: the repository never owns an engine
    - save() with an id overwrites the matching row, inserting it if absent (merge)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import MAX_STORED_INT, ProductId
from catalog.core.errors import ErrorContext, StorageUnavailableError
from catalog.core.product import Product
from catalog.models.product import ProductRecord

logger = logging.getLogger(__name__)


def _storable_id(product_id: int) -> bool:
    return 1 <= product_id <= MAX_STORED_INT


class SqlProductRepository:
    """Product persistence backed by SQLAlchemy async ORM."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _storage_call(
        self, operation: str, product_id: int | None = None,
    ) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Product storage {operation} failed: {e}",
                extra={"operation": operation, "product_id": product_id},
            )
            raise StorageUnavailableError(
                type(e).__name__, operation,
                ErrorContext(product_id=product_id),
            ) from e

    async def save(self, product: Product) -> Product:
        async with self._storage_call("save", product.id):
            if product.id is None:
                record = ProductRecord(
                    name=product.name, price_in_cents=product.price_in_cents,
                )
                self.db.add(record)
            else:
                record = await self.db.merge(
                    ProductRecord(
                        id=product.id,
                        name=product.name,
                        price_in_cents=product.price_in_cents,
                    ),
                )
            await self.db.commit()
            return record.to_entity()

    async def find_by_id(self, product_id: ProductId) -> Product | None:
        if not _storable_id(product_id):
            return None
        async with self._storage_call("find_by_id", product_id):
            record = await self.db.get(ProductRecord, product_id)
            return record.to_entity() if record else None

    async def find_all(self) -> list[Product]:
        async with self._storage_call("find_all"):
            result = await self.db.execute(
                select(ProductRecord).order_by(ProductRecord.id),
            )
            return [record.to_entity() for record in result.scalars().all()]

    async def exists_by_id(self, product_id: ProductId) -> bool:
        if not _storable_id(product_id):
            return False
        async with self._storage_call("exists_by_id", product_id):
            result = await self.db.execute(
                select(exists().where(ProductRecord.id == product_id)),
            )
            return bool(result.scalar())

    async def delete_by_id(self, product_id: ProductId) -> None:
        if not _storable_id(product_id):
            return
        async with self._storage_call("delete_by_id", product_id):
            await self.db.execute(
                delete(ProductRecord).where(ProductRecord.id == product_id),
            )
            await self.db.commit()
