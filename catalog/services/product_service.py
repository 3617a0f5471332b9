"""Product Service — orchestrates lookup, mutation and persistence for products.

Invariants:
    - Repository is an explicit constructor argument (no container, no globals)
    - Every operation returns a Result; domain outcomes never raise
    - get_by_id is the single source of truth for "does this id exist" (reused by update)
    - update replaces name and price only — id is never changed
    - StorageUnavailableError from the repository is returned unchanged as a Failure
    - No retries: resilience belongs to the storage adapter

Design Decisions:
    - Input arrives already validated (build_product at the boundary), so create
      performs no checks of its own
    - delete checks exists_by_id first: delete_by_id is not guaranteed idempotent
"""

import logging
from functools import wraps

from catalog.core.domain_types import ProductId
from catalog.core.errors import ResourceNotFoundError, StorageUnavailableError
from catalog.core.product import Product
from catalog.core.repository_protocols import ProductRepository
from catalog.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)

PRODUCT_RESOURCE = "Product"


def _storage_failures_as_results(operation):
    """Turn a StorageUnavailableError escaping the repository into a Failure."""

    @wraps(operation)
    async def wrapper(*args, **kwargs):
        try:
            return await operation(*args, **kwargs)
        except StorageUnavailableError as e:
            logger.debug(
                f"Storage unavailable during {operation.__name__}",
                extra=e.log_extra(),
            )
            return Failure(e)

    return wrapper


class ProductService:
    """CRUD orchestration over a ProductRepository."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    @_storage_failures_as_results
    async def create(self, product: Product) -> Result[Product]:
        """Persist a validated product; the repository assigns its id."""
        saved = await self.repository.save(product)
        logger.info(
            f"Product created: {saved.name}", extra={"product_id": saved.id},
        )
        return Success(saved)

    @_storage_failures_as_results
    async def get_by_id(self, product_id: ProductId) -> Result[Product]:
        product = await self.repository.find_by_id(product_id)
        if product is None:
            logger.warning(
                "Product not found", extra={"product_id": product_id},
            )
            return Failure(ResourceNotFoundError(PRODUCT_RESOURCE, product_id))
        return Success(product)

    @_storage_failures_as_results
    async def list_all(self) -> Result[list[Product]]:
        return Success(await self.repository.find_all())

    @_storage_failures_as_results
    async def update(
        self, product_id: ProductId, details: Product,
    ) -> Result[Product]:
        """Overwrite name and price of an existing product (full replacement)."""
        found = await self.get_by_id(product_id)
        if isinstance(found, Failure):
            return found

        updated = found.value.with_details(details.name, details.price_in_cents)
        saved = await self.repository.save(updated)
        logger.info(
            f"Product updated: {saved.name}", extra={"product_id": saved.id},
        )
        return Success(saved)

    @_storage_failures_as_results
    async def delete(self, product_id: ProductId) -> Result[None]:
        if not await self.repository.exists_by_id(product_id):
            logger.warning(
                "Delete of missing product", extra={"product_id": product_id},
            )
            return Failure(ResourceNotFoundError(PRODUCT_RESOURCE, product_id))

        await self.repository.delete_by_id(product_id)
        logger.info("Product deleted", extra={"product_id": product_id})
        return Success(None)
