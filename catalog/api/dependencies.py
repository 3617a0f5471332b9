"""API Dependencies — explicit construction of the service graph per request.

Invariants:
    - One AsyncSession per request (get_db), one repository and service around it
    - No container: the wiring below is the whole object graph
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infrastructure.database import get_db
from catalog.infrastructure.product_repository import SqlProductRepository
from catalog.services.product_service import ProductService


async def get_product_service(
    db: AsyncSession = Depends(get_db),
) -> ProductService:
    return ProductService(SqlProductRepository(db))
