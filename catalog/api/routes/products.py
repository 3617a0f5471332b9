"""Product Routes — HTTP surface for the product lifecycle.

Invariants:
    - Request bodies are validated (decode_product) before the service is called
    - Routes contain no business logic: decode, delegate, translate
    - Status codes: 201 create, 200 read/list/update, 204 delete, 400/404/503 on failure

Design Decisions:
    - Validation failures short-circuit at the boundary, so an invalid update
      body for a missing id answers 400, not 404
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from catalog.api.boundary import decode_product, failure_response, to_response
from catalog.api.dependencies import get_product_service
from catalog.core.domain_types import ProductId
from catalog.core.result import Failure
from catalog.schemas.product import ProductRead, ProductWrite
from catalog.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ProductRead,
    responses={400: {"description": "Validation failed"}},
)
async def create_product(
    body: ProductWrite,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Create a product; the response carries the generated id."""
    decoded = decode_product(body)
    if isinstance(decoded, Failure):
        return failure_response(decoded)
    result = await service.create(decoded.value)
    return to_response(result, status.HTTP_201_CREATED)


@router.get("", response_model=list[ProductRead])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(await service.list_all())


@router.get(
    "/{product_id}", response_model=ProductRead,
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(await service.get_by_id(ProductId(product_id)))


@router.put(
    "/{product_id}", response_model=ProductRead,
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "Product not found"},
    },
)
async def update_product(
    product_id: int,
    body: ProductWrite,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace name and price of an existing product."""
    decoded = decode_product(body)
    if isinstance(decoded, Failure):
        return failure_response(decoded)
    result = await service.update(ProductId(product_id), decoded.value)
    return to_response(result)


@router.delete(
    "/{product_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Product not found"}},
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    result = await service.delete(ProductId(product_id))
    return to_response(result, status.HTTP_204_NO_CONTENT)
