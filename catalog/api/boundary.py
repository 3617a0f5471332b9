"""Request Boundary — decodes requests into entities and results into responses.

Invariants:
    - to_response() is the ONLY place a Failure becomes an HTTP status code
    - decode_product() always runs core validation before anything reaches the service
    - Error bodies come from CatalogError.to_response(); status echoed as a string

Design Decisions:
    - Explicit (de)serialization functions over response_model magic: the route
      decides the status code from the Result, not from a decorator
"""

import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse

from catalog.core.product import Product
from catalog.core.result import Failure, Result
from catalog.core.validate_product import build_product
from catalog.schemas.product import ProductRead, ProductWrite

logger = logging.getLogger(__name__)


def decode_product(body: ProductWrite) -> Result[Product]:
    """Build a validated, unsaved Product from a request body."""
    return build_product(body.name, body.price_in_cents)


def serialize_product(product: Product) -> dict:
    return ProductRead(
        id=product.id,
        name=product.name,
        price_in_cents=product.price_in_cents,
    ).model_dump(by_alias=True)


def _serialize(value) -> object:
    if isinstance(value, Product):
        return serialize_product(value)
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    return value


def failure_response(failure: Failure) -> JSONResponse:
    error = failure.error
    logger.info(
        f"{error.code}: {error.message}",
        extra={**error.log_extra(), "status_code": error.http_status},
    )
    return JSONResponse(
        status_code=error.http_status, content=error.to_response(),
    )


def to_response(
    result: Result, success_status: int = status.HTTP_200_OK,
) -> Response:
    """Map a service Result onto an HTTP response."""
    if isinstance(result, Failure):
        return failure_response(result)
    if success_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(
        status_code=success_status, content=_serialize(result.value),
    )
