"""Product Service — orchestration over a fake repository.

Invariants:
    - create persists and returns the product with an id
    - get_by_id of an unknown id is a not-found Failure, never an exception
    - update replaces name and price, keeps id, and is visible to get_by_id
    - delete checks existence first and never calls delete_by_id for unknown ids
    - storage outages come back as Failure(StorageUnavailableError), no retries
"""

import pytest

from catalog.core.errors import ResourceNotFoundError, StorageUnavailableError
from catalog.core.product import Product
from catalog.core.result import Failure, Success
from catalog.core.validate_product import build_product
from catalog.services.product_service import ProductService

from tests.services.fake_repository import FakeProductRepository


@pytest.fixture
def service(fake_repository):
    return ProductService(fake_repository)


async def _create(service, name="Notebook", price=250000) -> Product:
    result = await service.create(build_product(name, price).value)
    assert isinstance(result, Success)
    return result.value


# ─── create / get ────────────────────────────────────────────────

async def test_create_assigns_id(service):
    product = await _create(service)
    assert product.id == 1
    assert product.name == "Notebook"
    assert product.price_in_cents == 250000


async def test_create_then_get_returns_equal_product(service):
    created = await _create(service, "Mouse", 4990)
    result = await service.get_by_id(created.id)
    assert isinstance(result, Success)
    assert (result.value.name, result.value.price_in_cents) == ("Mouse", 4990)


async def test_get_unknown_id_is_not_found(service):
    result = await service.get_by_id(999999)
    assert isinstance(result, Failure)
    assert isinstance(result.error, ResourceNotFoundError)
    assert result.error.message == "Product not found"


async def test_list_returns_every_product(service):
    await _create(service, "A", 1)
    await _create(service, "B", 2)
    result = await service.list_all()
    assert isinstance(result, Success)
    assert sorted(p.name for p in result.value) == ["A", "B"]


async def test_list_of_empty_store_is_empty(service):
    result = await service.list_all()
    assert result == Success([])


# ─── update ──────────────────────────────────────────────────────

async def test_update_replaces_name_and_price_keeps_id(service):
    created = await _create(service)
    details = build_product("Laptop", 300000).value

    result = await service.update(created.id, details)

    assert isinstance(result, Success)
    assert result.value == Product(name="Laptop", price_in_cents=300000, id=created.id)
    fetched = await service.get_by_id(created.id)
    assert fetched.value == result.value


async def test_update_ignores_id_in_details(service):
    created = await _create(service)
    details = Product(name="Laptop", price_in_cents=1, id=42)

    result = await service.update(created.id, details)

    assert result.value.id == created.id
    assert 42 not in service.repository.rows


async def test_update_unknown_id_is_not_found_and_saves_nothing(service, fake_repository):
    result = await service.update(5, build_product("X", 1).value)
    assert isinstance(result.error, ResourceNotFoundError)
    assert "save" not in fake_repository.calls


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_then_get_is_not_found(service):
    created = await _create(service)
    assert await service.delete(created.id) == Success(None)
    result = await service.get_by_id(created.id)
    assert isinstance(result.error, ResourceNotFoundError)


async def test_delete_unknown_id_is_not_found_without_deleting(service, fake_repository):
    result = await service.delete(77)
    assert isinstance(result, Failure)
    assert isinstance(result.error, ResourceNotFoundError)
    assert fake_repository.calls == ["exists_by_id"]


# ─── storage failures ────────────────────────────────────────────

@pytest.mark.parametrize(
    "method, call",
    [
        ("save", lambda s: s.create(Product(name="P", price_in_cents=1))),
        ("find_by_id", lambda s: s.get_by_id(1)),
        ("find_all", lambda s: s.list_all()),
        ("find_by_id", lambda s: s.update(1, Product(name="P", price_in_cents=1))),
        ("exists_by_id", lambda s: s.delete(1)),
    ],
)
async def test_storage_outage_is_returned_as_failure(method, call):
    repository = FakeProductRepository(fail_on={method})
    result = await call(ProductService(repository))
    assert isinstance(result, Failure)
    assert isinstance(result.error, StorageUnavailableError)
    assert result.error.operation == method
    assert repository.calls.count(method) == 1


async def test_outage_during_update_save_is_failure():
    repository = FakeProductRepository()
    service = ProductService(repository)
    created = await _create(service)
    repository.fail_on = {"save"}

    result = await service.update(created.id, Product(name="New", price_in_cents=2))

    assert isinstance(result.error, StorageUnavailableError)
    assert repository.rows[created.id].name == "Notebook"
