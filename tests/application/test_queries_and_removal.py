"""Integration tests for the List, Show and Remove use cases."""

from decimal import Decimal

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import CreateProductRequest
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.results import NotFound, Success
from catalog.application.show_product import ShowProductHandler
from tests.fakes import FakeProductRepository


def _seeded(count: int) -> FakeProductRepository:
    repo = FakeProductRepository()
    add = AddProductHandler(repo)
    for i in range(count):
        add.handle(
            CreateProductRequest(name=f"Item {i}", description=None, price=Decimal("9.99"), stock=i)
        )
    return repo


class TestListProducts:

    def test_empty_store_is_success(self):
        result = ListProductsHandler(FakeProductRepository()).handle()
        assert result == Success([])

    def test_lists_every_product(self):
        result = ListProductsHandler(_seeded(3)).handle()
        assert [v.name for v in result.value] == ["Item 0", "Item 1", "Item 2"]

    def test_reflects_deletion(self):
        repo = _seeded(4)
        RemoveProductHandler(repo).handle(2)
        views = ListProductsHandler(repo).handle().value
        assert len(views) == 3
        assert 2 not in [v.id for v in views]


class TestShowProduct:

    def test_found(self):
        result = ShowProductHandler(_seeded(2)).handle(2)
        assert isinstance(result, Success)
        assert result.value.name == "Item 1"

    def test_missing(self):
        assert ShowProductHandler(_seeded(2)).handle(999) == NotFound(999)


class TestRemoveProduct:

    def test_removes(self):
        repo = _seeded(1)
        assert RemoveProductHandler(repo).handle(1) == Success(None)
        assert repo.get_by_id(1) is None

    def test_missing_is_not_found(self):
        assert RemoveProductHandler(_seeded(1)).handle(999) == NotFound(999)

    def test_second_delete_is_not_found(self):
        repo = _seeded(1)
        handler = RemoveProductHandler(repo)
        handler.handle(1)
        assert handler.handle(1) == NotFound(1)
