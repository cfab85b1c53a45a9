"""Integration tests for the UpdateProduct use case."""

from datetime import datetime, timezone
from decimal import Decimal

from catalog.application.dto import UpdateProductRequest
from catalog.application.results import NotFound, Success, ValidationFailed
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Maybe
from tests.fakes import FakeProductRepository


def _setup() -> tuple[UpdateProductHandler, FakeProductRepository]:
    repo = FakeProductRepository([
        Product(
            id=1,
            name="Laptop",
            description="High-performance laptop for developers",
            price=Decimal("1299.99"),
            stock=15,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
    ])
    return UpdateProductHandler(repo), repo


class TestUpdateProductPartial:

    def test_only_price_changes(self):
        handler, _ = _setup()
        result = handler.handle(1, UpdateProductRequest(price=Maybe.of(Decimal("999.99"))))
        assert isinstance(result, Success)
        assert result.value.name == "Laptop"
        assert result.value.price == Decimal("999.99")
        assert result.value.stock == 15

    def test_persists_merged_entity(self):
        handler, repo = _setup()
        handler.handle(1, UpdateProductRequest(stock=Maybe.of(0)))
        stored = repo.get_by_id(1)
        assert stored.stock == 0
        assert stored.name == "Laptop"
        assert stored.updated_at is not None

    def test_empty_patch_keeps_everything(self):
        handler, _ = _setup()
        result = handler.handle(1, UpdateProductRequest())
        assert result.value.name == "Laptop"
        assert result.value.description == "High-performance laptop for developers"


class TestUpdateProductFailures:

    def test_missing_id_is_not_found(self):
        handler, repo = _setup()
        result = handler.handle(999, UpdateProductRequest(price=Maybe.of(Decimal("50"))))
        assert result == NotFound(999)
        assert repo.writes == []

    def test_validation_runs_before_lookup(self):
        handler, repo = _setup()
        result = handler.handle(999, UpdateProductRequest(price=Maybe.of(Decimal("-1"))))
        assert isinstance(result, ValidationFailed)
        assert "price" in result.errors
        assert repo.calls == []

    def test_invalid_patch_leaves_product_unchanged(self):
        handler, repo = _setup()
        handler.handle(1, UpdateProductRequest(name=Maybe.of("x" * 101), stock=Maybe.of(3)))
        assert repo.get_by_id(1).stock == 15
        assert repo.writes == []

    def test_vanished_between_lookup_and_write(self):
        handler, repo = _setup()

        def _gone(product_id, product):
            repo.calls.append("update")
            return None

        repo.update = _gone
        result = handler.handle(1, UpdateProductRequest(stock=Maybe.of(1)))
        assert result == NotFound(1)


class TestUpdateProductNumericLimits:

    def test_out_of_range_price_is_validation_failure(self):
        handler, repo = _setup()
        result = handler.handle(1, UpdateProductRequest(price=Maybe.of(Decimal("1E+30"))))
        assert isinstance(result, ValidationFailed)
        assert repo.get_by_id(1).price == Decimal("1299.99")
