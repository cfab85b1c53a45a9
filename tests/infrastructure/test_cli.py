"""Tests for the catalog command line."""

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli import main as cli_main
from catalog.infrastructure.cli import product_commands
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


@pytest.fixture
def repo(monkeypatch) -> InMemoryProductRepository:
    repo = InMemoryProductRepository()
    monkeypatch.setattr(product_commands, "_repo", lambda: repo)
    monkeypatch.setattr(cli_main, "configure_logging", lambda level: None)
    return repo


def _run(*args: str):
    return CliRunner().invoke(cli_main.cli, list(args))


class TestProductCommands:

    def test_list_empty(self, repo):
        result = _run("product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_add_then_list(self, repo):
        result = _run("product", "add", "--name", "Laptop", "--price", "1299.99", "--stock", "15")
        assert result.exit_code == 0
        assert "Product #1 'Laptop' added" in result.output

        result = _run("product", "list")
        assert "Laptop" in result.output

    def test_add_invalid(self, repo):
        result = _run("product", "add", "--name", "Laptop", "--price", "-1", "--stock", "-2")
        assert result.exit_code != 0
        assert "price: Price must be greater than 0" in result.output
        assert "stock: Stock cannot be negative" in result.output
        assert repo.list_all() == []

    def test_update_keeps_other_fields(self, repo):
        _run("product", "add", "--name", "Laptop", "--price", "1299.99", "--stock", "15")
        result = _run("product", "update", "--id", "1", "--stock", "0")
        assert result.exit_code == 0

        product = repo.get_by_id(1)
        assert product.stock == 0
        assert product.name == "Laptop"

    def test_show_missing(self, repo):
        result = _run("product", "show", "--id", "999")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_delete(self, repo):
        _run("product", "add", "--name", "Laptop", "--price", "1", "--stock", "1")
        assert _run("product", "delete", "--id", "1").exit_code == 0
        assert _run("product", "delete", "--id", "1").exit_code != 0


class TestStoreBackendNotice:

    def test_memory_backend_warns_that_changes_are_not_kept(self, monkeypatch):
        monkeypatch.setattr(cli_main, "configure_logging", lambda level: None)
        monkeypatch.setattr(
            product_commands,
            "get_settings",
            lambda: Settings(_env_file=None, store_backend="memory", seed_sample_data=False),
        )
        result = _run("product", "list")
        assert result.exit_code == 0
        assert "STORE_BACKEND=sql" in result.output

    def test_help_mentions_persistence(self, monkeypatch):
        monkeypatch.setattr(cli_main, "configure_logging", lambda level: None)
        result = _run("product", "--help")
        assert "STORE_BACKEND=sql" in result.output
