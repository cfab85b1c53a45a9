"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Maybe, to_price


# ── Maybe ────────────────────────────────────────────────────────────────────


class TestMaybe:

    def test_absent_by_default(self):
        assert not Maybe().present

    def test_of_is_present(self):
        m = Maybe.of(5)
        assert m.present
        assert m.value == 5

    def test_of_zero_is_still_present(self):
        assert Maybe.of(0).present

    def test_of_empty_string_is_still_present(self):
        assert Maybe.of("").present

    def test_from_optional_none_is_absent(self):
        assert not Maybe.from_optional(None).present

    def test_from_optional_value_is_present(self):
        assert Maybe.from_optional("x") == Maybe.of("x")

    def test_or_else_absent_returns_default(self):
        assert Maybe.absent().or_else("keep") == "keep"

    def test_or_else_present_returns_value(self):
        assert Maybe.of(0).or_else(15) == 0


# ── to_price ─────────────────────────────────────────────────────────────────


class TestToPrice:

    def test_from_string(self):
        assert to_price("25.99") == Decimal("25.99")

    def test_from_float_keeps_cents(self):
        assert to_price(1299.99) == Decimal("1299.99")

    def test_rounds_to_cents(self):
        assert to_price(Decimal("10.005")) == Decimal("10.01")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            to_price("abc")
