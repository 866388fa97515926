"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from core.domain import EntityId, EntityNotFoundError, ErrorCode, InvalidEntityIdError, Money, as_money


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == Decimal("0")

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-1"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("1500"))) == "1500.00"

    def test_money_addition(self):
        assert Money(Decimal("1.25")) + Money(Decimal("2.75")) == Money(Decimal("4.00"))

    def test_as_money_coerces_numbers_and_keeps_money(self):
        money = Money(Decimal("5"))
        assert as_money(money) is money
        assert as_money(100) == Money(Decimal("100"))
        assert as_money("99.99") == Money(Decimal("99.99"))


class TestEntityId:
    """Tests for EntityId value object."""

    def test_from_string_valid_uuid(self):
        value = "9b2d4f1e-8c3a-4a57-9a0e-2f1b6c7d8e9f"
        entity_id = EntityId.from_string(value)
        assert entity_id.value == UUID(value)
        assert str(entity_id) == value

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EntityId.from_string("not-a-uuid")

    def test_new_ids_are_unique_v4(self):
        first, second = EntityId.new(), EntityId.new()
        assert first != second
        assert first.value.version == 4


class TestDomainErrors:
    def test_not_found_carries_code_and_safe_message(self):
        error = EntityNotFoundError("events", "abc")
        assert error.code is ErrorCode.ENTITY_NOT_FOUND
        assert error.message == "Events record not found"
        assert error.entity_id == "abc"
        assert str(error) == "ENTITY_NOT_FOUND: Events record not found"

    def test_invalid_id_error(self):
        assert InvalidEntityIdError().code is ErrorCode.INVALID_ENTITY_ID
