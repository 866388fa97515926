"""Serializer fields for domain value objects."""

from rest_framework import serializers

from core.domain import Money


class MoneyField(serializers.DecimalField):
    """Decimal on the wire, ``Money`` in the domain."""

    default_error_messages = {"negative": "Amount cannot be negative."}

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("max_digits", 14)
        kwargs.setdefault("decimal_places", 2)
        super().__init__(**kwargs)

    def to_representation(self, value):
        if isinstance(value, Money):
            value = value.amount
        return super().to_representation(value)

    def to_internal_value(self, data) -> Money:
        amount = super().to_internal_value(data)
        if amount < 0:
            self.fail("negative")
        return Money(amount)


class EntityIdField(serializers.CharField):
    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("read_only", True)
        super().__init__(**kwargs)

    def to_representation(self, value) -> str:
        return str(value)
