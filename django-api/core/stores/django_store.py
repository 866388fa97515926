"""Django ORM implementation of the generic Repository."""

import dataclasses
from contextlib import AbstractContextManager
from typing import Any, Generic, TypeVar

from django.db import models, transaction
from django.db.models import F

from core.domain import EntityId, Money
from core.stores.interfaces import Repository

T = TypeVar("T")


class DataclassMapper(Generic[T]):
    """Converts between ORM rows and frozen domain dataclasses.

    Field names must match on both sides. ``EntityId`` and ``Money`` are
    unwrapped to UUID and Decimal; JSON lists come back as tuples.
    """

    def __init__(self, entity_type: type[T], money_fields: tuple[str, ...] = ()) -> None:
        self.entity_type = entity_type
        self.money_fields = set(money_fields)
        self.field_names = [f.name for f in dataclasses.fields(entity_type)]

    def to_domain(self, instance: models.Model) -> T:
        values: dict[str, Any] = {}
        for name in self.field_names:
            value = getattr(instance, name)
            if name == "id":
                value = EntityId(value=value)
            elif name in self.money_fields and value is not None:
                value = Money(value)
            elif isinstance(value, list):
                value = tuple(value)
            values[name] = value
        return self.entity_type(**values)

    def to_fields(self, entity: T) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in self.field_names:
            value = getattr(entity, name)
            if isinstance(value, EntityId):
                value = value.value
            elif isinstance(value, Money):
                value = value.amount
            elif isinstance(value, tuple):
                value = list(value)
            fields[name] = value
        return fields


class DjangoRepository(Repository[T]):
    """Database-backed store for one ORM model on one database alias."""

    def __init__(
        self,
        model: type[models.Model],
        mapper: DataclassMapper[T],
        ordering: tuple[str, ...] = ("-created_at",),
        using: str = "default",
    ) -> None:
        self._model = model
        self._mapper = mapper
        self._ordering = ordering
        self._using = using

    def _objects(self) -> models.QuerySet:
        return self._model.objects.using(self._using)

    def list(self) -> list[T]:
        return [self._mapper.to_domain(row) for row in self._objects().order_by(*self._ordering)]

    def get(self, entity_id: EntityId) -> T | None:
        row = self._objects().filter(pk=entity_id.value).first()
        return self._mapper.to_domain(row) if row is not None else None

    def add(self, entity: T) -> None:
        self._model(**self._mapper.to_fields(entity)).save(using=self._using, force_insert=True)

    def save(self, entity: T) -> bool:
        fields = self._mapper.to_fields(entity)
        row = self._objects().filter(pk=fields.pop("id")).first()
        if row is None:
            return False
        for name, value in fields.items():
            setattr(row, name, value)
        row.save(using=self._using)
        return True

    def delete(self, entity_id: EntityId) -> bool:
        deleted, _ = self._objects().filter(pk=entity_id.value).delete()
        return deleted > 0

    def increment(self, entity_id: EntityId, field: str, delta: Any) -> bool:
        if isinstance(delta, Money):
            delta = delta.amount
        updated = self._objects().filter(pk=entity_id.value).update(**{field: F(field) + delta})
        return updated > 0

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic(using=self._using)
