"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EntityId:
    """Unique identifier for any stored record."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Amount representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


def as_money(value: "Money | Decimal | int | float | str") -> Money:
    """Coerce a raw amount into Money, leaving Money instances untouched."""
    if isinstance(value, Money):
        return value
    return Money(Decimal(str(value)))
