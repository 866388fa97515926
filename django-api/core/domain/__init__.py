from core.domain.errors import DomainError, EntityNotFoundError, ErrorCode, InvalidEntityIdError
from core.domain.value_objects import EntityId, Money, as_money

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "ErrorCode",
    "InvalidEntityIdError",
    "EntityId",
    "Money",
    "as_money",
]
