from core.stores.django_store import DataclassMapper, DjangoRepository
from memberships import models
from memberships.domain import Membership


def membership_store(using: str = "default") -> DjangoRepository[Membership]:
    return DjangoRepository(models.Membership, DataclassMapper(Membership), using=using)
