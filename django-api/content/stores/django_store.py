"""Django ORM stores for published content."""

from core.stores.django_store import DataclassMapper, DjangoRepository
from content import models
from content.domain import Leader, NewsItem, Resource


def news_store(using: str = "default") -> DjangoRepository[NewsItem]:
    return DjangoRepository(models.NewsItem, DataclassMapper(NewsItem), using=using)


def leader_store(using: str = "default") -> DjangoRepository[Leader]:
    return DjangoRepository(
        models.Leader, DataclassMapper(Leader), ordering=("created_at",), using=using
    )


def resource_store(using: str = "default") -> DjangoRepository[Resource]:
    return DjangoRepository(models.Resource, DataclassMapper(Resource), using=using)
