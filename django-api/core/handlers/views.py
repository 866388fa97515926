"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see core.handlers.errors)
- Never contain business logic
- Never expose internal error details

Each app subclasses these with its service name and serializer.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_services
from core.handlers.cache import cached_list
from core.services.entity_service import EntityService


class ServiceMixin:
    service_name: str
    serializer_class: type

    @property
    def service(self) -> EntityService:
        return getattr(get_services(), self.service_name)


class EntityListView(ServiceMixin, APIView):
    """GET the whole collection, POST a new record."""

    def get(self, request: Request) -> Response:
        return Response(cached_list(self.service, self.serializer_class))

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        entity_id = self.service.add(serializer.validated_data)
        created = self.service.get(entity_id)
        return Response(self.serializer_class(created).data, status=status.HTTP_201_CREATED)


class EntityDetailView(ServiceMixin, APIView):
    """GET, PUT/PATCH or DELETE one record."""

    def get(self, request: Request, entity_id: str) -> Response:
        return Response(self.serializer_class(self.service.get(entity_id)).data)

    def _update(self, request: Request, entity_id: str, partial: bool) -> Response:
        current = self.service.get(entity_id)
        serializer = self.serializer_class(current, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        # Serializer defaults apply to creation only; a stored value the
        # client did not send is kept.
        changes = {
            name: value for name, value in serializer.validated_data.items() if name in request.data
        }
        self.service.update(current.id, changes)
        return Response(self.serializer_class(self.service.get(current.id)).data)

    def put(self, request: Request, entity_id: str) -> Response:
        return self._update(request, entity_id, partial=False)

    def patch(self, request: Request, entity_id: str) -> Response:
        return self._update(request, entity_id, partial=True)

    def delete(self, request: Request, entity_id: str) -> Response:
        self.service.delete(entity_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
