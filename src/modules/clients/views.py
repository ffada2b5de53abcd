"""Client API views.

Exposes the ``ClientService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes. The view never swallows generic exceptions; those
reach ``modules.core.exceptions.exception_handler`` and become a 500.
"""

from __future__ import annotations

from typing import Iterable

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.clients.dtos import ClientListQuery, ClientPayloadDTO
from modules.clients.exceptions import (
    ClientConcurrencyConflict,
    ClientNotFound,
    ClientValidationError,
)
from modules.clients.models import Client
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.serializers import ClientSerializer
from modules.clients.services import ClientService
from modules.clients.validators import RuleViolation, violations_from
from modules.core.exceptions import error_body


def _validation_failed(violations: Iterable[RuleViolation]) -> Response:
    violations = list(violations)
    return Response(
        error_body(
            "; ".join(v.message for v in violations),
            error_type="validation_error",
            errors=[v.as_error() for v in violations],
        ),
        status=status.HTTP_400_BAD_REQUEST,
    )


def _not_found(exc: ClientNotFound) -> Response:
    return Response(
        error_body(str(exc) or "Cliente não encontrado.", code="not_found"),
        status=status.HTTP_404_NOT_FOUND,
    )


class ClientViewSet(GenericViewSet):
    """ViewSet for Client CRUD operations.

    Uses ``ClientService`` with ``ClientDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    # At most 18 digits, so every routed id fits a signed 64-bit key.
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ClientService(repository=ClientDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="Página (1..n)."),
            OpenApiParameter(
                "search",
                OpenApiTypes.STR,
                description="Trecho de nome, email, CPF/CNPJ ou inscrição estadual.",
            ),
        ],
        responses=ClientSerializer(many=True),
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/clients?page={n}&search={term}"""
        try:
            query = ClientListQuery(
                page=request.query_params.get("page", 1),
                search=request.query_params.get("search"),
            )
        except PydanticValidationError as exc:
            return _validation_failed(violations_from(exc))

        clients = self._service.list_clients(query)
        return Response(ClientSerializer(clients, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/clients/{pk}"""
        try:
            client = self._service.get_client(int(pk))
        except ClientNotFound as exc:
            return _not_found(exc)
        return Response(ClientSerializer(client).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=OpenApiTypes.OBJECT, responses={201: ClientSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/clients"""
        try:
            dto = ClientPayloadDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_failed(violations_from(exc))

        try:
            client = self._service.create_client(dto)
        except ClientValidationError as exc:
            return _validation_failed(exc.violations)

        out = ClientSerializer(client)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OpenApiTypes.OBJECT, responses={204: None})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/clients/{pk}"""
        try:
            dto = ClientPayloadDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_failed(violations_from(exc))

        try:
            self._service.update_client(int(pk), dto)
        except ClientValidationError as exc:
            return _validation_failed(exc.violations)
        except ClientNotFound as exc:
            return _not_found(exc)
        except ClientConcurrencyConflict as exc:
            return Response(
                error_body(str(exc), code="conflict"),
                status=status.HTTP_409_CONFLICT,
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/clients/{pk}"""
        try:
            self._service.delete_client(int(pk))
        except ClientNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
