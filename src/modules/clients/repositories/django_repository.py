"""Django ORM implementation of the Client repository.

Satisfies ``IClientRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None`` /
``False`` instead of raising; the Service Layer decides how to translate
a missing or stale entity into a domain exception.

Updates are optimistic: ``UPDATE ... WHERE id = ? AND version = ?`` with
``version`` incremented in the same statement.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import structlog
from django.db import transaction
from django.db.models import F

from modules.clients.filters import ClientFilter
from modules.clients.models import Client
from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientDjangoRepository(IClientRepository):
    """Concrete Client repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Client]:
        """Retrieve a client by primary key (``None`` when absent)."""
        return Client.objects.filter(id=id).first()

    def list(
        self, search: Optional[str] = None, offset: int = 0, limit: int = 20
    ) -> List[Client]:
        queryset = Client.objects.order_by("id")
        if search:
            queryset = ClientFilter({"search": search}, queryset=queryset).qs
        return list(queryset[offset : offset + limit])

    @transaction.atomic
    def add(self, entity: Client) -> Client:
        """Insert a new client."""
        entity.save(force_insert=True)
        logger.info("client.saved", client_id=entity.id, is_new=True)
        return entity

    @transaction.atomic
    def update(self, id: int, expected_version: int, values: Mapping[str, Any]) -> bool:
        written = Client.objects.filter(id=id, version=expected_version).update(
            version=F("version") + 1, **values
        )
        if written:
            logger.info("client.saved", client_id=id, is_new=False)
        return bool(written)

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a client. ``False`` if no row had that id."""
        deleted, _ = Client.objects.filter(id=id).delete()
        if deleted:
            logger.info("client.deleted", client_id=id)
        return bool(deleted)

    # ------------------------------------------------------------------
    # Uniqueness look-ups
    # ------------------------------------------------------------------

    @staticmethod
    def _others(exclude_id: Optional[int]):
        queryset = Client.objects.all()
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return self._others(exclude_id).filter(email=email).exists()

    def tax_document_taken(
        self, tax_document: str, exclude_id: Optional[int] = None
    ) -> bool:
        return self._others(exclude_id).filter(tax_document=tax_document).exists()

    def state_registration_taken(
        self, state_registration: str, exclude_id: Optional[int] = None
    ) -> bool:
        return (
            self._others(exclude_id)
            .filter(
                state_registration=state_registration,
                state_registration_exempt=False,
            )
            .exists()
        )
