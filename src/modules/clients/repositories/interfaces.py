"""Client repository interface.

Extends ``IRepository[Client]`` with the paginated listing and the
look-ups required by the uniqueness rules (email, CPF/CNPJ, state
registration).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.clients.models import Client


class IClientRepository(IRepository["Client"]):
    """Repository contract for the Client aggregate."""

    @abstractmethod
    def list(
        self, search: Optional[str] = None, offset: int = 0, limit: int = 20
    ) -> List[Client]:
        """List clients by ascending id, optionally filtered by ``search``."""

    @abstractmethod
    def update(self, id: int, expected_version: int, values: Mapping[str, Any]) -> bool:
        """Write ``values`` only if the stored version still equals
        ``expected_version``.  Returns ``False`` when no row was written."""

    @abstractmethod
    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another client already uses ``email``."""

    @abstractmethod
    def tax_document_taken(
        self, tax_document: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Whether another client already uses the CPF/CNPJ."""

    @abstractmethod
    def state_registration_taken(
        self, state_registration: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Whether a non-exempt client already uses the state registration."""
