"""Client service layer (Use Cases).

Orchestrates business logic for the Client aggregate, delegating
persistence to the injected ``IClientRepository`` and rule checks to
``ClientValidator``.

Rules enforced here:
- Nothing is persisted when validation reports a violation.
- The plaintext password is hashed before persistence and then dropped.
- Companies carry no birth date or gender; exempt clients carry no state
  registration.
- Updates are explicit read-modify-write guarded by the record version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

import structlog
from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from modules.clients.dtos import PersonTypeEnum
from modules.clients.exceptions import (
    ClientConcurrencyConflict,
    ClientNotFound,
    ClientValidationError,
)
from modules.clients.models import Client
from modules.clients.validators import ClientValidator, RuleViolation

if TYPE_CHECKING:
    from modules.clients.dtos import ClientListQuery, ClientPayloadDTO
    from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service for Client use-cases.

    Receives an ``IClientRepository`` via constructor injection (DIP).
    ``hasher`` turns a plaintext password into the stored hash; defaults to
    Django's configured hasher (bcrypt).
    """

    def __init__(
        self,
        repository: IClientRepository,
        validator: Optional[ClientValidator] = None,
        hasher: Callable[[str], str] = make_password,
        page_size: Optional[int] = None,
    ) -> None:
        self._repo = repository
        self._validator = validator or ClientValidator(repository)
        self._hash = hasher
        self._page_size = page_size or settings.CLIENTS_PAGE_SIZE

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_clients(self, query: ClientListQuery) -> List[Client]:
        """Return one page of clients, ascending by id.

        There is no total count: a page past the end is simply empty.
        """
        offset = (query.page - 1) * self._page_size
        return self._repo.list(search=query.search, offset=offset, limit=self._page_size)

    def get_client(self, id: int) -> Client:
        """Retrieve a single client by ID.

        Raises:
            ClientNotFound: if the client does not exist.
        """
        client = self._repo.get_by_id(id)
        if not client:
            raise ClientNotFound(f"Cliente {id} não encontrado.")
        return client

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_client(self, dto: ClientPayloadDTO) -> Client:
        """Validate, hash the password and persist a new client.

        Raises:
            ClientValidationError: if any rule is violated.
        """
        self._ensure_valid(dto)

        client = Client(**self._field_values(dto))
        client.password_hash = self._hash(dto.password)

        try:
            client = self._repo.add(client)
        except IntegrityError as exc:
            raise self._duplicate_error() from exc

        logger.info(
            "client.created",
            client_id=client.id,
            person_type=client.person_type,
        )
        return client

    @transaction.atomic
    def update_client(self, id: int, dto: ClientPayloadDTO) -> None:
        """Overwrite every mutable field of an existing client.

        The password hash only changes when a new password is supplied.

        Raises:
            ClientValidationError: body id differs from ``id`` or a rule fails.
            ClientNotFound: if the client does not exist.
            ClientConcurrencyConflict: if the client changed since it was read.
        """
        log = logger.bind(client_id=id)

        if dto.id != id:
            log.warning("client.id_mismatch", body_id=dto.id)
            raise ClientValidationError(
                [
                    RuleViolation(
                        "id",
                        "id_mismatch",
                        "O id informado no corpo não corresponde ao id da URL.",
                    )
                ]
            )

        current = self.get_client(id)
        self._ensure_valid(dto, client_id=id)

        values = self._field_values(dto)
        if dto.password is not None:
            values["password_hash"] = self._hash(dto.password)

        try:
            written = self._repo.update(id, current.version, values)
        except IntegrityError as exc:
            raise self._duplicate_error() from exc

        if not written:
            if self._repo.get_by_id(id) is None:
                raise ClientNotFound(f"Cliente {id} não encontrado.")
            log.warning("client.concurrent_update", expected_version=current.version)
            raise ClientConcurrencyConflict(
                "Erro de simultaneidade. O cliente pode ter sido modificado "
                "por outro usuário."
            )

        log.info("client.updated", password_changed=dto.password is not None)

    @transaction.atomic
    def delete_client(self, id: int) -> None:
        """Permanently remove a client.

        Raises:
            ClientNotFound: if the client does not exist.
        """
        self.get_client(id)
        if not self._repo.delete(id):
            raise ClientNotFound(f"Cliente {id} não encontrado.")
        logger.info("client.deleted", client_id=id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_valid(
        self, dto: ClientPayloadDTO, client_id: Optional[int] = None
    ) -> None:
        violations = self._validator.validate(dto, client_id=client_id)
        if violations:
            raise ClientValidationError(violations)

    @staticmethod
    def _field_values(dto: ClientPayloadDTO) -> Dict[str, Any]:
        """Map the payload onto model fields, dropping values that do not
        apply to the person type or exemption flag."""
        individual = dto.person_type == PersonTypeEnum.INDIVIDUAL
        return {
            "name": dto.name,
            "tax_document": dto.tax_document,
            "email": dto.email,
            "person_type": dto.person_type.value,
            "phone": dto.phone,
            "state_registration": (
                None if dto.state_registration_exempt else dto.state_registration
            ),
            "state_registration_exempt": dto.state_registration_exempt,
            "gender": dto.gender.value if individual and dto.gender else None,
            "birth_date": dto.birth_date if individual else None,
            "status": dto.status.value,
        }

    @staticmethod
    def _duplicate_error() -> ClientValidationError:
        logger.warning("client.unique_constraint_race")
        return ClientValidationError(
            [
                RuleViolation(
                    None,
                    "duplicate",
                    "Email, CPF/CNPJ ou Inscrição Estadual já cadastrado.",
                )
            ]
        )
