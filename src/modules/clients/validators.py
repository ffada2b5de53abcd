"""Client validation layer.

``ClientValidator`` applies the rules that need more than one field or a
look at the store:

- the password is mandatory on creation and must match its confirmation;
- the birth date is mandatory for individuals;
- email, CPF/CNPJ and (non-exempt) state registration must not collide
  with another client, ignoring the client being updated.

Format rules are enforced earlier by ``ClientPayloadDTO``; pydantic errors
are converted to the same ``RuleViolation`` shape by ``violations_from``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from modules.clients.dtos import PersonTypeEnum

if TYPE_CHECKING:
    from modules.clients.dtos import ClientPayloadDTO
    from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RuleViolation:
    """One broken rule. ``field`` is the camelCase API attribute, if any."""

    field: Optional[str]
    code: str
    message: str

    def as_error(self) -> dict[str, Any]:
        return {"code": self.code, "detail": self.message, "attr": self.field}


def violations_from(exc: PydanticValidationError) -> List[RuleViolation]:
    """Translate a pydantic ``ValidationError`` into rule violations."""
    violations: List[RuleViolation] = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or None
        ctx = error.get("ctx") or {}
        message = str(ctx["error"]) if "error" in ctx else error["msg"]
        violations.append(RuleViolation(field=loc, code=error["type"], message=message))
    return violations


class ClientValidator:
    """Business-rule validation for client writes.

    Receives an ``IClientRepository`` to run the uniqueness look-ups.
    """

    def __init__(self, repository: IClientRepository) -> None:
        self._repo = repository

    def validate(
        self, dto: ClientPayloadDTO, client_id: Optional[int] = None
    ) -> List[RuleViolation]:
        """Return every violated rule; an empty list means accepted.

        ``client_id`` is the id of the record being updated, or ``None``
        on creation.
        """
        violations: List[RuleViolation] = []
        violations.extend(self._check_password(dto, creating=client_id is None))
        violations.extend(self._check_birth_date(dto))
        violations.extend(self._check_uniqueness(dto, client_id))

        if violations:
            logger.info(
                "client.validation_failed",
                client_id=client_id,
                rules=[v.code for v in violations],
            )
        return violations

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @staticmethod
    def _check_password(dto: ClientPayloadDTO, creating: bool) -> List[RuleViolation]:
        if dto.password is None:
            if creating:
                return [
                    RuleViolation(
                        "password",
                        "password_required",
                        "A senha é obrigatória e deve ter entre 8 e 15 caracteres.",
                    )
                ]
            return []
        if dto.password != dto.password_confirmation:
            return [
                RuleViolation(
                    "passwordConfirmation",
                    "password_mismatch",
                    "As senhas não conferem.",
                )
            ]
        return []

    @staticmethod
    def _check_birth_date(dto: ClientPayloadDTO) -> List[RuleViolation]:
        if dto.person_type == PersonTypeEnum.INDIVIDUAL and dto.birth_date is None:
            return [
                RuleViolation(
                    "birthDate",
                    "birth_date_required",
                    "Data de nascimento é obrigatória para pessoa física.",
                )
            ]
        return []

    def _check_uniqueness(
        self, dto: ClientPayloadDTO, client_id: Optional[int]
    ) -> List[RuleViolation]:
        violations: List[RuleViolation] = []

        if self._repo.email_taken(dto.email, exclude_id=client_id):
            logger.warning("client.duplicate_email", client_id=client_id)
            violations.append(
                RuleViolation(
                    "email",
                    "duplicate_email",
                    "Este Email já existe na nossa base de dados.",
                )
            )

        if self._repo.tax_document_taken(dto.tax_document, exclude_id=client_id):
            logger.warning("client.duplicate_tax_document", client_id=client_id)
            violations.append(
                RuleViolation(
                    "taxDocument",
                    "duplicate_tax_document",
                    "Este CPF/CNPJ já existe na nossa base de dados.",
                )
            )

        if (
            dto.state_registration
            and not dto.state_registration_exempt
            and self._repo.state_registration_taken(
                dto.state_registration, exclude_id=client_id
            )
        ):
            logger.warning("client.duplicate_state_registration", client_id=client_id)
            violations.append(
                RuleViolation(
                    "stateRegistration",
                    "duplicate_state_registration",
                    "Esta Inscrição Estadual já existe na nossa base de dados.",
                )
            )

        return violations
