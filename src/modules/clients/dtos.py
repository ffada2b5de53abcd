"""Client DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The HTTP payload is camelCase (``taxDocument``, ``personType``...); field
names on the Python side stay snake_case through ``alias_generator``.

- ``ClientPayloadDTO``: input for creation and full update.  Carries the
  format rules: document/phone normalisation, lengths, email syntax,
  enum values and password length.
- ``ClientListQuery``: page number + free-text search for listings.
"""

from __future__ import annotations

import re
from datetime import date
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email
from pydantic.alias_generators import to_camel

from modules.clients.constants import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PAGE_MAX,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PHONE_MAX_DIGITS,
    STATE_REGISTRATION_MAX_LENGTH,
    TAX_DOCUMENT_MAX_DIGITS,
    TAX_DOCUMENT_MIN_DIGITS,
)

# ---------------------------------------------------------------------------
# Enums (framework-agnostic, NOT Django TextChoices)
# ---------------------------------------------------------------------------


class PersonTypeEnum(StrEnum):
    INDIVIDUAL = "individual"
    COMPANY = "company"


class GenderEnum(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ClientStatusEnum(StrEnum):
    ACTIVE = "active"
    BLOCKED = "blocked"


def only_digits(value: str) -> str:
    """Strip every non-digit character."""
    return re.sub(r"\D", "", value)


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ClientPayloadDTO(BaseModel):
    """Immutable DTO for client create/update requests.

    Validates:
    - ``tax_document`` is sanitised (non-digits stripped) and has 11-14 digits.
    - ``email`` is a well-formed address, ≤150 chars, kept exactly as typed
      (``EmailStr`` would lowercase the domain; uniqueness is case-sensitive).
    - ``phone`` is sanitised and has at most 11 digits.
    - ``password`` has 8-15 characters when present.

    Blank optional fields (``""``) are read as "not supplied".  Cross-field
    and store-backed rules live in ``ClientValidator``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    tax_document: str
    email: str
    person_type: PersonTypeEnum
    phone: str
    state_registration: Optional[str] = Field(
        default=None, max_length=STATE_REGISTRATION_MAX_LENGTH
    )
    state_registration_exempt: bool = False
    gender: Optional[GenderEnum] = None
    birth_date: Optional[date] = None
    status: ClientStatusEnum = ClientStatusEnum.ACTIVE
    password: Optional[str] = Field(
        default=None,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )
    password_confirmation: Optional[str] = None

    @field_validator(
        "state_registration",
        "gender",
        "birth_date",
        "password",
        "password_confirmation",
        mode="before",
    )
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("tax_document", mode="before")
    @classmethod
    def sanitize_tax_document(cls, v: Any) -> Any:
        """Strip non-digit characters (accept formatted or raw input)."""
        if not isinstance(v, str):
            return v
        return only_digits(v)

    @field_validator("tax_document")
    @classmethod
    def check_tax_document_length(cls, v: str) -> str:
        if not TAX_DOCUMENT_MIN_DIGITS <= len(v) <= TAX_DOCUMENT_MAX_DIGITS:
            raise ValueError(
                f"CPF/CNPJ deve conter entre {TAX_DOCUMENT_MIN_DIGITS} "
                f"e {TAX_DOCUMENT_MAX_DIGITS} dígitos."
            )
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(
                f"O email deve ter no máximo {EMAIL_MAX_LENGTH} caracteres."
            )
        _, normalized = validate_email(v)
        # Rejects the "Name <addr>" form; only case may differ from the input.
        if normalized.lower() != v.lower():
            raise ValueError("Informe apenas o endereço de email.")
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def sanitize_phone(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        return only_digits(v)

    @field_validator("phone")
    @classmethod
    def check_phone_length(cls, v: str) -> str:
        if not v:
            raise ValueError("O telefone é obrigatório.")
        if len(v) > PHONE_MAX_DIGITS:
            raise ValueError(
                f"O telefone deve ter no máximo {PHONE_MAX_DIGITS} dígitos."
            )
        return v


# ---------------------------------------------------------------------------
# Query DTO
# ---------------------------------------------------------------------------


class ClientListQuery(BaseModel):
    """Pagination and filter parameters for ``GET /clients``."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1, le=PAGE_MAX)
    search: Optional[str] = None

    @field_validator("search", mode="before")
    @classmethod
    def blank_search_as_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v
