"""Client model.

Business rules enforced by the schema:
- ``tax_document`` (CPF/CNPJ, digits only) is unique.
- ``email`` is unique.
- ``state_registration`` is unique among non-exempt clients only.

The plaintext password never reaches this table; only ``password_hash``.
"""

from __future__ import annotations

from django.db import models
from django.db.models import Q

from modules.clients.constants import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_DIGITS,
    STATE_REGISTRATION_MAX_LENGTH,
    TAX_DOCUMENT_MAX_DIGITS,
    ClientStatus,
    Gender,
    PersonType,
)
from modules.core.models import VersionedModel


class Client(VersionedModel):
    """A registered customer, either an individual or a company."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    tax_document = models.CharField(max_length=TAX_DOCUMENT_MAX_DIGITS, unique=True)
    email = models.EmailField(max_length=EMAIL_MAX_LENGTH, unique=True)
    person_type = models.CharField(max_length=10, choices=PersonType.choices)
    phone = models.CharField(max_length=PHONE_MAX_DIGITS)
    state_registration = models.CharField(
        max_length=STATE_REGISTRATION_MAX_LENGTH,
        null=True,
        blank=True,
        default=None,
    )
    state_registration_exempt = models.BooleanField(default=False)
    gender = models.CharField(
        max_length=6,
        choices=Gender.choices,
        null=True,
        blank=True,
        default=None,
    )
    birth_date = models.DateField(null=True, blank=True, default=None)
    status = models.CharField(
        max_length=7,
        choices=ClientStatus.choices,
        default=ClientStatus.ACTIVE,
    )
    password_hash = models.CharField(max_length=128)

    class Meta:
        db_table = "clients"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="clients_name_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["state_registration"],
                condition=Q(state_registration_exempt=False)
                & Q(state_registration__isnull=False),
                name="clients_state_registration_uniq",
            ),
        ]

    @property
    def is_individual(self) -> bool:
        return self.person_type == PersonType.INDIVIDUAL

    # Masks the document (last 4 digits only) so the repr is safe to log.
    def __str__(self) -> str:
        suffix = self.tax_document[-4:] if self.tax_document else "????"
        return f"{self.name} (***{suffix})"
