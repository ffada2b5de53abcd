"""Client domain constants.

Choices stored on the ``clients`` table and the field limits shared by
the DTOs, the model and the web form.
"""

from django.db import models


class PersonType(models.TextChoices):
    INDIVIDUAL = "individual", "Pessoa Física"
    COMPANY = "company", "Pessoa Jurídica"


class Gender(models.TextChoices):
    MALE = "male", "Masculino"
    FEMALE = "female", "Feminino"
    OTHER = "other", "Outro"


class ClientStatus(models.TextChoices):
    ACTIVE = "active", "Ativo"
    BLOCKED = "blocked", "Bloqueado"


NAME_MAX_LENGTH = 150
EMAIL_MAX_LENGTH = 150
TAX_DOCUMENT_MIN_DIGITS = 11
TAX_DOCUMENT_MAX_DIGITS = 14
PHONE_MAX_DIGITS = 11
STATE_REGISTRATION_MAX_LENGTH = 12
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 15

# Keeps ``(page - 1) * page_size`` inside a signed 64-bit SQL integer.
PAGE_MAX = 1_000_000_000
