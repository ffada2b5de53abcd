"""Unit tests for ClientValidator.

The repository is mocked: only the rule logic is exercised here.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from modules.clients.dtos import ClientPayloadDTO
from modules.clients.validators import ClientValidator, RuleViolation, violations_from

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.email_taken.return_value = False
    repo.tax_document_taken.return_value = False
    repo.state_registration_taken.return_value = False
    return repo


@pytest.fixture()
def validator(mock_repo):
    return ClientValidator(mock_repo)


def _codes(violations) -> set[str]:
    return {v.code for v in violations}


class TestAccepted:
    def test_valid_company(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(company_payload())
        assert validator.validate(dto) == []

    def test_valid_individual(self, validator, individual_payload):
        dto = ClientPayloadDTO.model_validate(individual_payload())
        assert validator.validate(dto) == []


class TestBirthDate:
    def test_individual_without_birth_date_rejected(self, validator, individual_payload):
        payload = individual_payload()
        del payload["birthDate"]
        dto = ClientPayloadDTO.model_validate(payload)

        violations = validator.validate(dto)

        assert _codes(violations) == {"birth_date_required"}
        assert violations[0].field == "birthDate"

    def test_company_without_birth_date_accepted(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(company_payload())
        assert dto.birth_date is None
        assert validator.validate(dto) == []

    def test_company_with_birth_date_accepted(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(company_payload(birthDate="2001-01-01"))
        assert validator.validate(dto) == []


class TestPassword:
    def test_required_on_create(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(
            company_payload(password="", passwordConfirmation="")
        )
        assert _codes(validator.validate(dto)) == {"password_required"}

    def test_optional_on_update(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(
            company_payload(id=7, password="", passwordConfirmation="")
        )
        assert validator.validate(dto, client_id=7) == []

    def test_confirmation_mismatch(self, validator, company_payload):
        dto = ClientPayloadDTO.model_validate(
            company_payload(passwordConfirmation="abcdefgX")
        )
        violations = validator.validate(dto)
        assert _codes(violations) == {"password_mismatch"}
        assert violations[0].message == "As senhas não conferem."

    def test_missing_confirmation_on_update(self, validator, company_payload):
        payload = company_payload(id=7)
        del payload["passwordConfirmation"]
        dto = ClientPayloadDTO.model_validate(payload)
        assert _codes(validator.validate(dto, client_id=7)) == {"password_mismatch"}


class TestUniqueness:
    def test_duplicate_email(self, validator, mock_repo, company_payload):
        mock_repo.email_taken.return_value = True
        dto = ClientPayloadDTO.model_validate(company_payload())

        violations = validator.validate(dto)

        assert _codes(violations) == {"duplicate_email"}
        mock_repo.email_taken.assert_called_once_with("a@acme.com", exclude_id=None)

    def test_duplicate_document(self, validator, mock_repo, company_payload):
        mock_repo.tax_document_taken.return_value = True
        dto = ClientPayloadDTO.model_validate(company_payload())
        assert _codes(validator.validate(dto)) == {"duplicate_tax_document"}

    def test_update_excludes_own_id(self, validator, mock_repo, company_payload):
        dto = ClientPayloadDTO.model_validate(company_payload(id=42))

        validator.validate(dto, client_id=42)

        mock_repo.email_taken.assert_called_once_with("a@acme.com", exclude_id=42)
        mock_repo.tax_document_taken.assert_called_once_with(
            "12345678901234", exclude_id=42
        )

    def test_state_registration_checked_when_not_exempt(
        self, validator, mock_repo, company_payload
    ):
        mock_repo.state_registration_taken.return_value = True
        dto = ClientPayloadDTO.model_validate(
            company_payload(stateRegistrationExempt=False, stateRegistration="123456789")
        )
        assert _codes(validator.validate(dto)) == {"duplicate_state_registration"}

    def test_state_registration_ignored_when_exempt(
        self, validator, mock_repo, company_payload
    ):
        mock_repo.state_registration_taken.return_value = True
        dto = ClientPayloadDTO.model_validate(
            company_payload(stateRegistrationExempt=True, stateRegistration="123456789")
        )
        assert validator.validate(dto) == []
        mock_repo.state_registration_taken.assert_not_called()

    def test_all_violations_reported_together(
        self, validator, mock_repo, individual_payload
    ):
        mock_repo.email_taken.return_value = True
        mock_repo.tax_document_taken.return_value = True
        payload = individual_payload(passwordConfirmation="different1")
        del payload["birthDate"]
        dto = ClientPayloadDTO.model_validate(payload)

        assert _codes(validator.validate(dto)) == {
            "password_mismatch",
            "birth_date_required",
            "duplicate_email",
            "duplicate_tax_document",
        }


class TestViolationsFromPydantic:
    def test_converts_errors(self, company_payload):
        with pytest.raises(ValidationError) as exc_info:
            ClientPayloadDTO.model_validate(company_payload(taxDocument="1", email="x"))

        violations = violations_from(exc_info.value)
        by_field = {v.field: v for v in violations}

        assert set(by_field) == {"taxDocument", "email"}
        assert "11 e 14" in by_field["taxDocument"].message
        assert not by_field["taxDocument"].message.startswith("Value error")

    def test_as_error_shape(self):
        violation = RuleViolation("email", "duplicate_email", "Email já existe.")
        assert violation.as_error() == {
            "code": "duplicate_email",
            "detail": "Email já existe.",
            "attr": "email",
        }
