import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _fast_password_hasher(settings):
    """bcrypt is deliberately slow; tests only need a real, verifiable hash."""
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def company_payload():
    """Factory for a valid company payload (camelCase, as sent by the UI)."""

    def _make(**overrides):
        payload = {
            "name": "Acme",
            "email": "a@acme.com",
            "taxDocument": "12345678901234",
            "personType": "company",
            "phone": "11999999999",
            "stateRegistrationExempt": True,
            "password": "abcdefgh",
            "passwordConfirmation": "abcdefgh",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture()
def individual_payload():
    """Factory for a valid individual payload."""

    def _make(**overrides):
        payload = {
            "name": "Maria Souza",
            "email": "maria@example.com",
            "taxDocument": "598.601.842-75",
            "personType": "individual",
            "phone": "(11) 98888-7777",
            "stateRegistrationExempt": True,
            "gender": "female",
            "birthDate": "1990-04-12",
            "status": "active",
            "password": "s3nhaForte",
            "passwordConfirmation": "s3nhaForte",
        }
        payload.update(overrides)
        return payload

    return _make
