"""Paging through GET /api/v1/clients."""

import pytest

from modules.clients.constants import PAGE_MAX
from modules.clients.models import Client

pytestmark = pytest.mark.integration

URL = "/api/v1/clients"


@pytest.fixture()
def twenty_five_clients():
    Client.objects.bulk_create(
        [
            Client(
                name=f"Cliente {n:02d}",
                tax_document=f"{n:011d}",
                email=f"cliente{n}@example.com",
                person_type="company",
                phone="11999999999",
                state_registration_exempt=True,
                password_hash="x",
            )
            for n in range(1, 26)
        ]
    )
    return list(Client.objects.order_by("id").values_list("id", flat=True))


def test_pages_of_twenty(api_client, twenty_five_clients):
    first = api_client.get(URL, {"page": 1}).json()
    second = api_client.get(URL, {"page": 2}).json()
    third = api_client.get(URL, {"page": 3}).json()

    assert [c["id"] for c in first] == twenty_five_clients[:20]
    assert [c["id"] for c in second] == twenty_five_clients[20:]
    assert third == []


def test_default_page_is_first(api_client, twenty_five_clients):
    data = api_client.get(URL).json()
    assert [c["id"] for c in data] == twenty_five_clients[:20]


def test_page_size_setting(api_client, twenty_five_clients, settings):
    settings.CLIENTS_PAGE_SIZE = 10

    data = api_client.get(URL, {"page": 3}).json()

    assert [c["id"] for c in data] == twenty_five_clients[20:]


@pytest.mark.parametrize("page", ["0", "-1", "x"])
def test_invalid_page_rejected(api_client, page):
    response = api_client.get(URL, {"page": page})
    assert response.status_code == 400
    assert response.json()["type"] == "validation_error"


def test_search_pages_within_matches(api_client, twenty_five_clients):
    data = api_client.get(URL, {"search": "Cliente 1"}).json()

    # Cliente 10..19
    assert [c["name"] for c in data] == [f"Cliente {n}" for n in range(10, 20)]


def test_blank_search_lists_everything(api_client, twenty_five_clients):
    data = api_client.get(URL, {"search": ""}).json()
    assert len(data) == 20


def test_huge_page_is_validation_error(api_client):
    response = api_client.get(URL, {"page": str(10**30)})

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "validation_error"
    assert body["errors"][0]["attr"] == "page"


def test_last_allowed_page_is_empty(api_client, twenty_five_clients):
    response = api_client.get(URL, {"page": PAGE_MAX})

    assert response.status_code == 200
    assert response.json() == []
