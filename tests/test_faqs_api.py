"""API tests for FAQs."""

import pytest

from tests.conftest import API


def faq_payload(**overrides) -> dict:
    payload = {
        "question": "How do I cancel a booking?",
        "answer": "Open your bookings and press cancel on the reservation.",
        "category": "cancellation",
        "tags": ["refund", "cancel"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def faq(client, admin_headers) -> dict:
    response = await client.post(f"{API}/faqs/admin", json=faq_payload(), headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_duplicate_question(client, faq, admin_headers):
    response = await client.post(f"{API}/faqs/admin", json=faq_payload(), headers=admin_headers)

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["type"] == "DUPLICATE"
    assert error["path"] == "question"


async def test_unpublished_faqs_are_hidden_from_public(client, faq, admin_headers):
    await client.post(
        f"{API}/faqs/admin",
        json=faq_payload(question="Draft question?", isPublished=False),
        headers=admin_headers,
    )

    public = await client.get(f"{API}/faqs/public")
    assert [f["id"] for f in public.json()["data"]] == [faq["id"]]

    admin = await client.get(f"{API}/faqs/admin", headers=admin_headers)
    assert admin.json()["pagination"]["totalItems"] == 2


async def test_search_matches_tags(client, faq):
    response = await client.get(f"{API}/faqs/public", params={"searchTerm": "REFUND"})

    assert [f["id"] for f in response.json()["data"]] == [faq["id"]]


async def test_get_counts_views(client, faq):
    await client.get(f"{API}/faqs/public/{faq['id']}")
    response = await client.get(f"{API}/faqs/public/{faq['id']}")

    assert response.json()["data"]["viewCount"] == 2


async def test_feedback_counters(client, faq):
    await client.post(f"{API}/faqs/public/{faq['id']}/helpful")
    response = await client.post(f"{API}/faqs/public/{faq['id']}/not-helpful")

    data = response.json()["data"]
    assert data["helpfulCount"] == 1
    assert data["notHelpfulCount"] == 1


async def test_popular_orders_by_views(client, faq, admin_headers):
    other = await client.post(
        f"{API}/faqs/admin", json=faq_payload(question="Can I pay by card?"), headers=admin_headers
    )
    other_id = other.json()["data"]["id"]
    await client.get(f"{API}/faqs/public/{other_id}")

    response = await client.get(f"{API}/faqs/public/popular", params={"limit": 1})

    assert [f["id"] for f in response.json()["data"]] == [other_id]


async def test_update_and_delete_faq(client, faq, admin_headers):
    response = await client.put(
        f"{API}/faqs/admin/{faq['id']}", json={"order": 3}, headers=admin_headers
    )
    assert response.json()["data"]["order"] == 3

    response = await client.delete(f"{API}/faqs/admin/{faq['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert (await client.get(f"{API}/faqs/public/{faq['id']}")).status_code == 404
