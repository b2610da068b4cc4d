"""API tests for destinations and activities."""

import pytest

from tests.conftest import API, destination_payload


def activity_payload(destination_id: str, **overrides) -> dict:
    payload = {
        "name": "Seine river cruise",
        "description": "An evening cruise along the Seine",
        "destinationId": destination_id,
        "category": "Cultural",
        "duration": 2,
        "price": 35,
        "availability": [{"dayOfWeek": 5, "startTime": "19:00", "endTime": "21:00"}],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def destination(client, admin_headers) -> dict:
    response = await client.post(
        f"{API}/destinations/admin", json=destination_payload(), headers=admin_headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_destination_round_trip(client, destination):
    response = await client.get(f"{API}/destinations/public/{destination['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    for field, value in destination_payload().items():
        assert data[field] == value
    assert data["discount"] == 0


async def test_destination_name_is_unique(client, destination, admin_headers):
    response = await client.post(
        f"{API}/destinations/admin", json=destination_payload(), headers=admin_headers
    )

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["type"] == "DUPLICATE"
    assert error["path"] == "name"


async def test_destination_search_requires_every_word(client, destination, admin_headers):
    await client.post(
        f"{API}/destinations/admin",
        json=destination_payload(name="Lyon", city="Lyon", description="Food capital", price=500),
        headers=admin_headers,
    )

    found = await client.get(f"{API}/destinations/public", params={"searchTerm": "city museums"})
    assert [d["name"] for d in found.json()["data"]] == ["Paris"]

    missing = await client.get(f"{API}/destinations/public", params={"searchTerm": "city food"})
    assert missing.json()["data"] == []

    cheap = await client.get(f"{API}/destinations/public", params={"maxPrice": 600})
    assert [d["name"] for d in cheap.json()["data"]] == ["Lyon"]


async def test_update_and_delete_destination(client, destination, admin_headers):
    response = await client.put(
        f"{API}/destinations/admin/{destination['id']}",
        json={"discount": 15},
        headers=admin_headers,
    )
    assert response.json()["data"]["discount"] == 15
    assert response.json()["data"]["name"] == "Paris"

    response = await client.delete(f"{API}/destinations/admin/{destination['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert (await client.get(f"{API}/destinations/public/{destination['id']}")).status_code == 404


async def test_destination_admin_requires_admin(client, user_headers):
    response = await client.post(
        f"{API}/destinations/admin", json=destination_payload(), headers=user_headers
    )

    assert response.status_code == 403


async def test_activity_requires_existing_destination(client, admin_headers):
    response = await client.post(
        f"{API}/activities/admin",
        json=activity_payload("00000000-0000-0000-0000-000000000003"),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "destinationId"


async def test_activity_round_trip_and_destination_listing(client, destination, admin_headers):
    created = await client.post(
        f"{API}/activities/admin", json=activity_payload(destination["id"]), headers=admin_headers
    )
    assert created.status_code == 201, created.text
    activity = created.json()["data"]
    assert activity["availability"][0] == {"dayOfWeek": 5, "startTime": "19:00", "endTime": "21:00"}

    await client.post(
        f"{API}/activities/admin",
        json=activity_payload(destination["id"], name="Closed tour", isActive=False),
        headers=admin_headers,
    )

    response = await client.get(f"{API}/activities/public/destination/{destination['id']}")
    assert [a["id"] for a in response.json()["data"]] == [activity["id"]]

    response = await client.get(f"{API}/activities/public/{activity['id']}")
    assert response.json()["data"]["price"] == 35


async def test_activity_filters(client, destination, admin_headers):
    for name, duration, category in [("Hike", 6, "Nature"), ("Museum", 2, "Cultural")]:
        await client.post(
            f"{API}/activities/admin",
            json=activity_payload(destination["id"], name=name, duration=duration, category=category),
            headers=admin_headers,
        )

    response = await client.get(f"{API}/activities/public", params={"minDuration": 3})
    assert [a["name"] for a in response.json()["data"]] == ["Hike"]

    response = await client.get(f"{API}/activities/public", params={"category": "Cultural"})
    assert [a["name"] for a in response.json()["data"]] == ["Museum"]


async def test_activity_update_rejects_participant_bounds(client, destination, admin_headers):
    created = await client.post(
        f"{API}/activities/admin",
        json=activity_payload(destination["id"], minParticipants=4),
        headers=admin_headers,
    )

    response = await client.put(
        f"{API}/activities/admin/{created.json()['data']['id']}",
        json={"maxParticipants": 2},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "maxParticipants"


async def test_destination_search_words_share_one_column(client, destination):
    # "paris" is only in the name, "light" only in the description
    response = await client.get(f"{API}/destinations/public", params={"searchTerm": "paris light"})

    assert response.json()["data"] == []
