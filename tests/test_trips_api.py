"""API tests for trip planning."""

import pytest

from tests.conftest import API, destination_payload, hotel_payload, room_payload


@pytest.fixture
async def destination(client, admin_headers) -> dict:
    response = await client.post(
        f"{API}/destinations/admin", json=destination_payload(), headers=admin_headers
    )
    return response.json()["data"]


@pytest.fixture
async def trip(client, user_headers, destination) -> dict:
    response = await client.post(
        f"{API}/trips/",
        json={
            "name": "Summer in France",
            "startDate": "2024-07-01",
            "endDate": "2024-07-10",
            "destinations": [{"destinationId": destination["id"], "order": 0, "stayDuration": 4}],
            "budget": {"total": 2000},
        },
        headers=user_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_trip_initializes_budget(trip, destination):
    assert trip["status"] == "Draft"
    assert trip["destinations"][0]["destinationId"] == destination["id"]
    assert trip["budget"] == {
        "total": 2000,
        "spent": {"accommodation": 0, "transportation": 0, "activities": 0, "meals": 0, "others": 0},
        "remaining": 2000,
    }


async def test_create_trip_rejects_inverted_dates(client, user_headers):
    response = await client.post(
        f"{API}/trips/",
        json={"name": "Backwards", "startDate": "2024-07-10", "endDate": "2024-07-01", "budget": {"total": 10}},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "endDate"


async def test_create_trip_rejects_unknown_destination(client, user_headers):
    response = await client.post(
        f"{API}/trips/",
        json={
            "name": "Nowhere",
            "startDate": "2024-07-01",
            "endDate": "2024-07-02",
            "destinations": [
                {"destinationId": "00000000-0000-0000-0000-000000000001", "order": 0, "stayDuration": 1}
            ],
            "budget": {"total": 10},
        },
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "destinations"


async def test_trips_are_private_to_owner(client, trip, other_user_headers):
    response = await client.get(f"{API}/trips/{trip['id']}", headers=other_user_headers)
    assert response.status_code == 404

    response = await client.get(f"{API}/trips/", headers=other_user_headers)
    assert response.json()["data"] == []


async def test_add_activity_updates_budget(client, trip, user_headers):
    response = await client.post(
        f"{API}/trips/{trip['id']}/activities",
        json={
            "name": "Louvre tour",
            "locationName": "Louvre",
            "scheduledAt": "2024-07-02T10:00:00",
            "duration": 3,
            "cost": 120.5,
        },
        headers=user_headers,
    )

    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["activities"][0]["name"] == "Louvre tour"
    assert data["budget"]["spent"]["activities"] == 120.5
    assert data["budget"]["remaining"] == 1879.5


async def test_add_accommodation_checks_rooms_belong_to_hotel(client, trip, user_headers, admin_headers):
    hotel = (await client.post(f"{API}/hotels/admin", json=hotel_payload(), headers=admin_headers)).json()["data"]
    other = (
        await client.post(f"{API}/hotels/admin", json=hotel_payload(name="Other"), headers=admin_headers)
    ).json()["data"]
    room = (await client.post(f"{API}/rooms/admin", json=room_payload(hotel["id"]), headers=admin_headers)).json()["data"]
    stay = {"checkIn": "2024-07-01", "checkOut": "2024-07-05", "roomIds": [room["id"]], "cost": 400}

    wrong = await client.post(
        f"{API}/trips/{trip['id']}/accommodations", json={**stay, "hotelId": other["id"]}, headers=user_headers
    )
    assert wrong.status_code == 400

    response = await client.post(
        f"{API}/trips/{trip['id']}/accommodations", json={**stay, "hotelId": hotel["id"]}, headers=user_headers
    )
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["accommodations"][0]["hotelId"] == hotel["id"]
    assert data["budget"]["spent"]["accommodation"] == 400
    assert data["budget"]["remaining"] == 1600


async def test_add_transportation_requires_existing_vehicle(client, trip, user_headers):
    response = await client.post(
        f"{API}/trips/{trip['id']}/transportation",
        json={
            "vehicleId": "00000000-0000-0000-0000-000000000002",
            "type": "RentalCar",
            "origin": "Paris",
            "destination": "Lyon",
        },
        headers=user_headers,
    )
    assert response.status_code == 404

    response = await client.post(
        f"{API}/trips/{trip['id']}/transportation",
        json={"type": "Train", "origin": "Paris", "destination": "Lyon", "cost": 80},
        headers=user_headers,
    )
    assert response.json()["data"]["transportation"][0]["type"] == "Train"


async def test_add_meal(client, trip, user_headers):
    response = await client.post(
        f"{API}/trips/{trip['id']}/meals",
        json={"type": "Dinner", "mealDate": "2024-07-03", "venue": "Bistro", "cost": 45},
        headers=user_headers,
    )

    data = response.json()["data"]
    assert data["meals"][0]["venue"] == "Bistro"
    assert data["budget"]["spent"]["meals"] == 45


async def test_update_and_list_trips(client, trip, user_headers):
    response = await client.put(
        f"{API}/trips/{trip['id']}", json={"status": "Planned", "endDate": "2024-07-12"}, headers=user_headers
    )
    assert response.json()["data"]["status"] == "Planned"

    invalid = await client.put(
        f"{API}/trips/{trip['id']}", json={"endDate": "2024-06-30"}, headers=user_headers
    )
    assert invalid.status_code == 400

    listed = await client.get(f"{API}/trips/", params={"status": "Planned"}, headers=user_headers)
    assert [t["id"] for t in listed.json()["data"]] == [trip["id"]]


async def test_delete_trip(client, trip, user_headers):
    response = await client.delete(f"{API}/trips/{trip['id']}", headers=user_headers)
    assert response.status_code == 200

    assert (await client.get(f"{API}/trips/{trip['id']}", headers=user_headers)).status_code == 404
