"""API tests for vehicles, rental pricing and vehicle bookings."""

import pytest

from tests.conftest import API, vehicle_payload

PERIOD = {"startDate": "2024-06-01", "endDate": "2024-06-04"}


@pytest.fixture
async def vehicle(client, admin_headers) -> dict:
    response = await client.post(f"{API}/vehicles/admin", json=vehicle_payload(), headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_vehicle_applies_defaults(vehicle):
    assert vehicle["licensePlate"] == "AB-123-CD"
    assert vehicle["maintenanceStatus"] == "Available"
    options = vehicle["rentalTerms"]["insuranceOptions"]
    assert options[0]["type"] == "Basic"
    assert options[0]["pricePerDay"] == 10


async def test_duplicate_license_plate_rejected(client, admin_headers, vehicle):
    response = await client.post(
        f"{API}/vehicles/admin", json=vehicle_payload(licensePlate="AB-123-CD"), headers=admin_headers
    )

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["type"] == "DUPLICATE"
    assert error["path"] == "licensePlate"


async def test_availability_pricing_with_insurance(client, vehicle):
    response = await client.get(
        f"{API}/vehicles/public/{vehicle['id']}/availability",
        params={**PERIOD, "insuranceType": "basic"},
    )

    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["isAvailable"] is True
    assert data["pricing"] == {
        "days": 3,
        "pricePerDay": 50,
        "basePrice": 150,
        "insuranceCost": 30,
        "totalPrice": 180,
    }


async def test_unknown_insurance_option_rejected(client, vehicle):
    response = await client.get(
        f"{API}/vehicles/public/{vehicle['id']}/availability",
        params={**PERIOD, "insuranceType": "Platinum"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "insuranceType"


async def test_vehicle_due_for_service_is_unavailable(client, admin_headers):
    response = await client.post(
        f"{API}/vehicles/admin",
        json=vehicle_payload(licensePlate="SRV-1", nextService="2024-06-02"),
        headers=admin_headers,
    )
    vehicle_id = response.json()["data"]["id"]

    response = await client.get(f"{API}/vehicles/public/{vehicle_id}/availability", params=PERIOD)

    data = response.json()["data"]
    assert data["isAvailable"] is False
    assert data["pricing"] is None
    assert "service" in data["reason"]


async def test_book_vehicle(client, vehicle, user_headers):
    response = await client.post(
        f"{API}/vehicles/{vehicle['id']}/book",
        json={
            **PERIOD,
            "insuranceType": "Basic",
            "pickupLocation": {"address": "1 Quai", "city": "Nice", "country": "France"},
        },
        headers=user_headers,
    )

    assert response.status_code == 201, response.text
    booking = response.json()["data"]
    assert booking["bookingReference"].startswith("V")
    assert booking["bookingType"] == "vehicle"
    assert booking["basePrice"] == 150
    assert booking["insurance"] == 30
    assert booking["totalPrice"] == 180
    assert booking["details"]["pickup_location"]["city"] == "Nice"

    availability = await client.get(f"{API}/vehicles/public/{vehicle['id']}/availability", params=PERIOD)
    assert availability.json()["data"]["isAvailable"] is False

    again = await client.post(f"{API}/vehicles/{vehicle['id']}/book", json=PERIOD, headers=user_headers)
    assert again.status_code == 400


async def test_book_rejects_inverted_period(client, vehicle, user_headers):
    response = await client.post(
        f"{API}/vehicles/{vehicle['id']}/book",
        json={"startDate": "2024-06-04", "endDate": "2024-06-01"},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["type"] == "VALIDATION"


async def test_list_vehicles_filters(client, admin_headers, vehicle):
    await client.post(
        f"{API}/vehicles/admin",
        json=vehicle_payload(licensePlate="VAN-1", vehicleType="Van", make="Ford", model="Transit", capacity=9, pricePerDay=90),
        headers=admin_headers,
    )

    response = await client.get(f"{API}/vehicles/public", params={"capacity": 6})
    assert [v["make"] for v in response.json()["data"]] == ["Ford"]

    response = await client.get(f"{API}/vehicles/public", params={"searchTerm": "corolla"})
    assert [v["licensePlate"] for v in response.json()["data"]] == ["AB-123-CD"]

    response = await client.get(f"{API}/vehicles/public", params={"maxPrice": 60})
    assert response.json()["pagination"]["totalItems"] == 1


async def test_vehicle_stats(client, admin_headers, vehicle):
    await client.post(
        f"{API}/vehicles/admin",
        json=vehicle_payload(licensePlate="VAN-2", vehicleType="Van", pricePerDay=90, maintenanceStatus="Repairs Needed"),
        headers=admin_headers,
    )

    response = await client.get(f"{API}/vehicles/admin/stats", headers=admin_headers)

    stats = response.json()["data"]
    assert stats["total"] == 2
    assert stats["available"] == 1
    assert stats["inMaintenance"] == 1
    assert stats["byType"] == {"Car": 1, "Van": 1}
    assert stats["averagePrice"] == 70


async def test_update_vehicle_keeps_unsent_fields(client, admin_headers, vehicle):
    response = await client.put(
        f"{API}/vehicles/admin/{vehicle['id']}", json={"pricePerDay": 65}, headers=admin_headers
    )

    data = response.json()["data"]
    assert data["pricePerDay"] == 65
    assert data["make"] == "Toyota"


async def test_stored_rental_blocks_touching_dates(client, admin_headers, vehicle, user_headers):
    book_url = f"{API}/vehicles/{vehicle['id']}/book"
    first = await client.post(book_url, json=PERIOD, headers=user_headers)
    assert first.status_code == 201, first.text

    # Reopen the vehicle so only the stored rental decides
    await client.put(f"{API}/vehicles/admin/{vehicle['id']}", json={"isAvailable": True}, headers=admin_headers)

    touching = await client.post(
        book_url, json={"startDate": "2024-06-04", "endDate": "2024-06-06"}, headers=user_headers
    )
    assert touching.status_code == 400
    assert touching.json()["errors"][0]["type"] == "NOT_AVAILABLE"

    later = await client.post(
        book_url, json={"startDate": "2024-06-05", "endDate": "2024-06-07"}, headers=user_headers
    )
    assert later.status_code == 201, later.text
