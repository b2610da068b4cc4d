"""API tests for hotels, rooms, availability and room bookings."""

import pytest

from tests.conftest import API, hotel_payload, room_payload

SUMMER = [{"startDate": "2024-06-01", "endDate": "2024-08-31", "multiplier": 1.5}]
STAY = {"checkIn": "2024-06-01", "checkOut": "2024-06-03", "guests": 2}


async def create_hotel(client, admin_headers, **overrides) -> dict:
    response = await client.post(
        f"{API}/hotels/admin", json=hotel_payload(**overrides), headers=admin_headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_room(client, admin_headers, hotel_id, **overrides) -> dict:
    response = await client.post(
        f"{API}/rooms/admin", json=room_payload(hotel_id, **overrides), headers=admin_headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
async def hotel_with_room(client, admin_headers) -> tuple[dict, dict]:
    hotel = await create_hotel(client, admin_headers, seasonalPrices=SUMMER)
    room = await create_room(client, admin_headers, hotel["id"])
    return hotel, room


async def test_create_then_fetch_hotel(client, admin_headers):
    hotel = await create_hotel(client, admin_headers)

    response = await client.get(f"{API}/hotels/public/{hotel['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    fetched = body["data"]["hotel"]
    assert fetched["name"] == "Seaside Resort"
    assert fetched["city"] == "Nice"
    assert fetched["starRating"] == 4
    assert fetched["amenities"] == ["pool", "wifi"]
    assert fetched["pricePerNight"] == 100
    assert fetched["contactInfo"]["email"] == "info@seaside.example"
    assert body["data"]["rooms"] == []


async def test_list_hotels_filters_and_paginates(client, admin_headers):
    await create_hotel(client, admin_headers, name="Alpine Lodge", city="Chamonix", pricePerNight=250)
    await create_hotel(client, admin_headers, name="City Inn", city="Paris", pricePerNight=80)
    await create_hotel(client, admin_headers, name="Harbour View", city="Nice", pricePerNight=120)

    response = await client.get(f"{API}/hotels/public", params={"searchTerm": "nice"})
    assert [h["name"] for h in response.json()["data"]] == ["Harbour View"]

    response = await client.get(
        f"{API}/hotels/public",
        params={"minPrice": 100, "sortBy": "pricePerNight", "sortOrder": "asc"},
    )
    assert [h["name"] for h in response.json()["data"]] == ["Harbour View", "Alpine Lodge"]

    response = await client.get(f"{API}/hotels/public", params={"page": 2, "limit": 2})
    body = response.json()
    assert len(body["data"]) == 1
    assert body["pagination"] == {
        "currentPage": 2,
        "totalPages": 2,
        "totalItems": 3,
        "itemsPerPage": 2,
    }


async def test_page_past_the_end_is_empty(client, admin_headers):
    await create_hotel(client, admin_headers)

    response = await client.get(f"{API}/hotels/public", params={"page": 5})

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"]["totalPages"] == 1


async def test_overlapping_seasonal_prices_rejected(client, admin_headers):
    seasons = SUMMER + [{"startDate": "2024-08-15", "endDate": "2024-09-15", "multiplier": 1.2}]

    response = await client.post(
        f"{API}/hotels/admin", json=hotel_payload(seasonalPrices=seasons), headers=admin_headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["path"] == "seasonalPrices"


async def test_room_availability_with_seasonal_price(client, hotel_with_room):
    hotel, room = hotel_with_room

    response = await client.get(f"{API}/hotels/public/{hotel['id']}/availability", params=STAY)

    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["nights"] == 2
    assert data["totalRooms"] == 1
    assert [r["id"] for r in data["availableRooms"]] == [room["id"]]
    price = data["availableRooms"][0]["calculatedPrice"]
    assert price["basePrice"] == 100
    assert price["seasonalPrice"] == 150
    assert price["totalPrice"] == price["seasonalPrice"] * 2


async def test_availability_excludes_rooms_too_small(client, hotel_with_room):
    hotel, _ = hotel_with_room

    response = await client.get(
        f"{API}/hotels/public/{hotel['id']}/availability", params={**STAY, "guests": 3}
    )

    assert response.json()["data"]["availableRooms"] == []


async def test_availability_rejects_inverted_dates(client, hotel_with_room):
    hotel, _ = hotel_with_room

    response = await client.get(
        f"{API}/hotels/public/{hotel['id']}/availability",
        params={"checkIn": "2024-06-03", "checkOut": "2024-06-01"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["type"] == "VALIDATION"


async def test_book_room_flow(client, hotel_with_room, user_headers):
    hotel, room = hotel_with_room
    booking_body = {"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03", "guests": 2}

    response = await client.post(
        f"{API}/hotels/{hotel['id']}/book", json=booking_body, headers=user_headers
    )

    assert response.status_code == 201, response.text
    booking = response.json()["data"]
    assert booking["bookingReference"].startswith("H")
    assert len(booking["bookingReference"]) == 11
    assert booking["status"] == "Confirmed"
    assert booking["nights"] == 2
    assert booking["basePrice"] == 300
    assert booking["taxes"] == 30
    assert booking["totalPrice"] == 330

    # Room flag flipped: no longer offered, second booking refused
    availability = await client.get(f"{API}/hotels/public/{hotel['id']}/availability", params=STAY)
    assert availability.json()["data"]["availableRooms"] == []

    again = await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={**booking_body, "checkIn": "2024-07-01", "checkOut": "2024-07-02"},
        headers=user_headers,
    )
    assert again.status_code == 400
    assert again.json()["errors"][0]["type"] == "NOT_AVAILABLE"

    notifications = await client.get(f"{API}/notifications/", headers=user_headers)
    data = notifications.json()["data"]
    assert data["unreadCount"] == 1
    assert data["notifications"][0]["type"] == "booking_confirmed"
    assert data["notifications"][0]["relatedId"] == booking["id"]


async def test_cancel_booking_restores_room(client, hotel_with_room, user_headers, other_user_headers):
    hotel, room = hotel_with_room
    response = await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
        headers=user_headers,
    )
    booking_id = response.json()["data"]["id"]

    forbidden = await client.post(
        f"{API}/bookings/{booking_id}/cancel", json={}, headers=other_user_headers
    )
    assert forbidden.status_code == 403

    cancelled = await client.post(
        f"{API}/bookings/{booking_id}/cancel",
        json={"reason": "Change of plans"},
        headers=user_headers,
    )
    assert cancelled.status_code == 200, cancelled.text
    data = cancelled.json()["data"]
    assert data["status"] == "Cancelled"
    assert data["cancelledAt"] is not None
    assert data["details"]["cancellation_reason"] == "Change of plans"

    availability = await client.get(f"{API}/hotels/public/{hotel['id']}/availability", params=STAY)
    assert [r["id"] for r in availability.json()["data"]["availableRooms"]] == [room["id"]]

    twice = await client.post(f"{API}/bookings/{booking_id}/cancel", json={}, headers=user_headers)
    assert twice.status_code == 400
    assert "already cancelled" in twice.json()["message"]


async def test_booking_requires_authentication(client, hotel_with_room):
    hotel, room = hotel_with_room

    response = await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
    )

    assert response.status_code == 401
    assert response.json()["errors"][0]["type"] == "AUTHENTICATION"


async def test_booking_closed_hotel_fails(client, admin_headers, user_headers):
    hotel = await create_hotel(client, admin_headers, isAvailable=False)
    room = await create_room(client, admin_headers, hotel["id"])

    response = await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2030-01-01", "checkOut": "2030-01-02"},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["type"] == "NOT_AVAILABLE"


async def test_my_bookings_list(client, hotel_with_room, user_headers, other_user_headers):
    hotel, room = hotel_with_room
    await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
        headers=user_headers,
    )

    mine = await client.get(f"{API}/bookings/", headers=user_headers)
    theirs = await client.get(f"{API}/bookings/", headers=other_user_headers)

    assert mine.json()["pagination"]["totalItems"] == 1
    assert theirs.json()["data"] == []


async def test_admin_marks_booking_paid(client, hotel_with_room, user_headers, admin_headers):
    hotel, room = hotel_with_room
    response = await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
        headers=user_headers,
    )
    booking_id = response.json()["data"]["id"]

    paid = await client.put(
        f"{API}/bookings/admin/{booking_id}", json={"paymentStatus": "Paid"}, headers=admin_headers
    )
    assert paid.json()["data"]["paymentStatus"] == "Paid"

    back = await client.put(
        f"{API}/bookings/admin/{booking_id}", json={"paymentStatus": "Unpaid"}, headers=admin_headers
    )
    assert back.status_code == 400


async def test_duplicate_room_number_rejected(client, admin_headers, hotel_with_room):
    hotel, _ = hotel_with_room

    response = await client.post(
        f"{API}/rooms/admin", json=room_payload(hotel["id"]), headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["type"] == "DUPLICATE"


async def test_room_stats_and_maintenance(client, admin_headers, hotel_with_room):
    hotel, room = hotel_with_room
    await create_room(client, admin_headers, hotel["id"], roomNumber="102", roomType="Suite", pricePerNight=200)

    response = await client.patch(
        f"{API}/rooms/admin/{room['id']}/availability",
        json={"isAvailable": False},
        headers=admin_headers,
    )
    assert response.json()["data"]["maintenanceStatus"] == "Maintenance"

    stats = (await client.get(f"{API}/rooms/admin/stats/{hotel['id']}", headers=admin_headers)).json()["data"]
    assert stats["total"] == 2
    assert stats["available"] == 1
    assert stats["maintenance"] == 1
    assert stats["byType"] == {"Double": 1, "Suite": 1}
    assert stats["averagePrice"] == 150


async def test_hotel_review_replaces_previous(client, admin_headers, user_headers):
    hotel = await create_hotel(client, admin_headers)

    await client.post(f"{API}/hotels/{hotel['id']}/reviews", json={"rating": 2}, headers=user_headers)
    response = await client.post(
        f"{API}/hotels/{hotel['id']}/reviews", json={"rating": 4, "review": "Nice"}, headers=user_headers
    )

    data = response.json()["data"]
    assert len(data["ratings"]) == 1
    assert data["averageRating"] == 4


async def test_nearby_hotels_sorted_by_distance(client, admin_headers):
    await create_hotel(client, admin_headers, name="Near", latitude=43.701, longitude=7.261)
    await create_hotel(client, admin_headers, name="Far", latitude=43.75, longitude=7.30)
    await create_hotel(client, admin_headers, name="Other City", latitude=48.85, longitude=2.35)

    response = await client.get(
        f"{API}/hotels/public/nearby", params={"latitude": 43.7, "longitude": 7.26, "radius": 20}
    )

    data = response.json()["data"]
    assert [h["name"] for h in data] == ["Near", "Far"]
    assert data[0]["distanceKm"] < data[1]["distanceKm"]


async def test_delete_hotel_removes_rooms(client, admin_headers, hotel_with_room):
    hotel, room = hotel_with_room

    response = await client.delete(f"{API}/hotels/admin/{hotel['id']}", headers=admin_headers)
    assert response.status_code == 200

    assert (await client.get(f"{API}/hotels/public/{hotel['id']}")).status_code == 404
    assert (await client.get(f"{API}/rooms/public/{room['id']}")).status_code == 404


async def test_admin_routes_reject_regular_users(client, user_headers):
    response = await client.post(f"{API}/hotels/admin", json=hotel_payload(), headers=user_headers)

    assert response.status_code == 403
    assert response.json()["errors"][0]["type"] == "AUTHORIZATION"


async def test_maintenance_toggle_returns_room_to_service(client, admin_headers, hotel_with_room, user_headers):
    hotel, room = hotel_with_room
    await client.post(
        f"{API}/hotels/{hotel['id']}/book",
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
        headers=user_headers,
    )

    closed = await client.patch(
        f"{API}/rooms/admin/{room['id']}/availability", json={"isAvailable": False}, headers=admin_headers
    )
    assert closed.json()["data"]["isAvailable"] is False
    assert closed.json()["data"]["maintenanceStatus"] == "Maintenance"

    reopened = await client.patch(
        f"{API}/rooms/admin/{room['id']}/availability", json={"isAvailable": True}, headers=admin_headers
    )
    data = reopened.json()["data"]
    assert data["isAvailable"] is True
    assert data["maintenanceStatus"] == "Available"


async def test_stored_booking_blocks_touching_dates(client, admin_headers, hotel_with_room, user_headers):
    hotel, room = hotel_with_room
    book_url = f"{API}/hotels/{hotel['id']}/book"
    first = await client.post(
        book_url,
        json={"roomId": room["id"], "checkIn": "2024-06-01", "checkOut": "2024-06-03"},
        headers=user_headers,
    )
    assert first.status_code == 201, first.text

    # Reopen the room so only the stored reservation decides
    await client.put(f"{API}/rooms/admin/{room['id']}", json={"isAvailable": True}, headers=admin_headers)

    touching = await client.post(
        book_url,
        json={"roomId": room["id"], "checkIn": "2024-06-03", "checkOut": "2024-06-05"},
        headers=user_headers,
    )
    assert touching.status_code == 400
    assert touching.json()["errors"][0]["type"] == "NOT_AVAILABLE"

    later = await client.post(
        book_url,
        json={"roomId": room["id"], "checkIn": "2024-06-04", "checkOut": "2024-06-06"},
        headers=user_headers,
    )
    assert later.status_code == 201, later.text
