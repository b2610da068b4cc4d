"""API tests for notifications."""

from tests.conftest import API


async def send(client, admin_headers, user_id, title="Welcome aboard") -> dict:
    response = await client.post(
        f"{API}/notifications/admin",
        json={"userId": str(user_id), "type": "welcome", "title": title, "message": "Hello there"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_list_notifications_with_unread_count(client, admin_headers, user_headers, user_id):
    await send(client, admin_headers, user_id, "First")
    await send(client, admin_headers, user_id, "Second")

    response = await client.get(f"{API}/notifications/", headers=user_headers)

    body = response.json()
    assert body["data"]["unreadCount"] == 2
    assert {n["title"] for n in body["data"]["notifications"]} == {"First", "Second"}
    assert body["pagination"]["totalItems"] == 2
    assert body["data"]["notifications"][0]["priority"] == "medium"


async def test_mark_as_read(client, admin_headers, user_headers, user_id):
    notification = await send(client, admin_headers, user_id)
    await send(client, admin_headers, user_id, "Other")

    response = await client.put(f"{API}/notifications/{notification['id']}/read", headers=user_headers)
    assert response.json()["data"]["read"] is True

    count = await client.get(f"{API}/notifications/unread-count", headers=user_headers)
    assert count.json()["data"] == {"unreadCount": 1}

    unread = await client.get(f"{API}/notifications/", params={"unreadOnly": "true"}, headers=user_headers)
    assert [n["title"] for n in unread.json()["data"]["notifications"]] == ["Other"]


async def test_mark_all_as_read(client, admin_headers, user_headers, user_id):
    await send(client, admin_headers, user_id, "First")
    await send(client, admin_headers, user_id, "Second")

    response = await client.put(f"{API}/notifications/read-all", headers=user_headers)
    assert response.json()["data"] == {"modifiedCount": 2}

    count = await client.get(f"{API}/notifications/unread-count", headers=user_headers)
    assert count.json()["data"]["unreadCount"] == 0


async def test_notifications_belong_to_their_user(client, admin_headers, other_user_headers, user_id):
    notification = await send(client, admin_headers, user_id)

    read = await client.put(f"{API}/notifications/{notification['id']}/read", headers=other_user_headers)
    assert read.status_code == 404

    deleted = await client.delete(f"{API}/notifications/{notification['id']}", headers=other_user_headers)
    assert deleted.status_code == 404


async def test_delete_notification(client, admin_headers, user_headers, user_id):
    notification = await send(client, admin_headers, user_id)

    response = await client.delete(f"{API}/notifications/{notification['id']}", headers=user_headers)
    assert response.status_code == 200

    listing = await client.get(f"{API}/notifications/", headers=user_headers)
    assert listing.json()["data"]["notifications"] == []
