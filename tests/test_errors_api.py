"""API tests for the error envelope, health check and file storage."""

import pytest

from travel_api.api.v1.storage import content_type_for, resolve_storage_path
from travel_api.config import settings
from travel_api.core.exceptions import NotFoundError

from tests.conftest import API, hotel_payload


async def test_unknown_route(client):
    response = await client.get(f"{API}/spaceships/public")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["message"] == f"Route GET {API}/spaceships/public not found"


async def test_missing_token(client):
    response = await client.get(f"{API}/trips/")

    assert response.status_code == 401
    assert response.json()["errors"][0]["type"] == "AUTHENTICATION"


async def test_invalid_token(client):
    response = await client.get(f"{API}/trips/", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401
    assert response.json()["success"] is False


async def test_body_validation_errors(client, admin_headers):
    response = await client.post(
        f"{API}/hotels/admin", json=hotel_payload(starRating=9, name=""), headers=admin_headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    paths = {error["path"] for error in body["errors"]}
    assert {"starRating", "name"} <= paths
    assert all(error["type"] == "VALIDATION" for error in body["errors"])


async def test_malformed_identifier(client):
    response = await client.get(f"{API}/hotels/public/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "hotel_id"


async def test_page_must_be_positive(client):
    response = await client.get(f"{API}/hotels/public", params={"page": 0})

    assert response.status_code == 400


async def test_health_and_security_headers(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Request-ID" in response.headers


@pytest.fixture
def storage_root(tmp_path, monkeypatch):
    root = tmp_path / "storage"
    (root / "images").mkdir(parents=True)
    (root / "images" / "beach.png").write_bytes(b"\x89PNG fake")
    (tmp_path / "secret.txt").write_text("do not serve")
    monkeypatch.setattr(settings, "storage_path", str(root))
    return root


async def test_serve_stored_file(client, storage_root):
    response = await client.get("/storage/images/beach.png")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "public, max-age=31536000"
    assert response.content == b"\x89PNG fake"


async def test_missing_stored_file(client, storage_root):
    response = await client.get("/storage/images/missing.png")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_storage_refuses_paths_outside_root(storage_root):
    with pytest.raises(NotFoundError):
        resolve_storage_path("..", "secret.txt")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("photo.JPG", "image/jpeg"),
        ("clip.mov", "video/quicktime"),
        ("notes.txt", "application/octet-stream"),
    ],
)
def test_content_type_for(filename, expected):
    assert content_type_for(filename) == expected


async def test_security_headers_wrap_cors_preflight(client):
    response = await client.options(
        "/health",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Request-ID" in response.headers
