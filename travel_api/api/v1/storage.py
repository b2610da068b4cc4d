"""Static file retrieval from local storage."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from travel_api.config import settings
from travel_api.core.exceptions import NotFoundError

router = APIRouter()

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".qt": "video/quicktime",
    ".avi": "video/x-msvideo",
}


def content_type_for(filename: str) -> str:
    return CONTENT_TYPES.get(Path(filename).suffix.lower(), "application/octet-stream")


def resolve_storage_path(folder: str, filename: str) -> Path:
    """Path of a stored file, refusing anything outside the storage root."""
    root = Path(settings.storage_path).resolve()
    path = (root / folder / filename).resolve()
    if not path.is_relative_to(root) or not path.is_file():
        raise NotFoundError("File")
    return path


@router.get("/{folder}/{filename}")
async def get_file(folder: str, filename: str) -> FileResponse:
    path = resolve_storage_path(folder, filename)
    return FileResponse(
        path,
        media_type=content_type_for(filename),
        headers={
            "Cache-Control": "public, max-age=31536000",
            "Access-Control-Allow-Origin": "*",
        },
    )
