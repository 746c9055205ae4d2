"""Local disk storage for multipart uploads."""

import secrets
from pathlib import Path, PurePath

import aiofiles
from fastapi import UploadFile

from core.config import get_settings
from core.logger import get_logger

logger = get_logger(__name__)

_CHUNK_SIZE = 1024 * 1024


def ensure_upload_dir() -> Path:
    """Create the uploads directory if it does not exist yet."""
    path = get_settings().upload_path
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_upload_filename(original_name: str | None) -> str:
    """Random 32-char hex token plus the original file extension."""
    suffix = PurePath(original_name or "").suffix
    return f"{secrets.token_hex(16)}{suffix}"


async def save_upload(upload: UploadFile) -> str:
    """Stream an upload to disk and return the stored filename."""
    directory = ensure_upload_dir()
    filename = build_upload_filename(upload.filename)
    destination = directory / filename

    size = 0
    async with aiofiles.open(destination, "wb") as out:
        while chunk := await upload.read(_CHUNK_SIZE):
            size += len(chunk)
            await out.write(chunk)

    logger.info(
        "upload.stored",
        original_name=upload.filename,
        stored_name=filename,
        size_bytes=size,
    )
    return filename
