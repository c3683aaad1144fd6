"""Local disk storage for menu images and videos"""

import os
import re
import time
from typing import Optional, Tuple

from fastapi import HTTPException, UploadFile
import structlog

from app.config import settings

logger = structlog.get_logger()

UPLOADS_URL_PREFIX = "/uploads"
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def ensure_upload_dir() -> str:
    os.makedirs(settings.uploads_path, exist_ok=True)
    return settings.uploads_path


def safe_filename(filename: str) -> str:
    """Strip directories and unsafe characters from a client file name"""
    name = os.path.basename(filename or "").strip()
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "upload"


async def read_upload(file: Optional[UploadFile], kind: str) -> Optional[Tuple[str, bytes]]:
    """
    Validate an uploaded file and read it into memory.

    `kind` is the expected media family ("image" or "video"); anything else
    is rejected with a 400. Returns the stored file name and content, or
    None when no file was sent. Nothing is written to disk.
    """
    if file is None or not file.filename:
        return None

    content_type = file.content_type or ""
    if not content_type.startswith(f"{kind}/"):
        raise HTTPException(status_code=400, detail="Unsupported file type")

    content = await file.read()
    if len(content) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(status_code=413, detail="File too large")

    return f"{int(time.time() * 1000)}-{safe_filename(file.filename)}", content


def store_upload(upload: Optional[Tuple[str, bytes]]) -> Optional[str]:
    """Write an upload returned by read_upload and return its public URL"""
    if upload is None:
        return None

    filename, content = upload
    path = os.path.join(ensure_upload_dir(), filename)
    with open(path, "wb") as out:
        out.write(content)

    logger.info("Stored upload", filename=filename, size=len(content))
    return f"{UPLOADS_URL_PREFIX}/{filename}"
