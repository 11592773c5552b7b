# backend/utils/upload.py
import os
import random
import string
import time
from typing import Optional

IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
VIDEO_TYPES = {"video/mp4", "video/webm", "video/quicktime"}

MAX_IMAGE_BYTES = 5 * 1024 * 1024
MAX_VIDEO_BYTES = 50 * 1024 * 1024

IMAGE = "image"
VIDEO = "video"


class UploadRejected(Exception):
    """A file failed type or size validation."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"File {filename}: {reason}")


def validate_upload(filename: str, content_type: Optional[str], size: int) -> str:
    """Return the upload kind (`image` or `video`) or raise UploadRejected."""
    if content_type in IMAGE_TYPES:
        if size > MAX_IMAGE_BYTES:
            raise UploadRejected(filename, "exceeds the 5MB image limit")
        return IMAGE
    if content_type in VIDEO_TYPES:
        if size > MAX_VIDEO_BYTES:
            raise UploadRejected(filename, "exceeds the 50MB video limit")
        return VIDEO
    raise UploadRejected(filename, f"unsupported file type {content_type or 'unknown'}")


def folder_for(kind: str) -> str:
    return "videos" if kind == VIDEO else "products"


def unique_name(filename: str) -> str:
    # <epoch ms>-<6 base36 chars><ext>
    ext = os.path.splitext(filename or "")[1].lower()
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{int(time.time() * 1000)}-{suffix}{ext}"


def read_capped(fileobj, limit: int = MAX_VIDEO_BYTES) -> bytes:
    """Read at most limit + 1 bytes; anything longer is over every size limit."""
    return fileobj.read(limit + 1)
