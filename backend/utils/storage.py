# backend/utils/storage.py
import logging
from pathlib import Path
from typing import Protocol, Union

import httpx

from config import settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The storage backend could not persist a file."""


class StoragePort(Protocol):
    def save(self, folder: str, filename: str, data: bytes, content_type: str) -> str: ...


class LocalDiskStorage:
    """Writes files below the upload directory served at /uploads."""

    def __init__(self, root: Union[str, Path] = None, url_prefix: str = "/uploads"):
        self.root = Path(root or settings.UPLOAD_DIR)
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, folder: str, filename: str, data: bytes, content_type: str) -> str:
        target_dir = self.root / folder
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with open(target_dir / filename, "wb") as buffer:
                buffer.write(data)
        except OSError as e:
            raise StorageError(f"File save error: {e}") from e
        return f"{self.url_prefix}/{folder}/{filename}"


class BlobStorage:
    """Uploads to a public blob store over its HTTP API."""

    def __init__(self, api_url: str = None, token: str = None, client: httpx.Client = None):
        self.api_url = (api_url or settings.BLOB_API_URL).rstrip("/")
        self.token = token or settings.BLOB_READ_WRITE_TOKEN
        self.client = client

    def save(self, folder: str, filename: str, data: bytes, content_type: str) -> str:
        if not self.token:
            raise StorageError("Blob storage token is not configured")
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": content_type,
            "x-content-type": content_type,
        }
        url = f"{self.api_url}/{folder}/{filename}"
        client = self.client or httpx.Client(timeout=30.0)
        try:
            response = client.put(url, content=data, headers=headers)
            response.raise_for_status()
            return response.json()["url"]
        except (httpx.RequestError, httpx.HTTPStatusError, KeyError, ValueError) as e:
            logger.error(f"Blob upload error: {e}")
            raise StorageError(f"Blob upload failed for {filename}") from e
        finally:
            if self.client is None:
                client.close()


def get_storage() -> StoragePort:
    backend = (settings.STORAGE_BACKEND or "local").lower()
    if backend == "blob":
        return BlobStorage()
    if backend == "local":
        return LocalDiskStorage()
    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND}")
