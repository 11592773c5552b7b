import json

import httpx
import pytest

from config import settings
from utils.storage import BlobStorage, LocalDiskStorage, StorageError, get_storage


def test_local_disk_writes_file(tmp_path):
    storage = LocalDiskStorage(root=tmp_path)

    path = storage.save("products", "a.png", b"data", "image/png")

    assert path == "/uploads/products/a.png"
    assert (tmp_path / "products" / "a.png").read_bytes() == b"data"


def test_blob_storage_puts_file_and_returns_url():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = request.content
        return httpx.Response(200, json={"url": "https://blob.example/products/a.png"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    storage = BlobStorage(api_url="https://blob.example/", token="tok", client=client)

    url = storage.save("products", "a.png", b"data", "image/png")

    assert url == "https://blob.example/products/a.png"
    assert seen == {
        "method": "PUT",
        "url": "https://blob.example/products/a.png",
        "auth": "Bearer tok",
        "body": b"data",
    }


@pytest.mark.parametrize("response", [
    httpx.Response(403, json={"error": "forbidden"}),
    httpx.Response(200, content=json.dumps({"pathname": "x"}).encode()),
])
def test_blob_storage_failures_raise_storage_error(response):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: response))
    storage = BlobStorage(api_url="https://blob.example", token="tok", client=client)

    with pytest.raises(StorageError):
        storage.save("products", "a.png", b"data", "image/png")


def test_blob_storage_requires_token():
    with pytest.raises(StorageError):
        BlobStorage(api_url="https://blob.example", token="").save("products", "a.png", b"", "image/png")


def test_get_storage_selects_by_config(monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "blob")
    assert isinstance(get_storage(), BlobStorage)

    monkeypatch.setattr(settings, "STORAGE_BACKEND", "local")
    assert isinstance(get_storage(), LocalDiskStorage)

    monkeypatch.setattr(settings, "STORAGE_BACKEND", "ftp")
    with pytest.raises(ValueError):
        get_storage()
