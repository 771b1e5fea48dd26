from __future__ import annotations

import io

import pytest

pytestmark = pytest.mark.unit

from sassy.domains.media.storage import LocalBucketStorage, StorageError


class _BrokenStream:
    """Yields one chunk, then fails like a dropped upload."""

    def __init__(self):
        self._sent = False

    def read(self, size=-1):
        if self._sent:
            raise OSError("connection reset")
        self._sent = True
        return b"partial"


@pytest.fixture()
def storage(tmp_path):
    return LocalBucketStorage(tmp_path, "uploads", "/media/")


def test_upload_does_not_overwrite(storage):
    storage.upload("products/a.png", io.BytesIO(b"first"))
    with pytest.raises(StorageError, match="object_exists"):
        storage.upload("products/a.png", io.BytesIO(b"second"))
    assert (storage.root / "products/a.png").read_bytes() == b"first"


def test_upsert_replaces_object(storage):
    storage.upload("a.png", io.BytesIO(b"first"))
    stored = storage.upload("a.png", io.BytesIO(b"second!"), upsert=True)
    assert stored.size == 7
    assert (storage.root / "a.png").read_bytes() == b"second!"


def test_failed_write_leaves_no_partial_file(storage):
    with pytest.raises(StorageError, match="write_failed"):
        storage.upload("broken.png", _BrokenStream())
    assert not (storage.root / "broken.png").exists()
    storage.upload("broken.png", io.BytesIO(b"retry"))
    assert (storage.root / "broken.png").read_bytes() == b"retry"


@pytest.mark.parametrize("key", ["../escape.png", "/etc/passwd", "", "."])
def test_invalid_keys_are_rejected(storage, key):
    with pytest.raises(StorageError, match="invalid_key"):
        storage.upload(key, io.BytesIO(b"x"))


def test_remove_and_public_url(storage):
    storage.upload("a.png", io.BytesIO(b"x"))
    assert storage.public_url("a.png") == "/media/a.png"
    assert storage.remove(["a.png", "missing.png"]) == ["a.png"]
