"""Object storage for uploaded media.

Objects live in a bucket directory under ``UPLOAD_FOLDER`` and are served
publicly from ``MEDIA_PUBLIC_BASE_URL``. Keys may contain ``/`` to group
objects (``products/product-...png``).
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Iterable, List

from flask import current_app

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the bucket cannot complete an operation."""


@dataclass(frozen=True)
class StoredObject:
    key: str
    size: int
    created_at: datetime


class LocalBucketStorage:
    def __init__(self, root: str | Path, bucket: str, public_base_url: str):
        self.root = Path(root) / bucket
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    @classmethod
    def from_app(cls, app=None) -> "LocalBucketStorage":
        app = app or current_app
        return cls(
            app.config["UPLOAD_FOLDER"],
            app.config.get("MEDIA_BUCKET", "uploads"),
            app.config.get("MEDIA_PUBLIC_BASE_URL", "/media"),
        )

    def _path_for(self, key: str) -> Path:
        normalized = posixpath.normpath(key.strip())
        if normalized.startswith(("/", "..")) or normalized in ("", "."):
            raise StorageError(f"invalid_key:{key}")
        return self.root / normalized

    def upload(self, key: str, stream: BinaryIO, *, upsert: bool = False) -> StoredObject:
        path = self._path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = path.open("wb" if upsert else "xb")
        except FileExistsError as exc:
            raise StorageError(f"object_exists:{key}") from exc
        except OSError as exc:
            logger.exception("Failed to open object %s", key)
            raise StorageError(f"write_failed:{key}") from exc
        try:
            with fh:
                while True:
                    chunk = stream.read(64 * 1024)
                    if not chunk:
                        break
                    fh.write(chunk)
        except OSError as exc:
            logger.exception("Failed to write object %s", key)
            path.unlink(missing_ok=True)
            raise StorageError(f"write_failed:{key}") from exc
        return self.stat(key)

    def stat(self, key: str) -> StoredObject:
        stat = self._path_for(key).stat()
        return StoredObject(
            key=key,
            size=stat.st_size,
            created_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    def remove(self, keys: Iterable[str]) -> List[str]:
        """Delete objects; missing keys are skipped. Returns the removed keys."""
        removed = []
        for key in keys:
            path = self._path_for(key)
            if not path.is_file():
                continue
            try:
                path.unlink()
            except OSError as exc:
                logger.exception("Failed to delete object %s", key)
                raise StorageError(f"delete_failed:{key}") from exc
            removed.append(key)
        return removed

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"
