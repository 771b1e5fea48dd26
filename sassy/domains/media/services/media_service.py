"""Media library and product image uploads."""

from __future__ import annotations

import logging
import re
import secrets
import time
from typing import List, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from sassy.domains.catalog.services.product_service import set_product_image
from sassy.domains.media.models import Media
from sassy.domains.media.storage import LocalBucketStorage, StoredObject
from sassy.extensions import db

logger = logging.getLogger(__name__)

_KIND_RE = re.compile(r"^[a-z][a-z0-9_-]{0,31}$")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _record(storage: LocalBucketStorage, stored: StoredObject, file: FileStorage, author_id: str | None) -> Media:
    media = Media(
        name=file.filename or stored.key,
        key=stored.key,
        url=storage.public_url(stored.key),
        size=stored.size,
        content_type=file.mimetype or None,
        author_id=author_id,
    )
    db.session.add(media)
    db.session.commit()
    return media


def list_media() -> List[Media]:
    return Media.query.order_by(Media.created_at.desc()).all()


def count_media() -> int:
    return Media.query.count()


def get_media_by_key(key: str) -> Optional[Media]:
    return Media.query.filter_by(key=key).first()


def upload_media(file: FileStorage | None, *, author_id: str | None, storage: LocalBucketStorage | None = None) -> Media:
    """Store a library upload as ``<ms-timestamp>-<safe name>``."""
    if file is None or not file.filename:
        raise ValueError("no_file")
    safe_name = secure_filename(file.filename)
    if not safe_name:
        raise ValueError("invalid_filename")
    storage = storage or LocalBucketStorage.from_app()
    key = f"{_now_ms()}-{safe_name}"
    stored = storage.upload(key, file.stream)
    media = _record(storage, stored, file, author_id)
    logger.info("Uploaded media %s (%d bytes)", key, media.size)
    return media


def delete_media(key: str, *, storage: LocalBucketStorage | None = None) -> bool:
    """Remove an object and its library row. Returns False if neither existed."""
    storage = storage or LocalBucketStorage.from_app()
    removed = storage.remove([key])
    media = get_media_by_key(key)
    if media:
        db.session.delete(media)
        db.session.commit()
    return bool(removed) or media is not None


def upload_image(
    file: FileStorage | None,
    *,
    kind: str = "product",
    product_id: str | None = None,
    author_id: str | None = None,
    storage: LocalBucketStorage | None = None,
) -> dict:
    """Upload an image under ``<kind>s/`` and attach it to a product if asked."""
    if file is None or not file.filename:
        raise ValueError("no_file")
    if not (file.mimetype or "").startswith("image/"):
        raise ValueError("not_an_image")
    if not _KIND_RE.match(kind):
        raise ValueError("invalid_type")
    storage = storage or LocalBucketStorage.from_app()
    extension = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else "img"
    file_name = f"{kind}-{_now_ms()}-{secrets.token_hex(3)}.{secure_filename(extension) or 'img'}"
    key = f"{kind}s/{file_name}"
    stored = storage.upload(key, file.stream)
    media = _record(storage, stored, file, author_id)

    if product_id and kind == "product":
        if not set_product_image(product_id, media.url):
            logger.warning("Uploaded %s but product %s does not exist", key, product_id)
    return {"url": media.url, "key": key, "file_name": file_name}


def delete_image(key: str, *, product_id: str | None = None, storage: LocalBucketStorage | None = None) -> None:
    """Remove an uploaded image and clear it from the product, if given."""
    delete_media(key, storage=storage)
    if product_id and not set_product_image(product_id, None):
        logger.warning("Deleted %s but product %s does not exist", key, product_id)
