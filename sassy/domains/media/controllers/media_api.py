"""Media library, image upload and public file routes."""

from __future__ import annotations

from flask import Blueprint, abort, jsonify, request, send_from_directory

from sassy.core.auth.permissions import Action, Resource
from sassy.core.auth.session import get_session
from sassy.core.utils.decorators import require_permission
from sassy.domains.media.mappers import map_media
from sassy.domains.media.services import (
    delete_image,
    delete_media,
    list_media,
    upload_image,
    upload_media,
)
from sassy.domains.media.storage import LocalBucketStorage, StorageError


media_api_bp = Blueprint("media_api", __name__)
upload_api_bp = Blueprint("upload_api", __name__)
media_files_bp = Blueprint("media_files", __name__)

_STORAGE_STATUS = {"object_exists": 409, "invalid_key": 400}


def _storage_error(exc: StorageError):
    code = str(exc).split(":", 1)[0]
    return jsonify({"ok": False, "error": code}), _STORAGE_STATUS.get(code, 500)


@media_api_bp.get("")
@require_permission(Resource.MEDIA, Action.READ)
def api_list_media():
    return jsonify({"ok": True, "items": [map_media(m) for m in list_media()]})


@media_api_bp.post("")
@require_permission(Resource.MEDIA, Action.CREATE)
def api_upload_media():
    try:
        media = upload_media(request.files.get("file"), author_id=get_session().user.id)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    except StorageError as exc:
        return _storage_error(exc)
    return jsonify({"ok": True, "media": map_media(media)}), 201


@media_api_bp.delete("")
@require_permission(Resource.MEDIA, Action.DELETE)
def api_delete_media():
    payload = request.get_json(silent=True) or {}
    name = payload.get("name")
    if not name or not isinstance(name, str):
        return jsonify({"ok": False, "error": "name_required"}), 400
    try:
        deleted = delete_media(name)
    except StorageError as exc:
        return _storage_error(exc)
    if not deleted:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True})


@upload_api_bp.post("")
@require_permission(Resource.PRODUCTS, Action.UPDATE)
def api_upload_image():
    try:
        result = upload_image(
            request.files.get("file"),
            kind=request.form.get("type") or "product",
            product_id=request.form.get("productId") or None,
            author_id=get_session().user.id,
        )
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 400
    except StorageError as exc:
        return _storage_error(exc)
    return jsonify({"ok": True, **result}), 201


@upload_api_bp.delete("")
@require_permission(Resource.PRODUCTS, Action.UPDATE)
def api_delete_image():
    key = request.args.get("key")
    if not key:
        return jsonify({"ok": False, "error": "key_required"}), 400
    try:
        delete_image(key, product_id=request.args.get("productId") or None)
    except StorageError as exc:
        return _storage_error(exc)
    return jsonify({"ok": True})


@media_files_bp.get("/<path:key>")
def serve_media(key: str):
    storage = LocalBucketStorage.from_app()
    if not storage.root.is_dir():
        abort(404)
    return send_from_directory(storage.root, key)
