"""Staff user admin API."""

from __future__ import annotations

from flask import Blueprint, jsonify

from sassy.core.auth.permissions import Action, Resource
from sassy.core.auth.session import get_session
from sassy.core.users.schemas import RoleUpdateRequest, UserCreateRequest, serialize_user
from sassy.core.users.services import create_user, delete_user, get_user, list_users, update_role
from sassy.core.utils.decorators import require_permission
from sassy.core.utils.validation import jsonable_errors, parse_json

user_api_bp = Blueprint("user_api", __name__)

_FORBIDDEN_CODES = {"cannot_change_own_role", "cannot_delete_self"}


def _validation_error(exc):
    return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400


@user_api_bp.get("")
@require_permission(Resource.USERS, Action.READ)
def api_list_users():
    return jsonify({"ok": True, "items": [serialize_user(u) for u in list_users()]})


@user_api_bp.post("")
@require_permission(Resource.USERS, Action.CREATE)
def api_create_user():
    data, err = parse_json(UserCreateRequest)
    if err:
        return _validation_error(err)
    try:
        user = create_user(data)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 409
    return jsonify({"ok": True, "user": serialize_user(user)}), 201


@user_api_bp.get("/<user_id>")
@require_permission(Resource.USERS, Action.READ)
def api_get_user(user_id: str):
    user = get_user(user_id)
    if not user:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_user(user)})


@user_api_bp.patch("/<user_id>")
@require_permission(Resource.USERS, Action.UPDATE)
def api_update_role(user_id: str):
    data, err = parse_json(RoleUpdateRequest)
    if err:
        return _validation_error(err)
    try:
        user = update_role(user_id, data.role, acting_user_id=get_session().user.id)
    except ValueError as exc:
        return jsonify({"ok": False, "error": str(exc)}), 403
    if not user:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_user(user)})


@user_api_bp.delete("/<user_id>")
@require_permission(Resource.USERS, Action.DELETE)
def api_delete_user(user_id: str):
    try:
        deleted = delete_user(user_id, acting_user_id=get_session().user.id)
    except ValueError as exc:
        code = str(exc)
        return jsonify({"ok": False, "error": code}), 403 if code in _FORBIDDEN_CODES else 409
    if not deleted:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return "", 204
