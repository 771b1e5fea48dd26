"""Auth HTTP controllers."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify

from sassy.core.auth.auth_service import authenticate_user, start_session
from sassy.core.auth.permissions import allowed_actions
from sassy.core.auth.schemas import LoginRequest
from sassy.core.auth.session import get_session
from sassy.core.users.schemas import serialize_user
from sassy.core.utils.validation import jsonable_errors, parse_json
from sassy.extensions import limiter

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/login")
@limiter.limit("10/minute")
def login():
    data, err = parse_json(LoginRequest)
    if err:
        return (
            jsonify({"ok": False, "error": "bad_request", "details": jsonable_errors(err)}),
            400,
        )
    user = authenticate_user(data.name, data.password)
    if not user:
        logger.info("Rejected login for %r", data.name)
        return jsonify({"ok": False, "error": "invalid_credentials"}), 401
    start_session(get_session(), user)
    return jsonify({"ok": True, "user": serialize_user(user)})


@auth_bp.post("/logout")
def logout():
    get_session().destroy()
    return jsonify({"ok": True, "message": "Logged out successfully"})


@auth_bp.get("/me")
def me():
    user = get_session().user
    if user is None:
        return jsonify({"ok": False, "error": "not_authenticated"}), 401
    return jsonify(
        {
            "ok": True,
            "user": user.to_dict(),
            "permissions": allowed_actions(user.role),
        }
    )
