"""Admin dashboard endpoints."""

from __future__ import annotations

from flask import Blueprint, jsonify

from sassy.core.auth.permissions import Role
from sassy.core.users.services import count_users
from sassy.core.utils.decorators import require_roles
from sassy.domains.catalog.services import count_products
from sassy.domains.media.services import count_media

admin_api_bp = Blueprint("admin_api", __name__)


@admin_api_bp.get("/stats")
@require_roles({Role.ADMIN, Role.EDITOR})
def dashboard_stats():
    """Headline counts for the dashboard cards."""
    stats = {
        "products": {"value": count_products()},
        "media": {"value": count_media()},
        "users": {"value": count_users()},
    }
    return jsonify({"ok": True, "stats": stats})
