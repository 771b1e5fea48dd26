from __future__ import annotations

from flask import Blueprint, jsonify

from sassy.domains.storefront.stores import list_stores

storefront_api_bp = Blueprint("storefront_api", __name__)


@storefront_api_bp.get("/stores")
def api_list_stores():
    return jsonify({"ok": True, "items": list_stores()})
