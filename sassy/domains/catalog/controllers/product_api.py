"""Catalog API controllers."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sassy.core.auth.permissions import Action, Resource, has_permission
from sassy.core.auth.session import get_session
from sassy.core.utils.decorators import require_permission
from sassy.core.utils.validation import jsonable_errors, parse_json, parse_query
from sassy.domains.catalog import services
from sassy.domains.catalog.mappers import map_product
from sassy.domains.catalog.schemas.catalog_schemas import (
    CatalogBrowseFilter,
    ProductCreate,
    ProductListFilter,
    ProductUpdate,
)

product_api_bp = Blueprint("product_api", __name__)


def _validation_error(exc: ValidationError):
    return (
        jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}),
        400,
    )


def _is_staff() -> bool:
    user = get_session().user
    return user is not None and has_permission(user.role, Resource.PRODUCTS, Action.READ)


@product_api_bp.get("")
def list_products():
    params, err = parse_query(ProductListFilter)
    if err:
        return _validation_error(err)
    items = services.list_products(
        category=params.category,
        brand=params.brand,
        featured=params.featured,
        search=params.search,
    )
    return jsonify({"ok": True, "items": [map_product(p) for p in items], "total": len(items)})


@product_api_bp.get("/browse")
def browse_products():
    try:
        params = CatalogBrowseFilter.model_validate(
            {
                "search": request.args.get("search", ""),
                "brands": request.args.getlist("brand"),
                "page": request.args.get("page", 1),
            }
        )
    except ValidationError as exc:
        return _validation_error(exc)
    result = services.browse(
        services.list_products(),
        search=params.search,
        brands=params.brands,
        page=params.page,
        per_page=current_app.config.get("CATALOG_PAGE_SIZE", 20),
    )
    result["items"] = [map_product(p) for p in result["items"]]
    return jsonify({"ok": True, **result})


@product_api_bp.get("/featured")
def featured_products():
    limit = current_app.config.get("FEATURED_PRODUCTS_LIMIT", 8)
    return jsonify({"ok": True, "items": [map_product(p) for p in services.list_featured(limit)]})


@product_api_bp.get("/brands")
def list_brands():
    return jsonify({"ok": True, "items": services.unique_brands(services.list_products())})


@product_api_bp.get("/categories")
def list_categories():
    return jsonify({"ok": True, "items": services.unique_categories(services.list_products())})


@product_api_bp.get("/brand-overview")
def brand_overview():
    return jsonify({"ok": True, "items": services.brand_overview(services.list_products())})


@product_api_bp.get("/<product_id>")
def get_product(product_id: str):
    product = services.get_product(product_id, include_unpublished=_is_staff())
    if not product:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "product": map_product(product)})


@product_api_bp.post("")
@require_permission(Resource.PRODUCTS, Action.CREATE)
def create_product():
    data, err = parse_json(ProductCreate)
    if err:
        return _validation_error(err)
    product = services.create_product(get_session().user.id, data)
    return jsonify({"ok": True, "product": map_product(product)}), 201


@product_api_bp.patch("/<product_id>")
@require_permission(Resource.PRODUCTS, Action.UPDATE)
def update_product(product_id: str):
    data, err = parse_json(ProductUpdate)
    if err:
        return _validation_error(err)
    product = services.update_product(product_id, **data.model_dump(exclude_unset=True))
    if not product:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "product": map_product(product)})


@product_api_bp.delete("/<product_id>")
@require_permission(Resource.PRODUCTS, Action.DELETE)
def delete_product(product_id: str):
    if not services.delete_product(product_id):
        return jsonify({"ok": False, "error": "not_found"}), 404
    return "", 204
