from __future__ import annotations

from datetime import datetime, timedelta

import pytest

pytestmark = pytest.mark.integration

from sassy.domains.catalog.models.product_models import Product
from sassy.extensions import db

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def _product(offset: int = 0, **fields) -> Product:
    values = {"name": "Rose Serum", "brand": "Glow", "category": "Skincare"}
    values.update(fields)
    product = Product(created_at=BASE_TIME + timedelta(minutes=offset), **values)
    db.session.add(product)
    db.session.commit()
    return product


def test_public_list_hides_unpublished_and_orders_newest_first(client):
    _product(0, name="Old Cream")
    _product(5, name="New Cream")
    _product(10, name="Draft Cream", published=False)

    body = client.get("/api/products").get_json()
    assert [p["name"] for p in body["items"]] == ["New Cream", "Old Cream"]
    assert body["total"] == 2


def test_list_filters(client):
    _product(0, name="Matte Lipstick", brand="Velvet", category="Lips", subcategory="Lipstick")
    _product(1, name="Hydra Gel", brand="Glow", category="Skincare", featured=True)
    _product(2, name="Night Balm", brand="glow labs", category="Skincare")

    def names(query):
        return sorted(p["name"] for p in client.get(f"/api/products?{query}").get_json()["items"])

    assert names("category=lips") == ["Matte Lipstick"]
    assert names("brand=GLOW") == ["Hydra Gel", "Night Balm"]
    assert names("featured=true") == ["Hydra Gel"]
    assert names("featured=false") == ["Hydra Gel", "Matte Lipstick", "Night Balm"]
    assert names("search=lipstick") == ["Matte Lipstick"]
    assert names("search=skin") == ["Hydra Gel", "Night Balm"]


def test_product_detail_visibility(client, editor_client):
    live = _product(0, name="Live")
    draft = _product(1, name="Draft", published=False)

    assert client.get(f"/api/products/{live.id}").status_code == 200
    assert client.get(f"/api/products/{draft.id}").status_code == 404
    resp = editor_client.get(f"/api/products/{draft.id}")
    assert resp.status_code == 200
    assert resp.get_json()["product"]["published"] is False
    assert client.get("/api/products/prod_missing").get_json()["error"] == "not_found"


def test_admin_creates_product_as_author(admin_client, admin_user):
    resp = admin_client.post(
        "/api/products",
        json={
            "name": "Glow Drops",
            "brand": "Glow",
            "category": "Skincare",
            "sizes": [" 30ml ", "", "50ml"],
            "concerns": ["Dryness"],
        },
    )
    assert resp.status_code == 201
    product = resp.get_json()["product"]
    assert product["sizes"] == ["30ml", "50ml"]
    assert product["author"] == {"name": "admin"}
    assert product["published"] is True
    assert db.session.get(Product, product["id"]).author_id == admin_user.id


def test_create_product_validation(admin_client):
    resp = admin_client.post("/api/products", json={"name": "No brand"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_editor_cannot_create_or_delete_products(editor_client):
    product = _product()
    assert editor_client.post("/api/products", json={"name": "X", "brand": "Y", "category": "Z"}).status_code == 403
    assert editor_client.delete(f"/api/products/{product.id}").status_code == 403
    assert db.session.get(Product, product.id) is not None


def test_editor_updates_product(editor_client):
    product = _product(name="Old Name", featured=False)
    resp = editor_client.patch(f"/api/products/{product.id}", json={"name": " New Name ", "featured": True})
    assert resp.status_code == 200
    body = resp.get_json()["product"]
    assert body["name"] == "New Name"
    assert body["featured"] is True
    assert body["brand"] == "Glow"
    assert editor_client.patch("/api/products/prod_missing", json={"name": "x"}).status_code == 404


def test_anonymous_cannot_mutate(client):
    product = _product()
    assert client.post("/api/products", json={}).status_code == 401
    assert client.patch(f"/api/products/{product.id}", json={"name": "x"}).status_code == 401
    assert client.delete(f"/api/products/{product.id}").status_code == 401


def test_admin_deletes_product(admin_client):
    product = _product()
    assert admin_client.delete(f"/api/products/{product.id}").status_code == 204
    assert admin_client.delete(f"/api/products/{product.id}").status_code == 404


def test_featured_endpoint_limits_results(app, client):
    app.config["FEATURED_PRODUCTS_LIMIT"] = 2
    for i in range(3):
        _product(i, name=f"Star {i}", featured=True)
    _product(10, name="Plain")
    names = [p["name"] for p in client.get("/api/products/featured").get_json()["items"]]
    assert names == ["Star 2", "Star 1"]


def test_blank_required_fields_are_rejected(admin_client):
    resp = admin_client.post("/api/products", json={"name": "   ", "brand": "  ", "category": " "})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"
    assert Product.query.count() == 0

    product = _product(name="Keep Me")
    resp = admin_client.patch(f"/api/products/{product.id}", json={"name": "   "})
    assert resp.status_code == 400
    assert db.session.get(Product, product.id).name == "Keep Me"


def test_create_trims_text_fields(admin_client):
    resp = admin_client.post(
        "/api/products",
        json={"name": "  Glow Drops ", "brand": " Glow", "category": "Skincare  ", "subcategory": "   "},
    )
    assert resp.status_code == 201
    body = resp.get_json()["product"]
    assert (body["name"], body["brand"], body["category"]) == ("Glow Drops", "Glow", "Skincare")
    assert body["subcategory"] is None


def test_search_treats_wildcards_literally(client):
    _product(0, name="Rose Oil")
    _product(1, name="100% Argan", brand="Pure")
    _product(2, name="Night_Balm", brand="Calm")

    def names(query):
        return sorted(p["name"] for p in client.get("/api/products", query_string=query).get_json()["items"])

    assert names({"search": "_"}) == ["Night_Balm"]
    assert names({"search": "%"}) == ["100% Argan"]
    assert names({"brand": "p%e"}) == []


def test_patch_can_clear_optional_fields(editor_client):
    product = _product(subcategory="Oils", image="/media/products/rose.png")
    resp = editor_client.patch(f"/api/products/{product.id}", json={"subcategory": None, "image": None})
    assert resp.status_code == 200
    body = resp.get_json()["product"]
    assert body["subcategory"] is None
    assert body["image"] is None
    assert body["name"] == "Rose Serum"


def test_patch_ignores_null_for_required_fields(editor_client):
    product = _product(name="Rose Serum")
    resp = editor_client.patch(f"/api/products/{product.id}", json={"name": None, "featured": True})
    assert resp.status_code == 200
    assert resp.get_json()["product"]["name"] == "Rose Serum"
    assert resp.get_json()["product"]["featured"] is True
