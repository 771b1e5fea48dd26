from __future__ import annotations

import pytest

from sassy.core.utils.pagination import paginate
from sassy.domains.catalog.models.product_models import Product
from sassy.domains.catalog.services.browse_service import (
    brand_facets,
    brand_overview,
    browse,
    matches_search,
    unique_brands,
    unique_categories,
)
from sassy.extensions import db


def _make(name, brand, category="Skincare", subcategory=None, image=None) -> Product:
    return Product(name=name, brand=brand, category=category, subcategory=subcategory, image=image)


CATALOG = [
    _make("Rose Toner", "Glow", subcategory="Toner"),
    _make("Clay Mask", "Earth", subcategory="Masks", image="/media/products/mask.png"),
    _make("Lip Tint", "Glow", category="Lips"),
    _make("Night Cream", "Velvet Co", subcategory="Moisturiser"),
]


@pytest.mark.unit
def test_paginate_clamps_page_and_per_page():
    items = list(range(45))
    result = paginate(items, page=9, per_page=20)
    assert result["page"] == 3
    assert result["pages"] == 3
    assert result["items"] == list(range(40, 45))
    assert paginate(items, page=0, per_page=20)["page"] == 1
    assert paginate(items, per_page=1000)["per_page"] == 100
    empty = paginate([], page=4)
    assert empty["page"] == 1
    assert empty["pages"] == 0
    assert empty["items"] == []


@pytest.mark.unit
def test_search_matches_name_subcategory_and_brand():
    toner, mask, tint, cream = CATALOG
    assert matches_search(toner, "ROSE")
    assert matches_search(mask, "masks")
    assert matches_search(cream, "velvet")
    assert not matches_search(tint, "skincare")
    assert matches_search(tint, "   ")


@pytest.mark.unit
def test_browse_filters_by_brand_and_keeps_unfiltered_facets():
    result = browse(CATALOG, brands=["Glow"], page=1, per_page=20)
    assert [p.name for p in result["items"]] == ["Rose Toner", "Lip Tint"]
    assert result["total"] == 2
    assert result["all_count"] == 4
    assert result["facets"] == [
        {"name": "Glow", "count": 2},
        {"name": "Earth", "count": 1},
        {"name": "Velvet Co", "count": 1},
    ]


@pytest.mark.unit
def test_browse_combines_search_and_brands():
    result = browse(CATALOG, search="tint", brands=["Glow", "Earth"])
    assert [p.name for p in result["items"]] == ["Lip Tint"]


@pytest.mark.unit
def test_unique_brands_and_categories():
    assert unique_brands(CATALOG) == ["Earth", "Glow", "Velvet Co"]
    assert unique_categories(CATALOG) == ["Lips", "Skincare"]
    assert brand_facets([]) == []


@pytest.mark.unit
def test_brand_overview():
    overview = {entry["name"]: entry for entry in brand_overview(CATALOG)}
    assert overview["Glow"]["product_count"] == 2
    assert overview["Glow"]["categories"] == ["Lips", "Skincare"]
    assert overview["Glow"]["image"] is None
    assert overview["Earth"]["image"] == "/media/products/mask.png"
    assert overview["Velvet Co"]["href"] == "/categories/Velvet%20Co"


@pytest.mark.integration
def test_browse_endpoint(app, client):
    app.config["CATALOG_PAGE_SIZE"] = 2
    for name, brand in [("A Serum", "Glow"), ("B Serum", "Glow"), ("C Serum", "Glow"), ("D Oil", "Earth")]:
        db.session.add(Product(name=name, brand=brand, category="Skincare"))
    db.session.commit()

    body = client.get("/api/products/browse?brand=Glow&page=5").get_json()
    assert body["page"] == 2
    assert body["pages"] == 2
    assert body["total"] == 3
    assert len(body["items"]) == 1
    assert {f["name"]: f["count"] for f in body["facets"]} == {"Glow": 3, "Earth": 1}

    body = client.get("/api/products/browse?brand=Glow&brand=Earth&search=oil").get_json()
    assert [p["name"] for p in body["items"]] == ["D Oil"]
    assert client.get("/api/products/browse?page=0").get_json()["page"] == 1
    assert client.get("/api/products/browse?page=abc").status_code == 400


@pytest.mark.integration
def test_brand_and_category_endpoints(client):
    db.session.add(Product(name="Tint", brand="Glow", category="Lips"))
    db.session.add(Product(name="Mask", brand="Earth", category="Skincare"))
    db.session.add(Product(name="Hidden", brand="Secret", category="Hair", published=False))
    db.session.commit()

    assert client.get("/api/products/brands").get_json()["items"] == ["Earth", "Glow"]
    assert client.get("/api/products/categories").get_json()["items"] == ["Lips", "Skincare"]
    overview = client.get("/api/products/brand-overview").get_json()["items"]
    assert sorted(entry["name"] for entry in overview) == ["Earth", "Glow"]
