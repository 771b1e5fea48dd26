"""In-memory catalog browsing: search, brand facets, overview and paging."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, List, Sequence
from urllib.parse import quote

from sassy.core.utils.pagination import paginate
from sassy.domains.catalog.models.product_models import Product


def brand_facets(products: Iterable[Product]) -> List[Dict[str, Any]]:
    """Product counts per brand, in first-seen order."""
    counts = Counter(p.brand for p in products)
    return [{"name": name, "count": count} for name, count in counts.items()]


def matches_search(product: Product, term: str) -> bool:
    term = term.strip().lower()
    if not term:
        return True
    haystack = " ".join(v for v in (product.name, product.subcategory, product.brand) if v)
    return term in haystack.lower()


def filter_products(products: Sequence[Product], *, search: str = "", brands: Sequence[str] = ()) -> List[Product]:
    selected = set(brands)
    return [
        p
        for p in products
        if matches_search(p, search) and (not selected or p.brand in selected)
    ]


def browse(
    products: Sequence[Product],
    *,
    search: str = "",
    brands: Sequence[str] = (),
    page: int = 1,
    per_page: int = 20,
) -> Dict[str, Any]:
    """Filter then paginate; facets are computed over the unfiltered list."""
    filtered = filter_products(products, search=search, brands=brands)
    result = paginate(filtered, page=page, per_page=per_page)
    result["facets"] = brand_facets(products)
    result["all_count"] = len(products)
    return result


def unique_brands(products: Iterable[Product]) -> List[str]:
    return sorted({p.brand for p in products if p.brand})


def unique_categories(products: Iterable[Product]) -> List[str]:
    return sorted({p.category for p in products if p.category})


def brand_overview(products: Iterable[Product]) -> List[Dict[str, Any]]:
    """One entry per brand with its product count and categories."""
    grouped: Dict[str, Dict[str, Any]] = {}
    for product in products:
        entry = grouped.setdefault(
            product.brand,
            {"name": product.brand, "product_count": 0, "categories": set(), "image": product.image},
        )
        entry["product_count"] += 1
        if product.category:
            entry["categories"].add(product.category)
        if not entry["image"] and product.image:
            entry["image"] = product.image
    return [
        {
            "name": entry["name"],
            "product_count": entry["product_count"],
            "categories": sorted(entry["categories"]),
            "image": entry["image"],
            "href": f"/categories/{quote(entry['name'])}",
        }
        for entry in grouped.values()
    ]
