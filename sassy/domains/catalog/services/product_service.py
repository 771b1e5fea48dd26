"""Product service layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import or_

from sassy.domains.catalog.models.product_models import Product
from sassy.domains.catalog.schemas.catalog_schemas import ProductCreate
from sassy.extensions import db

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "name",
    "brand",
    "category",
    "subcategory",
    "image",
    "sizes",
    "concerns",
    "description",
    "featured",
    "published",
)
_CLEARABLE_FIELDS = frozenset({"subcategory", "image"})


def _contains(column, value: str):
    return column.icontains(value.strip(), autoescape=True)


def list_products(
    *,
    category: str | None = None,
    brand: str | None = None,
    featured: bool | None = None,
    search: str | None = None,
    include_unpublished: bool = False,
) -> List[Product]:
    """Products newest first; text filters are case-insensitive substring matches."""
    query = Product.query
    if not include_unpublished:
        query = query.filter(Product.published.is_(True))
    if category and category.strip():
        query = query.filter(_contains(Product.category, category))
    if brand and brand.strip():
        query = query.filter(_contains(Product.brand, brand))
    if featured:
        query = query.filter(Product.featured.is_(True))
    if search and search.strip():
        query = query.filter(
            or_(
                _contains(Product.name, search),
                _contains(Product.brand, search),
                _contains(Product.category, search),
                _contains(Product.subcategory, search),
            )
        )
    return query.order_by(Product.created_at.desc()).all()


def list_featured(limit: int = 8) -> List[Product]:
    return (
        Product.query.filter(Product.published.is_(True), Product.featured.is_(True))
        .order_by(Product.created_at.desc())
        .limit(limit)
        .all()
    )


def get_product(product_id: str, *, include_unpublished: bool = False) -> Optional[Product]:
    query = Product.query.filter_by(id=product_id)
    if not include_unpublished:
        query = query.filter(Product.published.is_(True))
    return query.first()


def count_products() -> int:
    return Product.query.count()


def create_product(author_id: str | None, payload: ProductCreate) -> Product:
    product = Product(
        name=payload.name,
        brand=payload.brand,
        category=payload.category,
        subcategory=payload.subcategory or None,
        image=payload.image or None,
        sizes=payload.sizes,
        concerns=payload.concerns,
        description=payload.description,
        featured=payload.featured,
        published=payload.published,
        author_id=author_id,
    )
    db.session.add(product)
    db.session.commit()
    logger.info("Created product %s (%s)", product.id, product.name)
    return product


def update_product(product_id: str, **fields) -> Optional[Product]:
    product = db.session.get(Product, product_id)
    if not product:
        return None
    for key in _UPDATABLE_FIELDS:
        if key not in fields:
            continue
        if key in _CLEARABLE_FIELDS:
            setattr(product, key, fields[key] or None)
        elif fields[key] is not None:
            setattr(product, key, fields[key])
    db.session.commit()
    return product


def set_product_image(product_id: str, image_url: str | None) -> bool:
    """Point a product at a new image (or clear it). Returns False if missing."""
    product = db.session.get(Product, product_id)
    if not product:
        return False
    product.image = image_url
    db.session.commit()
    return True


def delete_product(product_id: str) -> bool:
    product = db.session.get(Product, product_id)
    if not product:
        return False
    db.session.delete(product)
    db.session.commit()
    logger.info("Deleted product %s", product_id)
    return True
