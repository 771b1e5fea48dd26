"""DTO mappers for the catalog."""

from __future__ import annotations

from sassy.domains.catalog.models.product_models import Product


def map_product(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "image": product.image,
        "brand": product.brand,
        "category": product.category,
        "subcategory": product.subcategory,
        "sizes": product.sizes or [],
        "concerns": product.concerns or [],
        "description": product.description,
        "featured": bool(product.featured),
        "published": bool(product.published),
        "author": {"name": product.author.name if product.author else "Unknown"},
        "created_at": product.created_at.isoformat() if product.created_at else None,
        "updated_at": product.updated_at.isoformat() if product.updated_at else None,
    }
