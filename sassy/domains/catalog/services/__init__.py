from sassy.domains.catalog.services.browse_service import (
    brand_overview,
    browse,
    unique_brands,
    unique_categories,
)
from sassy.domains.catalog.services.product_service import (
    count_products,
    create_product,
    delete_product,
    get_product,
    list_featured,
    list_products,
    set_product_image,
    update_product,
)

__all__ = [
    "browse",
    "brand_overview",
    "unique_brands",
    "unique_categories",
    "count_products",
    "create_product",
    "delete_product",
    "get_product",
    "list_featured",
    "list_products",
    "set_product_image",
    "update_product",
]
