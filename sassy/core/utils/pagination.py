"""Pagination helper for in-memory result lists."""

from __future__ import annotations

import math
from typing import Any, Dict, Sequence


def paginate(items: Sequence[Any], page: int = 1, per_page: int = 20) -> Dict[str, Any]:
    per_page = max(min(per_page, 100), 1)
    total = len(items)
    pages = math.ceil(total / per_page)
    page = max(min(page, pages), 1)
    start = (page - 1) * per_page
    return {
        "items": list(items[start : start + per_page]),
        "page": page,
        "per_page": per_page,
        "pages": pages,
        "total": total,
    }
