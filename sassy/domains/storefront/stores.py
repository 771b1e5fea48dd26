"""Retail partners listed on the store locator."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Store:
    name: str
    address: str
    phone: Optional[str] = None


STORES: tuple[Store, ...] = (
    Store("Panda Mart", "Garden City Mall, Thika Road, Nairobi", "0202 311 166"),
    Store("Magunas", "All Outlets"),
    Store("Best Lady", "All Outlets"),
    Store("Mathais Supermarket", "Multiple locations in Central Kenya"),
    Store("Powerstar Supermarket", "Eastlands, Nairobi"),
    Store("Jamaa Supermarket", "Downtown, Nakuru", "0722 123 456"),
)


def list_stores() -> List[dict]:
    return [asdict(store) for store in STORES]
