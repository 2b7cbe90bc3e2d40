"""Static menu data."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from app.constant import MENU_CATALOG
from app.models import ItemType, MenuItem


def build_menu_items(catalog: Mapping[str, Mapping[str, str]]) -> dict[str, MenuItem]:
    """Convert raw catalog rows into MenuItem records keyed by item id."""
    items: dict[str, MenuItem] = {}
    for item_id, row in catalog.items():
        price = Decimal(row["price"])
        if price < 0:
            raise ValueError(f"Menu item {item_id!r} has a negative price")
        items[item_id] = MenuItem(
            item_id=item_id,
            name=str(row["name"]),
            description=str(row.get("description", "")),
            price=price,
            type=ItemType(row["type"]),
        )
    return items


def menu_items_of_type(menu_items: Mapping[str, MenuItem], item_type: ItemType) -> list[MenuItem]:
    """Items of one category, in catalog order."""
    return [item for item in menu_items.values() if item.type is item_type]


MENU_ITEMS: dict[str, MenuItem] = build_menu_items(MENU_CATALOG)
