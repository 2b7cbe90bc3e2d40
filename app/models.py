"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ItemType(str, Enum):
    """Menu category an item can be ordered as."""

    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class MenuItem:
    """An orderable menu item."""

    item_id: str
    name: str
    description: str
    price: Decimal
    type: ItemType


@dataclass(frozen=True)
class Unselected:
    """No item picked for a category yet."""


@dataclass(frozen=True)
class Selected:
    """A category holding one picked menu item."""

    item: MenuItem


UNSELECTED = Unselected()

Selection = Unselected | Selected


def price_of(selection: Selection) -> Decimal:
    """Price contributed by a selection; zero when nothing is picked."""
    if isinstance(selection, Selected):
        return selection.item.price
    return Decimal("0")


def item_of(selection: Selection) -> MenuItem | None:
    if isinstance(selection, Selected):
        return selection.item
    return None


@dataclass(frozen=True)
class OrderSummary:
    """Immutable snapshot of an order and its raw amounts."""

    entree: Selection
    side: Selection
    accompaniment: Selection
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    @property
    def is_empty(self) -> bool:
        return all(isinstance(s, Unselected) for s in (self.entree, self.side, self.accompaniment))
