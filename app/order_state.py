"""Order state holder: current selections plus subtotal, tax and total."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Mapping

from app.config import TAX_RATE
from app.debug_log import log_debug
from app.models import (
    UNSELECTED,
    ItemType,
    MenuItem,
    OrderSummary,
    Selected,
    Selection,
    price_of,
)
from app.observable import LiveValue, MutableLiveValue, publish_all
from app.rendering import format_currency

_ZERO = Decimal("0")


class OrderError(ValueError):
    """Base class for rejected order operations."""


class UnknownMenuItemError(OrderError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"No such menu item: {item_id!r}")
        self.item_id = item_id


class ItemTypeMismatchError(OrderError):
    def __init__(self, item: MenuItem, expected: ItemType) -> None:
        super().__init__(f"{item.name} is a {item.type.value}, not a {expected.value}")
        self.item = item
        self.expected = expected


class EmptyOrderError(OrderError):
    def __init__(self) -> None:
        super().__init__("Nothing to submit")


class OrderState:
    """
    Tracks the entree, side and accompaniment of one order.

    Every completed update leaves ``subtotal`` equal to the sum of the selected
    prices, ``tax == subtotal * tax_rate`` and ``total == subtotal + tax``.
    Rejected operations leave the state and its observers untouched. Amounts
    are kept as ``Decimal`` and only formatted when published.
    """

    def __init__(
        self,
        menu_items: Mapping[str, MenuItem],
        tax_rate: Decimal | float | str = TAX_RATE,
        currency_formatter: Callable[[Decimal], str] = format_currency,
    ) -> None:
        self.menu_items = menu_items
        self.tax_rate = tax_rate if isinstance(tax_rate, Decimal) else Decimal(str(tax_rate))

        self._entree: MutableLiveValue[Selection] = MutableLiveValue(UNSELECTED)
        self._side: MutableLiveValue[Selection] = MutableLiveValue(UNSELECTED)
        self._accompaniment: MutableLiveValue[Selection] = MutableLiveValue(UNSELECTED)
        self._subtotal: MutableLiveValue[Decimal] = MutableLiveValue(_ZERO)
        self._tax: MutableLiveValue[Decimal] = MutableLiveValue(_ZERO)
        self._total: MutableLiveValue[Decimal] = MutableLiveValue(_ZERO)

        self.entree: LiveValue[Selection] = self._entree
        self.side: LiveValue[Selection] = self._side
        self.accompaniment: LiveValue[Selection] = self._accompaniment
        self.subtotal: LiveValue[str] = self._subtotal.map(currency_formatter)
        self.tax: LiveValue[str] = self._tax.map(currency_formatter)
        self.total: LiveValue[str] = self._total.map(currency_formatter)

    @property
    def subtotal_amount(self) -> Decimal:
        return self._subtotal.value

    @property
    def tax_amount(self) -> Decimal:
        return self._tax.value

    @property
    def total_amount(self) -> Decimal:
        return self._total.value

    def select_entree(self, item_id: str) -> MenuItem:
        """Set the entree for the order."""
        return self._select(self._entree, ItemType.ENTREE, item_id)

    def select_side(self, item_id: str) -> MenuItem:
        """Set the side for the order."""
        return self._select(self._side, ItemType.SIDE, item_id)

    def select_accompaniment(self, item_id: str) -> MenuItem:
        """Set the accompaniment for the order."""
        return self._select(self._accompaniment, ItemType.ACCOMPANIMENT, item_id)

    def select(self, item_type: ItemType, item_id: str) -> MenuItem:
        """Dispatch to the select operation for ``item_type``."""
        slot = self._slot_for(item_type)
        return self._select(slot, item_type, item_id)

    def recompute_tax_and_total(self) -> None:
        """Recompute tax and total from the current subtotal."""
        tax, total = self._tax_and_total(self._subtotal.value)
        self._commit([(self._tax, tax), (self._total, total)])

    def reset(self) -> None:
        """Reset all values pertaining to the order."""
        self._commit(
            [
                (self._entree, UNSELECTED),
                (self._side, UNSELECTED),
                (self._accompaniment, UNSELECTED),
                (self._subtotal, _ZERO),
                (self._tax, _ZERO),
                (self._total, _ZERO),
            ]
        )
        log_debug("order_reset")

    def summary(self) -> OrderSummary:
        return OrderSummary(
            entree=self._entree.value,
            side=self._side.value,
            accompaniment=self._accompaniment.value,
            subtotal=self._subtotal.value,
            tax=self._tax.value,
            total=self._total.value,
        )

    def submit(self) -> OrderSummary:
        """Hand off the current order and start a fresh one."""
        summary = self.summary()
        if summary.is_empty:
            log_debug("order_submit_rejected reason=empty")
            raise EmptyOrderError()
        log_debug(f"order_submit total={summary.total}")
        self.reset()
        return summary

    def _slot_for(self, item_type: ItemType) -> MutableLiveValue[Selection]:
        if item_type is ItemType.ENTREE:
            return self._entree
        if item_type is ItemType.SIDE:
            return self._side
        return self._accompaniment

    def _select(
        self,
        slot: MutableLiveValue[Selection],
        item_type: ItemType,
        item_id: str,
    ) -> MenuItem:
        item = self.menu_items.get(item_id)
        if item is None:
            log_debug(f"select_rejected type={item_type.value} item_id={item_id!r} reason=unknown")
            raise UnknownMenuItemError(item_id)
        if item.type is not item_type:
            log_debug(f"select_rejected type={item_type.value} item_id={item_id!r} reason=type_mismatch")
            raise ItemTypeMismatchError(item, item_type)

        previous_price = price_of(slot.value)
        subtotal = self._subtotal.value - previous_price + item.price
        tax, total = self._tax_and_total(subtotal)

        self._commit(
            [
                (slot, Selected(item)),
                (self._subtotal, subtotal),
                (self._tax, tax),
                (self._total, total),
            ]
        )
        log_debug(f"select type={item_type.value} item_id={item_id!r} subtotal={subtotal} total={total}")
        return item

    def _tax_and_total(self, subtotal: Decimal) -> tuple[Decimal, Decimal]:
        tax = subtotal * self.tax_rate
        return tax, subtotal + tax

    @staticmethod
    def _commit(changes: list[tuple[MutableLiveValue, object]]) -> None:
        # Store every field before any listener runs so observers never see
        # a subtotal that disagrees with tax or total.
        changed = [live for live, value in changes if live.stage(value)]
        publish_all(changed)
