"""Main Textual app class."""

from __future__ import annotations

from typing import Callable, Mapping

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from app.checkout_modal import CheckoutModal
from app.data import MENU_ITEMS, menu_items_of_type
from app.debug_log import log_debug
from app.models import ItemType, MenuItem, Selection, item_of
from app.order_state import OrderError, OrderState
from app.rendering import badge_style, format_currency, format_menu_item, format_selection


class LunchTrayApp(App):
    """A Textual app for picking an entree, side and accompaniment."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-selections {
        margin-bottom: 1;
    }

    #order-totals {
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        margin-top: 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category = reactive(ItemType.ENTREE)
    cursor_index = reactive(0)

    BINDINGS = [
        ("e", "show_category('entree')", "Entrees"),
        ("s", "show_category('side')", "Sides"),
        ("a", "show_category('accompaniment')", "Accompaniments"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("j", "move_cursor(1)", "Next item"),
        ("enter", "select_current", "Select item"),
        ("ctrl+r", "cancel_order", "Cancel order"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, menu_items: Mapping[str, MenuItem] | None = None, order: OrderState | None = None) -> None:
        super().__init__()
        self.menu_items = menu_items if menu_items is not None else MENU_ITEMS
        self.order = order if order is not None else OrderState(self.menu_items)
        self.system_status = ""
        self._unsubscribers: list[Callable[[], None]] = []
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="menu-title", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-selections")
                yield Static(id="order-totals")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        for live in (self.order.entree, self.order.side, self.order.accompaniment):
            self._unsubscribers.append(live.subscribe(self._on_selection_changed))
        for live in (self.order.subtotal, self.order.tax, self.order.total):
            self._unsubscribers.append(live.subscribe(self._on_totals_changed))
        self._refresh_menu()
        self._refresh_status()
        log_debug(f"on_mount items={len(self.menu_items)}")

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def action_show_category(self, category: str) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        self.category = ItemType(category)
        self.cursor_index = self._selected_index_in_category()
        self._refresh_menu()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        items = self._category_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self._refresh_menu()

    def action_select_current(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        items = self._category_items()
        if not items:
            return

        item = items[self.cursor_index]
        try:
            self.order.select(self.category, item.item_id)
        except OrderError as exc:
            self.system_status = str(exc)
            self._refresh_status()
            log_debug(f"select_failed item_id={item.item_id!r} error={exc!r}")
            return

        self.system_status = f"Added {item.name}"
        self._refresh_status()
        self._refresh_menu()

    def action_cancel_order(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        self.order.reset()
        self.system_status = "Order cancelled"
        self._refresh_status()
        self._refresh_menu()

    def action_checkout(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        summary = self.order.summary()
        if summary.is_empty:
            self.system_status = "Nothing to submit"
            self._refresh_status()
            log_debug("checkout_blocked reason=empty")
            return
        self.push_screen(CheckoutModal(summary), callback=self._on_checkout_closed)

    def _on_checkout_closed(self, confirmed: bool | None) -> None:
        if not confirmed:
            log_debug("checkout_dismissed")
            return

        try:
            submitted = self.order.submit()
        except OrderError as exc:
            self.system_status = str(exc)
            self._refresh_status()
            log_debug(f"checkout_failed error={exc!r}")
            return

        self.system_status = f"Order submitted: {format_currency(submitted.total)}"
        self.category = ItemType.ENTREE
        self.cursor_index = 0
        self._refresh_status()
        self._refresh_menu()

    def _on_selection_changed(self, _selection: Selection) -> None:
        self._refresh_selections()

    def _on_totals_changed(self, _formatted: str) -> None:
        self._refresh_totals()

    def _category_items(self) -> list[MenuItem]:
        return menu_items_of_type(self.menu_items, self.category)

    def _current_selection(self) -> Selection:
        if self.category is ItemType.ENTREE:
            return self.order.entree.value
        if self.category is ItemType.SIDE:
            return self.order.side.value
        return self.order.accompaniment.value

    def _selected_index_in_category(self) -> int:
        selected = item_of(self._current_selection())
        if selected is None:
            return 0
        for idx, item in enumerate(self._category_items()):
            if item.item_id == selected.item_id:
                return idx
        return 0

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#menu-title", Static)
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        heading = Text()
        heading.append(f" {self.category.label} ", style=badge_style(self.category))
        heading.append("  E/S/A switch, J/K move, Enter select")
        title.update(heading)

        items = self._category_items()
        if not items:
            menu_widget.update("(no items)")
            return
        if self.cursor_index >= len(items):
            self.cursor_index = 0

        selected = item_of(self._current_selection())
        lines = Text()
        for idx, item in enumerate(items):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            lines.append(pointer)
            is_selected = selected is not None and selected.item_id == item.item_id
            lines.append_text(format_menu_item(item, selected=is_selected))
        menu_widget.update(lines)

    def _refresh_selections(self) -> None:
        try:
            widget = self.query_one("#order-selections", Static)
        except NoMatches:
            return
        text = Text()
        rows = (
            (ItemType.ENTREE, self.order.entree.value),
            (ItemType.SIDE, self.order.side.value),
            (ItemType.ACCOMPANIMENT, self.order.accompaniment.value),
        )
        for idx, (item_type, selection) in enumerate(rows):
            if idx > 0:
                text.append("\n")
            text.append_text(format_selection(item_type, selection))
        widget.update(text)

    def _refresh_totals(self) -> None:
        try:
            widget = self.query_one("#order-totals", Static)
        except NoMatches:
            return
        text = Text()
        text.append(f"Subtotal: {self.order.subtotal.value}\n")
        text.append(f"Tax: {self.order.tax.value}\n")
        text.append(f"Total: {self.order.total.value}", style="bold")
        widget.update(text)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(f"Ctrl+S checkout. Ctrl+R cancel order.\n{status}")
