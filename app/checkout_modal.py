"""Checkout confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from app.models import OrderSummary
from app.rendering import format_order_summary


class CheckoutModal(ModalScreen[bool]):
    """Show the order summary and ask whether to submit it."""

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-summary {
        color: white;
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

    def __init__(self, summary: OrderSummary) -> None:
        super().__init__()
        self.summary = summary

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Order Summary", id="checkout-title")
            yield Static(id="checkout-summary")
            yield Static("Enter submit. Esc/q/Ctrl+C back to menu.", id="checkout-help")

    def on_mount(self) -> None:
        self.query_one("#checkout-summary", Static).update(format_order_summary(self.summary))

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss(True)
            event.stop()
