"""Currency formatting and rich rendering helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from app.config import CURRENCY_SYMBOL
from app.models import ItemType, MenuItem, OrderSummary, Selection, item_of

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Format an amount for display, rounding half-up to cents."""
    rounded = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded < 0:
        return f"-{CURRENCY_SYMBOL}{-rounded:,.2f}"
    return f"{CURRENCY_SYMBOL}{rounded:,.2f}"


def badge_style(item_type: ItemType) -> str:
    """Return a consistent badge style for category tags."""
    if item_type is ItemType.ENTREE:
        return "bold #ffffff on #b23a48"
    if item_type is ItemType.SIDE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_menu_item(item: MenuItem, selected: bool = False) -> Text:
    """Render a menu row: name, price, and a dim description line."""
    text = Text()
    marker = "(•)" if selected else "( )"
    text.append(f"{marker} {item.name}", style="bold" if selected else "")
    text.append(f"  {format_currency(item.price)}")
    if item.description:
        text.append(f"\n      {item.description}", style="dim")
    return text


def format_selection(item_type: ItemType, selection: Selection) -> Text:
    """Render one summary row with a colored category tag."""
    text = Text()
    text.append(f" {item_type.label} ", style=badge_style(item_type))
    item = item_of(selection)
    if item is None:
        text.append(" (not selected)", style="dim")
    else:
        text.append(f" {item.name}  {format_currency(item.price)}")
    return text


def format_order_summary(summary: OrderSummary) -> Text:
    """Render a full order summary, as shown at checkout."""
    text = Text()
    rows = (
        (ItemType.ENTREE, summary.entree),
        (ItemType.SIDE, summary.side),
        (ItemType.ACCOMPANIMENT, summary.accompaniment),
    )
    for idx, (item_type, selection) in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append_text(format_selection(item_type, selection))
    text.append("\n\n")
    text.append(f"Subtotal: {format_currency(summary.subtotal)}\n")
    text.append(f"Tax: {format_currency(summary.tax)}\n")
    text.append(f"Total: {format_currency(summary.total)}", style="bold")
    return text
