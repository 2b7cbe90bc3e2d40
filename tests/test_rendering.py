from decimal import Decimal

from app.models import UNSELECTED, ItemType, MenuItem, OrderSummary, Selected
from app.rendering import format_currency, format_menu_item, format_order_summary, format_selection

SOUP = MenuItem("soup", "Butternut Squash Soup", "Roasted squash", Decimal("3.00"), ItemType.SIDE)


def test_format_currency_pads_cents():
    assert format_currency(Decimal("12.5")) == "$12.50"
    assert format_currency(Decimal("0")) == "$0.00"


def test_format_currency_rounds_half_up():
    assert format_currency(Decimal("0.125")) == "$0.13"
    assert format_currency(Decimal("0.1249")) == "$0.12"


def test_format_currency_groups_thousands():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"


def test_format_menu_item_marks_selection():
    plain = format_menu_item(SOUP).plain
    picked = format_menu_item(SOUP, selected=True).plain
    assert plain.startswith("( ) Butternut Squash Soup  $3.00")
    assert picked.startswith("(•) Butternut Squash Soup")
    assert "Roasted squash" in plain


def test_format_selection_unselected():
    assert "(not selected)" in format_selection(ItemType.ENTREE, UNSELECTED).plain
    assert "Butternut Squash Soup  $3.00" in format_selection(ItemType.SIDE, Selected(SOUP)).plain


def test_format_order_summary():
    summary = OrderSummary(
        entree=UNSELECTED,
        side=Selected(SOUP),
        accompaniment=UNSELECTED,
        subtotal=Decimal("3.00"),
        tax=Decimal("0.24"),
        total=Decimal("3.24"),
    )
    plain = format_order_summary(summary).plain
    assert "Side" in plain
    assert "Subtotal: $3.00" in plain
    assert "Tax: $0.24" in plain
    assert plain.endswith("Total: $3.24")
