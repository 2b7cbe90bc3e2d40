from decimal import Decimal
from pathlib import Path

import pytest

from app.models import ItemType, MenuItem
from app.order_state import OrderState


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "debug.log"
    monkeypatch.setenv("LUNCH_TRAY_DEBUG_LOG", str(path))
    return path


@pytest.fixture
def small_menu() -> dict[str, MenuItem]:
    return {
        "Pizza": MenuItem("Pizza", "Pizza", "Cheese pizza", Decimal("6.00"), ItemType.ENTREE),
        "Tacos": MenuItem("Tacos", "Tacos", "Two tacos", Decimal("4.25"), ItemType.ENTREE),
        "Salad": MenuItem("Salad", "Salad", "Green salad", Decimal("3.00"), ItemType.SIDE),
        "Fries": MenuItem("Fries", "Fries", "", Decimal("2.10"), ItemType.SIDE),
        "Roll": MenuItem("Roll", "Roll", "", Decimal("0.50"), ItemType.ACCOMPANIMENT),
    }


@pytest.fixture
def order(small_menu: dict[str, MenuItem]) -> OrderState:
    return OrderState(small_menu, tax_rate=Decimal("0.08"))
