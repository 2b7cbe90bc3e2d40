import asyncio
from decimal import Decimal

from app.checkout_modal import CheckoutModal
from app.data import MENU_ITEMS
from app.lunch_tray_app import LunchTrayApp
from app.models import UNSELECTED, ItemType, Selected


def run(coro_factory):
    return asyncio.run(coro_factory())


def test_select_entree_and_side_updates_order():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.press("s", "down", "enter")
            await pilot.pause()

    run(scenario)

    assert app.order.entree.value == Selected(MENU_ITEMS["cauliflower"])
    assert app.order.side.value == Selected(MENU_ITEMS["soup"])
    assert app.order.subtotal_amount == Decimal("10.00")
    assert app.order.total.value == "$10.80"
    assert app.category is ItemType.SIDE


def test_cancel_order_resets_state():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("a", "down", "enter")
            await pilot.press("ctrl+r")
            await pilot.pause()

    run(scenario)

    assert app.order.accompaniment.value is UNSELECTED
    assert app.order.total_amount == 0
    assert app.system_status == "Order cancelled"


def test_checkout_empty_order_is_blocked():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("ctrl+s")
            await pilot.pause()
            assert not isinstance(app.screen, CheckoutModal)

    run(scenario)

    assert app.system_status == "Nothing to submit"


def test_checkout_submit_resets_order():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("down", "enter")
            await pilot.press("ctrl+s")
            await pilot.pause()
            assert isinstance(app.screen, CheckoutModal)
            await pilot.press("enter")
            await pilot.pause()

    run(scenario)

    assert app.order.summary().is_empty
    assert app.system_status == "Order submitted: $4.32"


def test_checkout_back_keeps_order():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("enter", "ctrl+s")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, CheckoutModal)

    run(scenario)

    assert app.order.entree.value == Selected(MENU_ITEMS["cauliflower"])


def test_mount_subscribes_once_per_value():
    app = LunchTrayApp()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.order.total.listener_count == 1
            assert app.order.entree.listener_count == 1

    run(scenario)
